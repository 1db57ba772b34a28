"""Local heuristic filter for sponsored and promotional records."""

import re
from typing import Any

from classify_records.models import PromoScore
from common.text import fold
from common.utils import get_value

DEFAULT_THRESHOLD = 3

KEYWORDS = (
    # Slovenian
    "oglasno sporocilo",
    "promocijsko sporocilo",
    "placana objava",
    "sponzorirano",
    "oglasni prispevek",
    "komercialno sporocilo",
    "oglasna vsebina",
    "v sodelovanju z",
    "partner vsebina",
    "vsebino omogoca",
    "sporocilo za javnost",
    "pr prispevek",
    "pr clanek",
    # English
    "sponsored",
    "sponsored content",
    "branded content",
    "advertorial",
    "paid post",
    "promotion",
    "partner content",
    "press release",
)

STRONG_TOKENS = ("promo", "oglas", "advertorial", "ad:", "[ad]", "pr:", "[pr]", "sponzorirano")

WEAK = (
    "akcija", "popust", "kupon", "super cena", "kupite", "narocite", "prihrani", "ponudba",
    "discount", "coupon", "deal of the day",
)

URL_PATTERNS = (
    re.compile(r"/oglas", re.IGNORECASE),
    re.compile(r"/promo", re.IGNORECASE),
    re.compile(r"/sponzor", re.IGNORECASE),
    re.compile(r"/sponsored", re.IGNORECASE),
    re.compile(r"/advert", re.IGNORECASE),
    re.compile(r"[?&]utm_campaign=promo", re.IGNORECASE),
)

CATEGORY_MARKERS = ("sponzor", "promo", "oglas", "sponsored")

UPPERCASE_SHOUT_RATIO = 0.6
SHORT_TITLE_MAX = 5

WEIGHTS = {
    "keyword": 2,
    "strong": 3,
    "url": 2,
    "weak": 1,
    "shout": 1,
    "short": 1,
    "category": 2,
}


def _uppercase_ratio(text: str) -> float:
    letters = [ch for ch in text if ch.isalpha()]
    if not letters:
        return 0.0
    return sum(1 for ch in letters if ch.isupper()) / len(letters)


def score_promo(record: Any) -> PromoScore:
    """Score how likely a record is sponsored content."""
    raw_title = get_value(record, "title") or ""
    title = fold(raw_title)
    summary = fold(get_value(record, "summary"))
    link = get_value(record, "link") or ""
    category = fold(get_value(record, "category"))
    haystack = f"{title}\n{summary}"

    score = 0
    matches = []

    for keyword in KEYWORDS:
        if keyword in haystack:
            score += WEIGHTS["keyword"]
            matches.append(f"kw:{keyword}")

    for token in STRONG_TOKENS:
        if token in title or token in summary:
            score += WEIGHTS["strong"]
            matches.append(f"strong:{token}")

    for word in WEAK:
        if word in haystack:
            score += WEIGHTS["weak"]
            matches.append(f"weak:{word}")

    for pattern in URL_PATTERNS:
        if pattern.search(link):
            score += WEIGHTS["url"]
            matches.append(f"url:{pattern.pattern}")

    if category and any(marker in category for marker in CATEGORY_MARKERS):
        score += WEIGHTS["category"]
        matches.append("category:sponsored")

    if _uppercase_ratio(raw_title) > UPPERCASE_SHOUT_RATIO:
        score += WEIGHTS["shout"]
        matches.append("shout:title_uppercase")

    if len(title.split()) <= SHORT_TITLE_MAX and any(token in title for token in STRONG_TOKENS):
        score += WEIGHTS["short"]
        matches.append("short+strong")

    return PromoScore(score=score, matches=matches)


def is_promo(record: Any, threshold: int = DEFAULT_THRESHOLD) -> bool:
    """True when the promo score reaches the threshold."""
    return score_promo(record).score >= threshold
