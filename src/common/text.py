"""Text normalization shared by keyword extraction, dedup and classification."""

from __future__ import annotations

import re
import unicodedata

MIN_TOKEN_LENGTH = 3

ENGLISH_STOP_WORDS = frozenset({
    "the", "and", "for", "are", "but", "not", "you", "all", "any", "can", "her", "was",
    "one", "our", "out", "has", "had", "him", "his", "how", "its", "may", "new", "now",
    "old", "see", "two", "who", "did", "get", "got", "let", "say", "she", "too", "use",
    "off", "per", "via", "yet", "than", "that", "this", "with", "from", "have", "been",
    "were", "they", "them", "their", "there", "these", "those", "what", "when", "where",
    "which", "while", "will", "would", "could", "should", "about", "after", "before",
    "into", "onto", "over", "under", "again", "also", "just", "more", "most", "some",
    "such", "only", "other", "then", "very", "your", "ours", "because", "between",
    "during", "without", "within", "against", "says", "said",
})

# Slovenian function words, written without diacritics since tokens are unaccented.
SLOVENIAN_STOP_WORDS = frozenset({
    "ali", "pri", "sta", "cez", "med", "pod", "nad", "pred", "brez", "ker", "kot", "kjer",
    "kako", "zakaj", "tudi", "samo", "bila", "bil", "bilo", "bili", "bile", "imel", "imela",
    "imeli", "imele", "smo", "ste", "jaz", "ona", "ono", "oni", "one", "moj", "tvoj",
    "njegov", "njen", "nas", "vas", "njihov", "tisti", "tista", "tisto", "ena", "eno",
    "dva", "tri", "ampak", "saj", "tist", "vse", "vec", "manj", "tem", "temvec", "zato",
    "namrec", "kljub", "sicer", "glede", "zaradi", "proti", "svoj", "svoja", "svoje",
    "lahko", "mora", "imajo", "gre", "pravi", "znano", "novo", "nova", "nov", "novi",
    "dejal", "meni", "trdi", "vsi", "vsak", "nek", "neka", "neko",
    # headline verbs
    "prisel", "odsel", "ostal", "postaja", "dobili", "izgubili", "nasli", "iskali", "cakajo",
    "pripravlja", "napoveduje", "opozarja", "sporocil", "potrdil", "zavrnil", "pokazal",
    "razlozil",
    # quantities and adjectives
    "velik", "veliki", "mali", "majhen", "dobra", "slaba", "hud", "huda", "visok", "nizek",
    "prvi", "drugi", "tretji", "star", "stara", "mlad", "mlada", "vecina", "manjsina",
    "stevilo", "polovica", "del", "glavni", "pomemben", "uspesen", "znan", "priljubljen",
})

LOW_SIGNAL_WORDS = frozenset({
    # generic places
    "slovenija", "sloveniji", "slovenije", "slovenski", "slovenska", "slovensko",
    "svet", "svetu", "evropa", "zda", "drzava", "mesto", "kraj", "obcina",
    # time words
    "today", "yesterday", "tomorrow", "tonight", "week", "weekend", "month", "year",
    "danes", "vceraj", "jutri", "nocoj", "zjutraj", "zvecer", "ponoci", "letos", "lani",
    "letosnji", "lanski", "teden", "vikend", "mesec", "kmalu", "leto", "leta", "let",
    "zdaj", "trenutno", "dnevni", "dnevn", "tedenski", "tedensk", "mesecni", "mesecn",
    "cas", "ura", "ure", "minut", "zacetek", "konec", "koncu", "zacetku", "sredini",
    "obdobje", "prihodnje", "preteklo",
    # media jargon and clickbait
    "photo", "photos", "video", "videos", "watch", "live", "update", "updates",
    "breaking", "exclusive", "news", "read", "foto", "clanek", "novica", "preberite",
    "poglejte", "razkrivamo", "razkriva", "preverite", "sok", "sokantno", "neverjetno",
    "noro", "ekskluzivno", "intervju", "zivo", "izjava", "komentar", "odziv", "sporocilo",
    "podrobnosti", "resnica", "ozadje", "zgodba", "drama", "tragedija", "skandal",
})

STOP_WORDS = ENGLISH_STOP_WORDS | SLOVENIAN_STOP_WORDS | LOW_SIGNAL_WORDS

# Institutions and big cities appear in most local headlines, so they are
# ignored when grouping stories but still searchable.
STORY_STOP_WORDS = STOP_WORDS | frozenset({
    "dan", "minuta", "sekunda", "stiri", "pet", "sest", "sedem", "osem", "devet", "deset",
    "velika", "malo", "dobro", "slabo", "ljubljana", "maribor", "vlada", "policija",
    "sodisce", "banka", "sola", "bolnisnica",
})

_NON_ALNUM = re.compile(r"[^a-z0-9]+")
_WHITESPACE = re.compile(r"\s+")


def unaccent(text: str) -> str:
    """Strip diacritics by decomposing and dropping combining marks."""
    decomposed = unicodedata.normalize("NFD", text)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def tokenize(text: str | None, stop_words: frozenset[str] = STOP_WORDS) -> list[str]:
    """Return the ordered keyword tokens of a title or snippet.

    Unaccents, lowercases, splits on any run of non ``[a-z0-9]`` characters and
    drops short tokens and stop words. Empty input yields an empty list.
    """
    if not text:
        return []
    cleaned = _NON_ALNUM.sub(" ", unaccent(text).lower())
    return [
        token
        for token in cleaned.split()
        if len(token) >= MIN_TOKEN_LENGTH and token not in stop_words
    ]


def normalize_title(title: str | None) -> str:
    """Tokenized title re-joined with single spaces, used as a soft dedup key."""
    return " ".join(tokenize(title))


def fold(text: str | None) -> str:
    """Unaccent, lowercase and collapse whitespace without dropping any words."""
    if not text:
        return ""
    return _WHITESPACE.sub(" ", unaccent(text).lower()).strip()
