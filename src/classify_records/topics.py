"""Keyword-based topic classifier."""

from typing import Any

from classify_records.models import Category
from common.text import fold
from common.utils import get_value

UNCATEGORIZED = "other"

CATEGORIES = (
    Category(
        id="crime",
        label="Crime",
        priority=1,
        keywords=(
            "/kronika/", "/crna-kronika/", "/crime/",
            "policija", "gasilci", "nesreca", "umor", "sodisce", "kriminal", "sojenje",
            "aretacija", "trcenje", "police", "firefighters", "murder", "robbery",
            "arrested", "shooting", "stabbing", "court",
        ),
    ),
    Category(
        id="motoring",
        label="Motoring",
        priority=2,
        keywords=(
            "/auto/", "/avto/", "/motoring/", "/cars/",
            "avtomobil", "vozila", "promet", "volkswagen", "tesla", "dizel", "bencin",
            "hibrid", "formula-1", "formula 1", "verstappen", "hamilton", "vinjeta",
            "electric vehicle", "motorway", "traffic",
        ),
    ),
    Category(
        id="sport",
        label="Sport",
        priority=3,
        keywords=(
            "/sport/", "/sports/",
            "nogomet", "kosarka", "atletika", "kolesarstvo", "tenis", "odbojka", "rokomet",
            "doncic", "pogacar", "roglic", "prvenstvo", "reprezentanca", "tekma",
            "football", "soccer", "basketball", "tennis", "olympic", "championship",
            "league", "uefa", "fifa",
        ),
    ),
    Category(
        id="technology",
        label="Technology",
        priority=4,
        keywords=(
            "/znanost/", "/tehnologija/", "/tech/", "/technology/", "/science/",
            "vesolje", "racunalnistvo", "umetna-inteligenca", "umetna inteligenca",
            "artificial intelligence", "apple", "samsung", "google", "microsoft", "nvidia",
            "chatgpt", "openai", "nasa", "spacex", "astronom", "internet", "kibernet",
            "cyber", "smartphone", "software",
        ),
    ),
    Category(
        id="health",
        label="Health",
        priority=5,
        keywords=(
            "/zdravje/", "/health/",
            "medicina", "zdravnik", "bolnis", "bolezen", "virus", "covid", "gripa",
            "hospital", "doctor", "disease", "vaccine", "cancer", "diet",
        ),
    ),
    Category(
        id="business",
        label="Business",
        priority=6,
        keywords=(
            "/gospodarstvo/", "/posel/", "/finance/", "/borza/", "/business/", "/markets/",
            "kripto", "delnice", "inflacija", "bitcoin", "podjetje", "direktor", "stecaj",
            "energetika", "podrazitev", "stocks", "shares", "inflation", "economy",
            "bankruptcy", "earnings", "interest rate",
        ),
    ),
    Category(
        id="lifestyle",
        label="Lifestyle",
        priority=7,
        keywords=(
            "/magazin/", "/lifestyle/", "/zabava/", "/scena/", "/zvezde/", "/kulinarika/",
            "/entertainment/", "/celebrity/",
            "horoskop", "recept", "potovanje", "poroka", "locitev", "celebrity", "recipe",
            "horoscope", "fashion", "travel",
        ),
    ),
    Category(
        id="culture",
        label="Culture",
        priority=8,
        keywords=(
            "/kultura/", "/culture/", "/arts/",
            "film", "glasba", "razstav", "gledalisce", "umetnost", "festival", "literatura",
            "premiera", "muzej", "balet", "museum", "exhibition", "theatre",
            "novel", "concert",
        ),
    ),
    Category(
        id="world",
        label="World",
        priority=9,
        keywords=(
            "/svet/", "/tujina/", "/world/", "/international/",
            "ukrajina", "rusija", "vojna", "ukraine", "russia", "gaza", "izrael",
            "israel", "evropska-unija", "european union", "putin", "zelensk", "macron",
        ),
    ),
    Category(
        id="local",
        label="Local",
        priority=10,
        keywords=(
            "/slovenija/", "/lokalno/", "/obcine/", "/volitve/", "/local/", "/uk-news/",
            "/us-news/", "vlada", "poslanci", "drzavni-zbor", "zupan", "obcina",
            "ljubljana", "maribor", "celje", "koper", "kranj", "council", "mayor",
            "parliament", "election", "vreme", "weather", "poplave", "flood",
        ),
    ),
)


def determine_category(record: Any) -> str:
    """Return the first category, by priority, with a keyword in the record text."""
    text = fold(
        " ".join(
            part
            for part in (
                get_value(record, "title"),
                get_value(record, "link"),
                get_value(record, "summary"),
            )
            if part
        )
    )
    if not text:
        return UNCATEGORIZED

    for category in sorted(CATEGORIES, key=lambda c: c.priority):
        for keyword in category.keywords:
            if keyword in text:
                return category.id

    return UNCATEGORIZED
