"""Validating adapter from loose feed items to RawRecord."""

import logging
import re
from typing import Any, Iterable, Optional

from common.utils import first_value
from ingest_records.models import RawRecord

logger = logging.getLogger(__name__)

LINK_KEYS = ("link", "url")
SUMMARY_KEYS = ("summary", "contentSnippet", "contentsnippet", "description", "content")
DATE_KEYS = ("isoDate", "published_at", "publishedAt", "pubDate", "publishedat", "published")
IMAGE_KEYS = ("image", "imageurl", "image_url")


def clean_text(text: Any) -> Optional[str]:
    """Clean text by stripping HTML, fixing escapes, and collapsing whitespace."""
    if not text or not isinstance(text, str):
        return None
    # Strip HTML tags (keep text content)
    text = re.sub(r"<[^>]+>", " ", text)
    # Remove escaped quotes
    text = text.replace('\\"', '"')
    # Collapse whitespace
    text = re.sub(r"\s+", " ", text).strip()
    return text if text else None


def _clean_str(value: Any) -> Optional[str]:
    if not isinstance(value, str):
        return None
    value = value.strip()
    return value or None


def to_raw_record(item: Any) -> Optional[RawRecord]:
    """Convert a feed/scrape item (dict or object) to a RawRecord.

    Returns None when the title, link or source is missing. The publish date is
    passed through untouched and resolved later during canonicalization.
    """
    if item is None:
        return None

    title = clean_text(first_value(item, "title"))
    link = _clean_str(first_value(item, *LINK_KEYS))
    source = _clean_str(first_value(item, "source"))

    if not title or not link or not source:
        logger.warning(
            "Skipping record with missing title, link or source: source=%s, link=%s",
            source,
            link,
        )
        return None

    return RawRecord(
        title=title,
        link=link,
        source=source,
        published_at=first_value(item, *DATE_KEYS),
        summary=clean_text(first_value(item, *SUMMARY_KEYS)),
        image=_clean_str(first_value(item, *IMAGE_KEYS)),
        category=_clean_str(first_value(item, "category")),
    )


def to_raw_records(items: Optional[Iterable[Any]]) -> list[RawRecord]:
    """Convert many items, dropping the ones that fail validation."""
    if not items:
        logger.warning("No records to ingest")
        return []

    records = []
    for item in items:
        record = to_raw_record(item)
        if record is not None:
            records.append(record)

    logger.info("Ingested %d valid records", len(records))
    return records
