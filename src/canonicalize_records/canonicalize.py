"""Build canonical records from validated raw records."""

import logging
from typing import Iterable, Optional

from canonicalize_records.link_key import make_link_key
from canonicalize_records.models import CanonicalRecord
from common.datetime import now_ms as current_ms, resolve_published_ms
from extract_keywords.extract_keywords import extract_record_keywords, extract_story_keywords
from ingest_records.models import RawRecord

logger = logging.getLogger(__name__)


def canonicalize(raw: RawRecord, now_ms: Optional[int] = None) -> CanonicalRecord:
    """Attach link key, keyword sets and a concrete publish time to a raw record.

    An unparseable publish date resolves to ``now_ms``.
    """
    if now_ms is None:
        now_ms = current_ms()

    return CanonicalRecord(
        title=raw.title,
        link=raw.link,
        source=raw.source,
        link_key=make_link_key(raw.link, raw.published_at),
        published_at_ms=resolve_published_ms(raw.published_at, default_ms=now_ms),
        published_at=raw.published_at,
        summary=raw.summary,
        image=raw.image,
        category=raw.category,
        keywords=extract_record_keywords(raw.title, raw.summary),
        story_keywords=extract_story_keywords(raw.title, raw.summary),
    )


def canonicalize_all(
    raws: Iterable[RawRecord],
    now_ms: Optional[int] = None,
) -> list[CanonicalRecord]:
    """Canonicalize a batch. A record that fails is skipped, never the batch."""
    if now_ms is None:
        now_ms = current_ms()

    results = []
    for raw in raws:
        try:
            results.append(canonicalize(raw, now_ms))
        except Exception as e:
            logger.warning("Failed to canonicalize record %s: %s", getattr(raw, "link", None), e)
            continue

    logger.info("Canonicalized %d records", len(results))
    return results
