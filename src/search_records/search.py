"""Keyword and free-text search over canonical records."""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from canonicalize_records.models import CanonicalRecord
from common.text import fold
from dedup_records.dedup import soft_dedupe
from extract_keywords.extract_keywords import extract_keywords

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 24
MAX_LIMIT = 300


def _matches_tag(record: CanonicalRecord, stems: frozenset[str], folded_tag: str) -> bool:
    if stems and stems <= record.keywords:
        return True
    return folded_tag in fold(record.title)


def _matches_query(record: CanonicalRecord, terms: list[str]) -> bool:
    haystack = f"{fold(record.title)}\n{fold(record.summary)}"
    return all(term in haystack for term in terms)


def search_records(
    records: Iterable[CanonicalRecord],
    query: Optional[str] = None,
    tag: Optional[str] = None,
    source: Optional[str] = None,
    category: Optional[str] = None,
    limit: int = DEFAULT_LIMIT,
) -> list[CanonicalRecord]:
    """
    Search canonical records.

    A tag matches when all of its search stems are among the record's keywords
    or the tag text appears in the title. Every free-text query term longer than
    one character must appear in the title or summary. Results are soft deduped,
    newest first and capped at ``limit`` (clamped to 1..300).
    """
    limit = min(max(limit, 1), MAX_LIMIT)
    results = [record for record in records if not record.is_promo]

    if source:
        sources = {s.strip() for s in source.split(",") if s.strip()}
        results = [record for record in results if record.source in sources]

    if category:
        results = [record for record in results if (record.category or "other") == category]

    if tag and tag.strip():
        raw_tag = tag.strip().lstrip("#")
        stems = extract_keywords(raw_tag)
        folded_tag = fold(raw_tag)
        results = [record for record in results if _matches_tag(record, stems, folded_tag)]

    if query and query.strip():
        terms = [fold(term) for term in query.split() if len(term) > 1]
        if not terms:
            terms = [fold(query)]
        results = [record for record in results if _matches_query(record, terms)]

    results = soft_dedupe(results)
    results.sort(key=lambda record: record.published_at_ms, reverse=True)
    logger.info("Search matched %d records (tag=%s, query=%s)", len(results), tag, query)
    return results[:limit]
