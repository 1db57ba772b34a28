"""Collapse duplicate records before storage and before display."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Iterable, MutableMapping

from canonicalize_records.models import CanonicalRecord
from common.text import fold, normalize_title

logger = logging.getLogger(__name__)


def dedup_by_link_key(records: Iterable[CanonicalRecord]) -> list[CanonicalRecord]:
    """Keep the most recently published record per link key.

    Ties on publish time go to the record seen last. Output keeps the order in
    which each key first appeared.
    """
    by_key: dict[str, CanonicalRecord] = {}
    total = 0
    for record in records:
        total += 1
        previous = by_key.get(record.link_key)
        if previous is None or record.published_at_ms >= previous.published_at_ms:
            by_key[record.link_key] = record

    if total != len(by_key):
        logger.info("Link key dedup kept %d of %d records", len(by_key), total)
    return list(by_key.values())


def soft_dedup_key(record: CanonicalRecord) -> tuple[str, str]:
    """Display dedup key: source plus normalized title."""
    title = normalize_title(record.title) or fold(record.title)
    return (record.source or "").strip(), title


def soft_dedupe(records: Iterable[CanonicalRecord]) -> list[CanonicalRecord]:
    """Keep the newest record per (source, normalized title).

    Catches outlets that re-publish the same story under a new URL or with a
    retouched title.
    """
    by_key: dict[tuple[str, str], CanonicalRecord] = {}
    total = 0
    for record in records:
        total += 1
        key = soft_dedup_key(record)
        previous = by_key.get(key)
        if previous is None or record.published_at_ms > previous.published_at_ms:
            by_key[key] = record

    if total != len(by_key):
        logger.info("Soft dedup kept %d of %d records", len(by_key), total)
    return list(by_key.values())


def upsert_records(
    store: MutableMapping[str, CanonicalRecord],
    records: Iterable[CanonicalRecord],
) -> tuple[int, int]:
    """Upsert records into a link-key keyed store.

    The incoming record wins on every field except ``published_at_ms``, which
    never moves backwards.

    Returns:
        Tuple of (records inserted, records updated)
    """
    inserted = 0
    updated = 0
    for record in records:
        existing = store.get(record.link_key)
        if existing is None:
            store[record.link_key] = record
            inserted += 1
            continue

        if existing.published_at_ms > record.published_at_ms:
            record = replace(record, published_at_ms=existing.published_at_ms)
        store[record.link_key] = record
        updated += 1

    logger.info("Upserted %d records (%d inserted, %d updated)", inserted + updated, inserted, updated)
    return inserted, updated
