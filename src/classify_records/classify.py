"""Run the promo and topic classifiers over canonical records."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Callable, Iterable

from canonicalize_records.models import CanonicalRecord
from classify_records.promo import DEFAULT_THRESHOLD, is_promo
from classify_records.topics import UNCATEGORIZED, determine_category

logger = logging.getLogger(__name__)

PromoClassifier = Callable[[CanonicalRecord], Any]
TopicClassifier = Callable[[CanonicalRecord], Any]


def _default_promo(threshold: int) -> PromoClassifier:
    return lambda record: is_promo(record, threshold=threshold)


def _classify_promo(record: CanonicalRecord, promo: PromoClassifier) -> bool:
    try:
        return bool(promo(record))
    except Exception as e:
        logger.warning("Promo classifier failed for %s: %s", record.link_key, e)
        return False


def _classify_topic(record: CanonicalRecord, topic: TopicClassifier) -> str:
    if record.category:
        return record.category
    try:
        label = topic(record)
    except Exception as e:
        logger.warning("Topic classifier failed for %s: %s", record.link_key, e)
        return UNCATEGORIZED
    return label if isinstance(label, str) and label else UNCATEGORIZED


def apply_classifiers(
    records: Iterable[CanonicalRecord],
    promo: PromoClassifier | None = None,
    topic: TopicClassifier | None = determine_category,
    promo_threshold: int = DEFAULT_THRESHOLD,
) -> list[CanonicalRecord]:
    """Label every record with ``is_promo`` and ``category``.

    A classifier that raises or returns nothing leaves the record not promo
    and uncategorized. Upstream categories are kept. Pass ``topic=None`` to
    skip topic classification.
    """
    if promo is None:
        promo = _default_promo(promo_threshold)

    results = []
    promo_count = 0
    for record in records:
        flagged = _classify_promo(record, promo)
        category = _classify_topic(record, topic) if topic else (record.category or UNCATEGORIZED)
        promo_count += flagged
        results.append(replace(record, is_promo=flagged, category=category))

    logger.info("Classified %d records (%d promotional)", len(results), promo_count)
    return results


def exclude_promo(records: Iterable[CanonicalRecord]) -> list[CanonicalRecord]:
    """Drop records flagged as promotional."""
    return [record for record in records if not record.is_promo]
