"""Run the canonicalize, dedup, cluster and rank stages over one batch."""

from __future__ import annotations

import logging
from typing import Any, Iterable, Optional

from canonicalize_records.canonicalize import canonicalize_all
from classify_records.classify import PromoClassifier, TopicClassifier, apply_classifiers, exclude_promo
from classify_records.topics import determine_category
from cluster_stories.cluster import build_candidate_pool, cluster_records
from common.config import PipelineConfig, get_config
from common.datetime import now_ms as current_ms
from dedup_records.dedup import dedup_by_link_key, soft_dedupe
from ingest_records.adapter import to_raw_records
from rank_trending.rank import select_trending
from run_pipeline.models import PipelineResult

logger = logging.getLogger(__name__)


def _never_promo(record) -> bool:
    return False


def run_pipeline(
    items: Iterable[Any],
    config: Optional[PipelineConfig] = None,
    now_ms: Optional[int] = None,
    promo: Optional[PromoClassifier] = None,
    topic: Optional[TopicClassifier] = determine_category,
) -> PipelineResult:
    """
    Turn raw feed items into canonical records and ranked trending stories.

    Malformed items are dropped by the stage they break; the run itself
    always returns a result.

    Args:
        items: Raw feed items (dicts or objects).
        config: Pipeline configuration (the shared config from get_config when None).
        now_ms: Reference time in epoch milliseconds (defaults to now).
        promo: Promotional-content classifier (defaults to the local heuristic).
        topic: Topic classifier, or None to leave records uncategorized.

    Returns:
        PipelineResult with link-key deduplicated records for upsert, the
        story clusters and the trending stories.

    Raises:
        TypeError: If items is None.
    """
    if items is None:
        raise TypeError("run_pipeline requires an iterable of items, got None")
    if config is None:
        config = get_config()
    if now_ms is None:
        now_ms = current_ms()

    raws = to_raw_records(list(items))
    if not raws:
        logger.warning("No valid records to process")
        return PipelineResult()

    canonical = canonicalize_all(raws, now_ms)
    records = dedup_by_link_key(canonical)
    if promo is None and not config.promo.enabled:
        promo = _never_promo
    records = apply_classifiers(
        records,
        promo=promo,
        topic=topic,
        promo_threshold=config.promo.threshold,
    )

    visible = soft_dedupe(exclude_promo(records))
    pool = build_candidate_pool(visible, now_ms, config.cluster.lookback_hours)
    clusters = cluster_records(
        pool,
        min_overlap=config.cluster.min_overlap,
        jaccard_threshold=config.cluster.jaccard_threshold,
    )
    trending = select_trending(
        clusters,
        now_ms,
        min_sources=config.trending.min_sources,
        hot_cutoff_hours=config.trending.hot_cutoff_hours,
        max_stories=config.trending.max_stories,
        inclusive_cutoff=config.trending.inclusive_cutoff,
    )

    logger.info(
        "Pipeline produced %d records, %d clusters, %d trending stories",
        len(records),
        len(clusters),
        len(trending),
    )
    return PipelineResult(records=records, clusters=clusters, trending=trending)
