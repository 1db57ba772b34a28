"""Greedy online clustering of records into cross-source stories."""

from __future__ import annotations

import logging
from typing import Iterable

from canonicalize_records.models import CanonicalRecord
from cluster_stories.models import StoryCluster

logger = logging.getLogger(__name__)

DEFAULT_MIN_OVERLAP = 2
DEFAULT_JACCARD_THRESHOLD = 0.20
DEFAULT_LOOKBACK_HOURS = 12

HOUR_MS = 60 * 60 * 1000


def jaccard_similarity(a: set[str] | frozenset[str], b: set[str] | frozenset[str]) -> float:
    """|A ∩ B| / |A ∪ B|, or 0.0 when either set is empty."""
    if not a or not b:
        return 0.0
    return len(a & b) / len(a | b)


def build_candidate_pool(
    records: Iterable[CanonicalRecord],
    now_ms: int,
    lookback_hours: float = DEFAULT_LOOKBACK_HOURS,
) -> list[CanonicalRecord]:
    """Records with story keywords published inside the lookback window, newest first.

    A record published exactly at the start of the window is included.
    """
    since_ms = now_ms - int(lookback_hours * HOUR_MS)
    pool = [
        record
        for record in records
        if record.story_keywords and record.published_at_ms >= since_ms
    ]
    pool.sort(key=lambda record: record.published_at_ms, reverse=True)
    logger.info("Candidate pool: %d records in the last %s hours", len(pool), lookback_hours)
    return pool


def _best_cluster(
    record: CanonicalRecord,
    clusters: list[StoryCluster],
    min_overlap: int,
    jaccard_threshold: float,
) -> tuple[StoryCluster | None, float]:
    best = None
    best_score = 0.0
    for cluster in clusters:
        overlap = len(record.story_keywords & cluster.keywords)
        if overlap < min_overlap:
            continue
        score = jaccard_similarity(record.story_keywords, cluster.keywords)
        if score < jaccard_threshold:
            continue
        # Strictly greater: on a tie the older cluster keeps the record
        if best is None or score > best_score:
            best = cluster
            best_score = score
    return best, best_score


def cluster_records(
    records: Iterable[CanonicalRecord],
    min_overlap: int = DEFAULT_MIN_OVERLAP,
    jaccard_threshold: float = DEFAULT_JACCARD_THRESHOLD,
) -> list[StoryCluster]:
    """
    Group records into story clusters in a single greedy pass.

    Each record, in the order given (callers pass newest first), joins the
    existing cluster with the highest Jaccard score among those sharing at
    least ``min_overlap`` keywords and scoring at least ``jaccard_threshold``;
    otherwise it starts a new cluster. A cluster's keyword set is the union of
    its members' sets, so the result depends on processing order.

    Args:
        records: Canonical records, newest first.
        min_overlap: Minimum shared keywords with a cluster.
        jaccard_threshold: Minimum Jaccard similarity with a cluster.

    Returns:
        Clusters in creation order. Records without story keywords are skipped.
    """
    clusters: list[StoryCluster] = []
    skipped = 0

    for record in records:
        if not record.story_keywords:
            skipped += 1
            continue

        cluster, score = _best_cluster(record, clusters, min_overlap, jaccard_threshold)
        if cluster is None:
            cluster = StoryCluster()
            clusters.append(cluster)
            logger.debug("New cluster #%d for '%s'", len(clusters), record.title)
        else:
            logger.debug("Attached '%s' (jaccard=%.3f)", record.title, score)
        cluster.add(record)

    if skipped:
        logger.warning("Skipped %d records without story keywords", skipped)
    multi = sum(1 for cluster in clusters if len(cluster.members) > 1)
    logger.info("Built %d clusters (%d with more than one record)", len(clusters), multi)
    return clusters
