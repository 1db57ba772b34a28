"""Select, rank and format trending stories from story clusters."""

from __future__ import annotations

import logging
from typing import Iterable

from canonicalize_records.models import CanonicalRecord
from cluster_stories.models import StoryCluster
from rank_trending.models import SupportingRecord, TrendingStory

logger = logging.getLogger(__name__)

DEFAULT_MIN_SOURCES = 3
DEFAULT_HOT_CUTOFF_HOURS = 4
DEFAULT_MAX_STORIES = 10

HOUR_MS = 60 * 60 * 1000


def choose_representative(members: list[CanonicalRecord]) -> CanonicalRecord:
    """First member carrying an image, else the newest member."""
    for member in members:
        if member.image:
            return member
    return max(members, key=lambda member: member.published_at_ms)


def is_hot(
    cluster: StoryCluster,
    now_ms: int,
    hot_cutoff_hours: float = DEFAULT_HOT_CUTOFF_HOURS,
    inclusive: bool = True,
) -> bool:
    """Whether the cluster's newest member is inside the hot window.

    With ``inclusive`` a member published exactly at the cutoff still counts.
    """
    cutoff_ms = now_ms - int(hot_cutoff_hours * HOUR_MS)
    if inclusive:
        return cluster.newest_ms >= cutoff_ms
    return cluster.newest_ms > cutoff_ms


def to_trending_story(cluster: StoryCluster) -> TrendingStory:
    representative = choose_representative(cluster.members)
    supporting = [
        SupportingRecord(
            source=member.source,
            title=member.title,
            link=member.link,
            published_at_ms=member.published_at_ms,
        )
        for member in cluster.members
        if member is not representative
    ]
    return TrendingStory(
        representative=representative,
        distinct_source_count=cluster.distinct_source_count,
        newest_ms=cluster.newest_ms,
        supporting=supporting,
        category=representative.category,
    )


def select_trending(
    clusters: Iterable[StoryCluster],
    now_ms: int,
    min_sources: int = DEFAULT_MIN_SOURCES,
    hot_cutoff_hours: float = DEFAULT_HOT_CUTOFF_HOURS,
    max_stories: int = DEFAULT_MAX_STORIES,
    inclusive_cutoff: bool = True,
) -> list[TrendingStory]:
    """
    Filter, rank and format trending stories.

    Clusters need at least ``min_sources`` distinct outlets and a member inside
    the hot window. Survivors are ordered by distinct source count, then by
    newest member, and truncated to ``max_stories``.

    Args:
        clusters: Story clusters from cluster_records.
        now_ms: Reference time in epoch milliseconds.
        min_sources: Minimum distinct sources.
        hot_cutoff_hours: Maximum age of a cluster's newest member.
        max_stories: Maximum number of stories returned.
        inclusive_cutoff: Whether a member exactly at the cutoff is still hot.

    Returns:
        Ranked list of TrendingStory.
    """
    candidates = []
    too_few_sources = 0
    cooled = 0
    for cluster in clusters:
        if not cluster.members:
            continue
        if cluster.distinct_source_count < min_sources:
            too_few_sources += 1
            continue
        if not is_hot(cluster, now_ms, hot_cutoff_hours, inclusive_cutoff):
            cooled += 1
            continue
        candidates.append(cluster)

    candidates.sort(key=lambda c: (-c.distinct_source_count, -c.newest_ms))
    stories = [to_trending_story(cluster) for cluster in candidates[:max_stories]]

    logger.info(
        "Selected %d trending stories (%d below %d sources, %d older than %sh)",
        len(stories),
        too_few_sources,
        min_sources,
        cooled,
        hot_cutoff_hours,
    )
    return stories
