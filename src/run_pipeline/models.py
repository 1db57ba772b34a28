"""Data models for run_pipeline."""

from dataclasses import dataclass, field

from canonicalize_records.models import CanonicalRecord
from cluster_stories.models import StoryCluster
from rank_trending.models import TrendingStory


@dataclass
class PipelineResult:
    """Output of one pipeline run."""
    records: list[CanonicalRecord] = field(default_factory=list)
    clusters: list[StoryCluster] = field(default_factory=list)
    trending: list[TrendingStory] = field(default_factory=list)
