"""Data models for rank_trending pipeline stage."""

from dataclasses import dataclass, field
from typing import Optional

from canonicalize_records.models import CanonicalRecord


@dataclass(frozen=True)
class SupportingRecord:
    """Non-representative member of a trending story."""
    source: str
    title: str
    link: str
    published_at_ms: int


@dataclass(frozen=True)
class TrendingStory:
    """Story covered by enough distinct outlets, recently enough, to be shown as trending."""
    representative: CanonicalRecord
    distinct_source_count: int
    newest_ms: int
    supporting: list[SupportingRecord] = field(default_factory=list)
    category: Optional[str] = None
