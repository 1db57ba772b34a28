"""Data models for cluster_stories pipeline stage."""

from dataclasses import dataclass, field

from canonicalize_records.models import CanonicalRecord


@dataclass
class StoryCluster:
    """Records from one or more outlets believed to cover the same story.

    ``keywords`` is the union of every member's story keywords and only grows.
    ``members`` keeps attachment order, which is newest first.
    """
    keywords: set[str] = field(default_factory=set)
    members: list[CanonicalRecord] = field(default_factory=list)

    def add(self, record: CanonicalRecord) -> None:
        self.members.append(record)
        self.keywords |= record.story_keywords

    @property
    def sources(self) -> set[str]:
        return {member.source for member in self.members}

    @property
    def distinct_source_count(self) -> int:
        return len(self.sources)

    @property
    def newest_ms(self) -> int:
        return max((member.published_at_ms for member in self.members), default=0)
