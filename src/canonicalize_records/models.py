"""Data models for canonicalize_records pipeline stage."""

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(frozen=True)
class CanonicalRecord:
    """Raw record with its link key, keyword sets and resolved publish time."""
    title: str
    link: str
    source: str
    link_key: str
    published_at_ms: int
    published_at: Any = None
    summary: Optional[str] = None
    image: Optional[str] = None
    category: Optional[str] = None
    keywords: frozenset[str] = field(default_factory=frozenset)
    story_keywords: frozenset[str] = field(default_factory=frozenset)
    is_promo: bool = False
