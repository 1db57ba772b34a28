"""Data models for classify_records pipeline stage."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class PromoScore:
    """Promotional-content score with the rules that fired."""
    score: int
    matches: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class Category:
    """Topic category matched by keyword; lower priority is checked first."""
    id: str
    label: str
    priority: int
    keywords: tuple[str, ...] = ()
