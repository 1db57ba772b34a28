"""Data models for ingest_records pipeline stage."""

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class RawRecord:
    """News record as received from a feed or scrape, validated at the ingestion boundary."""
    title: str
    link: str
    source: str
    published_at: Any
    summary: Optional[str] = None
    image: Optional[str] = None
    category: Optional[str] = None
