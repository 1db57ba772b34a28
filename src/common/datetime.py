"""Datetime utilities."""

from __future__ import annotations

import logging
import math
from datetime import datetime, timedelta, timezone
from typing import Any

from dateutil.parser import parse as parse_date

logger = logging.getLogger(__name__)

# Timezone abbreviations for feed date parsing
TZINFOS = {
    "EST": timezone(timedelta(hours=-5)),
    "EDT": timezone(timedelta(hours=-4)),
    "CST": timezone(timedelta(hours=-6)),
    "CDT": timezone(timedelta(hours=-5)),
    "MST": timezone(timedelta(hours=-7)),
    "MDT": timezone(timedelta(hours=-6)),
    "PST": timezone(timedelta(hours=-8)),
    "PDT": timezone(timedelta(hours=-7)),
    "GMT": timezone.utc,
    "UTC": timezone.utc,
    "BST": timezone(timedelta(hours=1)),
    "CET": timezone(timedelta(hours=1)),
    "CEST": timezone(timedelta(hours=2)),
}


def now_ms() -> int:
    """Current UTC time in epoch milliseconds."""
    return int(datetime.now(timezone.utc).timestamp() * 1000)


def to_ms(dt: datetime) -> int:
    """Convert a datetime to epoch milliseconds, treating naive values as UTC."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return int(round(dt.timestamp() * 1000))


def from_ms(ms: int) -> datetime:
    """Convert epoch milliseconds to an aware UTC datetime."""
    return datetime.fromtimestamp(ms / 1000, tz=timezone.utc)


def parse_datetime(value: Any) -> datetime | None:
    """Parse an ISO or RFC-822 style date string.

    Datetimes pass through (naive ones become UTC). Returns None for anything
    that cannot be parsed.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value if value.tzinfo else value.replace(tzinfo=timezone.utc)
    if not isinstance(value, str) or not value.strip():
        return None

    text = value.strip()
    try:
        dt = datetime.fromisoformat(text.replace("Z", "+00:00"))
    except ValueError:
        try:
            dt = parse_date(text, tzinfos=TZINFOS)
        except (ValueError, OverflowError):
            return None

    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def resolve_published_ms(value: Any, default_ms: int | None = None) -> int:
    """Resolve a feed publish date to epoch milliseconds.

    Accepts datetimes, ISO/RFC-822 strings and positive epoch-millisecond
    numbers. Anything else falls back to ``default_ms`` (or now).
    """
    if isinstance(value, bool):
        value = None
    if isinstance(value, (int, float)):
        if (isinstance(value, int) or math.isfinite(value)) and value > 0:
            return int(round(value))
        value = None

    dt = parse_datetime(value)
    if dt is not None:
        try:
            return to_ms(dt)
        except (OverflowError, OSError, ValueError):
            logger.warning("Publish date out of range: %s", value)

    return default_ms if default_ms is not None else now_ms()


def yyyymmdd(ms: int | None) -> str | None:
    """UTC calendar day of an epoch-ms timestamp as ``YYYYMMDD``."""
    if ms is None:
        return None
    try:
        return from_ms(ms).strftime("%Y%m%d")
    except (OverflowError, OSError, ValueError):
        return None
