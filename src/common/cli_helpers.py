"""Common CLI helper utilities."""

from __future__ import annotations

import argparse
import logging
from datetime import datetime, timezone


def setup_logging(level: int = logging.INFO) -> None:
    """Configure standard logging format for CLI tools."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )


def parse_datetime_arg(value: str, field_name: str = "now") -> datetime:
    """Parse an ISO datetime string for argparse arguments.

    Args:
        value: Datetime string in ISO 8601 format. Naive values are taken as UTC.
        field_name: Name of the field for error messages.

    Returns:
        Parsed, timezone-aware datetime.

    Raises:
        argparse.ArgumentTypeError: If the value is not a valid datetime.
    """
    try:
        dt = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"{field_name} must be an ISO 8601 datetime") from exc
    return dt if dt.tzinfo else dt.replace(tzinfo=timezone.utc)


def positive_int(value: str) -> int:
    """argparse type for integers >= 1."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected an integer, got {value!r}") from exc
    if parsed < 1:
        raise argparse.ArgumentTypeError(f"expected an integer >= 1, got {parsed}")
    return parsed


def positive_float(value: str) -> float:
    """argparse type for floats > 0."""
    try:
        parsed = float(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected a number, got {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError(f"expected a number > 0, got {parsed}")
    return parsed
