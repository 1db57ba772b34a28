"""Serialization utilities."""

from dataclasses import asdict
from datetime import datetime


def _serialize_value(value):
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, (set, frozenset)):
        return sorted(value)
    if isinstance(value, dict):
        return {k: _serialize_value(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_serialize_value(v) for v in value]
    return value


def serialize_dataclass(obj) -> dict:
    """Serialize a dataclass to a JSON-ready dict.

    Datetimes become ISO strings and keyword sets become sorted lists.
    """
    return {key: _serialize_value(value) for key, value in asdict(obj).items()}
