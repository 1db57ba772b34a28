"""Read raw feed items from local or S3 JSONL files."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from common.aws import list_s3_jsonl_files, read_jsonl_from_s3
from common.local_io import read_jsonl_local

logger = logging.getLogger(__name__)


def read_local_items(paths: Iterable[str | Path]) -> list[dict]:
    """Load raw items from one or more local JSONL files."""
    items: list[dict] = []
    for path in paths:
        loaded = list(read_jsonl_local(path))
        logger.info("Loaded %d items from %s", len(loaded), path)
        items.extend(loaded)
    return items


def read_s3_items(bucket: str, prefix: str) -> list[dict]:
    """Load raw items from every JSONL file under an S3 prefix."""
    items: list[dict] = []
    keys = list_s3_jsonl_files(bucket, prefix)
    logger.info("Found %d JSONL files under s3://%s/%s", len(keys), bucket, prefix)
    for key in keys:
        items.extend(read_jsonl_from_s3(bucket, key))
    logger.info("Loaded %d items from S3", len(items))
    return items
