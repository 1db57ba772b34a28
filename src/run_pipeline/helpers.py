"""Helper functions for run_pipeline CLI."""

from __future__ import annotations

import argparse
from dataclasses import replace
from typing import Sequence

from common.cli_helpers import parse_datetime_arg, positive_float, positive_int
from common.config import PipelineConfig


def parse_run_pipeline_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments for run_pipeline."""

    parser = argparse.ArgumentParser(description="Canonicalize, dedup and cluster news records.")

    # Input options
    parser.add_argument(
        "--input",
        action="append",
        default=[],
        help="Local JSONL file of raw feed items (repeatable)",
    )
    parser.add_argument(
        "--input-s3-prefix",
        default=None,
        help="Read every JSONL file under this prefix in S3_BUCKET_NAME",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Config name under configs/ or a YAML path (default: $CONFIG_ENV or prod)",
    )
    parser.add_argument(
        "--now",
        type=lambda v: parse_datetime_arg(v, "now"),
        default=None,
        help="Reference time, ISO 8601 (default: current UTC time)",
    )

    # Clustering and ranking overrides
    parser.add_argument("--min-sources", type=positive_int, default=None)
    parser.add_argument("--hot-cutoff-hours", type=positive_float, default=None)
    parser.add_argument("--max-stories", type=positive_int, default=None)
    parser.add_argument("--lookback-hours", type=positive_float, default=None)

    # Output options
    parser.add_argument("--load-s3", action="store_true", help="Upload results to S3")
    parser.add_argument("--load-local", action="store_true", help="Save results to local files")
    parser.add_argument("--print", action="store_true", dest="print_stories", help="Print trending stories")

    args = parser.parse_args(argv)
    if not args.input and not args.input_s3_prefix:
        parser.error("one of --input or --input-s3-prefix is required")
    return args


def apply_overrides(config: PipelineConfig, args: argparse.Namespace) -> PipelineConfig:
    """Return a copy of config with CLI overrides applied."""
    trending = config.trending
    if args.min_sources is not None:
        trending = replace(trending, min_sources=args.min_sources)
    if args.hot_cutoff_hours is not None:
        trending = replace(trending, hot_cutoff_hours=args.hot_cutoff_hours)
    if args.max_stories is not None:
        trending = replace(trending, max_stories=args.max_stories)

    cluster = config.cluster
    if args.lookback_hours is not None:
        cluster = replace(cluster, lookback_hours=args.lookback_hours)

    return replace(config, trending=trending, cluster=cluster)
