"""CLI for running the trending-story pipeline."""

from __future__ import annotations

import logging
import os
from typing import Sequence

from dotenv import load_dotenv

from common.aws import upload_jsonl_records_to_s3
from common.cli_helpers import setup_logging
from common.config import load_config, set_config
from common.datetime import from_ms, to_ms
from common.local_io import save_jsonl_records_local
from ingest_records.read import read_local_items, read_s3_items
from rank_trending.models import TrendingStory
from run_pipeline.helpers import apply_overrides, parse_run_pipeline_args
from run_pipeline.pipeline import run_pipeline

logger = logging.getLogger(__name__)


def _print_stories(stories: list[TrendingStory]) -> None:
    if not stories:
        print("No trending stories.")
        return

    for rank, story in enumerate(stories, start=1):
        rep = story.representative
        published = from_ms(story.newest_ms).isoformat()
        print(f"{rank}. [{story.distinct_source_count} sources, newest {published}] {rep.title}")
        print(f"   {rep.source}: {rep.link}")
        for member in story.supporting:
            print(f"   - {member.source}: {member.title}")
        print()


def main(argv: Sequence[str] | None = None) -> None:
    setup_logging()
    load_dotenv()
    args = parse_run_pipeline_args(argv)

    config = apply_overrides(load_config(args.config), args)
    set_config(config)

    items = read_local_items(args.input) if args.input else []
    if args.input_s3_prefix:
        items.extend(read_s3_items(os.environ["S3_BUCKET_NAME"], args.input_s3_prefix))

    if not items:
        logger.warning("No items to process")
        return

    now_ms = to_ms(args.now) if args.now else None
    result = run_pipeline(items, now_ms=now_ms)

    if args.print_stories:
        _print_stories(result.trending)

    if args.load_local:
        save_jsonl_records_local(
            result.records, config.output.canonical_prefix, config.output.output_dir
        )
        save_jsonl_records_local(
            result.trending, config.output.trending_prefix, config.output.output_dir
        )

    if args.load_s3:
        upload_jsonl_records_to_s3(result.records, config.output.canonical_prefix)
        upload_jsonl_records_to_s3(result.trending, config.output.trending_prefix)


if __name__ == "__main__":
    main()
