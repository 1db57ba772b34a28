"""Tests for run_pipeline.cli module."""

import json
from pathlib import Path
from unittest.mock import patch

import pytest

from common.config import get_config, reset_config
from run_pipeline.cli import main


@pytest.fixture(autouse=True)
def _reset_shared_config():
    reset_config()
    yield
    reset_config()


def write_items(path: Path) -> Path:
    items = [
        {
            "title": "Fire breaks out downtown",
            "link": "https://a.com/news/fire-breaks-out-downtown",
            "source": "A",
            "isoDate": "2024-01-01T12:00:00Z",
        },
        {
            "title": "Downtown fire reported",
            "link": "https://b.com/local/downtown-fire-reported",
            "source": "B",
            "isoDate": "2024-01-01T11:59:00Z",
        },
    ]
    path.write_text("".join(json.dumps(item) + "\n" for item in items))
    return path


class TestMain:
    def test_prints_and_saves_locally(self, tmp_path: Path, monkeypatch, capsys) -> None:
        monkeypatch.chdir(tmp_path)
        input_path = write_items(tmp_path / "items.jsonl")

        main([
            "--input", str(input_path),
            "--config", "test",
            "--now", "2024-01-01T13:00:00Z",
            "--print",
            "--load-local",
        ])

        out = capsys.readouterr().out
        assert "1. [2 sources" in out
        assert "Fire breaks out downtown" in out

        saved = sorted(p.name for p in (tmp_path / "output" / "test").iterdir())
        assert len(saved) == 2
        assert saved[0].startswith("canonical_records_")
        assert saved[1].startswith("trending_stories_")

        trending_file = next((tmp_path / "output" / "test").glob("trending_stories_*.jsonl"))
        story = json.loads(trending_file.read_text().splitlines()[0])
        assert story["distinct_source_count"] == 2
        assert story["representative"]["source"] == "A"
        assert "fire" in story["representative"]["story_keywords"]

    def test_no_trending_stories(self, tmp_path: Path, capsys) -> None:
        input_path = write_items(tmp_path / "items.jsonl")

        main(["--input", str(input_path), "--now", "2024-01-01T13:00:00Z", "--config", "prod", "--print"])

        assert "No trending stories." in capsys.readouterr().out

    @patch("run_pipeline.cli.upload_jsonl_records_to_s3")
    def test_uploads_to_s3(self, mock_upload, tmp_path: Path) -> None:
        input_path = write_items(tmp_path / "items.jsonl")

        main(["--input", str(input_path), "--config", "test", "--now", "2024-01-01T13:00:00Z", "--load-s3"])

        prefixes = [call.args[1] for call in mock_upload.call_args_list]
        assert prefixes == ["canonical_records", "trending_stories"]

    @patch("run_pipeline.cli.run_pipeline")
    def test_empty_input_skips_pipeline(self, mock_run, tmp_path: Path) -> None:
        empty = tmp_path / "empty.jsonl"
        empty.write_text("")

        main(["--input", str(empty), "--config", "test"])

        mock_run.assert_not_called()

    @patch("run_pipeline.cli.load_dotenv")
    def test_loads_env_and_shares_config(self, mock_load_dotenv, tmp_path: Path) -> None:
        input_path = write_items(tmp_path / "items.jsonl")

        main(["--input", str(input_path), "--config", "test", "--min-sources", "4"])

        mock_load_dotenv.assert_called_once_with()
        assert get_config().trending.min_sources == 4
