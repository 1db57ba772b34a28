"""Tests for ingest_records.read module."""

from pathlib import Path
from unittest.mock import patch

from ingest_records.read import read_local_items, read_s3_items


class TestReadLocalItems:
    def test_concatenates_files(self, tmp_path: Path) -> None:
        a = tmp_path / "a.jsonl"
        b = tmp_path / "b.jsonl"
        a.write_text('{"title": "A"}\n')
        b.write_text('{"title": "B"}\n{"title": "C"}\n')
        assert [item["title"] for item in read_local_items([a, b])] == ["A", "B", "C"]


class TestReadS3Items:
    @patch("ingest_records.read.read_jsonl_from_s3")
    @patch("ingest_records.read.list_s3_jsonl_files")
    def test_reads_every_listed_file(self, mock_list, mock_read) -> None:
        mock_list.return_value = ["p/1.jsonl", "p/2.jsonl"]
        mock_read.side_effect = [iter([{"title": "A"}]), iter([{"title": "B"}])]

        items = read_s3_items("bucket", "p/")

        assert items == [{"title": "A"}, {"title": "B"}]
        mock_list.assert_called_once_with("bucket", "p/")
