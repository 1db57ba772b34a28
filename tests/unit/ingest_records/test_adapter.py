"""Tests for ingest_records.adapter module."""

from dataclasses import dataclass

from ingest_records.adapter import clean_text, to_raw_record, to_raw_records


class TestCleanText:
    def test_strips_html_tags(self) -> None:
        assert clean_text("<h1>Title</h1> <p>Body</p>") == "Title Body"

    def test_removes_escaped_quotes(self) -> None:
        assert clean_text('He said \\"hello\\"') == 'He said "hello"'

    def test_collapses_whitespace(self) -> None:
        assert clean_text("multiple   spaces   here") == "multiple spaces here"

    def test_none_and_non_string(self) -> None:
        assert clean_text(None) is None
        assert clean_text(42) is None

    def test_whitespace_only_returns_none(self) -> None:
        assert clean_text("   \n\t ") is None


class TestToRawRecord:
    def test_maps_feed_dict(self) -> None:
        item = {
            "title": " <b>Fire</b> downtown ",
            "link": " https://example.com/a/1 ",
            "source": "A",
            "isoDate": "2024-01-01T12:00:00Z",
            "contentSnippet": "<p>Crews respond</p>",
            "image": "https://example.com/img.jpg",
        }
        record = to_raw_record(item)

        assert record.title == "Fire downtown"
        assert record.link == "https://example.com/a/1"
        assert record.source == "A"
        assert record.published_at == "2024-01-01T12:00:00Z"
        assert record.summary == "Crews respond"
        assert record.image == "https://example.com/img.jpg"
        assert record.category is None

    def test_accepts_url_and_objects(self) -> None:
        @dataclass
        class Item:
            title: str
            url: str
            source: str
            summary: str

        record = to_raw_record(Item("Title", "https://x.com/p", "B", "S"))
        assert record.link == "https://x.com/p"
        assert record.summary == "S"
        assert record.published_at is None

    def test_missing_title_returns_none(self) -> None:
        assert to_raw_record({"link": "https://x.com/p", "source": "A"}) is None

    def test_missing_link_returns_none(self) -> None:
        assert to_raw_record({"title": "T", "source": "A"}) is None

    def test_missing_source_returns_none(self) -> None:
        assert to_raw_record({"title": "T", "link": "https://x.com/p", "source": "  "}) is None

    def test_none_returns_none(self) -> None:
        assert to_raw_record(None) is None


class TestToRawRecords:
    def test_drops_invalid_items(self) -> None:
        items = [
            {"title": "Good", "link": "https://x.com/1", "source": "A"},
            {"title": "", "link": "https://x.com/2", "source": "A"},
            None,
        ]
        records = to_raw_records(items)
        assert [r.title for r in records] == ["Good"]

    def test_empty_input_returns_empty(self) -> None:
        assert to_raw_records([]) == []
        assert to_raw_records(None) == []
