"""Tests for canonicalize_records.canonicalize module."""

from canonicalize_records.canonicalize import canonicalize, canonicalize_all
from ingest_records.models import RawRecord

NOW_MS = 1704117600000  # 2024-01-01T14:00:00Z


def make_raw(**overrides) -> RawRecord:
    data = {
        "title": "Fire breaks out downtown",
        "link": "https://a.com/news/fire?utm_source=rss",
        "source": "A",
        "published_at": "2024-01-01T12:00:00Z",
    }
    data.update(overrides)
    return RawRecord(**data)


class TestCanonicalize:
    def test_builds_canonical_record(self) -> None:
        record = canonicalize(make_raw(summary="Crews respond"), NOW_MS)

        assert record.title == "Fire breaks out downtown"
        assert record.link == "https://a.com/news/fire?utm_source=rss"
        assert record.source == "A"
        assert record.link_key == "https://a.com/a/20240101-fire"
        assert record.published_at_ms == 1704110400000
        assert record.summary == "Crews respond"
        assert record.is_promo is False
        assert {"fire", "break", "downto"} <= record.story_keywords
        assert "fir" in record.keywords

    def test_unparseable_date_falls_back_to_now(self) -> None:
        record = canonicalize(make_raw(published_at="yesterday-ish"), NOW_MS)
        assert record.published_at_ms == NOW_MS
        assert record.link_key == "https://a.com/a/fire"

    def test_missing_date_falls_back_to_now(self) -> None:
        record = canonicalize(make_raw(published_at=None), NOW_MS)
        assert record.published_at_ms == NOW_MS

    def test_infinite_date_falls_back_to_now(self) -> None:
        record = canonicalize(make_raw(published_at=float("inf")), NOW_MS)
        assert record.published_at_ms == NOW_MS
        assert record.link_key == "https://a.com/a/fire"

    def test_epoch_ms_date(self) -> None:
        record = canonicalize(make_raw(published_at=1704110400000), NOW_MS)
        assert record.published_at_ms == 1704110400000

    def test_title_without_keywords(self) -> None:
        record = canonicalize(make_raw(title="The news"), NOW_MS)
        assert record.keywords == frozenset()
        assert record.story_keywords == frozenset()


class TestCanonicalizeAll:
    def test_skips_failing_records(self) -> None:
        records = canonicalize_all([make_raw(), object(), make_raw(source="B")], NOW_MS)
        assert [r.source for r in records] == ["A", "B"]

    def test_empty_batch(self) -> None:
        assert canonicalize_all([], NOW_MS) == []
