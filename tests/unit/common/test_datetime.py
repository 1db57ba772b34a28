"""Tests for common.datetime module."""

from datetime import datetime, timezone

from common.datetime import (
    from_ms,
    parse_datetime,
    resolve_published_ms,
    to_ms,
    yyyymmdd,
)

JAN_1_NOON_MS = 1704110400000  # 2024-01-01T12:00:00Z


class TestParseDatetime:
    def test_none_returns_none(self) -> None:
        assert parse_datetime(None) is None

    def test_datetime_passthrough(self) -> None:
        dt = datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)
        assert parse_datetime(dt) is dt

    def test_naive_datetime_becomes_utc(self) -> None:
        result = parse_datetime(datetime(2024, 1, 1, 12, 0, 0))
        assert result == datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)

    def test_iso_string_parsing(self) -> None:
        result = parse_datetime("2024-01-01T12:00:00+00:00")
        assert result == datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)

    def test_iso_string_with_z_suffix(self) -> None:
        result = parse_datetime("2024-01-01T12:00:00Z")
        assert result == datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)

    def test_rfc822_feed_date(self) -> None:
        result = parse_datetime("Mon, 01 Jan 2024 07:00:00 EST")
        assert result == datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)

    def test_garbage_returns_none(self) -> None:
        assert parse_datetime("not a date") is None
        assert parse_datetime("") is None


class TestResolvePublishedMs:
    def test_iso_string(self) -> None:
        assert resolve_published_ms("2024-01-01T12:00:00Z") == JAN_1_NOON_MS

    def test_epoch_ms_number(self) -> None:
        assert resolve_published_ms(JAN_1_NOON_MS) == JAN_1_NOON_MS

    def test_invalid_falls_back_to_default(self) -> None:
        assert resolve_published_ms("yesterday-ish", default_ms=42) == 42
        assert resolve_published_ms(None, default_ms=42) == 42
        assert resolve_published_ms(-5, default_ms=42) == 42
        assert resolve_published_ms(float("nan"), default_ms=42) == 42
        assert resolve_published_ms(True, default_ms=42) == 42

    def test_invalid_without_default_uses_now(self) -> None:
        before = to_ms(datetime.now(timezone.utc))
        result = resolve_published_ms("garbage")
        after = to_ms(datetime.now(timezone.utc))
        assert before <= result <= after


class TestConversions:
    def test_round_trip(self) -> None:
        assert to_ms(from_ms(JAN_1_NOON_MS)) == JAN_1_NOON_MS

    def test_yyyymmdd_is_utc_day(self) -> None:
        assert yyyymmdd(JAN_1_NOON_MS) == "20240101"

    def test_yyyymmdd_none(self) -> None:
        assert yyyymmdd(None) is None
