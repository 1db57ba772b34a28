"""Tests for common.utils module."""

from common.utils import first_value, get_value


class TestGetValue:
    def test_dict_access(self) -> None:
        assert get_value({"name": "test"}, "name") == "test"

    def test_object_attribute_access(self) -> None:
        class Obj:
            name = "test"

        assert get_value(Obj(), "name") == "test"

    def test_dict_missing_key_returns_none(self) -> None:
        assert get_value({}, "missing") is None

    def test_object_missing_attr_returns_none(self) -> None:
        class Obj:
            pass

        assert get_value(Obj(), "missing") is None


class TestFirstValue:
    def test_returns_first_present_key(self) -> None:
        assert first_value({"url": "b"}, "link", "url") == "b"

    def test_skips_empty_strings(self) -> None:
        assert first_value({"link": "", "url": "b"}, "link", "url") == "b"

    def test_all_missing_returns_none(self) -> None:
        assert first_value({}, "link", "url") is None
