"""Tests for lenient date parsing."""

from __future__ import annotations

import pytest

from bookresolve.core.dates import parse_japanese_date, parse_partial_date


class TestParsePartialDate:
    """Tests for parse_partial_date."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("20051007", "2005-10-07"),
            ("200510", "2005-10"),
            ("2005", "2005"),
            ("2005-10-07", "2005-10-07"),
            ("2005-10", "2005-10"),
            ("2005/1/7", "2005-01-07"),
            ("2005.10.07", "2005-10-07"),
            (" 2005-10-07 ", "2005-10-07"),
        ],
    )
    def test_supported_formats(self, value: str, expected: str):
        """Dates keep whatever precision the provider had."""
        assert parse_partial_date(value) == expected

    @pytest.mark.parametrize(
        "value",
        [None, "", "unknown", "2005-13", "20050230", "2005-02-30", "05-10-07", 2005],
    )
    def test_unparseable_is_none(self, value):
        """Unparseable input yields None rather than raising."""
        assert parse_partial_date(value) is None


class TestParseJapaneseDate:
    """Tests for parse_japanese_date."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("1998年06月10日", "1998-06-10"),
            ("2024年1月5日", "2024-01-05"),
            ("2024年01月05日頃", "2024-01-05"),
        ],
    )
    def test_full_dates(self, value: str, expected: str):
        assert parse_japanese_date(value) == expected

    @pytest.mark.parametrize("value", [None, "", "2024年01月", "2024年13月01日", "2024-01-05"])
    def test_partial_or_invalid(self, value):
        assert parse_japanese_date(value) is None
