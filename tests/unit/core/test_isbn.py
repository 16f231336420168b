"""Tests for ISBN normalization and validation."""

from __future__ import annotations

import pytest

from bookresolve.core.exceptions import InvalidArgumentError
from bookresolve.core.isbn import is_valid_isbn, looks_like_isbn, normalize_isbn, parse_isbn

# ============================================================================
# normalize_isbn Tests
# ============================================================================


class TestNormalizeISBN:
    """Tests for separator stripping."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("978-4-16-715805-7", "9784167158057"),
            ("9784167158057", "9784167158057"),
            ("4 16 715805 X", "416715805X"),
            ("4-16-715805-x", "416715805X"),
        ],
    )
    def test_strips_separators(self, value: str, expected: str):
        """Hyphens and spaces are removed and x is upper-cased."""
        assert normalize_isbn(value) == expected

    @pytest.mark.parametrize("value", [None, "", " - "])
    def test_empty_is_none(self, value):
        """Nothing left after stripping means no ISBN."""
        assert normalize_isbn(value) is None


# ============================================================================
# Validation Tests
# ============================================================================


class TestParseISBN:
    """Tests for ISBN validation."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("978-4-16-715805-7", "9784167158057"),
            ("9794167158057", "9794167158057"),
            ("416715805X", "416715805X"),
            ("0134093410", "0134093410"),
        ],
    )
    def test_valid(self, value: str, expected: str):
        """Valid ISBN-10 and ISBN-13 values are accepted."""
        assert parse_isbn(value) == expected
        assert is_valid_isbn(value) is True

    @pytest.mark.parametrize(
        "value",
        [
            "",
            "12345",
            "9771234567890",  # 13 digits without 978/979
            "97841671580571",
            "X784167158057",
            "abcdefghij",
        ],
    )
    def test_invalid_raises(self, value: str):
        """Malformed input raises InvalidArgumentError."""
        with pytest.raises(InvalidArgumentError) as exc_info:
            parse_isbn(value)

        assert exc_info.value.code == "INVALID_ARGUMENT"
        assert exc_info.value.details == {"isbn": value}
        assert is_valid_isbn(value) is False


class TestLooksLikeISBN:
    """Tests for the search-box routing heuristic."""

    @pytest.mark.parametrize("query", ["9784167158057", "978-4-16-715805-7", "0134093410"])
    def test_digit_runs(self, query: str):
        assert looks_like_isbn(query) is True

    @pytest.mark.parametrize("query", ["kitchen", "416715805X", "12345", "978 4167158057"])
    def test_other_text(self, query: str):
        assert looks_like_isbn(query) is False
