"""Tests for result deduplication."""

from __future__ import annotations

from bookresolve.core.models import BookRecord
from bookresolve.core.types import DataSource
from bookresolve.resolution.dedup import deduplicate


class TestDeduplicate:
    """Tests for deduplicate."""

    def test_same_isbn_keeps_first(
        self,
        commerce_record: BookRecord,
        registry_record: BookRecord,
    ):
        """Earlier (higher priority) records win; nothing is merged."""
        result = deduplicate([commerce_record], [registry_record])

        assert result == [commerce_record]
        assert result[0].affiliate_url is not None

    def test_isbn_compared_after_normalization(self):
        a = BookRecord(isbn="4-16-715805-x", title="A")
        b = BookRecord(isbn="416715805X", title="B")

        assert deduplicate([a, b]) == [a]

    def test_title_author_case_insensitive(self):
        a = BookRecord(title="Kitchen", author="Banana Yoshimoto")
        b = BookRecord(title="KITCHEN", author="banana yoshimoto")

        assert deduplicate([a], [b]) == [a]

    def test_isbn_and_isbnless_not_compared(
        self,
        generic_record: BookRecord,
        isbnless_record: BookRecord,
    ):
        """Same title and author, but only one has an ISBN: both kept."""
        same_title = generic_record.model_copy(update={"title": isbnless_record.title})

        assert deduplicate([same_title, isbnless_record]) == [same_title, isbnless_record]

    def test_different_isbns_kept(self, commerce_record: BookRecord, generic_record: BookRecord):
        assert deduplicate([commerce_record, generic_record]) == [commerce_record, generic_record]

    def test_preserves_order(self):
        records = [
            BookRecord(isbn="9784167158057", title="1", data_source=DataSource.COMMERCE),
            BookRecord(title="2"),
            BookRecord(isbn="9784041800089", title="3"),
            BookRecord(isbn="9784167158057", title="dup"),
            BookRecord(title="2"),
        ]

        assert [r.title for r in deduplicate(records)] == ["1", "2", "3"]

    def test_empty(self):
        assert deduplicate() == []
        assert deduplicate([], []) == []
