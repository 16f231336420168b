"""Deduplication of provider results."""

from __future__ import annotations

from collections.abc import Iterable

from bookresolve.core.isbn import normalize_isbn
from bookresolve.core.models import BookRecord


def title_author_key(record: BookRecord) -> tuple[str, str]:
    """Identity of an ISBN-less record: case-insensitive title and author."""
    return (record.title.lower(), record.author.lower())


def deduplicate(*record_lists: Iterable[BookRecord]) -> list[BookRecord]:
    """
    Merge record lists into one duplicate-free list, keeping first-seen order.

    Lists are expected in provider priority order. Two records are duplicates
    when both carry an ISBN and the normalized ISBNs match, or when neither
    carries one and title and author match case-insensitively. The earlier
    record is kept as-is; later duplicates are dropped, never merged.
    """
    seen_isbns: set[str] = set()
    seen_titles: set[tuple[str, str]] = set()
    unique: list[BookRecord] = []

    for records in record_lists:
        for record in records:
            isbn = normalize_isbn(record.isbn)
            if isbn:
                if isbn in seen_isbns:
                    continue
                seen_isbns.add(isbn)
            else:
                key = title_author_key(record)
                if key in seen_titles:
                    continue
                seen_titles.add(key)
            unique.append(record)

    return unique
