"""Best-record selection for single-ISBN detail lookups."""

from __future__ import annotations

from collections.abc import Iterable

from bookresolve.core.models import BookRecord

# Description and cover matter most when showing a book's detail page.
FIELD_WEIGHTS: dict[str, int] = {
    "isbn": 1,
    "publisher": 1,
    "published_date": 1,
    "page_count": 1,
    "affiliate_url": 1,
    "description": 2,
    "cover_image_url": 2,
}


def detail_score(record: BookRecord) -> int:
    """Score a record by how many optional fields it populates."""
    return sum(
        weight for field, weight in FIELD_WEIGHTS.items() if getattr(record, field) is not None
    )


def select_best(records: Iterable[BookRecord]) -> BookRecord | None:
    """Return the highest-scoring record; the first one wins a tie."""
    best: BookRecord | None = None
    best_score = -1
    for record in records:
        score = detail_score(record)
        if score > best_score:
            best, best_score = record, score
    return best
