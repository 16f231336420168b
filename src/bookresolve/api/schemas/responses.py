"""Response schemas for API endpoints."""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from bookresolve.api.schemas.base import APIBaseSchema
from bookresolve.core.models import BookRecord
from bookresolve.core.types import DataSource


class BookResponse(APIBaseSchema):
    """A resolved book."""

    isbn: str | None = None
    title: str
    author: str
    publisher: str | None = None
    published_date: str | None = None
    page_count: int | None = None
    description: str | None = None
    cover_image_url: str | None = None
    data_source: DataSource
    affiliate_url: str | None = None

    @classmethod
    def from_record(cls, record: BookRecord) -> "BookResponse":
        return cls.model_validate(record)


class BooksResponse(APIBaseSchema):
    """List of books; empty means nothing was found."""

    books: list[BookResponse] = Field(default_factory=list)

    @classmethod
    def from_records(cls, records: list[BookRecord]) -> "BooksResponse":
        return cls(books=[BookResponse.from_record(r) for r in records])


class RecentSearchesResponse(APIBaseSchema):
    """Recent keyword queries, most recent first."""

    queries: list[str] = Field(default_factory=list)


class HealthResponse(APIBaseSchema):
    """Health check response."""

    status: Literal["healthy", "degraded", "unhealthy"]
    version: str
    services: dict[str, Literal["up", "down", "unknown"]]
