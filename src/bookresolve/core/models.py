"""Domain models for resolved book records."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .isbn import normalize_isbn
from .types import DataSource

UNKNOWN_TITLE = "unknown title"
UNKNOWN_AUTHOR = "unknown author"


class BookRecord(BaseModel):
    """Canonical book metadata produced by every provider normalizer."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, from_attributes=True)

    isbn: str | None = Field(default=None, description="ISBN-10 or ISBN-13 without separators")
    title: str = Field(default=UNKNOWN_TITLE, description="Title of the book")
    author: str = Field(default=UNKNOWN_AUTHOR, description="Comma-joined contributor names")
    publisher: str | None = Field(default=None, description="Publisher or imprint name")
    published_date: str | None = Field(
        default=None, description="YYYY-MM-DD, YYYY-MM or YYYY"
    )
    page_count: int | None = Field(default=None, description="Number of pages")
    description: str | None = Field(default=None, description="Description or table of contents")
    cover_image_url: str | None = Field(default=None, description="Provider-hosted cover URL")
    data_source: DataSource = Field(default=DataSource.MANUAL, description="Provenance")
    affiliate_url: str | None = Field(default=None, description="Commerce affiliate link")

    @field_validator("isbn", mode="before")
    @classmethod
    def _normalize_isbn(cls, v: Any) -> str | None:
        return normalize_isbn(v) if v is not None else None

    @field_validator("title", mode="before")
    @classmethod
    def _default_title(cls, v: Any) -> str:
        if not isinstance(v, str) or not v.strip():
            return UNKNOWN_TITLE
        return v.strip()

    @field_validator("author", mode="before")
    @classmethod
    def _default_author(cls, v: Any) -> str:
        if not isinstance(v, str) or not v.strip():
            return UNKNOWN_AUTHOR
        return v.strip()

    @field_validator(
        "publisher", "published_date", "description", "cover_image_url", "affiliate_url",
        mode="before",
    )
    @classmethod
    def _blank_to_none(cls, v: Any) -> Any:
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @property
    def has_isbn(self) -> bool:
        return bool(self.isbn)
