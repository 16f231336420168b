"""Normalizer for the Google Books generic volume index."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from bookresolve.core.dates import parse_partial_date
from bookresolve.core.isbn import normalize_isbn
from bookresolve.core.models import BookRecord
from bookresolve.core.normalization import clean_str, join_names, parse_int
from bookresolve.core.types import DataSource
from bookresolve.normalizers.base import as_dicts, first_present, get_path, https

logger = logging.getLogger(__name__)


def extract_isbn(volume_info: dict[str, Any]) -> str | None:
    """Prefer the ISBN-13 industry identifier over the ISBN-10 one."""
    isbn10 = None
    isbn13 = None
    for ident in as_dicts(volume_info.get("industryIdentifiers")):
        ident_type = ident.get("type")
        ident_value = clean_str(ident.get("identifier"))
        if ident_type == "ISBN_13" and isbn13 is None:
            isbn13 = ident_value
        elif ident_type == "ISBN_10" and isbn10 is None:
            isbn10 = ident_value
    return normalize_isbn(isbn13 or isbn10)


def extract_cover_image_url(volume_info: dict[str, Any]) -> str | None:
    return https(
        first_present(
            lambda: clean_str(get_path(volume_info, "imageLinks", "thumbnail")),
            lambda: clean_str(get_path(volume_info, "imageLinks", "smallThumbnail")),
        )
    )


def extract_author(volume_info: dict[str, Any]) -> str | None:
    authors = volume_info.get("authors")
    return join_names(authors if isinstance(authors, list) else None)


def normalize(item: Any) -> BookRecord | None:
    """Convert one Google Books volume into a BookRecord."""
    volume_info = get_path(item, "volumeInfo")
    if not isinstance(volume_info, dict) or not volume_info:
        return None

    try:
        return BookRecord(
            isbn=extract_isbn(volume_info),
            title=clean_str(volume_info.get("title")),
            author=extract_author(volume_info),
            publisher=clean_str(volume_info.get("publisher")),
            published_date=parse_partial_date(volume_info.get("publishedDate")),
            page_count=parse_int(volume_info.get("pageCount")),
            description=clean_str(volume_info.get("description")),
            cover_image_url=extract_cover_image_url(volume_info),
            data_source=DataSource.GENERIC_INDEX,
        )
    except ValidationError as e:
        logger.warning(f"Discarding unparseable Google Books volume: {e}")
        return None


def normalize_response(data: Any) -> list[BookRecord]:
    """Normalize a ``/volumes`` search response."""
    items = data.get("items") if isinstance(data, dict) else None
    if not isinstance(items, list):
        return []
    records = (normalize(item) for item in items)
    return [r for r in records if r is not None]
