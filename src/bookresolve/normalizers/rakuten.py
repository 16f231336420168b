"""Normalizer for the Rakuten Books commerce catalog."""

from __future__ import annotations

import logging
import re
from typing import Any

from pydantic import ValidationError

from bookresolve.core.dates import parse_japanese_date
from bookresolve.core.isbn import normalize_isbn
from bookresolve.core.models import BookRecord
from bookresolve.core.normalization import clean_str, join_names
from bookresolve.core.types import DataSource
from bookresolve.normalizers.base import first_present, https

logger = logging.getLogger(__name__)

# "四六判 / 256p", "文庫 320p"
_PAGES = re.compile(r"(\d+)\s*[pP](?![a-zA-Z])")


def extract_page_count(size: Any) -> int | None:
    """Pull a page count out of the free-text ``size`` field."""
    if not isinstance(size, str):
        return None
    match = _PAGES.search(size)
    return int(match.group(1)) if match else None


def extract_author(value: Any) -> str | None:
    """Rakuten separates multiple authors with ``/``."""
    text = clean_str(value)
    if text is None:
        return None
    return join_names(text.split("/"))


def _unwrap(item: Any) -> dict[str, Any] | None:
    # formatVersion=1 wraps each item as {"Item": {...}}; version 2 does not.
    if isinstance(item, dict) and isinstance(item.get("Item"), dict):
        return item["Item"]
    return item if isinstance(item, dict) else None


def normalize(item: Any) -> BookRecord | None:
    """Convert one Rakuten Books item into a BookRecord."""
    data = _unwrap(item)
    if not data:
        return None

    try:
        return BookRecord(
            isbn=normalize_isbn(clean_str(data.get("isbn"))),
            title=clean_str(data.get("title")),
            author=extract_author(data.get("author")),
            publisher=clean_str(data.get("publisherName")),
            published_date=parse_japanese_date(data.get("salesDate")),
            page_count=extract_page_count(data.get("size")),
            description=clean_str(data.get("itemCaption")),
            cover_image_url=https(
                first_present(
                    lambda: clean_str(data.get("largeImageUrl")),
                    lambda: clean_str(data.get("mediumImageUrl")),
                )
            ),
            data_source=DataSource.COMMERCE,
            affiliate_url=clean_str(data.get("affiliateUrl")),
        )
    except ValidationError as e:
        logger.warning(f"Discarding unparseable Rakuten item: {e}")
        return None


def normalize_response(data: Any) -> list[BookRecord]:
    """Normalize a ``BooksBook/Search`` response body."""
    items = data.get("Items") if isinstance(data, dict) else None
    if not isinstance(items, list):
        return []
    records = (normalize(item) for item in items)
    return [r for r in records if r is not None]
