"""Normalizer for the openBD national bibliographic registry (ONIX based).

An openBD record carries a flattened ``summary`` object and the nested ``onix``
tree. Each field has its own extractor; the summary wins, the ONIX tree fills
the gaps.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from bookresolve.core.dates import parse_partial_date
from bookresolve.core.isbn import normalize_isbn
from bookresolve.core.models import BookRecord
from bookresolve.core.normalization import clean_str, join_names, parse_int
from bookresolve.core.types import DataSource
from bookresolve.normalizers.base import as_dicts, first_present, get_path

logger = logging.getLogger(__name__)

# ONIX code lists
EXTENT_TYPE_PAGES = "11"
TEXT_TYPE_DESCRIPTION = "03"
TEXT_TYPE_TABLE_OF_CONTENTS = "04"
RESOURCE_CONTENT_FRONT_COVER = "01"
PUBLISHING_DATE_ROLE_PUBLICATION = "01"


def _text(node: Any) -> str | None:
    """ONIX text nodes come either as plain strings or ``{"content": ...}``."""
    if isinstance(node, dict):
        node = node.get("content")
    return clean_str(node)


def _summary(record: dict[str, Any], key: str) -> str | None:
    return clean_str(get_path(record, "summary", key))


def _descriptive(record: dict[str, Any], *path: str | int) -> Any:
    return get_path(record, "onix", "DescriptiveDetail", *path)


def _publishing(record: dict[str, Any], *path: str | int) -> Any:
    return get_path(record, "onix", "PublishingDetail", *path)


def _collateral(record: dict[str, Any], *path: str | int) -> Any:
    return get_path(record, "onix", "CollateralDetail", *path)


# ----------------------------------------------------------------------------
# ONIX extractors
# ----------------------------------------------------------------------------


def onix_title(record: dict[str, Any]) -> str | None:
    for detail in as_dicts(_descriptive(record, "TitleDetail")):
        for element in as_dicts(detail.get("TitleElement")):
            if title := _text(element.get("TitleText")):
                return title
    return None


def onix_author(record: dict[str, Any]) -> str | None:
    contributors = as_dicts(_descriptive(record, "Contributor"))
    return join_names([_text(c.get("PersonName")) for c in contributors])


def onix_publisher(record: dict[str, Any]) -> str | None:
    for imprint in as_dicts(_publishing(record, "Imprint")):
        if name := _text(imprint.get("ImprintName")):
            return name
    return None


def onix_published_date(record: dict[str, Any]) -> str | None:
    for entry in as_dicts(_publishing(record, "PublishingDate")):
        role = entry.get("PublishingDateRole")
        # Entries without a role are treated as the publication date.
        if role is not None and str(role) != PUBLISHING_DATE_ROLE_PUBLICATION:
            continue
        return parse_partial_date(_text(entry.get("Date")))
    return None


def onix_page_count(record: dict[str, Any]) -> int | None:
    for extent in as_dicts(_descriptive(record, "Extent")):
        if str(extent.get("ExtentType")) == EXTENT_TYPE_PAGES:
            return parse_int(extent.get("ExtentValue"))
    return None


def _text_content(record: dict[str, Any], text_type: str) -> str | None:
    for content in as_dicts(_collateral(record, "TextContent")):
        if str(content.get("TextType")) == text_type:
            if text := _text(content.get("Text")):
                return text
    return None


def onix_description(record: dict[str, Any]) -> str | None:
    return first_present(
        lambda: _text_content(record, TEXT_TYPE_DESCRIPTION),
        lambda: _text_content(record, TEXT_TYPE_TABLE_OF_CONTENTS),
    )


def onix_cover_image_url(record: dict[str, Any]) -> str | None:
    for resource in as_dicts(_collateral(record, "SupportingResource")):
        if str(resource.get("ResourceContentType")) != RESOURCE_CONTENT_FRONT_COVER:
            continue
        versions = as_dicts(resource.get("ResourceVersion"))
        if versions:
            return clean_str(versions[0].get("ResourceLink"))
    return None


def onix_isbn(record: dict[str, Any]) -> str | None:
    for identifier in as_dicts(get_path(record, "onix", "ProductIdentifier")):
        if value := clean_str(identifier.get("IDValue")):
            return normalize_isbn(value)
    return None


# ----------------------------------------------------------------------------
# Field resolution: summary first, ONIX second
# ----------------------------------------------------------------------------


def extract_title(record: dict[str, Any]) -> str | None:
    return first_present(lambda: _summary(record, "title"), lambda: onix_title(record))


def extract_author(record: dict[str, Any]) -> str | None:
    return first_present(lambda: _summary(record, "author"), lambda: onix_author(record))


def extract_publisher(record: dict[str, Any]) -> str | None:
    return first_present(
        lambda: _summary(record, "publisher"), lambda: onix_publisher(record)
    )


def extract_published_date(record: dict[str, Any]) -> str | None:
    return first_present(
        lambda: parse_partial_date(_summary(record, "pubdate")),
        lambda: onix_published_date(record),
    )


def extract_cover_image_url(record: dict[str, Any]) -> str | None:
    return first_present(
        lambda: _summary(record, "cover"), lambda: onix_cover_image_url(record)
    )


def extract_isbn(record: dict[str, Any]) -> str | None:
    return first_present(
        lambda: normalize_isbn(_summary(record, "isbn")), lambda: onix_isbn(record)
    )


def normalize(record: Any) -> BookRecord | None:
    """
    Convert a single openBD record into a BookRecord.

    openBD answers unknown ISBNs with ``null``; that (and any non-object) maps to
    None. Missing fields never raise.
    """
    if not isinstance(record, dict) or not (record.get("summary") or record.get("onix")):
        return None

    try:
        return BookRecord(
            isbn=extract_isbn(record),
            title=extract_title(record),
            author=extract_author(record),
            publisher=extract_publisher(record),
            published_date=extract_published_date(record),
            page_count=onix_page_count(record),
            description=onix_description(record),
            cover_image_url=extract_cover_image_url(record),
            data_source=DataSource.REGISTRY,
        )
    except ValidationError as e:
        logger.warning(f"Discarding unparseable openBD record: {e}")
        return None


def normalize_response(data: Any) -> list[BookRecord]:
    """Normalize the ``/v1/get`` response, a list of records or nulls."""
    records = (normalize(item) for item in (data if isinstance(data, list) else [data]))
    return [r for r in records if r is not None]
