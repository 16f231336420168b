"""Unit test fixtures with HTTP mocking."""

from __future__ import annotations

from typing import Any

import pytest
import respx

from bookresolve.providers.base import ProviderConfig


# ============================================================================
# HTTP Mocking Fixtures
# ============================================================================


@pytest.fixture
def respx_mock():
    """Provide a respx mock router for HTTP mocking.

    Use this when you need fine-grained control over mocked responses.
    The mock is automatically started and stopped by respx.
    """
    with respx.mock(assert_all_called=False) as router:
        yield router


# ============================================================================
# Provider Configuration Fixtures
# ============================================================================


@pytest.fixture
def provider_config() -> ProviderConfig:
    """Create a provider config for testing."""
    return ProviderConfig(api_key="test-api-key", timeout=5.0)


@pytest.fixture
def rakuten_config() -> ProviderConfig:
    """Rakuten config with application and affiliate IDs."""
    return ProviderConfig(api_key="test-app-id", affiliate_id="test-affiliate", timeout=5.0)


# ============================================================================
# Provider Response Fixtures
# ============================================================================


@pytest.fixture
def openbd_summary_record() -> dict[str, Any]:
    """openBD record where the summary carries every field."""
    return {
        "summary": {
            "isbn": "9784167158057",
            "title": "キッチン",
            "volume": "",
            "series": "文春文庫",
            "publisher": "文藝春秋",
            "pubdate": "19980610",
            "cover": "https://cover.openbd.jp/9784167158057.jpg",
            "author": "吉本ばなな／著",
        },
        "onix": {
            "RecordReference": "9784167158057",
            "ProductIdentifier": {"ProductIDType": "15", "IDValue": "9784167158057"},
            "DescriptiveDetail": {
                "TitleDetail": {
                    "TitleType": "01",
                    "TitleElement": {
                        "TitleElementLevel": "01",
                        "TitleText": {"collationkey": "キッチン", "content": "キッチン"},
                    },
                },
                "Contributor": [
                    {
                        "SequenceNumber": "1",
                        "ContributorRole": ["A01"],
                        "PersonName": {"collationkey": "ヨシモト バナナ", "content": "吉本ばなな"},
                    }
                ],
                "Extent": [{"ExtentType": "11", "ExtentValue": "240", "ExtentUnit": "03"}],
            },
            "CollateralDetail": {
                "TextContent": [
                    {"TextType": "03", "ContentAudience": "00", "Text": "祖母を亡くしたみかげの物語。"},
                    {"TextType": "04", "ContentAudience": "00", "Text": "キッチン／満月／ムーンライト・シャドウ"},
                ],
                "SupportingResource": [
                    {
                        "ResourceContentType": "01",
                        "ResourceMode": "03",
                        "ResourceVersion": [
                            {
                                "ResourceForm": "02",
                                "ResourceLink": "https://cover.openbd.jp/9784167158057.jpg",
                            }
                        ],
                    }
                ],
            },
            "PublishingDetail": {
                "Imprint": {"ImprintName": "文藝春秋"},
                "PublishingDate": [{"PublishingDateRole": "01", "Date": "19980610"}],
            },
        },
    }


@pytest.fixture
def rakuten_search_response() -> dict[str, Any]:
    """Rakuten BooksBook/Search response with one item (formatVersion=1)."""
    return {
        "count": 1,
        "page": 1,
        "hits": 1,
        "Items": [
            {
                "Item": {
                    "title": "キッチン",
                    "author": "吉本ばなな",
                    "publisherName": "文藝春秋",
                    "isbn": "9784167158057",
                    "salesDate": "1998年06月10日",
                    "size": "文庫 / 240p",
                    "itemCaption": "祖母を亡くしたみかげの物語。",
                    "largeImageUrl": "http://thumbnail.image.rakuten.co.jp/9784167158057.jpg?_ex=200x200",
                    "mediumImageUrl": "http://thumbnail.image.rakuten.co.jp/9784167158057.jpg?_ex=120x120",
                    "affiliateUrl": "https://hb.afl.rakuten.co.jp/hgc/test/",
                }
            }
        ],
    }


@pytest.fixture
def google_volumes_response() -> dict[str, Any]:
    """Google Books /volumes response with one item."""
    return {
        "kind": "books#volumes",
        "totalItems": 1,
        "items": [
            {
                "kind": "books#volume",
                "id": "abc123",
                "volumeInfo": {
                    "title": "Kitchen",
                    "authors": ["Banana Yoshimoto", "Megan Backus"],
                    "publisher": "Grove Press",
                    "publishedDate": "2006-01-10",
                    "description": "A novella about grief.",
                    "pageCount": 152,
                    "imageLinks": {
                        "smallThumbnail": "http://books.google.com/books/content?id=abc123&zoom=5",
                        "thumbnail": "http://books.google.com/books/content?id=abc123&zoom=1",
                    },
                    "industryIdentifiers": [
                        {"type": "ISBN_10", "identifier": "0802142443"},
                        {"type": "ISBN_13", "identifier": "9780802142443"},
                    ],
                },
            }
        ],
    }
