"""Shared test fixtures for all tests."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest

from bookresolve.config import BookResolveSettings
from bookresolve.core.models import BookRecord
from bookresolve.core.types import DataSource, InputType, ResolutionStatus
from bookresolve.providers.base import BookProvider, ProviderResult


# ============================================================================
# Sample Data Fixtures
# ============================================================================


@pytest.fixture
def commerce_record() -> BookRecord:
    """A fully populated commerce record."""
    return BookRecord(
        isbn="9784167158057",
        title="キッチン",
        author="吉本ばなな",
        publisher="文藝春秋",
        published_date="1998-06-10",
        page_count=240,
        description="祖母を亡くしたみかげの物語。",
        cover_image_url="https://thumbnail.image.rakuten.co.jp/0_mall/book/cabinet/8057/9784167158057.jpg",
        data_source=DataSource.COMMERCE,
        affiliate_url="https://hb.afl.rakuten.co.jp/hgc/test/?pc=https%3A%2F%2Fbooks.rakuten.co.jp",
    )


@pytest.fixture
def registry_record() -> BookRecord:
    """A registry record with the same ISBN as the commerce record."""
    return BookRecord(
        isbn="9784167158057",
        title="キッチン",
        author="吉本ばなな",
        publisher="文藝春秋",
        published_date="1998-06",
        data_source=DataSource.REGISTRY,
    )


@pytest.fixture
def generic_record() -> BookRecord:
    """A generic index record for a different edition."""
    return BookRecord(
        isbn="9784041800089",
        title="Kitchen",
        author="Banana Yoshimoto",
        published_date="2002",
        description="A novella about grief.",
        data_source=DataSource.GENERIC_INDEX,
    )


@pytest.fixture
def isbnless_record() -> BookRecord:
    """A record without any ISBN."""
    return BookRecord(
        title="Kitchen",
        author="Banana Yoshimoto",
        data_source=DataSource.GENERIC_INDEX,
    )


# ============================================================================
# Settings Fixtures
# ============================================================================


@pytest.fixture
def test_settings() -> BookResolveSettings:
    """Settings with the commerce provider enabled and no Redis."""
    return BookResolveSettings(
        _env_file=None,
        rakuten_application_id="test-app-id",
        rakuten_affiliate_id="test-affiliate",
        google_books_api_key="test-google-key",
        provider_timeout=5.0,
        redis_url=None,
    )


@pytest.fixture
def test_settings_no_commerce() -> BookResolveSettings:
    """Settings without a Rakuten application ID."""
    return BookResolveSettings(
        _env_file=None,
        rakuten_application_id=None,
        google_books_api_key=None,
        redis_url=None,
    )


# ============================================================================
# Provider Doubles
# ============================================================================


def make_provider(
    source: DataSource,
    *,
    isbn_records: list[BookRecord] | None = None,
    query_records: list[BookRecord] | None = None,
    status: ResolutionStatus | None = None,
    supports: frozenset[InputType] = frozenset({InputType.ISBN, InputType.KEYWORD}),
    priority: int | None = None,
) -> MagicMock:
    """Build a provider double whose searches return canned ProviderResults."""

    def _result(records: list[BookRecord] | None) -> ProviderResult:
        records = records or []
        return ProviderResult(
            status=status or (ResolutionStatus.SUCCESS if records else ResolutionStatus.NOT_FOUND),
            records=records if status in (None, ResolutionStatus.SUCCESS) else [],
            source=source,
        )

    provider = MagicMock(spec=BookProvider)
    provider.source = source
    provider.name = source.value
    provider.priority = priority if priority is not None else PRIORITIES[source]
    provider.is_enabled = True
    provider.supports.side_effect = lambda input_type: input_type in supports
    provider.search_by_isbn = AsyncMock(return_value=_result(isbn_records))
    provider.search_by_query = AsyncMock(return_value=_result(query_records))
    provider.close = AsyncMock()
    return provider


PRIORITIES = {
    DataSource.COMMERCE: 10,
    DataSource.REGISTRY: 20,
    DataSource.GENERIC_INDEX: 30,
}


@pytest.fixture
def provider_factory():
    """Factory fixture for provider doubles."""
    return make_provider
