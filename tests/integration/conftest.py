"""Integration test fixtures for the HTTP API."""

from __future__ import annotations

from typing import AsyncIterator

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from bookresolve.api.app import register_exception_handlers
from bookresolve.api.routes import books_router, health_router
from bookresolve.client import BookResolveClient
from bookresolve.config import BookResolveSettings
from bookresolve.core.models import BookRecord
from bookresolve.core.types import DataSource, ResolutionStatus
from bookresolve.providers.base import ProviderResult
from bookresolve.providers.factory import ProviderSet


# ============================================================================
# Provider Fixtures
# ============================================================================


@pytest.fixture
def providers(
    provider_factory,
    commerce_record: BookRecord,
    generic_record: BookRecord,
) -> ProviderSet:
    """Commerce knows one ISBN; the generic index answers the keyword "kitchen"."""
    commerce = provider_factory(DataSource.COMMERCE)
    registry = provider_factory(DataSource.REGISTRY)
    generic = provider_factory(DataSource.GENERIC_INDEX)

    def _answer(source: DataSource, records: list[BookRecord]) -> ProviderResult:
        return ProviderResult(
            status=ResolutionStatus.SUCCESS if records else ResolutionStatus.NOT_FOUND,
            records=records,
            source=source,
        )

    async def _commerce_isbn(isbn: str) -> ProviderResult:
        return _answer(DataSource.COMMERCE, [commerce_record] if isbn == commerce_record.isbn else [])

    async def _generic_query(query: str) -> ProviderResult:
        return _answer(DataSource.GENERIC_INDEX, [generic_record] if query == "kitchen" else [])

    commerce.search_by_isbn.side_effect = _commerce_isbn
    generic.search_by_query.side_effect = _generic_query
    return ProviderSet(registry=registry, generic_index=generic, commerce=commerce)


# ============================================================================
# App Fixtures
# ============================================================================


@pytest.fixture
async def test_app(
    test_settings: BookResolveSettings,
    providers: ProviderSet,
) -> AsyncIterator[FastAPI]:
    """Create a test app wired to provider doubles."""
    app = FastAPI()
    register_exception_handlers(app)
    app.include_router(health_router, prefix="/api/v1")
    app.include_router(books_router, prefix="/api/v1")

    async with BookResolveClient(test_settings, providers=providers) as client:
        app.state.client = client
        yield app


@pytest.fixture
async def test_client(test_app: FastAPI) -> AsyncIterator[AsyncClient]:
    """Create async HTTP test client."""
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
