"""Provider set for creating and managing provider instances."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from bookresolve.providers.base import BookProvider, ProviderConfig
from bookresolve.providers.google_books import GoogleBooksProvider
from bookresolve.providers.openbd import OpenBDProvider
from bookresolve.providers.rakuten import RakutenBooksProvider

if TYPE_CHECKING:
    from bookresolve.config import BookResolveSettings

logger = logging.getLogger(__name__)


@dataclass
class ProviderSet:
    """
    The three provider families, wired from settings.

    The commerce provider is optional: it is only created when an application
    ID is configured.
    """

    registry: BookProvider
    generic_index: BookProvider
    commerce: BookProvider | None = None

    @property
    def all(self) -> list[BookProvider]:
        """Configured providers in priority order."""
        providers = [self.commerce, self.registry, self.generic_index]
        return sorted((p for p in providers if p is not None), key=lambda p: p.priority)

    @classmethod
    def from_settings(cls, settings: "BookResolveSettings") -> "ProviderSet":
        """Create providers configured from settings."""
        timeout = settings.provider_timeout

        commerce = None
        if settings.rakuten_application_id:
            commerce = RakutenBooksProvider(
                ProviderConfig(
                    api_key=settings.rakuten_application_id,
                    affiliate_id=settings.rakuten_affiliate_id,
                    timeout=timeout,
                )
            )

        return cls(
            registry=OpenBDProvider(ProviderConfig(timeout=timeout)),
            generic_index=GoogleBooksProvider(
                ProviderConfig(api_key=settings.google_books_api_key, timeout=timeout)
            ),
            commerce=commerce,
        )

    async def close_all(self) -> None:
        """Close all providers; one failing close does not stop the rest."""
        for provider in self.all:
            try:
                await provider.close()
            except Exception as e:
                logger.warning(f"Failed to close provider {provider.name}: {e}")
