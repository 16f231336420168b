"""Provider adapters for external book catalogs."""

from bookresolve.providers.base import BookProvider, ProviderConfig, ProviderResult
from bookresolve.providers.factory import ProviderSet
from bookresolve.providers.google_books import GoogleBooksProvider
from bookresolve.providers.openbd import OpenBDProvider
from bookresolve.providers.rakuten import RakutenBooksProvider

__all__ = [
    # Base
    "BookProvider",
    "ProviderConfig",
    "ProviderResult",
    # Providers
    "GoogleBooksProvider",
    "OpenBDProvider",
    "RakutenBooksProvider",
    # Wiring
    "ProviderSet",
]
