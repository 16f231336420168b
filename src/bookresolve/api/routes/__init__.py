"""API route modules."""

from bookresolve.api.routes.books import router as books_router
from bookresolve.api.routes.health import router as health_router

__all__ = [
    "books_router",
    "health_router",
]
