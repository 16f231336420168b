"""FastAPI application factory."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from bookresolve import __version__
from bookresolve.api.routes import books_router, health_router
from bookresolve.api.schemas import APIError, ErrorDetail
from bookresolve.client import BookResolveClient
from bookresolve.config import get_settings
from bookresolve.core.exceptions import BookResolveError, InvalidArgumentError, NotFoundError

logger = logging.getLogger(__name__)

ERROR_STATUS: dict[type[BookResolveError], int] = {
    InvalidArgumentError: status.HTTP_400_BAD_REQUEST,
    NotFoundError: status.HTTP_404_NOT_FOUND,
}


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    Application lifespan manager.

    Handles startup and shutdown of resources.
    """
    settings = get_settings()
    logging.basicConfig(level=settings.log_level.upper())

    logger.info("Initializing book resolve client...")
    async with BookResolveClient(settings) as client:
        app.state.client = client
        logger.info("Application startup complete")

        yield

        logger.info("Shutting down application...")
        app.state.client = None

    logger.info("Application shutdown complete")


def _error_response(status_code: int, error: ErrorDetail) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=APIError(error=error).model_dump(by_alias=True, exclude_none=True),
    )


async def handle_bookresolve_error(request: Request, exc: BookResolveError) -> JSONResponse:
    """Map library exceptions to ``{"error": {"code", "message"}}`` bodies."""
    status_code = next(
        (code for cls, code in ERROR_STATUS.items() if isinstance(exc, cls)),
        status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
    if status_code >= 500:
        logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}")
    return _error_response(
        status_code,
        ErrorDetail(code=exc.code, message=exc.message, details=exc.details or None),
    )


async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Invalid request parameters are reported as INVALID_ARGUMENT."""
    return _error_response(
        status.HTTP_400_BAD_REQUEST,
        ErrorDetail(
            code=InvalidArgumentError.code,
            message="Invalid request parameters",
            details=[{"loc": list(e["loc"]), "msg": e["msg"]} for e in exc.errors()],
        ),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(BookResolveError, handle_bookresolve_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)


def create_app(
    *,
    title: str = "Book Resolve API",
    description: str = "Book metadata resolution across commerce, registry and generic catalogs",
    version: str = __version__,
    cors_origins: list[str] | None = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        title: API title for OpenAPI docs
        description: API description for OpenAPI docs
        version: API version
        cors_origins: List of allowed CORS origins (defaults to settings)

    Returns:
        Configured FastAPI application
    """
    app = FastAPI(
        title=title,
        description=description,
        version=version,
        lifespan=lifespan,
        openapi_url="/api/openapi.json",
        docs_url="/api/docs",
        redoc_url="/api/redoc",
    )

    # Configure CORS
    if cors_origins is None:
        cors_origins = get_settings().cors_origins

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Register routes
    app.include_router(health_router, prefix="/api/v1")
    app.include_router(books_router, prefix="/api/v1")

    return app


# For uvicorn direct execution
app = create_app()
