"""Health check endpoints."""

from __future__ import annotations

from typing import Literal

from fastapi import APIRouter, Request

from bookresolve import __version__
from bookresolve.api.schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    operation_id="getHealth",
    summary="Health check",
    description="Check the health status of the API and its dependencies.",
)
async def health_check(request: Request) -> HealthResponse:
    """Check API health status."""
    services: dict[str, Literal["up", "down", "unknown"]] = {}
    overall_status: Literal["healthy", "degraded", "unhealthy"] = "healthy"

    client = getattr(request.app.state, "client", None)
    if client is None:
        services["providers"] = "down"
        overall_status = "unhealthy"
    else:
        services["providers"] = "up"

    # History store (Redis, optional)
    try:
        redis = client.redis if client is not None else None
        if redis:
            await redis.ping()
            services["redis"] = "up"
        else:
            services["redis"] = "unknown"
    except Exception:
        services["redis"] = "down"
        if overall_status == "healthy":
            overall_status = "degraded"

    return HealthResponse(
        status=overall_status,
        version=__version__,
        services=services,
    )


@router.get(
    "/ready",
    operation_id="getReady",
    summary="Readiness check",
    description="Check if the API is ready to serve traffic.",
)
async def readiness_check(request: Request) -> dict[str, bool]:
    """Check if API is ready to serve traffic."""
    client = getattr(request.app.state, "client", None)
    return {"ready": client is not None}
