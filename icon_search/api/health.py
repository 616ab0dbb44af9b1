"""Health check and monitoring API endpoints."""

import time
from datetime import datetime

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from ..models.response import HealthResponse
from .deps import get_app_settings

router = APIRouter(prefix="/api/v1", tags=["health"])

# Track application start time
app_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Check the health status of the icon search service"
)
async def health_check(request: Request) -> HealthResponse:
    """
    Perform a health check on the icon search service.

    The service is degraded when the index failed to load, since every
    search endpoint answers 503 in that state.
    """
    engine = getattr(request.app.state, "engine", None)

    dependencies = {
        "icon_index": "healthy" if engine is not None else "unhealthy",
        "search_config": "healthy" if engine is not None else "unknown",
    }
    status = "healthy" if engine is not None else "degraded"

    return HealthResponse(
        status=status,
        version=get_app_settings(request).app_version,
        uptime=time.time() - app_start_time,
        total_icons=len(engine.index) if engine is not None else 0,
        dependencies=dependencies
    )


@router.get(
    "/health/ready",
    summary="Readiness check",
    description="Check if the service is ready to accept requests"
)
async def readiness_check(request: Request) -> JSONResponse:
    """
    Check if the service is ready to accept requests.

    Ready means the index and search config loaded successfully.
    """
    engine = getattr(request.app.state, "engine", None)

    if engine is None:
        return JSONResponse(
            status_code=503,
            content={
                "status": "not_ready",
                "error": getattr(request.app.state, "load_error", None),
                "timestamp": datetime.utcnow().isoformat()
            }
        )

    return JSONResponse(
        status_code=200,
        content={
            "status": "ready",
            "timestamp": datetime.utcnow().isoformat(),
            "index_stats": engine.get_stats()
        }
    )


@router.get(
    "/health/live",
    summary="Liveness check",
    description="Check if the service is alive and responding"
)
async def liveness_check() -> JSONResponse:
    """Check if the service process is alive."""
    return JSONResponse(
        status_code=200,
        content={
            "status": "alive",
            "timestamp": datetime.utcnow().isoformat(),
            "uptime": time.time() - app_start_time
        }
    )
