"""Health check endpoints.

Provides liveness and readiness probes for orchestrators and load balancers.
"""

from __future__ import annotations

import time
from typing import Annotated

from fastapi import APIRouter, Depends, Response, status

from recipebox.api.dependencies import get_app_settings
from recipebox.core.config import Settings
from recipebox.database import check_database_health
from recipebox.schemas.enums import HealthStatus
from recipebox.schemas.health import HealthCheckItem, HealthResponse, ReadinessResponse


router = APIRouter(tags=["Health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Liveness probe",
    description="Basic health check to verify the service is running.",
)
async def health_check(
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> HealthResponse:
    """Report that the process is up. External dependencies are not checked."""
    return HealthResponse(
        status=HealthStatus.HEALTHY,
        version=settings.app.version,
        environment=settings.APP_ENV,
    )


@router.get(
    "/ready",
    response_model=ReadinessResponse,
    summary="Readiness probe",
    description="Readiness check verifying the database is reachable.",
    responses={503: {"description": "Database unavailable"}},
)
async def readiness_check(
    response: Response,
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> ReadinessResponse:
    """Check the database; answer 503 until it is reachable."""
    start = time.perf_counter()
    database = (await check_database_health())["database"]
    elapsed_ms = round((time.perf_counter() - start) * 1000, 2)

    healthy = database == "healthy"
    if not healthy:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE

    return ReadinessResponse(
        status=HealthStatus.HEALTHY if healthy else HealthStatus.UNHEALTHY,
        version=settings.app.version,
        environment=settings.APP_ENV,
        checks={
            "database": HealthCheckItem(
                status=HealthStatus.HEALTHY if healthy else HealthStatus.UNHEALTHY,
                message=database,
                response_time_ms=elapsed_ms,
            )
        },
    )
