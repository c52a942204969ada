"""Health check schemas.

This module contains schemas for the liveness and readiness probes.
"""

from __future__ import annotations

from datetime import UTC, datetime

from pydantic import Field

from recipebox.schemas.base import APIResponse
from recipebox.schemas.enums import HealthStatus


class HealthCheckItem(APIResponse):
    """Individual component health status."""

    status: HealthStatus = Field(..., description="Component health status")
    message: str = Field(..., description="Status message")
    response_time_ms: float | None = Field(
        default=None,
        description="Response time in milliseconds",
    )


class HealthResponse(APIResponse):
    """Liveness probe response."""

    status: HealthStatus = Field(..., description="Overall service health status")
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(UTC),
        description="Health check timestamp",
    )
    version: str = Field(..., description="Service version")
    environment: str = Field(..., description="Deployment environment")


class ReadinessResponse(HealthResponse):
    """Readiness probe response with dependency status."""

    checks: dict[str, HealthCheckItem] = Field(
        default_factory=dict,
        description="Status of external dependencies",
    )
