"""Integration tests for health API endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import AsyncMock, patch

import pytest


if TYPE_CHECKING:
    from httpx import AsyncClient


pytestmark = pytest.mark.integration


class TestHealthEndpoint:
    """Tests for GET /health."""

    async def test_health_returns_healthy(self, client: AsyncClient) -> None:
        response = await client.get("/api/v1/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["environment"] == "test"
        assert "version" in data
        assert "timestamp" in data


class TestReadinessEndpoint:
    """Tests for GET /ready."""

    async def test_not_ready_without_database(self, client: AsyncClient) -> None:
        response = await client.get("/api/v1/ready")

        assert response.status_code == 503
        data = response.json()
        assert data["status"] == "unhealthy"
        assert data["checks"]["database"]["message"] == "not_initialized"

    async def test_ready_with_database(self, client: AsyncClient) -> None:
        with patch(
            "recipebox.api.v1.endpoints.health.check_database_health",
            AsyncMock(return_value={"database": "healthy"}),
        ):
            response = await client.get("/api/v1/ready")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["checks"]["database"]["status"] == "healthy"
        assert "responseTimeMs" in data["checks"]["database"]


class TestRootEndpoint:
    """Tests for GET /."""

    async def test_root_returns_service_info(self, client: AsyncClient) -> None:
        response = await client.get("/")

        assert response.status_code == 200
        data = response.json()
        assert data["service"] == "Recipe Box Service"
        assert data["docs"] == "/docs"

    async def test_security_headers(self, client: AsyncClient) -> None:
        response = await client.get("/api/v1/health")

        assert response.headers["X-Content-Type-Options"] == "nosniff"
        assert response.headers["Cache-Control"] == "no-store"
        assert "X-Request-ID" in response.headers
