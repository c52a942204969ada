"""Unit tests for HTTP middleware."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from recipebox.core.middleware import (
    RequestIDMiddleware,
    SecurityHeadersMiddleware,
    TimingMiddleware,
)


if TYPE_CHECKING:
    from collections.abc import AsyncGenerator


pytestmark = pytest.mark.unit


@pytest.fixture
async def client() -> AsyncGenerator[AsyncClient]:
    app = FastAPI()
    app.add_middleware(TimingMiddleware)
    app.add_middleware(RequestIDMiddleware)
    app.add_middleware(SecurityHeadersMiddleware, api_prefix="/api/")

    @app.get("/api/thing")
    async def thing() -> dict[str, bool]:
        return {"ok": True}

    @app.get("/uploads/photo.png")
    async def photo() -> dict[str, bool]:
        return {"ok": True}

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


class TestRequestIDMiddleware:
    """Tests for RequestIDMiddleware."""

    async def test_generates_id(self, client: AsyncClient) -> None:
        response = await client.get("/api/thing")
        assert len(response.headers["X-Request-ID"]) == 32

    async def test_propagates_incoming_id(self, client: AsyncClient) -> None:
        response = await client.get("/api/thing", headers={"X-Request-ID": "abc-123"})
        assert response.headers["X-Request-ID"] == "abc-123"

    async def test_replaces_oversized_id(self, client: AsyncClient) -> None:
        response = await client.get("/api/thing", headers={"X-Request-ID": "x" * 200})
        assert response.headers["X-Request-ID"] != "x" * 200


class TestSecurityHeadersMiddleware:
    """Tests for SecurityHeadersMiddleware."""

    async def test_api_responses_not_cached(self, client: AsyncClient) -> None:
        response = await client.get("/api/thing")

        assert response.headers["X-Content-Type-Options"] == "nosniff"
        assert response.headers["X-Frame-Options"] == "DENY"
        assert response.headers["Cache-Control"] == "no-store"

    async def test_other_paths_cacheable(self, client: AsyncClient) -> None:
        response = await client.get("/uploads/photo.png")

        assert "Cache-Control" not in response.headers
        assert "Content-Security-Policy" in response.headers


class TestTimingMiddleware:
    """Tests for TimingMiddleware."""

    async def test_adds_process_time(self, client: AsyncClient) -> None:
        response = await client.get("/api/thing")
        assert response.headers["X-Process-Time"].endswith("ms")
