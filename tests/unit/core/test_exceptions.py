"""Unit tests for exception classes and handlers."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from pydantic import BaseModel

from recipebox.core.exceptions import (
    NotFoundException,
    UnauthorizedException,
    UploadException,
    ValidationException,
    setup_exception_handlers,
    validation_details,
)


if TYPE_CHECKING:
    from collections.abc import AsyncGenerator


pytestmark = pytest.mark.unit


class _Body(BaseModel):
    rating: int


@pytest.fixture
def app() -> FastAPI:
    app = FastAPI()
    setup_exception_handlers(app)

    @app.get("/missing")
    async def missing() -> None:
        raise NotFoundException("Recipe", "abc")

    @app.get("/not-owner")
    async def not_owner() -> None:
        raise UnauthorizedException("User u2 is not authorized to update this recipe")

    @app.get("/upload")
    async def upload() -> None:
        raise UploadException("Problem with file upload", status_code=500)

    @app.post("/body")
    async def body(payload: _Body) -> dict[str, int]:
        return {"rating": payload.rating}

    @app.get("/boom")
    async def boom() -> None:
        msg = "db password is hunter2"
        raise RuntimeError(msg)

    return app


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient]:
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


class TestExceptionClasses:
    """Tests for exception attributes."""

    def test_not_found_message(self) -> None:
        exc = NotFoundException("Recipe", 42)

        assert exc.status_code == 404
        assert exc.message == "Recipe not found with id of 42"

    def test_validation_exception(self) -> None:
        details = validation_details([{"loc": ("body", "rating"), "msg": "too big"}])
        exc = ValidationException("bad", details=details)

        assert exc.status_code == 400
        assert exc.details is not None
        assert exc.details[0].field == "body.rating"


class TestExceptionHandlers:
    """Tests for the JSON error bodies."""

    async def test_not_found(self, client: AsyncClient) -> None:
        response = await client.get("/missing")

        assert response.status_code == 404
        assert response.json() == {
            "success": False,
            "error": "NOT_FOUND",
            "message": "Recipe not found with id of abc",
        }

    async def test_unauthorized(self, client: AsyncClient) -> None:
        response = await client.get("/not-owner")

        assert response.status_code == 401
        assert response.json()["error"] == "UNAUTHORIZED"

    async def test_upload_status(self, client: AsyncClient) -> None:
        response = await client.get("/upload")

        assert response.status_code == 500
        assert response.json()["error"] == "UPLOAD_FAILED"

    async def test_request_validation(self, client: AsyncClient) -> None:
        response = await client.post("/body", json={"rating": "five"})

        assert response.status_code == 422
        body = response.json()
        assert body["success"] is False
        assert body["error"] == "VALIDATION_ERROR"
        assert body["details"][0]["field"] == "body.rating"

    async def test_unknown_route(self, client: AsyncClient) -> None:
        response = await client.get("/nowhere")

        assert response.status_code == 404
        assert response.json()["error"] == "HTTP_ERROR"

    async def test_unhandled_error(self, client: AsyncClient) -> None:
        response = await client.get("/boom")

        assert response.status_code == 500
        body = response.json()
        assert body["error"] == "INTERNAL_SERVER_ERROR"
        assert body["message"] == "An unexpected error occurred"
        assert "hunter2" not in response.text
