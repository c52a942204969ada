"""Integration test fixtures.

The application is driven through httpx's ASGI transport. The lifespan does
not run there, so fixtures install the auth provider and a RecipeService
backed by the in-memory repository on ``app.state`` directly.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from httpx import ASGITransport, AsyncClient

from recipebox.factory import create_app


if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from fastapi import FastAPI

    from recipebox.auth.providers import HeaderAuthProvider
    from recipebox.core.config import Settings
    from recipebox.services.recipes import RecipeService


pytestmark = pytest.mark.integration

OWNER = {"X-User-ID": "owner-1", "X-User-Roles": "user"}
OTHER = {"X-User-ID": "other-2", "X-User-Roles": "user"}
ADMIN = {"X-User-ID": "admin-9", "X-User-Roles": "admin"}


@pytest.fixture
def app(
    test_settings: Settings,
    recipe_service: RecipeService,
    header_auth: HeaderAuthProvider,
) -> FastAPI:
    app = create_app(test_settings)
    app.state.recipe_service = recipe_service
    return app


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
