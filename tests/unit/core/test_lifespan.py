"""Unit tests for application lifespan events."""

from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from recipebox.core.events import lifespan
from recipebox.factory import create_app
from recipebox.services.recipes import RecipeService


if TYPE_CHECKING:
    from recipebox.core.config import Settings


pytestmark = pytest.mark.unit

_MODULE = "recipebox.core.events.lifespan"


class TestLifespan:
    """Tests for startup and shutdown wiring."""

    async def test_startup_wires_service_and_shutdown_releases(
        self, test_settings: Settings
    ) -> None:
        app = create_app(test_settings)
        pool = MagicMock()

        with (
            patch(f"{_MODULE}.setup_logging"),
            patch(f"{_MODULE}.initialize_auth_provider", AsyncMock()) as init_auth,
            patch(f"{_MODULE}.init_database_pool", AsyncMock(return_value=pool)),
            patch(f"{_MODULE}.ensure_schema", AsyncMock()) as ensure_schema,
            patch(f"{_MODULE}.close_database_pool", AsyncMock()) as close_pool,
            patch(f"{_MODULE}.shutdown_auth_provider", AsyncMock()) as shutdown_auth,
        ):
            async with lifespan(app):
                assert isinstance(app.state.recipe_service, RecipeService)
                init_auth.assert_awaited_once_with(test_settings)
                ensure_schema.assert_awaited_once_with(
                    pool, test_settings.database.db_schema
                )

            assert app.state.recipe_service is None
            close_pool.assert_awaited_once()
            shutdown_auth.assert_awaited_once()

    async def test_database_failure_aborts_startup(self, test_settings: Settings) -> None:
        app = create_app(test_settings)

        with (
            patch(f"{_MODULE}.setup_logging"),
            patch(f"{_MODULE}.initialize_auth_provider", AsyncMock()),
            patch(f"{_MODULE}.init_database_pool", AsyncMock(side_effect=OSError("refused"))),
            pytest.raises(OSError, match="refused"),
        ):
            async with lifespan(app):
                pass

        assert app.state.recipe_service is None
