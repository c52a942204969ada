"""Application lifespan event handlers.

Startup wires the process-wide resources (logging, auth provider, database
pool, recipe service) and shutdown releases them in reverse order.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from recipebox.auth.providers import initialize_auth_provider, shutdown_auth_provider
from recipebox.core.config import get_settings
from recipebox.database import (
    RecipeRepository,
    close_database_pool,
    ensure_schema,
    init_database_pool,
)
from recipebox.observability.logging import get_logger, setup_logging
from recipebox.services.recipes import RecipeService
from recipebox.storage import LocalPhotoStorage


if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from fastapi import FastAPI

    from recipebox.core.config import Settings

logger = get_logger(__name__)


async def _startup(app: FastAPI, settings: Settings) -> None:
    setup_logging(
        log_level=settings.logging.level,
        log_format=settings.logging.format,
        is_development=settings.is_development,
    )
    logger.info(
        "Starting application",
        app_name=settings.app.name,
        environment=settings.APP_ENV,
        debug=settings.app.debug,
    )

    # Auth and database are both required; failures abort startup
    try:
        await initialize_auth_provider(settings)
    except Exception:
        logger.exception("Failed to initialize auth provider")
        raise

    try:
        pool = await init_database_pool(settings)
        await ensure_schema(pool, settings.database.db_schema)
    except Exception:
        logger.exception("Failed to initialize database")
        raise

    app.state.recipe_service = RecipeService(
        repository=RecipeRepository(pool),
        storage=LocalPhotoStorage(settings.uploads.directory),
        settings=settings,
    )

    logger.info("Application startup complete")


async def _shutdown(app: FastAPI) -> None:
    logger.info("Shutting down application")

    app.state.recipe_service = None
    await close_database_pool()
    await shutdown_auth_provider()

    logger.info("Application shutdown complete")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Manage application lifespan events.

    Uses the settings the app was created with, falling back to the cached
    settings.
    """
    settings = getattr(app.state, "settings", None) or get_settings()
    await _startup(app, settings)
    try:
        yield
    finally:
        await _shutdown(app)
