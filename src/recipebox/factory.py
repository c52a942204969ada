"""Application factory for creating FastAPI instances.

This module provides the create_app factory function that:
- Configures the FastAPI application with appropriate settings
- Sets up middleware stack in the correct order
- Registers exception handlers
- Mounts API routers and the uploaded photo directory
- Configures metrics
"""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import ORJSONResponse
from fastapi.staticfiles import StaticFiles

from recipebox.api.v1.router import router as v1_router
from recipebox.core.config import Settings, get_settings
from recipebox.core.events import lifespan
from recipebox.core.exceptions import setup_exception_handlers
from recipebox.core.middleware import (
    LoggingMiddleware,
    RequestIDMiddleware,
    SecurityHeadersMiddleware,
    TimingMiddleware,
)
from recipebox.core.rate_limit import setup_rate_limiting
from recipebox.observability.metrics import setup_metrics


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure a FastAPI application instance.

    Args:
        settings: Optional settings override. If not provided, uses get_settings().

    Returns:
        Configured FastAPI application instance.
    """
    if settings is None:
        settings = get_settings()

    docs_enabled = settings.is_non_production
    app = FastAPI(
        title=settings.app.name,
        version=settings.app.version,
        description="Recipe sharing API: recipes, ratings, favorites and photos",
        lifespan=lifespan,
        default_response_class=ORJSONResponse,
        docs_url="/docs" if docs_enabled else None,
        redoc_url="/redoc" if docs_enabled else None,
        openapi_url="/openapi.json" if docs_enabled else None,
        debug=settings.app.debug,
    )

    # Read by the lifespan and the request dependencies
    app.state.settings = settings
    app.state.recipe_service = None

    setup_exception_handlers(app)
    _setup_middleware(app, settings)
    _setup_routers(app, settings)

    # After routes are mounted
    setup_metrics(app, settings)

    return app


def _setup_middleware(app: FastAPI, settings: Settings) -> None:
    """Configure middleware stack.

    The last middleware added runs first on the request. From the request's
    point of view the order is: security headers, request id, timing,
    logging, rate limiting, gzip, CORS.
    """
    if settings.api.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.api.cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
            expose_headers=["X-Request-ID", "X-Process-Time"],
        )

    app.add_middleware(GZipMiddleware, minimum_size=1000)
    setup_rate_limiting(app, settings)
    app.add_middleware(LoggingMiddleware)
    app.add_middleware(TimingMiddleware)
    app.add_middleware(RequestIDMiddleware)
    app.add_middleware(
        SecurityHeadersMiddleware,
        api_prefix=f"{settings.api.v1_prefix}/",
    )


def _setup_routers(app: FastAPI, settings: Settings) -> None:
    app.include_router(v1_router, prefix=settings.api.v1_prefix)

    # Uploaded photos; the directory is created on first upload
    app.mount(
        settings.uploads.url_prefix,
        StaticFiles(directory=settings.uploads.directory, check_dir=False),
        name="uploads",
    )

    @app.get("/", include_in_schema=False)
    async def root() -> dict[str, str]:
        """Basic service info."""
        return {
            "service": settings.app.name,
            "version": settings.app.version,
            "docs": "/docs" if settings.is_non_production else "disabled",
        }
