"""Rate limiting using SlowAPI.

This module provides:
- Limiter construction from the ``rate_limiting`` settings
- A rate limit key function
- The 429 handler rendering the standard failure envelope
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import status
from fastapi.responses import ORJSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address

from recipebox.core.exceptions import ErrorResponse
from recipebox.observability.logging import get_logger


if TYPE_CHECKING:
    from fastapi import FastAPI
    from starlette.requests import Request

    from recipebox.core.config import Settings

logger = get_logger(__name__)


def rate_limit_key(request: Request) -> str:
    """Client address used as the rate limit bucket."""
    return str(get_remote_address(request))


def create_limiter(settings: Settings) -> Limiter:
    """Create the limiter applying the default limit to every route."""
    config = settings.rate_limiting
    return Limiter(
        key_func=rate_limit_key,
        default_limits=[config.default],
        storage_uri=config.storage_uri,
        strategy="fixed-window",
        headers_enabled=True,
        enabled=config.enabled,
    )


def rate_limit_exceeded_handler(
    request: Request,
    exc: Exception,
) -> ORJSONResponse:
    """Render a 429 in the standard failure envelope.

    Must stay synchronous: SlowAPIMiddleware replaces coroutine handlers
    with its own default one.
    """
    assert isinstance(exc, RateLimitExceeded)
    logger.warning(
        "Rate limit exceeded",
        path=request.url.path,
        method=request.method,
        client_ip=rate_limit_key(request),
        limit=str(exc.detail),
    )

    body = ErrorResponse(
        error="RATE_LIMITED",
        message=f"Too many requests. Limit: {exc.detail}",
        request_id=getattr(request.state, "request_id", None),
    )
    response = ORJSONResponse(
        status_code=status.HTTP_429_TOO_MANY_REQUESTS,
        content=body.model_dump(exclude_none=True),
    )
    return request.app.state.limiter._inject_headers(  # noqa: SLF001
        response, getattr(request.state, "view_rate_limit", None)
    )


def setup_rate_limiting(app: FastAPI, settings: Settings) -> Limiter:
    """Attach the limiter, its middleware and the 429 handler to ``app``."""
    limiter = create_limiter(settings)
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIMiddleware)

    logger.debug(
        "Rate limiting configured",
        enabled=settings.rate_limiting.enabled,
        default=settings.rate_limiting.default,
    )
    return limiter
