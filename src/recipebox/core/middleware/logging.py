"""Request logging middleware.

Binds method, path and client ip to the logging context and logs one line
when a request starts and one when it completes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from recipebox.observability.logging import bind_context, get_logger


if TYPE_CHECKING:
    from collections.abc import Iterable

    from starlette.requests import Request
    from starlette.responses import Response
    from starlette.types import ASGIApp

logger = get_logger(__name__)


def get_client_ip(request: Request) -> str:
    """Client address, preferring the proxy headers when present."""
    forwarded_for = request.headers.get("x-forwarded-for")
    if forwarded_for:
        # First entry is the original client
        return forwarded_for.split(",")[0].strip()

    real_ip = request.headers.get("x-real-ip")
    if real_ip:
        return real_ip

    if request.client:
        return request.client.host
    return "unknown"


class LoggingMiddleware(BaseHTTPMiddleware):
    """Structured request/response logging."""

    def __init__(
        self,
        app: ASGIApp,
        *,
        exclude_paths: Iterable[str] = ("/health", "/ready", "/metrics"),
    ) -> None:
        super().__init__(app)
        self.exclude_paths = tuple(exclude_paths)

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        if request.url.path.endswith(self.exclude_paths):
            return await call_next(request)

        bind_context(
            method=request.method,
            path=request.url.path,
            client_ip=get_client_ip(request),
        )
        logger.info(
            "Request started",
            query_params=str(request.query_params) if request.query_params else None,
        )

        response = await call_next(request)

        logger.info("Request completed", status_code=response.status_code)
        return response
