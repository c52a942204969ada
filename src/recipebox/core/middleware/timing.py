"""Request timing middleware.

Adds ``X-Process-Time`` to every response and warns about slow requests.
"""

from __future__ import annotations

import time
from typing import TYPE_CHECKING

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from recipebox.observability.logging import get_logger


if TYPE_CHECKING:
    from starlette.requests import Request
    from starlette.responses import Response
    from starlette.types import ASGIApp

logger = get_logger(__name__)

SLOW_REQUEST_THRESHOLD = 1.0  # seconds


class TimingMiddleware(BaseHTTPMiddleware):
    """Measure request processing time."""

    def __init__(
        self,
        app: ASGIApp,
        header_name: str = "X-Process-Time",
        slow_threshold: float = SLOW_REQUEST_THRESHOLD,
    ) -> None:
        super().__init__(app)
        self.header_name = header_name
        self.slow_threshold = slow_threshold

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        start = time.perf_counter()
        response = await call_next(request)
        elapsed = time.perf_counter() - start

        elapsed_ms = round(elapsed * 1000, 2)
        response.headers[self.header_name] = f"{elapsed_ms}ms"

        if elapsed > self.slow_threshold:
            logger.warning(
                "Slow request detected",
                method=request.method,
                path=request.url.path,
                process_time_ms=elapsed_ms,
            )
        return response
