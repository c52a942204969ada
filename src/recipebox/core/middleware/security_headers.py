"""Security headers middleware."""

from __future__ import annotations

from typing import TYPE_CHECKING

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint


if TYPE_CHECKING:
    from starlette.requests import Request
    from starlette.responses import Response
    from starlette.types import ASGIApp


# Swagger UI needs inline scripts and styles
DEFAULT_CSP = (
    "default-src 'self'; "
    "script-src 'self' 'unsafe-inline'; "
    "style-src 'self' 'unsafe-inline'; "
    "img-src 'self' data: https:; "
    "frame-ancestors 'none'; "
    "base-uri 'self'; "
    "form-action 'self'"
)

_STATIC_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Strict-Transport-Security": "max-age=31536000; includeSubDomains",
    "Referrer-Policy": "strict-origin-when-cross-origin",
    "Permissions-Policy": "camera=(), geolocation=(), microphone=(), payment=()",
}


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Add hardening headers to every response.

    API responses are additionally marked as non-cacheable; uploaded photos
    under other prefixes stay cacheable.
    """

    def __init__(
        self,
        app: ASGIApp,
        *,
        api_prefix: str = "/api/",
        content_security_policy: str = DEFAULT_CSP,
    ) -> None:
        super().__init__(app)
        self.api_prefix = api_prefix
        self.content_security_policy = content_security_policy

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        response = await call_next(request)

        response.headers.update(_STATIC_HEADERS)
        response.headers["Content-Security-Policy"] = self.content_security_policy

        if request.url.path.startswith(self.api_prefix):
            response.headers["Cache-Control"] = "no-store"
        return response
