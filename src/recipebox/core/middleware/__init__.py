"""Custom middleware components."""

from recipebox.core.middleware.logging import LoggingMiddleware
from recipebox.core.middleware.request_id import RequestIDMiddleware
from recipebox.core.middleware.security_headers import SecurityHeadersMiddleware
from recipebox.core.middleware.timing import TimingMiddleware


__all__ = [
    "LoggingMiddleware",
    "RequestIDMiddleware",
    "SecurityHeadersMiddleware",
    "TimingMiddleware",
]
