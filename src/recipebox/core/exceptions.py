"""Custom exceptions and exception handlers.

This module provides structured exception handling with:
- Custom exception classes for the service's failure taxonomy
- FastAPI exception handlers for consistent error responses
- Structured error response models
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from fastapi import FastAPI, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import ORJSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from recipebox.observability.logging import get_logger
from recipebox.schemas.base import APIResponse


if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from fastapi import Request

logger = get_logger(__name__)


class ErrorDetail(APIResponse):
    """Structured error detail for validation errors."""

    code: str
    message: str
    field: str | None = None


class ErrorResponse(APIResponse):
    """Failure envelope returned for every error."""

    success: bool = False
    error: str
    message: str
    details: list[ErrorDetail] | None = None
    request_id: str | None = None


def validation_details(errors: Iterable[Mapping[str, Any]]) -> list[ErrorDetail]:
    """Convert pydantic error dicts into ErrorDetail entries."""
    return [
        ErrorDetail(
            code="VALIDATION_ERROR",
            message=error["msg"],
            field=".".join(str(loc) for loc in error["loc"]) or None,
        )
        for error in errors
    ]


class AppException(Exception):
    """Base application exception.

    All custom exceptions should inherit from this class
    for consistent error handling.
    """

    def __init__(
        self,
        status_code: int,
        error: str,
        message: str,
        details: list[ErrorDetail] | None = None,
    ) -> None:
        self.status_code = status_code
        self.error = error
        self.message = message
        self.details = details
        super().__init__(message)


class NotFoundException(AppException):
    """Referenced resource does not exist."""

    def __init__(self, resource: str, identifier: Any) -> None:
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            error="NOT_FOUND",
            message=f"{resource} not found with id of {identifier}",
        )


class UnauthorizedException(AppException):
    """Actor is not allowed to perform the operation on this resource."""

    def __init__(self, message: str = "Not authorized to access this route") -> None:
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            error="UNAUTHORIZED",
            message=message,
        )


class ForbiddenException(AppException):
    """Actor's role lacks the permission required by the route."""

    def __init__(self, message: str = "Insufficient permissions") -> None:
        super().__init__(
            status_code=status.HTTP_403_FORBIDDEN,
            error="FORBIDDEN",
            message=message,
        )


class ValidationException(AppException):
    """A domain rule was violated while applying a mutation."""

    def __init__(
        self,
        message: str,
        details: list[ErrorDetail] | None = None,
    ) -> None:
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            error="VALIDATION_ERROR",
            message=message,
            details=details,
        )


class UploadException(AppException):
    """Photo upload was rejected or could not be stored."""

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_400_BAD_REQUEST,
    ) -> None:
        super().__init__(
            status_code=status_code,
            error="UPLOAD_FAILED",
            message=message,
        )


class ServiceUnavailableException(AppException):
    """Service unavailable exception."""

    def __init__(self, message: str = "Service temporarily unavailable") -> None:
        super().__init__(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            error="SERVICE_UNAVAILABLE",
            message=message,
        )


def _get_request_id(request: Request) -> str | None:
    """Extract request ID from request state."""
    return getattr(request.state, "request_id", None)


def _error_response(
    request: Request,
    status_code: int,
    body: ErrorResponse,
    headers: Mapping[str, str] | None = None,
) -> ORJSONResponse:
    body.request_id = _get_request_id(request)
    return ORJSONResponse(
        status_code=status_code,
        content=body.model_dump(exclude_none=True),
        headers=dict(headers) if headers else None,
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """Register exception handlers with the FastAPI application."""

    @app.exception_handler(AppException)
    async def app_exception_handler(
        request: Request,
        exc: AppException,
    ) -> ORJSONResponse:
        """Handle custom application exceptions."""
        return _error_response(
            request,
            exc.status_code,
            ErrorResponse(error=exc.error, message=exc.message, details=exc.details),
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request,
        exc: StarletteHTTPException,
    ) -> ORJSONResponse:
        """Handle Starlette HTTP exceptions."""
        return _error_response(
            request,
            exc.status_code,
            ErrorResponse(error="HTTP_ERROR", message=str(exc.detail)),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> ORJSONResponse:
        """Handle request body/query validation errors."""
        return _error_response(
            request,
            status.HTTP_422_UNPROCESSABLE_ENTITY,
            ErrorResponse(
                error="VALIDATION_ERROR",
                message="Request validation failed",
                details=validation_details(exc.errors()),
            ),
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request,
        exc: Exception,
    ) -> ORJSONResponse:
        """Handle unexpected exceptions."""
        logger.opt(exception=exc).error("Unhandled exception")
        return _error_response(
            request,
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            ErrorResponse(
                error="INTERNAL_SERVER_ERROR",
                message="An unexpected error occurred",
            ),
        )
