"""Authentication provider protocol definition."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable


if TYPE_CHECKING:
    from starlette.requests import Request

    from recipebox.auth.providers.models import AuthResult


@runtime_checkable
class AuthProvider(Protocol):
    """Interface every identity source implements.

    A provider turns the incoming credentials (a bearer token, gateway
    headers, or nothing at all) into an ``AuthResult``.
    """

    @property
    def provider_name(self) -> str:
        """Short name used in logs, e.g. 'local_jwt' or 'header'."""
        ...

    async def validate_token(
        self,
        token: str,
        request: Request | None = None,
    ) -> AuthResult:
        """Validate the credentials of a request.

        Args:
            token: Bearer token, empty when the request carried none.
            request: The request, for providers that read headers.

        Raises:
            TokenExpiredError: If the token has expired.
            TokenInvalidError: If the token is malformed or signature fails.
            AuthenticationError: For any other authentication failure.
        """
        ...

    async def initialize(self) -> None:
        """Validate configuration at startup.

        Raises:
            ConfigurationError: If the provider is misconfigured.
        """
        ...

    async def shutdown(self) -> None:
        """Release provider resources at shutdown."""
        ...
