"""Header-based authentication provider.

Trusts identity headers set by an upstream gateway. Only safe behind a
gateway that strips these headers from client requests, or in local
development and tests.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from recipebox.auth.permissions import Role
from recipebox.auth.providers.exceptions import AuthenticationError
from recipebox.auth.providers.models import AuthResult
from recipebox.observability.logging import get_logger


if TYPE_CHECKING:
    from starlette.requests import Request

logger = get_logger(__name__)


def _split_header(value: str) -> list[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


class HeaderAuthProvider:
    """Reads user id, roles and permissions from request headers.

    Roles and permissions are comma-separated. A request without roles
    gets ``default_roles``; a request without a user id is rejected.
    """

    def __init__(
        self,
        user_id_header: str = "X-User-ID",
        roles_header: str = "X-User-Roles",
        permissions_header: str = "X-User-Permissions",
        default_roles: list[str] | None = None,
    ) -> None:
        self.user_id_header = user_id_header
        self.roles_header = roles_header
        self.permissions_header = permissions_header
        self.default_roles = default_roles or [Role.USER.value]

    @property
    def provider_name(self) -> str:
        return "header"

    async def validate_token(
        self,
        _token: str,
        request: Request | None = None,
    ) -> AuthResult:
        """Build the identity from headers; the token is ignored.

        Raises:
            AuthenticationError: If there is no request or no user id header.
        """
        if request is None:
            msg = "HeaderAuthProvider requires request object for header access"
            raise AuthenticationError(msg)

        user_id = request.headers.get(self.user_id_header, "").strip()
        if not user_id:
            msg = f"Missing required header: {self.user_id_header}"
            raise AuthenticationError(msg)

        roles = _split_header(request.headers.get(self.roles_header, ""))
        permissions = _split_header(request.headers.get(self.permissions_header, ""))

        logger.debug("Authenticated via headers", user_id=user_id, roles=roles)

        return AuthResult(
            user_id=user_id,
            roles=roles or self.default_roles.copy(),
            permissions=permissions,
            token_type="header",  # noqa: S106 - not a password
            raw_claims={"source": "headers"},
        )

    async def initialize(self) -> None:
        logger.info(
            "HeaderAuthProvider initialized",
            user_id_header=self.user_id_header,
            roles_header=self.roles_header,
        )
        logger.warning(
            "HeaderAuthProvider is enabled - ensure this is only used in "
            "development/testing or behind a trusted gateway"
        )

    async def shutdown(self) -> None:
        logger.debug("HeaderAuthProvider shutdown")
