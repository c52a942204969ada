"""FastAPI security dependencies.

This module provides reusable dependencies for authentication and authorization
in FastAPI route handlers.

The dependencies use the configured auth provider (local_jwt, header, or
disabled) to establish the caller's identity.
"""

from typing import Annotated

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from pydantic import BaseModel, Field

from recipebox.auth.permissions import Permission, has_permission
from recipebox.auth.providers import (
    AuthenticationError,
    AuthResult,
    TokenExpiredError,
    get_auth_provider,
)
from recipebox.core.exceptions import ForbiddenException, UnauthorizedException
from recipebox.observability.logging import bind_context, get_logger


logger = get_logger(__name__)

# Bearer token extraction only; validation happens in the provider
bearer_scheme = HTTPBearer(
    scheme_name="JWT",
    description="JWT Bearer token authentication",
    auto_error=False,
)


class CurrentUser(BaseModel):
    """The authenticated caller."""

    id: str
    roles: list[str] = Field(default_factory=list)
    permissions: list[str] = Field(default_factory=list)

    @classmethod
    def from_auth_result(cls, result: AuthResult) -> "CurrentUser":
        return cls(
            id=result.user_id,
            roles=result.roles,
            permissions=result.permissions,
        )

    def has_permission(self, permission: Permission | str) -> bool:
        """Check if user has a specific permission."""
        return has_permission(self.roles, self.permissions, permission)


async def get_auth_result(
    request: Request,
    credentials: Annotated[
        HTTPAuthorizationCredentials | None, Depends(bearer_scheme)
    ],
) -> AuthResult:
    """Validate the request's credentials with the configured provider.

    Raises:
        UnauthorizedException: If the credentials are missing or invalid.
    """
    token = credentials.credentials if credentials else ""

    try:
        provider = get_auth_provider()
        return await provider.validate_token(token, request)
    except TokenExpiredError:
        raise UnauthorizedException("Token has expired") from None
    except AuthenticationError as e:
        logger.debug("Authentication failed", error=str(e))
        raise UnauthorizedException(str(e) or "Not authorized to access this route") from None


async def get_current_user(
    auth_result: Annotated[AuthResult, Depends(get_auth_result)],
) -> CurrentUser:
    """Primary dependency for protected routes."""
    bind_context(user_id=auth_result.user_id)
    return CurrentUser.from_auth_result(auth_result)


class RequirePermissions:
    """Dependency class for requiring specific permissions.

    Usage:
        @router.post("/recipes")
        async def create_recipe(
            user: Annotated[
                CurrentUser, Depends(RequirePermissions(Permission.RECIPE_CREATE))
            ],
        ):
            ...
    """

    def __init__(self, *permissions: Permission | str) -> None:
        self.permissions = list(permissions)

    async def __call__(
        self,
        user: Annotated[CurrentUser, Depends(get_current_user)],
    ) -> CurrentUser:
        """Return the user if it holds every required permission.

        Raises:
            ForbiddenException: 403 if a permission is missing.
        """
        missing = [p for p in self.permissions if not user.has_permission(p)]
        if missing:
            logger.warning(
                "Permission denied",
                user_id=user.id,
                roles=user.roles,
                missing=[str(p) for p in missing],
            )
            raise ForbiddenException(
                f"User role is not authorized to access this route: {', '.join(missing)}"
            )
        return user
