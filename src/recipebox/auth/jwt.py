"""JWT access token issuing.

Tokens are issued by an external identity service in production. This
helper signs tokens with the same claims for local development and tests.
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING, Any

from jose import jwt
from pydantic import BaseModel, Field

from recipebox.auth.providers.factory import get_jwt_secret
from recipebox.core.config import get_settings


if TYPE_CHECKING:
    from recipebox.core.config import Settings


class TokenPayload(BaseModel):
    """JWT token payload model."""

    sub: str  # Subject (user ID)
    exp: datetime  # Expiration time
    iat: datetime  # Issued at
    type: str = "access"
    roles: list[str] = Field(default_factory=list)
    permissions: list[str] = Field(default_factory=list)

    def encode(self, settings: Settings | None = None) -> str:
        """Sign this payload with the configured secret and algorithm."""
        settings = settings or get_settings()
        return jwt.encode(
            self.model_dump(mode="json") | {
                "exp": int(self.exp.timestamp()),
                "iat": int(self.iat.timestamp()),
            },
            get_jwt_secret(settings),
            algorithm=settings.auth.jwt.algorithm,
        )


def create_access_token(
    subject: str,
    *,
    roles: list[str] | None = None,
    permissions: list[str] | None = None,
    expires_delta: timedelta | None = None,
    extra_claims: dict[str, Any] | None = None,
    settings: Settings | None = None,
) -> str:
    """Create a signed access token.

    Args:
        subject: The subject of the token (the user ID).
        roles: User roles for RBAC.
        permissions: Direct permissions granted to the user.
        expires_delta: Custom lifetime. Defaults to
            ``auth.jwt.access_token_expire_minutes``.
        extra_claims: Additional claims to include in the token.
        settings: Settings to sign with. Defaults to the cached settings.

    Returns:
        Encoded JWT token string.
    """
    settings = settings or get_settings()

    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.auth.jwt.access_token_expire_minutes)

    now = datetime.now(UTC)
    payload: dict[str, Any] = {
        "sub": subject,
        "exp": int((now + expires_delta).timestamp()),
        "iat": int(now.timestamp()),
        "type": "access",
        "roles": roles or [],
        "permissions": permissions or [],
    }
    if extra_claims:
        payload.update(extra_claims)

    return jwt.encode(
        payload,
        get_jwt_secret(settings),
        algorithm=settings.auth.jwt.algorithm,
    )
