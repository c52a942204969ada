"""Local JWT authentication provider.

Validates bearer tokens signed with the shared ``JWT_SECRET_KEY``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from jose import jwt
from jose.exceptions import ExpiredSignatureError, JWTClaimsError, JWTError

from recipebox.auth.providers.exceptions import (
    AuthenticationError,
    ConfigurationError,
    TokenExpiredError,
    TokenInvalidError,
)
from recipebox.auth.providers.models import AuthResult
from recipebox.observability.logging import get_logger


if TYPE_CHECKING:
    from starlette.requests import Request

logger = get_logger(__name__)


class LocalJWTAuthProvider:
    """Validates JWTs locally using the configured secret key.

    Attributes:
        secret_key: Shared HMAC secret.
        algorithm: JWT signing algorithm (default: HS256).
        issuer: Expected 'iss' claim value (optional).
        audience: Expected 'aud' claim values (optional).
    """

    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        issuer: str | None = None,
        audience: list[str] | None = None,
    ) -> None:
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.issuer = issuer
        self.audience = audience if audience else None

    @property
    def provider_name(self) -> str:
        return "local_jwt"

    async def validate_token(
        self,
        token: str,
        _request: Request | None = None,
    ) -> AuthResult:
        """Decode and verify an access token.

        Raises:
            AuthenticationError: If no token was sent.
            TokenExpiredError: If the token has expired.
            TokenInvalidError: If the token is malformed, has the wrong type,
                lacks a subject, or fails signature/claims checks.
        """
        if not token:
            msg = "Not authorized to access this route"
            raise AuthenticationError(msg)

        decode_kwargs: dict[str, Any] = {"algorithms": [self.algorithm]}
        if self.issuer:
            decode_kwargs["issuer"] = self.issuer
        if self.audience:
            decode_kwargs["audience"] = self.audience
        else:
            decode_kwargs["options"] = {"verify_aud": False}

        try:
            payload = jwt.decode(token, self.secret_key, **decode_kwargs)
        except ExpiredSignatureError as e:
            logger.debug("Token expired during local validation")
            msg = "Token has expired"
            raise TokenExpiredError(msg) from e
        except JWTClaimsError as e:
            # Issuer or audience mismatch
            logger.warning("JWT claims validation failed", error=str(e))
            raise TokenInvalidError(str(e)) from e
        except JWTError as e:
            logger.warning("JWT validation failed", error=str(e))
            msg = "Invalid token"
            raise TokenInvalidError(msg) from e

        token_type = payload.get("type", "access")
        if token_type != "access":
            msg = f"Invalid token type: {token_type}. Expected 'access'."
            raise TokenInvalidError(msg)

        user_id = payload.get("sub")
        if not user_id:
            msg = "Token missing 'sub' claim"
            raise TokenInvalidError(msg)

        return AuthResult(
            user_id=str(user_id),
            roles=list(payload.get("roles", [])),
            permissions=list(payload.get("permissions", [])),
            token_type=token_type,
            expires_at=payload.get("exp"),
            raw_claims=payload,
        )

    async def initialize(self) -> None:
        """Refuse to start without a secret key."""
        if not self.secret_key:
            msg = "JWT secret key is not configured"
            raise ConfigurationError(msg)

        logger.info(
            "LocalJWTAuthProvider initialized",
            algorithm=self.algorithm,
            issuer_validation=self.issuer is not None,
            audience_validation=self.audience is not None,
        )

    async def shutdown(self) -> None:
        logger.debug("LocalJWTAuthProvider shutdown")
