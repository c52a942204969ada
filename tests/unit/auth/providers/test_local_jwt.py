"""Unit tests for LocalJWTAuthProvider."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest
from jose import jwt

from recipebox.auth.providers.exceptions import (
    AuthenticationError,
    ConfigurationError,
    TokenExpiredError,
    TokenInvalidError,
)
from recipebox.auth.providers.local_jwt import LocalJWTAuthProvider


pytestmark = pytest.mark.unit

SECRET = "local-jwt-test-secret"  # noqa: S105


def _token(secret: str = SECRET, **claims: object) -> str:
    now = datetime.now(UTC)
    payload = {
        "sub": "user-1",
        "type": "access",
        "roles": ["chef"],
        "permissions": [],
        "iat": int(now.timestamp()),
        "exp": int((now + timedelta(minutes=5)).timestamp()),
    }
    payload.update(claims)
    return jwt.encode({k: v for k, v in payload.items() if v is not None}, secret)


class TestLocalJWTAuthProvider:
    """Tests for LocalJWTAuthProvider."""

    @pytest.fixture
    def provider(self) -> LocalJWTAuthProvider:
        return LocalJWTAuthProvider(secret_key=SECRET)

    async def test_valid_token(self, provider: LocalJWTAuthProvider) -> None:
        result = await provider.validate_token(_token())

        assert result.user_id == "user-1"
        assert result.roles == ["chef"]
        assert result.token_type == "access"
        assert result.expires_at is not None

    async def test_empty_token(self, provider: LocalJWTAuthProvider) -> None:
        with pytest.raises(AuthenticationError, match="Not authorized"):
            await provider.validate_token("")

    async def test_expired_token(self, provider: LocalJWTAuthProvider) -> None:
        past = int((datetime.now(UTC) - timedelta(hours=1)).timestamp())

        with pytest.raises(TokenExpiredError):
            await provider.validate_token(_token(exp=past))

    async def test_wrong_secret(self, provider: LocalJWTAuthProvider) -> None:
        with pytest.raises(TokenInvalidError, match="Invalid token"):
            await provider.validate_token(_token(secret="other-secret"))

    async def test_garbage_token(self, provider: LocalJWTAuthProvider) -> None:
        with pytest.raises(TokenInvalidError):
            await provider.validate_token("not-a-jwt")

    async def test_refresh_token_rejected(self, provider: LocalJWTAuthProvider) -> None:
        with pytest.raises(TokenInvalidError, match="Invalid token type"):
            await provider.validate_token(_token(type="refresh"))

    async def test_missing_subject(self, provider: LocalJWTAuthProvider) -> None:
        with pytest.raises(TokenInvalidError, match="sub"):
            await provider.validate_token(_token(sub=None))

    async def test_issuer_mismatch(self) -> None:
        provider = LocalJWTAuthProvider(secret_key=SECRET, issuer="recipebox")

        with pytest.raises(TokenInvalidError):
            await provider.validate_token(_token(iss="someone-else"))

    async def test_initialize_requires_secret(self) -> None:
        with pytest.raises(ConfigurationError):
            await LocalJWTAuthProvider(secret_key="").initialize()
