"""Unit tests for access token issuing."""

from __future__ import annotations

from datetime import timedelta

import pytest
from jose import jwt

from recipebox.auth.jwt import create_access_token
from recipebox.core.config import Settings
from tests.factories import TokenPayloadFactory


pytestmark = pytest.mark.unit

SECRET = "unit-test-secret"  # noqa: S105


@pytest.fixture
def jwt_settings() -> Settings:
    return Settings(APP_ENV="test", JWT_SECRET_KEY=SECRET, auth={"mode": "local_jwt"})


class TestCreateAccessToken:
    """Tests for create_access_token."""

    def test_contains_claims(self, jwt_settings: Settings) -> None:
        token = create_access_token(
            "user-1",
            roles=["chef"],
            permissions=["recipe:moderate"],
            settings=jwt_settings,
        )

        claims = jwt.decode(token, SECRET, algorithms=["HS256"])
        assert claims["sub"] == "user-1"
        assert claims["type"] == "access"
        assert claims["roles"] == ["chef"]
        assert claims["permissions"] == ["recipe:moderate"]
        assert claims["exp"] - claims["iat"] == 30 * 60

    def test_custom_expiry_and_extra_claims(self, jwt_settings: Settings) -> None:
        token = create_access_token(
            "user-1",
            expires_delta=timedelta(minutes=5),
            extra_claims={"iss": "recipebox"},
            settings=jwt_settings,
        )

        claims = jwt.decode(token, SECRET, algorithms=["HS256"])
        assert claims["exp"] - claims["iat"] == 5 * 60
        assert claims["iss"] == "recipebox"


class TestTokenPayload:
    """Tests for TokenPayload.encode."""

    def test_encode_round_trips_subject(self, jwt_settings: Settings) -> None:
        payload = TokenPayloadFactory.build(sub="user-42", roles=["admin"])

        claims = jwt.decode(payload.encode(jwt_settings), SECRET, algorithms=["HS256"])

        assert claims["sub"] == "user-42"
        assert claims["roles"] == ["admin"]
        assert isinstance(claims["exp"], int)
