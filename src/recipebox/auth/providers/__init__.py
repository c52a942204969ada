"""Authentication providers package.

Available providers:
- LocalJWTAuthProvider: Validates JWTs locally
- HeaderAuthProvider: Trusts identity headers from a gateway
- DisabledAuthProvider: Single anonymous user

Usage:
    from recipebox.auth.providers import get_auth_provider

    provider = get_auth_provider()
    result = await provider.validate_token(token, request)
"""

from recipebox.auth.providers.exceptions import (
    AuthenticationError,
    AuthProviderError,
    ConfigurationError,
    TokenExpiredError,
    TokenInvalidError,
)
from recipebox.auth.providers.factory import (
    DisabledAuthProvider,
    create_auth_provider,
    get_auth_provider,
    initialize_auth_provider,
    set_auth_provider,
    shutdown_auth_provider,
)
from recipebox.auth.providers.header import HeaderAuthProvider
from recipebox.auth.providers.local_jwt import LocalJWTAuthProvider
from recipebox.auth.providers.models import AuthResult
from recipebox.auth.providers.protocol import AuthProvider


__all__ = [
    "AuthProvider",
    "AuthProviderError",
    "AuthResult",
    "AuthenticationError",
    "ConfigurationError",
    "DisabledAuthProvider",
    "HeaderAuthProvider",
    "LocalJWTAuthProvider",
    "TokenExpiredError",
    "TokenInvalidError",
    "create_auth_provider",
    "get_auth_provider",
    "initialize_auth_provider",
    "set_auth_provider",
    "shutdown_auth_provider",
]
