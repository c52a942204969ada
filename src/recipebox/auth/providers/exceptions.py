"""Errors raised while resolving the caller identity.

The dependency layer turns these into 401 responses.
"""

from __future__ import annotations


class AuthProviderError(Exception):
    """Root of the provider error hierarchy."""


class AuthenticationError(AuthProviderError):
    """Credentials were missing or could not be accepted."""


class TokenExpiredError(AuthenticationError):
    """The bearer token is past its ``exp`` claim."""


class TokenInvalidError(AuthenticationError):
    """The bearer token is malformed or its signature does not verify."""


class ConfigurationError(AuthProviderError):
    """The selected auth mode is missing a required setting."""
