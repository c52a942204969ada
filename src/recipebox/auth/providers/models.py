"""Authentication provider models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class AuthResult(BaseModel):
    """Identity established by an auth provider.

    Attributes:
        user_id: Unique identifier of the caller ('sub' claim or header).
        roles: Role names, see ``recipebox.auth.permissions.Role``.
        permissions: Permissions granted directly, on top of the roles.
        token_type: What was validated (access, header, none).
        expires_at: Token expiration timestamp, if any.
        raw_claims: Original claims for auditing.
    """

    model_config = ConfigDict(frozen=True)

    user_id: str = Field(..., description="User identifier")
    roles: list[str] = Field(default_factory=list, description="User roles")
    permissions: list[str] = Field(default_factory=list, description="User permissions")
    token_type: str = Field(default="access", description="Type of validated token")
    expires_at: int | None = Field(default=None, description="Expiration timestamp")
    raw_claims: dict[str, Any] = Field(
        default_factory=dict,
        description="Original token claims",
    )
