"""Authentication and authorization."""

from recipebox.auth.dependencies import (
    CurrentUser,
    RequirePermissions,
    get_auth_result,
    get_current_user,
)
from recipebox.auth.ownership import can_modify, ensure_can_modify
from recipebox.auth.permissions import Permission, Role


__all__ = [
    "CurrentUser",
    "Permission",
    "RequirePermissions",
    "Role",
    "can_modify",
    "ensure_can_modify",
    "get_auth_result",
    "get_current_user",
]
