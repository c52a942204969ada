"""Roles and the recipe actions they grant.

A role is a fixed set of permissions. Tokens may also carry permissions
directly.
Ownership of an individual recipe is checked separately, see
``recipebox.auth.ownership``.
"""

from __future__ import annotations

from enum import StrEnum


class Permission(StrEnum):
    """Recipe actions, named ``resource:action``."""

    RECIPE_READ = "recipe:read"
    RECIPE_CREATE = "recipe:create"
    RECIPE_UPDATE = "recipe:update"
    RECIPE_DELETE = "recipe:delete"
    RECIPE_RATE = "recipe:rate"
    RECIPE_FAVORITE = "recipe:favorite"

    # Modify any recipe regardless of owner
    RECIPE_MODERATE = "recipe:moderate"


class Role(StrEnum):
    """Roles a caller may hold. Only admin may moderate."""

    USER = "user"
    CHEF = "chef"
    ADMIN = "admin"


_AUTHOR_PERMISSIONS: frozenset[Permission] = frozenset(
    {
        Permission.RECIPE_READ,
        Permission.RECIPE_CREATE,
        Permission.RECIPE_UPDATE,
        Permission.RECIPE_DELETE,
        Permission.RECIPE_RATE,
        Permission.RECIPE_FAVORITE,
    }
)

ROLE_PERMISSIONS: dict[Role, frozenset[Permission]] = {
    Role.USER: _AUTHOR_PERMISSIONS,
    Role.CHEF: _AUTHOR_PERMISSIONS,
    Role.ADMIN: frozenset(Permission),
}


def get_permissions_for_role(role: Role | str) -> set[Permission]:
    """Permissions granted by ``role``. Unknown role names grant nothing."""
    if isinstance(role, str):
        try:
            role = Role(role)
        except ValueError:
            return set()

    return set(ROLE_PERMISSIONS.get(role, ()))


def get_permissions_for_roles(roles: list[Role | str]) -> set[Permission]:
    """Union of the permissions granted by ``roles``."""
    permissions: set[Permission] = set()
    for role in roles:
        permissions.update(get_permissions_for_role(role))
    return permissions


def has_permission(
    user_roles: list[str],
    user_permissions: list[str],
    required_permission: Permission | str,
) -> bool:
    """Whether ``required_permission`` is granted directly or by a role.

    Update and delete are additionally limited to the recipe owner by
    ``recipebox.auth.ownership``.
    """
    required = str(required_permission)

    if required in user_permissions:
        return True

    role_permissions = get_permissions_for_roles(user_roles)
    return required in {str(p) for p in role_permissions}

