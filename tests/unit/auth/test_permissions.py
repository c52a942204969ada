"""Unit tests for RBAC permissions."""

from __future__ import annotations

import pytest

from recipebox.auth.permissions import (
    Permission,
    Role,
    get_permissions_for_role,
    get_permissions_for_roles,
    has_permission,
)


pytestmark = pytest.mark.unit


class TestRolePermissions:
    """Tests for role to permission mapping."""

    @pytest.mark.parametrize("role", [Role.USER, Role.CHEF])
    def test_authors_cannot_moderate(self, role: Role) -> None:
        permissions = get_permissions_for_role(role)

        assert Permission.RECIPE_CREATE in permissions
        assert Permission.RECIPE_RATE in permissions
        assert Permission.RECIPE_FAVORITE in permissions
        assert Permission.RECIPE_MODERATE not in permissions

    def test_admin_has_everything(self) -> None:
        assert get_permissions_for_role(Role.ADMIN) == set(Permission)

    def test_role_by_name(self) -> None:
        assert get_permissions_for_role("admin") == set(Permission)

    def test_unknown_role_grants_nothing(self) -> None:
        assert get_permissions_for_role("publisher") == set()

    def test_roles_are_unioned(self) -> None:
        permissions = get_permissions_for_roles(["user", "admin"])
        assert Permission.RECIPE_MODERATE in permissions


class TestHasPermission:
    """Tests for permission checks."""

    def test_from_role(self) -> None:
        assert has_permission(["user"], [], Permission.RECIPE_RATE)

    def test_direct_permission(self) -> None:
        assert has_permission([], ["recipe:moderate"], Permission.RECIPE_MODERATE)

    def test_missing(self) -> None:
        assert not has_permission(["user"], [], Permission.RECIPE_MODERATE)
