"""Per-recipe ownership check.

Separate from RBAC: a caller may hold ``recipe:update`` and still not be
allowed to touch a recipe that belongs to someone else.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from recipebox.auth.permissions import Permission
from recipebox.core.exceptions import UnauthorizedException
from recipebox.observability.logging import get_logger


if TYPE_CHECKING:
    from recipebox.auth.dependencies import CurrentUser
    from recipebox.services.recipes.models import Recipe

logger = get_logger(__name__)


def can_modify(recipe: Recipe, user: CurrentUser) -> bool:
    """Owners and moderators (the admin role) may modify a recipe."""
    return recipe.user == user.id or user.has_permission(Permission.RECIPE_MODERATE)


def ensure_can_modify(recipe: Recipe, user: CurrentUser, action: str) -> None:
    """Raise unless ``user`` may perform ``action`` on ``recipe``.

    Raises:
        UnauthorizedException: 401 for anyone but the owner or an admin.
    """
    if can_modify(recipe, user):
        return

    logger.warning(
        "Recipe ownership check failed",
        recipe_id=recipe.id,
        owner_id=recipe.user,
        user_id=user.id,
        action=action,
    )
    raise UnauthorizedException(f"User {user.id} is not authorized to {action} this recipe")
