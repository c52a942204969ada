"""Route guards for recipe ownership."""

from typing import Annotated

from fastapi import Depends, Path

from recipebox.api.dependencies import get_recipe_service
from recipebox.auth.dependencies import CurrentUser, get_current_user
from recipebox.auth.ownership import ensure_can_modify
from recipebox.auth.permissions import Permission
from recipebox.core.exceptions import ForbiddenException
from recipebox.services.recipes import Recipe, RecipeService


class RecipeOwnerGuard:
    """Load the addressed recipe and allow only its owner or an admin.

    The recipe is loaded without counting a view and handed to the route.

    Usage:
        @router.delete("/recipes/{recipe_id}")
        async def delete_recipe(
            recipe: Annotated[
                Recipe, Depends(RecipeOwnerGuard("delete", Permission.RECIPE_DELETE))
            ],
        ):
            ...
    """

    def __init__(self, action: str, permission: Permission) -> None:
        self.action = action
        self.permission = permission

    async def __call__(
        self,
        recipe_id: Annotated[str, Path(description="Recipe identifier")],
        user: Annotated[CurrentUser, Depends(get_current_user)],
        service: Annotated[RecipeService, Depends(get_recipe_service)],
    ) -> Recipe:
        """Return the recipe when ``user`` may modify it.

        Raises:
            ForbiddenException: 403 if the role lacks the route permission.
            NotFoundException: 404 if the recipe does not exist.
            UnauthorizedException: 401 if the user is neither owner nor admin.
        """
        if not user.has_permission(self.permission):
            raise ForbiddenException(
                f"User role is not authorized to access this route: {self.permission}"
            )

        recipe = await service.get_recipe(recipe_id)
        ensure_can_modify(recipe, user, self.action)
        return recipe


require_recipe_update = RecipeOwnerGuard("update", Permission.RECIPE_UPDATE)
require_recipe_delete = RecipeOwnerGuard("delete", Permission.RECIPE_DELETE)
