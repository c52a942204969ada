"""Recipe data mappers.

Transform stored recipe documents into API response schemas.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from recipebox.schemas.recipe import FavoriteToggleResponse, RecipeResponse


if TYPE_CHECKING:
    from collections.abc import Iterable

    from recipebox.services.recipes.models import Recipe


def build_recipe_response(recipe: Recipe) -> RecipeResponse:
    """Map a stored recipe onto the public response schema."""
    return RecipeResponse.model_validate(recipe.model_dump())


def build_recipe_responses(recipes: Iterable[Recipe]) -> list[RecipeResponse]:
    return [build_recipe_response(recipe) for recipe in recipes]


def build_favorite_response(recipe: Recipe, user_id: str) -> FavoriteToggleResponse:
    """Report the caller's membership and the recipe's favorite count."""
    return FavoriteToggleResponse(
        is_favorited=recipe.is_favorited_by(user_id),
        favorite_count=recipe.favorite_count,
    )
