"""Recipe service package."""

from recipebox.services.recipes.models import Rating, Recipe
from recipebox.services.recipes.ratings import round_up_to_half
from recipebox.services.recipes.service import RecipeService


__all__ = [
    "Rating",
    "Recipe",
    "RecipeService",
    "round_up_to_half",
]
