"""Database repositories."""

from recipebox.database.repositories.recipe import RecipeRepository


__all__ = ["RecipeRepository"]
