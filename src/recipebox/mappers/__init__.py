"""Data mappers between stored documents and API responses."""

from recipebox.mappers.recipe import (
    build_favorite_response,
    build_recipe_response,
    build_recipe_responses,
)


__all__ = [
    "build_favorite_response",
    "build_recipe_response",
    "build_recipe_responses",
]
