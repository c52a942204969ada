"""Unit tests for recipe mappers."""

from __future__ import annotations

import pytest

from recipebox.mappers import build_favorite_response, build_recipe_response
from tests.factories import build_recipe


pytestmark = pytest.mark.unit


class TestBuildRecipeResponse:
    """Tests for build_recipe_response."""

    def test_maps_all_fields(self) -> None:
        recipe = build_recipe(views=4)
        recipe.upsert_rating("u1", 5, "Great")

        response = build_recipe_response(recipe)

        assert response.id == recipe.id
        assert response.views == 4
        assert response.ratings[0].comment == "Great"
        assert response.model_dump()["favoriteCount"] == 0


class TestBuildFavoriteResponse:
    """Tests for build_favorite_response."""

    def test_membership(self) -> None:
        recipe = build_recipe()
        recipe.toggle_favorite("u1")

        assert build_favorite_response(recipe, "u1").is_favorited is True
        assert build_favorite_response(recipe, "u2").is_favorited is False
        assert build_favorite_response(recipe, "u2").favorite_count == 1
