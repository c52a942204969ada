"""Unit tests for response envelopes and list parameters."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from recipebox.schemas.envelope import EmptyData, Envelope, ListEnvelope, PageEnvelope, Pagination
from recipebox.schemas.recipe import FavoriteToggleResponse, RecipeListParams


pytestmark = pytest.mark.unit


class TestPagination:
    """Tests for Pagination.build."""

    def test_middle_page(self) -> None:
        pagination = Pagination.build(total=25, page=2, limit=10)

        assert pagination.next is not None
        assert pagination.next.page == 3
        assert pagination.prev is not None
        assert pagination.prev.page == 1

    def test_first_page(self) -> None:
        pagination = Pagination.build(total=25, page=1, limit=10)
        assert pagination.prev is None

    def test_last_page(self) -> None:
        pagination = Pagination.build(total=20, page=2, limit=10)
        assert pagination.next is None


class TestEnvelopes:
    """Tests for envelope serialization."""

    def test_single(self) -> None:
        body = Envelope[FavoriteToggleResponse](
            data=FavoriteToggleResponse(is_favorited=True, favorite_count=1)
        ).model_dump()

        assert body == {"success": True, "data": {"isFavorited": True, "favoriteCount": 1}}

    def test_list_counts_items(self) -> None:
        body = ListEnvelope[str].of(["a", "b"]).model_dump()
        assert body == {"success": True, "count": 2, "data": ["a", "b"]}

    def test_page_includes_pagination(self) -> None:
        body = PageEnvelope[str](
            count=1,
            data=["a"],
            pagination=Pagination.build(total=1, page=1, limit=10),
        ).model_dump(exclude_none=True)

        assert body["pagination"] == {"total": 1, "page": 1, "limit": 10}

    def test_empty_data(self) -> None:
        assert Envelope[EmptyData](data=EmptyData()).model_dump() == {
            "success": True,
            "data": {},
        }


class TestRecipeListParams:
    """Tests for RecipeListParams."""

    def test_sort_keys(self) -> None:
        params = RecipeListParams(sort="-views, title")
        assert params.sort_keys == [("views", True), ("title", False)]

    def test_rejects_unknown_sort_field(self) -> None:
        with pytest.raises(ValidationError, match="Cannot sort by 'password'"):
            RecipeListParams(sort="-password")

    def test_rejects_page_zero(self) -> None:
        with pytest.raises(ValidationError):
            RecipeListParams(page=0)
