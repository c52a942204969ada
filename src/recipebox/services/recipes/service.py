"""Recipe service.

Provides methods for:
- Listing, ranking and looking up recipes
- Creating, updating and deleting recipes
- Rating upsert with average rating recomputation
- Favorite toggling
- View counting
- Photo uploads

Every read-modify-write here is a plain load, mutate in memory, save
sequence with no locking or versioning. Two concurrent writers on the same
recipe race and the last save wins.
"""

from __future__ import annotations

import uuid
from pathlib import PurePath
from typing import TYPE_CHECKING

from pydantic import ValidationError

from recipebox.core.exceptions import (
    NotFoundException,
    ValidationException,
    validation_details,
)
from recipebox.observability.logging import get_logger
from recipebox.schemas.envelope import Pagination
from recipebox.services.recipes.models import Recipe
from recipebox.services.recipes.ratings import round_up_to_half


if TYPE_CHECKING:
    from recipebox.core.config import Settings
    from recipebox.database.repositories.recipe import RecipeRepository
    from recipebox.schemas.recipe import RecipeCreate, RecipeListParams, RecipeUpdate
    from recipebox.storage.local import LocalPhotoStorage, PhotoUpload

logger = get_logger(__name__)


class RecipeService:
    """Business operations on recipe documents.

    The repository is the only source of truth: every operation loads the
    current document by id and persists the result before returning it.
    """

    def __init__(
        self,
        repository: RecipeRepository,
        storage: LocalPhotoStorage,
        settings: Settings,
    ) -> None:
        """Initialize the service.

        Args:
            repository: Recipe document store.
            storage: Photo file storage.
            settings: Application settings (listing and ranking limits).
        """
        self._repository = repository
        self._storage = storage
        self._settings = settings

    # =========================================================================
    # Queries
    # =========================================================================

    async def list_recipes(
        self,
        params: RecipeListParams,
    ) -> tuple[list[Recipe], Pagination]:
        """Return one page of recipes matching the filters."""
        config = self._settings.recipes
        limit = min(params.limit or config.default_page_size, config.max_page_size)
        offset = (params.page - 1) * limit

        recipes, total = await self._repository.find_page(
            params,
            limit=limit,
            offset=offset,
        )
        return recipes, Pagination.build(total=total, page=params.page, limit=limit)

    async def top_rated(self) -> list[Recipe]:
        """Best rated recipes above the configured threshold."""
        config = self._settings.recipes
        return await self._repository.top_rated(
            min_rating=config.top_rated_min_rating,
            limit=config.top_rated_limit,
        )

    async def recipes_by_user(self, user_id: str) -> list[Recipe]:
        return await self._repository.by_user(user_id)

    async def favorites(self, user_id: str) -> list[Recipe]:
        return await self._repository.favorited_by(user_id)

    async def get_recipe(self, recipe_id: str) -> Recipe:
        """Load a recipe without counting a view.

        Raises:
            NotFoundException: If no recipe has this id.
        """
        recipe = await self._repository.get(recipe_id)
        if recipe is None:
            raise NotFoundException("Recipe", recipe_id)
        return recipe

    async def view_recipe(self, recipe_id: str) -> Recipe:
        """Load a recipe for display and count the view."""
        recipe = await self.get_recipe(recipe_id)
        recipe.record_view()
        await self._save(recipe)

        logger.debug("Recipe viewed", recipe_id=recipe.id, views=recipe.views)
        return recipe

    # =========================================================================
    # Authoring
    # =========================================================================

    async def create_recipe(self, data: RecipeCreate, user_id: str) -> Recipe:
        """Store a new recipe owned by ``user_id``."""
        recipe = Recipe.model_validate(
            {**data.model_dump(), "id": uuid.uuid4().hex, "user": user_id}
        )
        await self._repository.create(recipe)

        logger.info("Recipe created", recipe_id=recipe.id, user_id=user_id)
        return recipe

    async def update_recipe(self, recipe: Recipe, data: RecipeUpdate) -> Recipe:
        """Apply the fields present in ``data`` to ``recipe``.

        The merged document is validated as a whole before anything is
        written, so a rejected update leaves the stored recipe unchanged.

        Raises:
            ValidationException: If the merged recipe breaks a content rule.
        """
        changes = data.model_dump(exclude_unset=True)
        try:
            updated = Recipe.model_validate({**recipe.model_dump(), **changes})
        except ValidationError as e:
            raise ValidationException(
                "Invalid recipe update",
                details=validation_details(e.errors()),
            ) from e

        await self._save(updated)

        logger.info(
            "Recipe updated",
            recipe_id=updated.id,
            fields=sorted(data.model_fields_set),
        )
        return updated

    async def delete_recipe(self, recipe: Recipe) -> None:
        """Remove a recipe together with its ratings and favorites."""
        await self._repository.delete(recipe.id)
        logger.info("Recipe deleted", recipe_id=recipe.id, user_id=recipe.user)

    async def upload_photo(self, recipe: Recipe, upload: PhotoUpload) -> str:
        """Store an already validated photo and attach it to the recipe.

        Returns:
            The stored file name, ``photo_{recipe id}{extension}``.
        """
        filename = f"photo_{recipe.id}{PurePath(upload.filename).suffix}"
        await self._storage.save(filename, upload.content)
        await self._repository.set_photo(recipe.id, filename)
        recipe.photo = filename

        logger.info(
            "Recipe photo uploaded",
            recipe_id=recipe.id,
            filename=filename,
            size=len(upload.content),
        )
        return filename

    # =========================================================================
    # Engagement
    # =========================================================================

    async def rate_recipe(
        self,
        recipe_id: str,
        user_id: str,
        rating: int,
        comment: str | None = None,
    ) -> Recipe:
        """Insert or overwrite the user's rating and refresh the average.

        Raises:
            NotFoundException: If no recipe has this id.
            ValidationException: If ``rating`` is outside 1..5.
        """
        recipe = await self.get_recipe(recipe_id)
        try:
            recipe.upsert_rating(user_id, rating, comment)
        except ValidationError as e:
            raise ValidationException(
                "Rating must be between 1 and 5",
                details=validation_details(e.errors()),
            ) from e

        await self._save(recipe)
        recipe.average_rating = await self.refresh_average_rating(recipe.id)

        logger.info(
            "Recipe rated",
            recipe_id=recipe.id,
            user_id=user_id,
            rating=rating,
            average_rating=recipe.average_rating,
        )
        return recipe

    async def refresh_average_rating(self, recipe_id: str) -> float:
        """Recompute and store the rounded mean of the recipe's ratings."""
        mean = await self._repository.mean_rating(recipe_id)
        average = round_up_to_half(mean) if mean is not None else 0
        await self._repository.set_average_rating(recipe_id, average)
        return average

    async def toggle_favorite(self, recipe_id: str, user_id: str) -> Recipe:
        """Flip the user's favorite membership on a recipe.

        Raises:
            NotFoundException: If no recipe has this id.
        """
        recipe = await self.get_recipe(recipe_id)
        is_favorited = recipe.toggle_favorite(user_id)
        await self._save(recipe)

        logger.info(
            "Recipe favorite toggled",
            recipe_id=recipe.id,
            user_id=user_id,
            is_favorited=is_favorited,
            favorite_count=recipe.favorite_count,
        )
        return recipe

    async def _save(self, recipe: Recipe) -> None:
        recipe.touch()
        await self._repository.save(recipe)
