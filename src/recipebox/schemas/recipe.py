"""Recipe-related schemas.

This module contains the author-editable recipe content, the create and
update request bodies, and the response shapes for recipes, ratings and
favorites.
"""

from __future__ import annotations

from datetime import datetime
from typing import Annotated

from pydantic import ConfigDict, Field, StrictInt, StringConstraints, field_validator

from recipebox.schemas.base import APIRequest, APIResponse
from recipebox.schemas.enums import (
    DietaryRestriction,
    Difficulty,
    IngredientUnit,
    RecipeSortField,
    RecipeSource,
    TimerUnit,
    TimeUnit,
)


Title = Annotated[
    str, StringConstraints(strip_whitespace=True, min_length=1, max_length=100)
]
Description = Annotated[str, StringConstraints(min_length=1, max_length=1000)]
Cuisine = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
Tip = Annotated[str, StringConstraints(max_length=200)]
RatingValue = Annotated[StrictInt, Field(ge=1, le=5)]


# =============================================================================
# Nested Content Schemas
# =============================================================================


class Ingredient(APIRequest):
    """A single ingredient line of a recipe."""

    name: Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
    quantity: float = Field(ge=0)
    unit: IngredientUnit
    notes: Annotated[str, StringConstraints(max_length=200)] | None = None
    group: str = "main"


class Timer(APIRequest):
    """Optional timer attached to an instruction step."""

    duration: float | None = Field(default=None, ge=0)
    unit: TimerUnit | None = None


class InstructionStep(APIRequest):
    """One step of the cooking instructions."""

    step: Annotated[str, StringConstraints(min_length=1, max_length=500)]
    order: int = Field(ge=0)
    timer: Timer | None = None
    tips: list[str] = Field(default_factory=list)


class Duration(APIRequest):
    """Preparation or cooking time."""

    value: float | None = Field(default=None, ge=0)
    unit: TimeUnit = TimeUnit.MINUTES

    @property
    def minutes(self) -> float | None:
        """The duration in minutes, None when no value was given."""
        if self.value is None:
            return None
        return self.value * 60 if self.unit == TimeUnit.HOURS else self.value


class NutritionInfo(APIRequest):
    """Per-serving nutrition facts. Every value is optional."""

    calories: float | None = None
    protein: float | None = None
    carbs: float | None = None
    fat: float | None = None
    fiber: float | None = None
    sugar: float | None = None
    sodium: float | None = None
    cholesterol: float | None = None


class RecipeImage(APIRequest):
    """Image reference shown alongside a recipe."""

    url: str
    is_primary: bool = False
    caption: str | None = None


class VariationIngredient(APIRequest):
    """Loosely specified ingredient of a recipe variation."""

    name: str | None = None
    quantity: float | None = None
    unit: str | None = None
    notes: str | None = None


class Variation(APIRequest):
    """An alternative take on the recipe."""

    description: str | None = None
    ingredients: list[VariationIngredient] = Field(default_factory=list)


# =============================================================================
# Recipe Content
# =============================================================================


class RecipeFields(APIRequest):
    """Author-editable recipe content.

    System-managed fields (owner, counters, ratings, timestamps) are not
    declared here and are dropped if a client sends them.
    """

    title: Title
    description: Description
    cuisine: Cuisine
    ingredients: list[Ingredient] = Field(default_factory=list)
    instructions: list[InstructionStep] = Field(default_factory=list)
    prep_time: Duration | None = None
    cook_time: Duration | None = None
    servings: int = Field(default=4, ge=1)
    difficulty: Difficulty = Difficulty.MEDIUM
    dietary_restrictions: list[DietaryRestriction] = Field(default_factory=list)
    nutrition: NutritionInfo | None = None
    images: list[RecipeImage] = Field(default_factory=list)
    video_url: str | None = None
    tags: list[str] = Field(default_factory=list)
    is_public: bool = False
    source: RecipeSource = RecipeSource.ORIGINAL
    source_url: str | None = None
    source_notes: str | None = None
    equipment: list[str] = Field(default_factory=list)
    tips: list[Tip] = Field(default_factory=list)
    variations: list[Variation] = Field(default_factory=list)
    related_recipes: list[str] = Field(default_factory=list)
    last_cooked: datetime | None = None

    @property
    def total_minutes(self) -> float | None:
        """Preparation plus cooking time, None when neither is recorded."""
        parts = [d.minutes for d in (self.prep_time, self.cook_time) if d is not None]
        known = [m for m in parts if m is not None]
        return sum(known) if known else None


class RecipeCreate(RecipeFields):
    """Request body for POST /recipes."""


class RecipeUpdate(APIRequest):
    """Request body for PUT /recipes/{id}.

    Only the fields present in the body are applied. Sending ``null`` for a
    required field is rejected when the change is applied to the recipe.
    """

    title: Title | None = None
    description: Description | None = None
    cuisine: Cuisine | None = None
    ingredients: list[Ingredient] | None = None
    instructions: list[InstructionStep] | None = None
    prep_time: Duration | None = None
    cook_time: Duration | None = None
    servings: int | None = Field(default=None, ge=1)
    difficulty: Difficulty | None = None
    dietary_restrictions: list[DietaryRestriction] | None = None
    nutrition: NutritionInfo | None = None
    images: list[RecipeImage] | None = None
    video_url: str | None = None
    tags: list[str] | None = None
    is_public: bool | None = None
    source: RecipeSource | None = None
    source_url: str | None = None
    source_notes: str | None = None
    equipment: list[str] | None = None
    tips: list[Tip] | None = None
    variations: list[Variation] | None = None
    related_recipes: list[str] | None = None
    last_cooked: datetime | None = None


class RatingRequest(APIRequest):
    """Request body for POST /recipes/{id}/rating."""

    rating: RatingValue
    comment: str | None = None


# =============================================================================
# Responses
# =============================================================================


class RatingResponse(APIResponse):
    """A user's rating as returned to clients."""

    user: str
    rating: int
    comment: str = ""
    created_at: datetime


class RecipeResponse(RecipeFields):
    """Full recipe document as returned to clients."""

    model_config = ConfigDict(extra="forbid")

    id: str
    user: str
    photo: str | None = None
    ratings: list[RatingResponse] = Field(default_factory=list)
    average_rating: float = 0
    favorited_by: list[str] = Field(default_factory=list)
    favorite_count: int = 0
    views: int = 0
    created_at: datetime
    updated_at: datetime


class FavoriteToggleResponse(APIResponse):
    """Result of toggling a favorite."""

    is_favorited: bool
    favorite_count: int


# =============================================================================
# Listing
# =============================================================================


class RecipeListParams(APIRequest):
    """Query parameters accepted by GET /recipes."""

    page: int = Field(default=1, ge=1)
    limit: int | None = Field(default=None, ge=1)
    sort: str = "-createdAt"
    cuisine: str | None = None
    difficulty: Difficulty | None = None
    tag: str | None = None
    diet: DietaryRestriction | None = None
    search: str | None = None
    time: int | None = Field(default=None, ge=1)

    @field_validator("sort")
    @classmethod
    def validate_sort(cls, value: str) -> str:
        """Allow only known fields, each optionally prefixed with ``-``."""
        allowed = {field.value for field in RecipeSortField}
        for part in value.split(","):
            name = part.strip().removeprefix("-")
            if name not in allowed:
                msg = f"Cannot sort by '{name}'. Allowed: {', '.join(sorted(allowed))}"
                raise ValueError(msg)
        return value

    @property
    def sort_keys(self) -> list[tuple[str, bool]]:
        """Return ``(field, descending)`` pairs in priority order."""
        keys = []
        for part in self.sort.split(","):
            part = part.strip()
            keys.append((part.removeprefix("-"), part.startswith("-")))
        return keys
