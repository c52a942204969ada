"""Pydantic schemas for request/response validation.

This module exports all schema classes for the Recipe Box API.
"""

# Base classes
from recipebox.schemas.base import APIRequest, APIResponse

# Envelope
from recipebox.schemas.envelope import (
    EmptyData,
    Envelope,
    ListEnvelope,
    PageEnvelope,
    PageRef,
    Pagination,
)

# Enums
from recipebox.schemas.enums import (
    DietaryRestriction,
    Difficulty,
    HealthStatus,
    IngredientUnit,
    RecipeSortField,
    RecipeSource,
    TimerUnit,
    TimeUnit,
)

# Health schemas
from recipebox.schemas.health import HealthCheckItem, HealthResponse, ReadinessResponse

# Recipe schemas
from recipebox.schemas.recipe import (
    Duration,
    FavoriteToggleResponse,
    Ingredient,
    InstructionStep,
    NutritionInfo,
    RatingRequest,
    RatingResponse,
    RecipeCreate,
    RecipeFields,
    RecipeImage,
    RecipeListParams,
    RecipeResponse,
    RecipeUpdate,
    Timer,
    Variation,
    VariationIngredient,
)


__all__ = [
    "APIRequest",
    "APIResponse",
    "DietaryRestriction",
    "Difficulty",
    "Duration",
    "EmptyData",
    "Envelope",
    "ListEnvelope",
    "FavoriteToggleResponse",
    "HealthCheckItem",
    "HealthResponse",
    "HealthStatus",
    "Ingredient",
    "IngredientUnit",
    "InstructionStep",
    "NutritionInfo",
    "PageEnvelope",
    "PageRef",
    "Pagination",
    "RatingRequest",
    "RatingResponse",
    "ReadinessResponse",
    "RecipeCreate",
    "RecipeFields",
    "RecipeImage",
    "RecipeListParams",
    "RecipeResponse",
    "RecipeSortField",
    "RecipeSource",
    "RecipeUpdate",
    "Timer",
    "TimeUnit",
    "TimerUnit",
    "Variation",
    "VariationIngredient",
]
