"""Enumeration types for recipe schemas.

Values are the wire/storage strings exactly as clients send them.
"""

from __future__ import annotations

from enum import StrEnum


class IngredientUnit(StrEnum):
    """Units of measurement for recipe ingredients."""

    # Weight
    G = "g"
    KG = "kg"
    MG = "mg"
    OZ = "oz"
    LB = "lb"
    # Volume
    L = "l"
    ML = "ml"
    TSP = "tsp"
    TBSP = "tbsp"
    CUP = "cup"
    PINT = "pint"
    QUART = "quart"
    GALLON = "gallon"
    # Small amounts
    PINCH = "pinch"
    DASH = "dash"
    DROP = "drop"
    # Count/Quantity
    PIECE = "piece"
    SPRIG = "sprig"
    BUNCH = "bunch"
    CLOVE = "clove"
    HEAD = "head"
    SLICE = "slice"
    CAN = "can"
    PACKAGE = "package"
    TO_TASTE = "to taste"


class Difficulty(StrEnum):
    """Recipe difficulty levels."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"
    EXPERT = "expert"


class DietaryRestriction(StrEnum):
    """Dietary labels a recipe can satisfy."""

    VEGETARIAN = "vegetarian"
    VEGAN = "vegan"
    GLUTEN_FREE = "gluten-free"
    DAIRY_FREE = "dairy-free"
    NUT_FREE = "nut-free"
    SOY_FREE = "soy-free"
    EGG_FREE = "egg-free"
    HALAL = "halal"
    KOSHER = "kosher"
    KETO = "keto"
    PALEO = "paleo"


class TimeUnit(StrEnum):
    """Units for preparation and cooking time."""

    MINUTES = "minutes"
    HOURS = "hours"


class TimerUnit(StrEnum):
    """Units for instruction step timers."""

    SECONDS = "seconds"
    MINUTES = "minutes"
    HOURS = "hours"


class RecipeSource(StrEnum):
    """Where a recipe came from."""

    ORIGINAL = "original"
    IMPORTED = "imported"
    SHARED = "shared"


class RecipeSortField(StrEnum):
    """Fields a recipe listing may be sorted by."""

    CREATED_AT = "createdAt"
    AVERAGE_RATING = "averageRating"
    VIEWS = "views"
    FAVORITE_COUNT = "favoriteCount"
    TITLE = "title"


class HealthStatus(StrEnum):
    """Health check status values."""

    HEALTHY = "healthy"
    DEGRADED = "degraded"
    UNHEALTHY = "unhealthy"
