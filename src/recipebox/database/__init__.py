"""PostgreSQL database layer.

This module provides:
- Connection pool management
- Schema bootstrap for the recipe document table
- Repository classes for data access
- Health check utilities
"""

from recipebox.database.connection import (
    check_database_health,
    close_database_pool,
    get_database_pool,
    init_database_pool,
)
from recipebox.database.repositories.recipe import RecipeRepository
from recipebox.database.schema import ensure_schema


__all__ = [
    "RecipeRepository",
    "check_database_health",
    "close_database_pool",
    "ensure_schema",
    "get_database_pool",
    "init_database_pool",
]
