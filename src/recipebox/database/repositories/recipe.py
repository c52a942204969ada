"""Recipe document repository.

Provides methods for storing and querying recipe documents in PostgreSQL.
Documents are kept as camelCase JSONB, the same shape the API returns.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import orjson

from recipebox.database.connection import get_database_pool
from recipebox.observability.logging import get_logger
from recipebox.schemas.enums import RecipeSortField
from recipebox.services.recipes.models import Recipe


if TYPE_CHECKING:
    from asyncpg import Pool, Record

    from recipebox.schemas.recipe import RecipeListParams

logger = get_logger(__name__)


# Sort field -> SQL expression. Only these expressions are ever interpolated.
_SORT_EXPRESSIONS: dict[str, str] = {
    RecipeSortField.CREATED_AT: "created_at",
    RecipeSortField.AVERAGE_RATING: "(document ->> 'averageRating')::numeric",
    RecipeSortField.VIEWS: "(document ->> 'views')::bigint",
    RecipeSortField.FAVORITE_COUNT: "(document ->> 'favoriteCount')::bigint",
    RecipeSortField.TITLE: "LOWER(document ->> 'title')",
}

_SELECT = "SELECT document FROM recipes"


def _minutes_sql(key: str) -> str:
    """Minutes of a stored prep or cook time, NULL when it has no value."""
    return (
        f"(document -> '{key}' ->> 'value')::numeric"
        f" * CASE document -> '{key}' ->> 'unit' WHEN 'hours' THEN 60 ELSE 1 END"
    )


# Recipes with no recorded time never match a time filter
_TOTAL_MINUTES = (
    f"NULLIF(COALESCE({_minutes_sql('prepTime')}, 0)"
    f" + COALESCE({_minutes_sql('cookTime')}, 0), 0)"
)


def _escape_like(value: str) -> str:
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def _dump(recipe: Recipe) -> str:
    return orjson.dumps(recipe.model_dump(mode="json")).decode()


def _load(row: Record) -> Recipe:
    return Recipe.model_validate(orjson.loads(row["document"]))


def build_filters(params: RecipeListParams) -> tuple[str, list[Any]]:
    """Translate listing filters into a WHERE clause and its arguments."""
    clauses: list[str] = []
    args: list[Any] = []

    def arg(value: Any) -> str:
        args.append(value)
        return f"${len(args)}"

    if params.cuisine:
        clauses.append(f"LOWER(document ->> 'cuisine') = LOWER({arg(params.cuisine)})")
    if params.difficulty:
        clauses.append(f"document ->> 'difficulty' = {arg(params.difficulty)}")
    if params.tag:
        clauses.append(f"document -> 'tags' ? {arg(params.tag)}")
    if params.diet:
        clauses.append(f"document -> 'dietaryRestrictions' ? {arg(params.diet)}")
    if params.time:
        clauses.append(f"{_TOTAL_MINUTES} <= {arg(params.time)}::int")
    if params.search:
        pattern = arg(f"%{_escape_like(params.search)}%")
        clauses.append(
            f"(document ->> 'title' ILIKE {pattern}"
            f" OR document ->> 'description' ILIKE {pattern}"
            f" OR document ->> 'cuisine' ILIKE {pattern}"
            " OR EXISTS (SELECT 1 FROM jsonb_array_elements_text(document -> 'tags') AS t"
            f" WHERE t ILIKE {pattern})"
            " OR EXISTS (SELECT 1 FROM jsonb_array_elements(document -> 'ingredients') AS i"
            f" WHERE i ->> 'name' ILIKE {pattern}))"
        )

    where = f" WHERE {' AND '.join(clauses)}" if clauses else ""
    return where, args


def build_order_by(params: RecipeListParams) -> str:
    """ORDER BY clause for the requested sort keys, ties broken by id."""
    parts = [
        f"{_SORT_EXPRESSIONS[field]} {'DESC' if descending else 'ASC'}"
        for field, descending in params.sort_keys
    ]
    parts.append("id ASC")
    return " ORDER BY " + ", ".join(parts)


class RecipeRepository:
    """Repository for recipe documents.

    Writes replace the whole document except for the two partial updates
    (average rating and photo), which touch a single key in place.
    """

    def __init__(self, pool: Pool | None = None) -> None:
        """Initialize repository.

        Args:
            pool: Optional connection pool. If None, uses global pool.
        """
        self._pool = pool

    @property
    def pool(self) -> Pool:
        """Get connection pool."""
        if self._pool is not None:
            return self._pool
        return get_database_pool()

    # =========================================================================
    # Single document
    # =========================================================================

    async def get(self, recipe_id: str) -> Recipe | None:
        """Find a recipe by id."""
        async with self.pool.acquire() as conn:
            row = await conn.fetchrow(f"{_SELECT} WHERE id = $1", recipe_id)

        if row is None:
            return None
        return _load(row)

    async def create(self, recipe: Recipe) -> Recipe:
        """Insert a new recipe document."""
        query = """
            INSERT INTO recipes (id, user_id, document, created_at, updated_at)
            VALUES ($1, $2, $3::jsonb, $4, $5)
        """
        async with self.pool.acquire() as conn:
            await conn.execute(
                query,
                recipe.id,
                recipe.user,
                _dump(recipe),
                recipe.created_at,
                recipe.updated_at,
            )
        return recipe

    async def save(self, recipe: Recipe) -> None:
        """Replace the stored document with ``recipe``."""
        query = """
            UPDATE recipes
            SET document = $2::jsonb, updated_at = $3
            WHERE id = $1
        """
        async with self.pool.acquire() as conn:
            await conn.execute(query, recipe.id, _dump(recipe), recipe.updated_at)

    async def delete(self, recipe_id: str) -> bool:
        """Delete a recipe. Returns whether a row was removed."""
        async with self.pool.acquire() as conn:
            status = await conn.execute("DELETE FROM recipes WHERE id = $1", recipe_id)
        return status == "DELETE 1"

    async def mean_rating(self, recipe_id: str) -> float | None:
        """Arithmetic mean of the recipe's rating values, None without ratings."""
        query = """
            SELECT AVG((r ->> 'rating')::numeric)
            FROM recipes, jsonb_array_elements(document -> 'ratings') AS r
            WHERE id = $1
        """
        async with self.pool.acquire() as conn:
            mean = await conn.fetchval(query, recipe_id)
        return float(mean) if mean is not None else None

    async def set_average_rating(self, recipe_id: str, value: float) -> None:
        query = """
            UPDATE recipes
            SET document = jsonb_set(document, '{averageRating}', to_jsonb($2::float8))
            WHERE id = $1
        """
        async with self.pool.acquire() as conn:
            await conn.execute(query, recipe_id, value)

    async def set_photo(self, recipe_id: str, filename: str) -> None:
        query = """
            UPDATE recipes
            SET document = jsonb_set(document, '{photo}', to_jsonb($2::text))
            WHERE id = $1
        """
        async with self.pool.acquire() as conn:
            await conn.execute(query, recipe_id, filename)

    # =========================================================================
    # Queries
    # =========================================================================

    async def find_page(
        self,
        params: RecipeListParams,
        *,
        limit: int,
        offset: int,
    ) -> tuple[list[Recipe], int]:
        """Return one filtered, sorted page and the total number of matches."""
        where, args = build_filters(params)
        page_query = (
            f"{_SELECT}{where}{build_order_by(params)}"
            f" LIMIT ${len(args) + 1} OFFSET ${len(args) + 2}"
        )

        async with self.pool.acquire() as conn:
            total = await conn.fetchval(f"SELECT COUNT(*) FROM recipes{where}", *args)
            rows = await conn.fetch(page_query, *args, limit, offset)

        logger.debug("Listed recipes", total=total, returned=len(rows))
        return [_load(row) for row in rows], total

    async def top_rated(self, *, min_rating: float, limit: int) -> list[Recipe]:
        """Recipes rated at least ``min_rating``, best first."""
        rating = _SORT_EXPRESSIONS[RecipeSortField.AVERAGE_RATING]
        query = (
            f"{_SELECT} WHERE {rating} >= $1::float8"
            f" ORDER BY {rating} DESC, created_at DESC LIMIT $2"
        )
        async with self.pool.acquire() as conn:
            rows = await conn.fetch(query, min_rating, limit)
        return [_load(row) for row in rows]

    async def by_user(self, user_id: str) -> list[Recipe]:
        """All recipes owned by ``user_id``, newest first."""
        query = f"{_SELECT} WHERE user_id = $1 ORDER BY created_at DESC"
        async with self.pool.acquire() as conn:
            rows = await conn.fetch(query, user_id)
        return [_load(row) for row in rows]

    async def favorited_by(self, user_id: str) -> list[Recipe]:
        """All recipes whose favorite list contains ``user_id``."""
        query = f"{_SELECT} WHERE document -> 'favoritedBy' ? $1 ORDER BY created_at DESC"
        async with self.pool.acquire() as conn:
            rows = await conn.fetch(query, user_id)
        return [_load(row) for row in rows]
