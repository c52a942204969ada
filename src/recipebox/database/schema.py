"""Recipe document table DDL.

Each recipe is one row holding the whole document as JSONB. The owner and
timestamps are duplicated into columns for indexing and ordering.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from recipebox.observability.logging import get_logger


if TYPE_CHECKING:
    from asyncpg import Pool

logger = get_logger(__name__)

_TABLE_DDL = """
    CREATE TABLE IF NOT EXISTS recipes (
        id TEXT PRIMARY KEY,
        user_id TEXT NOT NULL,
        document JSONB NOT NULL,
        created_at TIMESTAMPTZ NOT NULL,
        updated_at TIMESTAMPTZ NOT NULL
    )
"""

_INDEX_DDL = (
    "CREATE INDEX IF NOT EXISTS recipes_user_id_idx ON recipes (user_id)",
    "CREATE INDEX IF NOT EXISTS recipes_created_at_idx ON recipes (created_at)",
    (
        "CREATE INDEX IF NOT EXISTS recipes_favorited_by_idx "
        "ON recipes USING GIN ((document -> 'favoritedBy'))"
    ),
    (
        "CREATE INDEX IF NOT EXISTS recipes_average_rating_idx "
        "ON recipes (((document ->> 'averageRating')::numeric))"
    ),
)


def _quote_ident(name: str) -> str:
    return '"' + name.replace('"', '""') + '"'


async def ensure_schema(pool: Pool, schema: str) -> None:
    """Create the schema, the recipes table and its indexes if missing."""
    async with pool.acquire() as conn, conn.transaction():
        await conn.execute(f"CREATE SCHEMA IF NOT EXISTS {_quote_ident(schema)}")
        await conn.execute(f"SET LOCAL search_path TO {_quote_ident(schema)}")
        await conn.execute(_TABLE_DDL)
        for statement in _INDEX_DDL:
            await conn.execute(statement)

    logger.info("Database schema ready", schema=schema)
