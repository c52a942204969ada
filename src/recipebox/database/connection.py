"""asyncpg pool holding the recipe document store connections.

The pool is opened and closed by the application lifespan and shared by
every repository instance that is not given its own pool.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import asyncpg

from recipebox.core.config import get_settings
from recipebox.observability.logging import get_logger


if TYPE_CHECKING:
    from asyncpg import Pool

    from recipebox.core.config import Settings

logger = get_logger(__name__)

_pool: Pool | None = None


async def init_database_pool(settings: Settings | None = None) -> Pool:
    """Open the pool and run one probe query.

    Connections use the configured schema as their ``search_path``.
    """
    global _pool  # noqa: PLW0603

    settings = settings or get_settings()
    db = settings.database

    logger.info(
        "Initializing database connection pool",
        host=db.host,
        port=db.port,
        database=db.name,
        schema=db.db_schema,
    )

    _pool = await asyncpg.create_pool(
        host=db.host,
        port=db.port,
        database=db.name,
        user=db.user,
        password=settings.DATABASE_PASSWORD or None,
        min_size=db.min_pool_size,
        max_size=db.max_pool_size,
        command_timeout=db.command_timeout,
        ssl=db.ssl if db.ssl else None,
        server_settings={"search_path": db.db_schema},
    )

    try:
        async with _pool.acquire() as conn:
            await conn.fetchval("SELECT 1")
        logger.info("Database connection established successfully")
    except asyncpg.PostgresError:
        logger.exception("Failed to connect to database")
        raise

    return _pool


async def close_database_pool() -> None:
    """Close the pool if it was opened. Safe to call twice."""
    global _pool  # noqa: PLW0603

    logger.info("Closing database connection pool")

    if _pool:
        await _pool.close()
        _pool = None

    logger.info("Database connection pool closed")


def get_database_pool() -> Pool:
    """Return the open pool.

    Raises:
        RuntimeError: Before ``init_database_pool`` has run.
    """
    if _pool is None:
        msg = "Database pool not initialized. Call init_database_pool() first."
        raise RuntimeError(msg)
    return _pool


async def check_database_health() -> dict[str, str]:
    """Probe the pool for the readiness endpoint.

    The ``database`` key is one of ``healthy``, ``unhealthy`` or
    ``not_initialized``.
    """
    results: dict[str, str] = {}

    try:
        if _pool:
            async with _pool.acquire() as conn:
                await conn.fetchval("SELECT 1")
            results["database"] = "healthy"
        else:
            results["database"] = "not_initialized"
    except (asyncpg.PostgresError, OSError) as e:
        logger.warning("Database health check failed", error=str(e))
        results["database"] = "unhealthy"

    return results
