"""API v1 router aggregating all endpoint routers.

Mounted under ``api.v1_prefix`` (``/api/v1`` by default).
"""

from __future__ import annotations

from fastapi import APIRouter

from recipebox.api.v1.endpoints import health, recipes


router = APIRouter()

router.include_router(health.router)
router.include_router(recipes.router)
