"""Shared test fixtures and configuration for the Recipe Box service tests."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest

# Must be set before any settings are loaded
os.environ.setdefault("APP_ENV", "test")

from recipebox.auth.providers import HeaderAuthProvider, set_auth_provider
from recipebox.core.config import Settings
from recipebox.services.recipes import RecipeService
from recipebox.storage import LocalPhotoStorage
from tests.fakes import InMemoryRecipeRepository


if TYPE_CHECKING:
    from collections.abc import Generator
    from pathlib import Path


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """Settings for tests: header auth, no metrics, no rate limiting."""
    return Settings(
        APP_ENV="test",
        auth={"mode": "header"},
        rate_limiting={"enabled": False},
        observability={"metrics": {"enabled": False}},
        uploads={"directory": str(tmp_path / "uploads"), "max_file_size": 1024},
        recipes={
            "top_rated_min_rating": 4.0,
            "top_rated_limit": 5,
            "default_page_size": 10,
            "max_page_size": 20,
        },
    )


@pytest.fixture
def repository() -> InMemoryRecipeRepository:
    return InMemoryRecipeRepository()


@pytest.fixture
def photo_storage(test_settings: Settings) -> LocalPhotoStorage:
    return LocalPhotoStorage(test_settings.uploads.directory)


@pytest.fixture
def recipe_service(
    repository: InMemoryRecipeRepository,
    photo_storage: LocalPhotoStorage,
    test_settings: Settings,
) -> RecipeService:
    """RecipeService backed by the in-memory repository."""
    return RecipeService(repository, photo_storage, test_settings)


@pytest.fixture
def header_auth() -> Generator[HeaderAuthProvider]:
    """Install a HeaderAuthProvider for the duration of a test."""
    provider = HeaderAuthProvider()
    set_auth_provider(provider)
    yield provider
    set_auth_provider(None)
