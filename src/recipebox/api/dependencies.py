"""FastAPI dependencies for service access.

Services are created during application startup and stored in app.state.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Annotated

from fastapi import Depends, File, Request, UploadFile

from recipebox.core.config import Settings, get_settings
from recipebox.core.exceptions import ServiceUnavailableException, UploadException
from recipebox.storage import PhotoUpload, validate_photo


if TYPE_CHECKING:
    from recipebox.services.recipes import RecipeService


def get_app_settings(request: Request) -> Settings:
    """Settings the application was created with."""
    settings: Settings | None = getattr(request.app.state, "settings", None)
    return settings or get_settings()


async def get_recipe_service(request: Request) -> RecipeService:
    """Get the recipe service from app state.

    Raises:
        ServiceUnavailableException: 503 if the service is not initialized.
    """
    service: RecipeService | None = getattr(request.app.state, "recipe_service", None)
    if service is None:
        raise ServiceUnavailableException("Recipe service not available")
    return service


async def validated_photo(
    settings: Annotated[Settings, Depends(get_app_settings)],
    file: Annotated[UploadFile | None, File(description="Image file")] = None,
) -> PhotoUpload:
    """Read the multipart ``file`` field and check it against the photo rules.

    Raises:
        UploadException: 400 if the file is missing, not an image, or too large.
    """
    if file is None:
        raise UploadException("Please upload a file")

    max_size = settings.uploads.max_file_size
    try:
        # One byte past the limit is enough to reject
        content = await file.read(max_size + 1)
    finally:
        await file.close()

    return validate_photo(file.filename, file.content_type, content, max_size)
