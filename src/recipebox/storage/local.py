"""Local filesystem storage for recipe photos."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import aiofiles
import aiofiles.os
from fastapi import status

from recipebox.core.exceptions import UploadException
from recipebox.observability.logging import get_logger


logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class PhotoUpload:
    """An uploaded photo that passed validation."""

    filename: str
    content_type: str
    content: bytes


def validate_photo(
    filename: str | None,
    content_type: str | None,
    content: bytes | None,
    max_size: int,
) -> PhotoUpload:
    """Check an uploaded file against the photo rules.

    Raises:
        UploadException: If the file is missing, not an image, or too large.
    """
    if not filename or content is None:
        raise UploadException("Please upload a file")

    if not (content_type or "").startswith("image"):
        logger.warning(
            "Rejected non-image upload",
            filename=filename,
            content_type=content_type,
        )
        raise UploadException("Please upload an image file")

    if len(content) > max_size:
        logger.warning("Rejected oversized upload", filename=filename, size=len(content))
        raise UploadException(f"Please upload an image less than {max_size}")

    return PhotoUpload(filename=filename, content_type=content_type, content=content)


class LocalPhotoStorage:
    """Store photos as files under a single directory."""

    def __init__(self, directory: str | Path) -> None:
        self._base = Path(directory)

    @property
    def directory(self) -> Path:
        return self._base

    async def save(self, filename: str, content: bytes) -> Path:
        """Write ``content`` to ``filename``, replacing any previous file.

        Raises:
            UploadException: 500 if the file cannot be written.
        """
        path = self._base / Path(filename).name
        try:
            await aiofiles.os.makedirs(self._base, exist_ok=True)
            async with aiofiles.open(path, "wb") as f:
                await f.write(content)
        except OSError as e:
            logger.opt(exception=e).error("Failed to store photo", path=str(path))
            raise UploadException(
                "Problem with file upload",
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            ) from e

        logger.debug("Saved photo", path=str(path), size=len(content))
        return path
