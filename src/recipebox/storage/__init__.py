"""Photo storage."""

from recipebox.storage.local import LocalPhotoStorage, PhotoUpload, validate_photo


__all__ = ["LocalPhotoStorage", "PhotoUpload", "validate_photo"]
