"""Exception hierarchy for image-flip."""

from __future__ import annotations

from pathlib import Path


class FlipError(Exception):
    """Base class for all image-flip errors."""

    exit_code: int = 1


class ConfigurationError(FlipError):
    """Invalid run configuration, raised before any file is touched."""

    exit_code = 2


class ItemError(FlipError):
    """Failure scoped to a single file; never aborts a batch."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(reason)
        self.path = path
        self.reason = reason


class DecodeError(ItemError):
    """Source file could not be decoded into a raster."""


class CropRejectedError(ItemError):
    """Crop margin does not fit inside the image."""


class OutputCreateError(ItemError):
    """Output file could not be created."""


class EncodeError(ItemError):
    """Raster could not be encoded as an animated image."""


class DeleteError(ItemError):
    """Source file could not be removed after conversion."""


class TransformError(ItemError):
    """Crop or resize of a decoded raster failed."""
