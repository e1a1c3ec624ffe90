"""Application ports for clean architecture boundaries."""

from __future__ import annotations

from pathlib import Path
from typing import BinaryIO, Protocol

from image_flip.application.results import (
    BatchSummary,
    ConversionFailure,
    ConversionSuccess,
    DeleteFailure,
)
from image_flip.types import Box, Dimensions, ResampleFilter


class Raster(Protocol):
    """Marker protocol for decoded in-memory images."""


class ImageCodec(Protocol):
    """Decode, transform and encode rasters."""

    def decode(self, path: Path) -> Raster:
        """Decode the file at ``path``; raise ``DecodeError`` on failure."""

    def size(self, raster: Raster) -> Dimensions:
        """Return ``(width, height)``."""

    def crop(self, raster: Raster, box: Box) -> Raster:
        """Return the region inside ``box``."""

    def resize(
        self, raster: Raster, size: Dimensions, resample_filter: ResampleFilter
    ) -> Raster:
        """Resample to ``size`` with the selected filter."""

    def encode(self, raster: Raster, stream: BinaryIO) -> None:
        """Write a single-frame animated image; raise ``EncodeError`` on failure."""


class PathExpander(Protocol):
    """Expand a pattern into concrete filesystem paths."""

    def expand(self, pattern: str) -> list[Path]:
        """Return matches in a stable order; raise ``ConfigurationError`` on bad syntax."""


class FileRemover(Protocol):
    """Remove source files after conversion."""

    def remove(self, path: Path) -> None:
        """Delete ``path``; raise ``DeleteError`` on failure."""


class ProgressReporter(Protocol):
    """Consume per-file progress events of a batch."""

    def started(self, source_path: Path, output_path: Path) -> None:
        """A conversion is about to begin."""

    def succeeded(self, outcome: ConversionSuccess) -> None:
        """A conversion finished successfully."""

    def failed(self, outcome: ConversionFailure) -> None:
        """A conversion failed."""

    def delete_failed(self, failure: DeleteFailure) -> None:
        """A converted source could not be removed."""

    def finished(self, summary: BatchSummary) -> None:
        """The batch is complete."""
