"""Batch conversion of still images into single-frame animated GIFs."""

from __future__ import annotations

from pathlib import Path

from image_flip.application.results import BatchSummary, ConversionOutcome
from image_flip.types import DEFAULT_FILTER, ResampleFilter

__version__ = "0.1.0"


def flip_images(
    pattern: str,
    *,
    destroy: bool = False,
    scale: float = 1.0,
    crop: int = 0,
    resample_filter: ResampleFilter | str = DEFAULT_FILTER,
    output_path: Path | None = None,
) -> BatchSummary:
    """Convert every image matched by ``pattern``.

    See :func:`image_flip.api.flip_images` for parameter details.
    """
    from .api import flip_images as _impl

    return _impl(
        pattern,
        destroy=destroy,
        scale=scale,
        crop=crop,
        resample_filter=resample_filter,
        output_path=output_path,
    )


def flip_image(
    source_path: Path,
    *,
    scale: float = 1.0,
    crop: int = 0,
    resample_filter: ResampleFilter | str = DEFAULT_FILTER,
    output_path: Path | None = None,
) -> ConversionOutcome:
    """Convert one image and return its outcome."""
    from .api import flip_image as _impl

    return _impl(
        source_path,
        scale=scale,
        crop=crop,
        resample_filter=resample_filter,
        output_path=output_path,
    )


__all__ = [
    "BatchSummary",
    "ConversionOutcome",
    "ResampleFilter",
    "__version__",
    "flip_image",
    "flip_images",
]
