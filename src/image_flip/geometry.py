"""Crop and resize geometry.

Pure functions over pixel dimensions. Nothing here touches the filesystem or
the codec, so boundary-condition policy can be tested in isolation.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from image_flip.types import Box, Dimensions

MAX_SCALE = 10.0
MIN_DIMENSION = 2


@dataclass(frozen=True)
class CropBox:
    """Region kept after a symmetric crop, in source pixel coordinates."""

    left: int
    top: int
    right: int
    bottom: int

    @property
    def width(self) -> int:
        return self.right - self.left

    @property
    def height(self) -> int:
        return self.bottom - self.top

    def as_box(self) -> Box:
        """Return the ``(left, top, right, bottom)`` tuple codecs expect."""
        return (self.left, self.top, self.right, self.bottom)


@dataclass(frozen=True)
class CropRejected:
    """Crop request that cannot be satisfied for the given dimensions."""

    reason: str


def compute_crop(width: int, height: int, crop_margin: int) -> CropBox | CropRejected:
    """Compute a symmetric crop removing ``crop_margin`` pixels from each edge.

    Parameters
    ----------
    width, height : int
        Current image dimensions.
    crop_margin : int
        Pixels removed from every side. ``0`` keeps the whole image.

    Returns
    -------
    CropBox | CropRejected
        The retained region, or a rejection when the image is too small on
        either axis. Rejections are never clamped into a smaller crop.

    Raises
    ------
    ValueError
        If ``crop_margin`` is negative.
    """
    if crop_margin < 0:
        raise ValueError(f"crop margin must be non-negative, got {crop_margin}")
    if crop_margin == 0:
        return CropBox(0, 0, width, height)

    reduction = 2 * crop_margin
    if reduction >= width or reduction >= height:
        return CropRejected(
            f"image is too small to crop {crop_margin}px from each side "
            f"(image is {width}x{height}, crop removes {reduction}px per axis)"
        )
    return CropBox(
        crop_margin,
        crop_margin,
        width - crop_margin,
        height - crop_margin,
    )


def _round_half_away(value: float) -> int:
    # Python's round() is banker's rounding; pixel math rounds .5 up.
    if value < 0:
        return -math.floor(-value + 0.5)
    return math.floor(value + 0.5)


def compute_resize(width: int, height: int, scale: float) -> Dimensions:
    """Scale dimensions, flooring each axis at ``MIN_DIMENSION`` pixels."""
    return (
        max(MIN_DIMENSION, _round_half_away(width * scale)),
        max(MIN_DIMENSION, _round_half_away(height * scale)),
    )


def clamp_scale(scale: float) -> float:
    """Clamp a scale factor to ``MAX_SCALE``."""
    return min(scale, MAX_SCALE)
