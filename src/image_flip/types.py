"""Shared type aliases and enums for image-flip modules."""

from __future__ import annotations

from enum import Enum
from typing import TypeAlias


class ResampleFilter(str, Enum):
    """Resampling algorithm used when an image is resized."""

    NEAREST = "nearest"
    TRIANGLE = "triangle"
    CATMULL_ROM = "catmull-rom"
    GAUSSIAN = "gaussian"
    LANCZOS3 = "lanczos3"


DEFAULT_FILTER = ResampleFilter.LANCZOS3

Dimensions: TypeAlias = tuple[int, int]
Box: TypeAlias = tuple[int, int, int, int]
