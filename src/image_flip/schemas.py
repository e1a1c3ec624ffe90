"""Pydantic schemas for runtime validation of conversion inputs."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from image_flip.geometry import clamp_scale
from image_flip.types import DEFAULT_FILTER, ResampleFilter


class ImageConversionConfig(BaseModel):
    """Validated conversion settings shared by every file of a run."""

    model_config = ConfigDict(extra="forbid")

    scale: float = Field(default=1.0, gt=0.0)
    crop_margin: int = Field(default=0, ge=0)
    resample_filter: ResampleFilter = DEFAULT_FILTER
    output_path: Path | None = None

    @field_validator("scale")
    @classmethod
    def _clamp_scale(cls, value: float) -> float:
        return clamp_scale(value)


class BatchConversionConfig(ImageConversionConfig):
    """Validated input for a glob-driven batch run."""

    pattern: str = Field(min_length=1)
    destroy: bool = False

    @field_validator("pattern")
    @classmethod
    def _validate_pattern(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("pattern cannot be blank.")
        return value
