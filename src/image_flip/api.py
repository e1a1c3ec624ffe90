"""Public conversion API (delegates to application use-cases)."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from image_flip.application.options import ConversionOptions
from image_flip.application.ports import ProgressReporter
from image_flip.application.results import BatchSummary, ConversionOutcome
from image_flip.application.use_cases import (
    build_conversion_options,
    convert_image,
    run_batch,
)
from image_flip.errors import ConfigurationError
from image_flip.schemas import BatchConversionConfig
from image_flip.types import DEFAULT_FILTER, ResampleFilter


def flip_images(
    pattern: str,
    *,
    destroy: bool = False,
    scale: float = 1.0,
    crop: int = 0,
    resample_filter: ResampleFilter | str = DEFAULT_FILTER,
    output_path: Optional[Path] = None,
    reporter: Optional[ProgressReporter] = None,
) -> BatchSummary:
    """Convert every image matched by ``pattern`` into a single-frame GIF.

    Parameters
    ----------
    pattern : str
        Glob pattern; a literal path is a pattern matching one file.
    destroy : bool, default=False
        Delete each source after its successful conversion.
    scale : float, default=1.0
        Uniform scale factor, clamped to 10.0.
    crop : int, default=0
        Pixels removed from every edge before scaling.
    resample_filter : ResampleFilter | str, default="lanczos3"
        Resampling algorithm used by the resize step.
    output_path : Path, optional
        Explicit destination, valid only when the pattern matches one file.
    reporter : ProgressReporter, optional
        Receives per-file progress events.

    Returns
    -------
    BatchSummary
        Converted count, elapsed time and one outcome per matched path.

    Raises
    ------
    ConfigurationError
        If parameters are invalid or the pattern is malformed.
    """
    try:
        config = BatchConversionConfig(
            pattern=pattern,
            destroy=destroy,
            scale=scale,
            crop_margin=crop,
            resample_filter=resample_filter,
            output_path=output_path,
        )
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid batch parameters: {exc}") from exc

    options = ConversionOptions(
        scale=config.scale,
        crop_margin=config.crop_margin,
        resample_filter=config.resample_filter,
        output_path=config.output_path,
    )
    return run_batch(
        pattern=config.pattern,
        options=options,
        destroy=config.destroy,
        reporter=reporter,
    )


def flip_image(
    source_path: Path,
    *,
    scale: float = 1.0,
    crop: int = 0,
    resample_filter: ResampleFilter | str = DEFAULT_FILTER,
    output_path: Optional[Path] = None,
) -> ConversionOutcome:
    """Convert a single image, returning its outcome instead of raising."""
    options = build_conversion_options(
        scale=scale,
        crop_margin=crop,
        resample_filter=resample_filter,
        output_path=output_path,
    )
    return convert_image(source_path=Path(source_path), options=options)
