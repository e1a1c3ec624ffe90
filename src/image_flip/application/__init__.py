"""Application-layer use-cases and option objects."""

from __future__ import annotations

from pathlib import Path

from image_flip.application.options import ConversionOptions, ConversionRequest
from image_flip.application.ports import (
    FileRemover,
    ImageCodec,
    PathExpander,
    ProgressReporter,
)
from image_flip.application.results import (
    BatchSummary,
    ConversionFailure,
    ConversionOutcome,
    ConversionSuccess,
    DeleteFailure,
)
from image_flip.types import DEFAULT_FILTER, ResampleFilter


def build_conversion_options(
    *,
    scale: float = 1.0,
    crop_margin: int = 0,
    resample_filter: ResampleFilter | str = DEFAULT_FILTER,
    output_path: Path | None = None,
) -> ConversionOptions:
    """Build typed conversion options via lazy use-case import."""
    from image_flip.application.use_cases import build_conversion_options as _impl

    return _impl(
        scale=scale,
        crop_margin=crop_margin,
        resample_filter=resample_filter,
        output_path=output_path,
    )


def convert_image(
    *,
    source_path: Path,
    options: ConversionOptions,
    codec: ImageCodec | None = None,
) -> ConversionOutcome:
    """Convert one image via lazy use-case import."""
    from image_flip.application.use_cases import convert_image as _impl

    return _impl(source_path=source_path, options=options, codec=codec)


def run_batch(
    *,
    pattern: str,
    options: ConversionOptions,
    destroy: bool = False,
    expander: PathExpander | None = None,
    codec: ImageCodec | None = None,
    remover: FileRemover | None = None,
    reporter: ProgressReporter | None = None,
) -> BatchSummary:
    """Run a batch conversion via lazy use-case import."""
    from image_flip.application.use_cases import run_batch as _impl

    return _impl(
        pattern=pattern,
        options=options,
        destroy=destroy,
        expander=expander,
        codec=codec,
        remover=remover,
        reporter=reporter,
    )


__all__ = [
    "BatchSummary",
    "ConversionFailure",
    "ConversionOptions",
    "ConversionOutcome",
    "ConversionRequest",
    "ConversionSuccess",
    "DeleteFailure",
    "build_conversion_options",
    "convert_image",
    "run_batch",
]
