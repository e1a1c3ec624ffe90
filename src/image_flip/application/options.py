"""Typed option objects shared across conversion use-cases."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from image_flip.types import DEFAULT_FILTER, ResampleFilter

OUTPUT_SUFFIX = ".gif"


@dataclass(frozen=True)
class ConversionOptions:
    """Per-batch conversion settings, identical for every matched file.

    ``output_path`` overrides the derived ``.gif`` path and is only valid when
    the batch matches exactly one file.
    """

    scale: float = 1.0
    crop_margin: int = 0
    resample_filter: ResampleFilter = DEFAULT_FILTER
    output_path: Path | None = None

    def for_source(self, source_path: Path) -> ConversionRequest:
        """Bind these options to one source file."""
        return ConversionRequest(source_path=source_path, options=self)


@dataclass(frozen=True)
class ConversionRequest:
    """Options bound to a single source path."""

    source_path: Path
    options: ConversionOptions

    @property
    def output_path(self) -> Path:
        """Destination path: the override, or the source with a ``.gif`` suffix."""
        if self.options.output_path is not None:
            return self.options.output_path
        return self.source_path.with_suffix(OUTPUT_SUFFIX)

