"""Application use-cases orchestrating conversion workflows."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from pathlib import Path
from typing import TypeAlias

from pydantic import ValidationError

from image_flip.adapters.codec import PillowImageCodec
from image_flip.adapters.expander import GlobPathExpander
from image_flip.adapters.remover import UnlinkFileRemover
from image_flip.application.options import ConversionOptions, ConversionRequest
from image_flip.application.ports import (
    FileRemover,
    ImageCodec,
    PathExpander,
    ProgressReporter,
    Raster,
)
from image_flip.application.results import (
    BatchSummary,
    ConversionFailure,
    ConversionOutcome,
    ConversionSuccess,
    DeleteFailure,
)
from image_flip.errors import (
    ConfigurationError,
    CropRejectedError,
    DeleteError,
    EncodeError,
    ItemError,
    OutputCreateError,
    TransformError,
)
from image_flip.geometry import CropRejected, compute_crop, compute_resize
from image_flip.infrastructure.reporting import NullProgressReporter
from image_flip.schemas import ImageConversionConfig
from image_flip.types import DEFAULT_FILTER, ResampleFilter

logger = logging.getLogger(__name__)

Clock: TypeAlias = Callable[[], float]


def convert_image(
    *,
    source_path: Path,
    options: ConversionOptions,
    codec: ImageCodec | None = None,
    clock: Clock | None = None,
) -> ConversionOutcome:
    """Use-case: convert one image into a single-frame animated image.

    Every per-file error is returned as a ``ConversionFailure``; nothing
    raised by decoding, cropping, writing or encoding escapes this function.
    """
    return _convert_request(
        options.for_source(source_path),
        codec or PillowImageCodec(),
        clock or time.perf_counter,
    )


def run_batch(
    *,
    pattern: str,
    options: ConversionOptions,
    destroy: bool = False,
    expander: PathExpander | None = None,
    codec: ImageCodec | None = None,
    remover: FileRemover | None = None,
    reporter: ProgressReporter | None = None,
    clock: Clock | None = None,
) -> BatchSummary:
    """Use-case: convert every file matched by ``pattern``, one at a time.

    Raises
    ------
    ConfigurationError
        If the pattern is malformed, or an output override is combined with
        more than one match. Nothing on disk has been touched at that point.
    """
    expander = expander or GlobPathExpander()
    codec = codec or PillowImageCodec()
    remover = remover or UnlinkFileRemover()
    reporter = reporter or NullProgressReporter()
    clock = clock or time.perf_counter

    started_at = clock()
    paths = expander.expand(pattern)
    logger.debug("pattern %r matched %d path(s)", pattern, len(paths))
    if options.output_path is not None and len(paths) > 1:
        raise ConfigurationError(
            f"an explicit output path needs exactly one match, "
            f"but `{pattern}` matched {len(paths)} files."
        )

    outcomes: list[ConversionOutcome] = []
    for path in paths:
        request = options.for_source(path)
        reporter.started(path, request.output_path)
        outcome = _convert_request(request, codec, clock)
        outcomes.append(outcome)
        if isinstance(outcome, ConversionSuccess):
            reporter.succeeded(outcome)
        else:
            reporter.failed(outcome)

    candidates = [o.source_path for o in outcomes if isinstance(o, ConversionSuccess)]
    deleted: list[Path] = []
    delete_failures: list[DeleteFailure] = []
    if destroy:
        for path in candidates:
            try:
                remover.remove(path)
            except DeleteError as exc:
                logger.warning("delete failed: %s", exc.reason)
                failure = DeleteFailure(path=path, reason=exc.reason)
                delete_failures.append(failure)
                reporter.delete_failed(failure)
                continue
            deleted.append(path)

    summary = BatchSummary(
        converted=len(candidates),
        elapsed=clock() - started_at,
        outcomes=tuple(outcomes),
        deleted=tuple(deleted),
        delete_failures=tuple(delete_failures),
    )
    reporter.finished(summary)
    return summary


def build_conversion_options(
    *,
    scale: float = 1.0,
    crop_margin: int = 0,
    resample_filter: ResampleFilter | str = DEFAULT_FILTER,
    output_path: Path | None = None,
) -> ConversionOptions:
    """Build typed option object from command/API params.

    The scale factor is clamped to ``geometry.MAX_SCALE``.
    """
    try:
        config = ImageConversionConfig(
            scale=scale,
            crop_margin=crop_margin,
            resample_filter=resample_filter,
            output_path=output_path,
        )
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid conversion parameters: {exc}") from exc
    return ConversionOptions(
        scale=config.scale,
        crop_margin=config.crop_margin,
        resample_filter=config.resample_filter,
        output_path=config.output_path,
    )


def _convert_request(
    request: ConversionRequest, codec: ImageCodec, clock: Clock
) -> ConversionOutcome:
    started_at = clock()
    try:
        output_path, size = _write_animated(request, codec)
    except ItemError as exc:
        logger.warning("conversion failed for %s: %s", request.source_path, exc.reason)
        return ConversionFailure(source_path=request.source_path, reason=exc.reason)
    except Exception as exc:
        # Codecs are plug-ins; whatever they raise stays scoped to this file.
        logger.warning(
            "unexpected error converting %s", request.source_path, exc_info=True
        )
        return ConversionFailure(
            source_path=request.source_path,
            reason=f"failed to convert image: `{request.source_path}` "
            f"({type(exc).__name__}: {exc})",
        )
    return ConversionSuccess(
        source_path=request.source_path,
        output_path=output_path,
        elapsed=clock() - started_at,
        output_size_bytes=size,
    )


def _write_animated(request: ConversionRequest, codec: ImageCodec) -> tuple[Path, int]:
    source = request.source_path

    logger.debug("decoding %s", source)
    raster = codec.decode(source)
    try:
        raster = _apply_geometry(raster, request, codec)
    except (OSError, ValueError, MemoryError) as exc:
        raise TransformError(
            source, f"failed to transform image: `{source}` ({exc})"
        ) from exc

    output = request.output_path
    if _same_file(output, source):
        raise OutputCreateError(
            output, f"refusing to overwrite source image: `{output}`"
        )
    try:
        handle = output.open("wb")
    except OSError as exc:
        raise OutputCreateError(
            output, f"failed to create output file: `{output}` ({exc})"
        ) from exc

    try:
        with handle:
            codec.encode(raster, handle)
    except Exception as exc:
        _discard(output)
        detail = exc.reason if isinstance(exc, EncodeError) else str(exc)
        raise EncodeError(
            source, f"failed to encode image: `{source}` ({detail})"
        ) from exc

    try:
        size = output.stat().st_size
    except OSError as exc:
        raise EncodeError(
            source, f"failed to encode image: `{source}` ({exc})"
        ) from exc
    if size == 0:
        _discard(output)
        raise EncodeError(source, f"failed to encode image: `{source}` (empty output)")
    return output, size


def _apply_geometry(
    raster: Raster, request: ConversionRequest, codec: ImageCodec
) -> Raster:
    source = request.source_path
    options = request.options

    if options.crop_margin > 0:
        width, height = codec.size(raster)
        crop = compute_crop(width, height, options.crop_margin)
        if isinstance(crop, CropRejected):
            raise CropRejectedError(source, f"cannot crop `{source}`: {crop.reason}")
        raster = codec.crop(raster, crop.as_box())

    width, height = codec.size(raster)
    target = compute_resize(width, height, options.scale)
    logger.debug("resizing %s from %dx%d to %dx%d", source, width, height, *target)
    return codec.resize(raster, target, options.resample_filter)


def _same_file(output: Path, source: Path) -> bool:
    try:
        return output.resolve() == source.resolve()
    except (OSError, RuntimeError):
        return False


def _discard(path: Path) -> None:
    try:
        path.unlink(missing_ok=True)
    except OSError:
        logger.warning("could not remove incomplete output %s", path)
