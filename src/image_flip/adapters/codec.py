"""Pillow-backed image codec implementing the ``ImageCodec`` port."""

from __future__ import annotations

from pathlib import Path
from typing import BinaryIO

from PIL import Image

from image_flip.errors import DecodeError, EncodeError
from image_flip.types import Box, Dimensions, ResampleFilter

# Pillow has no Gaussian kernel; Hamming is its closest smooth windowed filter.
PILLOW_RESAMPLING: dict[ResampleFilter, Image.Resampling] = {
    ResampleFilter.NEAREST: Image.Resampling.NEAREST,
    ResampleFilter.TRIANGLE: Image.Resampling.BILINEAR,
    ResampleFilter.CATMULL_ROM: Image.Resampling.BICUBIC,
    ResampleFilter.GAUSSIAN: Image.Resampling.HAMMING,
    ResampleFilter.LANCZOS3: Image.Resampling.LANCZOS,
}

FRAME_MODE = "RGBA"

# 16-bit and 32-bit integer rasters, scaled down to 8-bit greyscale on decode.
WIDE_INTEGER_MODES = frozenset({"I", "I;16", "I;16L", "I;16B", "I;16N"})


class PillowImageCodec:
    """Decode with Pillow and encode single-frame GIFs."""

    def decode(self, path: Path) -> Image.Image:
        """Decode ``path`` into a fully loaded raster.

        Parameters
        ----------
        path : Path
            Source image path.

        Returns
        -------
        PIL.Image.Image
            Loaded image detached from the source file handle. Wide integer
            and float greyscale is reduced to 8-bit ``L``.

        Raises
        ------
        DecodeError
            If the file is missing, unreadable or not a supported image.
        """
        try:
            with Image.open(path) as image:
                image.load()
                return _normalize_depth(image.copy())
        except (OSError, ValueError, SyntaxError, Image.DecompressionBombError) as exc:
            raise DecodeError(path, f"failed to open image: `{path}` ({exc})") from exc

    def size(self, raster: Image.Image) -> Dimensions:
        return raster.size

    def crop(self, raster: Image.Image, box: Box) -> Image.Image:
        return raster.crop(box)

    def resize(
        self,
        raster: Image.Image,
        size: Dimensions,
        resample_filter: ResampleFilter,
    ) -> Image.Image:
        if raster.size == size:
            return raster
        resample = PILLOW_RESAMPLING[resample_filter]
        try:
            return raster.resize(size, resample=resample)
        except ValueError:
            # Some modes only support a subset of filters.
            raster = raster.convert(FRAME_MODE)
        return raster.resize(size, resample=resample)

    def encode(self, raster: Image.Image, stream: BinaryIO) -> None:
        """Write ``raster`` to ``stream`` as a one-frame GIF.

        Frames are normalized to RGBA first so palette, greyscale and CMYK
        sources all reach the GIF quantizer in the same channel order.
        """
        try:
            frame = raster.convert(FRAME_MODE)
            frame.save(stream, format="GIF", save_all=False)
        except (OSError, ValueError) as exc:
            name = getattr(stream, "name", "<stream>")
            raise EncodeError(Path(str(name)), str(exc)) from exc


def _normalize_depth(image: Image.Image) -> Image.Image:
    if image.mode in WIDE_INTEGER_MODES:
        return image.convert("I").point(lambda v: v * (1 / 256)).convert("L")
    if image.mode == "F":
        return image.convert("L")
    return image
