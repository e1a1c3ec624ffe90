"""Integration tests for the Pillow codec adapter."""

from __future__ import annotations

import io
from pathlib import Path

import pytest
from PIL import Image

from image_flip.adapters.codec import PILLOW_RESAMPLING, PillowImageCodec
from image_flip.errors import DecodeError, EncodeError
from image_flip.types import ResampleFilter


def test_every_filter_has_a_pillow_kernel() -> None:
    assert set(PILLOW_RESAMPLING) == set(ResampleFilter)


@pytest.mark.parametrize("mode", ["RGB", "RGBA", "L", "P", "CMYK"])
@pytest.mark.parametrize("resample_filter", list(ResampleFilter))
def test_encode_round_trip_keeps_dimensions(
    tmp_path: Path, make_image, mode: str, resample_filter: ResampleFilter
) -> None:
    """Re-decoding the GIF yields the dimensions handed to the encoder."""
    suffix = ".jpg" if mode == "CMYK" else ".png"
    source = make_image(tmp_path / f"src{suffix}", size=(40, 30), mode=mode)
    codec = PillowImageCodec()

    raster = codec.decode(source)
    raster = codec.resize(raster, (17, 9), resample_filter)
    buffer = io.BytesIO()
    codec.encode(raster, buffer)

    buffer.seek(0)
    with Image.open(buffer) as decoded:
        assert decoded.format == "GIF"
        assert decoded.size == (17, 9)
        assert getattr(decoded, "n_frames", 1) == 1


def test_decode_detaches_from_file(tmp_path: Path, make_image) -> None:
    source = make_image(tmp_path / "a.png")

    raster = PillowImageCodec().decode(source)
    source.unlink()

    assert raster.size == (32, 24)


def test_crop_uses_box(tmp_path: Path, make_image) -> None:
    codec = PillowImageCodec()
    raster = codec.decode(make_image(tmp_path / "a.png", size=(100, 100)))

    cropped = codec.crop(raster, (10, 10, 90, 90))

    assert codec.size(cropped) == (80, 80)


def test_decode_rejects_non_images(tmp_path: Path) -> None:
    bogus = tmp_path / "notes.png"
    bogus.write_text("definitely not pixels")

    with pytest.raises(DecodeError, match="failed to open image"):
        PillowImageCodec().decode(bogus)


def test_decode_rejects_missing_file(tmp_path: Path) -> None:
    with pytest.raises(DecodeError):
        PillowImageCodec().decode(tmp_path / "missing.png")


def test_encode_wraps_stream_errors(tmp_path: Path, make_image) -> None:
    codec = PillowImageCodec()
    raster = codec.decode(make_image(tmp_path / "a.png"))
    handle = (tmp_path / "closed.gif").open("wb")
    handle.close()

    with pytest.raises(EncodeError):
        codec.encode(raster, handle)


@pytest.mark.parametrize(
    ("mode", "suffix"), [("I;16", ".png"), ("I", ".png"), ("F", ".tiff")]
)
@pytest.mark.parametrize(
    "resample_filter", [f for f in ResampleFilter if f is not ResampleFilter.NEAREST]
)
def test_wide_greyscale_resizes_with_smooth_filters(
    tmp_path: Path,
    make_image,
    mode: str,
    suffix: str,
    resample_filter: ResampleFilter,
) -> None:
    source = make_image(tmp_path / f"depth{suffix}", size=(40, 30), mode=mode)
    codec = PillowImageCodec()

    raster = codec.decode(source)
    assert raster.mode == "L"
    raster = codec.resize(raster, (17, 9), resample_filter)
    buffer = io.BytesIO()
    codec.encode(raster, buffer)

    buffer.seek(0)
    with Image.open(buffer) as decoded:
        assert decoded.size == (17, 9)
