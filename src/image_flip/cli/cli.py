#!/usr/bin/env python3
"""
image_flip.cli.cli

Typer-based CLI that flips still images into single-frame GIFs.

Examples
--------
Convert every PNG in a directory tree, halving each image:

    flip "shots/**/*.png" --scale 0.5

Crop 10px from each edge and delete the sources that converted:

    flip "*.jpg" --crop 10 --destroy

A literal path is a pattern that matches one file, and may be given an
explicit destination:

    flip photo.png --output avatar.gif
"""

from __future__ import annotations

import logging
import os
import sys
import traceback
from pathlib import Path

import typer

from image_flip import __version__
from image_flip.errors import FlipError
from image_flip.infrastructure.reporting import ConsoleProgressReporter
from image_flip.types import DEFAULT_FILTER, ResampleFilter

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="flip",
    help="Flip still images into single-frame animated GIFs.",
    no_args_is_help=True,
)

LOG_LEVEL_ENV = "FLIP_LOG_LEVEL"
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def _configure_logging(verbose: bool) -> None:
    """Route library logging to stderr.

    ``--verbose`` wins over ``FLIP_LOG_LEVEL``. The default level is ERROR since
    the console reporter already prints per-file failures.
    """
    level_name = "DEBUG" if verbose else os.getenv(LOG_LEVEL_ENV, "ERROR")
    level = logging.getLevelName(level_name.strip().upper())
    if not isinstance(level, int):
        level = logging.ERROR
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr, force=True)


def _print_error(exc: Exception, debug: bool) -> int:
    """Print a user-friendly error.

    Parameters
    ----------
    exc : Exception
        Exception raised while running the batch.
    debug : bool
        Whether to include traceback details.

    Returns
    -------
    int
        Process exit code.
    """
    typer.echo(f"✗ {type(exc).__name__}: {exc}", err=True)
    if debug:
        typer.echo("\nTraceback:", err=True)
        typer.echo("".join(traceback.format_exception(type(exc), exc, exc.__traceback__)), err=True)
    code = getattr(exc, "exit_code", None)
    if isinstance(code, int) and code > 0:
        return code
    return 1


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"flip {__version__}")
        raise typer.Exit()


@app.command()
def flip_cmd(
    pattern: str = typer.Argument(
        ...,
        help="Glob pattern selecting the images to flip (quote it to stop shell expansion).",
    ),
    destroy: bool = typer.Option(
        False, "-d", "--destroy", help="Delete each source after a successful conversion."
    ),
    scale: float = typer.Option(
        1.0, "-s", "--scale", help="Uniform scale factor (clamped to 10.0)."
    ),
    resample_filter: ResampleFilter = typer.Option(
        DEFAULT_FILTER,
        "--filter",
        case_sensitive=False,
        help="Resampling filter used when scaling.",
    ),
    crop: int = typer.Option(
        0, "-c", "--crop", min=0, help="Pixels to crop from each edge before scaling."
    ),
    output: Path | None = typer.Option(
        None,
        "-o",
        "--output",
        dir_okay=False,
        help="Explicit output path; only valid when the pattern matches one file.",
    ),
    debug: bool = typer.Option(False, "--debug", help="Show full tracebacks on error."),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Enable debug logging."),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """Flip the images matched by PATTERN into single-frame GIFs.

    Per-file failures are printed to stderr and do not change the exit
    status; only configuration errors (such as a malformed pattern) do.
    """
    del version
    _configure_logging(verbose)

    try:
        from image_flip.api import flip_images

        flip_images(
            pattern,
            destroy=destroy,
            scale=scale,
            crop=crop,
            resample_filter=resample_filter,
            output_path=output,
            reporter=ConsoleProgressReporter(),
        )
    except FlipError as exc:
        raise typer.Exit(code=_print_error(exc, debug))
    except Exception as exc:
        logger.debug("unexpected error during batch", exc_info=True)
        raise typer.Exit(code=_print_error(exc, debug))


if __name__ == "__main__":
    app()
