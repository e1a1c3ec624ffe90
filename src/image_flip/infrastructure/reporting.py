"""Progress reporter implementations."""

from __future__ import annotations

from pathlib import Path

import typer

from image_flip.application.results import (
    BatchSummary,
    ConversionFailure,
    ConversionSuccess,
    DeleteFailure,
)

# Pads the overwritten progress line so a shorter message hides the longer one.
_LINE_PAD = " " * 10


def format_duration(seconds: float) -> str:
    """Render an elapsed duration for humans.

    Examples
    --------
    >>> format_duration(0.01234)
    '12.34ms'
    >>> format_duration(1.5)
    '1.50s'
    >>> format_duration(123.1)
    '2m 03.10s'
    >>> format_duration(59.996)
    '1m 00.00s'
    """
    # Round first so a value never prints as 1000.00ms or 60.00s.
    micros = round(seconds * 1e6, 2)
    if micros < 1e3:
        return f"{micros:.2f}µs"
    millis = round(seconds * 1e3, 2)
    if millis < 1e3:
        return f"{millis:.2f}ms"
    secs = round(seconds, 2)
    if secs < 60.0:
        return f"{secs:.2f}s"
    minutes, rest = divmod(secs, 60.0)
    return f"{int(minutes)}m {rest:05.2f}s"


class NullProgressReporter:
    """Discard all progress events."""

    def started(self, source_path: Path, output_path: Path) -> None:
        del source_path, output_path

    def succeeded(self, outcome: ConversionSuccess) -> None:
        del outcome

    def failed(self, outcome: ConversionFailure) -> None:
        del outcome

    def delete_failed(self, failure: DeleteFailure) -> None:
        del failure

    def finished(self, summary: BatchSummary) -> None:
        del summary


class ConsoleProgressReporter:
    """Print per-file progress to stdout and failures to stderr."""

    def __init__(self) -> None:
        self._pending: Path | None = None

    def started(self, source_path: Path, output_path: Path) -> None:
        del source_path
        self._pending = output_path
        typer.echo(f"{output_path}: flipping...", nl=False)

    def succeeded(self, outcome: ConversionSuccess) -> None:
        self._pending = None
        typer.echo(
            f"\r{outcome.output_path}: done in {format_duration(outcome.elapsed)}{_LINE_PAD}"
        )

    def failed(self, outcome: ConversionFailure) -> None:
        if self._pending is not None:
            # Terminate the dangling "flipping..." line before writing to stderr.
            typer.echo("")
            self._pending = None
        typer.echo(f"{outcome.reason} :(", err=True)

    def delete_failed(self, failure: DeleteFailure) -> None:
        typer.echo(f"{failure.reason} :(", err=True)

    def finished(self, summary: BatchSummary) -> None:
        noun = "image" if summary.converted == 1 else "images"
        typer.echo(
            f"flipped {summary.converted} {noun} in {format_duration(summary.elapsed)}"
        )
