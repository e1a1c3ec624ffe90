"""Unit tests for console progress reporting."""

from __future__ import annotations

from pathlib import Path

import pytest

from image_flip.application.results import (
    BatchSummary,
    ConversionFailure,
    ConversionSuccess,
    DeleteFailure,
)
from image_flip.infrastructure.reporting import (
    ConsoleProgressReporter,
    NullProgressReporter,
    format_duration,
)


@pytest.mark.parametrize(
    ("seconds", "expected"),
    [
        (0.0000123, "12.30µs"),
        (0.01234, "12.34ms"),
        (1.5, "1.50s"),
        (59.994, "59.99s"),
        (123.1, "2m 03.10s"),
        (0.000999999, "1.00ms"),
        (0.9999999, "1.00s"),
        (59.996, "1m 00.00s"),
        (119.999, "2m 00.00s"),
    ],
)
def test_format_duration(seconds: float, expected: str) -> None:
    assert format_duration(seconds) == expected


def test_console_reporter_overwrites_progress_line(capsys: pytest.CaptureFixture[str]) -> None:
    reporter = ConsoleProgressReporter()
    out = Path("shots/a.gif")

    reporter.started(Path("shots/a.png"), out)
    reporter.succeeded(
        ConversionSuccess(
            source_path=Path("shots/a.png"),
            output_path=out,
            elapsed=0.25,
            output_size_bytes=10,
        )
    )

    captured = capsys.readouterr()
    assert captured.out.startswith(f"{out}: flipping...\r{out}: done in 250.00ms")
    assert captured.err == ""


def test_console_reporter_failure_goes_to_stderr(capsys: pytest.CaptureFixture[str]) -> None:
    reporter = ConsoleProgressReporter()

    reporter.started(Path("a.png"), Path("a.gif"))
    reporter.failed(ConversionFailure(source_path=Path("a.png"), reason="failed to open image: `a.png`"))
    reporter.delete_failed(DeleteFailure(path=Path("b.png"), reason="failed to delete `b.png`"))

    captured = capsys.readouterr()
    assert captured.out == "a.gif: flipping...\n"
    assert captured.err.splitlines() == [
        "failed to open image: `a.png` :(",
        "failed to delete `b.png` :(",
    ]


@pytest.mark.parametrize(("count", "noun"), [(0, "images"), (1, "image"), (3, "images")])
def test_console_reporter_summary(
    capsys: pytest.CaptureFixture[str], count: int, noun: str
) -> None:
    ConsoleProgressReporter().finished(BatchSummary(converted=count, elapsed=2.0))

    assert capsys.readouterr().out == f"flipped {count} {noun} in 2.00s\n"


def test_null_reporter_is_silent(capsys: pytest.CaptureFixture[str]) -> None:
    reporter = NullProgressReporter()
    reporter.started(Path("a.png"), Path("a.gif"))
    reporter.failed(ConversionFailure(source_path=Path("a.png"), reason="nope"))
    reporter.finished(BatchSummary(converted=0, elapsed=0.0))

    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""
