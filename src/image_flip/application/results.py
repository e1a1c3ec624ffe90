"""Application-layer result objects."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TypeAlias


@dataclass(frozen=True)
class ConversionSuccess:
    """A source image written as a single-frame animated image."""

    source_path: Path
    output_path: Path
    elapsed: float
    output_size_bytes: int

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class ConversionFailure:
    """A source image that could not be converted."""

    source_path: Path
    reason: str

    @property
    def ok(self) -> bool:
        return False


ConversionOutcome: TypeAlias = ConversionSuccess | ConversionFailure


@dataclass(frozen=True)
class DeleteFailure:
    """A converted source that could not be removed."""

    path: Path
    reason: str


@dataclass(frozen=True)
class BatchSummary:
    """Aggregate result of one batch run."""

    converted: int
    elapsed: float
    outcomes: tuple[ConversionOutcome, ...] = ()
    deleted: tuple[Path, ...] = ()
    delete_failures: tuple[DeleteFailure, ...] = ()

    @property
    def failures(self) -> tuple[ConversionFailure, ...]:
        return tuple(o for o in self.outcomes if isinstance(o, ConversionFailure))

    @property
    def failed(self) -> int:
        return len(self.failures)
