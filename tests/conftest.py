"""Shared pytest configuration, marker assignment and image fixtures."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import TypeAlias

import pytest

ImageFactory: TypeAlias = Callable[..., Path]


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Attach suite markers based on test file path."""
    del config
    for item in items:
        path = Path(str(item.fspath))
        parts = set(path.parts)
        if "e2e_tests" in parts:
            item.add_marker(pytest.mark.e2e)
        elif "integration_tests" in parts:
            item.add_marker(pytest.mark.integration)
        elif "unit_tests" in parts:
            item.add_marker(pytest.mark.unit)


@pytest.fixture
def make_image() -> ImageFactory:
    """Write a solid-colour image to disk and return its path."""
    from PIL import Image

    def _make(
        path: Path,
        size: tuple[int, int] = (32, 24),
        mode: str = "RGB",
        color: object = (200, 40, 40),
    ) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        if mode in {"L", "P"} and isinstance(color, tuple):
            color = 128
        elif mode in {"I", "I;16", "F"} and isinstance(color, tuple):
            color = 40000
        Image.new(mode, size, color).save(path)
        return path

    return _make
