"""Filesystem remover implementing the ``FileRemover`` port."""

from __future__ import annotations

from pathlib import Path

from image_flip.errors import DeleteError


class UnlinkFileRemover:
    """Delete files with ``Path.unlink``."""

    def remove(self, path: Path) -> None:
        try:
            path.unlink()
        except OSError as exc:
            raise DeleteError(path, f"failed to delete `{path}` ({exc})") from exc
