"""Glob-based path expansion implementing the ``PathExpander`` port."""

from __future__ import annotations

import glob
import logging
import re
from pathlib import Path

from image_flip.errors import ConfigurationError

logger = logging.getLogger(__name__)

_SEPARATORS = re.compile(r"[\\/]")


def validate_pattern(pattern: str) -> None:
    """Reject malformed glob syntax.

    Raises
    ------
    ConfigurationError
        If the pattern is empty, has an unterminated character class, or uses
        ``**`` anywhere other than as a whole path component.
    """
    if not pattern:
        raise ConfigurationError("glob pattern cannot be empty.")

    for component in _SEPARATORS.split(pattern):
        if "**" in component and component != "**":
            raise ConfigurationError(
                f"invalid glob pattern `{pattern}`: recursive wildcards must "
                "form a single path component"
            )

    index = 0
    while index < len(pattern):
        if pattern[index] == "[":
            end = _class_end(pattern, index)
            if end is None:
                raise ConfigurationError(
                    f"invalid glob pattern `{pattern}`: unterminated character "
                    f"class at position {index}"
                )
            index = end
        index += 1


def _class_end(pattern: str, start: int) -> int | None:
    index = start + 1
    if index < len(pattern) and pattern[index] == "!":
        index += 1
    # A leading ``]`` is a literal member, not the terminator.
    if index < len(pattern) and pattern[index] == "]":
        index += 1
    end = pattern.find("]", index)
    return end if end != -1 else None


class GlobPathExpander:
    """Expand shell-style patterns with ``*``, ``**``, ``?`` and ``[...]``."""

    def expand(self, pattern: str) -> list[Path]:
        """Expand ``pattern`` into resolvable paths ordered per directory level.

        Entries that cannot be resolved on disk (dangling links, permission
        errors) are skipped without raising.
        """
        validate_pattern(pattern)
        matches: dict[Path, None] = {}
        for entry in glob.iglob(pattern, recursive=True, include_hidden=True):
            path = Path(entry)
            try:
                path.resolve(strict=True)
            except (OSError, RuntimeError):
                logger.debug("skipping unresolvable glob entry %s", entry)
                continue
            matches[path] = None
        return sorted(matches, key=lambda item: item.parts)
