#!/usr/bin/env python3
"""Import boundary checks between the package layers."""

from __future__ import annotations

import ast
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
PACKAGE = ROOT / "src/image_flip"

# glob relative to the package -> top-level modules it must not import
RULES: dict[str, tuple[str, ...]] = {
    "geometry.py": ("PIL", "typer"),
    "types.py": ("PIL", "typer"),
    "errors.py": ("PIL", "typer"),
    "schemas.py": ("PIL", "typer"),
    "application/*.py": ("PIL", "typer", "image_flip.cli"),
    "adapters/*.py": ("typer", "image_flip.cli", "image_flip.infrastructure"),
    "cli/*.py": ("PIL", "image_flip.adapters"),
}


def imported_modules(source: str) -> set[str]:
    modules: set[str] = set()
    for node in ast.walk(ast.parse(source)):
        if isinstance(node, ast.Import):
            modules.update(alias.name for alias in node.names)
        elif isinstance(node, ast.ImportFrom) and node.module and node.level == 0:
            modules.add(node.module)
    return modules


def _is_banned(module: str, banned: str) -> bool:
    return module == banned or module.startswith(banned + ".")


def find_violations(package: Path = PACKAGE) -> list[str]:
    violations: list[str] = []
    for pattern, banned in RULES.items():
        for path in sorted(package.glob(pattern)):
            for module in sorted(imported_modules(path.read_text(encoding="utf-8"))):
                if any(_is_banned(module, name) for name in banned):
                    rel = path.relative_to(package)
                    violations.append(f"{rel} imports {module}")
    return violations


def main() -> None:
    """Run repository architecture boundary checks."""
    violations = find_violations()
    if violations:
        raise SystemExit(
            "Architecture violations:\n" + "\n".join(f"- {v}" for v in violations)
        )
    print("Architecture checks passed.")


if __name__ == "__main__":
    main()
