#!/usr/bin/env python3
"""Statement budgets for the conversion use cases."""

from __future__ import annotations

import ast
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
TARGET = ROOT / "src/image_flip/application/use_cases.py"

# Nested statements count too, so a long loop body cannot hide in one `for`.
BUDGETS = {
    "convert_image": 5,
    "run_batch": 40,
    "_convert_request": 12,
    "_write_animated": 30,
    "_apply_geometry": 15,
}
DEFAULT_BUDGET = 10


def count_statements(node: ast.FunctionDef) -> int:
    return sum(
        1 for child in ast.walk(node) if isinstance(child, ast.stmt) and child is not node
    )


def find_violations(source: str) -> list[str]:
    """Return ``name: count > budget`` for every top-level function over budget."""
    violations: list[str] = []
    for node in ast.parse(source).body:
        if not isinstance(node, ast.FunctionDef):
            continue
        budget = BUDGETS.get(node.name, DEFAULT_BUDGET)
        count = count_statements(node)
        if count > budget:
            violations.append(f"{node.name}: {count} > {budget} statements")
    return violations


def main() -> None:
    """Fail when a use-case function outgrows its statement budget."""
    violations = find_violations(TARGET.read_text(encoding="utf-8"))
    if violations:
        raise SystemExit(
            "Use-case complexity threshold exceeded:\n"
            + "\n".join(f"- {v}" for v in violations)
        )
    print("Orchestrator complexity check passed.")


if __name__ == "__main__":
    main()
