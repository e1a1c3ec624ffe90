#!/usr/bin/env python3
"""Generate requirements.txt from pyproject.toml, or check that it is current."""

from __future__ import annotations

import argparse
import tomllib
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SYNC_EXTRAS = ("test",)


def render_requirements(pyproject_text: str) -> str:
    """Return the requirements.txt body for base dependencies plus extras."""
    project = tomllib.loads(pyproject_text)["project"]
    deps = set(project.get("dependencies", []))
    optional = project.get("optional-dependencies", {})
    for extra in SYNC_EXTRAS:
        deps.update(optional.get(extra, []))
    reqs = sorted(dep.strip() for dep in deps if dep.strip())
    header = [
        f"# Generated from pyproject.toml (base + extras: {','.join(SYNC_EXTRAS)})",
        "# Do not edit manually; run: python scripts/sync_requirements.py",
        "",
    ]
    return "\n".join([*header, *reqs]) + "\n"


def main(argv: list[str] | None = None, root: Path = ROOT) -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--check",
        action="store_true",
        help="fail instead of writing when requirements.txt is stale",
    )
    args = parser.parse_args(argv)

    expected = render_requirements((root / "pyproject.toml").read_text(encoding="utf-8"))
    target = root / "requirements.txt"
    if args.check:
        actual = target.read_text(encoding="utf-8") if target.exists() else ""
        if actual != expected:
            raise SystemExit(
                "requirements.txt is out of sync with pyproject.toml.\n"
                "Run: python scripts/sync_requirements.py"
            )
        print("Dependency sync check passed.")
        return
    target.write_text(expected, encoding="utf-8")
    print(f"Wrote {target.relative_to(root)}")


if __name__ == "__main__":
    main()
