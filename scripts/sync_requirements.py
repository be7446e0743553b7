#!/usr/bin/env python3
"""Generate or verify requirements.txt from pyproject.toml."""

from __future__ import annotations

import argparse
import tomllib
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
REQUIREMENTS = ROOT / "requirements.txt"
SYNC_EXTRAS = ("cli",)


def _declared() -> list[str]:
    project = tomllib.loads((ROOT / "pyproject.toml").read_text(encoding="utf-8"))["project"]
    deps = set(project.get("dependencies", []))
    for extra in SYNC_EXTRAS:
        deps.update(project.get("optional-dependencies", {}).get(extra, []))
    return sorted(dep.strip() for dep in deps if dep.strip())


def _pinned() -> list[str]:
    lines = REQUIREMENTS.read_text(encoding="utf-8").splitlines()
    return sorted(
        entry
        for entry in (line.split("#", 1)[0].strip() for line in lines)
        if entry
    )


def _render(reqs: list[str]) -> str:
    header = [
        f"# Generated from pyproject.toml (base + extras: {','.join(SYNC_EXTRAS)})",
        "# Do not edit manually; run: python scripts/sync_requirements.py",
    ]
    return "\n".join(header + reqs) + "\n"


def main() -> None:
    """Rewrite requirements.txt, or fail when ``--check`` finds drift."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--check",
        action="store_true",
        help="Only compare; exit non-zero when requirements.txt is stale.",
    )
    args = parser.parse_args()

    declared = _declared()
    if not args.check:
        REQUIREMENTS.write_text(_render(declared), encoding="utf-8")
        print(f"Wrote {len(declared)} requirements to requirements.txt")
        return

    pinned = _pinned()
    missing = sorted(set(declared) - set(pinned))
    unexpected = sorted(set(pinned) - set(declared))
    if missing or unexpected:
        parts = ["requirements.txt is out of sync with pyproject.toml."]
        parts.extend(f"- missing: {entry}" for entry in missing)
        parts.extend(f"- unexpected: {entry}" for entry in unexpected)
        parts.append("Run: python scripts/sync_requirements.py")
        raise SystemExit("\n".join(parts))
    print("Dependency sync check passed.")


if __name__ == "__main__":
    main()
