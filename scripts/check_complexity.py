#!/usr/bin/env python3
"""Complexity guard for the conversion pipeline and its adapters."""

from __future__ import annotations

import ast
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
TARGETS = (
    ROOT / "src/md_to_pdf/application/use_cases.py",
    ROOT / "src/md_to_pdf/adapters/renderers.py",
)
# Pipeline stages stay small; the orchestrator only sequences them.
MAX_STATEMENTS = 25


def _statement_count(node: ast.AST) -> int:
    return sum(1 for child in ast.walk(node) if isinstance(child, ast.stmt)) - 1


def main() -> None:
    """Fail when any function exceeds the nested statement threshold."""
    violations: list[str] = []
    for target in TARGETS:
        tree = ast.parse(target.read_text(encoding="utf-8"))
        for node in ast.walk(tree):
            if isinstance(node, ast.FunctionDef):
                count = _statement_count(node)
                if count > MAX_STATEMENTS:
                    violations.append(f"{target.name}:{node.name}: {count} statements")
    if violations:
        raise SystemExit(
            "Complexity threshold exceeded:\n" + "\n".join(f"- {v}" for v in violations)
        )
    print("Complexity check passed.")


if __name__ == "__main__":
    main()
