"""End-to-end smoke tests for the installed console script."""

from __future__ import annotations

import subprocess
from pathlib import Path

import md_to_pdf


def test_package_import_smoke() -> None:
    """Ensure package can be imported in the test process."""
    assert md_to_pdf.__version__


def test_cli_help_smoke() -> None:
    """Ensure the installed CLI entrypoint responds to --help."""
    result = subprocess.run(
        ["md-to-pdf", "--help"],
        capture_output=True,
        text=True,
        check=False,
    )

    assert result.returncode == 0, result.stderr
    assert "Convert Markdown documents" in result.stdout


def test_cli_missing_source_fails_cleanly(tmp_path: Path) -> None:
    """Ensure a missing source yields a classified failure, not a traceback."""
    result = subprocess.run(
        ["md-to-pdf", "convert", str(tmp_path / "missing.md")],
        capture_output=True,
        text=True,
        check=False,
    )

    assert result.returncode == 3
    assert "Markdown file not found" in result.stderr
    assert "Traceback" not in result.stderr
