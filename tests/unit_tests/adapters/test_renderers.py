"""Unit tests for renderer adapters."""

from __future__ import annotations

import subprocess
from pathlib import Path

import pytest
from pydantic import ValidationError

from md_to_pdf.adapters import renderers
from md_to_pdf.adapters.renderers import PythonMarkdownRenderer, WkhtmltopdfRenderer
from md_to_pdf.errors import LauncherError, RenderError
from md_to_pdf.schemas import RendererConfig


def test_command_places_paths_last() -> None:
    renderer = WkhtmltopdfRenderer(extra_args=["--quiet", "--page-size", "A4"])
    argv = renderer.command(Path("in.html"), Path("out.pdf"))
    assert argv == ["wkhtmltopdf", "--quiet", "--page-size", "A4", "in.html", "out.pdf"]


def test_render_captures_output(monkeypatch: pytest.MonkeyPatch) -> None:
    """Decode captured bytes leniently and keep the exit status."""
    seen: dict[str, object] = {}

    def fake_run(argv: list[str], **kwargs: object) -> subprocess.CompletedProcess[bytes]:
        seen["argv"] = argv
        seen.update(kwargs)
        return subprocess.CompletedProcess(argv, 2, stdout=b"Loading\n", stderr=b"bad \xff byte")

    monkeypatch.setattr(renderers.subprocess, "run", fake_run)

    outcome = WkhtmltopdfRenderer(binary="/opt/bin/wk").render(Path("a.html"), Path("b.pdf"))

    assert outcome.returncode == 2
    assert outcome.stdout == "Loading\n"
    assert outcome.stderr == "bad � byte"
    assert seen["argv"] == ["/opt/bin/wk", "a.html", "b.pdf"]
    assert seen["capture_output"] is True
    assert seen["timeout"] is None


def test_render_missing_binary_raises_launcher_error(tmp_path: Path) -> None:
    renderer = WkhtmltopdfRenderer(binary="md-to-pdf-no-such-renderer-binary")

    with pytest.raises(LauncherError) as excinfo:
        renderer.render(tmp_path / "in.html", tmp_path / "out.pdf")

    message = str(excinfo.value)
    assert "md-to-pdf-no-such-renderer-binary" in message
    assert "installed and in your PATH" in message
    assert not (tmp_path / "out.pdf").exists()


def test_render_timeout_raises_render_error(monkeypatch: pytest.MonkeyPatch) -> None:
    def fake_run(argv: list[str], **kwargs: object) -> subprocess.CompletedProcess[bytes]:
        raise subprocess.TimeoutExpired(argv, 1.5, output=b"partial", stderr=b"hung")

    monkeypatch.setattr(renderers.subprocess, "run", fake_run)

    with pytest.raises(RenderError, match="timed out after 1.5 seconds") as excinfo:
        WkhtmltopdfRenderer(timeout=1.5).render(Path("a.html"), Path("b.pdf"))

    assert excinfo.value.stderr == "hung"
    assert excinfo.value.stdout == "partial"


def test_from_config_round_trips_settings() -> None:
    config = RendererConfig(binary="weasy", extra_args=("-q",), timeout=30)
    renderer = WkhtmltopdfRenderer.from_config(config)
    assert renderer.config == config


def test_renderer_rejects_blank_binary() -> None:
    with pytest.raises(ValidationError):
        WkhtmltopdfRenderer(binary="")


def test_python_markdown_renderer_honours_extensions() -> None:
    table = "| a |\n| - |\n| 1 |\n"
    assert "<table>" in PythonMarkdownRenderer().render(table)
    assert "<table>" not in PythonMarkdownRenderer(extensions=()).render(table)
