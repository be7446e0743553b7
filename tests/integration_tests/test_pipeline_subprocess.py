"""Integration tests driving the pipeline through a real subprocess."""

from __future__ import annotations

import stat
import sys
from pathlib import Path

import pytest

from md_to_pdf.adapters.renderers import WkhtmltopdfRenderer
from md_to_pdf.application import ConversionRequest, convert
from md_to_pdf.errors import FailureKind
from md_to_pdf.themes import Theme

pytestmark = pytest.mark.skipif(
    sys.platform.startswith("win"), reason="fake renderer is a POSIX shell script"
)

FAKE_RENDERER = """\
#!/bin/sh
# usage: fake-renderer <input.html> <output.pdf>
if [ -n "$FAKE_RENDERER_FAIL" ]; then
  echo "Loading pages (1/6)"
  echo "Error: Failed loading page $1" >&2
  exit 1
fi
cp "$1" "$2.html-copy"
printf '%%PDF-1.4\\n%%fake\\n' > "$2"
"""


@pytest.fixture
def renderer_script(tmp_path: Path) -> Path:
    script = tmp_path / "bin" / "fake-renderer"
    script.parent.mkdir()
    script.write_text(FAKE_RENDERER, encoding="utf-8")
    script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return script


def test_subprocess_success(
    markdown_file: Path, tmp_path: Path, scratch_dir: Path, renderer_script: Path
) -> None:
    output = tmp_path / "build" / "report.pdf"

    result = convert(
        ConversionRequest(markdown_file, output, theme=Theme.GITHUB_DARK),
        renderer=WkhtmltopdfRenderer(binary=str(renderer_script), timeout=30),
    )

    assert result.ok, result.message
    assert output.read_bytes().startswith(b"%PDF-1.4")
    html = Path(f"{output}.html-copy").read_text(encoding="utf-8")
    assert "<table>" in html
    assert "#0d1117" in html
    assert list(scratch_dir.iterdir()) == []


def test_subprocess_failure_surfaces_stderr_and_stdout(
    markdown_file: Path,
    tmp_path: Path,
    scratch_dir: Path,
    renderer_script: Path,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv("FAKE_RENDERER_FAIL", "1")
    output = tmp_path / "report.pdf"

    result = convert(
        ConversionRequest(markdown_file, output),
        renderer=WkhtmltopdfRenderer(binary=str(renderer_script)),
    )

    assert result.kind is FailureKind.RENDER_ERROR
    assert "Error: Failed loading page" in result.stderr
    assert "Loading pages (1/6)" in result.stdout
    assert not output.exists()
    assert list(scratch_dir.iterdir()) == []


def test_subprocess_not_executable_is_launcher_error(
    markdown_file: Path, tmp_path: Path, scratch_dir: Path, renderer_script: Path
) -> None:
    renderer_script.chmod(0o644)

    result = convert(
        ConversionRequest(markdown_file, tmp_path / "report.pdf"),
        renderer=WkhtmltopdfRenderer(binary=str(renderer_script)),
    )

    assert result.kind is FailureKind.LAUNCHER_ERROR
    assert list(scratch_dir.iterdir()) == []


def test_renderer_absent_from_path(
    markdown_file: Path,
    tmp_path: Path,
    scratch_dir: Path,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    empty_bin = tmp_path / "empty-bin"
    empty_bin.mkdir()
    monkeypatch.setenv("PATH", str(empty_bin))

    result = convert(
        ConversionRequest(markdown_file, tmp_path / "report.pdf"),
        renderer=WkhtmltopdfRenderer(),
    )

    assert result.kind is FailureKind.LAUNCHER_ERROR
    assert "wkhtmltopdf" in result.message
    assert list(scratch_dir.iterdir()) == []


def test_subprocess_timeout_keeps_previous_output(
    markdown_file: Path, tmp_path: Path, scratch_dir: Path
) -> None:
    """Discard what a hung renderer wrote before it was killed."""
    script = tmp_path / "bin" / "slow-renderer"
    script.parent.mkdir()
    script.write_text(
        "#!/bin/sh\nprintf '%%PDF-1.4 partial' > \"$2\"\nexec sleep 30\n",
        encoding="utf-8",
    )
    script.chmod(script.stat().st_mode | stat.S_IXUSR)
    output = tmp_path / "report.pdf"
    output.write_bytes(b"previous good pdf")

    result = convert(
        ConversionRequest(markdown_file, output),
        renderer=WkhtmltopdfRenderer(binary=str(script), timeout=1),
    )

    assert result.kind is FailureKind.RENDER_ERROR
    assert "timed out" in result.message
    assert output.read_bytes() == b"previous good pdf"
    assert list(scratch_dir.iterdir()) == []
