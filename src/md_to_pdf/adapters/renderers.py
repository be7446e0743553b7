"""Renderers implementing application ports."""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Sequence
from pathlib import Path

from md_to_pdf.application.results import RenderOutcome
from md_to_pdf.document import DEFAULT_EXTENSIONS, render_markdown
from md_to_pdf.errors import LauncherError, RenderError
from md_to_pdf.schemas import RendererConfig

logger = logging.getLogger(__name__)

DEFAULT_BINARY = "wkhtmltopdf"


def _decode(data: bytes | None) -> str:
    if not data:
        return ""
    return data.decode("utf-8", errors="replace")


class PythonMarkdownRenderer:
    """Render Markdown with the ``markdown`` package."""

    def __init__(self, extensions: Sequence[str] = DEFAULT_EXTENSIONS) -> None:
        self.extensions = tuple(extensions)

    def render(self, text: str) -> str:
        """Return the HTML fragment for ``text``."""
        return render_markdown(text, self.extensions)


class WkhtmltopdfRenderer:
    """Run an external ``<binary> <input.html> <output.pdf>`` converter.

    Parameters
    ----------
    binary : str, default="wkhtmltopdf"
        Executable name looked up on ``PATH``, or an explicit path.
    extra_args : Sequence[str], default=()
        Options inserted between the binary and the input path.
    timeout : float | None, default=None
        Seconds to wait before killing the process. ``None`` waits forever.
    """

    def __init__(
        self,
        binary: str = DEFAULT_BINARY,
        extra_args: Sequence[str] = (),
        timeout: float | None = None,
    ) -> None:
        self.config = RendererConfig(
            binary=binary,
            extra_args=tuple(extra_args),
            timeout=timeout,
        )

    @classmethod
    def from_config(cls, config: RendererConfig) -> WkhtmltopdfRenderer:
        """Build a renderer from validated settings."""
        return cls(
            binary=config.binary,
            extra_args=config.extra_args,
            timeout=config.timeout,
        )

    def command(self, html_path: Path, pdf_path: Path) -> list[str]:
        """Return the argument vector for one render."""
        return [
            self.config.binary,
            *self.config.extra_args,
            str(html_path),
            str(pdf_path),
        ]

    def render(self, html_path: Path, pdf_path: Path) -> RenderOutcome:
        """Run the renderer and capture its output.

        Raises
        ------
        LauncherError
            If the executable is missing or cannot be started.
        RenderError
            If the configured timeout expires.
        """
        argv = self.command(html_path, pdf_path)
        logger.debug("running renderer: %s", " ".join(argv))
        try:
            completed = subprocess.run(
                argv,
                capture_output=True,
                check=False,
                timeout=self.config.timeout,
            )
        except subprocess.TimeoutExpired as exc:
            stderr = _decode(exc.stderr)
            stdout = _decode(exc.stdout)
            raise RenderError(
                f"Conversion failed: {self.config.binary} timed out after "
                f"{self.config.timeout} seconds. Stderr: {stderr}\nStdout: {stdout}",
                stderr=stderr,
                stdout=stdout,
            ) from exc
        except OSError as exc:
            raise LauncherError(
                f"Failed to execute {self.config.binary}. "
                f"Is it installed and in your PATH? Error: {exc}"
            ) from exc
        logger.debug("renderer exited with status %d", completed.returncode)
        return RenderOutcome(
            returncode=completed.returncode,
            stdout=_decode(completed.stdout),
            stderr=_decode(completed.stderr),
        )
