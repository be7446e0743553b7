"""Application ports for clean architecture boundaries."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from md_to_pdf.application.results import RenderOutcome


class MarkdownRenderer(Protocol):
    """Render Markdown source text into an HTML fragment."""

    def render(self, text: str) -> str:
        """Return the HTML fragment for ``text``."""


class HtmlToPdfRenderer(Protocol):
    """Turn an HTML file into a PDF file out of process."""

    def render(self, html_path: Path, pdf_path: Path) -> RenderOutcome:
        """Run the renderer to completion.

        Raises ``LauncherError`` when the renderer cannot be started.
        """
