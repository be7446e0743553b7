"""Typed request objects shared across conversion use-cases."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from md_to_pdf.document import DEFAULT_TITLE
from md_to_pdf.themes import DEFAULT_THEME, Theme


@dataclass(frozen=True)
class ConversionRequest:
    """One conversion attempt.

    Parameters
    ----------
    source_path : str | Path
        Markdown file to convert.
    output_path : str | Path
        PDF file to create or overwrite.
    theme : Theme, default=Theme.GITHUB_LIGHT
        Stylesheet embedded into the intermediate HTML document.
    title : str, default="Markdown to PDF"
        Title of the intermediate HTML document.
    """

    source_path: str | Path
    output_path: str | Path
    theme: Theme = DEFAULT_THEME
    title: str = DEFAULT_TITLE
