"""Top-level API for Markdown-to-PDF conversion."""

from __future__ import annotations

from pathlib import Path

from md_to_pdf.application.results import ConversionResult
from md_to_pdf.paths import derive_pdf_path
from md_to_pdf.themes import DEFAULT_THEME, Theme

__version__ = "0.1.0"


def convert_markdown_to_pdf(
    source_path: str | Path,
    output_path: str | Path | None = None,
    *,
    theme: Theme = DEFAULT_THEME,
    binary: str = "wkhtmltopdf",
    timeout: float | None = None,
) -> ConversionResult:
    """Convert a Markdown file to PDF through an external renderer.

    Parameters
    ----------
    source_path : str | Path
        Markdown file to convert.
    output_path : str | Path | None, default=None
        PDF destination. When omitted, defaults to the source path with a
        ``.pdf`` suffix.
    theme : Theme, default=Theme.GITHUB_LIGHT
        Bundled stylesheet to embed.
    binary : str, default="wkhtmltopdf"
        HTML-to-PDF executable.
    timeout : float | None, default=None
        Seconds to wait for the renderer; ``None`` waits indefinitely.

    Returns
    -------
    ConversionResult
        Success, or a classified failure.
    """
    from md_to_pdf.adapters.renderers import WkhtmltopdfRenderer
    from md_to_pdf.application import ConversionRequest, convert

    resolved_output = output_path
    if resolved_output is None:
        resolved_output = derive_pdf_path(source_path) or ""
    return convert(
        ConversionRequest(
            source_path=source_path,
            output_path=resolved_output,
            theme=theme,
        ),
        renderer=WkhtmltopdfRenderer(binary=binary, timeout=timeout),
    )


__all__ = [
    "ConversionResult",
    "Theme",
    "convert_markdown_to_pdf",
    "derive_pdf_path",
]
