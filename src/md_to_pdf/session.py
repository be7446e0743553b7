"""Caller-owned conversion state for interactive front ends."""

from __future__ import annotations

from dataclasses import dataclass, field

from md_to_pdf.application import ConversionRequest, ConversionResult, convert
from md_to_pdf.application.ports import HtmlToPdfRenderer, MarkdownRenderer
from md_to_pdf.paths import autocomplete_pdf_path
from md_to_pdf.themes import DEFAULT_THEME, Theme, display_name

IDLE_STATUS = "Idle"


@dataclass
class ConverterSession:
    """Paths, theme and last status held by one front end.

    The pipeline itself keeps no state; each :meth:`convert` call builds a
    fresh request from the fields below.
    """

    md_path: str = ""
    pdf_path: str = ""
    theme: Theme = DEFAULT_THEME
    status: str = IDLE_STATUS
    renderer: HtmlToPdfRenderer | None = field(default=None, repr=False)
    markdown_renderer: MarkdownRenderer | None = field(default=None, repr=False)
    last_result: ConversionResult | None = field(default=None, repr=False)

    def select_source(self, md_path: str) -> None:
        """Set the Markdown path and autocomplete the PDF path from it."""
        self.md_path = md_path
        self.pdf_path = autocomplete_pdf_path(md_path, self.pdf_path)

    def select_theme(self, theme: Theme) -> None:
        self.theme = theme

    @property
    def theme_label(self) -> str:
        return display_name(self.theme)

    def convert(self) -> str:
        """Run one conversion and return the new status text."""
        request = ConversionRequest(
            source_path=self.md_path,
            output_path=self.pdf_path,
            theme=self.theme,
        )
        self.last_result = convert(
            request,
            renderer=self.renderer,
            markdown_renderer=self.markdown_renderer,
        )
        self.status = self.last_result.status_text()
        return self.status
