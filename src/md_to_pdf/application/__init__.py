"""Application-layer use-cases and request objects."""

from __future__ import annotations

from md_to_pdf.application.options import ConversionRequest
from md_to_pdf.application.ports import HtmlToPdfRenderer, MarkdownRenderer
from md_to_pdf.application.results import ConversionResult, RenderOutcome


def convert(
    request: ConversionRequest,
    *,
    renderer: HtmlToPdfRenderer | None = None,
    markdown_renderer: MarkdownRenderer | None = None,
) -> ConversionResult:
    """Convert one Markdown file via lazy use-case import."""
    from md_to_pdf.application.use_cases import convert as _impl

    return _impl(request, renderer=renderer, markdown_renderer=markdown_renderer)


def build_document(
    request: ConversionRequest,
    *,
    markdown_renderer: MarkdownRenderer | None = None,
) -> str:
    """Assemble the intermediate HTML document via lazy use-case import."""
    from md_to_pdf.application.use_cases import build_document as _impl

    return _impl(request, markdown_renderer=markdown_renderer)


__all__ = [
    "ConversionRequest",
    "ConversionResult",
    "HtmlToPdfRenderer",
    "MarkdownRenderer",
    "RenderOutcome",
    "build_document",
    "convert",
]
