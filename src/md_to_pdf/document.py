"""Markdown rendering and HTML document assembly."""

from __future__ import annotations

import html
from collections.abc import Sequence

import markdown

DEFAULT_EXTENSIONS: tuple[str, ...] = ("tables", "fenced_code", "sane_lists")
DEFAULT_TITLE = "Markdown to PDF"

_DOCUMENT_TEMPLATE = """\
<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<title>{title}</title>
<style>
{css}
</style>
</head>
<body>
<article class="markdown-body">
{body}
</article>
</body>
</html>
"""


def render_markdown(
    text: str,
    extensions: Sequence[str] = DEFAULT_EXTENSIONS,
) -> str:
    """Render Markdown text into an HTML fragment.

    Raw HTML in the source is passed through unchanged.
    """
    return markdown.markdown(text, extensions=list(extensions), output_format="html")


def build_html_document(fragment: str, css: str, title: str = DEFAULT_TITLE) -> str:
    """Wrap a rendered fragment and a stylesheet into a full HTML document.

    Parameters
    ----------
    fragment : str
        Rendered HTML body, embedded verbatim.
    css : str
        Stylesheet text, embedded verbatim inside ``<style>``.
    title : str, default="Markdown to PDF"
        Document title; HTML-escaped.

    Returns
    -------
    str
        Complete HTML document.
    """
    # str.format does not re-scan substituted values, so braces in CSS are safe.
    return _DOCUMENT_TEMPLATE.format(
        title=html.escape(title),
        css=css,
        body=fragment,
    )
