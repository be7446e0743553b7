#!/usr/bin/env python3
"""
md_to_pdf.cli.cli

Typer-based CLI for converting Markdown documents to PDF.

The PDF itself is produced by an external HTML-to-PDF program
(``wkhtmltopdf`` by default) that must be installed separately.

Examples
--------
Convert next to the source file:

    md-to-pdf convert notes/report.md

Pick a theme and an explicit output:

    md-to-pdf convert notes/report.md build/report.pdf --theme dark

Preview the intermediate HTML document:

    md-to-pdf html notes/report.md --theme auto --output preview.html
"""

from __future__ import annotations

import logging
import shutil
import sys
import traceback
from pathlib import Path

import typer
from pydantic import ValidationError

from md_to_pdf.adapters.renderers import WkhtmltopdfRenderer
from md_to_pdf.application import ConversionRequest, build_document, convert
from md_to_pdf.errors import ConversionError, FailureKind, exit_code_for
from md_to_pdf.paths import autocomplete_pdf_path
from md_to_pdf.schemas import RendererConfig
from md_to_pdf.themes import DEFAULT_THEME, Theme, all_themes, display_name, parse_theme

app = typer.Typer(
    name="md-to-pdf",
    help="Convert Markdown documents to themed PDF files.",
    no_args_is_help=True,
)

THEME_HELP = "Theme: light, dark or auto (or github-light/github-dark/github-auto)."
RENDERER_HELP = "HTML-to-PDF executable invoked as '<renderer> <in.html> <out.pdf>'."
RENDERER_ARG_HELP = "Extra renderer argument placed before the input path (repeatable)."
TIMEOUT_HELP = "Seconds to wait for the renderer before giving up."


def _configure_logging(debug: bool) -> None:
    """Route package log records to stderr."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _print_conversion_error(exc: Exception, debug: bool) -> int:
    """Print a user-friendly conversion error.

    Parameters
    ----------
    exc : Exception
        Exception raised during conversion.
    debug : bool
        Whether to include traceback details.

    Returns
    -------
    int
        Process exit code.
    """
    typer.echo(f"✗ {type(exc).__name__}: {exc}", err=True)
    if debug:
        typer.echo("\nTraceback:", err=True)
        typer.echo("".join(traceback.format_exception(type(exc), exc, exc.__traceback__)), err=True)
    code = getattr(exc, "exit_code", None)
    if isinstance(code, int) and code > 0:
        return code
    return 1


def _parse_theme_option(value: str) -> Theme:
    """Resolve a ``--theme`` value or raise a Typer usage error."""
    try:
        return parse_theme(value)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--theme") from exc


def _build_renderer(
    renderer: str,
    renderer_args: list[str] | None,
    timeout: float | None,
) -> WkhtmltopdfRenderer:
    """Build the external renderer from CLI options."""
    try:
        config = RendererConfig(
            binary=renderer,
            extra_args=tuple(renderer_args or ()),
            timeout=timeout,
        )
    except ValidationError as exc:
        raise typer.BadParameter(f"Invalid renderer settings: {exc}") from exc
    return WkhtmltopdfRenderer.from_config(config)


# -----------------------------
# Global options
# -----------------------------
@app.callback()
def _main(
    ctx: typer.Context,
    debug: bool = typer.Option(False, "--debug", help="Show debug logs and full tracebacks on error."),
) -> None:
    """Initialize shared CLI state.

    Parameters
    ----------
    ctx : typer.Context
        Typer context object used to store shared state.
    debug : bool, default=False
        Whether to enable debug logging and traceback output.
    """
    _configure_logging(debug)
    ctx.obj = {"debug": debug}


# -----------------------------
# Commands
# -----------------------------
@app.command("convert")
def convert_cmd(
    ctx: typer.Context,
    source: str = typer.Argument(..., help="Markdown file to convert."),
    output: str | None = typer.Argument(
        None,
        help="Where to write the PDF. Defaults to the source path with a .pdf suffix.",
    ),
    theme: str = typer.Option("light", "--theme", "-t", envvar="MD_TO_PDF_THEME", help=THEME_HELP),
    renderer: str = typer.Option(
        "wkhtmltopdf", "--renderer", envvar="MD_TO_PDF_RENDERER", help=RENDERER_HELP
    ),
    renderer_args: list[str] | None = typer.Option(
        None, "--renderer-arg", help=RENDERER_ARG_HELP
    ),
    timeout: float | None = typer.Option(
        None, "--timeout", envvar="MD_TO_PDF_TIMEOUT", help=TIMEOUT_HELP
    ),
) -> None:
    """Convert a Markdown file to PDF.

    Parameters
    ----------
    ctx : typer.Context
        Typer context containing global options.
    source : str
        Markdown source path.
    output : str | None
        PDF destination path.
    theme : str
        Bundled stylesheet selector.

    Notes
    -----
    - Source and output checks are reported as conversion failures rather
      than usage errors, with a non-zero exit code per failure kind.
    - The renderer is run without a timeout unless ``--timeout`` is given.
    """
    debug: bool = bool(ctx.obj.get("debug", False))

    selected_theme = _parse_theme_option(theme)
    pdf_renderer = _build_renderer(renderer, renderer_args, timeout)

    try:
        output_path = output if output is not None else autocomplete_pdf_path(source, "")
        result = convert(
            ConversionRequest(
                source_path=source,
                output_path=output_path,
                theme=selected_theme,
            ),
            renderer=pdf_renderer,
        )
    except Exception as exc:
        # Unexpected crash: still show a clean message; debug prints traceback.
        raise typer.Exit(code=_print_conversion_error(exc, debug))

    if result.ok:
        typer.echo(f"✓ {result.status_text()} Saved: {result.output_path}")
        return
    typer.echo(f"✗ {result.status_text()}", err=True)
    raise typer.Exit(code=exit_code_for(result.kind or FailureKind.RENDER_ERROR))


@app.command("html")
def html_cmd(
    ctx: typer.Context,
    source: str = typer.Argument(..., help="Markdown file to render."),
    theme: str = typer.Option("light", "--theme", "-t", envvar="MD_TO_PDF_THEME", help=THEME_HELP),
    output: Path | None = typer.Option(
        None, "--output", "-o", help="Write the HTML document here instead of stdout."
    ),
) -> None:
    """Render the intermediate HTML document without producing a PDF."""
    debug: bool = bool(ctx.obj.get("debug", False))
    selected_theme = _parse_theme_option(theme)

    try:
        document = build_document(
            ConversionRequest(
                source_path=source,
                # Only validated for emptiness; nothing is written there.
                output_path=str(output) if output is not None else "-",
                theme=selected_theme,
            )
        )
        if output is None:
            typer.echo(document, nl=False)
            return
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(document, encoding="utf-8")
        typer.echo(f"✓ Saved: {output}")
    except (ConversionError, OSError) as exc:
        raise typer.Exit(code=_print_conversion_error(exc, debug))


@app.command("themes")
def themes_cmd() -> None:
    """List the bundled themes."""
    for theme in all_themes():
        marker = " (default)" if theme is DEFAULT_THEME else ""
        typer.echo(f"{theme.value}: {display_name(theme)}{marker}")


@app.command("doctor")
def doctor_cmd(
    renderer: str = typer.Option(
        "wkhtmltopdf", "--renderer", envvar="MD_TO_PDF_RENDERER", help=RENDERER_HELP
    ),
) -> None:
    """Print installed toolchain versions and renderer availability."""
    import importlib.metadata as metadata

    modules = [
        "markdown",
        "pydantic",
        "typer",
    ]

    typer.echo(f"Python: {sys.version.split()[0]}")
    for module in modules:
        try:
            version = metadata.version(module)
            typer.echo(f"{module}: {version}")
        except metadata.PackageNotFoundError:
            typer.echo(f"{module}: <not installed>")

    location = shutil.which(renderer)
    if location is None:
        typer.echo(f"{renderer}: <not found on PATH>")
        typer.echo(
            f"Note: install {renderer} and make sure it is on PATH before converting."
        )
    else:
        typer.echo(f"{renderer}: {location}")


if __name__ == "__main__":
    app()
