"""Application use-cases orchestrating the Markdown-to-PDF pipeline."""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path

from pydantic import ValidationError

from md_to_pdf.adapters.renderers import PythonMarkdownRenderer, WkhtmltopdfRenderer
from md_to_pdf.application.options import ConversionRequest
from md_to_pdf.application.ports import HtmlToPdfRenderer, MarkdownRenderer
from md_to_pdf.application.results import ConversionResult, RenderOutcome
from md_to_pdf.document import build_html_document
from md_to_pdf.errors import (
    ConversionError,
    DestDirError,
    InvalidInputError,
    ReadError,
    RenderError,
    ScratchWriteError,
    SourceNotAFileError,
    SourceNotFoundError,
)
from md_to_pdf.schemas import ConversionConfig
from md_to_pdf.themes import resolve

logger = logging.getLogger(__name__)

SCRATCH_PREFIX = "md-to-pdf-"
SCRATCH_SUFFIX = ".html"
EMPTY_PATHS_MESSAGE = "Please fill both paths"


def convert(
    request: ConversionRequest,
    *,
    renderer: HtmlToPdfRenderer | None = None,
    markdown_renderer: MarkdownRenderer | None = None,
) -> ConversionResult:
    """Use-case: convert one Markdown file into a PDF.

    Every failure is classified and returned rather than raised, so the
    caller stays usable and can retry with corrected inputs.

    Parameters
    ----------
    request : ConversionRequest
        Source path, output path and theme for this attempt.
    renderer : HtmlToPdfRenderer | None, default=None
        External renderer; defaults to ``wkhtmltopdf`` on ``PATH``.
    markdown_renderer : MarkdownRenderer | None, default=None
        Markdown renderer; defaults to the ``markdown`` package.

    Returns
    -------
    ConversionResult
        Success, or a failure carrying its :class:`FailureKind`.
    """
    try:
        output_path = _run(
            request,
            renderer=renderer or WkhtmltopdfRenderer(),
            markdown_renderer=markdown_renderer or PythonMarkdownRenderer(),
        )
    except ConversionError as exc:
        logger.info("conversion failed (%s): %s", exc.kind.value, exc.message)
        return ConversionResult.failure(exc)
    logger.info("conversion succeeded: %s", output_path)
    return ConversionResult.success(output_path)


def build_document(
    request: ConversionRequest,
    *,
    markdown_renderer: MarkdownRenderer | None = None,
) -> str:
    """Use-case: validate, read and render ``request`` into an HTML document.

    Raises
    ------
    ConversionError
        If validation, the source check or the read fails.
    """
    config = validate_request(request)
    return _render_document(config, markdown_renderer or PythonMarkdownRenderer())


def validate_request(request: ConversionRequest) -> ConversionConfig:
    """Validate request fields without touching the filesystem."""
    try:
        return ConversionConfig(
            source_path=request.source_path,
            output_path=request.output_path,
            theme=request.theme,
            title=request.title,
        )
    except ValidationError as exc:
        path_fields = {"source_path", "output_path"}
        if any(error["loc"] and error["loc"][0] in path_fields for error in exc.errors()):
            raise InvalidInputError(EMPTY_PATHS_MESSAGE) from exc
        raise InvalidInputError(f"Invalid conversion parameters: {exc}") from exc


def read_source(source_path: Path) -> str:
    """Check and read the Markdown source as UTF-8 text."""
    if not source_path.exists():
        raise SourceNotFoundError(f"Error: Markdown file not found at '{source_path}'")
    if not source_path.is_file():
        raise SourceNotAFileError(f"Error: '{source_path}' is not a file.")
    try:
        return source_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ReadError(f"Failed to read Markdown file: {exc}") from exc


def write_scratch_document(document: str) -> Path:
    """Persist ``document`` to a uniquely named temporary HTML file."""
    try:
        fd, name = tempfile.mkstemp(prefix=SCRATCH_PREFIX, suffix=SCRATCH_SUFFIX)
    except OSError as exc:
        raise ScratchWriteError(f"Failed to write temporary HTML: {exc}") from exc
    scratch_path = Path(name)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            handle.write(document)
    except OSError as exc:
        remove_scratch(scratch_path)
        raise ScratchWriteError(f"Failed to write temporary HTML: {exc}") from exc
    logger.debug("wrote scratch document %s", scratch_path)
    return scratch_path


def prepare_output_dir(output_path: Path) -> None:
    """Create every missing parent directory of ``output_path``."""
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise DestDirError(f"Failed to create output directory: {exc}") from exc


def backup_output(output_path: Path) -> Path | None:
    """Move an existing output file aside so a failed render cannot replace it.

    Returns the sibling backup path, or ``None`` when there was nothing to keep.
    """
    if not output_path.is_file():
        return None
    try:
        fd, name = tempfile.mkstemp(
            prefix=f".{output_path.name}.", suffix=".bak", dir=output_path.parent
        )
        os.close(fd)
        os.replace(output_path, name)
    except OSError as exc:
        raise DestDirError(f"Failed to prepare output file: {exc}") from exc
    logger.debug("moved existing output %s to %s", output_path, name)
    return Path(name)


def restore_output(output_path: Path, backup_path: Path | None) -> None:
    """Drop whatever a failed render left behind and put the backup back."""
    try:
        if not output_path.is_dir():
            output_path.unlink(missing_ok=True)
        if backup_path is not None:
            os.replace(backup_path, output_path)
    except OSError as exc:
        logger.warning("could not restore %s from %s: %s", output_path, backup_path, exc)


def discard_backup(backup_path: Path | None) -> None:
    if backup_path is not None:
        remove_scratch(backup_path)


def remove_scratch(scratch_path: Path) -> None:
    """Delete the scratch file; failures are logged and ignored."""
    try:
        scratch_path.unlink(missing_ok=True)
    except OSError as exc:
        logger.debug("could not remove scratch file %s: %s", scratch_path, exc)


def _render_document(config: ConversionConfig, markdown_renderer: MarkdownRenderer) -> str:
    text = read_source(config.source_path)
    logger.debug("rendering %s with theme %s", config.source_path, config.theme.value)
    fragment = markdown_renderer.render(text)
    return build_html_document(fragment, resolve(config.theme), config.title)


def _run(
    request: ConversionRequest,
    *,
    renderer: HtmlToPdfRenderer,
    markdown_renderer: MarkdownRenderer,
) -> Path:
    config = validate_request(request)
    document = _render_document(config, markdown_renderer)
    scratch_path = write_scratch_document(document)
    try:
        prepare_output_dir(config.output_path)
        backup_path = backup_output(config.output_path)
        try:
            _check_outcome(renderer.render(scratch_path, config.output_path))
        except ConversionError:
            restore_output(config.output_path, backup_path)
            raise
        discard_backup(backup_path)
    finally:
        remove_scratch(scratch_path)
    return config.output_path


def _check_outcome(outcome: RenderOutcome) -> None:
    if outcome.returncode != 0:
        raise RenderError(
            f"Conversion failed. Stderr: {outcome.stderr}\nStdout: {outcome.stdout}",
            stderr=outcome.stderr,
            stdout=outcome.stdout,
            returncode=outcome.returncode,
        )
