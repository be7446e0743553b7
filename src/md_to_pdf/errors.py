"""Exception hierarchy for Markdown-to-PDF conversion."""

from __future__ import annotations

from enum import Enum


class FailureKind(str, Enum):
    """Classification of a failed conversion attempt."""

    INVALID_INPUT = "invalid_input"
    SOURCE_NOT_FOUND = "source_not_found"
    SOURCE_NOT_A_FILE = "source_not_a_file"
    READ_ERROR = "read_error"
    SCRATCH_WRITE_ERROR = "scratch_write_error"
    DEST_DIR_ERROR = "dest_dir_error"
    LAUNCHER_ERROR = "launcher_error"
    RENDER_ERROR = "render_error"


class ConversionError(Exception):
    """Base error for a single conversion attempt.

    Parameters
    ----------
    message : str
        Human-readable description surfaced to the caller.
    kind : FailureKind
        Stage classification of the failure.
    """

    kind: FailureKind = FailureKind.RENDER_ERROR
    exit_code: int = 1

    def __init__(self, message: str, kind: FailureKind | None = None) -> None:
        super().__init__(message)
        self.message = message
        if kind is not None:
            self.kind = kind


class InvalidInputError(ConversionError):
    """Raised when a source or output path is missing."""

    kind = FailureKind.INVALID_INPUT
    exit_code = 2


class SourceNotFoundError(ConversionError):
    """Raised when the Markdown source does not exist."""

    kind = FailureKind.SOURCE_NOT_FOUND
    exit_code = 3


class SourceNotAFileError(ConversionError):
    """Raised when the Markdown source is not a regular file."""

    kind = FailureKind.SOURCE_NOT_A_FILE
    exit_code = 3


class ReadError(ConversionError):
    """Raised when the Markdown source cannot be read."""

    kind = FailureKind.READ_ERROR
    exit_code = 4


class ScratchWriteError(ConversionError):
    """Raised when the intermediate HTML document cannot be written."""

    kind = FailureKind.SCRATCH_WRITE_ERROR
    exit_code = 5


class DestDirError(ConversionError):
    """Raised when the output directory cannot be created."""

    kind = FailureKind.DEST_DIR_ERROR
    exit_code = 5


class LauncherError(ConversionError):
    """Raised when the external renderer cannot be started."""

    kind = FailureKind.LAUNCHER_ERROR
    exit_code = 6


class RenderError(ConversionError):
    """Raised when the external renderer exits with a non-zero status."""

    kind = FailureKind.RENDER_ERROR
    exit_code = 7

    def __init__(
        self,
        message: str,
        *,
        stderr: str = "",
        stdout: str = "",
        returncode: int | None = None,
    ) -> None:
        super().__init__(message)
        self.stderr = stderr
        self.stdout = stdout
        self.returncode = returncode


_ERROR_TYPES: tuple[type[ConversionError], ...] = (
    InvalidInputError,
    SourceNotFoundError,
    SourceNotAFileError,
    ReadError,
    ScratchWriteError,
    DestDirError,
    LauncherError,
    RenderError,
)


def exit_code_for(kind: FailureKind) -> int:
    """Return the process exit code used for a failure of ``kind``."""
    for error_type in _ERROR_TYPES:
        if error_type.kind is kind:
            return error_type.exit_code
    return ConversionError.exit_code
