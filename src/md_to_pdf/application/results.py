"""Application-layer result objects."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from md_to_pdf.errors import ConversionError, FailureKind, RenderError


@dataclass(frozen=True)
class RenderOutcome:
    """Completed external renderer process."""

    returncode: int
    stdout: str = ""
    stderr: str = ""


@dataclass(frozen=True)
class ConversionResult:
    """Structured conversion outcome."""

    ok: bool
    message: str
    kind: FailureKind | None = None
    output_path: Path | None = None
    stderr: str = ""
    stdout: str = ""

    @classmethod
    def success(cls, output_path: Path) -> ConversionResult:
        """Build a successful result for ``output_path``."""
        return cls(ok=True, message="Conversion successful!", output_path=output_path)

    @classmethod
    def failure(cls, exc: ConversionError) -> ConversionResult:
        """Build a failed result from a classified conversion error."""
        if isinstance(exc, RenderError):
            return cls(
                ok=False,
                message=exc.message,
                kind=exc.kind,
                stderr=exc.stderr,
                stdout=exc.stdout,
            )
        return cls(ok=False, message=exc.message, kind=exc.kind)

    def status_text(self) -> str:
        """Return the caller-facing status line."""
        return self.message
