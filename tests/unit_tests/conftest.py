"""Shared test doubles for pipeline unit tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from md_to_pdf.application.results import RenderOutcome
from md_to_pdf.errors import LauncherError

PDF_BYTES = b"%PDF-1.4\n%fake\n"


class FakeRenderer:
    """In-process stand-in for the external HTML-to-PDF program."""

    def __init__(
        self,
        returncode: int = 0,
        stdout: str = "",
        stderr: str = "",
        launch_error: str | None = None,
        partial: bytes | None = None,
    ) -> None:
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr
        self.launch_error = launch_error
        self.partial = partial
        self.calls: list[tuple[Path, Path]] = []
        self.documents: list[str] = []

    def render(self, html_path: Path, pdf_path: Path) -> RenderOutcome:
        self.calls.append((html_path, pdf_path))
        if self.partial is not None:
            pdf_path.write_bytes(self.partial)
        if self.launch_error is not None:
            raise LauncherError(self.launch_error)
        self.documents.append(html_path.read_text(encoding="utf-8"))
        if self.returncode == 0:
            pdf_path.write_bytes(PDF_BYTES)
        return RenderOutcome(
            returncode=self.returncode,
            stdout=self.stdout,
            stderr=self.stderr,
        )


@pytest.fixture
def fake_renderer() -> FakeRenderer:
    return FakeRenderer()


@pytest.fixture
def make_renderer() -> type[FakeRenderer]:
    return FakeRenderer
