"""Pydantic schemas for runtime validation of conversion inputs."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from md_to_pdf.document import DEFAULT_TITLE
from md_to_pdf.themes import DEFAULT_THEME, Theme, parse_theme


class ConversionConfig(BaseModel):
    """Validated input for a single Markdown-to-PDF conversion."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    source_path: Path
    output_path: Path
    theme: Theme = DEFAULT_THEME
    title: str = DEFAULT_TITLE

    @field_validator("source_path", "output_path", mode="before")
    @classmethod
    def _validate_path(cls, value: object) -> object:
        if value is None or str(value) == "":
            raise ValueError("path must not be empty.")
        return value

    @field_validator("theme", mode="before")
    @classmethod
    def _coerce_theme(cls, value: object) -> Theme:
        if isinstance(value, (str, Theme)):
            return parse_theme(value)
        raise ValueError("theme must be a Theme or theme name.")


class RendererConfig(BaseModel):
    """Validated settings for the external HTML-to-PDF renderer."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    binary: str = Field(default="wkhtmltopdf", min_length=1)
    extra_args: tuple[str, ...] = ()
    timeout: float | None = Field(default=None, gt=0.0)

    @field_validator("binary")
    @classmethod
    def _validate_binary(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("renderer binary must not be blank.")
        return value
