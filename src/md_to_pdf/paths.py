"""Pure path helpers for choosing a default PDF destination."""

from __future__ import annotations

from pathlib import Path, PurePath


def derive_pdf_path(source: str | PurePath) -> str | None:
    """Derive ``<parent>/<stem>.pdf`` from a Markdown source path.

    No filesystem access is performed.

    Parameters
    ----------
    source : str | PurePath
        Markdown source path.

    Returns
    -------
    str | None
        Derived PDF path, or ``None`` when ``source`` has no file stem.
    """
    raw = str(source)
    if not raw:
        return None
    path = Path(raw)
    if not path.stem or path.name in {"", ".", ".."}:
        return None
    return str(path.parent / f"{path.stem}.pdf")


def autocomplete_pdf_path(source: str | PurePath, previous: str) -> str:
    """Return the derived PDF path, keeping ``previous`` when none exists."""
    derived = derive_pdf_path(source)
    return previous if derived is None else derived
