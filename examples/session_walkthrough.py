#!/usr/bin/env python3
"""Drive a ConverterSession the way an interactive front end would."""

from __future__ import annotations

import sys

from md_to_pdf.session import ConverterSession
from md_to_pdf.themes import Theme


def main() -> None:
    if len(sys.argv) != 2:
        raise SystemExit("usage: session_walkthrough.py <file.md>")

    session = ConverterSession()
    print(f"Status: {session.status}")

    session.select_source(sys.argv[1])
    print(f"Output PDF: {session.pdf_path}")

    session.select_theme(Theme.GITHUB_DARK)
    print(f"PDF Theme: {session.theme_label}")

    print(f"Status: {session.convert()}")


if __name__ == "__main__":
    main()
