#!/usr/bin/env python3
"""Render one Markdown file with every bundled theme.

Requires ``wkhtmltopdf`` on PATH (or pass another renderer as ``--renderer``).
"""

from __future__ import annotations

import argparse
from pathlib import Path

from md_to_pdf import convert_markdown_to_pdf
from md_to_pdf.themes import all_themes, display_name


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("source", type=Path, help="Markdown file to convert.")
    parser.add_argument("--out-dir", type=Path, default=Path("themed-pdfs"))
    parser.add_argument("--renderer", default="wkhtmltopdf")
    args = parser.parse_args()

    failures = 0
    for theme in all_themes():
        target = args.out_dir / f"{args.source.stem}-{theme.value}.pdf"
        result = convert_markdown_to_pdf(
            args.source,
            target,
            theme=theme,
            binary=args.renderer,
        )
        print(f"{display_name(theme)}: {result.status_text()}")
        failures += 0 if result.ok else 1
    if failures:
        raise SystemExit(f"FAIL: {failures} theme(s) did not convert.")


if __name__ == "__main__":
    main()
