from __future__ import annotations

import argparse
from pathlib import Path

from rich.console import Console

from .layout import page_lines
from .pdf_text import extract_pages


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Muestra las líneas reconstruidas de un PDF")
    ap.add_argument("pdf", help="PDF path")
    ap.add_argument("--page", type=int, default=None, help="0-index page (default: todas)")
    ap.add_argument("--tolerance", type=float, default=0.0, help="tolerancia de fila en unidades de y")
    ap.add_argument("--grep", default="", help="solo líneas que contengan este texto")
    args = ap.parse_args(argv)

    console = Console()
    pages = extract_pages(Path(args.pdf).read_bytes())
    console.print(f"{len(pages)} page(s)", style="bold")

    for pi, items in enumerate(pages):
        if args.page is not None and pi != args.page:
            continue

        console.rule(f"PAGE {pi + 1}/{len(pages)} ({len(items)} items)")
        for i, line in enumerate(page_lines(items, args.tolerance), start=1):
            if args.grep and args.grep.lower() not in line.lower():
                continue
            console.print(f"{i:04d}| {line}", markup=False, highlight=False)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
