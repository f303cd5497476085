from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

from .config import load_settings
from .errors import StatementParserError
from .models import AccountType
from .router import parse_statement


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Bank statement parser")
    parser.add_argument("file", help="Ruta al PDF")
    parser.add_argument(
        "--format",
        required=True,
        choices=[a.value for a in AccountType],
        help="Formato del statement",
    )
    parser.add_argument("--out", default="", help="Ruta de salida JSON (opcional)")
    parser.add_argument("--config", default=None, help="Archivo YAML de configuración (opcional)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Logs de depuración")
    args = parser.parse_args(argv)

    console = Console(stderr=True)

    try:
        settings = load_settings(args.config)
    except StatementParserError as e:
        console.print(f"Config error: {e}", style="bold red")
        return 2

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.log_level,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )

    pdf_path = Path(args.file)
    if not pdf_path.exists():
        raise SystemExit(f"No existe el archivo: {pdf_path}")

    console.print(f"Procesando: {pdf_path} ({args.format})", style="bold")

    try:
        result = parse_statement(pdf_path.read_bytes(), args.format, settings)
    except StatementParserError as e:
        console.print(f"Error: {e}", style="bold red")
        return 1

    payload = result.model_dump(mode="json", by_alias=True)

    if args.out:
        out_path = Path(args.out)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")
        console.print(f"OK -> {out_path}", style="bold green")
    else:
        print(json.dumps(payload, ensure_ascii=False, indent=2))

    console.print(f"Transacciones detectadas: {len(result.transactions)}", style="bold cyan")
    console.print(f"Balance final: {result.ending_balance:.2f}", style="bold cyan")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
