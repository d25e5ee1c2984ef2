from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.table import Table

from header_exporter.cli.utils import err_console, prepare_run, report_error
from header_exporter.core.exceptions import HeaderExportError
from header_exporter.entities import entries_from_document
from header_exporter.loader import parse_document, read_text


def check_command(
    input_path: Optional[Path] = typer.Argument(
        None,
        help="JSON file to check (defaults to the configured input)",
        show_default=False,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable rich logging",
    ),
):
    """
    Validate a header file without exporting it.
    """
    _, path = prepare_run(input_path, verbose=verbose)

    try:
        entries = entries_from_document(parse_document(read_text(path), source=path))
    except HeaderExportError as exc:
        report_error(exc)
        raise typer.Exit(code=1)

    table = Table(title=f"Header file: {path}")
    table.add_column("Check", style="bold")
    table.add_column("Result", justify="right")

    table.add_row("Entries", str(len(entries)))
    table.add_row("Distinct keys", str(len({e.key for e in entries})))
    table.add_row("Entries with extra fields", str(sum(1 for e in entries if e.extra)))

    err_console.print(table)
