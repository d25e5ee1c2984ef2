from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from header_exporter.cli.utils import err_console, prepare_run, report_error
from header_exporter.core.exceptions import HeaderExportError
from header_exporter.core.pipeline import export_header_keys


def export_command(
    input_path: Optional[Path] = typer.Argument(
        None,
        help="JSON file to read (defaults to the configured input)",
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
    Print the file content, then the header keys one per line.
    """
    _, path = prepare_run(input_path, verbose=verbose)

    if verbose:
        err_console.log(f"Reading {path}")

    try:
        result = export_header_keys(path)
    except HeaderExportError as exc:
        report_error(exc)
        raise typer.Exit(code=1)

    if verbose:
        err_console.log(f"Exported {len(result.keys)} keys")
