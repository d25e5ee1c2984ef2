from __future__ import annotations

from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.markup import escape

from header_exporter.config import HEConfig, get_config
from header_exporter.core.exceptions import HeaderExportError
from header_exporter.logging import get_logger, reset_logging

err_console = Console(stderr=True)


def prepare_run(input_path: Optional[Path], *, verbose: bool) -> tuple[HEConfig, Path]:
    """
    Apply CLI flags to the shared config and resolve the input path.
    """
    cfg = get_config()
    if verbose and not cfg.debug:
        cfg.debug = True
        # Handlers were built with the old level
        reset_logging()
        get_logger("cli").debug("Verbose output enabled")

    return cfg, input_path if input_path is not None else cfg.input_path


def report_error(exc: HeaderExportError) -> None:
    err_console.print(
        f"[bold red]error:[/bold red] {escape(str(exc))}",
        highlight=False,
        soft_wrap=True,
    )
