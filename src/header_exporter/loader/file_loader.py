from __future__ import annotations

from pathlib import Path
from typing import Union

from header_exporter.core.exceptions import InputReadError
from header_exporter.logging import get_logger

log = get_logger(__name__)


def read_text(path: Union[str, Path]) -> str:
    """Return the full UTF-8 content of ``path``, untouched."""
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            text = f.read()
    except FileNotFoundError as exc:
        raise InputReadError(f"File not found: {path}", source=path) from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise InputReadError(f"Cannot read {path}: {exc}", source=path) from exc

    log.debug("Read %d characters from %s", len(text), path)
    return text
