from __future__ import annotations

from pathlib import Path
from typing import Optional, Union


class HeaderExportError(Exception):
    """Base exception for export failures."""

    def __init__(self, message: str, source: Optional[Union[str, Path]] = None):
        super().__init__(message)
        self.source = source


class InputReadError(HeaderExportError):
    """Raised when the input file is missing or unreadable."""


class InputSyntaxError(HeaderExportError, ValueError):
    """Raised when the input file is not valid JSON."""

    def __init__(
        self,
        message: str,
        source: Optional[Union[str, Path]] = None,
        lineno: Optional[int] = None,
        colno: Optional[int] = None,
    ):
        super().__init__(message, source)
        self.lineno = lineno
        self.colno = colno


class InputShapeError(HeaderExportError, ValueError):
    """Raised when the parsed document is not an array of header entries."""

    def __init__(
        self,
        message: str,
        source: Optional[Union[str, Path]] = None,
        index: Optional[int] = None,
    ):
        super().__init__(message, source)
        self.index = index
