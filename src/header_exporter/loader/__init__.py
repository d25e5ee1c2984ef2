"""
Public interface for the input loading stack.

    from header_exporter.loader import read_text, parse_document
"""

from __future__ import annotations

from .file_loader import read_text
from .json_loader import parse_document

__all__ = [
    "read_text",
    "parse_document",
]
