"""
Header List Exporter.

Reads a JSON array of header descriptions and prints the ``key`` of every
entry, one per line.
"""

from header_exporter.core.pipeline import ExportResult, export_header_keys

__all__ = ["ExportResult", "export_header_keys"]
