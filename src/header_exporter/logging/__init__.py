"""
Logging package for ``header_exporter``.

Use ``get_logger(__name__)`` in modules to inherit the shared console and
master log file handlers.
"""

from .logger import get_logger, list_active_loggers, reset_logging

__all__ = [
    "get_logger",
    "list_active_loggers",
    "reset_logging",
]
