"""
Exporter package.

Re-exports the text writers used by the pipeline.
"""

from __future__ import annotations

from .text_exporter import (
    CONTENT_PREFIX,
    join_keys,
    write_content_echo,
    write_key_list,
)

__all__ = ["CONTENT_PREFIX", "join_keys", "write_content_echo", "write_key_list"]
