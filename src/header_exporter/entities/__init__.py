"""
Entities package.

Re-exports the header record and the projection helpers.
"""

from __future__ import annotations

from .models import KEY_FIELD, HeaderEntry
from .projection import entries_from_document, project_keys

__all__ = ["KEY_FIELD", "HeaderEntry", "entries_from_document", "project_keys"]
