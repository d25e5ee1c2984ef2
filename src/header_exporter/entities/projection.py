from __future__ import annotations

from typing import Any, Iterable, List

from header_exporter.core.exceptions import InputShapeError

from .models import HeaderEntry


def entries_from_document(document: Any) -> List[HeaderEntry]:
    """
    Turn a parsed JSON document into header entries, in array order.

    The top-level value must be a list and every element must carry a
    string ``key``.
    """
    if not isinstance(document, list):
        raise InputShapeError(
            f"Top-level JSON value is {type(document).__name__}, expected an array"
        )

    return [HeaderEntry.from_obj(obj, i) for i, obj in enumerate(document)]


def project_keys(entries: Iterable[HeaderEntry]) -> List[str]:
    # No dedup, no sorting
    return [entry.key for entry in entries]
