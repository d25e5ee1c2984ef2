from __future__ import annotations

import json
from pathlib import Path
from typing import Any, NoReturn, Optional, Union

from header_exporter.core.exceptions import InputSyntaxError

# Whitespace and line terminators removed by JavaScript's String.prototype.trim
JS_WHITESPACE = (
    " \t\n\r\v\f"
    "\u00a0\ufeff\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)


def parse_document(text: str, source: Optional[Union[str, Path]] = None) -> Any:
    """
    Decode a JSON document.

    Surrounding whitespace (including a BOM) is trimmed first; the shape of
    the result is not checked here. ``NaN`` and ``Infinity`` are not JSON
    and are rejected.
    """
    where = f"{source}: " if source else ""

    def reject_constant(name: str) -> NoReturn:
        raise InputSyntaxError(
            f"{where}invalid JSON token {name!r}",
            source=source,
        )

    try:
        return json.loads(text.strip(JS_WHITESPACE), parse_constant=reject_constant)
    except json.JSONDecodeError as exc:
        raise InputSyntaxError(
            f"{where}invalid JSON at line {exc.lineno}, column {exc.colno}: {exc.msg}",
            source=source,
            lineno=exc.lineno,
            colno=exc.colno,
        ) from exc
