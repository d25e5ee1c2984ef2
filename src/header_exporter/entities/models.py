from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict

from header_exporter.core.exceptions import InputShapeError

KEY_FIELD = "key"


@dataclass(frozen=True)
class HeaderEntry:
    key: str
    index: int
    extra: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_obj(cls, obj: Any, index: int) -> "HeaderEntry":
        if not isinstance(obj, dict):
            raise InputShapeError(
                f"Entry {index} is {type(obj).__name__}, expected an object",
                index=index,
            )
        if KEY_FIELD not in obj:
            raise InputShapeError(
                f"Entry {index} is missing the '{KEY_FIELD}' field; "
                f"available fields: {sorted(obj)}",
                index=index,
            )

        key = obj[KEY_FIELD]
        if not isinstance(key, str):
            raise InputShapeError(
                f"Entry {index} has a non-string '{KEY_FIELD}': {key!r}",
                index=index,
            )

        extra = {k: v for k, v in obj.items() if k != KEY_FIELD}
        return cls(key=key, index=index, extra=extra)
