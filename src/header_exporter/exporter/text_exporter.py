"""
text_exporter.py
Plain-text writers for the header key export.

Two writes reach the output stream per run:

    content: <raw file text>
    <key 1>
    <key 2>
    ...

The raw text is echoed verbatim, so a trailing newline in the input file
shows up as an empty line before the key list.
"""

from __future__ import annotations

from typing import Iterable, TextIO

CONTENT_PREFIX = "content: "


def join_keys(keys: Iterable[str]) -> str:
    return "\n".join(keys)


def write_content_echo(raw_text: str, stream: TextIO) -> None:
    print(f"{CONTENT_PREFIX}{raw_text}", file=stream)


def write_key_list(joined: str, stream: TextIO) -> None:
    print(joined, file=stream)
    stream.flush()
