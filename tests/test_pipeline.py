# tests/test_pipeline.py

from __future__ import annotations

import io
import json
import logging
from pathlib import Path

import pytest

from header_exporter import export_header_keys
from header_exporter.config import HEConfig, get_config
from header_exporter.core.context import ExportContext
from header_exporter.core.exceptions import (
    InputReadError,
    InputShapeError,
    InputSyntaxError,
)
from header_exporter.core.pipeline import Pipeline
from header_exporter.logging import get_logger

PROJECT_ROOT = Path(__file__).resolve().parent.parent


def _export(path):
    out = io.StringIO()
    result = export_header_keys(path, stream=out)
    return result, out.getvalue()


def test_two_entries(write_json) -> None:
    raw = '[{"key":"a"},{"key":"b"}]'
    path = write_json(raw)

    result, stdout = _export(path)

    assert result.keys == ["a", "b"]
    assert result.output == "a\nb"
    assert stdout == f"content: {raw}\na\nb\n"
    assert stdout.splitlines()[1:] == ["a", "b"]


def test_empty_array(write_json) -> None:
    path = write_json("[]")

    result, stdout = _export(path)

    assert result.output == ""
    assert stdout == "content: []\n\n"


def test_extra_fields_are_ignored(write_json) -> None:
    path = write_json(
        json.dumps(
            [
                {"key": "Content-Type", "value": "text/plain", "required": True},
                {"description": "Cache policy", "key": "Cache-Control"},
            ]
        )
    )

    result, stdout = _export(path)

    assert result.output == "Content-Type\nCache-Control"
    assert stdout.endswith("\nContent-Type\nCache-Control\n")


def test_raw_text_is_echoed_untrimmed(write_json) -> None:
    raw = '\n  [{"key": "a"}]\n'
    path = write_json(raw)

    result, stdout = _export(path)

    assert result.raw_text == raw
    assert stdout == f"content: {raw}\na\n"


def test_invalid_json_stops_after_echo(write_json) -> None:
    path = write_json("not json")
    out = io.StringIO()

    with pytest.raises(InputSyntaxError) as excinfo:
        export_header_keys(path, stream=out)

    assert excinfo.value.source == path
    assert out.getvalue() == "content: not json\n"


def test_top_level_object_is_a_shape_error(write_json) -> None:
    path = write_json('{"key": "a"}')
    out = io.StringIO()

    with pytest.raises(InputShapeError) as excinfo:
        export_header_keys(path, stream=out)

    # Source is filled in by the pipeline
    assert excinfo.value.source == path
    assert out.getvalue() == 'content: {"key": "a"}\n'


def test_missing_key_is_a_shape_error(write_json) -> None:
    path = write_json('[{"key": "a"}, {"value": "b"}]')
    with pytest.raises(InputShapeError) as excinfo:
        _export(path)
    assert excinfo.value.index == 1


def test_missing_file_writes_nothing(tmp_path) -> None:
    out = io.StringIO()
    with pytest.raises(InputReadError):
        export_header_keys(tmp_path / "example-response-headers.json", stream=out)
    assert out.getvalue() == ""


def test_running_twice_is_byte_identical(write_json) -> None:
    path = write_json('[{"key": "X-One"}, {"key": "X-Two"}]\n')

    _, first = _export(path)
    _, second = _export(path)

    assert first == second


def test_default_input_is_configured_path(tmp_path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    (tmp_path / "example-response-headers.json").write_text(
        '[{"key": "Vary"}]', encoding="utf-8"
    )

    result, stdout = _export(None)

    assert result.keys == ["Vary"]
    assert stdout.endswith("\nVary\n")


def test_pipeline_records_entry_count(write_json) -> None:
    path = write_json('[{"key": "a"}, {"key": "b"}, {"key": "c"}]')
    ctx = ExportContext(
        config=get_config(),
        logger=get_logger("test_pipeline"),
        input_path=path,
        stream=io.StringIO(),
    )

    Pipeline(ctx).run()

    assert ctx.stats["entries"] == 3


class _RecordList(logging.Handler):
    def __init__(self, level=logging.NOTSET):
        super().__init__(level)
        self.records = []

    def emit(self, record):
        self.records.append(record)


def test_default_export_writes_no_log_file(write_json) -> None:
    cfg = get_config()
    log_file = PROJECT_ROOT / cfg.paths.get("logs_dir", "logs") / cfg.logging["file"]
    before = log_file.read_bytes() if log_file.exists() else None

    _export(write_json('[{"key": "a"}]'))

    after = log_file.read_bytes() if log_file.exists() else None
    assert after == before
    assert not any(
        isinstance(h, logging.FileHandler) for h in get_logger().handlers
    )


def test_failures_are_not_logged_above_debug(write_json) -> None:
    handler = _RecordList(logging.WARNING)
    base = get_logger()
    base.addHandler(handler)
    try:
        with pytest.raises(InputSyntaxError):
            _export(write_json("not json"))
    finally:
        base.removeHandler(handler)

    assert handler.records == []


def test_pipeline_uses_configured_input_and_debug(write_json) -> None:
    path = write_json('[{"key": "ETag"}, {"key": "Age"}]')
    logger = logging.getLogger("test_pipeline_debug")
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    handler = _RecordList()
    logger.addHandler(handler)

    ctx = ExportContext(
        config=HEConfig({"paths": {"input": str(path)}}),
        logger=logger,
        stream=io.StringIO(),
        debug=True,
    )
    try:
        result = Pipeline(ctx).run()
    finally:
        logger.removeHandler(handler)

    assert result.keys == ["ETag", "Age"]
    messages = [r.getMessage() for r in handler.records]
    assert "Entry 0: ETag" in messages
    assert "Entry 1: Age" in messages
