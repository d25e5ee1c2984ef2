from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, TextIO, Union

from header_exporter.config import get_config
from header_exporter.core.context import ExportContext
from header_exporter.core.exceptions import HeaderExportError
from header_exporter.entities import entries_from_document, project_keys
from header_exporter.exporter import join_keys, write_content_echo, write_key_list
from header_exporter.loader import parse_document, read_text
from header_exporter.logging import get_logger


@dataclass
class ExportResult:
    raw_text: str
    keys: List[str] = field(default_factory=list)
    output: str = ""


class Pipeline:
    """
    Runs read -> echo -> parse -> project -> emit, in that order.
    No business logic lives here.
    """

    def __init__(self, context: ExportContext):
        self.ctx = context
        self.log = context.logger

    def run(self) -> ExportResult:
        path = self.ctx.input_path or self.ctx.config.input_path
        self.log.info("Exporting header keys from %s", path)

        try:
            raw_text = read_text(path)

            # The echo precedes parsing, so it is written even for bad input
            write_content_echo(raw_text, self.ctx.stream)

            document = parse_document(raw_text, source=path)
            entries = entries_from_document(document)
        except HeaderExportError as exc:
            if exc.source is None:
                exc.source = path
            self.log.debug("Export failed for %s: %s", path, exc)
            raise

        if self.ctx.debug:
            for entry in entries:
                self.log.debug("Entry %d: %s", entry.index, entry.key)

        keys = project_keys(entries)
        joined = join_keys(keys)
        write_key_list(joined, self.ctx.stream)

        self.ctx.stats["entries"] = len(entries)
        self.log.info("Exported %d header keys", len(keys))

        return ExportResult(raw_text=raw_text, keys=keys, output=joined)


def export_header_keys(
    input_path: Optional[Union[str, Path]] = None,
    stream: Optional[TextIO] = None,
) -> ExportResult:
    """
    Export the header keys of ``input_path`` (default: the configured input)
    to ``stream`` (default: stdout).
    """
    cfg = get_config()
    ctx = ExportContext(
        config=cfg,
        logger=get_logger("pipeline"),
        input_path=Path(input_path) if input_path is not None else None,
        debug=bool(cfg.debug),
    )
    if stream is not None:
        ctx.stream = stream

    return Pipeline(ctx).run()
