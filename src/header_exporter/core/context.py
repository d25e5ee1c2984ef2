from __future__ import annotations

import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, TextIO


@dataclass
class ExportContext:
    """
    Shared run context.
    This object is passed from the CLI into the pipeline.

    ``input_path`` falls back to the configured input when left unset;
    ``debug`` adds one log record per exported entry.
    """

    config: Any
    logger: Any

    input_path: Optional[Path] = None
    stream: TextIO = field(default_factory=lambda: sys.stdout)

    stats: Dict[str, Any] = field(default_factory=dict)

    debug: bool = False
