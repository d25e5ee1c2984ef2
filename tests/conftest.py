import sys
from pathlib import Path

import pytest

# Ensure the project src directory is on sys.path for test imports
PROJECT_ROOT = Path(__file__).resolve().parent.parent
SRC_PATH = PROJECT_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from header_exporter.config import get_config  # noqa: E402
from header_exporter.logging import get_logger, reset_logging  # noqa: E402

# Build the base handlers against the real stderr before any CliRunner swaps it
get_logger()


@pytest.fixture(autouse=True)
def _restore_debug_flag():
    cfg = get_config()
    original = cfg.debug
    yield
    if cfg.debug != original:
        cfg.debug = original
        reset_logging()
        get_logger()


@pytest.fixture
def write_json(tmp_path):
    """Write ``text`` to a JSON file under tmp_path and return its path."""

    def _write(text: str, name: str = "headers.json") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write
