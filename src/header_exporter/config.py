import yaml
from pathlib import Path

CONFIG_PATH = Path(__file__).resolve().parents[2] / "config" / "header_exporter.yml"

DEFAULT_INPUT = "example-response-headers.json"


class HEConfig:
    def __init__(self, data):
        self.paths = data.get("paths", {}) or {}
        self.logging = data.get("logging", {}) or {}
        self.debug = data.get("debug", False)

    @property
    def input_path(self) -> Path:
        return Path(self.paths.get("input") or DEFAULT_INPUT)


def load_config(path: Path = CONFIG_PATH) -> 'HEConfig':
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    return HEConfig(data)

_config_cache = None

def get_config() -> 'HEConfig':
    global _config_cache
    if _config_cache is None:
        _config_cache = load_config()
    return _config_cache
