from __future__ import annotations

import json
from pathlib import Path


DEFAULT_CONFIG_PATH = Path.home() / ".config" / "tinfo.json"


def load_config(config_path: Path | None = None) -> dict:
    """Load config from tinfo.json. Missing file or keys use built-in defaults."""
    defaults = {"tmux_command": "tmux"}
    path = config_path or DEFAULT_CONFIG_PATH
    if path.exists():
        data = json.loads(path.read_text())
        defaults.update(data)
    return defaults
