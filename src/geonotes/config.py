"""
Lightweight config loading for geonotes.
Reads a JSON file in the base path, falling back to defaults.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict

logger = logging.getLogger(__name__)

CONFIG_FILENAME = ".geonotes_config.json"

DEFAULT_CONFIG = {
    "latest_limit": 5,
    "export_format": "json",
    "log_level": "WARNING",
}


def load_config(base_path: Path) -> Dict[str, Any]:
    path = Path(base_path) / CONFIG_FILENAME
    if not path.exists():
        return DEFAULT_CONFIG.copy()
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as exc:
        logger.warning("Ignoring unreadable config %s: %s", path, exc)
        return DEFAULT_CONFIG.copy()
    if not isinstance(data, dict):
        logger.warning("Ignoring config %s: expected a JSON object", path)
        return DEFAULT_CONFIG.copy()
    # Merge shallowly with defaults
    cfg = DEFAULT_CONFIG.copy()
    cfg.update(data)
    return cfg
