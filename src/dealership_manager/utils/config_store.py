"""JSON settings file shared by the settings helpers."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from dealership_manager.logging_config import get_logger

logger = get_logger(__name__)


def load_config_data(config_path: Path) -> dict[str, Any]:
    """Return the settings mapping, empty when the file is absent or unreadable."""
    if not config_path.exists():
        return {}
    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError):
        logger.warning("Ignoring unreadable settings file %s", config_path)
        return {}
    return data if isinstance(data, dict) else {}


def save_config_data(config_path: Path, data: dict[str, Any]) -> None:
    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text(
        json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8"
    )
