"""CLI configuration helpers for options persistence."""
from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Dict

logger = logging.getLogger(__name__)

_DEFAULT_LOCK_MODE = "random"


def get_user_data_dir() -> Path:
    """Return the per-user data directory."""
    if os.name == "nt":
        base = os.environ.get("APPDATA")
        if base:
            return Path(base) / "RelicBar"
        return Path.home() / "RelicBar"
    return Path.home() / ".config" / "relic_bar"


def get_default_config_path() -> Path:
    """Return the default per-user config path."""
    return get_user_data_dir() / "config.json"


def debug_enabled() -> bool:
    """Return True only when RELICBAR_DEBUG is explicitly set to '1'."""
    return os.getenv("RELICBAR_DEBUG") == "1"


def _normalize_lock_mode(value: object) -> str:
    return "manual" if value == "manual" else _DEFAULT_LOCK_MODE


def load_config(path: Path | None = None) -> Dict[str, str]:
    """Load config from disk or return defaults."""
    config_path = path or get_default_config_path()
    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {"lock_mode": _DEFAULT_LOCK_MODE}
    except (OSError, ValueError) as exc:
        logger.warning("Ignoring unreadable config %s: %s", config_path, exc)
        return {"lock_mode": _DEFAULT_LOCK_MODE}
    if not isinstance(raw, dict):
        return {"lock_mode": _DEFAULT_LOCK_MODE}
    return {"lock_mode": _normalize_lock_mode(raw.get("lock_mode"))}


def save_config(config: Dict[str, str], path: Path | None = None) -> None:
    """Persist config to disk."""
    config_path = path or get_default_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)
    payload = {"lock_mode": _normalize_lock_mode(config.get("lock_mode"))}
    config_path.write_text(json.dumps(payload, indent=2, sort_keys=True), encoding="utf-8")
