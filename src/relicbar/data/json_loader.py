"""Reads definition documents from data/definitions."""
from __future__ import annotations

import json
from pathlib import Path

from .errors import DataLoadError


def load_json(path: Path) -> object:
    """
    Parse a definition document.

    Every failure mode is fatal and surfaces as DataLoadError; a blank file is
    treated the same as a missing one.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise DataLoadError(f"Definition file not found: {path}") from exc
    except OSError as exc:
        raise DataLoadError(f"Unable to read definition file: {path}") from exc

    if not text.strip():
        raise DataLoadError(f"Definition file is empty: {path}")

    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise DataLoadError(f"Invalid JSON in {path}: {exc}") from exc
