"""Locations of bundled definition files."""
from __future__ import annotations

from pathlib import Path


def get_repo_root() -> Path:
    """Checkout root: src/relicbar/data/paths.py sits three levels below it."""
    return Path(__file__).resolve().parents[3]


def get_definitions_path(base_path: Path | str | None = None) -> Path:
    """Directory holding tile_atlas.json, or ``base_path`` when given."""
    if base_path is not None:
        return Path(base_path)
    return get_repo_root() / "data" / "definitions"
