"""Biome sprite atlas loaded from a JSON definition."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Mapping

from relicbar.data import paths
from relicbar.data.errors import DataValidationError
from relicbar.data.json_loader import load_json
from relicbar.domain.world_generation import BIOME_TYPES, BiomeType

logger = logging.getLogger(__name__)

ATLAS_FILENAME = "tile_atlas.json"


class TileAtlas:
    """Maps biomes to sprite paths with a configured fallback."""

    def __init__(self, sprites: Mapping[BiomeType, str], default_sprite: str) -> None:
        self._sprites: Dict[BiomeType, str] = dict(sprites)
        self._default_sprite = default_sprite

    @classmethod
    def empty(cls) -> "TileAtlas":
        return cls({}, "")

    @classmethod
    def load(cls, path: Path | str | None = None) -> "TileAtlas":
        """Load the atlas from disk. Missing, empty or malformed files are fatal."""
        file_path = Path(path) if path is not None else paths.get_definitions_path() / ATLAS_FILENAME
        return cls.from_raw(load_json(file_path), context=str(file_path))

    @classmethod
    def from_raw(cls, raw: object, *, context: str = ATLAS_FILENAME) -> "TileAtlas":
        if not isinstance(raw, dict):
            raise DataValidationError(f"Expected top-level object in {context}")
        # Property names match case-insensitively ("defaultSprite", "default_sprite", "Biomes").
        fields = {_normalize_key(str(key)): value for key, value in raw.items()}

        biomes = fields.get("biomes")
        if not isinstance(biomes, dict) or not biomes:
            raise DataValidationError(f"{context} must contain at least one biome entry.")

        sprites: Dict[BiomeType, str] = {}
        for name, sprite_path in biomes.items():
            biome = _parse_biome(str(name))
            if biome is None:
                logger.debug("Skipping unknown biome '%s' in %s", name, context)
                continue
            if not isinstance(sprite_path, str):
                raise DataValidationError(f"{context} sprite for '{name}' must be a string.")
            sprites[biome] = sprite_path

        default_sprite = fields.get("defaultsprite")
        if default_sprite is None:
            default_sprite = next(iter(sprites.values()), "")
        if not isinstance(default_sprite, str):
            raise DataValidationError(f"{context} default sprite must be a string.")
        return cls(sprites, default_sprite)

    @property
    def default_sprite(self) -> str:
        return self._default_sprite

    def get_sprite(self, biome: BiomeType) -> str:
        return self._sprites.get(biome, self._default_sprite)


def _normalize_key(key: str) -> str:
    return key.replace("_", "").lower()


def _parse_biome(name: str) -> BiomeType | None:
    normalized = _normalize_key(name)
    for biome in BIOME_TYPES:
        if _normalize_key(biome) == normalized:
            return biome
    return None
