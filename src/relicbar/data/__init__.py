"""Definition files: JSON loading, errors and the biome tile atlas."""

from .errors import DataError, DataLoadError, DataValidationError
from .paths import get_definitions_path, get_repo_root
from .tile_atlas import TileAtlas

__all__ = [
    "DataError",
    "DataLoadError",
    "DataValidationError",
    "TileAtlas",
    "get_definitions_path",
    "get_repo_root",
]
