"""Procedural terrain: layered value noise classified into biomes."""
from __future__ import annotations

import math
import secrets
from dataclasses import dataclass, field, replace
from typing import Iterator, List, Literal, Sequence, Tuple

BiomeType = Literal["deep_ocean", "ocean", "coast", "plains", "desert", "jungle", "snow"]
BIOME_TYPES: Tuple[BiomeType, ...] = ("deep_ocean", "ocean", "coast", "plains", "desert", "jungle", "snow")

_MAX_RANDOM_SEED = 2**31 - 1
_UINT32 = 0xFFFFFFFF

# Channel seed offsets keep the three noise fields independent.
ELEVATION_SEED_OFFSET = 11
TEMPERATURE_SEED_OFFSET = 37
MOISTURE_SEED_OFFSET = 53
OCTAVE_SEED_STRIDE = 17


@dataclass(frozen=True, slots=True)
class NoiseSettings:
    frequency: float
    octaves: int
    persistence: float
    lacunarity: float


ELEVATION_NOISE_DEFAULT = NoiseSettings(frequency=1.35, octaves=5, persistence=0.48, lacunarity=2.15)
TEMPERATURE_NOISE_DEFAULT = NoiseSettings(frequency=0.9, octaves=4, persistence=0.55, lacunarity=2.0)
MOISTURE_NOISE_DEFAULT = NoiseSettings(frequency=0.8, octaves=4, persistence=0.58, lacunarity=2.2)


@dataclass(frozen=True, slots=True)
class WorldGenerationSettings:
    """Generation inputs. A seed of 0 asks the generator to pick one."""

    width: int = 96
    height: int = 54
    seed: int = 0
    sea_level: float = 0.52
    elevation_noise: NoiseSettings = field(default=ELEVATION_NOISE_DEFAULT)
    temperature_noise: NoiseSettings = field(default=TEMPERATURE_NOISE_DEFAULT)
    moisture_noise: NoiseSettings = field(default=MOISTURE_NOISE_DEFAULT)


@dataclass(frozen=True, slots=True)
class WorldTile:
    x: int
    y: int
    elevation: float
    temperature: float
    moisture: float
    is_land: bool
    biome: BiomeType


class WorldMap:
    """Column-major tile grid indexed by (x, y)."""

    def __init__(self, columns: Sequence[Sequence[WorldTile]]) -> None:
        self._columns: Tuple[Tuple[WorldTile, ...], ...] = tuple(tuple(column) for column in columns)
        self.width = len(self._columns)
        self.height = len(self._columns[0]) if self._columns else 0

    def __getitem__(self, position: Tuple[int, int]) -> WorldTile:
        x, y = position
        return self._columns[x][y]

    def __iter__(self) -> Iterator[WorldTile]:
        for column in self._columns:
            yield from column

    def __len__(self) -> int:
        return self.width * self.height


@dataclass(slots=True)
class GameWorld:
    settings: WorldGenerationSettings
    map: WorldMap


class FractalNoise:
    """Octave-summed value noise normalised into [0, 1]."""

    def __init__(self, seed: int, settings: NoiseSettings) -> None:
        self._seed = seed
        self._settings = settings

    def sample(self, x: float, y: float) -> float:
        total = 0.0
        amplitude = 1.0
        frequency = self._settings.frequency
        max_amplitude = 0.0
        for octave in range(self._settings.octaves):
            total += _value_noise(self._seed + octave * OCTAVE_SEED_STRIDE, x * frequency, y * frequency) * amplitude
            max_amplitude += amplitude
            amplitude *= self._settings.persistence
            frequency *= self._settings.lacunarity
        if max_amplitude <= 0:
            return 0.0
        return _clamp01(total / max_amplitude)


class WorldGenerator:
    def generate(self, settings: WorldGenerationSettings | None = None) -> GameWorld:
        settings = settings or WorldGenerationSettings()
        if settings.width <= 0 or settings.height <= 0:
            raise ValueError("World dimensions must be positive.")
        seed = settings.seed if settings.seed != 0 else secrets.randbelow(_MAX_RANDOM_SEED) + 1
        settings = replace(settings, seed=seed)

        elevation_noise = FractalNoise(seed + ELEVATION_SEED_OFFSET, settings.elevation_noise)
        temperature_noise = FractalNoise(seed + TEMPERATURE_SEED_OFFSET, settings.temperature_noise)
        moisture_noise = FractalNoise(seed + MOISTURE_SEED_OFFSET, settings.moisture_noise)

        columns: List[List[WorldTile]] = []
        for x in range(settings.width):
            column: List[WorldTile] = []
            nx = x / settings.width
            for y in range(settings.height):
                ny = y / settings.height
                elevation = elevation_noise.sample(nx, ny)
                is_land = elevation >= settings.sea_level
                latitude = 1.0 - abs(ny * 2.0 - 1.0)  # 1 at the equator, 0 at the poles
                temperature = _clamp01(temperature_noise.sample(nx, ny) * 0.65 + latitude * 0.35)
                moisture = _clamp01(moisture_noise.sample(nx, ny))
                biome = determine_biome(is_land, elevation, temperature, moisture, settings.sea_level)
                column.append(WorldTile(x, y, elevation, temperature, moisture, is_land, biome))
            columns.append(column)
        return GameWorld(settings=settings, map=WorldMap(columns))


def determine_biome(
    is_land: bool, elevation: float, temperature: float, moisture: float, sea_level: float
) -> BiomeType:
    if not is_land:
        depth = sea_level - elevation
        if depth > 0.12:
            return "deep_ocean"
        if depth > 0.04:
            return "ocean"
        return "coast"
    if temperature < 0.28:
        return "snow"
    if temperature > 0.68:
        return "desert" if moisture < 0.35 else "jungle"
    if moisture > 0.72:
        return "jungle"
    if moisture < 0.28:
        return "desert"
    return "plains"


def _value_noise(seed: int, x: float, y: float) -> float:
    xi = math.floor(x)
    yi = math.floor(y)
    xf = x - xi
    yf = y - yi

    v00 = _lattice_value(seed, xi, yi)
    v10 = _lattice_value(seed, xi + 1, yi)
    v01 = _lattice_value(seed, xi, yi + 1)
    v11 = _lattice_value(seed, xi + 1, yi + 1)

    sx = _smooth(xf)
    top = _lerp(v00, v10, sx)
    bottom = _lerp(v01, v11, sx)
    return _lerp(top, bottom, _smooth(yf))


def _lattice_value(seed: int, x: int, y: int) -> float:
    # 32-bit integer hash of the lattice point, mapped to [0, 1).
    h = seed & _UINT32
    h ^= (374761393 * (x & _UINT32)) & _UINT32
    h ^= (668265263 * (y & _UINT32)) & _UINT32
    h = ((h ^ (h >> 13)) * 1274126177) & _UINT32
    h ^= h >> 16
    return (h & 0xFFFFFF) / 0x1000000


def _lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


def _smooth(t: float) -> float:
    return t * t * (3 - 2 * t)


def _clamp01(value: float) -> float:
    return min(1.0, max(0.0, value))
