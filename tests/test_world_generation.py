from __future__ import annotations

import pytest

from relicbar.domain.world_generation import (
    BIOME_TYPES,
    FractalNoise,
    NoiseSettings,
    WorldGenerationSettings,
    WorldGenerator,
    determine_biome,
)


def _small_settings(seed: int = 42) -> WorldGenerationSettings:
    return WorldGenerationSettings(width=24, height=12, seed=seed)


def test_generation_is_deterministic_for_seed() -> None:
    world_a = WorldGenerator().generate(_small_settings())
    world_b = WorldGenerator().generate(_small_settings())
    assert list(world_a.map) == list(world_b.map)


def test_map_has_requested_dimensions_and_valid_tiles() -> None:
    world = WorldGenerator().generate(_small_settings())
    assert world.map.width == 24
    assert world.map.height == 12
    assert len(world.map) == 24 * 12

    tile = world.map[5, 7]
    assert (tile.x, tile.y) == (5, 7)
    for tile in world.map:
        assert 0.0 <= tile.elevation <= 1.0
        assert 0.0 <= tile.temperature <= 1.0
        assert 0.0 <= tile.moisture <= 1.0
        assert tile.is_land == (tile.elevation >= world.settings.sea_level)
        assert tile.biome in BIOME_TYPES


def test_zero_seed_is_replaced_with_a_real_seed() -> None:
    world = WorldGenerator().generate(WorldGenerationSettings(width=4, height=4, seed=0))
    assert world.settings.seed != 0


@pytest.mark.parametrize("width,height", [(0, 10), (10, 0), (-1, 5)])
def test_non_positive_dimensions_are_rejected(width: int, height: int) -> None:
    with pytest.raises(ValueError):
        WorldGenerator().generate(WorldGenerationSettings(width=width, height=height, seed=1))


def test_noise_is_normalised() -> None:
    noise = FractalNoise(7, NoiseSettings(frequency=1.35, octaves=5, persistence=0.48, lacunarity=2.15))
    samples = [noise.sample(x / 10, y / 10) for x in range(10) for y in range(10)]
    assert all(0.0 <= value <= 1.0 for value in samples)
    assert noise.sample(0.3, 0.6) == noise.sample(0.3, 0.6)


def test_zero_octaves_sample_zero() -> None:
    noise = FractalNoise(7, NoiseSettings(frequency=1.0, octaves=0, persistence=0.5, lacunarity=2.0))
    assert noise.sample(0.5, 0.5) == 0.0


@pytest.mark.parametrize(
    "is_land,elevation,temperature,moisture,expected",
    [
        (False, 0.30, 0.5, 0.5, "deep_ocean"),
        (False, 0.45, 0.5, 0.5, "ocean"),
        (False, 0.50, 0.5, 0.5, "coast"),
        (True, 0.60, 0.20, 0.5, "snow"),
        (True, 0.60, 0.80, 0.20, "desert"),
        (True, 0.60, 0.80, 0.50, "jungle"),
        (True, 0.60, 0.50, 0.80, "jungle"),
        (True, 0.60, 0.50, 0.20, "desert"),
        (True, 0.60, 0.50, 0.50, "plains"),
    ],
)
def test_biome_classification(
    is_land: bool, elevation: float, temperature: float, moisture: float, expected: str
) -> None:
    assert determine_biome(is_land, elevation, temperature, moisture, 0.52) == expected
