"""Tests for climate generation."""

import numpy as np

from genesis.climate.config import ClimateConfig, RiverConfig
from genesis.climate.model import ClimateResult, generate_climate
from genesis.terrain.elevation import ElevationField
from genesis.terrain.generator import generate_elevation
from genesis.terrain_types import BiomeType


class TestGenerateClimate:
    """Tests for generate_climate."""

    def test_grids_match_field(self) -> None:
        """All grids share the field's shape."""
        field = generate_elevation(40, 30, seed=5)
        climate = generate_climate(field, seed=5)
        assert climate.temperature.shape == (30, 40)
        assert climate.moisture.shape == (30, 40)
        assert climate.biomes.shape == (30, 40)

    def test_moisture_range(self) -> None:
        """Moisture stays in [0, 1]."""
        climate = generate_climate(generate_elevation(48, 48, seed=8), seed=8)
        assert climate.moisture.min() >= 0.0
        assert climate.moisture.max() <= 1.0

    def test_water_biomes(self) -> None:
        """Deep cells are ocean, shallow negative cells are beach."""
        heights = np.full((10, 10), 0.2, dtype=np.float32)
        heights[0, :] = -0.5
        heights[1, :] = -0.05
        climate = generate_climate(ElevationField(heights), seed=0)
        assert climate.biome_at(3, 0) == BiomeType.OCEAN
        assert climate.biome_at(3, 1) == BiomeType.BEACH
        assert climate.biome_at(3, 5) not in (BiomeType.OCEAN, BiomeType.BEACH)

    def test_deterministic(self) -> None:
        """Same field and seed give the same climate, rivers included."""
        field = generate_elevation(40, 40, seed=2)
        config = ClimateConfig(rivers=RiverConfig(river_count=10))
        a = generate_climate(field, seed=2, config=config)
        b = generate_climate(field, seed=2, config=config)
        np.testing.assert_array_equal(a.moisture, b.moisture)
        np.testing.assert_array_equal(a.biomes, b.biomes)
        assert a.rivers == b.rivers

    def test_field_not_modified(self) -> None:
        """Climate only reads the elevation field."""
        field = generate_elevation(30, 30, seed=3)
        before = field.heights.copy()
        generate_climate(field, seed=3)
        np.testing.assert_array_equal(field.heights, before)

    def test_no_rivers_by_default(self) -> None:
        """Default config carves no rivers."""
        climate = generate_climate(generate_elevation(30, 30, seed=3), seed=3)
        assert climate.rivers == []


class TestClimateResult:
    """Tests for per-cell accessors."""

    def test_out_of_bounds_sentinels(self) -> None:
        """Outside the map: 0.0, 0.0 and ocean."""
        grid = np.ones((4, 4), dtype=np.float32)
        climate = ClimateResult(grid, grid, np.zeros((4, 4), dtype=np.uint8))
        assert climate.temperature_at(-1, 0) == 0.0
        assert climate.moisture_at(0, 4) == 0.0
        assert climate.biome_at(9, 9) == BiomeType.OCEAN

    def test_in_bounds(self) -> None:
        """Accessors read the grids at [y, x]."""
        temperature = np.full((4, 4), 12.5, dtype=np.float32)
        moisture = np.full((4, 4), 0.25, dtype=np.float32)
        climate = ClimateResult(temperature, moisture, np.zeros((4, 4), dtype=np.uint8))
        assert climate.temperature_at(1, 2) == 12.5
        assert climate.moisture_at(3, 3) == 0.25
