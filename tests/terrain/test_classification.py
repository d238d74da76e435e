"""Tests for terrain classification."""

import numpy as np
import pytest

from genesis.terrain.classification import (
    TERRAIN_ORDER,
    classify_elevation,
    classify_terrain,
    terrain_value,
    terrain_value_to_type,
)
from genesis.terrain.config import TerrainThresholds
from genesis.terrain_types import TerrainType


class TestClassifyTerrain:
    """Tests for elevation band classification."""

    @pytest.mark.parametrize(
        ("elevation", "expected"),
        [
            (-1.0, TerrainType.DEEP_WATER),
            (-0.5, TerrainType.SHALLOW_WATER),
            (-0.2, TerrainType.SHALLOW_WATER),
            (-0.1, TerrainType.SAND),
            (-0.05, TerrainType.SAND),
            (0.0, TerrainType.GRASS),
            (0.15, TerrainType.FOREST),
            (0.3, TerrainType.FOREST),
            (0.35, TerrainType.ROCK),
            (0.6, TerrainType.SNOW),
            (1.0, TerrainType.SNOW),
        ],
    )
    def test_bands(self, elevation: float, expected: TerrainType) -> None:
        """Each bound belongs to the band above it."""
        thresholds = TerrainThresholds()
        grid = classify_terrain(np.array([[elevation]], dtype=np.float32), thresholds)
        assert terrain_value_to_type(int(grid[0, 0])) == expected
        assert classify_elevation(elevation, thresholds) == expected

    def test_monotonic(self) -> None:
        """Higher elevation never gives a lower terrain class."""
        elevation = np.linspace(-1.0, 1.0, 500, dtype=np.float32).reshape(1, -1)
        grid = classify_terrain(elevation, TerrainThresholds())
        assert np.all(np.diff(grid[0].astype(int)) >= 0)

    def test_output_dtype(self) -> None:
        """Output is uint8."""
        grid = classify_terrain(np.zeros((4, 4), dtype=np.float32), TerrainThresholds())
        assert grid.dtype == np.uint8

    def test_custom_thresholds(self) -> None:
        """Moving the sand bound moves the coastline."""
        thresholds = TerrainThresholds(sand=0.2, grass=0.3)
        assert classify_elevation(0.1, thresholds) == TerrainType.SAND

    def test_thresholds_must_ascend(self) -> None:
        """Overlapping bands are rejected."""
        with pytest.raises(ValueError):
            TerrainThresholds(grass=-0.2)


class TestTerrainValues:
    """Tests for uint8 storage mapping."""

    def test_round_trip_order(self) -> None:
        """Storage values follow elevation order."""
        for value, terrain in enumerate(TERRAIN_ORDER):
            assert terrain_value(terrain) == value
            assert terrain_value_to_type(value) == terrain

    def test_unknown_is_deep_water(self) -> None:
        """Unknown storage values read as deep water."""
        assert terrain_value_to_type(200) == TerrainType.DEEP_WATER
