"""Shared test fixtures for genesis tests."""

import numpy as np
import pytest

from genesis.climate.biomes import classify_biomes
from genesis.climate.model import ClimateResult
from genesis.terrain.elevation import ElevationField


def make_climate(
    field: ElevationField,
    temperature: float = 15.0,
    moisture: float = 0.5,
) -> ClimateResult:
    """Uniform climate over a field; biomes follow the biome table."""
    shape = field.heights.shape
    temp = np.full(shape, temperature, dtype=np.float32)
    moist = np.full(shape, moisture, dtype=np.float32)
    return ClimateResult(temp, moist, classify_biomes(field.heights, temp, moist))


def make_plateau(
    width: int,
    height: int,
    land: float = 0.1,
    border: int = 3,
) -> ElevationField:
    """Flat land surrounded by a deep-water border."""
    heights = np.full((height, width), -0.5, dtype=np.float32)
    heights[border : height - border, border : width - border] = land
    return ElevationField(heights)


@pytest.fixture
def plateau() -> ElevationField:
    """80x80 plateau at elevation 0.1 with a 3-tile ocean border."""
    return make_plateau(80, 80)


@pytest.fixture
def temperate_climate(plateau: ElevationField) -> ClimateResult:
    """15 C, moisture 0.5: temperate grassland on land, ocean around it."""
    return make_climate(plateau)


@pytest.fixture
def ramp() -> ElevationField:
    """32x32 field rising from -1 at the left edge to 1 at the right."""
    row = np.linspace(-1.0, 1.0, 32, dtype=np.float32)
    return ElevationField(np.tile(row, (32, 1)))
