"""Terrain type classification: elevation bands from deep water to snow."""

import numpy as np
from numpy.typing import NDArray

from ..terrain_types import TerrainType
from .config import TerrainThresholds

# Band order is storage order: index i holds cells below bounds()[i]
TERRAIN_ORDER: tuple[TerrainType, ...] = (
    TerrainType.DEEP_WATER,
    TerrainType.SHALLOW_WATER,
    TerrainType.SAND,
    TerrainType.GRASS,
    TerrainType.FOREST,
    TerrainType.ROCK,
    TerrainType.SNOW,
)


def classify_terrain(
    elevation: NDArray[np.float32],
    thresholds: TerrainThresholds,
) -> NDArray[np.uint8]:
    """Classify each cell into a terrain type.

    Args:
        elevation: Elevation field.
        thresholds: Ascending band bounds.

    Returns:
        2D array of terrain values as uint8 (see ``terrain_value``).
    """
    # Compare in float32 so a height stored at a bound lands in the band above
    bounds = np.asarray(thresholds.bounds(), dtype=np.float32)
    return np.digitize(elevation.astype(np.float32), bounds).astype(np.uint8)


def classify_elevation(elevation: float, thresholds: TerrainThresholds) -> TerrainType:
    """Terrain type for a single elevation value."""
    grid = classify_terrain(np.array([[elevation]], dtype=np.float32), thresholds)
    return TERRAIN_ORDER[int(grid[0, 0])]


def terrain_value(terrain: TerrainType) -> int:
    """Convert TerrainType to its uint8 storage value."""
    return TERRAIN_ORDER.index(terrain)


def terrain_value_to_type(value: int) -> TerrainType:
    """Convert uint8 value back to TerrainType.

    Unknown values are treated as deep water.
    """
    if 0 <= value < len(TERRAIN_ORDER):
        return TERRAIN_ORDER[value]
    return TerrainType.DEEP_WATER
