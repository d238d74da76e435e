"""Settlement site scoring."""

import numpy as np
from numpy.typing import NDArray

from ..climate.biomes import biome_value_to_type
from ..terrain_types import BiomeType

# Sites lower than this are too close to the sea to build on
MIN_SITE_ELEVATION = 0.05

# (elevation below, score); first match wins
ELEVATION_SCORES: tuple[tuple[float, float], ...] = ((0.3, 10.0), (0.5, 5.0))

BIOME_SCORES: dict[BiomeType, float] = {
    BiomeType.TEMPERATE_GRASSLAND: 15.0,
    BiomeType.TEMPERATE_FOREST: 15.0,
    BiomeType.SAVANNA: 10.0,
    BiomeType.TROPICAL_FOREST: 10.0,
    BiomeType.TAIGA: 5.0,
    BiomeType.DESERT: -5.0,
    BiomeType.TUNDRA: -5.0,
    BiomeType.ICE: -5.0,
}

WATER_SEARCH_RADIUS = 5
WATER_BONUS = 20.0
WATER_FALLOFF = 10.0
NO_WATER_PENALTY = -10.0

COMFORT_TEMPERATURE = (5.0, 25.0)
COMFORT_BONUS = 10.0


def nearest_water_distance(
    elevation: NDArray[np.float32],
    x: int,
    y: int,
    radius: int = WATER_SEARCH_RADIUS,
) -> int | None:
    """Manhattan distance to the nearest water cell in a square window.

    Returns:
        Distance, or None if the window holds no water.
    """
    height, width = elevation.shape
    y0, y1 = max(0, y - radius), min(height, y + radius + 1)
    x0, x1 = max(0, x - radius), min(width, x + radius + 1)

    wy, wx = np.nonzero(elevation[y0:y1, x0:x1] < 0.0)
    if wy.size == 0:
        return None
    return int(np.min(np.abs(wx + x0 - x) + np.abs(wy + y0 - y)))


def site_suitability(
    x: int,
    y: int,
    elevation: NDArray[np.float32],
    temperature: NDArray[np.float32],
    biomes: NDArray[np.uint8],
) -> float:
    """Score a cell as a place to found a city.

    Low, temperate land next to water in a fertile biome scores best.
    Anything below ``MIN_SITE_ELEVATION`` scores 0.

    Args:
        x: Cell x.
        y: Cell y.
        elevation: Elevation field.
        temperature: Temperature field.
        biomes: Biome grid.

    Returns:
        Score, never negative.
    """
    height, width = elevation.shape
    if not (0 <= x < width and 0 <= y < height):
        return 0.0

    e = float(elevation[y, x])
    if e < MIN_SITE_ELEVATION:
        return 0.0

    score = 0.0
    for below, bonus in ELEVATION_SCORES:
        if e < below:
            score += bonus
            break

    score += BIOME_SCORES.get(biome_value_to_type(int(biomes[y, x])), 0.0)

    distance = nearest_water_distance(elevation, x, y)
    if distance is None:
        score += NO_WATER_PENALTY
    else:
        score += WATER_BONUS * (1.0 - distance / WATER_FALLOFF)

    low, high = COMFORT_TEMPERATURE
    if low < float(temperature[y, x]) < high:
        score += COMFORT_BONUS

    return max(0.0, score)
