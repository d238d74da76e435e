"""Climate fields: temperature, moisture, and river moisture."""

import logging

import numpy as np
from numpy.typing import NDArray
from scipy import ndimage

from ..types import DIRECTION_DELTAS
from .config import ClimateConfig, RiverConfig

logger = logging.getLogger(__name__)


def compute_temperature(
    elevation: NDArray[np.float32],
    config: ClimateConfig,
) -> NDArray[np.float32]:
    """Compute temperature from latitude and altitude.

    The equator runs along the middle row; temperature falls linearly toward
    the top and bottom edges, and drops with height above sea level at the
    lapse rate.

    Args:
        elevation: Elevation field.
        config: Climate parameters.

    Returns:
        Temperature in degrees C, same shape as elevation.
    """
    height, _ = elevation.shape
    latitude = np.arange(height, dtype=np.float64) / height
    latitude_effect = np.abs(latitude - 0.5) * 2.0
    base = config.base_temperature - config.latitude_range * latitude_effect

    meters = np.maximum(0.0, elevation.astype(np.float64) * config.elevation_scale)
    drop = meters / 1000.0 * config.lapse_rate

    return (base[:, np.newaxis] - drop).astype(np.float32)


def distance_to_water(
    elevation: NDArray[np.float32],
    max_distance: float,
) -> NDArray[np.float32]:
    """Euclidean distance to the nearest water cell, capped at ``max_distance``.

    Water is any cell below elevation 0. With no water at all every cell is
    ``max_distance`` away.
    """
    water_mask = elevation < 0.0
    if not water_mask.any():
        return np.full(elevation.shape, max_distance, dtype=np.float32)

    distance = ndimage.distance_transform_edt(~water_mask)
    return np.minimum(distance, max_distance).astype(np.float32)


def compute_moisture(
    elevation: NDArray[np.float32],
    config: ClimateConfig,
) -> NDArray[np.float32]:
    """Compute raw moisture from proximity to water.

    Moisture is 1 on water and falls to 0 at ``search_radius`` tiles inland.
    Highlands above ``highland_elevation`` are drier still.

    Args:
        elevation: Elevation field.
        config: Climate parameters.

    Returns:
        Moisture in [0, 1].
    """
    radius = float(config.search_radius)
    distance = distance_to_water(elevation, radius)
    moisture = 1.0 - distance.astype(np.float64) / radius

    e = elevation.astype(np.float64)
    highland = e > config.highland_elevation
    moisture[highland] *= 1.0 - (e[highland] - config.highland_elevation)

    return np.clip(moisture, 0.0, 1.0).astype(np.float32)


def smooth_moisture(
    moisture: NDArray[np.float32],
    passes: int,
) -> NDArray[np.float32]:
    """Apply 3x3 box averaging to interior cells.

    Each pass reads the previous pass's complete grid. Border cells keep
    their value.

    Args:
        moisture: Moisture field.
        passes: Number of averaging passes.

    Returns:
        Smoothed copy of the moisture field.
    """
    result = moisture.astype(np.float64)
    height, width = result.shape
    if height < 3 or width < 3:
        return result.astype(np.float32)

    for _ in range(passes):
        averaged = ndimage.uniform_filter(result, size=3, mode="nearest")
        smoothed = result.copy()
        smoothed[1:-1, 1:-1] = averaged[1:-1, 1:-1]
        result = smoothed

    return result.astype(np.float32)


def carve_rivers(
    elevation: NDArray[np.float32],
    moisture: NDArray[np.float32],
    rng: np.random.Generator,
    config: RiverConfig,
) -> tuple[NDArray[np.float32], list[list[tuple[int, int]]]]:
    """Trace rivers downhill and wet the land they cross.

    Each source is drawn uniformly; sources lower than
    ``source_min_elevation`` are discarded. A river steps to its lowest
    8-neighbor until it reaches a local minimum, the next cell is water, or
    it has taken ``max_length`` steps.

    Args:
        elevation: Elevation field.
        moisture: Moisture field (not modified).
        rng: Random generator for source selection.
        config: River parameters.

    Returns:
        Tuple of (updated moisture, list of river paths as (x, y) cells).
    """
    height, width = elevation.shape
    result = moisture.copy()
    rivers: list[list[tuple[int, int]]] = []

    bank = _bank_kernel(config)
    r = config.bank_radius

    for _ in range(config.river_count):
        x = int(rng.integers(width))
        y = int(rng.integers(height))
        if elevation[y, x] < config.source_min_elevation:
            continue

        path: list[tuple[int, int]] = []
        for _ in range(config.max_length):
            lowest_x, lowest_y = x, y
            lowest = float(elevation[y, x])
            for dx, dy in DIRECTION_DELTAS.values():
                nx, ny = x + dx, y + dy
                if 0 <= nx < width and 0 <= ny < height and elevation[ny, nx] < lowest:
                    lowest = float(elevation[ny, nx])
                    lowest_x, lowest_y = nx, ny

            if (lowest_x, lowest_y) == (x, y) or lowest < 0.0:
                break

            x, y = lowest_x, lowest_y
            path.append((x, y))
            result[y, x] = min(1.0, result[y, x] + config.bed_moisture)

            y0, y1 = max(0, y - r), min(height, y + r + 1)
            x0, x1 = max(0, x - r), min(width, x + r + 1)
            kernel = bank[y0 - y + r : y1 - y + r, x0 - x + r : x1 - x + r]
            result[y0:y1, x0:x1] = np.minimum(1.0, result[y0:y1, x0:x1] + kernel)

        if path:
            rivers.append(path)

    logger.info(f"Carved {len(rivers)} of {config.river_count} rivers")
    return result, rivers


def _bank_kernel(config: RiverConfig) -> NDArray[np.float32]:
    """Moisture bonus around a river cell, fading to 0 at ``bank_radius``."""
    r = config.bank_radius
    offsets = np.arange(-r, r + 1, dtype=np.float64)
    dist = np.sqrt(offsets[np.newaxis, :] ** 2 + offsets[:, np.newaxis] ** 2)
    return np.maximum(0.0, config.bank_moisture * (1.0 - dist / r)).astype(np.float32)
