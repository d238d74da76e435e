"""Island shaping: square and archipelago falloff masks."""

import numpy as np
from numpy.typing import NDArray

from .config import IslandConfig, IslandMode


def falloff_curve(value: NDArray[np.float64], a: float, b: float) -> NDArray[np.float64]:
    """Shape a [0, 1] mask value into a plateau with a steep coast.

    ``v^a / (v^a + (b - b*v)^a)``: 0 stays 0, 1 stays 1, and the middle of
    the range is pushed toward either end.

    Args:
        value: Mask values in [0, 1].
        a: Curve exponent.
        b: Curve steepness.

    Returns:
        Shaped values in [0, 1].
    """
    va = np.power(value, a)
    return va / (va + np.power(b - b * value, a))


def _normalized_coords(width: int, height: int) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
    """Tile coordinates mapped to [-1, 1) on both axes."""
    ny, nx = np.meshgrid(
        np.arange(height, dtype=np.float64) / height * 2.0 - 1.0,
        np.arange(width, dtype=np.float64) / width * 2.0 - 1.0,
        indexing="ij",
    )
    return nx, ny


def square_falloff(width: int, height: int, config: IslandConfig) -> NDArray[np.float64]:
    """Single island mask using Chebyshev distance from the map center.

    Produces a square-ish island with a flat center plateau.
    """
    nx, ny = _normalized_coords(width, height)
    distance = np.maximum(np.abs(nx), np.abs(ny))
    value = np.maximum(0.0, 1.0 - distance)
    return falloff_curve(value, config.falloff_a, config.falloff_b)


def archipelago_falloff(width: int, height: int, config: IslandConfig) -> NDArray[np.float64]:
    """Multi-island mask from weighted radial centers.

    Each center contributes ``weight * (1 - spread * dist)``; the strongest
    contribution (or 0) wins per cell before the falloff curve is applied.
    """
    nx, ny = _normalized_coords(width, height)
    value = np.zeros((height, width), dtype=np.float64)

    for center in config.centers:
        dist = np.sqrt((nx - center.x) ** 2 + (ny - center.y) ** 2)
        island = (1.0 - dist * center.spread) * center.weight
        value = np.maximum(value, island)

    return falloff_curve(value, config.falloff_a, config.falloff_b)


def compute_falloff(width: int, height: int, config: IslandConfig) -> NDArray[np.float64]:
    """Falloff mask for the configured island mode."""
    if config.mode == IslandMode.ARCHIPELAGO:
        return archipelago_falloff(width, height, config)
    return square_falloff(width, height, config)


def apply_island_mask(
    noise: NDArray[np.float32],
    config: IslandConfig,
) -> NDArray[np.float32]:
    """Blend the falloff mask into a noise field.

    Args:
        noise: Noise field in [-1, 1].
        config: Island shaping parameters.

    Returns:
        Elevation clamped to [-1, 1].
    """
    height, width = noise.shape
    falloff = compute_falloff(width, height, config)
    elevation = noise + falloff - config.offset
    return np.clip(elevation, -1.0, 1.0).astype(np.float32)
