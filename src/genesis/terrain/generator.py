"""Main terrain generation orchestration."""

import logging

import numpy as np

from ..exceptions import check_dimensions
from .classification import TERRAIN_ORDER, terrain_value_to_type
from .config import TerrainConfig
from .elevation import ElevationField
from .island import apply_island_mask
from .noise import octave_noise

logger = logging.getLogger(__name__)


def generate_elevation(
    width: int,
    height: int,
    seed: int,
    config: TerrainConfig | None = None,
) -> ElevationField:
    """Generate an island heightmap from configuration.

    Args:
        width: Map width in tiles.
        height: Map height in tiles.
        seed: Noise seed.
        config: Terrain generation configuration.

    Returns:
        ElevationField with heights and terrain classification.

    Raises:
        InvalidDimensionsError: If width or height is not positive.
    """
    check_dimensions(width, height)
    config = config or TerrainConfig()

    logger.info(
        f"Generating terrain {width}x{height} with seed {seed} "
        f"({config.island.mode.value} island)"
    )

    # Stage A: Base noise
    noise = octave_noise(width, height, seed, config.noise)
    logger.debug(f"Noise range: [{noise.min():.3f}, {noise.max():.3f}]")

    # Stage B: Island shaping
    heights = apply_island_mask(noise, config.island)
    field = ElevationField(heights, config.thresholds)

    logger.info(
        f"Elevation range: [{heights.min():.3f}, {heights.max():.3f}], "
        f"land fraction: {field.land_fraction():.2%}"
    )
    _log_terrain_stats(field)

    return field


def _log_terrain_stats(field: ElevationField) -> None:
    """Log terrain classification statistics."""
    total = field.terrain.size
    counts = np.bincount(field.terrain.ravel(), minlength=len(TERRAIN_ORDER))

    logger.debug(f"Terrain stats ({total:,} tiles):")
    for value, count in enumerate(counts):
        if count:
            name = terrain_value_to_type(value).value
            logger.debug(f"  {name}: {count:,} ({count / total * 100:.1f}%)")
