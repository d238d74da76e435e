"""Climate generation orchestration and result container."""

import logging

import numpy as np
from numpy.typing import NDArray

from ..terrain.elevation import ElevationField
from ..terrain_types import BiomeType
from .biomes import biome_value_to_type, classify_biomes
from .config import ClimateConfig
from .fields import carve_rivers, compute_moisture, compute_temperature, smooth_moisture

logger = logging.getLogger(__name__)


class ClimateResult:
    """Temperature, moisture and biome grids for one climate pass."""

    def __init__(
        self,
        temperature: NDArray[np.float32],
        moisture: NDArray[np.float32],
        biomes: NDArray[np.uint8],
        rivers: list[list[tuple[int, int]]] | None = None,
    ):
        self.temperature = temperature
        self.moisture = moisture
        self.biomes = biomes
        self.rivers = rivers or []

    @property
    def width(self) -> int:
        return self.biomes.shape[1]

    @property
    def height(self) -> int:
        return self.biomes.shape[0]

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def temperature_at(self, x: int, y: int) -> float:
        """Temperature at (x, y), or 0.0 outside the map."""
        if not self.in_bounds(x, y):
            return 0.0
        return float(self.temperature[y, x])

    def moisture_at(self, x: int, y: int) -> float:
        """Moisture at (x, y), or 0.0 outside the map."""
        if not self.in_bounds(x, y):
            return 0.0
        return float(self.moisture[y, x])

    def biome_at(self, x: int, y: int) -> BiomeType:
        """Biome at (x, y), or ocean outside the map."""
        if not self.in_bounds(x, y):
            return BiomeType.OCEAN
        return biome_value_to_type(int(self.biomes[y, x]))


def generate_climate(
    field: ElevationField,
    seed: int,
    config: ClimateConfig | None = None,
) -> ClimateResult:
    """Derive temperature, moisture and biomes from an elevation field.

    Args:
        field: Elevation field (read only).
        seed: Seed for river source selection.
        config: Climate parameters.

    Returns:
        ClimateResult with all grids.
    """
    config = config or ClimateConfig()
    elevation = field.heights

    logger.info(f"Generating climate for {field.width}x{field.height} map")

    temperature = compute_temperature(elevation, config)
    moisture = compute_moisture(elevation, config)
    moisture = smooth_moisture(moisture, config.smoothing_passes)

    rivers: list[list[tuple[int, int]]] = []
    if config.rivers.river_count > 0:
        rng = np.random.default_rng(seed)
        moisture, rivers = carve_rivers(elevation, moisture, rng, config.rivers)

    biomes = classify_biomes(elevation, temperature, moisture)

    logger.info(
        f"Temperature range: [{temperature.min():.1f}, {temperature.max():.1f}] C, "
        f"mean moisture: {moisture.mean():.2f}"
    )
    _log_biome_stats(biomes)

    return ClimateResult(temperature, moisture, biomes, rivers)


def _log_biome_stats(biomes: NDArray[np.uint8]) -> None:
    """Log biome classification statistics."""
    total = biomes.size
    counts = np.bincount(biomes.ravel(), minlength=len(BiomeType))

    logger.debug(f"Biome stats ({total:,} tiles):")
    for value, count in enumerate(counts):
        if count:
            logger.debug(
                f"  {biome_value_to_type(value).label}: {count:,} "
                f"({count / total * 100:.1f}%)"
            )
