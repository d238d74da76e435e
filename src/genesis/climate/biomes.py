"""Biome decision table and classification."""

import numpy as np
from numpy.typing import NDArray

from ..terrain_types import BiomeType

# Below this elevation a cell is open ocean; between it and 0 it is beach
OCEAN_ELEVATION = -0.1
BEACH_ELEVATION = 0.0

# Temperature bands in ascending order: (upper bound, moisture bands).
# Moisture bands are checked in order; a cell matches the first band whose
# threshold its moisture strictly exceeds, with None as the fallback.
BIOME_TABLE: tuple[tuple[float, tuple[tuple[float | None, BiomeType], ...]], ...] = (
    (-5.0, ((None, BiomeType.ICE),)),
    (0.0, ((None, BiomeType.TUNDRA),)),
    (10.0, (
        (0.5, BiomeType.TAIGA),
        (None, BiomeType.TUNDRA),
    )),
    (20.0, (
        (0.6, BiomeType.TEMPERATE_FOREST),
        (0.3, BiomeType.TEMPERATE_GRASSLAND),
        (None, BiomeType.DESERT),
    )),
    (float("inf"), (
        (0.7, BiomeType.TROPICAL_FOREST),
        (0.3, BiomeType.SAVANNA),
        (None, BiomeType.DESERT),
    )),
)

BIOME_ORDER: tuple[BiomeType, ...] = tuple(BiomeType)


def biome_value(biome: BiomeType) -> int:
    """Convert BiomeType to its uint8 storage value."""
    return BIOME_ORDER.index(biome)


def biome_value_to_type(value: int) -> BiomeType:
    """Convert uint8 value back to BiomeType.

    Unknown values are treated as ocean.
    """
    if 0 <= value < len(BIOME_ORDER):
        return BIOME_ORDER[value]
    return BiomeType.OCEAN


def determine_biome(elevation: float, temperature: float, moisture: float) -> BiomeType:
    """Biome for a single cell."""
    if elevation < OCEAN_ELEVATION:
        return BiomeType.OCEAN
    if elevation < BEACH_ELEVATION:
        return BiomeType.BEACH

    for upper, moisture_bands in BIOME_TABLE:
        if temperature < upper:
            for threshold, biome in moisture_bands:
                if threshold is None or moisture > threshold:
                    return biome
    # Unreachable for finite temperatures
    return BiomeType.DESERT


def classify_biomes(
    elevation: NDArray[np.float32],
    temperature: NDArray[np.float32],
    moisture: NDArray[np.float32],
) -> NDArray[np.uint8]:
    """Classify every cell with the biome table.

    Args:
        elevation: Elevation field.
        temperature: Temperature field.
        moisture: Moisture field.

    Returns:
        2D array of biome values as uint8 (see ``biome_value``).
    """
    biomes = np.full(elevation.shape, biome_value(BiomeType.DESERT), dtype=np.uint8)
    assigned = np.zeros(elevation.shape, dtype=bool)

    def assign(mask: NDArray[np.bool_], biome: BiomeType) -> None:
        mask = mask & ~assigned
        biomes[mask] = biome_value(biome)
        assigned[:] |= mask

    assign(elevation < OCEAN_ELEVATION, BiomeType.OCEAN)
    assign(elevation < BEACH_ELEVATION, BiomeType.BEACH)

    for upper, moisture_bands in BIOME_TABLE:
        in_band = temperature < upper
        for threshold, biome in moisture_bands:
            if threshold is None:
                assign(in_band, biome)
            else:
                assign(in_band & (moisture > threshold), biome)

    return biomes
