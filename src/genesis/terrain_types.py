"""Terrain and biome types and their properties."""

from enum import Enum


class TerrainType(str, Enum):
    """Elevation-derived terrain classes, ordered from lowest to highest."""

    DEEP_WATER = "deep_water"
    SHALLOW_WATER = "shallow_water"
    SAND = "sand"
    GRASS = "grass"
    FOREST = "forest"
    ROCK = "rock"
    SNOW = "snow"

    @property
    def is_water(self) -> bool:
        """Whether this terrain is submerged."""
        return self in _WATER_TERRAIN


class BiomeType(str, Enum):
    """Climate-derived biome classes."""

    OCEAN = "ocean"
    ICE = "ice"
    TUNDRA = "tundra"
    TAIGA = "taiga"
    TEMPERATE_FOREST = "temperate_forest"
    TEMPERATE_GRASSLAND = "temperate_grassland"
    DESERT = "desert"
    SAVANNA = "savanna"
    TROPICAL_FOREST = "tropical_forest"
    BEACH = "beach"

    @property
    def label(self) -> str:
        """Human readable name, e.g. "Temperate Forest"."""
        return self.value.replace("_", " ").title()

    @property
    def is_harsh(self) -> bool:
        """Whether settlers struggle here (cold or arid)."""
        return self in _HARSH_BIOMES

    @property
    def is_fertile(self) -> bool:
        """Whether settlements grow best here."""
        return self in _FERTILE_BIOMES


_WATER_TERRAIN = frozenset({
    TerrainType.DEEP_WATER,
    TerrainType.SHALLOW_WATER,
})

_HARSH_BIOMES = frozenset({
    BiomeType.DESERT,
    BiomeType.TUNDRA,
    BiomeType.ICE,
})

_FERTILE_BIOMES = frozenset({
    BiomeType.TEMPERATE_GRASSLAND,
    BiomeType.TEMPERATE_FOREST,
})
