"""Climate package: temperature, moisture, rivers and biomes."""

from .biomes import classify_biomes, determine_biome
from .config import ClimateConfig, RiverConfig
from .model import ClimateResult, generate_climate

__all__ = [
    "ClimateConfig",
    "ClimateResult",
    "RiverConfig",
    "classify_biomes",
    "determine_biome",
    "generate_climate",
]
