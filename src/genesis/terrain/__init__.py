"""Procedural terrain generation package.

This package implements noise-based island heightmaps, their terrain
classification, and droplet-based hydraulic erosion.
"""

from .config import (
    ErosionConfig,
    IslandCenter,
    IslandConfig,
    IslandMode,
    NoiseConfig,
    TerrainConfig,
    TerrainThresholds,
)
from .elevation import ElevationField
from .erosion import ErosionSimulator
from .generator import generate_elevation
from .validation import ValidationResult, validate_terrain

__all__ = [
    "ElevationField",
    "ErosionConfig",
    "ErosionSimulator",
    "IslandCenter",
    "IslandConfig",
    "IslandMode",
    "NoiseConfig",
    "TerrainConfig",
    "TerrainThresholds",
    "ValidationResult",
    "generate_elevation",
    "validate_terrain",
]
