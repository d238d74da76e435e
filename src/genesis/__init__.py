"""Procedural island worlds with erosion, climate and settlements."""

from .civilization import CitySnapshot, CivilizationConfig, CivilizationSimulator, RoadSnapshot
from .climate import ClimateConfig, ClimateResult, generate_climate
from .config import GenesisConfig, WorldConfig, find_config, list_configs, load_config
from .exceptions import GenesisError, InvalidDimensionsError, StageNotReadyError
from .pipeline import WorldPipeline
from .terrain import (
    ElevationField,
    ErosionConfig,
    ErosionSimulator,
    IslandMode,
    TerrainConfig,
    generate_elevation,
)
from .terrain_types import BiomeType, TerrainType
from .types import Direction, Position

__all__ = [
    # Types
    "BiomeType",
    "Direction",
    "Position",
    "TerrainType",
    # Config
    "ClimateConfig",
    "CivilizationConfig",
    "ErosionConfig",
    "GenesisConfig",
    "TerrainConfig",
    "WorldConfig",
    "find_config",
    "list_configs",
    "load_config",
    # Stages
    "ClimateResult",
    "CivilizationSimulator",
    "ElevationField",
    "ErosionSimulator",
    "IslandMode",
    "generate_climate",
    "generate_elevation",
    # Pipeline
    "WorldPipeline",
    "CitySnapshot",
    "RoadSnapshot",
    # Exceptions
    "GenesisError",
    "InvalidDimensionsError",
    "StageNotReadyError",
]
