"""Terrain and erosion configuration models."""

from enum import Enum

from pydantic import BaseModel, Field, model_validator


class IslandMode(str, Enum):
    """Shape of the land mask applied over the noise field."""

    SINGLE = "single"
    ARCHIPELAGO = "archipelago"


class NoiseConfig(BaseModel):
    """Multi-octave value noise parameters."""

    frequency: float = Field(default=0.005, gt=0, description="Base frequency per tile")
    octaves: int = Field(default=6, ge=1, description="Number of octaves")
    lacunarity: float = Field(default=2.0, gt=0, description="Frequency multiplier per octave")
    persistence: float = Field(default=0.5, gt=0, description="Amplitude multiplier per octave")


class IslandCenter(BaseModel, frozen=True):
    """One radial land center of the archipelago mask.

    Coordinates are in normalized map space [-1, 1].
    """

    x: float
    y: float
    spread: float = Field(gt=0, description="Distance multiplier; larger = smaller island")
    weight: float = Field(gt=0, description="Peak strength of this island")


def _default_centers() -> list[IslandCenter]:
    return [
        IslandCenter(x=0.3, y=0.2, spread=1.2, weight=0.9),
        IslandCenter(x=-0.4, y=-0.3, spread=1.5, weight=0.7),
        IslandCenter(x=0.1, y=0.5, spread=1.8, weight=0.6),
        IslandCenter(x=-0.6, y=0.4, spread=2.5, weight=0.5),
        IslandCenter(x=0.7, y=-0.5, spread=3.0, weight=0.4),
    ]


class IslandConfig(BaseModel):
    """Island shaping parameters."""

    mode: IslandMode = Field(default=IslandMode.SINGLE, description="Mask shape")
    falloff_a: float = Field(default=3.0, gt=0, description="Falloff curve exponent")
    falloff_b: float = Field(default=2.2, gt=0, description="Falloff curve steepness")
    offset: float = Field(
        default=0.5, description="Subtracted after adding the falloff to the noise"
    )
    centers: list[IslandCenter] = Field(
        default_factory=_default_centers, description="Archipelago island centers"
    )


class TerrainThresholds(BaseModel):
    """Upper elevation bounds of each terrain band.

    A cell belongs to the first band whose bound it is below; anything at or
    above ``rock`` is snow.
    """

    deep_water: float = -0.5
    shallow_water: float = -0.1
    sand: float = 0.0
    grass: float = 0.15
    forest: float = 0.35
    rock: float = 0.6

    @model_validator(mode="after")
    def _check_ascending(self) -> "TerrainThresholds":
        bounds = self.bounds()
        if any(lo >= hi for lo, hi in zip(bounds, bounds[1:])):
            raise ValueError(f"Terrain thresholds must be strictly ascending: {bounds}")
        return self

    def bounds(self) -> list[float]:
        """Band bounds in ascending order."""
        return [
            self.deep_water,
            self.shallow_water,
            self.sand,
            self.grass,
            self.forest,
            self.rock,
        ]


class TerrainConfig(BaseModel):
    """Complete terrain generation configuration."""

    noise: NoiseConfig = Field(default_factory=NoiseConfig)
    island: IslandConfig = Field(default_factory=IslandConfig)
    thresholds: TerrainThresholds = Field(default_factory=TerrainThresholds)


class ErosionConfig(BaseModel):
    """Droplet erosion parameters."""

    num_particles: int = Field(default=100_000, ge=0, description="Droplets per pass")
    inertia: float = Field(
        default=0.05, ge=0, le=1, description="Share of previous direction kept per step"
    )
    capacity: float = Field(default=4.0, gt=0, description="Sediment capacity factor")
    deposition: float = Field(default=0.3, ge=0, le=1, description="Share of excess deposited")
    erosion: float = Field(default=0.3, ge=0, le=1, description="Share of free capacity eroded")
    evaporation: float = Field(default=0.01, ge=0, lt=1, description="Water lost per step")
    gravity: float = Field(default=4.0, ge=0, description="Acceleration on descent")
    min_slope: float = Field(default=0.01, ge=0, description="Capacity floor on flat ground")
    max_lifetime: int = Field(default=30, ge=1, description="Maximum steps per droplet")
    start_water: float = Field(default=1.0, gt=0)
    start_velocity: float = Field(default=1.0, ge=0)
    min_water: float = Field(default=0.001, ge=0, description="Droplet dies below this")
    brush_radius: int = Field(default=1, ge=1, description="Erosion brush radius in tiles")
    start_min_elevation: float = Field(
        default=-0.1, description="Droplets starting below this are skipped"
    )
