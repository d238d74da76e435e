"""Climate configuration models."""

from pydantic import BaseModel, Field


class RiverConfig(BaseModel):
    """Steepest-descent river parameters."""

    river_count: int = Field(default=0, ge=0, description="River sources to try")
    source_min_elevation: float = Field(
        default=0.4, description="Sources below this elevation are discarded"
    )
    max_length: int = Field(default=100, ge=1, description="Maximum steps per river")
    bed_moisture: float = Field(default=0.5, ge=0, description="Moisture added on the river")
    bank_moisture: float = Field(
        default=0.3, ge=0, description="Peak moisture added around the river"
    )
    bank_radius: int = Field(default=2, ge=1, description="Bank moisture radius in tiles")


class ClimateConfig(BaseModel):
    """Temperature, moisture and biome parameters."""

    base_temperature: float = Field(default=20.0, description="Equator sea-level temperature (C)")
    latitude_range: float = Field(
        default=30.0, ge=0, description="Temperature drop from equator to pole (C)"
    )
    lapse_rate: float = Field(default=6.5, ge=0, description="Temperature drop per km (C)")
    elevation_scale: float = Field(
        default=2000.0, gt=0, description="Meters at elevation 1.0"
    )
    search_radius: int = Field(
        default=20, ge=1, description="Distance to water at which moisture reaches 0"
    )
    highland_elevation: float = Field(
        default=0.5, description="Moisture is reduced above this elevation"
    )
    smoothing_passes: int = Field(default=2, ge=2, description="3x3 moisture averaging passes")
    rivers: RiverConfig = Field(default_factory=RiverConfig)
