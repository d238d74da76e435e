"""Civilization simulation configuration."""

from pydantic import BaseModel, Field


class MovementCostConfig(BaseModel):
    """Road-building cost per cell."""

    water_cost: float = Field(default=999.0, gt=0, description="Cost of a water cell")
    base_cost: float = Field(default=1.0, gt=0)
    elevation_factor: float = Field(default=3.0, ge=0, description="Extra cost per unit height")
    harsh_penalty: float = Field(default=2.0, ge=0, description="Desert, ice and tundra")
    forest_penalty: float = Field(default=1.5, ge=0, description="Forests and taiga")
    open_penalty: float = Field(default=0.5, ge=0, description="Grassland and savanna")
    impassable_above: float = Field(
        default=100.0, gt=0, description="Cells costing more than this are never entered"
    )


class PlacementConfig(BaseModel):
    """Initial city placement and later founding."""

    initial_cities: int = Field(default=5, ge=0)
    margin: int = Field(default=10, ge=0, description="Cities stay this far from the map edge")
    initial_step: int = Field(default=2, ge=1, description="Sampling stride for initial sites")
    initial_min_distance: float = Field(default=20.0, ge=0)
    founding_interval: int = Field(default=50, ge=1, description="Years between founding attempts")
    founding_step: int = Field(default=5, ge=1, description="Sampling stride for new sites")
    founding_min_distance: float = Field(default=15.0, ge=0)
    founding_min_score: float = Field(
        default=20.0, description="A site must score strictly above this to be founded"
    )
    max_cities: int = Field(default=20, ge=0, description="No founding at or above this count")
    capital_population: int = Field(default=500, ge=1)
    capital_resources: float = Field(default=200.0, ge=0)
    capital_prefix: str = "Capital "


class GrowthConfig(BaseModel):
    """Yearly population growth."""

    city_population: int = Field(default=100, ge=1, description="Population of a new city")
    city_resources: float = Field(default=50.0, ge=0)
    city_growth_rate: float = Field(default=1.02, gt=0)
    fertile_modifier: float = Field(default=1.2, gt=0)
    harsh_modifier: float = Field(default=0.7, gt=0)
    connection_bonus: float = Field(default=0.1, ge=0, description="Growth per road connection")
    resource_rate: float = Field(default=0.01, ge=0, description="Resources per inhabitant")
    # (population above, growth rate); later tiers override earlier ones
    rate_tiers: list[tuple[int, float]] = Field(
        default_factory=lambda: [(1000, 1.015), (5000, 1.01), (10000, 1.005)]
    )


class DevelopmentConfig(BaseModel):
    """Territory radius and development spread."""

    territory_base_radius: int = Field(default=5, ge=0)
    territory_population_step: int = Field(
        default=1000, ge=1, description="Territory radius grows by 1 per this many people"
    )
    decay: float = Field(default=0.99, ge=0, le=1, description="Yearly development retention")
    base_radius: float = Field(default=3.0, ge=0)
    radius_population_step: float = Field(default=2000.0, gt=0)
    full_strength_population: float = Field(default=10000.0, gt=0)
    city_rate: float = Field(default=0.1, ge=0)
    road_rate: float = Field(default=0.05, ge=0)


class CivilizationConfig(BaseModel):
    """Complete civilization configuration."""

    movement: MovementCostConfig = Field(default_factory=MovementCostConfig)
    placement: PlacementConfig = Field(default_factory=PlacementConfig)
    growth: GrowthConfig = Field(default_factory=GrowthConfig)
    development: DevelopmentConfig = Field(default_factory=DevelopmentConfig)
    max_road_neighbors: int = Field(
        default=3, ge=0, description="Each city routes to this many nearest cities"
    )
