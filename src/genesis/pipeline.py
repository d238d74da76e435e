"""World pipeline: owns the shared grids and runs the stages in order."""

import structlog

from .civilization.simulator import UNCLAIMED, CivilizationSimulator, YearResult
from .civilization.state import CitySnapshot, RoadSnapshot
from .climate.model import ClimateResult, generate_climate
from .config import GenesisConfig
from .exceptions import StageNotReadyError
from .terrain.config import ErosionConfig, IslandMode
from .terrain.elevation import OUT_OF_BOUNDS_ELEVATION, ElevationField
from .terrain.erosion import ErosionSimulator
from .terrain.generator import generate_elevation
from .terrain_types import BiomeType, TerrainType

logger = structlog.get_logger()


class WorldPipeline:
    """
    Terrain -> erosion -> climate -> civilization, driven by triggers.

    Triggers return True when the stage ran and False (with a warning) when
    the stage it depends on has not run yet. Regenerating terrain discards
    climate and civilization. Queries never raise: anything out of range or
    not generated yet returns a sentinel.
    """

    def __init__(self, config: GenesisConfig | None = None):
        self.config = config or GenesisConfig()
        self.seed = self.config.world.seed
        self.field: ElevationField | None = None
        self.climate: ClimateResult | None = None
        self.civilization: CivilizationSimulator | None = None
        self._erosion: ErosionSimulator | None = None

    # --- Triggers ---

    def generate_terrain(
        self,
        seed: int | None = None,
        island_mode: IslandMode | str | None = None,
    ) -> bool:
        """Generate a new heightmap, discarding climate and civilization.

        Args:
            seed: Terrain seed; defaults to the current seed.
            island_mode: Island shape; defaults to the configured one.
        """
        if seed is not None:
            self.seed = seed

        terrain_config = self.config.terrain
        if island_mode is not None:
            island = terrain_config.island.model_copy(update={"mode": IslandMode(island_mode)})
            terrain_config = terrain_config.model_copy(update={"island": island})

        world = self.config.world
        self.field = generate_elevation(world.width, world.height, self.seed, terrain_config)
        self._erosion = ErosionSimulator(self.seed, self.config.erosion)
        self.climate = None
        self.civilization = None

        logger.info(
            "terrain_generated",
            seed=self.seed,
            island_mode=terrain_config.island.mode.value,
            land_fraction=round(self.field.land_fraction(), 3),
        )
        return True

    def apply_erosion(
        self,
        particle_count: int | None = None,
        params: ErosionConfig | None = None,
    ) -> bool:
        """Erode the current terrain in place."""
        if self.field is None or self._erosion is None:
            logger.warning("erosion_skipped", reason="no terrain")
            return False

        self._erosion.erode(self.field, particle_count, params)
        logger.info("erosion_applied", land_fraction=round(self.field.land_fraction(), 3))
        return True

    def generate_climate(self) -> bool:
        """Derive temperature, moisture and biomes from the current terrain."""
        if self.field is None:
            logger.warning("climate_skipped", reason="no terrain")
            return False

        self.climate = generate_climate(self.field, self.seed, self.config.climate)
        logger.info("climate_generated", rivers=len(self.climate.rivers))
        return True

    def initialize_civilization(self) -> bool:
        """Place the initial cities and roads, replacing any civilization."""
        if self.field is None or self.climate is None:
            logger.warning("civilization_skipped", reason="no climate")
            return False

        world = self.config.world
        self.civilization = CivilizationSimulator(
            world.width, world.height, self.seed, self.config.civilization
        )
        self.civilization.initialize(self.field, self.climate)
        return True

    def advance_year(self) -> bool:
        """Simulate one year of the civilization."""
        return self._advance() is not None

    def advance_years(self, years: int) -> bool:
        """Simulate several years; stops early if the civilization is missing."""
        for _ in range(years):
            if self._advance() is None:
                return False
        return True

    def _advance(self) -> YearResult | None:
        if self.field is None or self.climate is None or self.civilization is None:
            logger.warning("year_skipped", reason="no civilization")
            return None

        try:
            result = self.civilization.simulate(self.field, self.climate)
        except StageNotReadyError as e:
            logger.warning("year_skipped", reason=str(e))
            return None

        if result.founded_city is not None:
            logger.info("settlement_expanded", year=result.year, cities=result.city_count)
        return result

    # --- Readiness ---

    @property
    def has_terrain(self) -> bool:
        return self.field is not None

    @property
    def has_climate(self) -> bool:
        return self.climate is not None

    @property
    def has_civilization(self) -> bool:
        return self.civilization is not None and self.civilization.initialized

    # --- Queries ---

    def elevation_at(self, x: int, y: int) -> float:
        if self.field is None:
            return OUT_OF_BOUNDS_ELEVATION
        return self.field.get(x, y)

    def terrain_at(self, x: int, y: int) -> TerrainType:
        if self.field is None:
            return TerrainType.DEEP_WATER
        return self.field.terrain_at(x, y)

    def temperature_at(self, x: int, y: int) -> float:
        if self.climate is None:
            return 0.0
        return self.climate.temperature_at(x, y)

    def moisture_at(self, x: int, y: int) -> float:
        if self.climate is None:
            return 0.0
        return self.climate.moisture_at(x, y)

    def biome_at(self, x: int, y: int) -> BiomeType:
        if self.climate is None:
            return BiomeType.OCEAN
        return self.climate.biome_at(x, y)

    def territory_owner(self, x: int, y: int) -> int:
        if self.civilization is None:
            return UNCLAIMED
        return self.civilization.territory_owner(x, y)

    def development_at(self, x: int, y: int) -> float:
        if self.civilization is None:
            return 0.0
        return self.civilization.development_at(x, y)

    def cities(self) -> list[CitySnapshot]:
        if self.civilization is None:
            return []
        return self.civilization.cities

    def roads(self) -> list[RoadSnapshot]:
        if self.civilization is None:
            return []
        return self.civilization.roads

    @property
    def total_population(self) -> int:
        if self.civilization is None:
            return 0
        return self.civilization.total_population

    @property
    def year(self) -> int:
        if self.civilization is None:
            return 0
        return self.civilization.year
