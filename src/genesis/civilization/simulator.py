"""Civilization simulation: city placement, roads, growth and territory."""

import math
from dataclasses import dataclass

import numpy as np
import structlog
from numpy.typing import NDArray

from ..climate.model import ClimateResult
from ..exceptions import StageNotReadyError, check_dimensions
from ..terrain.elevation import ElevationField
from ..types import Position
from .config import CivilizationConfig
from .names import NameGenerator
from .pathfinding import compute_movement_costs, find_path, path_length
from .state import City, CitySnapshot, Road, RoadSnapshot
from .suitability import site_suitability

logger = structlog.get_logger()

UNCLAIMED = -1


@dataclass
class YearResult:
    """Outcome of one simulated year."""

    year: int
    total_population: int
    city_count: int
    founded_city: int | None = None


class CivilizationSimulator:
    """
    Evolves settlements on a finished world.

    Cities and roads are append-only lists; a city's identity is its index.
    Each year runs growth, territory, development and founding in that order.
    All randomness (city names) comes from a generator seeded at
    construction and reseeded by ``initialize``.
    """

    def __init__(
        self,
        width: int,
        height: int,
        seed: int = 0,
        config: CivilizationConfig | None = None,
    ):
        check_dimensions(width, height)
        self.width = width
        self.height = height
        self.seed = seed
        self.config = config or CivilizationConfig()
        self._reset()

    def _reset(self) -> None:
        self._cities: list[City] = []
        self._roads: list[Road] = []
        self._year = 0
        self._initialized = False
        self._rng = np.random.default_rng(self.seed)
        self._names = NameGenerator(self._rng)
        self.territory = np.full((self.height, self.width), UNCLAIMED, dtype=np.int32)
        self.development = np.zeros((self.height, self.width), dtype=np.float32)
        self.movement_cost = np.ones((self.height, self.width), dtype=np.float32)

    # --- Lifecycle ---

    def initialize(self, field: ElevationField, climate: ClimateResult) -> None:
        """Start a fresh civilization on the given world.

        Discards any previous cities, roads, territory and development,
        then computes movement costs, places the initial cities and
        connects them.

        Raises:
            ValueError: If the world does not match the simulator's size.
        """
        self._check_world(field, climate)
        self._reset()

        logger.info(
            "civilization_initializing", width=self.width, height=self.height, seed=self.seed
        )

        self.movement_cost = compute_movement_costs(
            field.heights, climate.biomes, self.config.movement
        )
        self.place_initial_cities(field, climate)
        self.connect_cities()
        self._initialized = True

        logger.info(
            "civilization_initialized",
            cities=len(self._cities),
            roads=len(self._roads),
            population=self.total_population,
        )

    def simulate(self, field: ElevationField, climate: ClimateResult) -> YearResult:
        """Advance the civilization by one year.

        Raises:
            StageNotReadyError: If ``initialize`` has not run.
        """
        if not self._initialized:
            raise StageNotReadyError("Civilization must be initialized before simulating")
        self._check_world(field, climate)

        self._year += 1

        for city in self._cities:
            self._grow_city(city, climate)

        for index in range(len(self._cities)):
            self.expand_territory(index, field)

        self.update_development()

        founded = None
        placement = self.config.placement
        if (
            self._year % placement.founding_interval == 0
            and len(self._cities) < placement.max_cities
        ):
            founded = self._found_city(field, climate)

        result = YearResult(
            year=self._year,
            total_population=self.total_population,
            city_count=len(self._cities),
            founded_city=founded,
        )
        logger.debug(
            "year_simulated",
            year=result.year,
            population=result.total_population,
            cities=result.city_count,
        )
        return result

    def _check_world(self, field: ElevationField, climate: ClimateResult) -> None:
        expected = (self.height, self.width)
        if field.heights.shape != expected or climate.biomes.shape != expected:
            raise ValueError(
                f"World shape {field.heights.shape} / climate shape "
                f"{climate.biomes.shape} doesn't match civilization {expected}"
            )

    # --- Placement ---

    def can_place_city(self, x: int, y: int, min_distance: float) -> bool:
        """Check (x, y) is at least ``min_distance`` from every city."""
        position = Position(x=x, y=y)
        return all(city.position.distance_to(position) >= min_distance for city in self._cities)

    def place_initial_cities(
        self,
        field: ElevationField,
        climate: ClimateResult,
        num_cities: int | None = None,
    ) -> list[int]:
        """Found the starting cities on the best-scoring sites.

        Sites are sampled on a grid inside the map margin, ranked by score
        (ties keep raster order) and accepted greedily while they respect
        the minimum spacing. The first city placed is the capital.

        Returns:
            Indices of the cities placed.
        """
        placement = self.config.placement
        if num_cities is None:
            num_cities = placement.initial_cities

        sites: list[tuple[float, int, int]] = []
        for y in range(placement.margin, self.height - placement.margin, placement.initial_step):
            for x in range(placement.margin, self.width - placement.margin, placement.initial_step):
                score = site_suitability(x, y, field.heights, climate.temperature, climate.biomes)
                if score > 0:
                    sites.append((score, x, y))

        sites.sort(key=lambda site: -site[0])
        logger.debug("candidate_sites", count=len(sites))

        placed: list[int] = []
        for score, x, y in sites:
            if len(placed) >= num_cities:
                break
            if not self.can_place_city(x, y, placement.initial_min_distance):
                continue

            city = self._new_city(x, y)
            if not placed:
                city.population = placement.capital_population
                city.resources = placement.capital_resources
                city.name = placement.capital_prefix + city.name

            index = self._add_city(city, field)
            placed.append(index)
            logger.info(
                "city_founded",
                name=city.name,
                x=x,
                y=y,
                suitability=round(score, 2),
                year=self._year,
            )

        if len(placed) < num_cities:
            logger.warning("few_city_sites", placed=len(placed), requested=num_cities)
        return placed

    def _new_city(self, x: int, y: int) -> City:
        growth = self.config.growth
        return City(
            position=Position(x=x, y=y),
            name=self._names.generate(),
            founded_year=self._year,
            population=growth.city_population,
            resources=growth.city_resources,
            growth_rate=growth.city_growth_rate,
        )

    def _add_city(self, city: City, field: ElevationField) -> int:
        self._cities.append(city)
        index = len(self._cities) - 1
        self.expand_territory(index, field)
        return index

    def _found_city(self, field: ElevationField, climate: ClimateResult) -> int | None:
        """Try to found one city on the best unclaimed site."""
        placement = self.config.placement
        best_score = 0.0
        best: tuple[int, int] | None = None

        for y in range(placement.margin, self.height - placement.margin, placement.founding_step):
            for x in range(placement.margin, self.width - placement.margin, placement.founding_step):
                if self.territory[y, x] != UNCLAIMED:
                    continue
                if not self.can_place_city(x, y, placement.founding_min_distance):
                    continue
                score = site_suitability(x, y, field.heights, climate.temperature, climate.biomes)
                if score > best_score:
                    best_score = score
                    best = (x, y)

        if best is None or best_score <= placement.founding_min_score:
            logger.debug("no_site_for_new_city", year=self._year, best_score=round(best_score, 2))
            return None

        city = self._new_city(*best)
        index = self._add_city(city, field)
        logger.info(
            "city_founded",
            name=city.name,
            x=city.x,
            y=city.y,
            suitability=round(best_score, 2),
            year=self._year,
        )
        self.connect_cities()
        return index

    # --- Roads ---

    def connect_cities(self) -> int:
        """Route roads from every city to its nearest unconnected neighbors.

        Pairs that are already connected are skipped and unreachable pairs
        are silently left unconnected.

        Returns:
            Number of roads built.
        """
        built = 0
        neighbors = min(self.config.max_road_neighbors, len(self._cities) - 1)

        for i, city in enumerate(self._cities):
            ranked = sorted(
                (city.position.distance_to(other.position), j)
                for j, other in enumerate(self._cities)
                if j != i
            )
            for _, j in ranked[:neighbors]:
                if city.is_connected_to(j):
                    continue

                other = self._cities[j]
                path = find_path(
                    self.movement_cost,
                    city.position.as_tuple(),
                    other.position.as_tuple(),
                    self.config.movement.impassable_above,
                )
                if not path:
                    logger.debug("road_unreachable", start=city.name, end=other.name)
                    continue

                self._roads.append(Road(start=i, end=j, path=tuple(path)))
                city.connections.append(j)
                other.connections.append(i)
                built += 1
                logger.debug(
                    "road_built",
                    start=city.name,
                    end=other.name,
                    length=round(path_length(path), 1),
                )

        if built:
            logger.info("road_network_extended", built=built, total=len(self._roads))
        return built

    # --- Yearly update ---

    def _grow_city(self, city: City, climate: ClimateResult) -> None:
        growth = self.config.growth
        modifier = 1.0

        biome = climate.biome_at(city.x, city.y)
        if biome.is_fertile:
            modifier *= growth.fertile_modifier
        elif biome.is_harsh:
            modifier *= growth.harsh_modifier
        modifier *= 1.0 + len(city.connections) * growth.connection_bonus

        grown = int(city.population * city.growth_rate * modifier)
        city.population = max(city.population, grown)
        city.resources += city.population * growth.resource_rate

        for threshold, rate in growth.rate_tiers:
            if city.population > threshold:
                city.growth_rate = rate

    def expand_territory(self, index: int, field: ElevationField) -> None:
        """Claim unclaimed land within the city's territory radius.

        Only land above elevation 0 is claimed, and a claimed cell never
        changes owner.
        """
        if not 0 <= index < len(self._cities):
            return

        city = self._cities[index]
        dev = self.config.development
        radius = dev.territory_base_radius + city.population // dev.territory_population_step

        y0, y1, x0, x1, dist = self._window(city, radius)
        window = self.territory[y0:y1, x0:x1]
        claim = (
            (dist <= radius)
            & (field.heights[y0:y1, x0:x1] > 0.0)
            & (window == UNCLAIMED)
        )
        window[claim] = index

    def update_development(self) -> None:
        """Decay development, then add city and road influence."""
        dev = self.config.development
        self.development *= np.float32(dev.decay)

        boost = np.zeros((self.height, self.width), dtype=np.float64)

        for city in self._cities:
            radius = dev.base_radius + city.population / dev.radius_population_step
            strength = min(1.0, city.population / dev.full_strength_population)

            y0, y1, x0, x1, dist = self._window(city, int(radius))
            # Population is at least 1, so radius is always positive
            influence = np.where(dist <= radius, strength * (1.0 - dist / radius), 0.0)
            boost[y0:y1, x0:x1] += influence * dev.city_rate

        for road in self._roads:
            xs, ys = zip(*road.path)
            np.add.at(boost, (np.array(ys), np.array(xs)), dev.road_rate)

        self.development = np.minimum(1.0, self.development + boost).astype(np.float32)

    def _window(
        self, city: City, radius: int
    ) -> tuple[int, int, int, int, NDArray[np.float64]]:
        """Clipped square window around a city and the distance of each cell."""
        y0, y1 = max(0, city.y - radius), min(self.height, city.y + radius + 1)
        x0, x1 = max(0, city.x - radius), min(self.width, city.x + radius + 1)
        ys = np.arange(y0, y1, dtype=np.float64)[:, np.newaxis] - city.y
        xs = np.arange(x0, x1, dtype=np.float64)[np.newaxis, :] - city.x
        return y0, y1, x0, x1, np.sqrt(xs * xs + ys * ys)

    # --- Queries ---

    @property
    def initialized(self) -> bool:
        return self._initialized

    @property
    def year(self) -> int:
        return self._year

    @property
    def cities(self) -> list[CitySnapshot]:
        return [CitySnapshot.from_city(i, city) for i, city in enumerate(self._cities)]

    @property
    def roads(self) -> list[RoadSnapshot]:
        return [RoadSnapshot.from_road(i, road) for i, road in enumerate(self._roads)]

    @property
    def city_count(self) -> int:
        return len(self._cities)

    @property
    def total_population(self) -> int:
        return sum(city.population for city in self._cities)

    def territory_owner(self, x: int, y: int) -> int:
        """Index of the city owning (x, y), or -1."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            return UNCLAIMED
        return int(self.territory[y, x])

    def development_at(self, x: int, y: int) -> float:
        """Development level at (x, y), or 0.0 outside the map."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            return 0.0
        return float(self.development[y, x])
