"""Cities, roads and their read-only snapshots."""

from dataclasses import dataclass, field

from pydantic import BaseModel

from ..types import Position


@dataclass
class City:
    """A settlement. Identified by its index in the simulator's city list."""

    position: Position
    name: str
    founded_year: int
    population: int = 100
    resources: float = 50.0
    growth_rate: float = 1.02
    connections: list[int] = field(default_factory=list)

    @property
    def x(self) -> int:
        return self.position.x

    @property
    def y(self) -> int:
        return self.position.y

    def is_connected_to(self, index: int) -> bool:
        return index in self.connections


@dataclass(frozen=True)
class Road:
    """A routed road between two cities. Never changes once built."""

    start: int
    end: int
    path: tuple[tuple[int, int], ...]
    usage: float = 0.0


class CitySnapshot(BaseModel, frozen=True):
    """Immutable view of a city for renderers and other consumers."""

    index: int
    x: int
    y: int
    name: str
    population: int
    founded_year: int
    resources: float
    growth_rate: float
    connections: tuple[int, ...]

    @classmethod
    def from_city(cls, index: int, city: City) -> "CitySnapshot":
        return cls(
            index=index,
            x=city.x,
            y=city.y,
            name=city.name,
            population=city.population,
            founded_year=city.founded_year,
            resources=city.resources,
            growth_rate=city.growth_rate,
            connections=tuple(city.connections),
        )


class RoadSnapshot(BaseModel, frozen=True):
    """Immutable view of a road."""

    index: int
    start: int
    end: int
    path: tuple[tuple[int, int], ...]
    usage: float

    @classmethod
    def from_road(cls, index: int, road: Road) -> "RoadSnapshot":
        return cls(
            index=index,
            start=road.start,
            end=road.end,
            path=road.path,
            usage=road.usage,
        )
