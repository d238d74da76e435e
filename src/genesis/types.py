"""Core grid types shared by the pipeline stages."""

from enum import IntEnum

from pydantic import BaseModel


class Direction(IntEnum):
    """8-direction grid step."""

    NORTH = 1
    NORTHEAST = 2
    EAST = 3
    SOUTHEAST = 4
    SOUTH = 5
    SOUTHWEST = 6
    WEST = 7
    NORTHWEST = 8

    @property
    def is_diagonal(self) -> bool:
        """Whether the step changes both coordinates."""
        dx, dy = DIRECTION_DELTAS[self]
        return dx != 0 and dy != 0


# Coordinate system: +X is East, +Y is South (row index grows downward)
DIRECTION_DELTAS: dict[Direction, tuple[int, int]] = {
    Direction.NORTH: (0, -1),
    Direction.NORTHEAST: (1, -1),
    Direction.EAST: (1, 0),
    Direction.SOUTHEAST: (1, 1),
    Direction.SOUTH: (0, 1),
    Direction.SOUTHWEST: (-1, 1),
    Direction.WEST: (-1, 0),
    Direction.NORTHWEST: (-1, -1),
}


class Position(BaseModel, frozen=True):
    """Immutable 2D tile coordinate."""

    x: int
    y: int

    def offset(self, direction: Direction) -> "Position":
        """Return new position offset by direction."""
        dx, dy = DIRECTION_DELTAS[direction]
        return Position(x=self.x + dx, y=self.y + dy)

    def distance_to(self, other: "Position") -> float:
        """Euclidean distance in tiles."""
        return ((self.x - other.x) ** 2 + (self.y - other.y) ** 2) ** 0.5

    def as_tuple(self) -> tuple[int, int]:
        return (self.x, self.y)

    def __hash__(self) -> int:
        return hash((self.x, self.y))

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"

    def __repr__(self) -> str:
        return f"Position(x={self.x}, y={self.y})"
