"""Road routing: movement cost grid and weighted A*."""

import heapq
import math

import numpy as np
from numpy.typing import NDArray

from ..climate.biomes import biome_value
from ..terrain_types import BiomeType
from ..types import DIRECTION_DELTAS
from .config import MovementCostConfig

_FOREST_BIOMES = (BiomeType.TROPICAL_FOREST, BiomeType.TEMPERATE_FOREST, BiomeType.TAIGA)
_OPEN_BIOMES = (BiomeType.TEMPERATE_GRASSLAND, BiomeType.SAVANNA)
_HARSH_BIOMES = (BiomeType.DESERT, BiomeType.ICE, BiomeType.TUNDRA)

_STEPS: tuple[tuple[int, int, float], ...] = tuple(
    (dx, dy, math.sqrt(2.0) if direction.is_diagonal else 1.0)
    for direction, (dx, dy) in DIRECTION_DELTAS.items()
)


def compute_movement_costs(
    elevation: NDArray[np.float32],
    biomes: NDArray[np.uint8],
    config: MovementCostConfig,
) -> NDArray[np.float32]:
    """Cost of building a road through each cell.

    Water (elevation below 0) gets ``water_cost``, which sits above the
    impassable cutoff. Land costs more the higher and rougher it is.

    Args:
        elevation: Elevation field.
        biomes: Biome grid (uint8 biome values).
        config: Cost parameters.

    Returns:
        Cost grid, same shape as elevation.
    """
    cost = config.base_cost + elevation.astype(np.float64) * config.elevation_factor

    for group, penalty in (
        (_HARSH_BIOMES, config.harsh_penalty),
        (_FOREST_BIOMES, config.forest_penalty),
        (_OPEN_BIOMES, config.open_penalty),
    ):
        mask = np.isin(biomes, [biome_value(b) for b in group])
        cost[mask] += penalty

    cost[elevation < 0.0] = config.water_cost
    return cost.astype(np.float32)


def find_path(
    costs: NDArray[np.float32],
    start: tuple[int, int],
    goal: tuple[int, int],
    impassable_above: float = 100.0,
) -> list[tuple[int, int]]:
    """Cheapest 8-connected route between two cells.

    Entering a cell costs its movement cost, times sqrt(2) on diagonals.
    Cells costing more than ``impassable_above`` are never entered. The
    heuristic is straight-line distance.

    Args:
        costs: Movement cost grid, indexed [y, x].
        start: (x, y) start cell.
        goal: (x, y) goal cell.
        impassable_above: Cost cutoff.

    Returns:
        Cells from start to goal inclusive, or [] if unreachable.
    """
    height, width = costs.shape
    sx, sy = start
    gx, gy = goal
    if not (0 <= sx < width and 0 <= sy < height and 0 <= gx < width and 0 <= gy < height):
        return []

    def heuristic(x: int, y: int) -> float:
        return math.hypot(gx - x, gy - y)

    g = {start: 0.0}
    came_from: dict[tuple[int, int], tuple[int, int]] = {}
    closed: set[tuple[int, int]] = set()
    open_heap: list[tuple[float, int, tuple[int, int]]] = []
    push_id = 0
    heapq.heappush(open_heap, (heuristic(sx, sy), push_id, start))

    while open_heap:
        _, _, current = heapq.heappop(open_heap)
        if current in closed:
            continue
        if current == goal:
            path = [current]
            while current in came_from:
                current = came_from[current]
                path.append(current)
            path.reverse()
            return path

        closed.add(current)
        cx, cy = current

        for dx, dy, multiplier in _STEPS:
            nx, ny = cx + dx, cy + dy
            if not (0 <= nx < width and 0 <= ny < height):
                continue
            neighbor = (nx, ny)
            if neighbor in closed:
                continue
            cell_cost = float(costs[ny, nx])
            if cell_cost > impassable_above:
                continue

            tentative = g[current] + cell_cost * multiplier
            if tentative < g.get(neighbor, math.inf):
                g[neighbor] = tentative
                came_from[neighbor] = current
                push_id += 1
                heapq.heappush(open_heap, (tentative + heuristic(nx, ny), push_id, neighbor))

    return []


def path_length(path: list[tuple[int, int]]) -> float:
    """Geometric length of a cell path."""
    return sum(
        math.hypot(x1 - x0, y1 - y0) for (x0, y0), (x1, y1) in zip(path, path[1:])
    )
