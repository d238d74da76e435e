"""Civilization package: settlements, roads, growth and territory."""

from .config import CivilizationConfig
from .names import NameGenerator
from .pathfinding import compute_movement_costs, find_path
from .simulator import CivilizationSimulator, YearResult
from .state import City, CitySnapshot, Road, RoadSnapshot
from .suitability import site_suitability

__all__ = [
    "City",
    "CitySnapshot",
    "CivilizationConfig",
    "CivilizationSimulator",
    "NameGenerator",
    "Road",
    "RoadSnapshot",
    "YearResult",
    "compute_movement_costs",
    "find_path",
    "site_suitability",
]
