"""Elevation field container with its derived terrain classification."""

import numpy as np
from numpy.typing import NDArray

from ..exceptions import check_dimensions
from ..terrain_types import TerrainType
from .classification import classify_terrain, terrain_value_to_type
from .config import TerrainThresholds

# Out-of-bounds reads see open ocean
OUT_OF_BOUNDS_ELEVATION = -1.0


class ElevationField:
    """Mutable heightmap in [-1, 1] plus its terrain classification grid.

    Arrays have shape (height, width) and are indexed ``[y, x]``. The
    classification is only refreshed by ``classify()``; callers that edit
    heights in bulk (erosion) reclassify once when done.
    """

    def __init__(
        self,
        heights: NDArray[np.float32],
        thresholds: TerrainThresholds | None = None,
    ):
        if heights.ndim != 2:
            raise ValueError(f"Elevation must be 2D, got shape {heights.shape}")
        height, width = heights.shape
        check_dimensions(width, height)

        self.thresholds = thresholds or TerrainThresholds()
        self.heights = np.clip(heights, -1.0, 1.0).astype(np.float32)
        self.terrain = classify_terrain(self.heights, self.thresholds)

    @classmethod
    def flat(
        cls,
        width: int,
        height: int,
        value: float = 0.0,
        thresholds: TerrainThresholds | None = None,
    ) -> "ElevationField":
        """Create a field of constant elevation."""
        check_dimensions(width, height)
        return cls(np.full((height, width), value, dtype=np.float32), thresholds)

    @property
    def width(self) -> int:
        return self.heights.shape[1]

    @property
    def height(self) -> int:
        return self.heights.shape[0]

    def in_bounds(self, x: int, y: int) -> bool:
        """Check if (x, y) is within the field."""
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, x: int, y: int) -> float:
        """Elevation at (x, y), or -1.0 outside the field."""
        if not self.in_bounds(x, y):
            return OUT_OF_BOUNDS_ELEVATION
        return float(self.heights[y, x])

    def modify(self, x: int, y: int, delta: float) -> None:
        """Add ``delta`` to the cell at (x, y), clamping to [-1, 1].

        Out-of-bounds edits are ignored.
        """
        if not self.in_bounds(x, y):
            return
        value = float(self.heights[y, x]) + delta
        self.heights[y, x] = min(1.0, max(-1.0, value))

    def terrain_at(self, x: int, y: int) -> TerrainType:
        """Terrain type at (x, y), or deep water outside the field."""
        if not self.in_bounds(x, y):
            return TerrainType.DEEP_WATER
        return terrain_value_to_type(int(self.terrain[y, x]))

    def classify(self) -> NDArray[np.uint8]:
        """Recompute the terrain grid from the current heights."""
        self.terrain = classify_terrain(self.heights, self.thresholds)
        return self.terrain

    def land_fraction(self) -> float:
        """Share of cells at or above the sand threshold (dry land)."""
        return float(np.mean(self.heights >= self.thresholds.sand))
