"""Tests for the elevation field container."""

import numpy as np
import pytest

from genesis.exceptions import InvalidDimensionsError
from genesis.terrain.elevation import ElevationField
from genesis.terrain_types import TerrainType


class TestElevationField:
    """Tests for reads, edits and classification."""

    def test_dimensions(self) -> None:
        """Width and height follow the (height, width) array."""
        field = ElevationField.flat(12, 7)
        assert (field.width, field.height) == (12, 7)
        assert field.heights.shape == (7, 12)
        assert field.terrain.shape == (7, 12)

    def test_get_out_of_bounds(self) -> None:
        """Out-of-bounds reads return -1.0."""
        field = ElevationField.flat(5, 5, value=0.3)
        assert field.get(2, 2) == pytest.approx(0.3)
        assert field.get(-1, 0) == -1.0
        assert field.get(0, 5) == -1.0

    def test_terrain_at_out_of_bounds(self) -> None:
        """Out-of-bounds terrain is deep water."""
        field = ElevationField.flat(5, 5, value=0.3)
        assert field.terrain_at(2, 2) == TerrainType.FOREST
        assert field.terrain_at(10, 10) == TerrainType.DEEP_WATER

    def test_modify_clamps(self) -> None:
        """Edits never push a cell outside [-1, 1]."""
        field = ElevationField.flat(3, 3, value=0.9)
        field.modify(1, 1, 0.5)
        assert field.get(1, 1) == 1.0
        field.modify(1, 1, -5.0)
        assert field.get(1, 1) == -1.0

    def test_modify_out_of_bounds_ignored(self) -> None:
        """Edits outside the field change nothing."""
        field = ElevationField.flat(3, 3)
        before = field.heights.copy()
        field.modify(3, 0, 0.5)
        field.modify(-1, -1, 0.5)
        np.testing.assert_array_equal(field.heights, before)

    def test_classify_refreshes_terrain(self) -> None:
        """Terrain only changes when classify() runs."""
        field = ElevationField.flat(3, 3, value=0.05)
        field.modify(0, 0, 0.9)
        assert field.terrain_at(0, 0) == TerrainType.GRASS
        field.classify()
        assert field.terrain_at(0, 0) == TerrainType.SNOW

    def test_construction_clamps(self) -> None:
        """Input heights are clamped into range."""
        field = ElevationField(np.array([[2.0, -3.0]], dtype=np.float32))
        np.testing.assert_array_equal(field.heights, [[1.0, -1.0]])

    @pytest.mark.parametrize(("width", "height"), [(0, 5), (5, 0), (-3, 4)])
    def test_invalid_dimensions(self, width: int, height: int) -> None:
        """Non-positive dimensions are rejected."""
        with pytest.raises(InvalidDimensionsError):
            ElevationField.flat(width, height)

    def test_land_fraction(self) -> None:
        """Land is everything at or above elevation 0."""
        heights = np.array([[-0.5, 0.0], [0.2, -0.05]], dtype=np.float32)
        assert ElevationField(heights).land_fraction() == pytest.approx(0.5)
