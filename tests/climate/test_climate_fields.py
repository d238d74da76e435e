"""Tests for temperature, moisture and river fields."""

import numpy as np
import pytest

from genesis.climate.config import ClimateConfig, RiverConfig
from genesis.climate.fields import (
    carve_rivers,
    compute_moisture,
    compute_temperature,
    distance_to_water,
    smooth_moisture,
)


class TestTemperature:
    """Tests for compute_temperature."""

    def test_equator_sea_level(self) -> None:
        """Middle row at sea level is the base temperature."""
        temperature = compute_temperature(np.zeros((10, 4), dtype=np.float32), ClimateConfig())
        assert temperature[5, 0] == pytest.approx(20.0)

    def test_pole(self) -> None:
        """Top row is a full latitude range colder."""
        temperature = compute_temperature(np.zeros((10, 4), dtype=np.float32), ClimateConfig())
        assert temperature[0, 0] == pytest.approx(-10.0)

    def test_lapse_rate(self) -> None:
        """Elevation 0.5 is 1000 m, 6.5 C colder."""
        elevation = np.full((10, 4), 0.5, dtype=np.float32)
        temperature = compute_temperature(elevation, ClimateConfig())
        assert temperature[5, 0] == pytest.approx(13.5)

    def test_water_not_warmer(self) -> None:
        """Below sea level there is no lapse bonus."""
        elevation = np.full((10, 4), -0.8, dtype=np.float32)
        temperature = compute_temperature(elevation, ClimateConfig())
        assert temperature[5, 0] == pytest.approx(20.0)


class TestMoisture:
    """Tests for distance-based moisture."""

    def test_distance_capped(self) -> None:
        """Distance never exceeds the search radius."""
        elevation = np.full((5, 60), 0.2, dtype=np.float32)
        elevation[:, 0] = -0.5
        distance = distance_to_water(elevation, 20.0)
        assert distance[0, 0] == 0.0
        assert distance[0, 7] == pytest.approx(7.0)
        assert distance[0, 50] == pytest.approx(20.0)

    def test_no_water(self) -> None:
        """Without water every cell is at the cap and dry."""
        elevation = np.full((8, 8), 0.2, dtype=np.float32)
        np.testing.assert_array_equal(distance_to_water(elevation, 20.0), 20.0)
        np.testing.assert_array_equal(compute_moisture(elevation, ClimateConfig()), 0.0)

    def test_linear_falloff(self) -> None:
        """Moisture is 1 - distance / radius on lowland."""
        elevation = np.full((3, 30), 0.2, dtype=np.float32)
        elevation[:, 0] = -0.5
        moisture = compute_moisture(elevation, ClimateConfig())
        assert moisture[1, 0] == pytest.approx(1.0)
        assert moisture[1, 5] == pytest.approx(0.75)
        assert moisture[1, 25] == pytest.approx(0.0)

    def test_highland_drier(self) -> None:
        """Above 0.5 moisture is scaled by 1 - (e - 0.5)."""
        elevation = np.full((3, 30), 0.2, dtype=np.float32)
        elevation[:, 0] = -0.5
        elevation[:, 5] = 0.7
        moisture = compute_moisture(elevation, ClimateConfig())
        assert moisture[1, 5] == pytest.approx(0.75 * 0.8, abs=1e-6)

    def test_range(self) -> None:
        """Moisture stays in [0, 1]."""
        rng = np.random.default_rng(1)
        elevation = rng.uniform(-1.0, 1.0, (40, 40)).astype(np.float32)
        moisture = compute_moisture(elevation, ClimateConfig())
        assert moisture.min() >= 0.0
        assert moisture.max() <= 1.0


class TestSmoothMoisture:
    """Tests for box smoothing."""

    def test_border_unchanged(self) -> None:
        """Edge cells keep their values."""
        rng = np.random.default_rng(2)
        moisture = rng.uniform(0.0, 1.0, (10, 12)).astype(np.float32)
        smoothed = smooth_moisture(moisture, passes=2)
        np.testing.assert_array_equal(smoothed[0], moisture[0])
        np.testing.assert_array_equal(smoothed[:, -1], moisture[:, -1])

    def test_single_spike(self) -> None:
        """One pass spreads a spike over its 3x3 neighborhood."""
        moisture = np.zeros((7, 7), dtype=np.float32)
        moisture[3, 3] = 0.9
        smoothed = smooth_moisture(moisture, passes=1)
        np.testing.assert_allclose(smoothed[2:5, 2:5], 0.1, atol=1e-6)
        assert smoothed[1, 1] == 0.0

    def test_passes_read_previous_grid(self) -> None:
        """Second pass averages the first pass's output."""
        moisture = np.zeros((9, 9), dtype=np.float32)
        moisture[4, 4] = 0.9
        smoothed = smooth_moisture(moisture, passes=2)
        # Center sees nine cells of 0.1 from pass one
        assert smoothed[4, 4] == pytest.approx(0.1, abs=1e-6)
        assert smoothed[2, 2] == pytest.approx(0.1 / 9, abs=1e-6)

    def test_constant_field_unchanged(self) -> None:
        """Averaging a constant field changes nothing."""
        moisture = np.full((6, 6), 0.4, dtype=np.float32)
        np.testing.assert_allclose(smooth_moisture(moisture, passes=3), 0.4, atol=1e-6)

    def test_tiny_grid(self) -> None:
        """Grids without interior cells are returned as-is."""
        moisture = np.array([[0.1, 0.9]], dtype=np.float32)
        np.testing.assert_array_equal(smooth_moisture(moisture, passes=2), moisture)


class TestCarveRivers:
    """Tests for steepest-descent rivers."""

    @staticmethod
    def _valley() -> np.ndarray:
        """Land sloping down to the left into a sea at x = 0."""
        row = np.linspace(0.0, 0.9, 40, dtype=np.float32)
        elevation = np.tile(row, (20, 1))
        elevation[:, 0] = -0.5
        return elevation

    def test_rivers_wet_land(self) -> None:
        """River cells gain moisture, capped at 1."""
        elevation = self._valley()
        moisture = np.zeros_like(elevation)
        config = RiverConfig(river_count=50)
        result, rivers = carve_rivers(elevation, moisture, np.random.default_rng(0), config)
        assert rivers
        x, y = rivers[0][0]
        assert result[y, x] >= 0.5
        assert result.max() <= 1.0

    def test_rivers_flow_downhill(self) -> None:
        """Each step lowers the elevation and never enters water."""
        elevation = self._valley()
        config = RiverConfig(river_count=50)
        _, rivers = carve_rivers(
            elevation, np.zeros_like(elevation), np.random.default_rng(1), config
        )
        for path in rivers:
            heights = [elevation[y, x] for x, y in path]
            assert all(b < a for a, b in zip(heights, heights[1:]))
            assert min(heights) >= 0.0

    def test_low_sources_skipped(self) -> None:
        """Sources below 0.4 never start a river."""
        elevation = np.full((10, 10), 0.3, dtype=np.float32)
        result, rivers = carve_rivers(
            elevation,
            np.zeros_like(elevation),
            np.random.default_rng(0),
            RiverConfig(river_count=20),
        )
        assert rivers == []
        np.testing.assert_array_equal(result, 0.0)

    def test_input_not_modified(self) -> None:
        """The moisture passed in is left alone."""
        elevation = self._valley()
        moisture = np.zeros_like(elevation)
        carve_rivers(elevation, moisture, np.random.default_rng(0), RiverConfig(river_count=30))
        np.testing.assert_array_equal(moisture, 0.0)
