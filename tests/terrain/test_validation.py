"""Tests for terrain validation."""

import numpy as np

from genesis.terrain.elevation import ElevationField
from genesis.terrain.generator import generate_elevation
from genesis.terrain.validation import ValidationResult, validate_terrain


class TestValidationResult:
    """Tests for the result container."""

    def test_starts_passed(self) -> None:
        """A fresh result has passed."""
        result = ValidationResult()
        assert result.passed
        assert result.errors == []

    def test_error_fails(self) -> None:
        """Any error fails the result."""
        result = ValidationResult()
        result.add_error("broken")
        assert not result.passed
        assert result.errors == ["broken"]

    def test_warning_keeps_passed(self) -> None:
        """Warnings alone do not fail the result."""
        result = ValidationResult()
        result.add_warning("odd")
        assert result.passed
        assert result.warnings == ["odd"]


class TestValidateTerrain:
    """Tests for validate_terrain."""

    def test_generated_island_passes(self) -> None:
        """A freshly generated island has no errors."""
        result = validate_terrain(generate_elevation(50, 50, seed=42))
        assert result.passed
        assert result.errors == []

    def test_stale_classification_is_error(self) -> None:
        """Editing heights without reclassifying is caught."""
        field = ElevationField.flat(10, 10, value=0.1)
        field.heights[0, 0] = 0.9
        result = validate_terrain(field)
        assert not result.passed
        assert any("stale" in e for e in result.errors)

    def test_out_of_range_is_error(self) -> None:
        """Heights outside [-1, 1] are caught."""
        field = ElevationField.flat(4, 4, value=0.1)
        field.heights[1, 1] = 1.5
        field.classify()
        result = validate_terrain(field)
        assert not result.passed

    def test_no_land_is_warning(self) -> None:
        """An all-ocean world passes with a warning."""
        field = ElevationField.flat(10, 10, value=-0.8)
        result = validate_terrain(field)
        assert result.passed
        assert any("No land" in w for w in result.warnings)

    def test_little_land_is_warning(self) -> None:
        """Land under 5% of the map is flagged."""
        heights = np.full((20, 20), -0.8, dtype=np.float32)
        heights[10, 10] = 0.2
        result = validate_terrain(ElevationField(heights))
        assert result.passed
        assert any("below" in w for w in result.warnings)
