"""Post-generation terrain validation."""

import logging

import numpy as np
from scipy import ndimage

from .classification import classify_terrain
from .elevation import ElevationField

logger = logging.getLogger(__name__)

# Below this share of dry land the world is too small to settle
MIN_LAND_FRACTION = 0.05


class ValidationResult:
    """Result of terrain validation."""

    def __init__(self) -> None:
        self.errors: list[str] = []
        self.warnings: list[str] = []
        self.passed = True

    def add_error(self, message: str) -> None:
        """Add validation error."""
        self.errors.append(message)
        self.passed = False

    def add_warning(self, message: str) -> None:
        """Add validation warning."""
        self.warnings.append(message)


def validate_terrain(field: ElevationField) -> ValidationResult:
    """Validate a generated or eroded field against its invariants.

    Args:
        field: Elevation field to check.

    Returns:
        ValidationResult with any errors/warnings.
    """
    result = ValidationResult()

    _check_elevation_range(field, result)
    _check_classification(field, result)
    _check_land(field, result)

    if result.passed:
        logger.info("Terrain validation passed")
    else:
        logger.warning(f"Terrain validation failed with {len(result.errors)} errors")
        for error in result.errors:
            logger.error(f"  - {error}")

    for warning in result.warnings:
        logger.warning(f"  - {warning}")

    return result


def _check_elevation_range(field: ElevationField, result: ValidationResult) -> None:
    """Check every height lies in [-1, 1]."""
    heights = field.heights
    if not np.all(np.isfinite(heights)):
        result.add_error("Elevation contains non-finite values")
        return

    low, high = float(heights.min()), float(heights.max())
    if low < -1.0 or high > 1.0:
        result.add_error(f"Elevation range [{low:.3f}, {high:.3f}] outside [-1, 1]")


def _check_classification(field: ElevationField, result: ValidationResult) -> None:
    """Check the terrain grid matches the current heights."""
    expected = classify_terrain(field.heights, field.thresholds)
    stale = int(np.count_nonzero(expected != field.terrain))
    if stale > 0:
        result.add_error(f"{stale} cells have a stale terrain classification")


def _check_land(field: ElevationField, result: ValidationResult) -> None:
    """Check there is enough land, and report how it is split."""
    land_mask = field.heights >= field.thresholds.sand
    land_fraction = float(np.mean(land_mask))

    if not land_mask.any():
        result.add_warning("No land found")
        return

    if land_fraction < MIN_LAND_FRACTION:
        result.add_warning(
            f"Land fraction {land_fraction:.1%} below {MIN_LAND_FRACTION:.0%}"
        )

    structure = ndimage.generate_binary_structure(2, 2)  # 8-connected
    _, num_features = ndimage.label(land_mask, structure=structure)
    logger.debug(f"Land: {land_fraction:.1%} in {num_features} landmass(es)")
