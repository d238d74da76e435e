"""Custom exceptions for the world pipeline."""


class GenesisError(Exception):
    """Base exception for world generation errors."""

    pass


class InvalidDimensionsError(GenesisError, ValueError):
    """Raised when a grid is constructed with non-positive dimensions."""

    pass


class StageNotReadyError(GenesisError):
    """Raised when a stage runs before the stage it depends on."""

    pass


def check_dimensions(width: int, height: int) -> None:
    """Fail fast on grid dimensions that cannot hold a single cell.

    Raises:
        InvalidDimensionsError: If width or height is not positive.
    """
    if width <= 0 or height <= 0:
        raise InvalidDimensionsError(
            f"World dimensions must be positive, got {width}x{height}"
        )
