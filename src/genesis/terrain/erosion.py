"""Hydraulic erosion: water droplets that carve and deposit sediment.

Each droplet rolls downhill over the bilinear surface of the heightmap,
picking up sediment while it has spare capacity and dropping it when it
slows down or climbs. Droplets run one at a time against the shared field,
so later droplets see the channels cut by earlier ones.
"""

import logging
import math
from dataclasses import dataclass

import numpy as np

from .config import ErosionConfig
from .elevation import ElevationField

logger = logging.getLogger(__name__)


@dataclass
class Droplet:
    """State of a single water droplet."""

    x: float
    y: float
    dx: float = 0.0
    dy: float = 0.0
    velocity: float = 1.0
    water: float = 1.0
    sediment: float = 0.0


@dataclass
class ErosionStats:
    """Counts from one erosion pass."""

    simulated: int = 0
    skipped: int = 0


def build_brush(radius: int) -> list[tuple[int, int, float]]:
    """Erosion brush offsets and weights.

    Weight is ``max(0, 1 - dist / radius) * 0.25``; offsets with zero weight
    are dropped. At radius 1 only the center cell is eroded.

    Args:
        radius: Brush radius in tiles.

    Returns:
        List of (dx, dy, weight).
    """
    brush = []
    for by in range(-radius, radius + 1):
        for bx in range(-radius, radius + 1):
            weight = max(0.0, 1.0 - math.sqrt(bx * bx + by * by) / radius) * 0.25
            if weight > 0.0:
                brush.append((bx, by, weight))
    return brush


def height_and_gradient(
    heights: np.ndarray, x: float, y: float
) -> tuple[float, float, float]:
    """Bilinear height and gradient at a point inside the grid.

    The caller guarantees ``0 <= x < width - 1`` and ``0 <= y < height - 1``.

    Returns:
        Tuple of (height, grad_x, grad_y).
    """
    cx = int(x)
    cy = int(y)
    u = x - cx
    v = y - cy

    h_nw = float(heights[cy, cx])
    h_ne = float(heights[cy, cx + 1])
    h_sw = float(heights[cy + 1, cx])
    h_se = float(heights[cy + 1, cx + 1])

    grad_x = (h_ne - h_nw) * (1 - v) + (h_se - h_sw) * v
    grad_y = (h_sw - h_nw) * (1 - u) + (h_se - h_ne) * u
    height = (
        h_nw * (1 - u) * (1 - v)
        + h_ne * u * (1 - v)
        + h_sw * (1 - u) * v
        + h_se * u * v
    )
    return height, grad_x, grad_y


class ErosionSimulator:
    """Droplet erosion bound to one random stream.

    Successive ``erode`` calls continue the same stream, so a given seed and
    call sequence always produces the same terrain.
    """

    def __init__(self, seed: int, config: ErosionConfig | None = None):
        self.seed = seed
        self.config = config or ErosionConfig()
        self.rng = np.random.default_rng(seed)

    def erode(
        self,
        field: ElevationField,
        num_particles: int | None = None,
        config: ErosionConfig | None = None,
    ) -> ElevationField:
        """Run an erosion pass over the field in place.

        Args:
            field: Elevation field to erode.
            num_particles: Droplet count; defaults to ``config.num_particles``.
            config: Parameters for this pass; defaults to the simulator's.

        Returns:
            The same field, eroded and reclassified.
        """
        config = config or self.config
        if num_particles is None:
            num_particles = config.num_particles

        logger.info(f"Starting erosion with {num_particles:,} droplets")

        brush = build_brush(config.brush_radius)
        stats = ErosionStats()
        progress_interval = max(1, num_particles // 10)
        max_x = field.width - 1
        max_y = field.height - 1

        for i in range(num_particles):
            start_x = self.rng.random() * max_x
            start_y = self.rng.random() * max_y

            if field.get(int(start_x), int(start_y)) < config.start_min_elevation:
                stats.skipped += 1
            else:
                droplet = Droplet(
                    x=start_x,
                    y=start_y,
                    velocity=config.start_velocity,
                    water=config.start_water,
                )
                self.simulate_droplet(field, droplet, config, brush)
                stats.simulated += 1

            if (i + 1) % progress_interval == 0:
                logger.info(f"Erosion progress: {(i + 1) * 100 // num_particles}%")

        logger.info(
            f"Erosion complete: {stats.simulated:,} droplets simulated, "
            f"{stats.skipped:,} skipped"
        )

        field.classify()
        return field

    def simulate_droplet(
        self,
        field: ElevationField,
        droplet: Droplet,
        config: ErosionConfig,
        brush: list[tuple[int, int, float]],
    ) -> None:
        """Move one droplet until it dies, leaves the map or runs out of steps."""
        heights = field.heights
        max_x = field.width - 1
        max_y = field.height - 1

        for _ in range(config.max_lifetime):
            node_x = int(droplet.x)
            node_y = int(droplet.y)
            if node_x < 0 or node_x >= max_x or node_y < 0 or node_y >= max_y:
                break

            height, grad_x, grad_y = height_and_gradient(heights, droplet.x, droplet.y)

            droplet.dx = droplet.dx * config.inertia - grad_x * (1 - config.inertia)
            droplet.dy = droplet.dy * config.inertia - grad_y * (1 - config.inertia)
            length = math.sqrt(droplet.dx * droplet.dx + droplet.dy * droplet.dy)
            if length != 0:
                droplet.dx /= length
                droplet.dy /= length

            old_x = droplet.x
            old_y = droplet.y
            droplet.x += droplet.dx
            droplet.y += droplet.dy

            if (droplet.dx == 0 and droplet.dy == 0) or not (
                0 <= droplet.x < max_x and 0 <= droplet.y < max_y
            ):
                break

            new_height, _, _ = height_and_gradient(heights, droplet.x, droplet.y)
            delta_height = new_height - height

            slope = max(-delta_height, config.min_slope)
            capacity = slope * droplet.velocity * droplet.water * config.capacity

            if droplet.sediment > capacity or delta_height > 0:
                if delta_height > 0:
                    amount = min(delta_height, droplet.sediment)
                else:
                    amount = (droplet.sediment - capacity) * config.deposition
                droplet.sediment -= amount

                # Spread over the corners of the cell the droplet just left
                u = old_x - node_x
                v = old_y - node_y
                field.modify(node_x, node_y, amount * (1 - u) * (1 - v))
                field.modify(node_x + 1, node_y, amount * u * (1 - v))
                field.modify(node_x, node_y + 1, amount * (1 - u) * v)
                field.modify(node_x + 1, node_y + 1, amount * u * v)
            else:
                amount = min((capacity - droplet.sediment) * config.erosion, -delta_height)
                for bx, by, weight in brush:
                    ex = node_x + bx
                    ey = node_y + by
                    if field.in_bounds(ex, ey):
                        removed = amount * weight
                        field.modify(ex, ey, -removed)
                        droplet.sediment += removed

            droplet.velocity = math.sqrt(
                max(0.0, droplet.velocity * droplet.velocity + delta_height * config.gravity)
            )
            droplet.water *= 1 - config.evaporation
            if droplet.water < config.min_water:
                break
