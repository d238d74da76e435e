"""Noise generation functions for terrain generation.

Provides a deterministic integer lattice hash, smoothed 2D value noise on
top of it, and the multi-octave sum used for the elevation field.
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray

from .config import NoiseConfig

_MASK_32 = 0xFFFFFFFF


def hash_2d(x: ArrayLike, y: ArrayLike, seed: int) -> NDArray[np.float64]:
    """Hash integer lattice coordinates to pseudo-random values.

    All arithmetic wraps at 32 bits, so results are identical on every
    platform for a given seed.

    Args:
        x: Integer x coordinates.
        y: Integer y coordinates.
        seed: Noise seed.

    Returns:
        Array of values in (-1, 1].
    """
    xi = np.asarray(x, dtype=np.int64).astype(np.uint32)
    yi = np.asarray(y, dtype=np.int64).astype(np.uint32)
    seed_term = np.uint32((seed * 131) & _MASK_32)

    with np.errstate(over="ignore"):
        n = xi + yi * np.uint32(57) + seed_term
        n = np.left_shift(n, np.uint32(13)) ^ n
        inner = n * n * np.uint32(15731) + np.uint32(789221)
        bits = (n * inner + np.uint32(1376312589)) & np.uint32(0x7FFFFFFF)

    return 1.0 - bits.astype(np.float64) / 1073741824.0


def value_noise_2d(
    x: NDArray[np.float64],
    y: NDArray[np.float64],
    seed: int,
) -> NDArray[np.float64]:
    """Sample smoothed value noise at continuous coordinates.

    Hashes the four surrounding lattice corners and blends them with a
    smoothstep-eased bilinear interpolation.

    Args:
        x: Sample x coordinates.
        y: Sample y coordinates.
        seed: Noise seed.

    Returns:
        Noise values with the same shape as ``x``.
    """
    x0 = np.floor(x)
    y0 = np.floor(y)
    sx = smoothstep(0.0, 1.0, x - x0)
    sy = smoothstep(0.0, 1.0, y - y0)

    xi = x0.astype(np.int64)
    yi = y0.astype(np.int64)

    v00 = hash_2d(xi, yi, seed)
    v10 = hash_2d(xi + 1, yi, seed)
    v01 = hash_2d(xi, yi + 1, seed)
    v11 = hash_2d(xi + 1, yi + 1, seed)

    top = v00 * (1.0 - sx) + v10 * sx
    bottom = v01 * (1.0 - sx) + v11 * sx
    return top * (1.0 - sy) + bottom * sy


def octave_noise(
    width: int,
    height: int,
    seed: int,
    config: NoiseConfig,
) -> NDArray[np.float32]:
    """Generate fractal value noise over a whole grid.

    Sums ``config.octaves`` layers at increasing frequency (lacunarity) and
    decreasing amplitude (persistence), each octave seeded with
    ``seed + octave``, normalized by the total amplitude.

    Args:
        width: Output width in tiles.
        height: Output height in tiles.
        seed: Random seed for noise generation.
        config: Octave parameters.

    Returns:
        2D array of shape (height, width), values in [-1, 1].
    """
    ys, xs = np.meshgrid(
        np.arange(height, dtype=np.float64),
        np.arange(width, dtype=np.float64),
        indexing="ij",
    )
    result = np.zeros((height, width), dtype=np.float64)

    amplitude = 1.0
    frequency = config.frequency
    max_amplitude = 0.0

    for octave in range(config.octaves):
        result += amplitude * value_noise_2d(xs * frequency, ys * frequency, seed + octave)
        max_amplitude += amplitude
        amplitude *= config.persistence
        frequency *= config.lacunarity

    result /= max_amplitude
    return result.astype(np.float32)


def smoothstep(edge0: float, edge1: float, x: NDArray) -> NDArray:
    """Smooth Hermite interpolation between 0 and 1.

    Args:
        edge0: Lower edge of transition.
        edge1: Upper edge of transition.
        x: Input values.

    Returns:
        Smoothly interpolated values in [0, 1].
    """
    t = np.clip((x - edge0) / (edge1 - edge0), 0.0, 1.0)
    return t * t * (3.0 - 2.0 * t)
