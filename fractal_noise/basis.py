# fractal_noise/basis.py

"""
================================================================================
BASIS NOISE SOURCES
================================================================================
Concrete noise functions for the combinators to wrap: hashed lattice value
noise in 1 to 6 dimensions, and a very cheap 1D "cubic sway" wave sum.

The lattice kernel is JIT-compiled with Numba and works on NumPy arrays; the
Python classes only convert arguments and mix seeds.

Data Contract:
---------------
- Inputs:
    - Coordinates as floats, and an int seed (any size; used modulo 2^64).
- Outputs:
    - Floats in [-1, 1].
- Side Effects: None. Per-seed constants are cached, which never changes
  results.
- Invariants: Output depends only on coordinates and seed.
================================================================================
"""

from functools import lru_cache

import numpy as np
from numba import njit

from . import config as DEFAULTS
from .base import NoiseFunction, ConfigurationError
from .seeding import MASK64, determine

# Per-axis odd multipliers for the lattice hash; all are 64-bit so the hash
# stays in unsigned arithmetic inside Numba.
_AXIS_MULTIPLIERS = np.array([
    0xD1B54A32D192ED03,
    0xABC98388FB8FAC03,
    0x8CB92BA72F3D8DD7,
    0xDB4F0B9175AE2165,
    0xE19B01AA9D42C633,
    0xC6D1D6C8ED0C9631,
], dtype=np.uint64)
_FINAL_MULTIPLIER = np.uint64(0xAEF17502108EF2D9)
_SHIFT_11 = np.uint64(11)
_SHIFT_29 = np.uint64(29)
_SHIFT_32 = np.uint64(32)
_INV_2_53 = 2.0 ** -53


@njit
def _lerp(a, b, x):
    "Moves from a toward b by the fraction x."
    return a + x * (b - a)


@njit
def _fade(t):
    "6t^5 - 15t^4 + 10t^3"
    return t * t * t * (t * (t * 6 - 15) + 10)


@njit
def _value_noise(coords, seed):
    """
    Value noise at one point of any dimensionality up to 6.

    Every lattice corner around the point gets a pseudo-random value in
    [-1, 1) from a hash of its integer coordinates and the seed. The corners
    are then folded together one axis at a time with faded lerps, so the
    result never leaves [-1, 1].
    """
    dims = coords.shape[0]
    cell = np.empty(dims, dtype=np.int64)
    frac = np.empty(dims)
    for k in range(dims):
        f = np.floor(coords[k])
        cell[k] = np.int64(f)
        frac[k] = _fade(coords[k] - f)

    width = 1 << dims
    corners = np.empty(width)
    for corner in range(width):
        h = seed
        for k in range(dims):
            h = (h ^ np.uint64(cell[k] + ((corner >> k) & 1))) * _AXIS_MULTIPLIERS[k]
        h = (h ^ (h >> _SHIFT_29)) * _FINAL_MULTIPLIER
        h = h ^ (h >> _SHIFT_32)
        corners[corner] = np.float64(h >> _SHIFT_11) * _INV_2_53 * 2.0 - 1.0

    # Bit k of a corner index is axis k; each pass folds away the lowest bit.
    for k in range(dims):
        width >>= 1
        for i in range(width):
            corners[i] = _lerp(corners[2 * i], corners[2 * i + 1], frac[k])
    return corners[0]


@njit
def _value_noise_grid(points, seed):
    "Value noise at every row of an (N, dims) array."
    out = np.empty(points.shape[0])
    for i in range(points.shape[0]):
        out[i] = _value_noise(points[i], seed)
    return out


@lru_cache(maxsize=256)
def _lattice_seed(seed: int) -> np.uint64:
    return np.uint64(determine(seed) & MASK64)


class ValueNoise(NoiseFunction):
    """
    Smooth hashed lattice noise.

    Args:
        dimensions (int): 1 to 6.
        seed (int): Seed used by unseeded calls.
    """

    def __init__(self, dimensions: int = DEFAULTS.DEFAULT_DIMENSIONS, seed: int = DEFAULTS.DEFAULT_SEED):
        if not isinstance(dimensions, int) or not 1 <= dimensions <= DEFAULTS.MAX_DIMENSIONS:
            raise ConfigurationError(f"ValueNoise supports 1 to {DEFAULTS.MAX_DIMENSIONS} dimensions, got {dimensions!r}")
        self.dimensions = dimensions
        self.seed = int(seed)

    def _evaluate(self, coords, seed):
        point = np.array(coords, dtype=np.float64)
        return float(_value_noise(point, _lattice_seed(self.seed if seed is None else seed)))

    def noise_grid(self, points, seed=None):
        points = self._grid_points(points)
        return _value_noise_grid(points, _lattice_seed(self.seed if seed is None else int(seed)))

    def __repr__(self):
        return f"ValueNoise(dimensions={self.dimensions}, seed={self.seed})"


@njit
def _cubic_sway(value):
    "Hermite wave alternating between -1 and 1 at every integer."
    f = np.floor(value)
    value -= f
    sign = 1.0 - 2.0 * (np.int64(f) & 1)
    return value * value * (3.0 - 2.0 * value) * (2.0 * sign) - sign


@lru_cache(maxsize=64)
def _sway_frequencies(seed: int) -> tuple:
    """Four incommensurate wave frequencies derived from a seed."""
    return (
        (determine(seed) >> 11) * float.fromhex("0x1.8p-54"),
        (determine(seed + 11111) >> 11) * float.fromhex("0x1.0p-53"),
        (determine(seed + 22222) >> 11) * float.fromhex("0x1.8p-53"),
        (determine(seed + 33333) >> 11) * float.fromhex("0x1.0p-52"),
    )


_SWAY_WEIGHTS = (0.4375, 0.3125, 0.1875, 0.0625)


class SwayNoise1D(NoiseFunction):
    """
    Cheap 1D noise: a weighted sum of four cubic waves whose frequencies are
    picked by the seed. The weights add up to 1, so the output stays in
    [-1, 1].
    """

    dimensions = 1

    def __init__(self, seed: int = DEFAULTS.SWAY_DEFAULT_SEED):
        self.seed = int(seed)

    def _evaluate(self, coords, seed):
        x = coords[0]
        frequencies = _sway_frequencies(self.seed if seed is None else seed)
        return float(sum(_cubic_sway(x * f) * w for f, w in zip(frequencies, _SWAY_WEIGHTS)))

    def __repr__(self):
        return f"SwayNoise1D(seed={self.seed})"
