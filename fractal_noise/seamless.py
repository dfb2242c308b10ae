# fractal_noise/seamless.py

"""
================================================================================
SEAMLESS TILING
================================================================================
Produces noise that wraps around on every axis by walking each axis around a
circle in a space of twice the dimensionality: a 2D tile samples a 4D basis at
(cos a, sin a, cos b, sin b).

Data Contract:
---------------
- Inputs:
    - A basis of dimension 2N for N-dimensional seamless output (N = 1, 2, 3).
    - Periods (sizes) per axis, finite and non-zero.
    - For the array fillers: a float NumPy array, a seed, an octave count and
      an optional generator.
- Outputs:
    - Point forms: a float.
    - Array fillers: the same array (modified in place) and the sum of its
      normalized cells.
- Side Effects: The array fillers add into the array they are given. They do
  not clear it first.
- Invariants:
    - Coordinates c and c + L (L the period) give bit-identical results.
    - Array fillers return the array untouched, with a total of 0.0, when the
      array is empty or the octave count is outside (0, 63).
================================================================================
"""

import math

import numpy as np
from numba import njit

from . import config as DEFAULTS
from .base import NoiseFunction, ConfigurationError, require_dimensions, validate_finite
from .basis import ValueNoise
from .seeding import advance_seed

TAU = 2.0 * math.pi


def _turns(coord: float, size: float) -> float:
    """Angle in radians of `coord` along a loop of length `size`."""
    wrapped = coord % size
    if wrapped == size:
        wrapped = 0.0
    return wrapped / size * TAU


def _validate_size(size) -> float:
    size = abs(validate_finite("size", size))
    if size == 0.0:
        raise ConfigurationError("seamless size must be non-zero")
    return size


def _circle_point(coords, sizes) -> list:
    point = []
    for c, size in zip(coords, sizes):
        angle = _turns(c, size)
        point.append(math.cos(angle))
        point.append(math.sin(angle))
    return point


class Seamless(NoiseFunction):
    """
    Wraps a 2N-dimensional basis so it tiles with the given period on each of
    N axes.

    Args:
        basis: Noise source of dimension 2, 4 or 6.
        sizes (float or sequence): Period of every axis, or one per axis.
            Defaults to 256 on each axis.
    """

    def __init__(self, basis, sizes=DEFAULTS.SEAMLESS_DEFAULT_SIZE):
        basis_dims = require_dimensions(basis)
        if basis_dims % 2:
            raise ConfigurationError(f"Seamless needs an even-dimensional basis, got {basis_dims}")
        self.basis = basis
        self.dimensions = basis_dims // 2
        if isinstance(sizes, (int, float)):
            sizes = (sizes,) * self.dimensions
        sizes = tuple(_validate_size(s) for s in sizes)
        if len(sizes) != self.dimensions:
            raise ConfigurationError(f"Seamless needs {self.dimensions} sizes, got {len(sizes)}")
        self.sizes = sizes

    def _evaluate(self, coords, seed):
        point = _circle_point(coords, self.sizes)
        if seed is None:
            return self.basis.noise(*point)
        return self.basis.noise_seeded(*point, seed)


def seamless_1d(noise, x: float, size_x: float, seed: int) -> float:
    """Samples a 2D source so the result repeats every `size_x` along x."""
    point = _circle_point((x,), (_validate_size(size_x),))
    return noise.noise_seeded(*point, seed)


def seamless_2d(noise, x: float, y: float, size_x: float, size_y: float, seed: int) -> float:
    """Samples a 4D source so the result tiles with period (size_x, size_y)."""
    point = _circle_point((x, y), (_validate_size(size_x), _validate_size(size_y)))
    return noise.noise_seeded(*point, seed)


def seamless_3d(noise, x: float, y: float, z: float,
                size_x: float, size_y: float, size_z: float, seed: int) -> float:
    """Samples a 6D source so the result tiles with period (size_x, size_y, size_z)."""
    sizes = (_validate_size(size_x), _validate_size(size_y), _validate_size(size_z))
    point = _circle_point((x, y, z), sizes)
    return noise.noise_seeded(*point, seed)


@njit
def _normalize_2d(fill, scale):
    "Scales every cell in place and returns the sum of the scaled cells."
    total = 0.0
    for x in range(fill.shape[0]):
        for y in range(fill.shape[1]):
            fill[x, y] *= scale
            total += fill[x, y]
    return total


@njit
def _normalize_3d(fill, scale):
    "Same as _normalize_2d for a (depth, width, height) array, x-major."
    total = 0.0
    for x in range(fill.shape[1]):
        for y in range(fill.shape[2]):
            for z in range(fill.shape[0]):
                fill[z, x, y] *= scale
                total += fill[z, x, y]
    return total


def _unit_circle(count: int, radius: float):
    angles = np.arange(count) * (TAU / count)
    return np.cos(angles) * radius, np.sin(angles) * radius


def _require_fill(fill, ndim: int):
    if not isinstance(fill, np.ndarray) or fill.ndim != ndim:
        raise ConfigurationError(f"fill must be a {ndim}-dimensional NumPy array")


def seamless_fill_2d(fill: np.ndarray, seed: int, octaves: int, generator=None):
    """
    Adds seamless multi-octave noise into a (width, height) array.

    Each octave walks both axes around a circle whose radius doubles per
    octave while its weight halves, and samples the 4D generator with a seed
    advanced once per octave.

    Args:
        fill (np.ndarray): Float array indexed [x, y]. Modified in place.
        seed (int): Seed of the first octave, before advancing.
        octaves (int): Number of octaves, 1 to 62.
        generator: 4D noise source. Defaults to 4D value noise.

    Returns:
        tuple: (fill, total) where total is the sum of all normalized cells.
    """
    _require_fill(fill, 2)
    if fill.size == 0 or octaves <= 0 or octaves >= DEFAULTS.MAX_OCTAVES:
        return fill, 0.0
    if generator is None:
        generator = ValueNoise(4)
    elif require_dimensions(generator, "generator") != 4:
        raise ConfigurationError("seamless_fill_2d needs a 4D generator")
    width, height = fill.shape
    weight = 2.0 ** (octaves - 1)
    radius = 0.5 / weight
    for _ in range(octaves):
        seed = advance_seed(seed)
        radius *= 2.0
        pc, ps = _unit_circle(width, radius)
        qc, qs = _unit_circle(height, radius)
        for x in range(width):
            for y in range(height):
                fill[x, y] += generator.noise_seeded(pc[x], ps[x], qc[y], qs[y], seed) * weight
        weight *= 0.5
    total = _normalize_2d(fill, 1.0 / (2.0 ** octaves - 1.0))
    return fill, float(total)


def seamless_fill_3d(fill: np.ndarray, seed: int, octaves: int, generator=None):
    """
    Adds seamless multi-octave noise into a (depth, width, height) array,
    indexed [z, x, y], using a 6D generator. See seamless_fill_2d.
    """
    _require_fill(fill, 3)
    if fill.size == 0 or octaves <= 0 or octaves >= DEFAULTS.MAX_OCTAVES:
        return fill, 0.0
    if generator is None:
        generator = ValueNoise(6)
    elif require_dimensions(generator, "generator") != 6:
        raise ConfigurationError("seamless_fill_3d needs a 6D generator")
    depth, width, height = fill.shape
    weight = 2.0 ** (octaves - 1)
    radius = 0.5 / weight
    for _ in range(octaves):
        seed = advance_seed(seed)
        radius *= 2.0
        pc, ps = _unit_circle(width, radius)
        qc, qs = _unit_circle(height, radius)
        rc, rs = _unit_circle(depth, radius)
        for x in range(width):
            for y in range(height):
                for z in range(depth):
                    fill[z, x, y] += generator.noise_seeded(
                        pc[x], ps[x], qc[y], qs[y], rc[z], rs[z], seed) * weight
        weight *= 0.5
    total = _normalize_3d(fill, 1.0 / (2.0 ** octaves - 1.0))
    return fill, float(total)


def seamless_2d_array(width: int, height: int, seed: int,
                      octaves: int = DEFAULTS.SEAMLESS_DEFAULT_OCTAVES, generator=None):
    """Allocates a zeroed (width, height) array and fills it seamlessly."""
    return seamless_fill_2d(np.zeros((width, height), dtype=np.float64), seed, octaves, generator)


def seamless_3d_array(depth: int, width: int, height: int, seed: int,
                      octaves: int = DEFAULTS.SEAMLESS_DEFAULT_OCTAVES, generator=None):
    """Allocates a zeroed (depth, width, height) array and fills it seamlessly."""
    return seamless_fill_3d(np.zeros((depth, width, height), dtype=np.float64), seed, octaves, generator)
