# fractal_noise/base.py

"""
================================================================================
NOISE FUNCTION CAPABILITY
================================================================================
The single interface shared by every basis and combinator, regardless of its
dimensionality, plus the small validation helpers the combinators use while
they are being configured.

Data Contract:
---------------
- Inputs:
    - noise(*coords): exactly `dimensions` floats.
    - noise_seeded(*coords, seed): `dimensions` floats followed by an int seed.
- Outputs:
    - A float, typically in [-1, 1].
- Side Effects: None during evaluation. Configuration helpers log at DEBUG.
- Invariants:
    - Identical coordinates, seed and configuration give bit-identical
      results.
    - Evaluation never writes to the object; instances may be shared.
================================================================================
"""

import logging
import math
from abc import ABC, abstractmethod

import numpy as np

from . import config as DEFAULTS

logger = logging.getLogger(__name__)


class ConfigurationError(ValueError):
    """Raised when a combinator or basis is configured with unusable values."""


class NoiseFunction(ABC):
    """
    Base class for anything that produces a continuous noise field.

    Subclasses implement `_evaluate(coords, seed)`, where `seed` is None for
    unseeded calls. The public methods check the number of coordinates.
    """

    dimensions = 0

    def noise(self, *coords: float) -> float:
        if len(coords) != self.dimensions:
            raise TypeError(
                f"{type(self).__name__} takes {self.dimensions} coordinates, got {len(coords)}"
            )
        return self._evaluate(coords, None)

    def noise_seeded(self, *args) -> float:
        if len(args) != self.dimensions + 1:
            raise TypeError(
                f"{type(self).__name__} takes {self.dimensions} coordinates and a seed, "
                f"got {len(args)} arguments"
            )
        return self._evaluate(args[:-1], int(args[-1]))

    def noise_grid(self, points, seed=None) -> np.ndarray:
        """
        Evaluates the field at every row of an (N, dimensions) array.

        Sources with a compiled kernel override this; the default samples
        one row at a time.
        """
        points = self._grid_points(points)
        return np.array([sample(self, row, seed) for row in points.tolist()], dtype=np.float64)

    def _grid_points(self, points) -> np.ndarray:
        points = np.ascontiguousarray(points, dtype=np.float64)
        if points.ndim != 2 or points.shape[1] != self.dimensions:
            raise TypeError(
                f"{type(self).__name__} needs an (N, {self.dimensions}) array of points, got shape {points.shape}"
            )
        return points

    @abstractmethod
    def _evaluate(self, coords: tuple, seed) -> float:
        ...

    def __repr__(self):
        return f"{type(self).__name__}(dimensions={self.dimensions})"


class FunctionNoise(NoiseFunction):
    """
    Adapts a plain callable to the NoiseFunction interface.

    Args:
        dimensions (int): Number of coordinates the callable takes.
        func (callable): `func(coords: tuple, seed: int) -> float`.
        seed (int): Seed passed to `func` on unseeded calls.
    """

    def __init__(self, dimensions: int, func, seed: int = 0):
        if not isinstance(dimensions, int) or not 1 <= dimensions <= DEFAULTS.MAX_DIMENSIONS:
            raise ConfigurationError(f"dimensions must be an int in [1, {DEFAULTS.MAX_DIMENSIONS}], got {dimensions!r}")
        self.dimensions = dimensions
        self.func = func
        self.seed = seed

    def _evaluate(self, coords, seed):
        return float(self.func(tuple(coords), self.seed if seed is None else seed))


def sample(source, point, seed=None) -> float:
    """Evaluates any noise source at a point, seeded only when a seed is given."""
    if seed is None:
        return source.noise(*point)
    return source.noise_seeded(*point, seed)


def require_dimensions(source, name: str = "basis") -> int:
    """Returns the dimensionality of a noise source, rejecting anything unusable."""
    dims = getattr(source, "dimensions", None)
    if not isinstance(dims, int) or not 1 <= dims <= DEFAULTS.MAX_DIMENSIONS:
        raise ConfigurationError(f"{name} must expose 'dimensions' in [1, {DEFAULTS.MAX_DIMENSIONS}], got {dims!r}")
    if not callable(getattr(source, "noise", None)) or not callable(getattr(source, "noise_seeded", None)):
        raise ConfigurationError(f"{name} must provide noise() and noise_seeded()")
    return dims


def clamp_octaves(octaves) -> int:
    """Clamps an octave count into the supported range."""
    requested = int(octaves)
    clamped = max(DEFAULTS.MIN_OCTAVES, min(DEFAULTS.MAX_OCTAVES, requested))
    if clamped != requested:
        logger.debug(f"Octave count {requested} clamped to {clamped}.")
    return clamped


def validate_finite(name: str, value) -> float:
    value = float(value)
    if not math.isfinite(value):
        raise ConfigurationError(f"{name} must be finite, got {value!r}")
    return value


def validate_lacunarity(value) -> float:
    value = validate_finite("lacunarity", value)
    if value == 0.0:
        raise ConfigurationError("lacunarity must be non-zero")
    return value


def axis_offsets(octave: int, dimensions: int) -> tuple:
    """Per-axis offsets (octave << 6, octave << 7, ...) for an unseeded octave."""
    return tuple(octave << shift for shift in DEFAULTS.AXIS_OFFSET_SHIFTS[:dimensions])


class OctaveNoise(NoiseFunction):
    """
    Shared configuration for combinators that sum several octaves of a basis.

    Holds the basis, the clamped octave count and the frequency. Subclasses
    add their own parameters and implement `_evaluate`.
    """

    def __init__(self, basis, octaves: int, frequency: float):
        self.dimensions = require_dimensions(basis)
        self.basis = basis
        self.octaves = octaves
        self.frequency = frequency

    @property
    def octaves(self) -> int:
        return self._octaves

    @octaves.setter
    def octaves(self, value):
        self._octaves = clamp_octaves(value)

    def set_octaves(self, value):
        self.octaves = value

    @property
    def frequency(self) -> float:
        return self._frequency

    @frequency.setter
    def frequency(self, value):
        self._frequency = validate_finite("frequency", value)

    def _scaled(self, coords) -> list:
        frequency = self._frequency
        return [c * frequency for c in coords]

    def __repr__(self):
        return (f"{type(self).__name__}(basis={self.basis!r}, octaves={self._octaves}, "
                f"frequency={self._frequency})")


def octave_correction(octaves: int) -> float:
    """Sum of the weights 1, 2, 4, ... over `octaves` octaves."""
    return 2.0 ** octaves - 1.0
