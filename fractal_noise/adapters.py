# fractal_noise/adapters.py

"""
================================================================================
DIMENSION ADAPTERS
================================================================================
Exposes a higher-dimensional noise source as a lower-dimensional one by
holding its trailing coordinates fixed. Moving the fixed coordinates around a
circle gives smoothly looping animation of a 3D field built from 4D or 5D
noise.

Data Contract:
---------------
- Inputs:
    - basis: A NoiseFunction of dimension N.
    - fixed: M values (1 <= M < N) appended to every call.
- Outputs:
    - A NoiseFunction of dimension N - M.
- Side Effects: The `fixed` setter and `set_extras()` replace the fixed values.
- Invariants: Evaluation never changes the fixed values.
================================================================================
"""

import math

from .base import NoiseFunction, ConfigurationError, require_dimensions, sample, validate_finite

TAU = 2.0 * math.pi


class Adapted(NoiseFunction):
    """
    Args:
        basis: The higher-dimensional noise source.
        *fixed (float): Values for the basis's trailing coordinates.
    """

    def __init__(self, basis, *fixed: float):
        basis_dims = require_dimensions(basis)
        if not 1 <= len(fixed) < basis_dims:
            raise ConfigurationError(
                f"Adapted needs between 1 and {basis_dims - 1} fixed values, got {len(fixed)}"
            )
        self.basis = basis
        self.dimensions = basis_dims - len(fixed)
        self._fixed = tuple(validate_finite("fixed", v) for v in fixed)

    @classmethod
    def from_angle(cls, basis, theta: float):
        """Fixes the last two coordinates of `basis` on the unit circle at `theta` turns."""
        adapter = cls(basis, 1.0, 0.0)
        adapter.set_extras(theta)
        return adapter

    @property
    def fixed(self) -> tuple:
        return self._fixed

    @fixed.setter
    def fixed(self, values):
        values = tuple(validate_finite("fixed", v) for v in values)
        if len(values) != len(self._fixed):
            raise ConfigurationError(f"expected {len(self._fixed)} fixed values, got {len(values)}")
        self._fixed = values

    def set_extras(self, theta: float):
        """
        Places the two fixed coordinates at (cos, sin) of `theta` turns. Only
        the fractional part of theta matters.
        """
        if len(self._fixed) != 2:
            raise ConfigurationError("set_extras() requires exactly two fixed coordinates")
        angle = (validate_finite("theta", theta) % 1.0) * TAU
        self._fixed = (math.cos(angle), math.sin(angle))

    def _evaluate(self, coords, seed):
        return sample(self.basis, tuple(coords) + self._fixed, seed)

    def __repr__(self):
        return f"Adapted(basis={self.basis!r}, fixed={self._fixed})"
