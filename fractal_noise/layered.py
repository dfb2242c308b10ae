# fractal_noise/layered.py

"""
================================================================================
OCTAVE ACCUMULATION
================================================================================
Fractal sums of a basis over several octaves: Layered, InverseLayered, Warped
and Maelstrom. All of them work for any dimensionality; it is taken from the
basis.

Data Contract:
---------------
- Inputs:
    - basis: A NoiseFunction (or duck-typed equivalent) of dimension N.
    - octaves: Clamped into [1, 63].
    - frequency: Multiplier applied to every coordinate before the first
      octave.
    - lacunarity: Multiplier applied to the coordinate step after each octave.
      The first octave always uses a step of 1.0.
- Outputs:
    - Weighted average of the octaves, in [-1, 1] when the basis is.
- Side Effects: None.
- Invariants:
    - Unseeded octave o samples axis k at `c * step + (o << (6 + k))`.
    - Seeded octave o samples the basis with octave_seed(seed, o) and no
      offsets.
    - With one octave the result is exactly basis(coords * frequency).
================================================================================
"""

import math

from . import config as DEFAULTS
from .base import OctaveNoise, axis_offsets, octave_correction, validate_lacunarity
from .seeding import advance_seed


class Layered(OctaveNoise):
    """
    Classic fractal sum. Octave o has weight 2^o, so with the default
    lacunarity of 0.5 the coarsest octave dominates.
    """

    def __init__(self, basis, octaves: int = DEFAULTS.DEFAULT_OCTAVES,
                 frequency: float = DEFAULTS.DEFAULT_FREQUENCY,
                 lacunarity: float = DEFAULTS.DEFAULT_LACUNARITY):
        super().__init__(basis, octaves, frequency)
        self.lacunarity = lacunarity

    @property
    def lacunarity(self) -> float:
        return self._lacunarity

    @lacunarity.setter
    def lacunarity(self, value):
        self._lacunarity = validate_lacunarity(value)

    def _weights(self):
        """Initial weight and the factor applied to it after each octave."""
        return 1.0, 2.0

    def _evaluate(self, coords, seed):
        point = self._scaled(coords)
        lacunarity = self._lacunarity
        step = 1.0 / lacunarity
        weight, weight_factor = self._weights()
        total = 0.0
        for o in range(self._octaves):
            step *= lacunarity
            if seed is None:
                offsets = axis_offsets(o, self.dimensions)
                n = self.basis.noise(*[c * step + off for c, off in zip(point, offsets)])
            else:
                seed = advance_seed(seed)
                n = self.basis.noise_seeded(*[c * step for c in point], seed)
            total += n * weight
            weight *= weight_factor
        return total / octave_correction(self._octaves)

    def __repr__(self):
        return (f"{type(self).__name__}(basis={self.basis!r}, octaves={self._octaves}, "
                f"frequency={self._frequency}, lacunarity={self._lacunarity})")


class InverseLayered(Layered):
    """Fractal sum with the weights reversed: the finest octave dominates."""

    def _weights(self):
        return 2.0 ** (self._octaves - 1), 0.5


class Warped(Layered):
    """
    Layered noise where each octave's raw value, times 0.25, is added to the
    first coordinate of the next octave's sample point.
    """

    def _evaluate(self, coords, seed):
        point = self._scaled(coords)
        lacunarity = self._lacunarity
        step = 1.0 / lacunarity
        weight = 1.0
        total = 0.0
        prev = 0.0
        for o in range(self._octaves):
            step *= lacunarity
            if seed is None:
                offsets = axis_offsets(o, self.dimensions)
                sample_point = [c * step + off for c, off in zip(point, offsets)]
                sample_point[0] += prev * DEFAULTS.WARP_FEEDBACK
                prev = self.basis.noise(*sample_point)
            else:
                seed = advance_seed(seed)
                sample_point = [c * step for c in point]
                sample_point[0] += prev * DEFAULTS.WARP_FEEDBACK
                prev = self.basis.noise_seeded(*sample_point, seed)
            total += prev * weight
            weight *= 2.0
        return total / octave_correction(self._octaves)


class Maelstrom(Warped):
    """
    Warped noise pushed through exp() and remapped to roughly [-1, 1].

    The output is not clamped; it can stray slightly past the bounds.
    """

    def _evaluate(self, coords, seed):
        warped = super()._evaluate(coords, seed)
        return math.exp(warped) * DEFAULTS.MAELSTROM_SCALE - DEFAULTS.MAELSTROM_SHIFT
