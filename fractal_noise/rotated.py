# fractal_noise/rotated.py

"""
================================================================================
ROTATED OCTAVE COMBINATORS
================================================================================
Ridged and LayeredSpiral. Between octaves the sample point is multiplied by a
fixed rotation matrix from `rotation.py`, which hides the lattice axes of the
basis much better than plain scaling.

Data Contract:
---------------
- Inputs:
    - basis: A NoiseFunction of dimension 1-6 (Ridged) or 2-6 (LayeredSpiral).
    - octaves, frequency (and lacunarity for LayeredSpiral).
- Outputs:
    - Ridged: `sum * 2 / correction - 1`, in [-1, 1].
    - LayeredSpiral: weighted average of the octaves, in [-1, 1].
- Side Effects: None.
- Invariants:
    - After octave o every axis is offset by (o << 6) once rotated.
    - Ridged folds each octave with 1 - |n| before weighting it.
================================================================================
"""

from . import config as DEFAULTS
from .base import (OctaveNoise, ConfigurationError, axis_offsets, octave_correction,
                   validate_lacunarity)
from .rotation import RIDGED_ROTATIONS, SPIRAL_ROTATIONS, rotate
from .seeding import advance_seed


class Ridged(OctaveNoise):
    """
    Ridged multi-octave noise. Folding each octave around zero turns the
    basis's zero crossings into sharp crests.

    The 1D form has no rotation to apply; it doubles the coordinate instead.
    """

    def __init__(self, basis, octaves: int = DEFAULTS.RIDGED_DEFAULT_OCTAVES,
                 frequency: float = DEFAULTS.RIDGED_DEFAULT_FREQUENCY):
        super().__init__(basis, octaves, frequency)
        self._matrix = RIDGED_ROTATIONS[self.dimensions]

    def _evaluate(self, coords, seed):
        point = self._scaled(coords)
        dims = self.dimensions
        total = 0.0
        correction = 0.0
        exponent = 2.0
        for o in range(self._octaves):
            if seed is None:
                offsets = axis_offsets(o, dims)
                n = self.basis.noise(*[c + off for c, off in zip(point, offsets)])
            else:
                seed = advance_seed(seed)
                n = self.basis.noise_seeded(*point, seed)
            n = 1.0 - abs(n)
            exponent *= 0.5
            correction += exponent
            total += n * exponent
            if dims == 1:
                point[0] *= 2.0
            else:
                shift = o << DEFAULTS.ROTATION_OFFSET_SHIFT
                point = [c + shift for c in rotate(self._matrix, point)]
        return total * 2.0 / correction - 1.0


class LayeredSpiral(OctaveNoise):
    """
    Layered noise that rotates, rather than only scales, the sample point
    between octaves. There are no per-octave sample offsets.
    """

    def __init__(self, basis, octaves: int = DEFAULTS.DEFAULT_OCTAVES,
                 frequency: float = DEFAULTS.DEFAULT_FREQUENCY,
                 lacunarity: float = DEFAULTS.DEFAULT_LACUNARITY):
        super().__init__(basis, octaves, frequency)
        if self.dimensions not in SPIRAL_ROTATIONS:
            raise ConfigurationError(
                f"LayeredSpiral supports 2 to 6 dimensions, got {self.dimensions}"
            )
        self._matrix = SPIRAL_ROTATIONS[self.dimensions]
        self.lacunarity = lacunarity

    @property
    def lacunarity(self) -> float:
        return self._lacunarity

    @lacunarity.setter
    def lacunarity(self, value):
        self._lacunarity = validate_lacunarity(value)

    def _evaluate(self, coords, seed):
        point = self._scaled(coords)
        lacunarity = self._lacunarity
        weight = 1.0
        total = 0.0
        for o in range(self._octaves):
            if seed is None:
                n = self.basis.noise(*point)
            else:
                seed = advance_seed(seed)
                n = self.basis.noise_seeded(*point, seed)
            total += n * weight
            weight *= 2.0
            shift = o << DEFAULTS.ROTATION_OFFSET_SHIFT
            point = [c * lacunarity + shift for c in rotate(self._matrix, point)]
        return total / octave_correction(self._octaves)
