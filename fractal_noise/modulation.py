# fractal_noise/modulation.py

"""
================================================================================
DOMAIN MODULATION
================================================================================
Combinators that reshape the input domain or the output range of a basis:
Scaled, Exponential, and the three two-source combinators Turbulent, Viny and
Slick, which use a second "disturbance" source to bend the first.

Data Contract:
---------------
- Inputs:
    - basis (and disturbance): NoiseFunctions of the same dimension.
    - Scaled: one scale per axis (a single number applies to all axes).
    - Exponential: sharpness, a finite non-integral float.
    - Turbulent/Viny: octaves and frequency. Slick: octaves only.
- Outputs:
    - Floats in [-1, 1] when the sources are.
- Side Effects: None.
- Invariants:
    - Seeded calls advance the seed once per octave, exactly as the
      accumulators in layered.py do.
================================================================================
"""

import logging
import math

import numpy as np

from . import config as DEFAULTS
from .base import (NoiseFunction, OctaveNoise, ConfigurationError, axis_offsets,
                   octave_correction, require_dimensions, sample, validate_finite)
from .seeding import advance_seed

logger = logging.getLogger(__name__)


class Scaled(NoiseFunction):
    """
    Multiplies each coordinate by a fixed per-axis scale before sampling.

    Args:
        basis: The wrapped noise source.
        scale (float or sequence): One scale for all axes, or one per axis.
    """

    def __init__(self, basis, scale=DEFAULTS.SCALED_DEFAULT_SCALE):
        self.dimensions = require_dimensions(basis)
        self.basis = basis
        self.scale = scale

    @property
    def scale(self) -> tuple:
        return self._scale

    @scale.setter
    def scale(self, value):
        if isinstance(value, (int, float)):
            value = (value,) * self.dimensions
        value = tuple(validate_finite("scale", v) for v in value)
        if len(value) != self.dimensions:
            raise ConfigurationError(
                f"Scaled needs {self.dimensions} scales, got {len(value)}"
            )
        self._scale = value

    def _evaluate(self, coords, seed):
        return sample(self.basis, [c * s for c, s in zip(coords, self._scale)], seed)

    def noise_grid(self, points, seed=None):
        points = self._grid_points(points)
        return self.basis.noise_grid(points * np.array(self._scale), seed)


class Exponential(NoiseFunction):
    """
    Bends the basis output with a logarithmic curve so that values bunch up
    toward one end of the range. Only the fractional part of the sharpness
    matters.
    """

    def __init__(self, basis, sharpness: float = DEFAULTS.EXPONENTIAL_DEFAULT_SHARPNESS):
        self.dimensions = require_dimensions(basis)
        self.basis = basis
        sharpness = validate_finite("sharpness", sharpness)
        reduced = sharpness - math.floor(sharpness) - 1.0
        if reduced == -1.0:
            raise ConfigurationError(f"sharpness must not be an integer, got {sharpness!r}")
        adjustment = 2.0 / math.log1p(reduced * DEFAULTS.EXPONENTIAL_SHARPNESS_NUDGE)
        if not math.isfinite(adjustment):
            raise ConfigurationError(f"sharpness {sharpness!r} gives a non-finite adjustment")
        self.adjustment = adjustment
        self.sharpness = reduced * 0.5
        logger.debug(f"Exponential sharpness {sharpness} -> {self.sharpness}, adjustment {adjustment}")

    def _evaluate(self, coords, seed):
        n = sample(self.basis, coords, seed)
        inner = 1.0 + self.sharpness * (n + 1.0)
        # A basis that overshoots 1.0 can push the argument to zero or below.
        if inner > 0.0:
            curve = math.log(inner)
        elif inner == 0.0:
            curve = -math.inf
        else:
            curve = math.nan
        return curve * self.adjustment - 1.0


class _Disturbed(OctaveNoise):
    """Octave combinator with a second source of the same dimensionality."""

    def __init__(self, basis, disturbance, octaves, frequency):
        super().__init__(basis, octaves, frequency)
        if require_dimensions(disturbance, "disturbance") != self.dimensions:
            raise ConfigurationError(
                f"disturbance has {disturbance.dimensions} dimensions, basis has {self.dimensions}"
            )
        self.disturbance = disturbance


class Turbulent(_Disturbed):
    """
    Offsets the first coordinate by the disturbance, then sums octaves of the
    basis at that displaced point. The disturbance is sampled once, with the
    caller's seed.
    """

    def __init__(self, basis, disturbance, octaves: int = DEFAULTS.DISTURBED_DEFAULT_OCTAVES,
                 frequency: float = DEFAULTS.DEFAULT_FREQUENCY):
        super().__init__(basis, disturbance, octaves, frequency)

    def _evaluate(self, coords, seed):
        point = self._scaled(coords)
        point[0] += sample(self.disturbance, point, seed)
        step = 2.0
        weight = 1.0
        total = 0.0
        for o in range(self._octaves):
            step *= 0.5
            if seed is None:
                offsets = axis_offsets(o, self.dimensions)
                n = self.basis.noise(*[c * step + off for c, off in zip(point, offsets)])
            else:
                seed = advance_seed(seed)
                n = self.basis.noise_seeded(*[c * step for c in point], seed)
            total += n * weight
            weight *= 2.0
        return total * (1.0 / octave_correction(self._octaves))


class Viny(_Disturbed):
    """
    Sums basis and disturbance side by side at the same sample point each
    octave, the disturbance at half the basis weight. Seeded calls keep the
    per-octave offsets and give both sources the advanced seed.
    """

    def __init__(self, basis, disturbance, octaves: int = DEFAULTS.DISTURBED_DEFAULT_OCTAVES,
                 frequency: float = DEFAULTS.DEFAULT_FREQUENCY):
        super().__init__(basis, disturbance, octaves, frequency)

    def _evaluate(self, coords, seed):
        point = self._scaled(coords)
        weight = 2.0 ** self._octaves
        step = 1.0 / weight
        total = 0.0
        for o in range(self._octaves):
            if seed is not None:
                seed = advance_seed(seed)
            step *= 2.0
            offsets = axis_offsets(o, self.dimensions)
            shifted = [c * step + off for c, off in zip(point, offsets)]
            n = sample(self.basis, shifted, seed) * weight
            weight *= 0.5
            total += n + sample(self.disturbance, shifted, seed) * weight
        return total / (3.0 * 2.0 ** self._octaves - 3.0)


class Slick(_Disturbed):
    """
    Offsets the first coordinate of every basis octave by the disturbance
    sampled at the original, unscaled coordinates. Has no frequency of its
    own; wrap it in Scaled to change the feature size.
    """

    def __init__(self, basis, disturbance, octaves: int = DEFAULTS.DISTURBED_DEFAULT_OCTAVES):
        super().__init__(basis, disturbance, octaves, DEFAULTS.DEFAULT_FREQUENCY)

    @property
    def frequency(self) -> float:
        return DEFAULTS.DEFAULT_FREQUENCY

    @frequency.setter
    def frequency(self, value):
        if validate_finite("frequency", value) != DEFAULTS.DEFAULT_FREQUENCY:
            raise ConfigurationError("Slick has a fixed frequency; wrap it in Scaled instead")

    def __repr__(self):
        return f"Slick(basis={self.basis!r}, disturbance={self.disturbance!r}, octaves={self._octaves})"

    def _evaluate(self, coords, seed):
        weight = 2.0 ** (self._octaves - 1)
        step = 1.0
        total = 0.0
        for o in range(self._octaves):
            if seed is not None:
                seed = advance_seed(seed)
            step *= 0.5
            offsets = axis_offsets(o, self.dimensions)
            shifted = [c * step + off for c, off in zip(coords, offsets)]
            shifted[0] += sample(self.disturbance, coords, seed)
            total += sample(self.basis, shifted, seed) * weight
            weight *= 0.5
        return total / octave_correction(self._octaves)
