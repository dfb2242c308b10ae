import math

import numpy as np
import pytest

from fractal_noise.base import FunctionNoise, NoiseFunction


def constant(dimensions, value):
    return FunctionNoise(dimensions, lambda coords, seed: value)


def _wave(coords, seed):
    phase = (seed % 9973) * 0.0137
    return math.sin(sum(c * (1.0 + 0.37 * k) for k, c in enumerate(coords)) + phase)


def wave(dimensions, seed=0):
    """Cheap smooth basis in [-1, 1] for tests that need many samples."""
    return FunctionNoise(dimensions, _wave, seed)


class RecordingNoise(NoiseFunction):
    """Returns a fixed value and remembers every point and seed it was asked for."""

    def __init__(self, dimensions, value=0.0):
        self.dimensions = dimensions
        self.value = value
        self.calls = []

    def _evaluate(self, coords, seed):
        self.calls.append((tuple(coords), seed))
        return self.value


@pytest.fixture
def rng():
    return np.random.default_rng(12345)
