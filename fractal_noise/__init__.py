# fractal_noise/__init__.py

# This file makes the 'fractal_noise' directory a Python package.
# It also defines the public API of the package.

from .base import ConfigurationError, NoiseFunction, FunctionNoise
from .seeding import advance_seed, octave_seed, determine
from .basis import ValueNoise, SwayNoise1D
from .layered import Layered, InverseLayered, Warped, Maelstrom
from .rotated import Ridged, LayeredSpiral
from .modulation import Scaled, Exponential, Turbulent, Viny, Slick
from .seamless import (Seamless, seamless_1d, seamless_2d, seamless_3d,
                       seamless_fill_2d, seamless_fill_3d, seamless_2d_array, seamless_3d_array)
from .adapters import Adapted
from .factory import CombinatorKind, build_noise
from .generator import NoiseGenerator

__all__ = [
    "ConfigurationError", "NoiseFunction", "FunctionNoise",
    "advance_seed", "octave_seed", "determine",
    "ValueNoise", "SwayNoise1D",
    "Layered", "InverseLayered", "Warped", "Maelstrom",
    "Ridged", "LayeredSpiral",
    "Scaled", "Exponential", "Turbulent", "Viny", "Slick",
    "Seamless", "seamless_1d", "seamless_2d", "seamless_3d",
    "seamless_fill_2d", "seamless_fill_3d", "seamless_2d_array", "seamless_3d_array",
    "Adapted",
    "CombinatorKind", "build_noise",
    "NoiseGenerator",
]
