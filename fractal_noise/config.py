# fractal_noise/config.py

"""
================================================================================
INTERNAL DEFAULT CONFIGURATION
================================================================================
This module contains the default, fallback internal constants for the noise
combinators. These values are used if they are not explicitly provided to a
combinator's constructor or in the user's configuration dictionary.

DO NOT MODIFY THIS FILE FOR A SPECIFIC FIELD.
Instead, pass a configuration dictionary to the NoiseGenerator instance.
================================================================================
"""

# --- Seeding ---
DEFAULT_SEED = 1337
# Used for the disturbance source of Turbulent/Viny/Slick when none is given,
# so that it is decorrelated from the basis.
ALTERNATE_SEED = 0xFEEDCAFE
# Seed of the 1D cubic-sway basis.
SWAY_DEFAULT_SEED = 1
# Fractional part of the golden ratio as a 64-bit constant. Each octave
# advances the seed by this amount (wrapping as a signed 64-bit integer).
GOLDEN_SEED_STEP = 0x9E3779B97F4A7C15

# --- Octave Accumulation ---
MIN_OCTAVES = 1
MAX_OCTAVES = 63
DEFAULT_OCTAVES = 2
DEFAULT_FREQUENCY = 1.0
DEFAULT_LACUNARITY = 0.5
# Per-axis left shift of the octave index used to decorrelate unseeded octaves:
# axis k is offset by (octave << AXIS_OFFSET_SHIFTS[k]).
AXIS_OFFSET_SHIFTS = (6, 7, 8, 9, 10, 11)
# Fraction of the previous octave's raw value fed into the first axis (Warped).
WARP_FEEDBACK = 0.25

# --- Ridged ---
RIDGED_DEFAULT_OCTAVES = 2
RIDGED_DEFAULT_FREQUENCY = 1.25
# Shift applied to every axis after each ridged/spiral rotation.
ROTATION_OFFSET_SHIFT = 6

# --- Domain Modulation ---
DISTURBED_DEFAULT_OCTAVES = 1  # Turbulent, Viny, Slick
SCALED_DEFAULT_SCALE = 2.0
EXPONENTIAL_DEFAULT_SHARPNESS = 0.125
# Keeps log1p() away from the singularity at -1 when computing the adjustment.
EXPONENTIAL_SHARPNESS_NUDGE = 0.9999999999999999
# Maelstrom remaps exp(warped) from [1/e, e] back to roughly [-1, 1].
MAELSTROM_SCALE = 0.850918
MAELSTROM_SHIFT = 1.31303495

# --- Seamless Tiling ---
SEAMLESS_DEFAULT_SIZE = 256.0
SEAMLESS_DEFAULT_OCTAVES = 1

# --- Value Noise Basis ---
DEFAULT_DIMENSIONS = 2
MAX_DIMENSIONS = 6

# --- Noise Generator ---
# A dictionary is used so the whole tree can be passed as a single config item.
# See factory.build_noise for the node format.
DEFAULT_TREE = {
    "kind": "layered",
    "octaves": DEFAULT_OCTAVES,
    "basis": {"kind": "value"},
}
DEFAULT_SEAMLESS_GENERATOR = {"kind": "value", "dimensions": 4}
