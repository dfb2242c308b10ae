# fractal_noise/seeding.py

"""
================================================================================
SEED STREAM DERIVATION
================================================================================
Deterministic derivation of per-octave seeds from a caller seed, and a
stateless mixing function that turns any 64-bit seed into a well-distributed
64-bit constant.

Data Contract:
---------------
- Inputs:
    - seed: Any Python int. It is interpreted modulo 2^64.
- Outputs:
    - Python ints in the signed 64-bit range [-2^63, 2^63).
- Side Effects: None.
- Invariants:
    - octave_seed(s, i) == to_signed64(s + (i + 1) * GOLDEN_SEED_STEP), i.e.
      the seed octave i receives from an accumulator started with seed s.
    - determine() is a pure function of its argument.
================================================================================
"""

from . import config as DEFAULTS

MASK64 = (1 << 64) - 1
_SIGN_BIT = 1 << 63


def to_signed64(value: int) -> int:
    """Wraps an arbitrary int into the signed 64-bit range."""
    value &= MASK64
    return value - (1 << 64) if value & _SIGN_BIT else value


def advance_seed(seed: int, steps: int = 1) -> int:
    """Advances a seed by `steps` golden-ratio increments."""
    return to_signed64(seed + steps * DEFAULTS.GOLDEN_SEED_STEP)


def octave_seed(seed: int, octave: int) -> int:
    """
    Returns the seed an accumulator hands to its basis for a given octave.

    The accumulator advances its seed before every octave, so octave 0 already
    sees one advance. Re-evaluating a single octave with this seed reproduces
    its contribution exactly.
    """
    return advance_seed(seed, octave + 1)


def _rotl(value: int, shift: int) -> int:
    return ((value << shift) | (value >> (64 - shift))) & MASK64


def determine(seed: int) -> int:
    """
    Mixes a seed into a pseudo-random signed 64-bit constant.

    Two rounds of xor-rotate-multiply followed by a final xor-shift. Nearby
    seeds (0, 1, 2, ...) give unrelated results, which makes this suitable for
    deriving per-seed constants such as lattice hashes or wave frequencies.
    """
    s = seed & MASK64
    s = ((s ^ _rotl(s, 41) ^ _rotl(s, 17) ^ 0xD1B54A32D192ED03) * 0xAEF17502108EF2D9) & MASK64
    s = ((s ^ (s >> 43) ^ (s >> 31) ^ (s >> 23)) * 0xDB4F0B9175AE2165) & MASK64
    return to_signed64(s ^ (s >> 28))
