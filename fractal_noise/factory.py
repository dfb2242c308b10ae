# fractal_noise/factory.py

"""
================================================================================
COMBINATOR FACTORY
================================================================================
Builds a combinator tree from a nested dictionary, so a whole noise field can
be described as configuration.

Data Contract:
---------------
- Inputs:
    - node (dict): {"kind": <CombinatorKind or its value>, ...parameters}.
      Wrapping kinds take a "basis" node; Turbulent, Viny and Slick also take
      a "disturbance" node. Missing parameters fall back to config.py.
- Outputs:
    - A NoiseFunction.
- Side Effects: Logs each constructed node at DEBUG.
- Invariants: The same node always builds an equivalent tree.
================================================================================
"""

import logging
from enum import Enum

from . import config as DEFAULTS
from .adapters import Adapted
from .base import ConfigurationError
from .basis import SwayNoise1D, ValueNoise
from .layered import Layered, InverseLayered, Warped, Maelstrom
from .modulation import Scaled, Exponential, Turbulent, Viny, Slick
from .rotated import Ridged, LayeredSpiral
from .seamless import Seamless

logger = logging.getLogger(__name__)


class CombinatorKind(Enum):
    VALUE = "value"
    SWAY = "sway"
    LAYERED = "layered"
    INVERSE_LAYERED = "inverse_layered"
    WARPED = "warped"
    MAELSTROM = "maelstrom"
    RIDGED = "ridged"
    SPIRAL = "layered_spiral"
    SCALED = "scaled"
    EXPONENTIAL = "exponential"
    TURBULENT = "turbulent"
    VINY = "viny"
    SLICK = "slick"
    SEAMLESS = "seamless"
    ADAPTED = "adapted"


def default_basis(dimensions: int, seed: int = DEFAULTS.DEFAULT_SEED):
    """The basis used when a node does not name one."""
    if dimensions == 1:
        return SwayNoise1D(seed)
    return ValueNoise(dimensions, seed)


def _child(node: dict, key: str, dimensions: int, seed: int):
    if key in node:
        return build_noise(node[key], dimensions)
    return default_basis(dimensions, seed)


def _build_value(node, dimensions):
    return ValueNoise(node.get("dimensions", dimensions), node.get("seed", DEFAULTS.DEFAULT_SEED))


def _build_sway(node, dimensions):
    return SwayNoise1D(node.get("seed", DEFAULTS.SWAY_DEFAULT_SEED))


def _layered_builder(cls):
    def build(node, dimensions):
        return cls(
            _child(node, "basis", dimensions, DEFAULTS.DEFAULT_SEED),
            node.get("octaves", DEFAULTS.DEFAULT_OCTAVES),
            node.get("frequency", DEFAULTS.DEFAULT_FREQUENCY),
            node.get("lacunarity", DEFAULTS.DEFAULT_LACUNARITY),
        )
    return build


def _build_ridged(node, dimensions):
    return Ridged(
        _child(node, "basis", dimensions, DEFAULTS.DEFAULT_SEED),
        node.get("octaves", DEFAULTS.RIDGED_DEFAULT_OCTAVES),
        node.get("frequency", DEFAULTS.RIDGED_DEFAULT_FREQUENCY),
    )


def _build_scaled(node, dimensions):
    return Scaled(_child(node, "basis", dimensions, DEFAULTS.DEFAULT_SEED),
                  node.get("scale", DEFAULTS.SCALED_DEFAULT_SCALE))


def _build_exponential(node, dimensions):
    return Exponential(_child(node, "basis", dimensions, DEFAULTS.DEFAULT_SEED),
                       node.get("sharpness", DEFAULTS.EXPONENTIAL_DEFAULT_SHARPNESS))


def _disturbed_builder(cls, takes_frequency=True):
    def build(node, dimensions):
        basis = _child(node, "basis", dimensions, DEFAULTS.DEFAULT_SEED)
        disturbance = _child(node, "disturbance", basis.dimensions, DEFAULTS.ALTERNATE_SEED)
        octaves = node.get("octaves", DEFAULTS.DISTURBED_DEFAULT_OCTAVES)
        if takes_frequency:
            return cls(basis, disturbance, octaves, node.get("frequency", DEFAULTS.DEFAULT_FREQUENCY))
        return cls(basis, disturbance, octaves)
    return build


def _build_seamless(node, dimensions):
    basis = _child(node, "basis", dimensions * 2, DEFAULTS.DEFAULT_SEED)
    return Seamless(basis, node.get("sizes", DEFAULTS.SEAMLESS_DEFAULT_SIZE))


def _build_adapted(node, dimensions):
    if "theta" in node:
        basis = _child(node, "basis", dimensions + 2, DEFAULTS.DEFAULT_SEED)
        return Adapted.from_angle(basis, node["theta"])
    fixed = tuple(node.get("fixed", (0.0,)))
    basis = _child(node, "basis", dimensions + len(fixed), DEFAULTS.DEFAULT_SEED)
    return Adapted(basis, *fixed)


BUILDERS = {
    CombinatorKind.VALUE: _build_value,
    CombinatorKind.SWAY: _build_sway,
    CombinatorKind.LAYERED: _layered_builder(Layered),
    CombinatorKind.INVERSE_LAYERED: _layered_builder(InverseLayered),
    CombinatorKind.WARPED: _layered_builder(Warped),
    CombinatorKind.MAELSTROM: _layered_builder(Maelstrom),
    CombinatorKind.RIDGED: _build_ridged,
    CombinatorKind.SPIRAL: _layered_builder(LayeredSpiral),
    CombinatorKind.SCALED: _build_scaled,
    CombinatorKind.EXPONENTIAL: _build_exponential,
    CombinatorKind.TURBULENT: _disturbed_builder(Turbulent),
    CombinatorKind.VINY: _disturbed_builder(Viny),
    CombinatorKind.SLICK: _disturbed_builder(Slick, takes_frequency=False),
    CombinatorKind.SEAMLESS: _build_seamless,
    CombinatorKind.ADAPTED: _build_adapted,
}


def build_noise(node: dict, dimensions: int = DEFAULTS.DEFAULT_DIMENSIONS):
    """
    Builds the combinator tree described by `node`.

    Args:
        node (dict): Node description; see the module docstring.
        dimensions (int): Dimensionality of this node's output, used when a
            default basis has to be created. A node's own "dimensions" key
            takes precedence.

    Raises:
        ConfigurationError: On an unknown kind or unusable parameters.
    """
    if not isinstance(node, dict):
        raise ConfigurationError(f"noise node must be a dict, got {type(node).__name__}")
    try:
        kind = CombinatorKind(node.get("kind"))
    except ValueError as e:
        raise ConfigurationError(f"unknown noise kind {node.get('kind')!r}") from e
    dimensions = node.get("dimensions", dimensions)
    noise = BUILDERS[kind](node, dimensions)
    logger.debug(f"Built {kind.value} node: {noise!r}")
    return noise
