# fractal_noise/generator.py

"""
================================================================================
CONFIGURED NOISE GENERATOR
================================================================================
This module contains the NoiseGenerator class, which turns a configuration
dictionary into a combinator tree and evaluates it over single points, NumPy
coordinate grids and seamless tiles.

Data Contract:
---------------
- Inputs (on initialization):
    - config (dict): A dictionary of parameters which can override the
      internal defaults. Expected keys include 'seed', 'dimensions', 'tree'.
    - logger: A configured Python logging object for runtime messages.
- Outputs (from methods):
    - Floats or NumPy arrays of noise values in [-1, 1], or [0, 1] when
      normalization is requested.
- Side Effects: Logs messages using the provided logger.
- Invariants: Given the same seed and configuration, the output is
  deterministic.
================================================================================
"""

import logging
import time

import numpy as np

from . import config as DEFAULTS
from .base import ConfigurationError, require_dimensions
from .factory import build_noise
from .seamless import seamless_fill_2d


class NoiseGenerator:
    """
    Builds and evaluates one configured noise field.
    This class is backend-only and does not handle any visualization.
    """
    def __init__(self, config: dict, logger: logging.Logger, noise=None):
        """
        Initializes the noise generator.

        Args:
            config (dict): User-defined parameters to override defaults.
            logger (logging.Logger): The logger instance for all output.
            noise (NoiseFunction, optional): A pre-built combinator tree. If
                None, one is built from config['tree'].
        """
        self.logger = logger
        self.user_config = config
        self.logger.info("NoiseGenerator initializing...")

        # --- Consolidate Configuration ---
        self.settings = {
            'seed': self.user_config.get('seed', DEFAULTS.DEFAULT_SEED),
            'dimensions': self.user_config.get('dimensions', DEFAULTS.DEFAULT_DIMENSIONS),
            'tree': self.user_config.get('tree', DEFAULTS.DEFAULT_TREE),
            'seamless_octaves': self.user_config.get('seamless_octaves', DEFAULTS.SEAMLESS_DEFAULT_OCTAVES),
            'seamless_generator': self.user_config.get('seamless_generator', DEFAULTS.DEFAULT_SEAMLESS_GENERATOR),
        }
        self.seed = self.settings['seed']

        # --- Build Noise Trees ---
        start_time = time.perf_counter()
        if noise is not None:
            require_dimensions(noise, "noise")
            self.noise = noise
            self.logger.debug("Initialized with injected noise tree.")
        else:
            self.logger.debug("No noise tree provided, building one from configuration.")
            self.noise = build_noise(self.settings['tree'], self.settings['dimensions'])
        self.seamless_generator = build_noise(self.settings['seamless_generator'], 4)
        if self.seamless_generator.dimensions != 4:
            raise ConfigurationError("seamless_generator must describe a 4D noise source")
        self.dimensions = self.noise.dimensions
        elapsed = time.perf_counter() - start_time

        self.logger.info(f"NoiseGenerator initialized with seed: {self.seed}")
        self.logger.info(f"Noise tree ({self.dimensions}D) built in {elapsed * 1000.0:.2f} ms: {self.noise!r}")

    def get_value(self, *coords: float, seed: int = None) -> float:
        """Evaluates the tree at one point with the given (or configured) seed."""
        return self.noise.noise_seeded(*coords, self.seed if seed is None else seed)

    def get_grid(self, *coord_arrays: np.ndarray, seed: int = None, normalize: bool = False) -> np.ndarray:
        """
        Evaluates the tree at every point of a set of coordinate arrays.

        Args:
            *coord_arrays (np.ndarray): One array per dimension, e.g. the two
                outputs of np.meshgrid. They are broadcast against each other.
            seed (int, optional): Overrides the configured seed.
            normalize (bool): Map the output from [-1, 1] to [0, 1].

        Returns:
            np.ndarray: Noise values with the broadcast shape of the inputs.
        """
        if len(coord_arrays) != self.dimensions:
            raise TypeError(f"expected {self.dimensions} coordinate arrays, got {len(coord_arrays)}")
        seed = self.seed if seed is None else seed
        grids = np.broadcast_arrays(*[np.asarray(a, dtype=np.float64) for a in coord_arrays])
        points = np.stack([g.ravel() for g in grids], axis=1)
        result = self.noise.noise_grid(points, seed).reshape(grids[0].shape)
        if normalize:
            result = (result + 1.0) * 0.5
        self.logger.debug(f"Evaluated {result.size} samples.")
        return result

    def get_seamless_tile(self, width: int, height: int, octaves: int = None, seed: int = None):
        """
        Generates a (width, height) tile that wraps on both axes.

        Returns:
            tuple: (tile, mean) where mean is the average cell value.
        """
        octaves = self.settings['seamless_octaves'] if octaves is None else octaves
        seed = self.seed if seed is None else seed
        tile = np.zeros((width, height), dtype=np.float64)
        tile, total = seamless_fill_2d(tile, seed, octaves, self.seamless_generator)
        mean = total / tile.size if tile.size else 0.0
        self.logger.debug(f"Seamless tile {width}x{height}, {octaves} octave(s), mean {mean:.4f}")
        return tile, mean
