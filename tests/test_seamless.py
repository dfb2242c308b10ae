import math

import numpy as np
import pytest

from conftest import RecordingNoise, wave
from fractal_noise import (ConfigurationError, Layered, Seamless, ValueNoise, seamless_1d,
                           seamless_2d, seamless_2d_array, seamless_3d, seamless_3d_array,
                           seamless_fill_2d, seamless_fill_3d)
from fractal_noise.seeding import advance_seed


def test_seamless_edges_match_exactly():
    width, height = 96.0, 40.0
    tile = Seamless(Layered(ValueNoise(4), octaves=3), (width, height))
    assert tile.dimensions == 2
    origin = tile.noise(0.0, 0.0)
    assert tile.noise(width, 0.0) == origin
    assert tile.noise(0.0, height) == origin
    assert tile.noise(width, height) == origin
    for y in (1.5, 17.0, 33.25):
        assert tile.noise(0.0, y) == tile.noise(width, y)
        assert tile.noise(-width, y) == tile.noise(0.0, y)


def test_seamless_seeded_edges_match():
    tile = Seamless(wave(6), 10.0)
    assert tile.dimensions == 3
    assert tile.noise_seeded(0.0, 2.0, 3.0, 5) == tile.noise_seeded(10.0, 2.0, 3.0, 5)


def test_seamless_samples_the_circle():
    basis = RecordingNoise(4)
    Seamless(basis, (8.0, 4.0)).noise(2.0, 1.0)
    point, seed = basis.calls[0]
    assert seed is None
    assert point == pytest.approx((0.0, 1.0, 0.0, 1.0), abs=1e-15)


def test_seamless_rejects_odd_or_bad_configuration():
    with pytest.raises(ConfigurationError):
        Seamless(wave(3))
    with pytest.raises(ConfigurationError):
        Seamless(wave(4), 0.0)
    with pytest.raises(ConfigurationError):
        Seamless(wave(4), (1.0, 2.0, 3.0))


def test_point_functions_match_the_combinator():
    basis4 = wave(4)
    tile = Seamless(basis4, (30.0, 50.0))
    assert seamless_2d(basis4, 3.0, 7.0, 30.0, 50.0, 2) == tile.noise_seeded(3.0, 7.0, 2)
    assert seamless_1d(wave(2), 0.0, 12.0, 1) == seamless_1d(wave(2), 12.0, 12.0, 1)
    basis6 = wave(6)
    assert (seamless_3d(basis6, 0.0, 1.0, 2.0, 5.0, 6.0, 7.0, 8)
            == seamless_3d(basis6, 5.0, 7.0, 9.0, 5.0, 6.0, 7.0, 8))


def test_fill_2d_returns_array_and_total():
    fill = np.zeros((16, 12))
    result, total = seamless_fill_2d(fill, 42, 3, wave(4))
    assert result is fill
    assert total == pytest.approx(float(fill.sum()))
    assert np.all(np.abs(fill) <= 1.0)
    assert np.ptp(fill) > 0.0


def test_fill_2d_samples_the_seed_stream():
    generator = RecordingNoise(4)
    seamless_fill_2d(np.zeros((2, 3)), 7, 2, generator)
    seeds = [seed for _, seed in generator.calls]
    assert seeds[:6] == [advance_seed(7)] * 6
    assert seeds[6:] == [advance_seed(7, 2)] * 6
    # First octave uses radius 1 / 2^(octaves - 1).
    first_point = generator.calls[0][0]
    assert first_point == pytest.approx((0.5, 0.0, 0.5, 0.0))


def test_fill_2d_is_additive():
    zeros, zero_total = seamless_fill_2d(np.zeros((8, 8)), 3, 2, wave(4))
    ones, ones_total = seamless_fill_2d(np.ones((8, 8)), 3, 2, wave(4))
    np.testing.assert_allclose(ones, zeros + 1.0 / 3.0, atol=1e-12)
    assert ones_total == pytest.approx(zero_total + 64.0 / 3.0)


@pytest.mark.parametrize("octaves", [0, -1, 63, 100])
def test_fill_2d_ignores_invalid_octaves(octaves):
    fill = np.full((4, 4), 0.5)
    result, total = seamless_fill_2d(fill, 1, octaves, wave(4))
    assert result is fill
    assert total == 0.0
    assert np.all(fill == 0.5)


def test_fill_2d_ignores_empty_array():
    fill = np.zeros((0, 5))
    result, total = seamless_fill_2d(fill, 1, 2, wave(4))
    assert result is fill
    assert total == 0.0


def test_fill_rejects_wrong_generator_dimension():
    with pytest.raises(ConfigurationError):
        seamless_fill_2d(np.zeros((4, 4)), 1, 2, wave(6))
    with pytest.raises(ConfigurationError):
        seamless_fill_3d(np.zeros((2, 2, 2)), 1, 2, wave(4))


def test_fill_3d_uses_depth_width_height_layout():
    generator = RecordingNoise(6, value=1.0)
    fill, total = seamless_fill_3d(np.zeros((2, 3, 4)), 5, 1, generator)
    assert fill.shape == (2, 3, 4)
    assert total == pytest.approx(24.0)
    # x varies slowest, z fastest; the z pair comes last.
    (pc, ps, qc, qs, rc, rs), _ = generator.calls[1]
    assert (pc, ps, qc, qs) == pytest.approx((1.0, 0.0, 1.0, 0.0))
    assert (rc, rs) == pytest.approx((-1.0, 0.0), abs=1e-15)


def test_allocating_helpers():
    tile, total = seamless_2d_array(8, 6, 11, 2, wave(4))
    assert tile.shape == (8, 6)
    assert total == pytest.approx(float(tile.sum()))
    volume, _ = seamless_3d_array(2, 3, 4, 11, 1, wave(6))
    assert volume.shape == (2, 3, 4)


def test_fill_2d_default_generator_is_deterministic():
    first, _ = seamless_2d_array(6, 6, 99, 2)
    second, _ = seamless_2d_array(6, 6, 99, 2)
    np.testing.assert_array_equal(first, second)
    assert np.all(np.abs(first) <= 1.0)


def test_fill_wraps_like_the_point_function():
    # A one-octave fill samples the same circle as a unit-radius point lookup.
    generator = wave(4)
    fill, _ = seamless_2d_array(5, 7, 13, 1, generator)
    seed = advance_seed(13)
    x, y = 2, 3
    expected = generator.noise_seeded(
        math.cos(x * 2 * math.pi / 5), math.sin(x * 2 * math.pi / 5),
        math.cos(y * 2 * math.pi / 7), math.sin(y * 2 * math.pi / 7), seed)
    assert fill[x, y] == pytest.approx(expected, abs=1e-12)
