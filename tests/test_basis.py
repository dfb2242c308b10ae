import numpy as np
import pytest

from fractal_noise import ConfigurationError, Scaled, SwayNoise1D, ValueNoise


@pytest.mark.parametrize("dimensions", [1, 2, 3, 4, 5, 6])
def test_value_noise_range_and_determinism(dimensions, rng):
    noise = ValueNoise(dimensions, seed=5)
    points = rng.uniform(-300.0, 300.0, size=(500, dimensions)).tolist()
    values = [noise.noise(*p) for p in points]
    assert all(-1.0 <= v <= 1.0 for v in values)
    assert values == [ValueNoise(dimensions, seed=5).noise(*p) for p in points]
    assert np.std(values) > 0.05


def test_value_noise_is_continuous():
    noise = ValueNoise(3)
    base = noise.noise(1.3, -4.2, 7.7)
    assert noise.noise(1.3 + 1e-7, -4.2, 7.7) == pytest.approx(base, abs=1e-5)


def test_value_noise_seed_changes_field():
    noise = ValueNoise(2, seed=1)
    unseeded = noise.noise(3.3, 4.4)
    assert noise.noise_seeded(3.3, 4.4, 1) == unseeded
    assert noise.noise_seeded(3.3, 4.4, 2) != unseeded
    assert ValueNoise(2, seed=2).noise(3.3, 4.4) == noise.noise_seeded(3.3, 4.4, 2)


def test_value_noise_handles_negative_and_huge_seeds():
    noise = ValueNoise(2)
    assert -1.0 <= noise.noise_seeded(0.5, 0.5, -(2 ** 63)) <= 1.0
    assert noise.noise_seeded(0.5, 0.5, 2 ** 64 + 3) == noise.noise_seeded(0.5, 0.5, 3)


def test_value_noise_rejects_unsupported_dimensions():
    with pytest.raises(ConfigurationError):
        ValueNoise(0)
    with pytest.raises(ConfigurationError):
        ValueNoise(7)


def test_sway_noise(rng):
    sway = SwayNoise1D()
    xs = rng.uniform(-1e4, 1e4, size=2000).tolist()
    values = [sway.noise(x) for x in xs]
    assert all(-1.0 <= v <= 1.0 for v in values)
    assert values == [SwayNoise1D(1).noise(x) for x in xs]
    assert sway.noise_seeded(12.5, 77) != sway.noise(12.5)
    assert sway.noise_seeded(12.5, 1) == sway.noise(12.5)
    assert sway.noise(3.0) == pytest.approx(sway.noise(3.0 + 1e-9), abs=1e-6)


def test_noise_grid_matches_pointwise(rng):
    noise = ValueNoise(3, seed=8)
    points = rng.uniform(-40.0, 40.0, size=(64, 3))
    expected = [noise.noise(*p) for p in points.tolist()]
    assert noise.noise_grid(points).tolist() == expected
    seeded = [noise.noise_seeded(*p, 99) for p in points.tolist()]
    assert noise.noise_grid(points, 99).tolist() == seeded


def test_scaled_grid_uses_the_basis_kernel(rng):
    scaled = Scaled(ValueNoise(2), (0.5, 3.0))
    points = rng.uniform(-10.0, 10.0, size=(32, 2))
    assert scaled.noise_grid(points, 4).tolist() == [scaled.noise_seeded(*p, 4) for p in points.tolist()]


def test_noise_grid_checks_shape():
    with pytest.raises(TypeError):
        ValueNoise(2).noise_grid(np.zeros((5, 3)))
    with pytest.raises(TypeError):
        ValueNoise(2).noise_grid(np.zeros(4))
    assert ValueNoise(2).noise_grid(np.zeros((0, 2))).shape == (0,)
