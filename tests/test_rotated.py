import pytest

from conftest import RecordingNoise, constant, wave
from fractal_noise import ConfigurationError, LayeredSpiral, Ridged
from fractal_noise.rotation import RIDGED_ROTATIONS, SPIRAL_ROTATIONS, rotate
from fractal_noise.seeding import octave_seed


def test_rotation_tables_are_square_per_dimension():
    for dims, matrix in RIDGED_ROTATIONS.items():
        assert len(matrix) == dims
        assert all(len(row) == dims for row in matrix)
    assert sorted(SPIRAL_ROTATIONS) == [2, 3, 4, 5, 6]


def test_ridged_tables_are_roughly_twice_the_spiral_ones():
    for dims in range(2, 7):
        for ridged_row, spiral_row in zip(RIDGED_ROTATIONS[dims], SPIRAL_ROTATIONS[dims]):
            for r, s in zip(ridged_row, spiral_row):
                assert r == pytest.approx(2.0 * s, abs=1e-12)


def test_ridged_2d_second_octave_uses_rotated_coordinates():
    basis = RecordingNoise(2)
    x0, y0 = 0.37, -1.91
    Ridged(basis, octaves=2, frequency=1.0).noise(x0, y0)
    (first, _), (second, _) = basis.calls
    assert first == (x0, y0)
    (a, b), (c, d) = RIDGED_ROTATIONS[2]
    assert second[0] == pytest.approx(a * x0 + b * y0 + 64, abs=1e-9)
    assert second[1] == pytest.approx(c * x0 + d * y0 + 128, abs=1e-9)


def test_ridged_3d_post_rotation_offset_hits_every_axis():
    basis = RecordingNoise(3)
    point = (1.0, 2.0, 3.0)
    Ridged(basis, octaves=3, frequency=1.0).noise(*point)
    after_first = rotate(RIDGED_ROTATIONS[3], point)
    after_second = [c + 64 for c in rotate(RIDGED_ROTATIONS[3], after_first)]
    expected = [c + off for c, off in zip(after_second, (128, 256, 512))]
    assert basis.calls[2][0] == pytest.approx(tuple(expected), abs=1e-9)


def test_ridged_1d_doubles_instead_of_rotating():
    basis = RecordingNoise(1)
    Ridged(basis, octaves=3, frequency=1.25).noise(2.0)
    assert [p[0] for p, _ in basis.calls] == [2.5, 5.0 + 64, 10.0 + 128]


def test_ridged_seeded_path_drops_sample_offsets_but_keeps_rotation():
    basis = RecordingNoise(2)
    Ridged(basis, octaves=3, frequency=1.0).noise_seeded(0.5, 0.5, 8)
    assert [seed for _, seed in basis.calls] == [octave_seed(8, o) for o in range(3)]
    (a, b), (c, d) = RIDGED_ROTATIONS[2]
    assert basis.calls[1][0] == pytest.approx((a * 0.5 + b * 0.5, c * 0.5 + d * 0.5))


def test_ridged_folds_output():
    assert Ridged(constant(2, 0.0)).noise(1.0, 1.0) == pytest.approx(1.0)
    assert Ridged(constant(2, 1.0)).noise(1.0, 1.0) == pytest.approx(-1.0)
    assert Ridged(constant(2, -1.0)).noise(1.0, 1.0) == pytest.approx(-1.0)
    assert Ridged(constant(4, 0.5), octaves=5).noise(1.0, 2.0, 3.0, 4.0) == pytest.approx(0.0)


def test_ridged_defaults():
    ridged = Ridged(wave(2))
    assert ridged.octaves == 2
    assert ridged.frequency == 1.25


def test_spiral_rotates_and_scales_between_octaves():
    basis = RecordingNoise(2)
    LayeredSpiral(basis, octaves=3, frequency=1.0, lacunarity=0.5).noise(1.0, 0.0)
    points = [p for p, _ in basis.calls]
    assert points[0] == (1.0, 0.0)
    first = [c * 0.5 for c in rotate(SPIRAL_ROTATIONS[2], (1.0, 0.0))]
    assert points[1] == pytest.approx(tuple(first))
    second = [c * 0.5 + 64 for c in rotate(SPIRAL_ROTATIONS[2], first)]
    assert points[2] == pytest.approx(tuple(second))


def test_spiral_averages_constant_basis():
    spiral = LayeredSpiral(constant(5, -0.25), octaves=4)
    assert spiral.noise(1.0, 2.0, 3.0, 4.0, 5.0) == pytest.approx(-0.25)
    assert spiral.noise_seeded(1.0, 2.0, 3.0, 4.0, 5.0, 3) == pytest.approx(-0.25)


def test_spiral_rejects_one_dimension():
    with pytest.raises(ConfigurationError):
        LayeredSpiral(wave(1))
