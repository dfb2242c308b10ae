from fractal_noise.seeding import MASK64, advance_seed, determine, octave_seed, to_signed64

GOLDEN = 0x9E3779B97F4A7C15


def test_to_signed64_wraps():
    assert to_signed64(0) == 0
    assert to_signed64(2 ** 63) == -(2 ** 63)
    assert to_signed64(2 ** 64 + 5) == 5
    assert to_signed64(-1) == -1


def test_advance_seed_wraps_like_a_signed_long():
    assert advance_seed(0) == GOLDEN - 2 ** 64
    assert advance_seed(0, 2) == to_signed64(2 * GOLDEN)
    assert -(2 ** 63) <= advance_seed(2 ** 63 - 1) < 2 ** 63


def test_octave_seed_matches_repeated_advance():
    seed = 987654321
    current = seed
    for octave in range(10):
        current = advance_seed(current)
        assert octave_seed(seed, octave) == current
        assert octave_seed(seed, octave) == to_signed64(seed + (octave + 1) * GOLDEN)


def test_determine_is_pure_and_spread_out():
    values = [determine(s) for s in range(200)]
    assert values == [determine(s) for s in range(200)]
    assert len(set(values)) == 200
    assert all(-(2 ** 63) <= v < 2 ** 63 for v in values)
    # Neighbouring seeds should not share their high bits.
    assert len({(v & MASK64) >> 56 for v in values}) > 80


def test_determine_ignores_bits_above_64():
    assert determine(7) == determine(7 + 2 ** 64)
    assert determine(-1) == determine(MASK64)
