import pytest

from citygen.noise import fbm_noise3, perlin_noise3, population_noise


@pytest.mark.parametrize(
    "x, y, z",
    [(0, 0, 0), (1, 2, 3), (-5, 7, 0), (255, 256, 257), (-100, -100, -100)],
)
def test_noise_vanishes_on_lattice_points(x, y, z):
    assert perlin_noise3(float(x), float(y), float(z)) == 0.0


def test_noise_is_deterministic():
    first = perlin_noise3(0.37, 1.91, 2.5)
    second = perlin_noise3(0.37, 1.91, 2.5)
    assert first == second
    assert -2.0 < first < 2.0
    assert abs(first) > 0.0


def test_noise_repeats_every_256_units():
    a = perlin_noise3(3.25, 7.5, 0.75)
    b = perlin_noise3(3.25 + 256, 7.5 - 256, 0.75 + 512)
    assert a == pytest.approx(b, abs=1e-9)


def test_noise_is_not_constant():
    samples = {round(perlin_noise3(i * 0.37, i * 0.21, 0.5), 9) for i in range(20)}
    assert len(samples) > 5


def test_noise_stays_bounded():
    for i in range(200):
        value = perlin_noise3(i * 0.173, i * 0.311 - 20, i * 0.057)
        assert -2.0 < value < 2.0


def test_wrap_arguments_do_not_change_result():
    assert perlin_noise3(0.4, 0.6, 0.2, 4, 4, 4) == perlin_noise3(0.4, 0.6, 0.2)


def test_fbm_single_octave_equals_noise():
    assert fbm_noise3(1.3, 2.7, 0.4, 2.0, 0.5, 1) == perlin_noise3(1.3, 2.7, 0.4)


def test_fbm_zero_octaves_is_zero():
    assert fbm_noise3(1.3, 2.7, 0.4, 2.0, 0.5, 0) == 0.0


def test_fbm_two_octaves_adds_scaled_layer():
    x, y, z = 0.3, 0.8, 0.1
    expected = perlin_noise3(x, y, z) + 0.5 * perlin_noise3(2 * x, 2 * y, 2 * z)
    assert fbm_noise3(x, y, z, 2.0, 0.5, 2) == pytest.approx(expected)


def test_population_noise_at_origin_is_zero():
    assert population_noise(0.0, 0.0) == 0.0


def test_population_noise_close_to_double_precision_sum():
    x, y = 0.213, -0.487
    assert population_noise(x, y) == pytest.approx(
        fbm_noise3(x, y, 0.0, 2.0, 0.5, 6), abs=1e-5
    )