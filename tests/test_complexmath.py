import math

import pytest

from fractol.complexmath import norm, scale, square


def test_scale_endpoints_match_target_range():
    assert scale(0, -2, 2, 800) == -2
    assert scale(800, -2, 2, 800) == 2


def test_scale_inverted_range():
    assert scale(0, 2, -2, 800) == 2
    assert scale(800, 2, -2, 800) == -2


def test_scale_midpoint():
    assert scale(400, -2, 2, 800) == 0


@pytest.mark.parametrize("value", [0, 13, 250, 399, 401, 799])
def test_scale_is_monotonic(value):
    assert scale(value, -2, 2, 800) < scale(value + 1, -2, 2, 800)


def test_square_of_imaginary_unit():
    assert square(1j) == -1


@pytest.mark.parametrize("z", [3 + 4j, -1.5 + 0.25j, 0.1 - 0.7j, 2 + 0j])
def test_square_matches_builtin_power(z):
    result = square(z)
    expected = z ** 2
    assert math.isclose(result.real, expected.real, abs_tol=1e-12)
    assert math.isclose(result.imag, expected.imag, abs_tol=1e-12)


@pytest.mark.parametrize("z", [3 + 4j, -1.5 + 0.25j, 0.1 - 0.7j])
def test_norm_of_square_is_norm_squared(z):
    assert math.isclose(norm(square(z)), norm(z) ** 2)


def test_norm_value():
    assert norm(3 + 4j) == 25


@pytest.mark.parametrize("z", [3 + 4j, -2 - 1j, 0.5j])
def test_norm_matches_abs(z):
    assert math.isclose(norm(z), abs(z) ** 2)