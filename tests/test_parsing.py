import math

import pytest

from fractol.parsing import parse_decimal


@pytest.mark.parametrize("value", [0.0, 0.5, 1.25, 3.0, 0.156, 12.75, 0.285])
def test_round_trip_positive(value):
    assert math.isclose(parse_decimal(str(value)), value, rel_tol=1e-12)


@pytest.mark.parametrize("text", ["0.8", "0.156", "2", "1.5"])
def test_minus_sign_negates(text):
    assert parse_decimal("-" + text) == -parse_decimal(text)


def test_double_minus_cancels():
    assert parse_decimal("--2.5") == parse_decimal("2.5")


def test_plus_sign_is_ignored():
    assert parse_decimal("+0.4") == parse_decimal("0.4")


def test_mixed_signs():
    assert parse_decimal("+-+0.4") == -parse_decimal("0.4")


def test_leading_whitespace_is_skipped():
    assert parse_decimal(" \t\n0.5") == parse_decimal("0.5")


def test_empty_string_is_zero():
    assert parse_decimal("") == 0


def test_integer_without_point():
    assert parse_decimal("7") == 7


def test_trailing_point():
    assert parse_decimal("3.") == parse_decimal("3")


def test_leading_point():
    assert math.isclose(parse_decimal(".25"), 0.25)