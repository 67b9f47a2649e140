"""Tests for the scalar float helpers."""

import math

import pytest

from config import Config
from floats import exponent, float_gcd, format_number, near_zero, negate


class TestNearZero:
    def test_default_tolerance(self):
        assert near_zero(0.0)
        assert near_zero(1e-16)
        assert near_zero(-1e-16)
        assert not near_zero(1e-15)
        assert not near_zero(-0.5)

    def test_custom_tolerance(self):
        loose = Config(tolerance=1e-3)
        assert near_zero(5e-4, loose)
        assert not near_zero(5e-3, loose)


class TestNegate:
    def test_zero_stays_positive(self):
        assert math.copysign(1.0, negate(0.0)) == 1.0
        assert math.copysign(1.0, negate(-0.0)) == 1.0

    def test_flips_sign(self):
        assert negate(2.5) == -2.5
        assert negate(-3.0) == 3.0


class TestFloatGcd:
    def test_integers(self):
        assert float_gcd(12.0, 18.0) == 6.0
        assert float_gcd(-4.0, 6.0) == 2.0

    def test_zero_operands(self):
        assert float_gcd(0.0, 5.0) == 5.0
        assert float_gcd(5.0, 0.0) == 5.0
        assert float_gcd(0.0, 0.0) == 0.0

    def test_large_integers(self):
        assert float_gcd(1e20, 3e20) == 1e20


class TestExponent:
    @pytest.mark.parametrize("value,expected", [
        (1.0, 0), (2.0, 1), (3.0, 1), (0.5, -1), (-8.0, 3), (1e6, 19),
    ])
    def test_values(self, value, expected):
        assert exponent(value) == expected

    @pytest.mark.parametrize("value", [0.0, math.inf, math.nan])
    def test_undefined(self, value):
        with pytest.raises(ValueError):
            exponent(value)


class TestFormatNumber:
    def test_integral(self):
        assert format_number(2.0) == "2"
        assert format_number(-3.0) == "-3"

    def test_negative_zero(self):
        assert format_number(-0.0) == "0"

    def test_fraction(self):
        assert format_number(2.5) == "2.5"
        assert format_number(-0.125) == "-0.125"
