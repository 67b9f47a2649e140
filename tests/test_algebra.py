"""Tests for exact polynomial division, GCD and square-free decomposition."""

import pytest

from algebra import div_rem, gcd, primitive_part, square_free_factors, square_free_part
from errors import DivisionByZero, ExactnessOverflow
from polynomial import ZERO, Polynomial


def mul(a: Polynomial, b: Polynomial) -> Polynomial:
    if a.is_zero() or b.is_zero():
        return ZERO
    out = [0.0] * (len(a) + len(b) - 1)
    for i, x in a.items():
        for j, y in b.items():
            out[i + j] += x * y
    return Polynomial(out)


def add(a: Polynomial, b: Polynomial) -> Polynomial:
    n = max(len(a), len(b))
    return Polynomial(
        (a.coeffs[i] if i < len(a) else 0.0) + (b.coeffs[i] if i < len(b) else 0.0)
        for i in range(n)
    )


class TestDivRem:
    def test_synthetic_division(self):
        q, r = div_rem(Polynomial([2, 1, -2, 8]), Polynomial([-1, 2]))
        assert q == Polynomial([1, 1, 4])
        assert r == Polynomial([3])

    def test_long_division(self):
        q, r = div_rem(Polynomial([2, 1, 0, 2, 1]), Polynomial([1, 1, 1]))
        assert q == Polynomial([-2, 1, 1])
        assert r == Polynomial([4, 2])

        q, r = div_rem(Polynomial([1, 0, 1, 0, 1, 1]), Polynomial([1, 0, 1]))
        assert q == Polynomial([0, -1, 1, 1])
        assert r == Polynomial([1, 1])

    def test_exact_division(self):
        q, r = div_rem(Polynomial([1, 2, 3, 2, 1]), Polynomial([1, 1, 1]))
        assert q == Polynomial([1, 1, 1])
        assert r == ZERO

    def test_scalar_division(self):
        q, r = div_rem(Polynomial([2, 4]), Polynomial([2]))
        assert q == Polynomial([1, 2])
        assert r == ZERO

    def test_small_dividend(self):
        q, r = div_rem(Polynomial([1, 1]), Polynomial([1, 0, 1]))
        assert q == ZERO
        assert r == Polynomial([1, 1])

    def test_zero_divisor(self):
        with pytest.raises(DivisionByZero):
            div_rem(Polynomial([1, 2]), ZERO)
        with pytest.raises(ZeroDivisionError):
            div_rem(Polynomial([1, 2]), Polynomial([0]))

    def test_inexact_coefficients(self):
        with pytest.raises(ExactnessOverflow):
            div_rem(Polynomial([0.1, 1, 1]), Polynomial([1, 1]))

    @pytest.mark.parametrize("dividend,divisor", [
        ([5, -3, 0, 7, 2], [1, -2]),
        ([1, 2, 3, 4, 5, 6], [3, 0, 1]),
        ([-8, 0, 0, 1], [2, 1, 1, 1]),
        ([0.5, 0.25, 2], [4, 8]),
    ])
    def test_reconstructs_dividend(self, dividend, divisor):
        a, b = Polynomial(dividend), Polynomial(divisor)
        q, r = div_rem(a, b)
        assert r.grade() < b.grade()
        back = add(mul(b, q), r)
        assert back.coeffs == pytest.approx(a.coeffs)


class TestGcd:
    def test_common_linear_factor(self):
        assert gcd(Polynomial([0, -2, 1]), Polynomial([-4, -2, 0, 1])) == Polynomial([-2, 1])
        assert gcd(Polynomial([4, -3, 1, -3, 1]), Polynomial([-1, 0, 0, 1])) == Polynomial([-1, 1])

    def test_divides_both(self):
        a = Polynomial([1875, -2000, -1025, 640, 425, 80, 5])
        b = a.derivative()
        g = gcd(a, b)
        assert g.grade() == 3
        assert div_rem(a, g)[1].is_zero()
        assert div_rem(b, g)[1].is_zero()

    def test_constants(self):
        assert gcd(Polynomial([3]), Polynomial([5])) == ZERO
        assert gcd(ZERO, ZERO) == ZERO

    def test_constant_leaves_polynomial_unchanged(self):
        p = Polynomial([2, 4, 2])
        assert gcd(p, Polynomial([7])) == p
        assert gcd(Polynomial([7]), p) == p

    def test_zero_operand_normalizes(self):
        assert gcd(Polynomial([-2, -4, -2]), ZERO) == Polynomial([1, 2, 1])

    def test_coprime(self):
        assert gcd(Polynomial([-1, 0, 1]), Polynomial([1, 0, 1])) == Polynomial([1])


class TestPrimitivePart:
    def test_integral(self):
        assert primitive_part(Polynomial([2, 4, 6])) == (Polynomial([1, 2, 3]), 2.0)

    def test_keeps_sign(self):
        assert primitive_part(Polynomial([-2, -4])) == (Polynomial([-1, -2]), 2.0)

    def test_fractions(self):
        assert primitive_part(Polynomial([0.5, 1.5])) == (Polynomial([1, 3]), 0.5)

    def test_large_integers(self):
        assert primitive_part(Polynomial([1e20, 3e20])) == (Polynomial([1, 3]), 1e20)

    def test_zero(self):
        assert primitive_part(ZERO) == (ZERO, 0.0)


class TestSquareFree:
    def test_square(self):
        assert square_free_part(Polynomial([1, 2, 1])) == Polynomial([1, 1])
        assert square_free_part(Polynomial([1, 2, 3, 2, 1])) == Polynomial([1, 1, 1])

    def test_mixed_multiplicities(self):
        # 5(x-1)^2(x+3)(x+5)^3
        p = Polynomial([1875, -2000, -1025, 640, 425, 80, 5])
        s = square_free_part(p)
        assert s == Polynomial([-15, 7, 7, 1])
        assert gcd(s, s.derivative()).grade() == 0

    def test_already_square_free(self):
        assert square_free_part(Polynomial([-1, 0, 1])) == Polynomial([-1, 0, 1])

    def test_constants_unchanged(self):
        assert square_free_part(Polynomial([5])) == Polynomial([5])
        assert square_free_part(ZERO) == ZERO


class TestSquareFreeFactors:
    def test_yun(self):
        p = Polynomial([1875, -2000, -1025, 640, 425, 80, 5])
        assert square_free_factors(p) == [
            (Polynomial([3, 1]), 1),
            (Polynomial([-1, 1]), 2),
            (Polynomial([5, 1]), 3),
        ]

    def test_irreducible_square(self):
        assert square_free_factors(Polynomial([1, 0, 2, 0, 1])) == [(Polynomial([1, 0, 1]), 2)]

    def test_square_free_input(self):
        assert square_free_factors(Polynomial([-2, 0, 1])) == [(Polynomial([-2, 0, 1]), 1)]

    def test_constant(self):
        assert square_free_factors(Polynomial([4])) == []
