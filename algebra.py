"""
Exact Polynomial Algebra

Division, GCD, content and square-free decomposition for float polynomials.
Anything beyond scalar division is carried out on bounded Rationals so that
Euclidean chains reach an exact zero remainder; float round-off would
otherwise leave tiny non-zero remainders and the chains would never end.
"""
from __future__ import annotations
from functools import reduce
from typing import List, Tuple
from errors import DivisionByZero
from floats import float_gcd
from polynomial import Polynomial, ZERO
from rational import Rational, ONE

Ratios = List[Rational]


def div_rem(dividend: Polynomial, divisor: Polynomial) -> Tuple[Polynomial, Polynomial]:
    """Divide with remainder: dividend == divisor * quotient + remainder.

    Args:
        dividend: Polynomial to divide
        divisor: Non-zero polynomial

    Returns:
        (quotient, remainder) with grade(remainder) < grade(divisor)

    Raises:
        DivisionByZero: divisor is the zero polynomial
        ExactnessOverflow: a coefficient does not fit the rational width
    """
    if divisor.is_zero():
        raise DivisionByZero("division by the zero polynomial")
    if divisor.grade() == 0:
        c = divisor[0]
        return Polynomial(v / c for v in dividend.coeffs), ZERO
    if dividend.grade() < divisor.grade():
        return ZERO, dividend
    q, r = _div_ratios(dividend.to_ratios(), divisor.to_ratios())
    return Polynomial.from_ratios(q), Polynomial.from_ratios(r)


def gcd(a: Polynomial, b: Polynomial) -> Polynomial:
    """
    Greatest common divisor of two polynomials.

    The result is primitive with a positive leading coefficient. Constants
    share no non-trivial factor, so two constants give the zero polynomial,
    and a constant against a non-constant polynomial leaves it unchanged.
    """
    if a.is_constant() and b.is_constant():
        return ZERO
    if b.is_zero():
        return _to_poly(_normalized(a.to_ratios()))
    if a.is_zero():
        return _to_poly(_normalized(b.to_ratios()))
    if b.grade() == 0:
        return a
    if a.grade() == 0:
        return b
    return _to_poly(_normalized(_euclid(a.to_ratios(), b.to_ratios())))


def primitive_part(p: Polynomial) -> Tuple[Polynomial, float]:
    """Split p into (p / d, d) where d > 0 is the content of p.

    Integral coefficients use the float GCD, which is exact for them at any
    magnitude; anything else goes through Rationals.
    """
    if p.is_zero():
        return p, 0.0
    if all(c.is_integer() for c in p.coeffs):
        d = reduce(float_gcd, p.coeffs, 0.0)
        return Polynomial(c / d for c in p.coeffs), d
    ratios = p.to_ratios()
    return _to_poly(_primitive(ratios)), _content(ratios).to_float()


def square_free_part(p: Polynomial) -> Polynomial:
    """
    Remove repeated factors: p / gcd(p, p'), as a primitive polynomial.

    Example: 5(x-1)^2(x+3)(x+5)^3 -> x^3 + 7x^2 + 7x - 15
    """
    if p.is_constant():
        return p
    s = p.to_ratios()
    g = _normalized(_euclid(s, _derive(s)))
    q, r = _div_ratios(s, g)
    if r:
        raise ArithmeticError(f"gcd does not divide {p}")
    return _to_poly(_primitive(q))


def square_free_factors(p: Polynomial) -> List[Tuple[Polynomial, int]]:
    """
    Yun's square-free decomposition p = c * f1 * f2^2 * ... * fk^k.

    Returns:
        (f_i, i) pairs for every factor of positive grade, each primitive
        with a positive leading coefficient
    """
    if p.is_constant():
        return []
    f = p.to_ratios()
    df = _derive(f)
    a = _normalized(_euclid(f, df))
    b, _ = _div_ratios(f, a)
    c, _ = _div_ratios(df, a)
    d = _sub(c, _derive(b))
    factors: List[Tuple[Polynomial, int]] = []
    i = 1
    while len(b) > 1:
        a = _normalized(_euclid(b, d))
        b, _ = _div_ratios(b, a)
        c, _ = _div_ratios(d, a)
        d = _sub(c, _derive(b))
        if len(a) > 1:
            factors.append((_to_poly(a), i))
        i += 1
    return factors


def _to_poly(r: Ratios) -> Polynomial:
    return Polynomial.from_ratios(r)


def _trim(v: Ratios) -> Ratios:
    while v and v[-1].is_zero():
        v.pop()
    return v


def _derive(v: Ratios) -> Ratios:
    return _trim([c * i for i, c in enumerate(v) if i > 0])


def _sub(a: Ratios, b: Ratios) -> Ratios:
    n = max(len(a), len(b))
    zero = Rational(0)
    a = a + [zero] * (n - len(a))
    b = b + [zero] * (n - len(b))
    return _trim([x - y for x, y in zip(a, b)])


def _content(v: Ratios) -> Rational:
    return reduce(Rational.gcd, v, Rational(0))


def _primitive(v: Ratios) -> Ratios:
    if not v:
        return v
    d = _content(v)
    return [c / d for c in v]


def _normalized(v: Ratios) -> Ratios:
    """Primitive part with a positive leading coefficient."""
    v = _primitive(v)
    if v and v[-1].sign() < 0:
        return [-c for c in v]
    return v


def _div_ratios(lhs: Ratios, rhs: Ratios) -> Tuple[Ratios, Ratios]:
    if not rhs:
        raise DivisionByZero("division by the zero polynomial")
    if len(lhs) < len(rhs):
        return [], list(lhs)
    if len(rhs) == 1:
        return [c / rhs[0] for c in lhs], []
    if len(rhs) == 2:
        q, rem = _horner_div(lhs, rhs)
        return q, ([] if rem.is_zero() else [rem])
    return _long_div(lhs, rhs)


def _horner_div(lhs: Ratios, rhs: Ratios) -> Tuple[Ratios, Rational]:
    """Synthetic division by c0 + c1*x in one pass from the top."""
    a = -rhs[0] / rhs[1]
    v = list(lhs)
    for k in range(len(v) - 2, -1, -1):
        v[k] = v[k] + a * v[k + 1]
    rem = v[0]
    q = v[1:]
    if rhs[1] != ONE:
        q = [c / rhs[1] for c in q]
    return q, rem


def _long_div(lhs: Ratios, rhs: Ratios) -> Tuple[Ratios, Ratios]:
    rem = list(lhs)
    r_g = len(rhs) - 1
    quot = [Rational(0)] * (len(lhs) - len(rhs) + 1)
    while len(rem) >= len(rhs):
        l_g = len(rem) - 1
        c = rem[l_g] / rhs[r_g]
        for k in range(r_g + 1):
            rem[l_g - k] = rem[l_g - k] - c * rhs[r_g - k]
        # the leading term is now exactly zero
        _trim(rem)
        quot[l_g - r_g] = c
    return quot, rem


def _euclid(r0: Ratios, r1: Ratios) -> Ratios:
    if len(r0) < len(r1):
        r0, r1 = r1, r0
    while r1:
        _, rem = _div_ratios(r0, r1)
        # primitive remainders keep the coefficients small
        r0, r1 = r1, _primitive(rem)
    return r0
