"""Scalar helpers for float coefficients."""
from __future__ import annotations
import math
from config import DEFAULT_CONFIG, Config


def near_zero(value: float, config: Config = DEFAULT_CONFIG) -> bool:
    return -config.tolerance < value < config.tolerance


def negate(value: float) -> float:
    """Negate without producing a signed zero."""
    if value == 0.0:
        return 0.0
    return -value


def float_gcd(a: float, b: float) -> float:
    """Euclidean GCD of two floats.

    Exact for integral values of any magnitude; the result is non-negative.
    """
    r0, r1 = abs(a), abs(b)
    if r0 == 0.0:
        return r1
    if r1 == 0.0:
        return r0
    if r0 < r1:
        r0, r1 = r1, r0
    while r1 != 0.0:
        r0, r1 = r1, math.fmod(r0, r1)
    return r0


def exponent(value: float) -> int:
    """Base-2 exponent e of a finite non-zero float, with 2**e <= |value| < 2**(e+1)."""
    if value == 0.0 or not math.isfinite(value):
        raise ValueError(f"exponent undefined for {value!r}")
    return math.frexp(value)[1] - 1


def format_number(value: float) -> str:
    # -0.0 prints as 0
    if value == 0.0:
        return "0"
    if value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    return repr(value)
