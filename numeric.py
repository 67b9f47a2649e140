"""
Numeric Root Isolation

Fallback for polynomials no closed form or structural reduction applies to.
The real roots of p' cut [-B, B] (B from root_bound) into pieces on which p
is monotone, so every piece holds at most one root. A piece whose endpoint
values change sign is refined with Brent's method; an endpoint where p is
exactly zero is a root as it stands. Nothing is reported without one of
those two certificates.
"""
from __future__ import annotations
import logging
from typing import Callable, List, Optional
import numpy as np
from numpy.polynomial import polynomial as P
from bounds import root_bound
from config import DEFAULT_CONFIG, Config
from floats import negate
from interval import Interval
from polynomial import Polynomial

_logger = logging.getLogger(__name__)


def find_root(
    f: Callable[[float], float], interval: Interval, tol: float = 1e-12, max_iter: int = 200
) -> Optional[float]:
    """Find a root of f(x) = 0 in a bounded interval using Brent's method.

    Returns None if the endpoint values do not bracket a root.
    """
    if interval.is_empty() or not interval.is_bounded():
        return None
    a, b = float(interval.a), float(interval.b)
    fa = f(a)
    fb = f(b)
    if fa == 0.0:
        return a
    if fb == 0.0:
        return b
    if (fa < 0) == (fb < 0):
        return None  # Same sign, no root guaranteed
    # b is the better guess
    if abs(fa) < abs(fb):
        a, b = b, a
        fa, fb = fb, fa
    c = a
    fc = fa
    mflag = True
    d = a
    for _ in range(max_iter):
        if fb == 0.0 or abs(b - a) < tol * max(1.0, abs(b)):
            return b
        if fa != fc and fb != fc:
            # Inverse quadratic interpolation
            s = (
                (a * fb * fc) / ((fa - fb) * (fa - fc))
                + (b * fa * fc) / ((fb - fa) * (fb - fc))
                + (c * fa * fb) / ((fc - fa) * (fc - fb))
            )
        else:
            # Secant method; fa and fb have opposite signs so they differ
            s = b - fb * (b - a) / (fb - fa)
        # Fall back to bisection when interpolation misbehaves
        q = (3 * a + b) / 4
        condition1 = not (min(q, b) < s < max(q, b))
        condition2 = mflag and abs(s - b) >= abs(b - c) / 2
        condition3 = not mflag and abs(s - b) >= abs(c - d) / 2
        condition4 = mflag and abs(b - c) < tol
        condition5 = not mflag and abs(c - d) < tol
        if condition1 or condition2 or condition3 or condition4 or condition5:
            s = (a + b) / 2.0
            mflag = True
        else:
            mflag = False
        fs = f(s)
        if fs == 0.0:
            return s
        d = c
        c = b
        fc = fb
        if (fa < 0) != (fs < 0):
            b = s
            fb = fs
        else:
            a = s
            fa = fs
        if abs(fa) < abs(fb):
            a, b = b, a
            fa, fb = fb, fa
    # The bracket still holds a sign change, so b is the best estimate
    _logger.debug("brent stopped after %d iterations in %s", max_iter, interval)
    return b


def real_roots(p: Polynomial, config: Config = DEFAULT_CONFIG) -> List[float]:
    """
    Real roots of p in increasing order, each listed once.

    Args:
        p: Polynomial, ideally square-free; a repeated root of even
           multiplicity has no sign change and can only be found when it
           lands exactly on a partition point
        config: Tolerances for refinement and merging

    Returns:
        Sorted list of distinct real roots
    """
    n = p.grade()
    if n <= 0:
        return []
    if n == 1:
        return [negate(p[0]) / p[1]]
    bound = root_bound(p)
    span = Interval.symmetric(bound)
    critical = sorted({x for x in real_roots(p.derivative(), config) if span.contains(x)})
    points = [-bound] + [x for x in critical if -bound < x < bound] + [bound]
    values = P.polyval(np.asarray(points), np.asarray(p.coeffs))
    roots: List[float] = [x for x, fx in zip(points, values) if fx == 0.0]
    for i in range(len(points) - 1):
        fa, fb = values[i], values[i + 1]
        if fa == 0.0 or fb == 0.0 or np.sign(fa) == np.sign(fb):
            continue
        root = find_root(
            p.evaluate,
            Interval.closed(points[i], points[i + 1]),
            config.root_tolerance,
            config.max_iterations,
        )
        if root is not None:
            roots.append(root)
    return _merge(sorted(roots), config.root_tolerance)


def _merge(roots: List[float], tol: float) -> List[float]:
    merged: List[float] = []
    for r in roots:
        if merged and abs(r - merged[-1]) <= 10 * tol * max(1.0, abs(r)):
            continue
        merged.append(r)
    return merged
