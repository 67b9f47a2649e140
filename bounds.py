from __future__ import annotations
import math
from typing import Optional
from floats import exponent
from polynomial import Polynomial


def root_bound(p: Polynomial) -> Optional[float]:
    """Power of two B with every real root of p inside [-B, B].

    Fujiwara's bound 2 * max |c_i / c_n|^(1/(n-i)), evaluated on base-2
    exponents only so each candidate rounds up to a power of two.
    Returns None for constant polynomials.
    """
    n = p.grade()
    if n <= 0:
        return None
    e_lead = exponent(p.lead())
    best = None
    for i, c in p.items():
        if i == n or c == 0.0:
            continue
        # |c_i / c_n| < 2^(e_i - e_n + 1)
        k = -((e_lead - exponent(c) - 1) // (n - i))
        if best is None or k > best:
            best = k
    if best is None:
        return 1.0
    return math.ldexp(1.0, best + 1)
