"""
Root Finder Module

Real roots of float polynomials by closed forms and structural reductions.
Linear and quadratic equations are solved directly; higher grades go through
biquadratic, binomial and palindromic reductions before falling back to
numeric isolation.
"""
from __future__ import annotations
import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional, Tuple
from algebra import div_rem, square_free_factors
from bounds import root_bound
from config import DEFAULT_CONFIG, Config
from errors import ExactnessOverflow, Unsupported
from floats import exponent, format_number, near_zero, negate
from numeric import real_roots
from polynomial import Polynomial

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Root:
    """A real root and how many times it divides the polynomial."""
    value: float
    multiplicity: int = 1

    def __post_init__(self) -> None:
        if self.multiplicity < 1:
            raise ValueError(f"multiplicity must be at least 1, got {self.multiplicity}")

    def __str__(self) -> str:
        if self.multiplicity > 1:
            return f"{format_number(self.value)} (mul. {self.multiplicity})"
        return format_number(self.value)


class ReportKind(Enum):
    ALL_REALS = "all_reals"
    NO_ROOTS = "no_roots"
    FOUND = "found"
    UNSUPPORTED = "unsupported"


@dataclass(frozen=True)
class RootReport:
    """Outcome of a root search.

    FOUND always carries at least one root; a search that proves there are
    no real roots reports NO_ROOTS instead. UNSUPPORTED carries the reason.
    """
    kind: ReportKind
    roots: Tuple[Root, ...] = ()
    reason: str = ""

    @staticmethod
    def all_reals() -> "RootReport":
        """Every x is a root (zero polynomial)."""
        return RootReport(ReportKind.ALL_REALS)

    @staticmethod
    def no_roots() -> "RootReport":
        return RootReport(ReportKind.NO_ROOTS)

    @staticmethod
    def found(roots: Iterable[Root]) -> "RootReport":
        merged = _merge(roots)
        if not merged:
            return RootReport.no_roots()
        return RootReport(ReportKind.FOUND, tuple(merged))

    @staticmethod
    def unsupported(reason: str) -> "RootReport":
        return RootReport(ReportKind.UNSUPPORTED, reason=reason)

    def append(self, root: Root) -> "RootReport":
        if self.kind in (ReportKind.ALL_REALS, ReportKind.UNSUPPORTED):
            return self
        return RootReport.found(self.roots + (root,))

    def values(self) -> List[float]:
        return [r.value for r in self.roots]

    def total_multiplicity(self) -> int:
        return sum(r.multiplicity for r in self.roots)


def _merge(roots: Iterable[Root]) -> List[Root]:
    # equal values collapse into one root, first position wins
    merged: List[Root] = []
    for r in roots:
        for i, m in enumerate(merged):
            if m.value == r.value:
                merged[i] = Root(m.value, m.multiplicity + r.multiplicity)
                break
        else:
            merged.append(r)
    return merged


class RootSolver:
    """Real root finder for univariate float polynomials."""

    def __init__(self, config: Config = DEFAULT_CONFIG) -> None:
        self.config = config

    def solve(self, p: Polynomial) -> RootReport:
        """
        Find the real roots of p.

        This is the main entry point. Structural reductions that need exact
        arithmetic may exceed the rational width; such failures, and
        polynomials no method handles, come back as UNSUPPORTED instead of
        raising.

        Args:
            p: Polynomial to solve

        Returns:
            RootReport describing the real roots
        """
        _logger.debug("solving %s (grade %d, root bound %s)", p, p.grade(), root_bound(p))
        try:
            return self.solve_polynomial(p)
        except (ExactnessOverflow, Unsupported) as exc:
            _logger.warning("cannot solve %s: %s", p, exc)
            return RootReport.unsupported(str(exc))

    def solve_polynomial(self, p: Polynomial) -> RootReport:
        """Dispatch on grade. May raise ExactnessOverflow or Unsupported."""
        grade = p.grade()
        if grade == -1:
            return RootReport.all_reals()
        if grade == 0:
            return RootReport.no_roots()
        if grade == 1:
            return self.solve_linear(p[0], p[1])
        if grade == 2:
            return self.solve_quadratic(p[0], p[1], p[2])
        return self.solve_general(p)

    def solve_linear(self, c0: float, c1: float) -> RootReport:
        """c1*x + c0 = 0 -> x = -c0/c1"""
        return RootReport.found([Root(negate(c0) / c1)])

    def solve_quadratic(self, c0: float, c1: float, c2: float) -> RootReport:
        """
        Solve c2*x^2 + c1*x + c0 = 0.

        The coefficients are first scaled by a power of two so the largest
        has magnitude in [1, 2); the discriminant then cannot overflow and the
        scaling itself is exact. Distinct roots use the cancellation-free
        form q = -(b + sign(b)*sqrt(delta))/2, x1 = q/a, x2 = c/q.

        A zero discriminant gives one root of multiplicity 2; a negative one
        gives no real roots. A root too large to represent is dropped.
        """
        k = exponent(max(abs(c0), abs(c1), abs(c2)))
        a, b, c = math.ldexp(c2, -k), math.ldexp(c1, -k), math.ldexp(c0, -k)
        if a == 0.0:
            # c2 underflowed next to c1; the other root is beyond float range
            return self.solve_linear(c0, c1)
        delta = b * b - 4.0 * a * c
        if delta > 0:
            q = -(b + math.copysign(math.sqrt(delta), b)) / 2.0
            candidates = [q / a, c / q if c != 0.0 else 0.0]
            return RootReport.found(
                Root(x) for x in sorted(candidates) if math.isfinite(x)
            )
        if delta == 0:
            return RootReport.found([Root(negate(b) / (2.0 * a), 2)])
        return RootReport.no_roots()

    def solve_general(self, p: Polynomial) -> RootReport:
        """Grade >= 3: the first structural match wins, numeric isolation last."""
        for method in (self.solve_biquadratic, self.solve_binomial, self.solve_palindrome):
            report = method(p)
            if report is not None:
                _logger.debug("%s solved by %s", p, method.__name__)
                return report
        return self.solve_numeric(p)

    def solve_biquadratic(self, p: Polynomial) -> Optional[RootReport]:
        """
        c4*x^4 + c2*x^2 + c0 = 0 via y = x^2.

        Each y root of multiplicity m gives x = -sqrt(y), sqrt(y) for y > 0,
        x = 0 with multiplicity 2m for y = 0, and nothing for y < 0.
        """
        if p.grade() != 4 or p[1] != 0.0 or p[3] != 0.0:
            return None
        roots: List[Root] = []
        for r in self.solve_quadratic(p[0], p[2], p[4]).roots:
            if r.value > 0:
                s = math.sqrt(r.value)
                roots.append(Root(-s, r.multiplicity))
                roots.append(Root(s, r.multiplicity))
            elif r.value == 0:
                # x^2 = 0 doubles the multiplicity of y = 0
                roots.append(Root(0.0, 2 * r.multiplicity))
        return RootReport.found(roots)

    def solve_binomial(self, p: Polynomial) -> Optional[RootReport]:
        """
        c0 + cn*x^n = 0.

        The n complex roots are r*e^(i*phi_k) with r = |c0/cn|^(1/n) and
        phi_k = (phi0 + 2*pi*k)/n; those with |sin(phi_k)| below
        config.tolerance are real.
        """
        n = p.grade()
        if any(p[i] != 0.0 for i in range(1, n)):
            return None
        if p[0] == 0.0:
            return RootReport.found([Root(0.0, n)])
        ratio = negate(p[0]) / p[n]
        r = abs(ratio) ** (1.0 / n)
        phi0 = math.acos(math.copysign(1.0, ratio))
        roots: List[Root] = []
        for k in range(n):
            phi = (phi0 + 2 * math.pi * k) / n
            if near_zero(abs(math.sin(phi)), self.config):
                roots.append(Root(r * math.cos(phi)))
        return RootReport.found(roots)

    def solve_palindrome(self, p: Polynomial) -> Optional[RootReport]:
        """
        Palindromic and anti-palindromic reductions.

        Odd palindromic polynomials are divisible by (x + 1) and
        anti-palindromic ones (c_i == -c_(n-i)) by (x - 1); the quotient is
        solved recursively. Grade 4 quasi-palindromes go through
        y = x + m/x.
        """
        n = p.grade()
        if n % 2 == 1 and p.is_palindrome():
            return self._deflate(p, -1.0)
        if n == 4:
            report = self.solve_quasi_palindrome(p)
            if report is not None:
                return report
        if all(c == negate(p[n - i]) for i, c in p.items()):
            return self._deflate(p, 1.0)
        return None

    def solve_quasi_palindrome(self, p: Polynomial) -> Optional[RootReport]:
        """
        c4*x^4 + c3*x^3 + c2*x^2 + c1*x + c0 with m = sqrt(c0/c4) == c1/c3.

        Dividing by x^2 and substituting y = x + m/x leaves
        c4*y^2 + c3*y + (c2 - 2*c4*m) = 0; each y root then gives
        x^2 - y*x + m = 0.
        """
        if p[0] == 0.0 or p[3] == 0.0 or p[0] / p[4] < 0:
            return None
        m = math.sqrt(p[0] / p[4])
        if m != p[1] / p[3]:
            return None
        roots: List[Root] = []
        for y in self.solve_quadratic(p[2] - 2.0 * p[4] * m, p[3], p[4]).roots:
            for x in self.solve_quadratic(m, -y.value, 1.0).roots:
                roots.append(Root(x.value, x.multiplicity * y.multiplicity))
        return RootReport.found(roots)

    def solve_numeric(self, p: Polynomial) -> RootReport:
        """
        Isolate roots numerically, one square-free factor at a time.

        The factor index from the square-free decomposition is the
        multiplicity of every root it contributes. When the exact
        decomposition does not fit the rational width, p itself is isolated
        and every root gets multiplicity 1.
        """
        if not self.config.numeric_fallback:
            raise Unsupported(f"no closed form or structure for grade {p.grade()}")
        try:
            factors = square_free_factors(p)
        except ExactnessOverflow as exc:
            # float-only isolation; repeated roots are reported once
            _logger.debug("square-free split of %s failed (%s), isolating roots directly", p, exc)
            return RootReport.found(Root(v) for v in real_roots(p, self.config))
        roots: List[Root] = []
        for factor, multiplicity in factors:
            if factor.grade() <= 2:
                found = self.solve_polynomial(factor).roots
                roots.extend(Root(r.value, r.multiplicity * multiplicity) for r in found)
            else:
                roots.extend(Root(v, multiplicity) for v in real_roots(factor, self.config))
        roots.sort(key=lambda r: r.value)
        return RootReport.found(roots)

    def _deflate(self, p: Polynomial, root: float) -> RootReport:
        quotient, rem = div_rem(p, Polynomial([negate(root), 1.0]))
        if not rem.is_zero():
            raise ArithmeticError(f"x - {format_number(root)} does not divide {p}")
        return self.solve_polynomial(quotient).append(Root(root))


# Create a default instance for the module-level helpers
_default_solver = RootSolver()


def find_roots(p: Polynomial, config: Optional[Config] = None) -> RootReport:
    if config is None:
        return _default_solver.solve(p)
    return RootSolver(config).solve(p)
