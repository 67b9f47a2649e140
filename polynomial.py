from __future__ import annotations
import math
from typing import Iterable, Iterator, List, Sequence, Tuple
from dataclasses import dataclass
from errors import MalformedInput
from floats import format_number
from rational import Rational

MAX_GRADE = 2**31 - 1


@dataclass(frozen=True, init=False)
class Polynomial:
    """Dense univariate polynomial, coeffs[i] multiplies x^i.

    The highest stored coefficient is never zero; the empty tuple is the
    zero polynomial with grade -1.
    """

    coeffs: Tuple[float, ...]

    def __init__(self, coeffs: Iterable[float] = ()) -> None:
        values: List[float] = []
        for c in coeffs:
            try:
                v = float(c)
            except (TypeError, ValueError):
                raise MalformedInput(f"coefficient {c!r} is not a number") from None
            if not math.isfinite(v):
                raise MalformedInput(f"coefficient {c!r} is not finite")
            values.append(v)
        # trailing entries are the leading-degree terms
        while values and values[-1] == 0.0:
            values.pop()
        if len(values) - 1 > MAX_GRADE:
            raise MalformedInput(f"grade {len(values) - 1} exceeds {MAX_GRADE}")
        object.__setattr__(self, "coeffs", tuple(values))

    @staticmethod
    def from_ratios(ratios: Sequence[Rational]) -> "Polynomial":
        return Polynomial(r.to_float() for r in ratios)

    def to_ratios(self) -> List[Rational]:
        """Exact rational image of the coefficients.

        Raises ExactnessOverflow when a coefficient needs more than the
        rational bit width.
        """
        return [Rational.from_float(c) for c in self.coeffs]

    def grade(self) -> int:
        return len(self.coeffs) - 1

    def is_zero(self) -> bool:
        return len(self.coeffs) == 0

    def is_constant(self) -> bool:
        return self.grade() <= 0

    def lead(self) -> float:
        return self.coefficient(self.grade())

    def items(self) -> Iterator[Tuple[int, float]]:
        return enumerate(self.coeffs)

    def coefficient(self, i: int) -> float:
        if i == 0 and self.is_zero():
            return 0.0
        if not 0 <= i <= self.grade():
            raise IndexError(f"coefficient index {i} out of range for grade {self.grade()}")
        return self.coeffs[i]

    def __getitem__(self, i: int) -> float:
        return self.coefficient(i)

    def __len__(self) -> int:
        return len(self.coeffs)

    def evaluate(self, x: float) -> float:
        # Horner, highest degree first
        acc = 0.0
        for c in reversed(self.coeffs):
            acc = acc * x + c
        return acc

    def derivative(self) -> "Polynomial":
        return Polynomial(i * c for i, c in self.items() if i > 0)

    def is_palindrome(self) -> bool:
        n = self.grade()
        return all(c == self.coeffs[n - i] for i, c in self.items())

    def to_string(self, var: str = "x") -> str:
        if self.is_zero():
            return "0"
        parts: List[str] = []
        n = self.grade()
        for i in range(n, -1, -1):
            c = self.coeffs[i]
            if c == 0.0:
                continue
            term = ""
            if i != n and c >= 0:
                term += "+"
            if c != 1.0 or i == 0:
                term += format_number(c)
            if i > 0:
                term += var
            if i > 1:
                term += f"^{i}"
            parts.append(term)
        return "".join(parts)

    def __str__(self) -> str:
        return self.to_string()


ZERO = Polynomial()
