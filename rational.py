from __future__ import annotations
import math
from fractions import Fraction
from errors import DivisionByZero, ExactnessOverflow

RATIONAL_BITS = 32
INT_MIN = -(1 << (RATIONAL_BITS - 1))
INT_MAX = (1 << (RATIONAL_BITS - 1)) - 1

def _checked(f: Fraction) -> Fraction:
	# Fraction keeps the denominator positive and the value reduced
	if not (INT_MIN <= f.numerator <= INT_MAX and f.denominator <= INT_MAX):
		raise ExactnessOverflow(f"{f} does not fit a {RATIONAL_BITS}-bit rational")
	return f

class Rational:
	"""Exact fraction with a bounded numerator and denominator.

	Every result is checked against the bit width; nothing wraps around.
	"""
	__slots__ = ("_f",)
	def __init__(self, num: int | Fraction, den: int | None = None) -> None:
		if isinstance(num, Fraction):
			self._f = _checked(num)
		else:
			if den == 0:
				raise DivisionByZero("zero denominator")
			self._f = _checked(Fraction(num, 1 if den is None else den))
	@staticmethod
	def from_float(value: float) -> Rational:
		if not math.isfinite(value):
			raise ExactnessOverflow(f"{value!r} has no exact rational value")
		num, den = value.as_integer_ratio()
		return Rational(Fraction(num, den))
	@staticmethod
	def gcd(a: Rational, b: Rational) -> Rational:
		"""Largest positive rational d with a/d and b/d both integers."""
		if a.is_zero():
			return abs(b)
		if b.is_zero():
			return abs(a)
		num = math.gcd(a._f.numerator, b._f.numerator)
		den = a._f.denominator * b._f.denominator // math.gcd(a._f.denominator, b._f.denominator)
		return Rational(Fraction(num, den))
	def __add__(self, other: Rational) -> Rational:
		return Rational(self._f + other._f)
	def __sub__(self, other: Rational) -> Rational:
		return Rational(self._f - other._f)
	def __mul__(self, other: Rational | int) -> Rational:
		if isinstance(other, Rational):
			return Rational(self._f * other._f)
		return Rational(self._f * other)
	def __truediv__(self, other: Rational | int) -> Rational:
		if isinstance(other, Rational):
			if other._f == 0:
				raise DivisionByZero("division by zero")
			return Rational(self._f / other._f)
		if other == 0:
			raise DivisionByZero("division by zero")
		return Rational(self._f / other)
	def __neg__(self) -> Rational:
		return Rational(-self._f)
	def __abs__(self) -> Rational:
		return Rational(abs(self._f))
	def __eq__(self, other: object) -> bool:
		if not isinstance(other, Rational):
			return False
		return self._f == other._f
	def __hash__(self) -> int:
		return hash(self._f)
	def __lt__(self, other: Rational) -> bool:
		return self._f < other._f
	def __le__(self, other: Rational) -> bool:
		return self._f <= other._f
	def __gt__(self, other: Rational) -> bool:
		return self._f > other._f
	def __ge__(self, other: Rational) -> bool:
		return self._f >= other._f
	def is_zero(self) -> bool:
		return self._f == 0
	def sign(self) -> int:
		return (self._f > 0) - (self._f < 0)
	def numerator(self) -> int:
		return self._f.numerator
	def denominator(self) -> int:
		return self._f.denominator
	def to_float(self) -> float:
		return self._f.numerator / self._f.denominator
	def to_string(self) -> str:
		if self._f.denominator == 1:
			return str(self._f.numerator)
		return f"{self._f.numerator}/{self._f.denominator}"
	def __str__(self) -> str:
		return self.to_string()
	def __repr__(self) -> str:
		return f"Rational({self.to_string()})"

ZERO = Rational(0)
ONE = Rational(1)
