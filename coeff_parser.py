from __future__ import annotations
import re
from fractions import Fraction
from typing import Iterable, List
from errors import MalformedInput
from polynomial import Polynomial

# integer or decimal numerator, optional "/denominator"
_FRACTION = re.compile(r"^([+-]?\d+(?:\.\d*)?|[+-]?\.\d+)/(\d+)$")


def parse_number(token: str) -> float:
	"""Parse one coefficient literal: a float literal or a p/q fraction."""
	m = _FRACTION.match(token)
	if m:
		den = int(m.group(2))
		if den == 0:
			raise MalformedInput(f"zero denominator in {token!r}")
		return float(Fraction(m.group(1)) / den)
	try:
		return float(token)
	except ValueError:
		raise MalformedInput(f"not a number: {token!r}") from None


def parse_coefficients(tokens: Iterable[str]) -> Polynomial:
	"""Build a polynomial from coefficients written highest degree first."""
	values: List[float] = [parse_number(t) for t in tokens]
	values.reverse()
	return Polynomial(values)


def parse_line(text: str) -> Polynomial:
	return parse_coefficients(text.split())
