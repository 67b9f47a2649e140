"""Exception hierarchy for polynomial operations."""


class PolynomialError(Exception):
    """Base class for every error raised by the polynomial core."""

    pass


class MalformedInput(PolynomialError, ValueError):
    """Invalid coefficient data.

    Raised for unparseable tokens, non-numeric or non-finite coefficients,
    and coefficient sequences longer than the supported grade.
    """

    pass


class DivisionByZero(PolynomialError, ZeroDivisionError):
    """Division by the zero polynomial or by a zero rational."""

    pass


class ExactnessOverflow(PolynomialError, OverflowError):
    """A value does not fit the bounded-width rational format.

    Raised when converting a float whose exact binary value needs a wider
    numerator or denominator, and when an exact operation produces one.
    """

    pass


class Unsupported(PolynomialError):
    """No implemented method can find the roots of a polynomial."""

    pass
