from math import inf
from typing import Union

Number = Union[int, float]


class Interval:
    """Real interval with optionally open endpoints, used to bracket roots."""

    a: Number
    b: Number
    left_open: bool
    right_open: bool

    @staticmethod
    def closed(l: Number, r: Number):
        return Interval(l, r, False, False)

    @staticmethod
    def symmetric(radius: Number):
        return Interval(-radius, radius, False, False)

    def __init__(self, l: Number, r: Number, lo: bool = False, ro: bool = False):
        self.a = l
        self.b = r
        self.left_open = lo
        self.right_open = ro

    def is_empty(self):
        return self.a > self.b or (
            self.a == self.b and (self.left_open or self.right_open)
        )

    def is_bounded(self):
        return self.a != -inf and self.b != inf

    def contains(self, x: Number):
        if self.is_empty():
            return False
        if x < self.a or (x == self.a and self.left_open):
            return False
        if x > self.b or (x == self.b and self.right_open):
            return False
        return True

    def __str__(self):
        left = "-∞" if self.a == -inf else str(self.a)
        right = "∞" if self.b == inf else str(self.b)
        return f"{'(' if self.left_open else '['}{left}, {right}{')' if self.right_open else ']'}"
