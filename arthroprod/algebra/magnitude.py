"""
Exact rational magnitudes for term weights.

A Magnitude is a non-negative reduced fraction. It is intended for tracking
term weights through symbolic calculations, not for numeric computation. The
sign of a directed quantity is always carried by its Alpha, never here.

Division follows the usual (lhs / rhs) convention. Division of AR quantities
is "left into right"; that ordering is handled by the Term and MultiVector
operations, not by this type.
"""

from __future__ import annotations
import math
from fractions import Fraction
from functools import total_ordering
from typing import Tuple, Union

from ..core.errors import AlgebraInvariantError


@total_ordering
class Magnitude:
    """
    A non-negative rational number stored in lowest terms.

    Attributes:
        numerator: Non-negative integer numerator
        denominator: Positive integer denominator
    """

    __slots__ = ("_num", "_den")

    def __init__(self, numerator: int = 1, denominator: int = 1):
        """
        Initialize and reduce a magnitude.

        Raises:
            ZeroDivisionError: if the denominator is 0
            ValueError: if either part is negative
        """
        if denominator == 0:
            raise ZeroDivisionError("magnitude denominator is 0")
        if numerator < 0 or denominator < 0:
            raise ValueError(
                f"magnitudes are unsigned, got {numerator}/{denominator}"
            )
        if numerator == 0:
            self._num, self._den = 0, 1
            return
        g = math.gcd(numerator, denominator)
        self._num = numerator // g
        self._den = denominator // g

    @classmethod
    def coerce(cls, value: Union['Magnitude', int, Fraction]) -> 'Magnitude':
        """Convert an int, Fraction or Magnitude into a Magnitude."""
        if isinstance(value, Magnitude):
            return value
        if isinstance(value, bool):
            raise TypeError(f"cannot convert {value!r} to a Magnitude")
        if isinstance(value, int):
            return cls(value, 1)
        if isinstance(value, Fraction):
            return cls(value.numerator, value.denominator)
        raise TypeError(f"cannot convert {type(value).__name__} to a Magnitude")

    @property
    def numerator(self) -> int:
        return self._num

    @property
    def denominator(self) -> int:
        return self._den

    def as_tuple(self) -> Tuple[int, int]:
        return self._num, self._den

    def as_fraction(self) -> Fraction:
        return Fraction(self._num, self._den)

    def is_zero(self) -> bool:
        return self._num == 0

    def reciprocal(self) -> 'Magnitude':
        return Magnitude(self._den, self._num)

    # === Arithmetic ===

    def __add__(self, other) -> 'Magnitude':
        try:
            other = Magnitude.coerce(other)
        except TypeError:
            return NotImplemented
        return Magnitude(
            self._num * other._den + other._num * self._den,
            self._den * other._den,
        )

    __radd__ = __add__

    def __sub__(self, other) -> 'Magnitude':
        try:
            other = Magnitude.coerce(other)
        except TypeError:
            return NotImplemented
        num = self._num * other._den - other._num * self._den
        if num < 0:
            raise AlgebraInvariantError(f"magnitude subtraction {self} - {other} is negative")
        return Magnitude(num, self._den * other._den)

    def __rsub__(self, other) -> 'Magnitude':
        try:
            other = Magnitude.coerce(other)
        except TypeError:
            return NotImplemented
        return other - self

    def __mul__(self, other) -> 'Magnitude':
        try:
            other = Magnitude.coerce(other)
        except TypeError:
            return NotImplemented
        return Magnitude(self._num * other._num, self._den * other._den)

    __rmul__ = __mul__

    def __truediv__(self, other) -> 'Magnitude':
        try:
            other = Magnitude.coerce(other)
        except TypeError:
            return NotImplemented
        return Magnitude(self._num * other._den, self._den * other._num)

    def __rtruediv__(self, other) -> 'Magnitude':
        try:
            other = Magnitude.coerce(other)
        except TypeError:
            return NotImplemented
        return other / self

    # === Comparison ===

    def __eq__(self, other) -> bool:
        if isinstance(other, Magnitude):
            return self._num == other._num and self._den == other._den
        if isinstance(other, int) and not isinstance(other, bool):
            return self._den == 1 and self._num == other
        if isinstance(other, Fraction):
            return self.as_fraction() == other
        return NotImplemented

    def __lt__(self, other) -> bool:
        try:
            other = Magnitude.coerce(other)
        except TypeError:
            return NotImplemented
        return self._num * other._den < other._num * self._den

    def __hash__(self) -> int:
        return hash(self.as_fraction())

    def __bool__(self) -> bool:
        return self._num != 0

    def __str__(self) -> str:
        if self._den == 1:
            return str(self._num)
        return f"{self._num}/{self._den}"

    def __repr__(self) -> str:
        return f"Magnitude({self._num}, {self._den})"
