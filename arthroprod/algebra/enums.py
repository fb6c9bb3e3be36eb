"""
Primitive value types of the algebra: axes, signs, grades and forms.

The four axes are one temporal direction (0) and three spatial directions
(1, 2, 3). A Form is the grade-tagged axis tuple of a basis element,
independent of its sign:

- Grade 0 (point):         p
- Grade 1 (vectors):       0, 1, 2, 3
- Grade 2 (bivectors):     23, 31, 12, 01, 02, 03
- Grade 3 (trivectors):    023, 031, 012, 123
- Grade 4 (quadrivector):  0123

Any axis tuple of length <= 4 can be held in a Form; only the 16 registry
members can be wrapped in an Alpha.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Dict, Iterable, Tuple

from ..core.constants import ALLOWED_INDICES, MAX_GRADE, POINT_INDEX
from ..core.errors import InvalidFormError, InvalidIndexError


class Axis(IntEnum):
    """A single space-time axis. Ordered T < X < Y < Z."""

    T = 0
    X = 1
    Y = 2
    Z = 3

    @classmethod
    def parse(cls, value) -> 'Axis':
        """
        Convert an Axis, an int in 0..3 or a digit string into an Axis.

        Raises:
            InvalidIndexError: if the value does not name one of the four axes
        """
        if isinstance(value, Axis):
            return value
        if isinstance(value, bool):
            raise InvalidIndexError(value)
        if isinstance(value, int):
            if 0 <= value <= 3:
                return cls(value)
            raise InvalidIndexError(value)
        if isinstance(value, str) and len(value) == 1 and value in "0123":
            return cls(int(value))
        raise InvalidIndexError(value)

    @property
    def is_spatial(self) -> bool:
        return self is not Axis.T

    def __str__(self) -> str:
        return str(self.value)


class Sign(Enum):
    """Directed sign of a basis element."""

    POS = 0
    NEG = 1

    def combine(self, other: 'Sign') -> 'Sign':
        """Combine two signs using the conventional rules of arithmetic."""
        return Sign.POS if self is other else Sign.NEG

    def __neg__(self) -> 'Sign':
        return Sign.NEG if self is Sign.POS else Sign.POS

    def __lt__(self, other: 'Sign') -> bool:
        if not isinstance(other, Sign):
            return NotImplemented
        return self.value < other.value

    def __str__(self) -> str:
        return "+" if self is Sign.POS else "-"


class Grade(IntEnum):
    """Grade discriminant of a Form (its number of axes)."""

    POINT = 0
    VECTOR = 1
    BIVECTOR = 2
    TRIVECTOR = 3
    QUADRIVECTOR = 4


def _registry_positions() -> Dict[Tuple[int, ...], int]:
    positions = {}
    for pos, ix in enumerate(ALLOWED_INDICES):
        key = () if ix == POINT_INDEX else tuple(sorted(int(c) for c in ix))
        positions[key] = pos
    return positions


# Sorted axis set -> position in the default registry. Overrides reuse the
# same 16 axis sets so this stays a valid sort key for them too.
_REGISTRY_POSITIONS = _registry_positions()


@dataclass(frozen=True)
class Form:
    """
    An axis tuple tagged by grade.

    Attributes:
        axes: The axes in the order they are written (order is significant)
    """

    axes: Tuple[Axis, ...] = ()

    @classmethod
    def point(cls) -> 'Form':
        return cls(())

    @classmethod
    def from_axes(cls, axes: Iterable) -> 'Form':
        """
        Build a Form from any iterable of axis-like values.

        Raises:
            InvalidIndexError: if an axis is not one of 0..3
            InvalidFormError: if more than four axes are given
        """
        parsed = tuple(Axis.parse(a) for a in axes)
        if len(parsed) > MAX_GRADE:
            raise InvalidFormError(parsed)
        return cls(parsed)

    @classmethod
    def parse(cls, value) -> 'Form':
        """Build a Form from a Form, an index string ('031', 'p') or axes."""
        if isinstance(value, Form):
            return value
        if isinstance(value, str):
            if value == POINT_INDEX:
                return cls.point()
            if not value:
                raise InvalidFormError(value)
            return cls.from_axes(value)
        if isinstance(value, (list, tuple)):
            return cls.from_axes(value)
        raise InvalidFormError(value)

    @property
    def grade(self) -> Grade:
        return Grade(len(self.axes))

    @property
    def key(self) -> Tuple[int, ...]:
        """Order-independent key: the sorted axis values."""
        return tuple(sorted(int(a) for a in self.axes))

    @property
    def has_repeats(self) -> bool:
        return len(set(self.axes)) != len(self.axes)

    @property
    def registry_index(self) -> int:
        """Position of this form's axis set in the default registry."""
        try:
            return _REGISTRY_POSITIONS[self.key]
        except KeyError:
            raise InvalidFormError(str(self)) from None

    def __len__(self) -> int:
        return len(self.axes)

    def __iter__(self):
        return iter(self.axes)

    def __str__(self) -> str:
        if not self.axes:
            return POINT_INDEX
        return "".join(str(a) for a in self.axes)

    def __repr__(self) -> str:
        return f"Form({str(self)!r})"
