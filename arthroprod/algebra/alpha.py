"""
Directed units (Alphas): the signed basis elements of the algebra.

An Alpha pairs a Sign with one of the 16 registry Forms. It is an immutable
value type; negation flips the sign and leaves the form alone.

    >>> Alpha("31")
    +a31
    >>> -Alpha.parse("0123")
    -a0123
"""

from __future__ import annotations
from typing import Optional

from ..core.constants import ALPHA_PREFIX
from ..core.errors import InvalidFormError
from .allowed import ALLOWED, Allowed
from .enums import Form, Grade, Sign


class Alpha:
    """
    A signed basis element.

    Attributes:
        form: The registry Form of this element
        sign: Its directed sign
        allowed: The registry the form was validated against
    """

    __slots__ = ("_form", "_sign", "_allowed")

    def __init__(self, form, sign: Sign = Sign.POS, allowed: Optional[Allowed] = None):
        """
        Initialize an Alpha.

        Args:
            form: A Form, an index string ('031', 'p') or a sequence of axes
            sign: Directed sign (default positive)
            allowed: Registry to validate against (default ALLOWED)

        Raises:
            InvalidIndexError: if an axis is not one of 0..3
            InvalidFormError: if the axes do not make a form
            FormNotAllowedError: if the form is not a registry member
        """
        allowed = ALLOWED if allowed is None else allowed
        if not isinstance(sign, Sign):
            raise TypeError(f"sign must be a Sign, got {type(sign).__name__}")
        self._form = allowed.validate(Form.parse(form))
        self._sign = sign
        self._allowed = allowed

    @classmethod
    def parse(cls, text: str, allowed: Optional[Allowed] = None) -> 'Alpha':
        """
        Parse an index string with an optional leading sign: '-23', '+p', '031'.
        """
        if not isinstance(text, str):
            raise InvalidFormError(text)
        text = text.strip()
        if text.startswith(ALPHA_PREFIX):
            text = text[len(ALPHA_PREFIX):]
        sign = Sign.POS
        if text[:1] in ("+", "-"):
            sign = Sign.NEG if text[0] == "-" else Sign.POS
            text = text[1:]
            if text.startswith(ALPHA_PREFIX):
                text = text[len(ALPHA_PREFIX):]
        return cls(text, sign, allowed)

    @classmethod
    def try_from_axes(cls, sign: Sign, axes, allowed: Optional[Allowed] = None) -> 'Alpha':
        """Build an Alpha from an explicit axis list."""
        return cls(Form.from_axes(axes), sign, allowed)

    @property
    def form(self) -> Form:
        return self._form

    @property
    def sign(self) -> Sign:
        return self._sign

    @property
    def allowed(self) -> Allowed:
        return self._allowed

    @property
    def grade(self) -> Grade:
        return self._form.grade

    def is_point(self) -> bool:
        return self._form.grade == Grade.POINT

    def with_sign(self, sign: Sign) -> 'Alpha':
        a = object.__new__(Alpha)
        a._form = self._form
        a._sign = sign
        a._allowed = self._allowed
        return a

    def __neg__(self) -> 'Alpha':
        return self.with_sign(-self._sign)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Alpha):
            return NotImplemented
        return self._form == other._form and self._sign is other._sign

    def __hash__(self) -> int:
        return hash((self._form, self._sign))

    def sort_key(self):
        return (self._form.registry_index, self._sign.value)

    def __lt__(self, other: 'Alpha') -> bool:
        if not isinstance(other, Alpha):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def __str__(self) -> str:
        return f"{self._sign}{ALPHA_PREFIX}{self._form}"

    def __repr__(self) -> str:
        return str(self)
