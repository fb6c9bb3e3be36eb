"""
Terms: a magnitude and a symbolic coefficient attached to an Alpha.

The magnitude of a Term is never negative. Anything that would make it
negative flips the sign of the Alpha instead, so the Alpha always carries
the actual sign of the term.
"""

from __future__ import annotations
from typing import Iterable, Optional, Tuple, Union

from .alpha import Alpha
from .enums import Form, Sign
from .magnitude import Magnitude
from .product import full_product, invert_alpha
from .xi import Xi


class Term:
    """
    A single weighted, symbolic basis element.

    Attributes:
        alpha: Signed basis element
        magnitude: Non-negative rational weight
        xi: Symbolic coefficient
    """

    __slots__ = ("_alpha", "_magnitude", "_xi")

    def __init__(
        self,
        alpha: Alpha,
        symbol: Optional[Union[str, Xi]] = None,
        magnitude: Union[Magnitude, int] = 1,
    ):
        """
        Initialize a Term.

        Args:
            alpha: The basis element (an Alpha or anything Alpha.parse accepts)
            symbol: Symbol name or Xi; defaults to the alpha's form ('23', 'p')
            magnitude: Non-negative weight (default 1)
        """
        if isinstance(alpha, str):
            alpha = Alpha.parse(alpha)
        if not isinstance(alpha, Alpha):
            raise TypeError(f"expected an Alpha, got {type(alpha).__name__}")

        if symbol is None:
            xi = Xi(str(alpha.form))
        elif isinstance(symbol, Xi):
            xi = symbol
        else:
            xi = Xi(symbol)

        self._alpha = alpha
        self._magnitude = Magnitude.coerce(magnitude)
        self._xi = xi

    @classmethod
    def from_symbols(cls, symbols: Iterable[str], alpha: Alpha) -> 'Term':
        """Build a Term whose Xi is the merged product of several symbols."""
        return cls(alpha, Xi.merge([Xi(s) for s in symbols]))

    def _replace(self, alpha=None, magnitude=None, xi=None) -> 'Term':
        t = object.__new__(Term)
        t._alpha = self._alpha if alpha is None else alpha
        t._magnitude = self._magnitude if magnitude is None else magnitude
        t._xi = self._xi if xi is None else xi
        return t

    @property
    def alpha(self) -> Alpha:
        return self._alpha

    @property
    def form(self) -> Form:
        return self._alpha.form

    @property
    def sign(self) -> Sign:
        return self._alpha.sign

    @property
    def magnitude(self) -> Magnitude:
        return self._magnitude

    @property
    def xi(self) -> Xi:
        return self._xi

    def xi_str(self) -> str:
        return self._xi.render()

    def summation_key(self) -> Tuple[Form, str]:
        """The parts of a Term that must match for it to be summed with another."""
        return self.form, self._xi.render()

    def with_alpha(self, alpha: Alpha) -> 'Term':
        return self._replace(alpha=alpha)

    def with_magnitude(self, magnitude: Union[Magnitude, int]) -> 'Term':
        return self._replace(magnitude=Magnitude.coerce(magnitude))

    def add_partial(self, wrt: Alpha) -> 'Term':
        """Return a copy with a partial derivative with respect to wrt applied."""
        return self._replace(xi=self._xi.add_partial(wrt.form))

    def with_partials(self, partials: Iterable[Form]) -> 'Term':
        return self._replace(xi=self._xi.with_partials(tuple(partials)))

    # === Algebra ===

    def try_add(self, other: 'Term') -> Optional['Term']:
        """
        Sum two Terms if their summation keys match, otherwise return None.
        """
        if self.summation_key() != other.summation_key():
            return None

        if self.sign is other.sign:
            return self._replace(magnitude=self._magnitude + other._magnitude)

        # A - B == -(B - A): keep the sign of the larger magnitude
        if self._magnitude >= other._magnitude:
            return self._replace(magnitude=self._magnitude - other._magnitude)
        return self._replace(
            alpha=-self._alpha,
            magnitude=other._magnitude - self._magnitude,
        )

    def form_product_with(self, other: 'Term') -> 'Term':
        """The product of this term and another under the full product."""
        return Term(
            full_product(self._alpha, other._alpha),
            Xi.merge([self._xi, other._xi]),
            self._magnitude * other._magnitude,
        )

    def inverse(self) -> 'Term':
        """Reciprocal magnitude, inverted alpha and inverted Xi."""
        if self._magnitude.is_zero():
            raise ZeroDivisionError(f"cannot invert the zero term {self}")
        return self._replace(
            alpha=invert_alpha(self._alpha),
            magnitude=self._magnitude.reciprocal(),
            xi=self._xi.inverse(),
        )

    # === Operators ===

    def __neg__(self) -> 'Term':
        return self._replace(alpha=-self._alpha)

    def __mul__(self, other) -> 'Term':
        if isinstance(other, Term):
            return self.form_product_with(other)
        if isinstance(other, bool):
            return NotImplemented
        if isinstance(other, int):
            t = self._replace(magnitude=self._magnitude * abs(other))
            return -t if other < 0 else t
        if isinstance(other, Magnitude):
            return self._replace(magnitude=self._magnitude * other)
        return NotImplemented

    def __rmul__(self, other) -> 'Term':
        if isinstance(other, (int, Magnitude)) and not isinstance(other, bool):
            return self.__mul__(other)
        return NotImplemented

    def __truediv__(self, other) -> 'Term':
        if isinstance(other, bool):
            return NotImplemented
        if isinstance(other, int):
            t = self._replace(magnitude=self._magnitude / abs(other))
            return -t if other < 0 else t
        if isinstance(other, Magnitude):
            return self._replace(magnitude=self._magnitude / other)
        return NotImplemented

    def sort_key(self):
        return (
            self.form.registry_index,
            self._xi.render(),
            self.sign.value,
            self._magnitude.as_fraction(),
        )

    def __lt__(self, other: 'Term') -> bool:
        if not isinstance(other, Term):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def __eq__(self, other) -> bool:
        if not isinstance(other, Term):
            return NotImplemented
        return (
            self._alpha == other._alpha
            and self._magnitude == other._magnitude
            and self._xi == other._xi
        )

    def __hash__(self) -> int:
        return hash((self._alpha, self._magnitude, self._xi))

    def __str__(self) -> str:
        m_str = f"({self._magnitude})" if self._magnitude != 1 else ""
        return f"{self._alpha}{m_str}({self._xi})"

    def __repr__(self) -> str:
        return f"Term({self})"
