"""
Partial differential operators built from a set of Alphas.
"""

from __future__ import annotations
from enum import Enum
from typing import Iterable, List, Tuple

from .alpha import Alpha
from .multivector import MultiVector
from .product import full_product, invert_alpha
from .term import Term


class Side(Enum):
    """Which side of the operand the differential is applied from."""
    LEFT = "left"
    RIGHT = "right"


class ArDifferential:
    """
    A differential operator such as the Dμ = ∂μ of the standard derivative.

    The operator units are stored inverted so that applying from either side
    is a single full product.

    Example:
        >>> d = ArDifferential([Alpha("0"), Alpha("1"), Alpha("2"), Alpha("3")])
        >>> result = d.apply_left(MultiVector([Term(Alpha("p"), "a")]))
        >>> len(result)
        4
    """

    def __init__(self, wrt: Iterable[Alpha]):
        self._wrt: Tuple[Alpha, ...] = tuple(invert_alpha(w) for w in wrt)

    @property
    def wrt(self) -> Tuple[Alpha, ...]:
        """The (inverted) operator units."""
        return self._wrt

    def apply(self, mvec: MultiVector, side: Side = Side.LEFT) -> MultiVector:
        """
        Apply the operator to every term of mvec.

        Each term gives one output term per operator unit, tagged with a
        partial derivative with respect to that unit. The result is not
        simplified.
        """
        side = Side(side)
        terms: List[Term] = []
        for t in mvec:
            for w in self._wrt:
                if side is Side.LEFT:
                    alpha = full_product(w, t.alpha)
                else:
                    alpha = full_product(t.alpha, w)
                terms.append(t.add_partial(w).with_alpha(alpha))
        return MultiVector(terms)

    def apply_left(self, mvec: MultiVector) -> MultiVector:
        return self.apply(mvec, Side.LEFT)

    def apply_right(self, mvec: MultiVector) -> MultiVector:
        return self.apply(mvec, Side.RIGHT)

    def __eq__(self, other) -> bool:
        if not isinstance(other, ArDifferential):
            return NotImplemented
        return self._wrt == other._wrt

    def __hash__(self) -> int:
        return hash(self._wrt)

    def __repr__(self) -> str:
        return f"ArDifferential({[str(w) for w in self._wrt]})"
