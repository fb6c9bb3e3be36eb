"""
Common MultiVectors, differential operators and builders.

The 16 registry elements split into four "zets" of four elements:

    Zet B:  p     23   31   12
    Zet T:  0     023  031  012
    Zet A:  123   1    2    3
    Zet E:  0123  01   02   03

The three element groups B, T, A and E drop the first element of each zet.
Every function here returns a fresh value built with default symbols, so the
results can be freely mutated by the caller.
"""

from __future__ import annotations
from typing import Iterable, Optional, Union

from ..core.constants import ALLOWED_INDICES, ZET_INDICES
from .alpha import Alpha
from .differential import ArDifferential
from .multivector import MultiVector
from .term import Term

_p, _B = ZET_INDICES["B"][0], ZET_INDICES["B"][1:]
_t, _T = ZET_INDICES["T"][0], ZET_INDICES["T"][1:]
_h, _A = ZET_INDICES["A"][0], ZET_INDICES["A"][1:]
_q, _E = ZET_INDICES["E"][0], ZET_INDICES["E"][1:]


def alpha(index: str) -> Alpha:
    """Build an Alpha from an index string with optional sign: alpha('-23')."""
    return Alpha.parse(index)


def term(symbol: Optional[str], index: str) -> Term:
    """Build a Term from a symbol and an index string: term('foo', '23')."""
    return Term(Alpha.parse(index), symbol)


def mvec(*items: Union[Alpha, Term, MultiVector]) -> MultiVector:
    """Collect Alphas, Terms and MultiVectors into one MultiVector."""
    m = MultiVector()
    for item in items:
        if isinstance(item, MultiVector):
            m.extend(item.terms)
        else:
            m.push(item)
    return m


def _from_indices(indices: Iterable[str]) -> MultiVector:
    return MultiVector(Term(Alpha(i)) for i in indices)


# =============================================================================
# Common MultiVectors
# =============================================================================

def G() -> MultiVector:
    """All 16 elements of the algebra, in registry order."""
    return _from_indices(ALLOWED_INDICES)


def B() -> MultiVector:
    return _from_indices(_B)


def T() -> MultiVector:
    return _from_indices(_T)


def A() -> MultiVector:
    return _from_indices(_A)


def E() -> MultiVector:
    return _from_indices(_E)


def zet_B() -> MultiVector:
    return _from_indices(ZET_INDICES["B"])


def zet_T() -> MultiVector:
    return _from_indices(ZET_INDICES["T"])


def zet_A() -> MultiVector:
    return _from_indices(ZET_INDICES["A"])


def zet_E() -> MultiVector:
    return _from_indices(ZET_INDICES["E"])


def fields() -> MultiVector:
    """The electromagnetic field components B and E."""
    return _from_indices(_B + _E)


def even_sub_algebra() -> MultiVector:
    return _from_indices([_p] + _B + [_q] + _E)


def odd_sub_algebra() -> MultiVector:
    return _from_indices([_t] + _T + [_h] + _A)


# =============================================================================
# Common differential operators
# =============================================================================

def Dmu() -> ArDifferential:
    """The four-vector derivative ∂μ over 0, 1, 2, 3."""
    return ArDifferential(Alpha(i) for i in "0 1 2 3".split())


def DG() -> ArDifferential:
    """Differentiation with respect to every element of the algebra."""
    return ArDifferential(Alpha(i) for i in ALLOWED_INDICES)
