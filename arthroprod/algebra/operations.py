"""
Operations on anything that can be viewed as a list of Terms.

Every function here accepts Alphas, Terms, MultiVectors or sequences of
those, and returns a new MultiVector. Nothing is simplified unless stated.

Division
========
The algebra is non-commutative, so the convention is to divide left *into*
right: ``div(L, R) == L^-1 ^ R``. Single terms are inverted directly. For
general MultiVectors the inverse is found with the Van der Mark construction:

    phi      = M ^ M†
    divisor  = phi ^ phi◇          (always a single ap term)
    M^-1     = M† ^ phi◇ / divisor
"""

from __future__ import annotations
import logging
from typing import Iterable, List, Union

from ..core.errors import AlgebraInvariantError
from .alpha import Alpha
from .enums import Form, Grade
from .multivector import MultiVector
from .term import Term

logger = logging.getLogger(__name__)

ARValue = Union[Alpha, Term, MultiVector, Iterable[Union[Alpha, Term]]]


def as_terms(value: ARValue) -> List[Term]:
    """
    Convert a value to a list of Terms.

    Alphas are wrapped with their default symbol. Sequences are flattened
    one level.
    """
    if isinstance(value, MultiVector):
        return value.terms
    if isinstance(value, Term):
        return [value]
    if isinstance(value, Alpha):
        return [Term(value)]
    if isinstance(value, (str, bytes)):
        raise TypeError(f"cannot convert {value!r} to terms")
    try:
        items = list(value)
    except TypeError:
        raise TypeError(f"cannot convert {type(value).__name__} to terms") from None
    terms = []
    for item in items:
        if isinstance(item, (MultiVector, Term, Alpha)):
            terms.extend(as_terms(item))
        else:
            raise TypeError(f"cannot convert {type(item).__name__} to terms")
    return terms


def as_mvec(value: ARValue) -> MultiVector:
    if isinstance(value, MultiVector):
        return value
    return MultiVector(as_terms(value))


# =============================================================================
# Products
# =============================================================================

def full(left: ARValue, right: ARValue) -> MultiVector:
    """
    Full product of two values: every term of left with every term of right,
    in that order. The result has len(left) * len(right) terms.
    """
    rterms = as_terms(right)
    return MultiVector(l.form_product_with(r) for l in as_terms(left) for r in rterms)


def project(value: ARValue, grade: Union[Grade, int, Form, Alpha]) -> MultiVector:
    """Grade projection <value>grade."""
    return as_mvec(value).project(grade)


# =============================================================================
# Conjugates
# =============================================================================

def rev(value: ARValue) -> MultiVector:
    return as_mvec(value).reverse()


def hermitian(value: ARValue) -> MultiVector:
    return as_mvec(value).hermitian()


def dagger(value: ARValue) -> MultiVector:
    return as_mvec(value).dagger()


def diamond(value: ARValue) -> MultiVector:
    return as_mvec(value).diamond()


def double_dagger(value: ARValue) -> MultiVector:
    return as_mvec(value).double_dagger()


def dual(value: ARValue) -> MultiVector:
    """The dual -a0123 ^ value, written with an overbar."""
    return as_mvec(value).dual()


def mm_bar(value: ARValue, cancel: bool = True) -> MultiVector:
    """
    The product M ^ dual(M).

    Args:
        value: M
        cancel: Remove pairs of exactly opposite terms from the result
    """
    result = full(value, dual(value))
    if cancel:
        result = result.cancel_terms()
    return result


# =============================================================================
# Division
# =============================================================================

def div(left: ARValue, right: ARValue) -> MultiVector:
    """
    Divide left into right.

    Raises:
        AlgebraInvariantError: if left has no Van der Mark inverse
        ZeroDivisionError: if a single term divisor has zero magnitude
    """
    lterms = as_terms(left)
    rterms = as_terms(right)

    if len(lterms) == 1 and len(rterms) == 1:
        return MultiVector([lterms[0].inverse().form_product_with(rterms[0])])

    return van_der_mark(lterms, rterms)


def van_der_mark(left: ARValue, right: ARValue) -> MultiVector:
    """General division of left into right via the Van der Mark inverse of left."""
    l_dagger = hermitian(left)
    phi = full(left, l_dagger).simplify()
    diamond_phi = phi.diamond()

    divisor = full(phi, diamond_phi).simplify()
    if len(divisor) != 1 or not divisor.is_scalar():
        logger.error("Van der Mark divisor did not reduce to a single ap term: %s", divisor)
        raise AlgebraInvariantError(
            f"no Van der Mark inverse: phi ^ diamond(phi) = {divisor!r}"
        )
    divisor_term = divisor.terms[0]
    logger.debug("Van der Mark divisor: %s", divisor_term)

    inverse = full(l_dagger, diamond_phi).simplify()
    quotient = full(inverse, right).simplify()

    # Dividing by the divisor term also cancels its symbol and sign
    return full(quotient, divisor_term.inverse()).simplify()
