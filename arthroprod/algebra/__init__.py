"""
The Absolute Relativity algebra.

Includes:
- Primitive types: Axis, Sign, Grade, Form
- The canonical form registry (Allowed, ALLOWED)
- Exact magnitudes, directed units (Alpha) and the full product
- Symbolic coefficients (Xi), Terms and MultiVectors
- Conjugates, division and differential operators
- Common MultiVectors and Cayley table export
"""

from .enums import Axis, Sign, Grade, Form
from .allowed import METRIC, Allowed, ALLOWED
from .magnitude import Magnitude
from .alpha import Alpha
from .product import full_product, invert_alpha, squares_to_negative
from .xi import Xi
from .term import Term
from .multivector import MultiVector
from .operations import (
    as_terms,
    full,
    project,
    rev,
    hermitian,
    dagger,
    diamond,
    double_dagger,
    dual,
    mm_bar,
    div,
    van_der_mark,
)
from .differential import Side, ArDifferential
from .zets import (
    alpha,
    term,
    mvec,
    G,
    B,
    T,
    A,
    E,
    zet_B,
    zet_T,
    zet_A,
    zet_E,
    fields,
    even_sub_algebra,
    odd_sub_algebra,
    Dmu,
    DG,
)
from .cayley import (
    cayley_tables,
    CAYLEY_SIGNS,
    CAYLEY_INDICES,
    REVERSION_SIGNS,
    HERMITIAN_SIGNS,
    DIAMOND_SIGNS,
    DOUBLE_DAGGER_SIGNS,
)

__all__ = [
    # Primitive types
    "Axis",
    "Sign",
    "Grade",
    "Form",
    # Registry
    "METRIC",
    "Allowed",
    "ALLOWED",
    # Values
    "Magnitude",
    "Alpha",
    "Xi",
    "Term",
    "MultiVector",
    # Products
    "full_product",
    "invert_alpha",
    "squares_to_negative",
    "as_terms",
    "full",
    "project",
    # Conjugates
    "rev",
    "hermitian",
    "dagger",
    "diamond",
    "double_dagger",
    "dual",
    "mm_bar",
    # Division
    "div",
    "van_der_mark",
    # Differentials
    "Side",
    "ArDifferential",
    # Builders and common values
    "alpha",
    "term",
    "mvec",
    "G",
    "B",
    "T",
    "A",
    "E",
    "zet_B",
    "zet_T",
    "zet_A",
    "zet_E",
    "fields",
    "even_sub_algebra",
    "odd_sub_algebra",
    "Dmu",
    "DG",
    # Tensor export
    "cayley_tables",
    "CAYLEY_SIGNS",
    "CAYLEY_INDICES",
    "REVERSION_SIGNS",
    "HERMITIAN_SIGNS",
    "DIAMOND_SIGNS",
    "DOUBLE_DAGGER_SIGNS",
]
