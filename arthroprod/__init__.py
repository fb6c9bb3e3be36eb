"""
arthroprod: symbolic computation for the algebra of Absolute Relativity

An exact, symbolic engine for the 16-element algebra built on one temporal
and three spatial directions with the +--- metric.

Key Features:
- Directed units (Alpha) and the non-commutative full product
- Exact rational magnitudes; no floating point anywhere in the algebra
- Symbolic coefficients with canonical rendering and cancellation
- MultiVectors with simplification, projection and conjugates
- General division via the Van der Mark inverse
- Differential operators applied from either side
- Cayley table export as torch tensors

API Design:
- All values are immutable apart from MultiVector.push/extend
- Construction errors raise ArError subclasses (ValueError)
- Internal invariant violations raise AlgebraInvariantError

Example:
    >>> from arthroprod.algebra import Alpha, full_product
    >>> full_product(Alpha("31"), Alpha("01"))
    -a03
"""

__version__ = "0.1.0"
__author__ = "arthroprod Contributors"

from . import core
from . import algebra
from . import utils

__all__ = [
    "core",
    "algebra",
    "utils",
]
