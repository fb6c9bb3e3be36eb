"""
Integer lookup tables of the full product for tensor backends.

Component ordering follows the registry:
[p, 23, 31, 12, 0, 023, 031, 012, 123, 1, 2, 3, 0123, 01, 02, 03]
 0  1   2   3   4  5    6    7    8    9  10 11 12    13  14  15

The Cayley table defines: α_i ^ α_j = signs[i, j] * α_{indices[i, j]}

Unlike a hand written table these are generated from ``full_product`` so they
cannot drift from the symbolic algebra. Every entry is ±1: the metric has no
null direction.
"""

from __future__ import annotations
from typing import Callable, Optional

import torch

from ..core.types import CayleyTables, SignTable
from .allowed import ALLOWED, Allowed
from .alpha import Alpha
from .enums import Grade, Sign
from .product import full_product, squares_to_negative


# Component indices for each registry element
IDX_P = 0
IDX_23 = 1
IDX_31 = 2
IDX_12 = 3
IDX_0 = 4
IDX_023 = 5
IDX_031 = 6
IDX_012 = 7
IDX_123 = 8
IDX_1 = 9
IDX_2 = 10
IDX_3 = 11
IDX_0123 = 12
IDX_01 = 13
IDX_02 = 14
IDX_03 = 15

# Grade masks for extraction
GRADE_0_MASK = [IDX_P]
GRADE_1_MASK = [IDX_0, IDX_1, IDX_2, IDX_3]
GRADE_2_MASK = [IDX_23, IDX_31, IDX_12, IDX_01, IDX_02, IDX_03]
GRADE_3_MASK = [IDX_023, IDX_031, IDX_012, IDX_123]
GRADE_4_MASK = [IDX_0123]


def _sign_value(sign: Sign) -> int:
    return -1 if sign is Sign.NEG else 1


def cayley_tables(allowed: Optional[Allowed] = None) -> CayleyTables:
    """
    Build the Cayley table for the full product.

    Args:
        allowed: Registry giving the component ordering (default ALLOWED)

    Returns:
        signs: (16, 16) torch.long tensor of signs (+1 or -1)
        indices: (16, 16) torch.long tensor of result indices
    """
    allowed = ALLOWED if allowed is None else allowed
    forms = allowed.forms
    n = len(forms)

    signs = torch.zeros(n, n, dtype=torch.long)
    indices = torch.zeros(n, n, dtype=torch.long)

    alphas = [Alpha(f, Sign.POS, allowed) for f in forms]
    for i, ai in enumerate(alphas):
        for j, aj in enumerate(alphas):
            res = full_product(ai, aj, allowed)
            signs[i, j] = _sign_value(res.sign)
            indices[i, j] = allowed.index(res.form)

    return signs, indices


def _sign_table(predicate: Callable[[Alpha], bool], allowed: Optional[Allowed] = None) -> SignTable:
    """-1 for every registry element matching predicate, +1 otherwise."""
    allowed = ALLOWED if allowed is None else allowed
    return torch.tensor(
        [-1 if predicate(Alpha(f, Sign.POS, allowed)) else 1 for f in allowed.forms],
        dtype=torch.long,
    )


def reversion_signs(allowed: Optional[Allowed] = None) -> SignTable:
    """Grades 2 and 3 are negated under reversion."""
    return _sign_table(lambda a: a.grade in (Grade.BIVECTOR, Grade.TRIVECTOR), allowed)


def hermitian_signs(allowed: Optional[Allowed] = None) -> SignTable:
    """Elements squaring to -ap are negated under the Hermitian conjugate."""
    return _sign_table(squares_to_negative, allowed)


def diamond_signs(allowed: Optional[Allowed] = None) -> SignTable:
    return _sign_table(lambda a: a.grade != Grade.POINT, allowed)


def double_dagger_signs(allowed: Optional[Allowed] = None) -> SignTable:
    return _sign_table(lambda a: a.grade != Grade.BIVECTOR, allowed)


# Pre-build the default tables
CAYLEY_SIGNS, CAYLEY_INDICES = cayley_tables()

REVERSION_SIGNS = reversion_signs()
HERMITIAN_SIGNS = hermitian_signs()
DIAMOND_SIGNS = diamond_signs()
DOUBLE_DAGGER_SIGNS = double_dagger_signs()
