"""
Type aliases for arthroprod.

Most public functions accept loosely typed input (an index string, a list of
axes, a single Term, a MultiVector) and normalise it on entry. The aliases
below document what each kind of argument may be.

Conventions:
    AxisLike   : Axis | int in 0..3 | digit string "0".."3"
    FormLike   : Form | index string ("031", "p") | sequence of AxisLike
    ARLike     : Alpha | Term | MultiVector | sequence of Alpha/Term
    MagnitudeLike : Magnitude | non-negative int | fractions.Fraction
"""

from fractions import Fraction
from typing import TYPE_CHECKING, Sequence, Tuple, Union

import torch

if TYPE_CHECKING:
    from ..algebra.alpha import Alpha
    from ..algebra.enums import Axis, Form
    from ..algebra.magnitude import Magnitude
    from ..algebra.multivector import MultiVector
    from ..algebra.term import Term


# =============================================================================
# Algebra Type Aliases
# =============================================================================

AxisLike = Union["Axis", int, str]

FormLike = Union["Form", str, Sequence[AxisLike]]

MagnitudeLike = Union["Magnitude", int, Fraction]

ARLike = Union["Alpha", "Term", "MultiVector", Sequence[Union["Alpha", "Term"]]]

# Key deciding whether two terms may be summed: (form, rendered symbol)
SummationKey = Tuple["Form", str]


# =============================================================================
# Tensor Export Aliases
# =============================================================================

# (signs, indices), both (16, 16) torch.long:
#   e_i * e_j = signs[i, j] * e_{indices[i, j]}
CayleyTables = Tuple[torch.Tensor, torch.Tensor]

# (16,) torch.long vector of +1/-1 applied per registry element
SignTable = torch.Tensor
