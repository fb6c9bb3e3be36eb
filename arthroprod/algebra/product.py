"""
The full product of two Alphas.

The product is built from a small set of rules (αμ.αν is written αμν):

    (1)   αpμ == αμp == αμ       the point is the identity
    (2i)  α0.α0 == αp            repeated temporal axes cancel
    (2ii) αi.αi == -αp           repeated spatial axes cancel with negation
    (3)   αμν == -ανμ            adjacent axes can be popped by negating

Counting pops
=============
Once repeated axes are cancelled the remaining axes must be brought into the
canonical order given by the registry. The parity of the reordering is found
one element at a time: the front element needs as many pops as its rank in
the target ordering, so an odd rank flips the sign. The front element is then
dropped, the rest are relabelled 0..n-2 and the process repeats until a
single element remains.

An off-by-one in the pop count gives a wrong sign that is otherwise invisible
until much later (a square not reducing to ±αp), so the exhaustive checks in
tests/test_product.py are the reference for this module.
"""

from __future__ import annotations
from typing import List, Optional, Sequence, Tuple

from .allowed import METRIC, Allowed
from .alpha import Alpha
from .enums import Axis, Form, Sign


def full_product(i: Alpha, j: Alpha, allowed: Optional[Allowed] = None) -> Alpha:
    """
    Compute the full product i ^ j under the +--- metric.

    Args:
        i: Left operand
        j: Right operand
        allowed: Registry giving the canonical orderings (default: the
                 registry of i)

    Returns:
        The signed, canonically ordered product
    """
    allowed = i.allowed if allowed is None else allowed
    sign = i.sign.combine(j.sign)

    # Multiplication by ap is idempotent on the form but does affect sign
    if i.is_point():
        return Alpha(j.form, sign, allowed)
    if j.is_point():
        return Alpha(i.form, sign, allowed)

    pop_sign, axes = cancel_repeated_axes(i.form, j.form)
    sign = sign.combine(pop_sign)

    # Points and vectors have no ordering to worry about
    if len(axes) == 0:
        return Alpha(Form.point(), sign, allowed)
    if len(axes) == 1:
        return Alpha(Form(tuple(axes)), sign, allowed)

    target = allowed.target(axes)
    sign = sign.combine(pop_to_target(axes, target.axes))

    return Alpha(target, sign, allowed)


def invert_alpha(a: Alpha, allowed: Optional[Allowed] = None) -> Alpha:
    """
    The inverse of an Alpha: same form, sign corrected so that
    full_product(a, invert_alpha(a)) == +αp.
    """
    squared = full_product(a, a, allowed)
    return a.with_sign(a.sign.combine(squared.sign))


def squares_to_negative(a: Alpha) -> bool:
    """True when a ^ a == -ap. Independent of the sign of a."""
    return full_product(a, a).sign is Sign.NEG


def apply_metric(sign: Sign, axis: Axis) -> Sign:
    """Combine a sign with the square of an axis (+ for 0, - for 1, 2, 3)."""
    return sign.combine(METRIC[axis])


def cancel_repeated_axes(i_form: Form, j_form: Form) -> Tuple[Sign, List[Axis]]:
    """
    Concatenate the axes of two forms and cancel every axis present in both.

    Returns:
        sign: Sign accumulated from the metric and from the pops needed to
              bring each repeated pair together (starting from positive)
        axes: The remaining axes in their current order
    """
    i_axes = list(i_form.axes)
    j_axes = list(j_form.axes)
    axes = i_axes + j_axes
    sign = Sign.POS

    repeated = [a for a in i_axes if a in j_axes]
    for r in repeated:
        sign = apply_metric(sign, r)

        p1 = axes.index(r)
        p2 = axes.index(r, p1 + 1)
        if (p2 - p1 - 1) % 2 == 1:
            sign = sign.combine(Sign.NEG)

        # Remove the higher position first so p1 stays valid
        del axes[p2]
        del axes[p1]

    return sign, axes


def pop_to_target(axes: Sequence[Axis], target: Sequence[Axis]) -> Sign:
    """
    Sign change from popping ``axes`` into the order given by ``target``.

    ``axes`` must be a permutation of ``target`` with no repeated elements.
    """
    sign = Sign.POS
    if list(axes) == list(target):
        return sign

    remaining = permuted_indices(axes, target)
    while len(remaining) > 1:
        if remaining[0] % 2 == 1:
            sign = sign.combine(Sign.NEG)
        remaining = remaining[1:]
        remaining = permuted_indices(remaining, sorted(remaining))

    return sign


def permuted_indices(s1: Sequence, s2: Sequence) -> List[int]:
    """Position in ``s2`` of each element of ``s1``."""
    return [list(s2).index(x) for x in s1]
