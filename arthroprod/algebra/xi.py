"""
Symbolic coefficients (Xi values).

A Xi is a tree. Leaves hold a symbol name; internal nodes hold a multiset of
numerator children and a multiset of denominator children. Either kind may
carry a list of partial derivative tags. Products are built with ``merge``
rather than by concatenating strings, so that the same product compares equal
regardless of the order it was formed in:

    >>> Xi.merge([Xi("b"), Xi("a"), Xi("a")]).render()
    'ξa^2.ξb'

Rendering is canonical: children are sorted with registry index names
("23", "p", ...) first in registry order, then other names alphanumerically,
then composite nodes. Equality and hashing go through the rendering, which is
what Term summation keys are built from.
"""

from __future__ import annotations
from typing import Iterable, List, Optional, Sequence, Tuple

from ..core.constants import (
    ALLOWED_INDICES,
    EMPTY_XI,
    PARTIAL_SYMBOL,
    POWER_SEPARATOR,
    PRODUCT_SEPARATOR,
    XI_SYMBOL,
)
from .enums import Form

_REGISTRY_NAMES = {name: i for i, name in enumerate(ALLOWED_INDICES)}


class Xi:
    """
    A node in a symbolic coefficient tree.

    Attributes:
        value: Symbol name for leaves, None for merge nodes
        partials: Forms of the partial derivatives applied (sorted)
        numerator: Child Xi values multiplied together
        denominator: Child Xi values dividing the numerator
    """

    __slots__ = ("_value", "_partials", "_num", "_den", "_rendered")

    def __init__(
        self,
        value: Optional[str] = None,
        partials: Sequence[Form] = (),
        numerator: Sequence['Xi'] = (),
        denominator: Sequence['Xi'] = (),
    ):
        self._value = value
        self._partials = tuple(sorted(partials, key=lambda f: f.registry_index))
        self._num = tuple(sorted(numerator, key=Xi.sort_key))
        self._den = tuple(sorted(denominator, key=Xi.sort_key))
        self._rendered = None

    @classmethod
    def empty(cls) -> 'Xi':
        """The empty product (renders as 1)."""
        return cls()

    @classmethod
    def merge(cls, xis: Iterable['Xi']) -> 'Xi':
        """
        Form the product of a collection of Xi values.

        Children of empty parents (merge nodes with no partials) are pulled
        up so that merge nodes never stack. Factors appearing in both the
        numerator and the denominator cancel. A product with a single
        remaining factor is that factor.
        """
        num: List[Xi] = []
        den: List[Xi] = []
        for x in xis:
            if x.is_empty_parent():
                num.extend(x._num)
                den.extend(x._den)
            else:
                num.append(x)

        # Cancel matching factors one for one
        remaining_den = []
        for d in den:
            for pos, n in enumerate(num):
                if n == d:
                    del num[pos]
                    break
            else:
                remaining_den.append(d)

        return cls._node(num, remaining_den)

    @classmethod
    def _node(cls, num: Sequence['Xi'], den: Sequence['Xi']) -> 'Xi':
        # Merge nodes never hold a lone numerator child
        if len(num) == 1 and not den:
            return num[0]
        return cls(None, (), num, den)

    @property
    def value(self) -> Optional[str]:
        return self._value

    @property
    def partials(self) -> Tuple[Form, ...]:
        return self._partials

    @property
    def numerator(self) -> Tuple['Xi', ...]:
        return self._num

    @property
    def denominator(self) -> Tuple['Xi', ...]:
        return self._den

    def is_leaf(self) -> bool:
        return self._value is not None

    def is_empty_parent(self) -> bool:
        return self._value is None and not self._partials

    def is_empty(self) -> bool:
        return self.is_empty_parent() and not self._num and not self._den

    def inverse(self) -> 'Xi':
        """
        The multiplicative inverse.

        Merge nodes swap numerator and denominator. Leaves and differentiated
        nodes become the single denominator factor of a new node.
        """
        if self.is_empty_parent():
            return Xi._node(self._den, self._num)
        return Xi(None, (), (), (self,))

    def add_partial(self, wrt: Form) -> 'Xi':
        """Return a copy with one more partial derivative applied."""
        return self.with_partials(self._partials + (wrt,))

    def with_partials(self, partials: Sequence[Form]) -> 'Xi':
        """Return a copy with the partial derivatives replaced."""
        return Xi(self._value, partials, self._num, self._den)

    # === Rendering ===

    def render(self) -> str:
        """Canonical text for this Xi, e.g. '∂0(ξa^2.ξb)' or 'ξa/ξb'."""
        if self._rendered is None:
            self._rendered = self._render()
        return self._rendered

    def _render(self) -> str:
        partials = "".join(f"{PARTIAL_SYMBOL}{p}" for p in self._partials)

        if self._value is not None:
            return f"{partials}{XI_SYMBOL}{self._value}"

        if self._num and self._den:
            body = f"{_power_notation(self._num)}/{_power_notation(self._den)}"
        elif self._num:
            body = _power_notation(self._num)
        elif self._den:
            body = f"{EMPTY_XI}/{_power_notation(self._den)}"
        else:
            body = EMPTY_XI

        if partials:
            return f"{partials}({body})"
        return body

    def sort_key(self) -> Tuple[int, int, str, str]:
        """Registry names first, then free names, then composite nodes."""
        if self._value is None:
            return (2, 0, "", self.render())
        if self._value in _REGISTRY_NAMES:
            return (0, _REGISTRY_NAMES[self._value], self._value, self.render())
        return (1, 0, self._value, self.render())

    def __mul__(self, other: 'Xi') -> 'Xi':
        if not isinstance(other, Xi):
            return NotImplemented
        return Xi.merge([self, other])

    def __eq__(self, other) -> bool:
        if not isinstance(other, Xi):
            return NotImplemented
        return self.render() == other.render()

    def __hash__(self) -> int:
        return hash(self.render())

    def __lt__(self, other: 'Xi') -> bool:
        if not isinstance(other, Xi):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Xi({self.render()!r})"


def _power_notation(xis: Sequence[Xi]) -> str:
    # xis are sorted, so repeated factors are adjacent
    groups: List[Tuple[str, int]] = []
    for x in xis:
        s = x.render()
        if groups and groups[-1][0] == s:
            groups[-1] = (s, groups[-1][1] + 1)
        else:
            groups.append((s, 1))

    return PRODUCT_SEPARATOR.join(
        s if count == 1 else f"{s}{POWER_SEPARATOR}{count}" for s, count in groups
    )
