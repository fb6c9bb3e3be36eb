"""
The Canonical Form Registry.

A registry holds the 16 forms that basis elements may take, each written in
one fixed axis order. The same data gives the canonical-order lookup used by
the full product: any set of 2, 3 or 4 distinct axes maps to the one registry
form made of those axes.

The default registry ``ALLOWED`` is built once at import. Custom registries
may reorder the axes within a form (e.g. ``13`` instead of ``31``) but must
cover the same 16 axis sets.
"""

from __future__ import annotations
import logging
from typing import Dict, Iterable, Iterator, List, Sequence, Tuple

from ..core.constants import ALLOWED_INDICES, ALGEBRA_DIM, GRADE_COUNTS
from ..core.errors import (
    AlgebraInvariantError,
    ArError,
    FormNotAllowedError,
    InvalidConfigError,
)
from .enums import Axis, Form, Sign

logger = logging.getLogger(__name__)


# The fixed +--- metric: the sign each axis squares to.
METRIC: Dict[Axis, Sign] = {
    Axis.T: Sign.POS,
    Axis.X: Sign.NEG,
    Axis.Y: Sign.NEG,
    Axis.Z: Sign.NEG,
}


class Allowed:
    """
    An ordered registry of the 16 allowed forms.

    Attributes:
        forms: The registry members in display order
        targets: Sorted axis tuple -> canonical Form (every non-point member)
    """

    def __init__(self, forms: Sequence[Form]):
        """
        Initialize and validate a registry.

        Args:
            forms: 16 forms; one point, four vectors, six bivectors,
                   four trivectors and one quadrivector

        Raises:
            InvalidConfigError: if the forms do not make up a valid registry
        """
        forms = tuple(forms)
        if len(forms) != ALGEBRA_DIM:
            raise InvalidConfigError(
                f"ALLOWED must contain {ALGEBRA_DIM} forms, got {len(forms)}"
            )

        counts = [0] * len(GRADE_COUNTS)
        for f in forms:
            if f.has_repeats:
                raise InvalidConfigError(f"repeated axis in {f}")
            counts[int(f.grade)] += 1

        names = ["point", "vectors", "bivectors", "trivectors", "quadrivectors"]
        for name, have, want in zip(names, counts, GRADE_COUNTS):
            if have != want:
                raise InvalidConfigError(
                    f"ALLOWED contained wrong number of {name}: {have} != {want}"
                )

        targets: Dict[Tuple[int, ...], Form] = {}
        for f in forms:
            if f.key in targets:
                raise InvalidConfigError(f"{targets[f.key]} and {f} share the same axes")
            targets[f.key] = f

        self._forms = forms
        self._targets = targets
        self._positions = {f: i for i, f in enumerate(forms)}
        logger.debug("Built registry: %s", " ".join(str(f) for f in forms))

    @classmethod
    def from_strings(cls, indices: Iterable[str]) -> 'Allowed':
        """
        Parse a list of index strings into a registry.

        Example:
            >>> Allowed.from_strings(["p", "23", "31", "12", "0", "023", "031", "012",
            ...                       "123", "1", "2", "3", "0123", "01", "02", "03"])

        Raises:
            InvalidConfigError: if any entry is malformed or the set is invalid
        """
        forms = []
        for ix in indices:
            try:
                forms.append(Form.parse(ix))
            except ArError as e:
                raise InvalidConfigError(f"invalid index {ix!r} in ALLOWED ({e})") from e
        return cls(forms)

    @property
    def forms(self) -> Tuple[Form, ...]:
        return self._forms

    @property
    def targets(self) -> Dict[Tuple[int, ...], Form]:
        return dict(self._targets)

    def __contains__(self, form: Form) -> bool:
        return form in self._positions

    def __iter__(self) -> Iterator[Form]:
        return iter(self._forms)

    def __len__(self) -> int:
        return len(self._forms)

    def index(self, form: Form) -> int:
        """Position of a form in this registry."""
        try:
            return self._positions[form]
        except KeyError:
            raise FormNotAllowedError(str(form)) from None

    def validate(self, form: Form) -> Form:
        """Return the form unchanged if it is a member, otherwise raise."""
        if form not in self._positions:
            raise FormNotAllowedError(str(form))
        return form

    def target(self, axes: Sequence[Axis]) -> Form:
        """
        Canonical ordering for a set of distinct axes.

        Raises:
            AlgebraInvariantError: if no registry member has these axes.
                The table is total over all axis subsets, so a miss is a defect.
        """
        key = tuple(sorted(int(a) for a in axes))
        try:
            return self._targets[key]
        except KeyError:
            raise AlgebraInvariantError(
                f"no canonical target for axes {list(map(str, axes))}"
            ) from None

    def strings(self) -> List[str]:
        return [str(f) for f in self._forms]

    def __eq__(self, other) -> bool:
        if not isinstance(other, Allowed):
            return NotImplemented
        return self._forms == other._forms

    def __hash__(self) -> int:
        return hash(self._forms)

    def __repr__(self) -> str:
        return f"Allowed({self.strings()})"


ALLOWED = Allowed.from_strings(ALLOWED_INDICES)
