"""
MultiVectors: additive collections of Terms.

A MultiVector is the primary unit of computation. Products and conjugates
are formed term by term and are never simplified implicitly; call
``simplify()`` before inspecting a result that should show cancellation.

    >>> m = MultiVector([Term(Alpha("1"), "a"), -Term(Alpha("1"), "a")])
    >>> len(m.simplify())
    0
"""

from __future__ import annotations
import logging
from collections import OrderedDict
from typing import Dict, Iterable, Iterator, List, Union

from ..core.constants import ALPHA_PREFIX
from .alpha import Alpha
from .enums import Axis, Form, Grade, Sign
from .magnitude import Magnitude
from .product import full_product, squares_to_negative
from .term import Term

logger = logging.getLogger(__name__)


class MultiVector:
    """
    An ordered collection of Terms spanning possibly several grades.

    Term order carries no meaning before ``simplify``; afterwards terms are
    sorted by (registry index, symbol, sign, magnitude).
    """

    def __init__(self, terms: Iterable[Term] = ()):
        """
        Initialize a MultiVector.

        Args:
            terms: Terms (or Alphas, wrapped with their default symbol)
        """
        self._terms: List[Term] = []
        self.extend(terms)

    @classmethod
    def from_terms(cls, terms: Iterable[Term]) -> 'MultiVector':
        return cls(terms)

    @property
    def terms(self) -> List[Term]:
        """A copy of the terms in their current order."""
        return list(self._terms)

    def push(self, term: Union[Term, Alpha]) -> None:
        """Append a term. No deduplication is done until ``simplify``."""
        if isinstance(term, Alpha):
            term = Term(term)
        if not isinstance(term, Term):
            raise TypeError(f"expected a Term, got {type(term).__name__}")
        self._terms.append(term)

    def extend(self, terms: Iterable[Union[Term, Alpha]]) -> None:
        for t in terms:
            self.push(t)

    def get(self, form: Union[Form, str]) -> List[Term]:
        """All terms with the given form."""
        form = Form.parse(form)
        return [t for t in self._terms if t.form == form]

    def copy(self) -> 'MultiVector':
        return MultiVector(self._terms)

    # === Simplification ===

    def simplify(self) -> 'MultiVector':
        """
        Collect like terms.

        Terms are grouped by summation key and summed; terms whose magnitude
        comes out as zero are dropped. The result is sorted.
        """
        groups: Dict[tuple, Term] = OrderedDict()
        for t in self._terms:
            key = t.summation_key()
            if key in groups:
                # Grouping guarantees matching keys
                groups[key] = groups[key].try_add(t)
            else:
                groups[key] = t

        terms = sorted(
            (t for t in groups.values() if not t.magnitude.is_zero()),
            key=Term.sort_key,
        )
        logger.debug("simplify: %d terms -> %d terms", len(self._terms), len(terms))
        return MultiVector(terms)

    def cancel_terms(self) -> 'MultiVector':
        """
        Remove pairs of terms that are exact negations of each other, without
        summing anything else.
        """
        kept: List[Term] = []
        for t in sorted(self._terms, key=Term.sort_key):
            neg = -t
            for pos, k in enumerate(kept):
                if k == neg:
                    del kept[pos]
                    break
            else:
                kept.append(t)
        return MultiVector(kept)

    # === Projection and conjugates ===

    def project(self, grade: Union[Grade, int, Form, Alpha]) -> 'MultiVector':
        """
        Grade projection <M>n: keep only terms of the requested grade. A Form
        or Alpha may be passed; only its grade is used.
        """
        if isinstance(grade, Alpha):
            grade = grade.grade
        elif isinstance(grade, Form):
            grade = grade.grade
        grade = Grade(grade)
        return MultiVector(t for t in self._terms if t.form.grade == grade)

    def _negate_where(self, predicate) -> 'MultiVector':
        return MultiVector(-t if predicate(t) else t for t in self._terms)

    def reverse(self) -> 'MultiVector':
        """
        Reverse the axes of every term. Reversing n axes takes the (n-1)th
        triangular number of pops, so only bivectors and trivectors change sign.
        """
        return self._negate_where(
            lambda t: t.form.grade in (Grade.BIVECTOR, Grade.TRIVECTOR)
        )

    def hermitian(self) -> 'MultiVector':
        """Hermitian conjugate: negate every term whose alpha squares to -ap."""
        return self._negate_where(lambda t: squares_to_negative(t.alpha))

    def dagger(self) -> 'MultiVector':
        return self.hermitian()

    def diamond(self) -> 'MultiVector':
        """Diamond conjugate M◇ = 2<M>0 - M: negate everything except ap."""
        return self._negate_where(lambda t: t.form.grade != Grade.POINT)

    def double_dagger(self) -> 'MultiVector':
        """Negate every term except the bivectors."""
        return self._negate_where(lambda t: t.form.grade != Grade.BIVECTOR)

    def dual(self) -> 'MultiVector':
        """The dual -a0123 ^ M, formed term by term."""
        return MultiVector(
            t.with_alpha(full_product(_dual_unit(t.alpha), t.alpha)) for t in self._terms
        )

    def is_scalar(self) -> bool:
        """True when every term is a point (αp) term."""
        return all(t.form.grade == Grade.POINT for t in self._terms)

    # === Operators ===

    def __mul__(self, other) -> 'MultiVector':
        """Full (Cartesian) product. The result is not simplified."""
        if isinstance(other, (MultiVector, Term, Alpha)):
            right = _terms_of(other)
            return MultiVector(l.form_product_with(r) for l in self._terms for r in right)
        if isinstance(other, (int, Magnitude)) and not isinstance(other, bool):
            return MultiVector(t * other for t in self._terms)
        return NotImplemented

    def __rmul__(self, other) -> 'MultiVector':
        if isinstance(other, (Term, Alpha)):
            left = _terms_of(other)
            return MultiVector(l.form_product_with(r) for l in left for r in self._terms)
        if isinstance(other, (int, Magnitude)) and not isinstance(other, bool):
            return MultiVector(t * other for t in self._terms)
        return NotImplemented

    def __truediv__(self, other) -> 'MultiVector':
        if isinstance(other, (int, Magnitude)) and not isinstance(other, bool):
            return MultiVector(t / other for t in self._terms)
        return NotImplemented

    def __add__(self, other) -> 'MultiVector':
        """Concatenate terms (unsimplified)."""
        if isinstance(other, (MultiVector, Term, Alpha)):
            return MultiVector(self._terms + _terms_of(other))
        return NotImplemented

    def __radd__(self, other) -> 'MultiVector':
        if isinstance(other, (Term, Alpha)):
            return MultiVector(_terms_of(other) + self._terms)
        return NotImplemented

    def __sub__(self, other) -> 'MultiVector':
        if isinstance(other, (MultiVector, Term, Alpha)):
            return MultiVector(self._terms + [-t for t in _terms_of(other)])
        return NotImplemented

    def __neg__(self) -> 'MultiVector':
        return MultiVector(-t for t in self._terms)

    def __invert__(self) -> 'MultiVector':
        """Operator ~: reversion."""
        return self.reverse()

    def __len__(self) -> int:
        return len(self._terms)

    def __iter__(self) -> Iterator[Term]:
        return iter(list(self._terms))

    def __eq__(self, other) -> bool:
        if not isinstance(other, MultiVector):
            return NotImplemented
        return self._terms == other._terms

    __hash__ = None

    def __str__(self) -> str:
        # One line per axis set, so forms from any registry are shown
        by_index: Dict[int, List[Term]] = {}
        for t in self._terms:
            by_index.setdefault(t.form.registry_index, []).append(t)

        lines = []
        for ix in sorted(by_index):
            for_form = by_index[ix]
            items = ", ".join(_term_entry(t) for t in for_form)
            lines.append(f"  {ALPHA_PREFIX}{for_form[0].form}: ({items})")
        return "{\n" + "".join(line + "\n" for line in lines) + "}"

    def __repr__(self) -> str:
        return f"MultiVector({[str(t) for t in self._terms]})"


def _terms_of(value) -> List[Term]:
    if isinstance(value, MultiVector):
        return value.terms
    if isinstance(value, Term):
        return [value]
    if isinstance(value, Alpha):
        return [Term(value)]
    raise TypeError(f"cannot convert {type(value).__name__} to terms")


def _dual_unit(a: Alpha) -> Alpha:
    """-q in the registry of a, where q is its quadrivector."""
    allowed = a.allowed
    return Alpha(allowed.target(list(Axis)), Sign.NEG, allowed)


def _term_entry(t: Term) -> str:
    mag = f"({t.magnitude})" if t.magnitude != 1 else ""
    return f"{t.sign}{mag}{t.xi}"
