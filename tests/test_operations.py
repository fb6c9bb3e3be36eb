"""
Tests for the free-function operations: products, conjugates and division.
"""

import logging

import pytest

from arthroprod.algebra import (
    Alpha,
    MultiVector,
    Sign,
    Term,
    Xi,
    G,
    Magnitude,
    as_terms,
    dagger,
    diamond,
    div,
    double_dagger,
    dual,
    full,
    hermitian,
    mm_bar,
    project,
    rev,
)
from arthroprod.core.errors import AlgebraInvariantError


def _unit_point():
    return Term(Alpha("p"), Xi.empty())


# =============================================================================
# Conversion and products
# =============================================================================

class TestAsTerms:
    """Anything AR-like can be viewed as a list of Terms."""

    def test_alpha(self):
        assert as_terms(Alpha("1")) == [Term(Alpha("1"))]

    def test_term(self):
        t = Term(Alpha("1"), "a")
        assert as_terms(t) == [t]

    def test_multivector(self):
        assert len(as_terms(G())) == 16

    def test_sequence(self):
        terms = as_terms([Alpha("1"), Term(Alpha("2"), "b")])
        assert [str(t) for t in terms] == ["+a1(ξ1)", "+a2(ξb)"]

    @pytest.mark.parametrize("bad", ["12", 3, [1]])
    def test_rejects(self, bad):
        with pytest.raises(TypeError):
            as_terms(bad)


class TestFull:
    """The Cartesian full product."""

    def test_term_count(self):
        assert len(full(G(), G())) == 256
        assert len(full(Alpha("1"), [Alpha("2"), Alpha("3")])) == 2

    def test_order_and_signs(self):
        m = full(Alpha("1"), [Alpha("2"), Alpha("3")])
        assert [t.alpha for t in m] == [Alpha("12"), Alpha("31", Sign.NEG)]

    def test_matches_operator(self):
        a = MultiVector([Term(Alpha("1"), "a"), Term(Alpha("0"), "b")])
        b = MultiVector([Term(Alpha("23"), "c")])
        assert full(a, b) == a * b

    def test_vector_product_simplifies_to_bivector(self):
        m = full(Alpha("1"), Alpha("2")).simplify()
        assert m == MultiVector([Term(Alpha("12"), Xi.merge([Xi("1"), Xi("2")]))])


class TestFreeConjugates:
    """Free-function forms agree with the methods."""

    def test_agree_with_methods(self):
        g = G()
        assert rev(g) == g.reverse()
        assert hermitian(g) == g.hermitian()
        assert dagger(g) == g.dagger()
        assert diamond(g) == g.diamond()
        assert double_dagger(g) == g.double_dagger()
        assert dual(g) == g.dual()
        assert project(g, 1) == g.project(1)

    def test_accept_single_values(self):
        assert hermitian(Alpha("1")) == MultiVector([-Term(Alpha("1"))])
        assert dual(Alpha("p")) == MultiVector([Term(Alpha("0123", Sign.NEG), "p")])

    def test_dual_of_all_forms(self):
        forms = sorted(t.form.registry_index for t in dual(G()))
        assert forms == list(range(16))


class TestMMBar:
    """M ^ dual(M)."""

    def _m(self):
        return MultiVector([Term(Alpha("p"), "a"), Term(Alpha("0123"), "a")])

    def test_uncancelled(self):
        assert len(mm_bar(self._m(), cancel=False)) == 4

    def test_cancelled(self):
        """The ±a0123 pair cancels, leaving the two +ap terms."""
        m = mm_bar(self._m())
        assert len(m) == 2
        assert all(t.alpha == Alpha("p") for t in m)
        assert all(t.xi_str() == "ξa^2" for t in m)


# =============================================================================
# Division
# =============================================================================

class TestDivision:
    """div(left, right) divides left into right."""

    def test_single_term_by_itself(self):
        a = Term(Alpha("23"), "a")
        assert div(a, a) == MultiVector([_unit_point()])

    @pytest.mark.parametrize("index", ["p", "0", "31", "012", "123", "0123", "02"])
    def test_every_form_divides_itself(self, index):
        a = Term(Alpha(index), "x", 5)
        assert div(a, a).simplify() == MultiVector([_unit_point()])

    def test_single_terms(self):
        m = div(Term(Alpha("1"), "a", 2), Term(Alpha("2"), "b", 6))
        assert m == MultiVector([Term(Alpha("12", Sign.NEG), Xi.merge([Xi("b"), Xi("a").inverse()]), 3)])
        assert str(m.terms[0]) == "-a12(3)(ξb/ξa)"

    def test_alphas(self):
        m = div(Alpha("1"), Alpha("1"))
        assert m == MultiVector([_unit_point()])

    def test_van_der_mark_self_division(self, two_term_mvec):
        assert div(two_term_mvec, two_term_mvec) == MultiVector([_unit_point()])

    def test_van_der_mark_matches_single_term_division(self, two_term_mvec):
        """Dividing a single term into a sum is distributive."""
        left = Term(Alpha("23"), "a")
        expected = MultiVector(
            div(left, t).terms[0] for t in two_term_mvec
        ).simplify()
        assert div(left, two_term_mvec) == expected
        assert div(left, two_term_mvec) == MultiVector([
            _unit_point(),
            Term(Alpha("23", Sign.NEG), Xi.empty()),
        ])

    def test_van_der_mark_divisor_symbol_cancels(self, two_term_mvec):
        """The divisor is 4.ξa^4 ap; dividing by it removes the symbol too."""
        phi = full(two_term_mvec, hermitian(two_term_mvec)).simplify()
        divisor = full(phi, phi.diamond()).simplify()
        assert len(divisor) == 1
        assert divisor.terms[0].xi_str() == "ξa^4"
        assert divisor.terms[0].magnitude == 4

        m = div(two_term_mvec, Term(Alpha("p"), "c"))
        expected_xi = Xi.merge([Xi("c"), Xi("a").inverse()])
        assert m == MultiVector([
            Term(Alpha("p"), expected_xi, Magnitude(1, 2)),
            Term(Alpha("23", Sign.NEG), expected_xi, Magnitude(1, 2)),
        ])
        assert str(m.terms[0]) == "+ap(1/2)(ξc/ξa)"

    def test_van_der_mark_divisor_magnitude_cancels(self):
        m = MultiVector([Term(Alpha("p"), "a", 3), Term(Alpha("23"), "a", 3)])
        phi = full(m, hermitian(m)).simplify()
        divisor = full(phi, phi.diamond()).simplify()
        assert divisor.terms[0].magnitude == 324
        assert divisor.terms[0].xi_str() == "ξa^4"
        assert div(m, m) == MultiVector([_unit_point()])

    def test_van_der_mark_logs_divisor(self, two_term_mvec, debug_logging):
        div(two_term_mvec, two_term_mvec)
        assert any("divisor" in r.getMessage() for r in debug_logging.records)

    def test_non_invertible(self, caplog):
        zero = MultiVector([Term(Alpha("p"), "a"), -Term(Alpha("p"), "a")])
        with caplog.at_level(logging.ERROR, logger="arthroprod"):
            with pytest.raises(AlgebraInvariantError):
                div(zero, Alpha("1"))
        assert any(r.levelno == logging.ERROR for r in caplog.records)

    def test_zero_single_term(self):
        with pytest.raises(ZeroDivisionError):
            div(Term(Alpha("1"), "a", 0), Alpha("2"))
