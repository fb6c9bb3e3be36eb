"""
Tests for common MultiVectors and builders.
"""

from arthroprod.algebra import (
    Alpha, MultiVector, Sign, Term,
    alpha, term, mvec,
    G, B, T, A, E, zet_B, zet_T, zet_A, zet_E,
    fields, even_sub_algebra, odd_sub_algebra,
)
from arthroprod.core.constants import ALLOWED_INDICES


def _forms(m):
    return [str(t.form) for t in m]


class TestBuilders:
    """alpha, term and mvec."""

    def test_alpha(self):
        assert alpha("-23") == Alpha("23", Sign.NEG)

    def test_term(self):
        assert term("foo", "23") == Term(Alpha("23"), "foo")
        assert term(None, "23").xi_str() == "ξ23"

    def test_mvec(self):
        m = mvec(Alpha("1"), term("b", "2"), MultiVector([Term(Alpha("3"))]))
        assert _forms(m) == ["1", "2", "3"]


class TestCommonMultiVectors:
    """The zets and their subgroups."""

    def test_G(self):
        assert _forms(G()) == ALLOWED_INDICES

    def test_zets(self):
        assert _forms(zet_B()) == ["p", "23", "31", "12"]
        assert _forms(zet_T()) == ["0", "023", "031", "012"]
        assert _forms(zet_A()) == ["123", "1", "2", "3"]
        assert _forms(zet_E()) == ["0123", "01", "02", "03"]

    def test_three_element_groups(self):
        assert _forms(B()) == ["23", "31", "12"]
        assert _forms(T()) == ["023", "031", "012"]
        assert _forms(A()) == ["1", "2", "3"]
        assert _forms(E()) == ["01", "02", "03"]

    def test_sub_algebras(self):
        assert _forms(fields()) == ["23", "31", "12", "01", "02", "03"]
        even = even_sub_algebra()
        odd = odd_sub_algebra()
        assert len(even) == len(odd) == 8
        assert all(t.form.grade % 2 == 0 for t in even)
        assert all(t.form.grade % 2 == 1 for t in odd)

    def test_even_sub_algebra_is_closed(self):
        forms = {t.form for t in even_sub_algebra()}
        assert all(t.form in forms for t in (even_sub_algebra() * even_sub_algebra()))

    def test_default_symbols(self):
        assert [t.xi_str() for t in B()] == ["ξ23", "ξ31", "ξ12"]

    def test_fresh_values(self):
        m = G()
        m.push(Alpha("1"))
        assert len(G()) == 16
