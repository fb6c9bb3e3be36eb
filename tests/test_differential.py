"""
Tests for differential operators.
"""

from arthroprod.algebra import Alpha, ArDifferential, MultiVector, Side, Sign, Term, Xi, Dmu, DG, full


class TestArDifferential:
    """Applying a set of units as derivative multipliers."""

    def test_units_are_stored_inverted(self):
        d = ArDifferential([Alpha("0"), Alpha("1")])
        assert d.wrt == (Alpha("0"), Alpha("1", Sign.NEG))

    def test_one_term_per_unit(self):
        m = MultiVector([Term(Alpha("p"), "a"), Term(Alpha("1"), "b")])
        assert len(Dmu().apply_left(m)) == 8
        assert len(DG().apply_right(m)) == 32

    def test_apply_left_to_point(self):
        result = Dmu().apply_left(MultiVector([Term(Alpha("p"), "a")]))
        assert [str(t) for t in result] == [
            "+a0(∂0ξa)", "-a1(∂1ξa)", "-a2(∂2ξa)", "-a3(∂3ξa)",
        ]

    def test_left_and_right_differ(self):
        d = ArDifferential([Alpha("2")])
        m = MultiVector([Term(Alpha("1"), "a")])
        assert d.apply_left(m).terms[0].alpha == Alpha("12")
        assert d.apply_right(m).terms[0].alpha == Alpha("12", Sign.NEG)
        assert d.apply(m, Side.RIGHT) == d.apply_right(m)
        assert d.apply(m) == d.apply_left(m)

    def test_partials_accumulate(self):
        d = ArDifferential([Alpha("0")])
        m = d.apply_left(d.apply_left(MultiVector([Term(Alpha("1"), "a")])))
        assert m.terms[0].xi_str() == "∂0∂0ξa"
        assert m.terms[0].alpha == Alpha("1")

    def test_unsimplified(self):
        d = ArDifferential([Alpha("1"), Alpha("1")])
        assert len(d.apply_left(MultiVector([Term(Alpha("p"), "a")]))) == 2

    def test_equality(self):
        assert Dmu() == ArDifferential([Alpha("0"), Alpha("1"), Alpha("2"), Alpha("3")])
        assert Dmu() != DG()

    def test_unit_symbol_factor_does_not_change_partials(self):
        """A factor with an empty symbol leaves derivative symbols unchanged."""
        b = MultiVector([Term(Alpha("1"), "b")])
        scaled = full(Term(Alpha("p"), Xi.empty()), Term(Alpha("1"), "b"))
        assert scaled == b
        diff = (Dmu().apply_left(b) - Dmu().apply_left(scaled)).simplify()
        assert len(diff) == 0
