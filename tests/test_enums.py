"""
Tests for the primitive value types: Axis, Sign, Grade and Form.
"""

import pytest

from arthroprod.algebra import Axis, Sign, Grade, Form
from arthroprod.core.errors import ArError, InvalidIndexError, InvalidFormError


# =============================================================================
# Axis
# =============================================================================

class TestAxis:
    """Tests for Axis parsing and ordering."""

    def test_axes_are_ordered(self):
        """T < X < Y < Z."""
        assert Axis.T < Axis.X < Axis.Y < Axis.Z

    def test_parse_int(self):
        assert Axis.parse(0) is Axis.T
        assert Axis.parse(3) is Axis.Z

    def test_parse_digit_string(self):
        assert Axis.parse("1") is Axis.X
        assert Axis.parse("2") is Axis.Y

    def test_parse_axis_is_identity(self):
        assert Axis.parse(Axis.Y) is Axis.Y

    @pytest.mark.parametrize("bad", [4, -1, "4", "x", "12", "", None, True, 1.0])
    def test_parse_rejects_invalid(self, bad):
        """Anything that is not one of 0..3 is an invalid index."""
        with pytest.raises(InvalidIndexError):
            Axis.parse(bad)

    def test_invalid_index_is_recoverable(self):
        """Construction errors are ValueErrors."""
        with pytest.raises(ValueError):
            Axis.parse(7)

    def test_spatial(self):
        assert not Axis.T.is_spatial
        assert all(a.is_spatial for a in (Axis.X, Axis.Y, Axis.Z))

    def test_str(self):
        assert [str(a) for a in Axis] == ["0", "1", "2", "3"]


# =============================================================================
# Sign
# =============================================================================

class TestSign:
    """Sign forms a group of order 2 under combine."""

    def test_combine_table(self):
        assert Sign.POS.combine(Sign.POS) is Sign.POS
        assert Sign.POS.combine(Sign.NEG) is Sign.NEG
        assert Sign.NEG.combine(Sign.POS) is Sign.NEG
        assert Sign.NEG.combine(Sign.NEG) is Sign.POS

    def test_negation_is_involution(self):
        for s in Sign:
            assert -(-s) is s
            assert -s is not s

    def test_ordering(self):
        assert Sign.POS < Sign.NEG
        assert sorted([Sign.NEG, Sign.POS]) == [Sign.POS, Sign.NEG]

    def test_str(self):
        assert str(Sign.POS) == "+"
        assert str(Sign.NEG) == "-"


# =============================================================================
# Form
# =============================================================================

class TestForm:
    """Tests for Form construction, grade and rendering."""

    def test_point(self):
        p = Form.point()
        assert p.grade == Grade.POINT
        assert str(p) == "p"
        assert Form.parse("p") == p

    @pytest.mark.parametrize("index,grade", [
        ("0", Grade.VECTOR),
        ("31", Grade.BIVECTOR),
        ("023", Grade.TRIVECTOR),
        ("0123", Grade.QUADRIVECTOR),
    ])
    def test_grade_is_axis_count(self, index, grade):
        assert Form.parse(index).grade == grade

    def test_order_is_significant(self):
        """Forms compare by written order, keys by axis set."""
        assert Form.parse("31") != Form.parse("13")
        assert Form.parse("31").key == Form.parse("13").key == (1, 3)

    def test_from_axes(self):
        f = Form.from_axes([Axis.Z, 1])
        assert f.axes == (Axis.Z, Axis.X)
        assert str(f) == "31"

    def test_too_many_axes(self):
        with pytest.raises(InvalidFormError):
            Form.from_axes([0, 1, 2, 3, 0])

    def test_invalid_axis_in_string(self):
        with pytest.raises(InvalidIndexError):
            Form.parse("04")

    def test_parse_rejects_other_types(self):
        with pytest.raises(ArError):
            Form.parse(12)

    def test_parse_rejects_empty_string(self):
        """Only "p" names the point; an empty axis list must be explicit."""
        with pytest.raises(InvalidFormError):
            Form.parse("")
        assert Form.parse([]) == Form.point()

    def test_repeats(self):
        assert Form.parse("11").has_repeats
        assert not Form.parse("12").has_repeats

    def test_registry_index(self):
        """Sort key comes from the axis set's position in the default registry."""
        assert Form.point().registry_index == 0
        assert Form.parse("31").registry_index == 2
        assert Form.parse("13").registry_index == 2
        assert Form.parse("03").registry_index == 15

    def test_hashable(self):
        assert len({Form.parse("12"), Form.parse("12"), Form.parse("21")}) == 2
