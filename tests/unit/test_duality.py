"""Unit tests for named conversions between kinds."""

import pytest

from ontonum.core import (
    Being,
    Complex,
    Infinite,
    Integer,
    InvalidArgument,
    Irrational,
    Natural,
    NaturalComplex,
    Polarity,
    Rational,
    Real,
    Void,
    Zero,
    being_to_void,
    complex_to_natural_complex,
    infinite_to_zero,
    integer_to_natural,
    integer_to_real,
    natural_complex_to_complex,
    natural_to_integer,
    promote_to_real,
    rational_to_real,
    real_to_integer,
    real_to_rational,
    to_complex,
    void_to_being,
    void_to_zero,
    zero_to_infinite,
    zero_to_void,
)

POS = Polarity.POSITIVE
NEG = Polarity.NEGATIVE

ALL_CONVERSIONS = [
    zero_to_infinite,
    infinite_to_zero,
    zero_to_void,
    void_to_zero,
    being_to_void,
    void_to_being,
    natural_to_integer,
    integer_to_natural,
    integer_to_real,
    real_to_integer,
    rational_to_real,
    real_to_rational,
    promote_to_real,
    natural_complex_to_complex,
    complex_to_natural_complex,
    to_complex,
]


class TestAbsentInput:
    """Every conversion propagates None."""

    @pytest.mark.parametrize("conversion", ALL_CONVERSIONS)
    def test_none_in_none_out(self, conversion):
        assert conversion(None) is None


class TestPolarDuality:
    """Zero and Infinite."""

    def test_zero_to_infinite_flips_polarity(self):
        assert zero_to_infinite(Zero(POS)) == Infinite(NEG)
        assert zero_to_infinite(Zero(NEG)) == Infinite(POS)

    def test_infinite_to_zero_flips_polarity(self):
        assert infinite_to_zero(Infinite(POS)) == Zero(NEG)

    @pytest.mark.parametrize("polarity", [POS, NEG])
    def test_round_trip(self, polarity):
        z = Zero(polarity, [Being(), Void()])
        assert infinite_to_zero(zero_to_infinite(z)) == z
        inf = Infinite(polarity, [Void()])
        assert zero_to_infinite(infinite_to_zero(inf)) == inf

    def test_wrong_kind(self):
        with pytest.raises(InvalidArgument):
            zero_to_infinite(Integer(0))
        with pytest.raises(InvalidArgument):
            infinite_to_zero(Real(1e308))


class TestZeroVoid:
    """Zero and Void share members; polarity is not carried."""

    def test_members_round_trip(self):
        z = Zero(NEG, [Being()])
        v = zero_to_void(z)
        assert v == Void([Being()])
        assert void_to_zero(v, z.polarity) == z

    def test_default_polarity(self):
        assert void_to_zero(zero_to_void(Zero(NEG))) == Zero(POS)

    def test_empty(self):
        assert zero_to_void(Zero()) == Void()
        assert void_to_zero(Void()) == Zero()

    def test_wrong_kind(self):
        with pytest.raises(InvalidArgument):
            zero_to_void(Void())
        with pytest.raises(InvalidArgument):
            void_to_zero(Being())


class TestBeingVoid:
    def test_conversions(self):
        assert being_to_void(Being([Void()])) == Void([Void()])
        assert void_to_being(Void([Being()])) == Being([Being()])

    def test_wrong_kind(self):
        with pytest.raises(InvalidArgument):
            being_to_void(Void())


class TestIntegralConversions:
    """Natural, Integer and Real."""

    def test_natural_integer(self):
        assert natural_to_integer(Natural(4)) == Integer(4)
        assert integer_to_natural(Integer(4)) == Natural(4)

    def test_negative_integer_is_not_natural(self):
        with pytest.raises(InvalidArgument):
            integer_to_natural(Integer(-1))

    def test_integer_to_real(self):
        assert integer_to_real(Integer(3)) == Real(3.0)
        assert integer_to_real(Natural(3)) == Real(3.0)

    def test_integer_to_real_overflow(self):
        assert integer_to_real(Integer(10 ** 400)) == Infinite(POS)
        assert integer_to_real(Integer(-10 ** 400)) == Infinite(NEG)

    def test_real_to_integer(self):
        assert real_to_integer(Real(3.0)) == Integer(3)
        assert real_to_integer(Rational(6, 2)) == Integer(3)

    def test_real_to_integer_fraction(self):
        with pytest.raises(InvalidArgument):
            real_to_integer(Real(3.7))
        assert real_to_integer(Real(3.7), truncate=True) == Integer(3)
        assert real_to_integer(Real(-3.7), truncate=True) == Integer(-3)

    def test_members_preserved(self):
        n = Natural(2, [Being()])
        assert natural_to_integer(n).members == n.members
        assert integer_to_real(n).members == n.members


class TestRealFamilyConversions:
    def test_rational_real(self):
        assert rational_to_real(Rational(1, 4)) == Real(0.25)
        assert real_to_rational(Real(0.5)) == Rational(1, 2)

    def test_rational_passes_through(self):
        r = Rational(1, 3)
        assert real_to_rational(r) is r

    def test_promote_to_real(self):
        assert promote_to_real(Integer(2)) == Real(2.0)
        pi = Irrational(3.14, "π")
        assert promote_to_real(pi) is pi
        with pytest.raises(InvalidArgument):
            promote_to_real(Zero())


class TestComplexConversions:
    def test_natural_complex_to_complex(self):
        assert natural_complex_to_complex(NaturalComplex.from_pair(1, 2)) == Complex.from_pair(1.0, 2.0)

    def test_complex_to_natural_complex(self):
        assert complex_to_natural_complex(Complex.from_pair(1.0, 2.0)) == NaturalComplex.from_pair(1, 2)

    def test_complex_to_natural_complex_rejects(self):
        with pytest.raises(InvalidArgument):
            complex_to_natural_complex(Complex.from_pair(-1.0, 0.0))
        with pytest.raises(InvalidArgument):
            complex_to_natural_complex(Complex.from_pair(1.5, 0.0))

    def test_to_complex(self):
        assert to_complex(Integer(2)) == Complex.from_pair(2.0, 0.0)
        c = Complex.from_pair(1.0, 1.0)
        assert to_complex(c) is c
        assert to_complex(Natural(1, [Being()])).members == frozenset({Being()})

    def test_to_complex_rejects_unbounded(self):
        with pytest.raises(InvalidArgument):
            to_complex(Infinite())
        with pytest.raises(InvalidArgument):
            to_complex(Void())
