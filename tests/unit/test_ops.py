"""Unit tests for arithmetic over number kinds."""

import math

import pytest

from ontonum.core import (
    Being,
    Complex,
    DomainViolation,
    Infinite,
    Integer,
    InvalidArgument,
    Irrational,
    Natural,
    NaturalComplex,
    Polarity,
    Rational,
    Real,
    Tag,
    Void,
    Zero,
    absolute,
    add,
    compare,
    is_positive,
    is_zero,
    multiply,
    negate,
    reciprocal,
    sign,
    subtract,
    with_sign,
)

POS = Polarity.POSITIVE
NEG = Polarity.NEGATIVE

FINITE_SAMPLES = [
    Integer(-5),
    Integer(0),
    Natural(3),
    Real(-2.5),
    Rational(1, 3),
    Irrational(math.e, "e"),
]


class TestInfiniteAbsorption:
    """Infinite absorbs every perturbation."""

    def test_integer_plus_infinite(self):
        assert add(Integer(2), Infinite()) == Infinite()
        assert Integer(2) + Infinite() == Infinite()

    @pytest.mark.parametrize("x", FINITE_SAMPLES + [Zero(NEG), Zero(POS)])
    @pytest.mark.parametrize("polarity", [POS, NEG])
    def test_left_infinite_absorbs(self, x, polarity):
        inf = Infinite(polarity)
        assert add(inf, x) is inf
        assert subtract(inf, x) is inf
        assert multiply(inf, x) is inf

    @pytest.mark.parametrize("x", FINITE_SAMPLES)
    def test_right_infinite_absorbs(self, x):
        inf = Infinite(NEG)
        assert add(x, inf) is inf
        assert multiply(x, inf) is inf

    def test_subtracting_infinite_negates_it(self):
        assert subtract(Integer(1), Infinite()) == Infinite(NEG)
        assert subtract(Zero(), Infinite(NEG)) == Infinite(POS)

    def test_infinite_with_infinite(self):
        a, b = Infinite(POS), Infinite(NEG)
        assert add(a, b) is a
        assert subtract(b, a) is b
        assert multiply(b, a) is b

    def test_infinite_absorbs_structural_sums(self):
        inf = Infinite()
        assert add(Complex.from_pair(1.0, 2.0), inf) is inf
        assert subtract(inf, NaturalComplex.from_pair(1, 1)) is inf

    def test_zero_times_infinite(self):
        assert multiply(Zero(), Infinite(NEG)) == Infinite(NEG)
        assert multiply(Infinite(), Zero(NEG)) == Infinite()


class TestInfiniteTimesStructural:
    """An Infinite turns a structural number by a quarter turn in its sense."""

    def test_positive_sense(self):
        assert multiply(Infinite(), Complex.from_pair(1.0, 0.0)) == Complex.from_pair(0.0, 1.0)
        assert multiply(Infinite(), Complex.from_pair(1.0, 2.0)) == Complex.from_pair(-2.0, 1.0)

    def test_negative_sense(self):
        assert multiply(Infinite(NEG), Complex.from_pair(1.0, 0.0)) == Complex.from_pair(0.0, -1.0)

    def test_either_side(self):
        c = Complex.from_pair(3.0, -1.0)
        assert multiply(c, Infinite(NEG)) == multiply(Infinite(NEG), c)

    def test_natural_complex_widens(self):
        turned = multiply(Infinite(), NaturalComplex.from_pair(1, 2))
        assert turned.tag is Tag.COMPLEX
        assert turned == Complex.from_pair(-2.0, 1.0)

    def test_four_turns_close(self):
        c = Complex.from_pair(2.5, -0.5)
        turned = c
        for _ in range(4):
            turned = multiply(Infinite(), turned)
        assert turned == c

    def test_members_preserved(self):
        c = Complex(Real(1.0), Real(0.0), [Being()])
        assert multiply(Infinite(), c).members == frozenset({Being()})

    def test_out_of_range_parts_are_absorbed(self):
        inf = Infinite()
        assert multiply(inf, NaturalComplex(Natural(10 ** 400))) is inf


class TestZero:
    """Zero as additive identity and signed product."""

    @pytest.mark.parametrize("x", FINITE_SAMPLES)
    def test_additive_identity(self, x):
        assert add(Zero(), x) is x
        assert add(x, Zero(NEG)) is x
        assert subtract(x, Zero()) is x

    def test_zero_plus_zero(self):
        assert add(Zero(NEG), Zero(NEG)) == Zero(NEG)
        assert add(Zero(NEG), Zero(POS)) == Zero(POS)
        assert subtract(Zero(NEG), Zero(POS)) == Zero(NEG)

    def test_zero_minus_finite(self):
        assert subtract(Zero(), Integer(4)) == Integer(-4)
        # A Natural cannot be negated in place; the result widens
        assert subtract(Zero(), Natural(3)) == Integer(-3)

    def test_zero_times_finite(self):
        assert multiply(Zero(), Integer(-3)) == Zero(NEG)
        assert multiply(Zero(NEG), Real(-2.0)) == Zero(POS)
        assert multiply(Real(7.0), Zero(NEG)) == Zero(NEG)

    def test_zero_times_zero(self):
        assert multiply(Zero(NEG), Zero(NEG)) == Zero(POS)
        assert multiply(Zero(POS), Zero(NEG)) == Zero(NEG)

    def test_zeros_pool_members(self):
        left, right = Zero(POS, [Being()]), Zero(NEG, [Void()])
        assert add(left, right) == Zero(POS, [Being(), Void()])
        assert subtract(left, right) == Zero(POS, [Being(), Void()])
        assert multiply(left, right) == Zero(NEG, [Being(), Void()])


class TestFiniteArithmetic:
    """Finite operands combine in the narrowest kind."""

    def test_natural_closure(self):
        assert add(Natural(2), Natural(3)) == Natural(5)
        assert multiply(Natural(4), Natural(5)) == Natural(20)

    def test_natural_subtraction_widens(self):
        assert subtract(Natural(2), Natural(3)) == Integer(-1)
        assert subtract(Natural(3), Natural(2)) == Natural(1)

    def test_mixed_integral(self):
        assert multiply(Natural(2), Integer(3)) == Integer(6)
        assert add(Integer(2 ** 100), Integer(1)).value == 2 ** 100 + 1

    def test_rational_arithmetic(self):
        assert add(Rational(1, 2), Rational(1, 3)) == Rational(5, 6)
        r = add(Integer(1), Rational(1, 2))
        assert r.tag is Tag.RATIONAL
        assert r == Rational(3, 2)
        assert multiply(Rational(2, 3), Rational(3, 4)) == Rational(1, 2)

    def test_real_arithmetic(self):
        assert add(Real(1.5), Integer(2)) == Real(3.5)
        assert subtract(Real(1.0), Rational(1, 4)) == Real(0.75)
        r = add(Irrational(1.0), Real(1.0))
        assert r.tag is Tag.REAL
        assert r == Real(2.0)

    def test_real_overflow_becomes_infinite(self):
        assert multiply(Real(1e308), Real(10.0)) == Infinite(POS)
        assert multiply(Real(-1e308), Real(10.0)) == Infinite(NEG)
        assert add(Real(1.7e308), Real(1.7e308)) == Infinite(POS)

    def test_zero_factor_against_huge_integer(self):
        huge = Integer(10 ** 400)
        assert multiply(huge, Real(0.0)) == Real(0.0)
        assert multiply(Irrational(0.0), Natural(10 ** 400)) == Real(0.0)
        product = multiply(huge, Rational(0.0, 1.0))
        assert product.tag is Tag.RATIONAL
        assert product == Rational(0, 1)

    def test_huge_integer_times_real(self):
        assert multiply(Integer(-10 ** 400), Real(2.0)) == Infinite(NEG)

    def test_operators(self):
        assert Integer(2) + Integer(3) == Integer(5)
        assert Integer(2) - Integer(3) == Integer(-1)
        assert Integer(2) * Integer(3) == Integer(6)
        assert -Integer(4) == Integer(-4)

    def test_non_number_operand(self):
        with pytest.raises(InvalidArgument):
            add(Integer(1), 5)
        with pytest.raises(InvalidArgument):
            multiply(Being(), Integer(1))
        with pytest.raises(TypeError):
            Integer(1) + 5


class TestStructuralArithmetic:
    """Complex and NaturalComplex arithmetic."""

    def test_complex_product(self):
        product = multiply(Complex.from_pair(1.0, 2.0), Complex.from_pair(3.0, 4.0))
        assert product == Complex.from_pair(-5.0, 10.0)

    def test_complex_plus_linear(self):
        assert add(Complex.from_pair(1.0, 2.0), Integer(3)) == Complex.from_pair(4.0, 2.0)

    def test_complex_difference(self):
        assert subtract(Complex.from_pair(1.0, 2.0), Complex.from_pair(0.5, 3.0)) == Complex.from_pair(0.5, -1.0)

    def test_natural_complex_sum_stays_natural(self):
        total = add(NaturalComplex.from_pair(1, 2), NaturalComplex.from_pair(3, 4))
        assert total == NaturalComplex.from_pair(4, 6)

    def test_natural_complex_product_widens(self):
        j = NaturalComplex.from_pair(0, 1)
        assert multiply(j, j) == Complex.from_pair(-1.0, 0.0)

    def test_zero_times_complex(self):
        assert multiply(Zero(NEG), Complex.from_pair(1.0, 1.0)) == Zero(NEG)


class TestNegation:
    """Additive inverse."""

    def test_unbounded(self):
        assert negate(Zero()) == Zero(NEG)
        assert negate(Infinite()) == Infinite(NEG)

    def test_natural(self):
        assert negate(Natural(0)) == Natural(0)
        with pytest.raises(DomainViolation):
            negate(Natural(3))
        with pytest.raises(DomainViolation):
            negate(NaturalComplex.from_pair(1, 0))

    def test_domain_violation_is_value_error(self):
        with pytest.raises(ValueError):
            negate(Natural(1))

    def test_real_family(self):
        assert negate(Real(2.5)) == Real(-2.5)
        assert negate(Rational(1, 2)) == Rational(-1, 2)
        pi = Irrational(math.pi, "π")
        assert negate(pi).symbol == "-π"
        assert negate(negate(pi)).symbol == "π"

    def test_complex(self):
        assert negate(Complex.from_pair(1.0, -2.0)) == Complex.from_pair(-1.0, 2.0)

    def test_members_preserved(self):
        x = Integer(3, [Being()])
        assert negate(x).members == x.members
        z = Zero(POS, [Being()])
        assert negate(z) == Zero(NEG, [Being()])


class TestReciprocal:
    """Multiplicative inverse and the Zero/Infinite duality."""

    def test_unbounded_duals(self):
        assert reciprocal(Zero()) == Infinite(NEG)
        assert reciprocal(Zero(NEG)) == Infinite(POS)
        assert reciprocal(Infinite(NEG)) == Zero(POS)

    def test_finite(self):
        assert reciprocal(Integer(4)) == Rational(1, 4)
        assert reciprocal(Rational(2, 3)) == Rational(3, 2)
        assert reciprocal(Real(0.5)) == Real(2.0)

    def test_finite_zero(self):
        assert reciprocal(Integer(0)) == Infinite()
        assert reciprocal(Real(0.0)) == Infinite()

    def test_huge_integer(self):
        assert reciprocal(Integer(-10 ** 400)) == Zero(NEG)

    def test_tiny_rational_overflows(self):
        assert reciprocal(Rational(Real(1e-310), Real(1.0))) == Infinite(POS)
        assert reciprocal(Rational(Real(-1e-310), Real(1.0))) == Infinite(NEG)

    def test_complex(self):
        assert reciprocal(Complex.from_pair(0.0, 1.0)) == Complex.from_pair(0.0, -1.0)


class TestSignAndOrder:
    """Sign queries, absolute value and comparison."""

    def test_absolute(self):
        assert absolute(Integer(-3)) == Integer(3)
        assert absolute(Natural(3)) == Natural(3)
        assert absolute(Infinite(NEG)) == Infinite()
        assert absolute(Zero(NEG)) == Zero()
        assert absolute(Complex.from_pair(3.0, 4.0)) == Real(5.0)

    def test_absolute_of_huge_natural_complex(self):
        huge = NaturalComplex(Natural(10 ** 400), Natural(0))
        assert huge.magnitude == math.inf
        assert absolute(huge) == Infinite()

    def test_with_sign(self):
        assert with_sign(Integer(3), NEG) == Integer(-3)
        assert with_sign(Integer(-3), NEG) == Integer(-3)
        assert with_sign(Zero(), NEG) == Zero(NEG)
        assert with_sign(Infinite(NEG), POS) == Infinite()
        assert with_sign(Natural(2), POS) == Natural(2)
        with pytest.raises(DomainViolation):
            with_sign(Natural(2), NEG)
        with pytest.raises(InvalidArgument):
            with_sign(Complex(), POS)

    def test_sign(self):
        assert sign(Integer(-3)) == -1
        assert sign(Zero(NEG)) == 0
        assert sign(Infinite(NEG)) == -1
        assert sign(Real(0.1)) == 1
        with pytest.raises(InvalidArgument):
            sign(Complex())

    def test_predicates(self):
        assert is_zero(Integer(0))
        assert is_zero(Complex())
        assert not is_positive(Real(-1.0))
        assert is_positive(Zero())
        with pytest.raises(InvalidArgument):
            is_positive(NaturalComplex())

    def test_compare(self):
        assert compare(Integer(5), Infinite()) == -1
        assert compare(Infinite(NEG), Real(-1e308)) == -1
        assert compare(Zero(NEG), Integer(0)) == 0
        assert compare(Real(2.5), Integer(2)) == 1
        assert compare(Infinite(), Infinite()) == 0
        assert compare(Rational(1, 3), Real(0.5)) == -1
