"""
Named conversions between kinds.

Every cross-kind relationship is an explicit function here; nothing is
converted implicitly. Conversions return the converted value, raise
InvalidArgument when the input has the wrong kind or the conversion would
lose information, and propagate an absent (None) input as None.
"""

import math
from typing import FrozenSet, Optional

from .errors import InvalidArgument
from .existence import Being, Existence, Tag, Void
from .kinds import (
    FINITE_TAGS,
    INTEGRAL_TAGS,
    REAL_TAGS,
    Complex,
    Infinite,
    Integer,
    Natural,
    NaturalComplex,
    Number,
    Rational,
    Real,
    Zero,
)
from .polarity import Polarity


def _expect(x: Existence, tags: FrozenSet[Tag], conversion: str) -> None:
    if not isinstance(x, Existence) or x.tag not in tags:
        names = ", ".join(sorted(t.value for t in tags))
        raise InvalidArgument(f"{conversion} expects {names}, got {x!r}")


# ============================================================================
# Zero <-> Infinite <-> Void
# ============================================================================

def zero_to_infinite(zero: Optional[Zero]) -> Optional[Infinite]:
    """Polar dual: Zero(p) -> Infinite(not p), members preserved."""
    if zero is None:
        return None
    _expect(zero, frozenset({Tag.ZERO}), "zero_to_infinite")
    return Infinite(zero.polarity.inverted(), zero.members)


def infinite_to_zero(infinite: Optional[Infinite]) -> Optional[Zero]:
    """Polar dual: Infinite(p) -> Zero(not p), members preserved."""
    if infinite is None:
        return None
    _expect(infinite, frozenset({Tag.INFINITE}), "infinite_to_zero")
    return Zero(infinite.polarity.inverted(), infinite.members)


def zero_to_void(zero: Optional[Zero]) -> Optional[Void]:
    """Treat a Zero as the Void sharing its members. Polarity is not carried."""
    if zero is None:
        return None
    _expect(zero, frozenset({Tag.ZERO}), "zero_to_void")
    return Void(zero.members)


def void_to_zero(void: Optional[Void], polarity: Polarity = Polarity.POSITIVE) -> Optional[Zero]:
    """
    Treat a Void as a Zero sharing its members.

    Args:
        void: Void to convert
        polarity: Polarity of the resulting Zero (a Void has none)
    """
    if void is None:
        return None
    _expect(void, frozenset({Tag.VOID}), "void_to_zero")
    return Zero(polarity, void.members)


def being_to_void(being: Optional[Being]) -> Optional[Void]:
    if being is None:
        return None
    _expect(being, frozenset({Tag.BEING}), "being_to_void")
    return -being


def void_to_being(void: Optional[Void]) -> Optional[Being]:
    if void is None:
        return None
    _expect(void, frozenset({Tag.VOID}), "void_to_being")
    return -void


# ============================================================================
# Integral <-> Real family
# ============================================================================

def natural_to_integer(natural: Optional[Natural]) -> Optional[Integer]:
    if natural is None:
        return None
    _expect(natural, frozenset({Tag.NATURAL}), "natural_to_integer")
    return Integer(natural.value, natural.members)


def integer_to_natural(integer: Optional[Integer]) -> Optional[Natural]:
    """Narrow an Integer to a Natural. Negative values raise InvalidArgument."""
    if integer is None:
        return None
    _expect(integer, INTEGRAL_TAGS, "integer_to_natural")
    return Natural(integer.value, integer.members)


def integer_to_real(integer: Optional[Number]) -> Optional[Number]:
    """
    Promote an Integer or Natural to a Real.

    Returns:
        Real with the nearest double value, or an Infinite of the same sign
        when the magnitude exceeds the double range
    """
    if integer is None:
        return None
    _expect(integer, INTEGRAL_TAGS, "integer_to_real")
    try:
        return Real(float(integer.value), integer.members)
    except OverflowError:
        return Infinite(Polarity.from_sign(integer.value > 0), integer.members)


def real_to_integer(real: Optional[Number], truncate: bool = False) -> Optional[Integer]:
    """
    Convert a Real-family number to an Integer.

    Args:
        real: Real, Rational or Irrational
        truncate: Allow dropping the fractional part (toward zero)

    Raises:
        InvalidArgument: If the value has a fractional part and truncate is False
    """
    if real is None:
        return None
    _expect(real, REAL_TAGS, "real_to_integer")
    if not truncate and not float(real.value).is_integer():
        raise InvalidArgument(f"real_to_integer would truncate {real.value!r}; pass truncate=True")
    return Integer(math.trunc(real.value), real.members)


def rational_to_real(rational: Optional[Rational]) -> Optional[Real]:
    if rational is None:
        return None
    _expect(rational, frozenset({Tag.RATIONAL}), "rational_to_real")
    return Real(rational.value, rational.members)


def real_to_rational(real: Optional[Number]) -> Optional[Rational]:
    """Tag a Real-family number as the Rational value / 1."""
    if real is None:
        return None
    _expect(real, REAL_TAGS, "real_to_rational")
    if real.tag is Tag.RATIONAL:
        return real
    return Rational(Real(real.value), Real(1.0), real.members)


def promote_to_real(x: Optional[Number]) -> Optional[Number]:
    """Integral kinds become Reals (or Infinite on overflow); Real-family kinds pass through."""
    if x is None:
        return None
    _expect(x, FINITE_TAGS, "promote_to_real")
    if x.tag in INTEGRAL_TAGS:
        return integer_to_real(x)
    return x


# ============================================================================
# NaturalComplex <-> Complex
# ============================================================================

def natural_complex_to_complex(nc: Optional[NaturalComplex]) -> Optional[Complex]:
    """Embed a NaturalComplex in Complex by promoting both parts to Real."""
    if nc is None:
        return None
    _expect(nc, frozenset({Tag.NATURAL_COMPLEX}), "natural_complex_to_complex")
    return Complex(integer_to_real(nc.real), integer_to_real(nc.imaginary), nc.members)


def complex_to_natural_complex(c: Optional[Complex]) -> Optional[NaturalComplex]:
    """
    Narrow a Complex to a NaturalComplex.

    Raises:
        InvalidArgument: If either part is fractional or negative
    """
    if c is None:
        return None
    _expect(c, frozenset({Tag.COMPLEX}), "complex_to_natural_complex")
    real = integer_to_natural(real_to_integer(c.real))
    imaginary = integer_to_natural(real_to_integer(c.imaginary))
    return NaturalComplex(real, imaginary, c.members)


def to_complex(x: Optional[Number]) -> Optional[Number]:
    """
    View any finite or structural number as a Complex.

    Linear finite kinds become ``Complex(x, 0)`` with members preserved.
    Returns an Infinite instead when an integral part exceeds the double range.
    """
    if x is None:
        return None
    if not isinstance(x, Number):
        raise InvalidArgument(f"to_complex expects a number, got {x!r}")
    if x.tag is Tag.COMPLEX:
        return x
    if x.tag is Tag.NATURAL_COMPLEX:
        real = integer_to_real(x.real)
        imaginary = integer_to_real(x.imaginary)
        for part in (real, imaginary):
            if part.tag is Tag.INFINITE:
                return part
        return Complex(real, imaginary, x.members)
    _expect(x, FINITE_TAGS, "to_complex")
    real = promote_to_real(x)
    if real.tag is Tag.INFINITE:
        return real
    return Complex(real, Real(0.0), x.members)
