"""
Arithmetic operations over number kinds.

Each operation dispatches on the operands' tags. Case order matters and is
the same throughout:

1. Infinite absorbs: an Infinite operand is returned unchanged (the left
   one when both are Infinite); ``x - inf`` returns the negated Infinite.
   The one exception is an Infinite times a structural number, which is a
   quarter turn of the complex plane in the Infinite's sense:

       POSITIVE:  (a, b) -> (-b,  a)
       NEGATIVE:  (a, b) -> ( b, -a)

2. Zero is the additive identity and scales to a signed Zero under
   multiplication. Zeros combined with Zeros pool their members.
3. Structural operands are combined as Complex pairs.
4. Finite operands are combined in the narrowest kind that holds the
   result: Natural, Integer, Rational, then Real. A Real result beyond the
   double range becomes an Infinite of the same sign.
"""

import math
import operator
from typing import Callable, Dict, Tuple

from .duality import infinite_to_zero, natural_complex_to_complex, to_complex
from .errors import DomainViolation, InvalidArgument
from .existence import Tag
from .kinds import (
    INTEGRAL_TAGS,
    LINEAR_TAGS,
    STRUCTURAL_TAGS,
    Complex,
    Infinite,
    Integer,
    Irrational,
    Natural,
    NaturalComplex,
    Number,
    Rational,
    Real,
    Zero,
    saturating_float,
)
from .polarity import Polarity

_EXACT_TAGS = INTEGRAL_TAGS | {Tag.RATIONAL}

_PRIMITIVE_OPS: Dict[str, Callable] = {
    'add': operator.add,
    'sub': operator.sub,
    'mul': operator.mul,
}


def _require_number(x: object, name: str = "operand") -> None:
    if not isinstance(x, Number):
        raise InvalidArgument(f"{name} must be a number, got {x!r}")


def _require_linear(x: Number, operation: str) -> None:
    _require_number(x)
    if x.tag not in LINEAR_TAGS:
        raise InvalidArgument(f"{operation} is defined for linear numbers only, got {x!r}")


def _to_float(x: Number) -> float:
    return saturating_float(x.value)


def _real_or_infinite(value: float) -> Number:
    """Wrap a float result, mapping overflow to a signed Infinite."""
    if math.isnan(value):
        raise InvalidArgument("indeterminate result (unbounded operands cancelled)")
    if math.isinf(value):
        return Infinite(Polarity.from_sign(value > 0))
    return Real(value)


def _exact_pair(x: Number) -> Tuple[float, float]:
    if x.tag is Tag.RATIONAL:
        return x.numerator.value, x.denominator.value
    return _to_float(x), 1.0


def _combine_rational(a: Number, b: Number, op: str) -> Number:
    n1, d1 = _exact_pair(a)
    n2, d2 = _exact_pair(b)
    if op == 'mul':
        numerator, denominator = n1 * n2, d1 * d2
    else:
        numerator = _PRIMITIVE_OPS[op](n1 * d2, n2 * d1)
        denominator = d1 * d2
    if (math.isfinite(numerator) and math.isfinite(denominator) and denominator != 0.0
            and math.isfinite(numerator / denominator)):
        return Rational(Real(numerator), Real(denominator))
    # The pair left the double range; keep the value if it still fits
    return _real_or_infinite(_PRIMITIVE_OPS[op](_to_float(a), _to_float(b)))


def _combine_finite(a: Number, b: Number, op: str) -> Number:
    fn = _PRIMITIVE_OPS[op]
    if a.tag in INTEGRAL_TAGS and b.tag in INTEGRAL_TAGS:
        result = fn(a.value, b.value)
        if a.tag is Tag.NATURAL and b.tag is Tag.NATURAL and result >= 0:
            return Natural(result)
        return Integer(result)
    exact = a.tag in _EXACT_TAGS and b.tag in _EXACT_TAGS
    if op == 'mul' and (a.is_zero or b.is_zero):
        # Settled before the float view, which saturates huge integers to inf
        return Rational(Real(0.0), Real(1.0)) if exact else Real(0.0)
    if exact:
        return _combine_rational(a, b, op)
    return _real_or_infinite(fn(_to_float(a), _to_float(b)))


def _complex_from_parts(real: Number, imaginary: Number) -> Number:
    for part in (real, imaginary):
        if part.tag is Tag.INFINITE:
            return part
    return Complex(real, imaginary)


def _combine_structural(a: Number, b: Number, op: str) -> Number:
    if a.tag is Tag.NATURAL_COMPLEX and b.tag is Tag.NATURAL_COMPLEX and op == 'add':
        return NaturalComplex(
            Natural(a.real.value + b.real.value),
            Natural(a.imaginary.value + b.imaginary.value),
        )
    ca = to_complex(a)
    cb = to_complex(b)
    for c in (ca, cb):
        if c.tag is Tag.INFINITE:
            return c
    if op == 'add':
        return _complex_from_parts(add(ca.real, cb.real), add(ca.imaginary, cb.imaginary))
    if op == 'sub':
        return _complex_from_parts(subtract(ca.real, cb.real), subtract(ca.imaginary, cb.imaginary))
    real = subtract(multiply(ca.real, cb.real), multiply(ca.imaginary, cb.imaginary))
    imaginary = add(multiply(ca.real, cb.imaginary), multiply(ca.imaginary, cb.real))
    return _complex_from_parts(real, imaginary)


def _negate_promoting(x: Number) -> Number:
    """Negate, widening Natural kinds instead of raising."""
    if x.tag is Tag.NATURAL:
        return Integer(-x.value)
    if x.tag is Tag.NATURAL_COMPLEX:
        return negate(natural_complex_to_complex(x))
    return negate(x)


def _scale_zero(zero: Zero, x: Number) -> Zero:
    if x.tag is Tag.ZERO:
        return Zero(zero.polarity.combine(x.polarity), zero.members | x.members)
    if x.tag in STRUCTURAL_TAGS:
        return zero
    polarity = zero.polarity if x.is_positive else zero.polarity.inverted()
    return Zero(polarity, zero.members)


def _quarter_turn(infinite: Infinite, x: Number) -> Number:
    """Rotate a structural number by a quarter turn in the Infinite's sense; members are kept."""
    c = to_complex(x)
    if c.tag is Tag.INFINITE:
        # Parts beyond the double range have no direction left to turn
        return infinite
    a, b = c.real, c.imaginary
    if infinite.is_positive:
        return Complex(negate(b), a, c.members)
    return Complex(b, negate(a), c.members)


# ============================================================================
# Binary operations
# ============================================================================

def add(a: Number, b: Number) -> Number:
    """
    Add two numbers.

    Args:
        a: Left operand
        b: Right operand

    Returns:
        The sum. An Infinite operand is returned unchanged; a Zero operand
        returns the other operand.
    """
    _require_number(a, "a")
    _require_number(b, "b")
    if a.tag is Tag.INFINITE:
        return a
    if b.tag is Tag.INFINITE:
        return b
    if a.tag is Tag.ZERO and b.tag is Tag.ZERO:
        # Negative only when both are negative
        polarity = a.polarity if a.polarity is b.polarity else Polarity.POSITIVE
        return Zero(polarity, a.members | b.members)
    if a.tag is Tag.ZERO:
        return b
    if b.tag is Tag.ZERO:
        return a
    if a.tag in STRUCTURAL_TAGS or b.tag in STRUCTURAL_TAGS:
        return _combine_structural(a, b, 'add')
    return _combine_finite(a, b, 'add')


def subtract(a: Number, b: Number) -> Number:
    """
    Subtract b from a.

    ``inf - x`` is ``inf``; ``x - inf`` is the negated Infinite. Natural
    results that would be negative widen to Integer.
    """
    _require_number(a, "a")
    _require_number(b, "b")
    if a.tag is Tag.INFINITE:
        return a
    if b.tag is Tag.INFINITE:
        return negate(b)
    if b.tag is Tag.ZERO:
        return add(a, negate(b)) if a.tag is Tag.ZERO else a
    if a.tag is Tag.ZERO:
        return _negate_promoting(b)
    if a.tag in STRUCTURAL_TAGS or b.tag in STRUCTURAL_TAGS:
        return _combine_structural(a, b, 'sub')
    return _combine_finite(a, b, 'sub')


def multiply(a: Number, b: Number) -> Number:
    """
    Multiply two numbers.

    An Infinite operand is returned unchanged against any linear operand,
    Zero included. Against a structural operand it turns the operand a
    quarter turn in its own sense instead. A Zero times a finite number is a
    Zero whose polarity follows the sign rule.
    """
    _require_number(a, "a")
    _require_number(b, "b")
    if a.tag is Tag.INFINITE:
        return _quarter_turn(a, b) if b.tag in STRUCTURAL_TAGS else a
    if b.tag is Tag.INFINITE:
        return _quarter_turn(b, a) if a.tag in STRUCTURAL_TAGS else b
    if a.tag is Tag.ZERO:
        return _scale_zero(a, b)
    if b.tag is Tag.ZERO:
        return _scale_zero(b, a)
    if a.tag in STRUCTURAL_TAGS or b.tag in STRUCTURAL_TAGS:
        return _combine_structural(a, b, 'mul')
    return _combine_finite(a, b, 'mul')


# ============================================================================
# Unary operations
# ============================================================================

def _negated_symbol(symbol):
    if not symbol:
        return symbol
    return symbol[1:] if symbol.startswith("-") else "-" + symbol


def negate(x: Number) -> Number:
    """
    Additive inverse. Members are preserved.

    Raises:
        DomainViolation: For a non-zero Natural or NaturalComplex
    """
    _require_number(x, "x")
    tag = x.tag
    if tag is Tag.ZERO:
        return Zero(x.polarity.inverted(), x.members)
    if tag is Tag.INFINITE:
        return Infinite(x.polarity.inverted(), x.members)
    if tag is Tag.NATURAL or tag is Tag.NATURAL_COMPLEX:
        if x.is_zero:
            return x
        raise DomainViolation(f"cannot negate {x!r}; convert to a signed kind first")
    if tag is Tag.INTEGER:
        return Integer(-x.value, x.members)
    if tag is Tag.REAL:
        return Real(-x.value, x.members)
    if tag is Tag.RATIONAL:
        return Rational(negate(x.numerator), x.denominator, x.members)
    if tag is Tag.IRRATIONAL:
        return Irrational(-x.value, _negated_symbol(x.symbol), x.members)
    return Complex(negate(x.real), negate(x.imaginary), x.members)


def reciprocal(x: Number) -> Number:
    """
    Multiplicative inverse.

    Zero and Infinite map to their polar duals (Zero(p) -> Infinite(not p)).
    A finite zero-valued number maps to Infinite(POSITIVE).
    """
    _require_number(x, "x")
    tag = x.tag
    if tag is Tag.ZERO:
        return Infinite(x.polarity.inverted(), x.members)
    if tag is Tag.INFINITE:
        return Zero(x.polarity.inverted(), x.members)
    if x.is_zero:
        return Infinite(Polarity.POSITIVE)
    if tag in INTEGRAL_TAGS:
        denominator = _to_float(x)
        if math.isinf(denominator):
            return Zero(Polarity.from_sign(denominator > 0))
        return Rational(Real(1.0), Real(denominator))
    if tag is Tag.RATIONAL:
        inverse = x.denominator.value / x.numerator.value
        if not math.isfinite(inverse):
            return _real_or_infinite(inverse)
        return Rational(x.denominator, x.numerator)
    if tag in STRUCTURAL_TAGS:
        c = to_complex(x)
        if c.tag is Tag.INFINITE:
            return infinite_to_zero(c)
        try:
            inverse = 1.0 / c.value
        except OverflowError:
            return Infinite(Polarity.POSITIVE)
        if not (math.isfinite(inverse.real) and math.isfinite(inverse.imag)):
            return Infinite(Polarity.POSITIVE)
        return Complex(Real(inverse.real), Real(inverse.imag))
    return _real_or_infinite(1.0 / x.value)


def absolute(x: Number) -> Number:
    """Absolute value; structural numbers give their magnitude as a Real."""
    _require_number(x, "x")
    tag = x.tag
    if tag is Tag.ZERO:
        return Zero(Polarity.POSITIVE, x.members)
    if tag is Tag.INFINITE:
        return Infinite(Polarity.POSITIVE, x.members)
    if tag in STRUCTURAL_TAGS:
        return _real_or_infinite(x.magnitude)
    if x.value < 0:
        return negate(x)
    return x


def with_sign(x: Number, polarity: Polarity) -> Number:
    """
    Force the sign of a number.

    Raises:
        DomainViolation: If a Natural or NaturalComplex is forced negative
        InvalidArgument: For a Complex, which has no sign
    """
    _require_number(x, "x")
    if not isinstance(polarity, Polarity):
        raise InvalidArgument(f"polarity must be a Polarity, got {polarity!r}")
    tag = x.tag
    if tag is Tag.ZERO:
        return Zero(polarity, x.members)
    if tag is Tag.INFINITE:
        return Infinite(polarity, x.members)
    if tag is Tag.NATURAL or tag is Tag.NATURAL_COMPLEX:
        if polarity is Polarity.NEGATIVE and not x.is_zero:
            raise DomainViolation(f"{x.kind_name} cannot be negative")
        return x
    if tag is Tag.COMPLEX:
        raise InvalidArgument("Complex numbers have no sign")
    if x.is_positive == polarity.is_positive:
        return x
    return negate(x)


# ============================================================================
# Sign, zero test and ordering
# ============================================================================

def is_zero(x: Number) -> bool:
    _require_number(x, "x")
    return x.is_zero


def is_positive(x: Number) -> bool:
    _require_linear(x, "is_positive")
    return x.is_positive


def sign(x: Number) -> int:
    """Return -1, 0 or +1 for a linear number."""
    _require_linear(x, "sign")
    if x.is_zero:
        return 0
    return 1 if x.is_positive else -1


def _order_key(x: Number) -> Tuple[int, object]:
    if x.tag is Tag.INFINITE:
        return (1 if x.is_positive else -1, 0)
    if x.tag is Tag.ZERO:
        return (0, 0)
    return (0, x.value)


def compare(a: Number, b: Number) -> int:
    """
    Order two linear numbers; returns -1, 0 or +1.

    Infinites bound everything of the opposite side; two Infinites of the
    same polarity compare equal. Signed zeros compare equal to each other
    and to finite zeros.
    """
    _require_linear(a, "compare")
    _require_linear(b, "compare")
    ka, kb = _order_key(a), _order_key(b)
    if ka < kb:
        return -1
    if ka > kb:
        return 1
    return 0
