"""
Number kinds: a closed set of tagged, immutable variants.

Linear kinds (ordered, signed, zero-testable):
    Zero, Infinite        unbounded, carry a Polarity
    Natural, Integer      arbitrary-precision Python ints
    Real, Rational,       finite IEEE doubles; Rational keeps its
    Irrational            numerator/denominator pair
Structural kinds (paired, unordered-axis):
    Complex               pair of Real-family parts
    NaturalComplex        pair of Naturals

Variants do not inherit from one another. Behaviour that spans kinds lives
in ``ops.py`` and ``duality.py`` and dispatches on ``tag``.
"""

import math
import numbers
import operator
from typing import Any, Iterable, Optional, Tuple, Union

from .errors import InvalidArgument
from .existence import Existence, Tag
from .polarity import Polarity


UNBOUNDED_TAGS = frozenset({Tag.ZERO, Tag.INFINITE})
INTEGRAL_TAGS = frozenset({Tag.NATURAL, Tag.INTEGER})
REAL_TAGS = frozenset({Tag.REAL, Tag.RATIONAL, Tag.IRRATIONAL})
FINITE_TAGS = INTEGRAL_TAGS | REAL_TAGS
LINEAR_TAGS = UNBOUNDED_TAGS | FINITE_TAGS
STRUCTURAL_TAGS = frozenset({Tag.COMPLEX, Tag.NATURAL_COMPLEX})
NUMBER_TAGS = LINEAR_TAGS | STRUCTURAL_TAGS


def _as_int(value: Any, kind: str) -> int:
    try:
        return operator.index(value)
    except TypeError as ex:
        raise InvalidArgument(f"{kind} requires an integral value, got {value!r}") from ex


def _as_finite_float(value: Any, kind: str) -> float:
    if isinstance(value, Number) or not isinstance(value, numbers.Real):
        raise InvalidArgument(f"{kind} requires a real primitive value, got {value!r}")
    try:
        result = float(value)
    except OverflowError as ex:
        raise InvalidArgument(f"{kind} value out of double range: {value!r}") from ex
    if not math.isfinite(result):
        raise InvalidArgument(f"{kind} must be finite (use Infinite for unbounded values), got {value!r}")
    return result


def saturating_float(value: Union[int, float]) -> float:
    """Float view of an int or float; ints beyond the double range become +/-inf."""
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


def _as_polarity(polarity: Any) -> Polarity:
    if not isinstance(polarity, Polarity):
        raise InvalidArgument(f"polarity must be a Polarity, got {polarity!r}")
    return polarity


class Number(Existence):
    """Common numeric capability shared by every kind: members, value view, zero test."""

    __slots__ = ()

    @property
    def exists(self) -> bool:
        return True

    @property
    def value(self) -> Union[int, float, complex]:
        """Semantic scalar view of the number."""
        raise NotImplementedError

    @property
    def is_zero(self) -> bool:
        raise NotImplementedError

    def _equality_class(self) -> Tag:
        return self.tag

    def _describe(self) -> str:
        return ", ".join(repr(p) for p in self._payload())

    def __repr__(self) -> str:
        if self._members:
            return f"{self.kind_name}({self._describe()}, members={self.render()})"
        return f"{self.kind_name}({self._describe()})"

    # Operators delegate to the named operations in ops.py
    def __add__(self, other: "Number") -> "Number":
        if not isinstance(other, Number):
            return NotImplemented
        from .ops import add
        return add(self, other)

    def __sub__(self, other: "Number") -> "Number":
        if not isinstance(other, Number):
            return NotImplemented
        from .ops import subtract
        return subtract(self, other)

    def __mul__(self, other: "Number") -> "Number":
        if not isinstance(other, Number):
            return NotImplemented
        from .ops import multiply
        return multiply(self, other)

    def __neg__(self) -> "Number":
        from .ops import negate
        return negate(self)


class LinearNumber(Number):
    """Ordered, signed numbers."""

    __slots__ = ()

    @property
    def is_positive(self) -> bool:
        raise NotImplementedError


class StructuralNumber(Number):
    """Paired numbers with a derived magnitude and phase."""

    __slots__ = ()

    @property
    def real(self) -> Number:
        return self._real

    @property
    def imaginary(self) -> Number:
        return self._imaginary

    def _float_parts(self) -> Tuple[float, float]:
        return saturating_float(self._real.value), saturating_float(self._imaginary.value)

    @property
    def value(self) -> complex:
        return complex(*self._float_parts())

    @property
    def is_zero(self) -> bool:
        return self._real.is_zero and self._imaginary.is_zero

    @property
    def magnitude(self) -> float:
        return math.hypot(*self._float_parts())

    @property
    def phase(self) -> float:
        """Angle in radians, in (-pi, pi]."""
        real, imaginary = self._float_parts()
        return math.atan2(imaginary, real)

    def _payload(self) -> Tuple[Any, ...]:
        return (self._real.value, self._imaginary.value)


# ============================================================================
# Unbounded kinds
# ============================================================================

class Zero(LinearNumber):
    """
    Signed zero.

    A Zero is the polar dual of the Infinite of opposite polarity, and an
    empty Zero is interchangeable with an empty Void under conversion.
    """

    __slots__ = ("_polarity",)

    tag = Tag.ZERO

    def __init__(self, polarity: Polarity = Polarity.POSITIVE, members: Iterable[Existence] = ()):
        super().__init__(members)
        object.__setattr__(self, "_polarity", _as_polarity(polarity))

    @property
    def polarity(self) -> Polarity:
        return self._polarity

    @property
    def value(self) -> float:
        return math.copysign(0.0, self._polarity.value)

    @property
    def is_zero(self) -> bool:
        return True

    @property
    def is_positive(self) -> bool:
        return self._polarity.is_positive

    def _payload(self) -> Tuple[Any, ...]:
        return (self._polarity,)

    def _describe(self) -> str:
        return self._polarity.symbol


class Infinite(LinearNumber):
    """Signed unbounded value. Absorbs every finite perturbation under +, - and *."""

    __slots__ = ("_polarity",)

    tag = Tag.INFINITE

    def __init__(self, polarity: Polarity = Polarity.POSITIVE, members: Iterable[Existence] = ()):
        super().__init__(members)
        object.__setattr__(self, "_polarity", _as_polarity(polarity))

    @property
    def polarity(self) -> Polarity:
        return self._polarity

    @property
    def value(self) -> float:
        return math.copysign(math.inf, self._polarity.value)

    @property
    def is_zero(self) -> bool:
        return False

    @property
    def is_positive(self) -> bool:
        return self._polarity.is_positive

    def _payload(self) -> Tuple[Any, ...]:
        return (self._polarity,)

    def _describe(self) -> str:
        return self._polarity.symbol


# ============================================================================
# Integral kinds
# ============================================================================

class Integer(LinearNumber):
    """Arbitrary-precision signed integer."""

    __slots__ = ("_value",)

    tag = Tag.INTEGER

    def __init__(self, value: int = 0, members: Iterable[Existence] = ()):
        super().__init__(members)
        object.__setattr__(self, "_value", _as_int(value, self.kind_name))

    @property
    def value(self) -> int:
        return self._value

    @property
    def is_zero(self) -> bool:
        return self._value == 0

    @property
    def is_positive(self) -> bool:
        return self._value >= 0

    def _payload(self) -> Tuple[Any, ...]:
        return (self._value,)


class Natural(LinearNumber):
    """Non-negative arbitrary-precision integer. Always positive."""

    __slots__ = ("_value",)

    tag = Tag.NATURAL

    def __init__(self, value: int = 0, members: Iterable[Existence] = ()):
        super().__init__(members)
        value = _as_int(value, self.kind_name)
        if value < 0:
            raise InvalidArgument(f"Natural must be non-negative, got {value}")
        object.__setattr__(self, "_value", value)

    @property
    def value(self) -> int:
        return self._value

    @property
    def is_zero(self) -> bool:
        return self._value == 0

    @property
    def is_positive(self) -> bool:
        return True

    def _payload(self) -> Tuple[Any, ...]:
        return (self._value,)


# ============================================================================
# Real-family kinds
# ============================================================================

class Real(LinearNumber):
    """Finite double-precision real."""

    __slots__ = ("_value",)

    tag = Tag.REAL

    def __init__(self, value: float = 0.0, members: Iterable[Existence] = ()):
        super().__init__(members)
        object.__setattr__(self, "_value", _as_finite_float(value, self.kind_name))

    @property
    def value(self) -> float:
        return self._value

    @property
    def is_zero(self) -> bool:
        return self._value == 0.0

    @property
    def is_positive(self) -> bool:
        return self._value >= 0.0

    def _payload(self) -> Tuple[Any, ...]:
        return (self._value,)


def _as_real_part(part: Any, kind: str) -> Real:
    if isinstance(part, Real):
        return part
    if isinstance(part, Number):
        if part.tag in REAL_TAGS:
            return Real(part.value)
        raise InvalidArgument(f"{kind} parts must be Real-family numbers, got {part!r}")
    return Real(_as_finite_float(part, kind))


class Rational(LinearNumber):
    """
    Real tagged with its numerator/denominator pair.

    Both parts are Reals; the value is numerator / denominator. Equality is
    on the value, so 1/2 and 2/4 compare equal.
    """

    __slots__ = ("_numerator", "_denominator", "_value")

    tag = Tag.RATIONAL

    def __init__(self, numerator: Any = 0.0, denominator: Any = 1.0, members: Iterable[Existence] = ()):
        super().__init__(members)
        numerator = _as_real_part(numerator, self.kind_name)
        denominator = _as_real_part(denominator, self.kind_name)
        if denominator.is_zero:
            raise InvalidArgument("Rational denominator must be non-zero")
        value = numerator.value / denominator.value
        if not math.isfinite(value):
            raise InvalidArgument(f"Rational value overflows: {numerator.value} / {denominator.value}")
        object.__setattr__(self, "_numerator", numerator)
        object.__setattr__(self, "_denominator", denominator)
        object.__setattr__(self, "_value", value)

    @property
    def numerator(self) -> Real:
        return self._numerator

    @property
    def denominator(self) -> Real:
        return self._denominator

    @property
    def value(self) -> float:
        return self._value

    @property
    def is_zero(self) -> bool:
        return self._value == 0.0

    @property
    def is_positive(self) -> bool:
        return self._value >= 0.0

    def _payload(self) -> Tuple[Any, ...]:
        return (self._value,)

    def _describe(self) -> str:
        return f"{self._numerator.value!r}, {self._denominator.value!r}"


class Irrational(LinearNumber):
    """Real without an exact numerator/denominator, such as pi or e."""

    __slots__ = ("_value", "_symbol")

    tag = Tag.IRRATIONAL

    def __init__(self, value: float = 0.0, symbol: Optional[str] = None, members: Iterable[Existence] = ()):
        super().__init__(members)
        object.__setattr__(self, "_value", _as_finite_float(value, self.kind_name))
        object.__setattr__(self, "_symbol", symbol)

    @property
    def value(self) -> float:
        return self._value

    @property
    def symbol(self) -> Optional[str]:
        return self._symbol

    @property
    def is_zero(self) -> bool:
        return self._value == 0.0

    @property
    def is_positive(self) -> bool:
        return self._value >= 0.0

    def _payload(self) -> Tuple[Any, ...]:
        return (self._value,)

    def _describe(self) -> str:
        return self._symbol if self._symbol else repr(self._value)


# ============================================================================
# Structural kinds
# ============================================================================

class Complex(StructuralNumber):
    """Pair of Real-family parts. Absent parts default to Real(0.0)."""

    __slots__ = ("_real", "_imaginary")

    tag = Tag.COMPLEX

    def __init__(self, real: Optional[Number] = None, imaginary: Optional[Number] = None,
                 members: Iterable[Existence] = ()):
        super().__init__(members)
        object.__setattr__(self, "_real", self._part(real))
        object.__setattr__(self, "_imaginary", self._part(imaginary))

    @staticmethod
    def _part(part: Optional[Number]) -> Number:
        if part is None:
            return Real(0.0)
        if not isinstance(part, Number) or part.tag not in REAL_TAGS:
            raise InvalidArgument(
                f"Complex parts must be Real-family numbers, got {part!r}; "
                "convert integral parts explicitly"
            )
        return part

    @classmethod
    def from_pair(cls, real: float, imaginary: float = 0.0) -> "Complex":
        return cls(Real(real), Real(imaginary))


class NaturalComplex(StructuralNumber):
    """Pair of Naturals. Absent parts default to Natural(0)."""

    __slots__ = ("_real", "_imaginary")

    tag = Tag.NATURAL_COMPLEX

    def __init__(self, real: Optional[Natural] = None, imaginary: Optional[Natural] = None,
                 members: Iterable[Existence] = ()):
        super().__init__(members)
        object.__setattr__(self, "_real", self._part(real))
        object.__setattr__(self, "_imaginary", self._part(imaginary))

    @staticmethod
    def _part(part: Optional[Natural]) -> Natural:
        if part is None:
            return Natural(0)
        if not isinstance(part, Natural):
            raise InvalidArgument(f"NaturalComplex parts must be Naturals, got {part!r}")
        return part

    @classmethod
    def from_pair(cls, real: int, imaginary: int = 0) -> "NaturalComplex":
        return cls(Natural(real), Natural(imaginary))


def is_number(x: Any) -> bool:
    return isinstance(x, Number)


def is_linear(x: Any) -> bool:
    return isinstance(x, Number) and x.tag in LINEAR_TAGS


def is_finite(x: Any) -> bool:
    return isinstance(x, Number) and x.tag in FINITE_TAGS


def is_unbounded(x: Any) -> bool:
    return isinstance(x, Number) and x.tag in UNBOUNDED_TAGS


def is_structural(x: Any) -> bool:
    return isinstance(x, Number) and x.tag in STRUCTURAL_TAGS
