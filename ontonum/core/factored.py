"""
Factored integers: N as a product of powers P = (base, exponent).

The exponent of a Power is itself a FactoredInteger, so towers such as
2 ** (2 ** 3) are expressed directly. Values are materialised on demand by
``full_range_pow``, which never hands a single direct power call an
exponent above the configured ceiling.

Equality and hashing use the materialised value, so 6 == 2 * 3 whatever
the factor list looks like.
"""

import logging
from functools import cached_property
from typing import Iterable, Optional, Union

from .config import NumericConfig
from .errors import InvalidArgument
from .kinds import Integer

logger = logging.getLogger(__name__)


def _as_nonnegative_int(value: object, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgument(f"{name} must be an int, got {value!r}")
    if value < 0:
        raise InvalidArgument(f"{name} must be non-negative, got {value}")
    return value


def _direct_pow(base: int, exponent: int) -> int:
    """The only place a native power is taken; callers keep exponent <= ceiling."""
    return base ** exponent


def full_range_pow(base: int, exponent: int, ceiling: Optional[int] = None) -> int:
    """
    Compute base ** exponent for exponents beyond the direct-power ceiling.

    When the exponent exceeds the ceiling it is split as
    ``exponent = q * ceiling + r``; ``base ** ceiling`` is computed once and
    multiplied in q times, then ``base ** r`` is multiplied in.

    Args:
        base: Non-negative base
        exponent: Non-negative exponent
        ceiling: Largest exponent for a single direct power call
            (defaults to NumericConfig pow ceiling)

    Returns:
        The exact integer power

    Raises:
        InvalidArgument: If base or exponent is negative
    """
    base = _as_nonnegative_int(base, "base")
    exponent = _as_nonnegative_int(exponent, "exponent")
    if ceiling is None:
        ceiling = NumericConfig.get_pow_ceiling()
    elif isinstance(ceiling, bool) or not isinstance(ceiling, int) or ceiling < 1:
        raise InvalidArgument(f"ceiling must be a positive int, got {ceiling!r}")

    if exponent <= ceiling:
        return _direct_pow(base, exponent)
    if base in (0, 1):
        return base

    chunks, remainder = divmod(exponent, ceiling)
    logger.debug("full_range_pow: base=%d split into %d chunks of %d plus %d",
                 base, chunks, ceiling, remainder)
    chunk_power = _direct_pow(base, ceiling)
    result = 1
    for _ in range(chunks):
        result *= chunk_power
    return result * _direct_pow(base, remainder)


class _Frozen:
    """Rejects attribute assignment; ``cached_property`` still fills ``__dict__`` directly."""

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")


class FactoredInteger(_Frozen):
    """
    N: a product of Powers. The empty product is 1.

    Instances are immutable; multiplication returns a new product.
    """

    def __init__(self, *factors: "Power"):
        for factor in factors:
            if factor is None:
                raise InvalidArgument("factors must not contain None")
            if not isinstance(factor, Power):
                raise InvalidArgument(f"factor must be a Power, got {factor!r}")
        object.__setattr__(self, "_factors", tuple(factors))

    @classmethod
    def of(cls, value: Union[int, "Power", "FactoredInteger"]) -> "FactoredInteger":
        """Coerce an int, Power or FactoredInteger to a FactoredInteger."""
        if isinstance(value, FactoredInteger):
            return value
        if isinstance(value, Power):
            return cls(value)
        return cls(Power(value))

    @property
    def factors(self):
        return self._factors

    @cached_property
    def value(self) -> int:
        result = 1
        for factor in self._factors:
            result *= factor.value
        return result

    def to_integer(self) -> Integer:
        return Integer(self.value)

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value

    def __mul__(self, other: Union["Power", "FactoredInteger"]) -> "FactoredInteger":
        if isinstance(other, Power):
            return FactoredInteger(*self._factors, other)
        if isinstance(other, FactoredInteger):
            return FactoredInteger(*self._factors, *other._factors)
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if isinstance(other, (FactoredInteger, Power)):
            return self.value == other.value
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.value)

    def __str__(self) -> str:
        if not self._factors:
            return "1"
        return " * ".join(str(f) for f in self._factors)

    def __repr__(self) -> str:
        return f"FactoredInteger({', '.join(repr(f) for f in self._factors)})"


class Power(_Frozen):
    """
    P: base ** exponent, with the exponent itself a FactoredInteger.

    Args:
        base: Non-negative int
        exponent: Non-negative int or FactoredInteger (defaults to 1)
    """

    def __init__(self, base: int = 1, exponent: Union[int, FactoredInteger, None] = None):
        base = _as_nonnegative_int(base, "base")
        if exponent is None:
            exponent = FactoredInteger()
        elif isinstance(exponent, int) and not isinstance(exponent, bool):
            exponent = FactoredInteger(Power(_as_nonnegative_int(exponent, "exponent")))
        elif not isinstance(exponent, FactoredInteger):
            raise InvalidArgument(f"exponent must be an int or FactoredInteger, got {exponent!r}")
        object.__setattr__(self, "_base", base)
        object.__setattr__(self, "_exponent", exponent)

    @classmethod
    def from_pair(cls, pair) -> "Power":
        base, exponent = pair
        return cls(base, exponent)

    @property
    def base(self) -> int:
        return self._base

    @property
    def exponent(self) -> FactoredInteger:
        return self._exponent

    @cached_property
    def value(self) -> int:
        return full_range_pow(self._base, self._exponent.value)

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value

    def __mul__(self, other: Union["Power", FactoredInteger]) -> FactoredInteger:
        if isinstance(other, Power):
            return FactoredInteger(self, other)
        if isinstance(other, FactoredInteger):
            return FactoredInteger(self, *other.factors)
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if isinstance(other, (FactoredInteger, Power)):
            return self.value == other.value
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.value)

    def __str__(self) -> str:
        return f"[{self._base} ^ ({self._exponent})]"

    def __repr__(self) -> str:
        return f"Power({self._base}, {self._exponent!r})"


def factorize(value: int) -> FactoredInteger:
    """
    Prime factorisation of a non-negative int by trial division.

    0 factors as ``[0 ^ (1)]`` and 1 as the empty product.
    """
    value = _as_nonnegative_int(value, "value")
    if value == 0:
        return FactoredInteger(Power(0))
    factors = []
    remaining = value
    candidate = 2
    while candidate * candidate <= remaining:
        count = 0
        while remaining % candidate == 0:
            remaining //= candidate
            count += 1
        if count:
            factors.append(Power(candidate, count))
        candidate += 1 if candidate == 2 else 2
    if remaining > 1:
        factors.append(Power(remaining))
    return FactoredInteger(*factors)


def product(factors: Iterable[Union[int, Power, FactoredInteger]]) -> FactoredInteger:
    """Multiply a sequence of ints, Powers or FactoredIntegers into one FactoredInteger."""
    result = FactoredInteger()
    for factor in factors:
        result = result * FactoredInteger.of(factor)
    return result
