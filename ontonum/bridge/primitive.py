"""
Coercion of number kinds to fixed-width primitives.

Targets are the NumPy scalar types int8..int64, uint8..uint64, float32 and
float64. The saturation rules are:

    Infinite(+)  -> type max   (+inf for float types)
    Infinite(-)  -> type min   (0 for unsigned types, -inf for float types)
    Zero(p)      -> type zero  (float types keep the sign: -0.0 for Zero(-))
    finite       -> truncated toward zero and clipped to [min, max];
                    floats beyond the float range saturate to +/-inf

Structural numbers have no primitive view. Also provides the IEEE bridge
``from_ieee`` / ``to_ieee`` between Python floats and kinds.
"""

import math
import warnings
from typing import Any, Optional

import numpy as np

from ..core.config import NumericConfig
from ..core.errors import InvalidArgument
from ..core.existence import Tag
from ..core.kinds import INTEGRAL_TAGS, STRUCTURAL_TAGS, Infinite, Number, Real, Zero
from ..core.polarity import Polarity

INTEGER_DTYPES = (np.int8, np.int16, np.int32, np.int64,
                  np.uint8, np.uint16, np.uint32, np.uint64)
FLOAT_DTYPES = (np.float32, np.float64)
PRIMITIVE_DTYPES = INTEGER_DTYPES + FLOAT_DTYPES


def resolve_dtype(dtype: Any) -> type:
    try:
        scalar_type = np.dtype(dtype).type
    except TypeError as ex:
        raise InvalidArgument(f"Unsupported primitive type: {dtype!r}") from ex
    if scalar_type not in PRIMITIVE_DTYPES:
        raise InvalidArgument(f"Unsupported primitive type: {dtype!r}")
    return scalar_type


def _is_float(scalar_type: type) -> bool:
    return scalar_type in FLOAT_DTYPES


def _neutral(scalar_type: type, negative: bool = False) -> np.generic:
    if _is_float(scalar_type):
        return scalar_type(-0.0 if negative else 0.0)
    return scalar_type(0)


def _warn_absent(kind: str, scalar_type: type) -> None:
    if NumericConfig.warns_on_absent():
        warnings.warn(
            f"Coercing an absent {kind} to {np.dtype(scalar_type).name}; using 0",
            RuntimeWarning,
            stacklevel=3,
        )


def zero_to_primitive(zero: Optional[Zero], dtype: Any) -> np.generic:
    """
    Coerce a Zero to the zero of ``dtype``.

    An absent Zero also yields zero, with a RuntimeWarning.
    """
    scalar_type = resolve_dtype(dtype)
    if zero is None:
        _warn_absent("Zero", scalar_type)
        return _neutral(scalar_type)
    if not isinstance(zero, Number) or zero.tag is not Tag.ZERO:
        raise InvalidArgument(f"zero_to_primitive expects a Zero, got {zero!r}")
    return _neutral(scalar_type, negative=not zero.is_positive)


def infinite_to_primitive(infinite: Optional[Infinite], dtype: Any) -> np.generic:
    """
    Saturate an Infinite to the bound of ``dtype`` on its side.

    An absent Infinite yields zero, with a RuntimeWarning.
    """
    scalar_type = resolve_dtype(dtype)
    if infinite is None:
        _warn_absent("Infinite", scalar_type)
        return _neutral(scalar_type)
    if not isinstance(infinite, Number) or infinite.tag is not Tag.INFINITE:
        raise InvalidArgument(f"infinite_to_primitive expects an Infinite, got {infinite!r}")
    if _is_float(scalar_type):
        return scalar_type(math.inf if infinite.is_positive else -math.inf)
    info = np.iinfo(scalar_type)
    return scalar_type(info.max if infinite.is_positive else info.min)


def _saturate_int(value: int, scalar_type: type) -> np.generic:
    info = np.iinfo(scalar_type)
    return scalar_type(min(max(value, int(info.min)), int(info.max)))


def _saturate_float(value: Any, scalar_type: type) -> np.generic:
    limit = float(np.finfo(scalar_type).max)
    try:
        as_float = float(value)
    except OverflowError:
        return scalar_type(math.inf if value > 0 else -math.inf)
    if abs(as_float) > limit:
        return scalar_type(math.copysign(math.inf, as_float))
    return scalar_type(as_float)


def to_primitive(x: Number, dtype: Any) -> np.generic:
    """
    Coerce a linear number to a NumPy scalar of ``dtype``.

    Args:
        x: Linear number
        dtype: One of PRIMITIVE_DTYPES (or anything np.dtype() resolves to one)

    Returns:
        NumPy scalar following the saturation rules of this module

    Raises:
        InvalidArgument: For structural numbers, non-numbers or unsupported types
    """
    scalar_type = resolve_dtype(dtype)
    if not isinstance(x, Number):
        raise InvalidArgument(f"to_primitive expects a number, got {x!r}")
    if x.tag is Tag.ZERO:
        return zero_to_primitive(x, scalar_type)
    if x.tag is Tag.INFINITE:
        return infinite_to_primitive(x, scalar_type)
    if x.tag in STRUCTURAL_TAGS:
        raise InvalidArgument(f"{x.kind_name} has no primitive view")
    if _is_float(scalar_type):
        return _saturate_float(x.value, scalar_type)
    value = x.value if x.tag in INTEGRAL_TAGS else math.trunc(x.value)
    return _saturate_int(value, scalar_type)


def to_int8(x: Number) -> np.int8:
    return to_primitive(x, np.int8)


def to_int16(x: Number) -> np.int16:
    return to_primitive(x, np.int16)


def to_int32(x: Number) -> np.int32:
    return to_primitive(x, np.int32)


def to_int64(x: Number) -> np.int64:
    return to_primitive(x, np.int64)


def to_uint8(x: Number) -> np.uint8:
    return to_primitive(x, np.uint8)


def to_uint16(x: Number) -> np.uint16:
    return to_primitive(x, np.uint16)


def to_uint32(x: Number) -> np.uint32:
    return to_primitive(x, np.uint32)


def to_uint64(x: Number) -> np.uint64:
    return to_primitive(x, np.uint64)


def to_float32(x: Number) -> np.float32:
    return to_primitive(x, np.float32)


def to_float64(x: Number) -> np.float64:
    return to_primitive(x, np.float64)


def from_ieee(value: float) -> Number:
    """
    Map an IEEE double to a kind.

    +/-inf become Infinite, +/-0.0 become a Zero of the same sign, other
    finite values become Real.

    Raises:
        InvalidArgument: For NaN, which has no kind
    """
    value = float(value)
    if math.isnan(value):
        raise InvalidArgument("NaN has no corresponding number kind")
    if math.isinf(value):
        return Infinite(Polarity.from_sign(value > 0))
    if value == 0.0:
        return Zero(Polarity.from_sign(math.copysign(1.0, value) > 0))
    return Real(value)


def to_ieee(x: Number) -> float:
    """Map a linear number to a Python float (signed zeros and infinities preserved)."""
    return float(to_primitive(x, np.float64))
