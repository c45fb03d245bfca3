"""Bridges from number kinds to fixed-width primitives and NumPy arrays."""

from .primitive import (
    INTEGER_DTYPES,
    FLOAT_DTYPES,
    PRIMITIVE_DTYPES,
    resolve_dtype,
    to_primitive,
    zero_to_primitive,
    infinite_to_primitive,
    to_int8,
    to_int16,
    to_int32,
    to_int64,
    to_uint8,
    to_uint16,
    to_uint32,
    to_uint64,
    to_float32,
    to_float64,
    from_ieee,
    to_ieee,
)
from .numpy_bridge import (
    tag_to_code,
    code_to_tag,
    to_numpy,
    from_numpy,
    tag_codes,
    count_tags,
)

__all__ = [
    # Primitive coercion
    "INTEGER_DTYPES",
    "FLOAT_DTYPES",
    "PRIMITIVE_DTYPES",
    "resolve_dtype",
    "to_primitive",
    "zero_to_primitive",
    "infinite_to_primitive",
    "to_int8",
    "to_int16",
    "to_int32",
    "to_int64",
    "to_uint8",
    "to_uint16",
    "to_uint32",
    "to_uint64",
    "to_float32",
    "to_float64",

    # IEEE bridge
    "from_ieee",
    "to_ieee",

    # NumPy bridge
    "tag_to_code",
    "code_to_tag",
    "to_numpy",
    "from_numpy",
    "tag_codes",
    "count_tags",
]
