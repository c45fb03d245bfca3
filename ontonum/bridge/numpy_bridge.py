"""
NumPy bridge for number kinds.

Converts sequences of linear numbers to NumPy arrays of a fixed-width
dtype (using the saturation rules of ``primitive.py``) and back, and
summarises the kinds present in a collection.
"""

from typing import Any, Dict, Iterable, List, Sequence

import numpy as np

from ..core.errors import InvalidArgument
from ..core.existence import Tag
from ..core.kinds import Integer, Number
from .primitive import from_ieee, resolve_dtype, to_primitive

_TAG_ORDER = tuple(Tag)


# Tag encoding for compact storage
def tag_to_code(tag: Tag) -> int:
    """Convert a kind tag to its uint8 code."""
    return _TAG_ORDER.index(tag)


def code_to_tag(code: int) -> Tag:
    """Convert a uint8 code back to a kind tag."""
    try:
        return _TAG_ORDER[int(code)]
    except IndexError:
        raise InvalidArgument(f"Unknown tag code: {code}") from None


def to_numpy(numbers: Sequence[Number], dtype: Any = np.float64) -> np.ndarray:
    """
    Coerce a sequence of linear numbers to a 1-D NumPy array.

    Args:
        numbers: Linear numbers (structural numbers raise InvalidArgument)
        dtype: Target fixed-width dtype

    Returns:
        Array of ``dtype`` with saturated values
    """
    scalar_type = resolve_dtype(dtype)
    return np.array([to_primitive(x, scalar_type) for x in numbers], dtype=scalar_type)


def from_numpy(arr: Any) -> List[Number]:
    """
    Convert a NumPy array (or scalar) to a flat list of kinds.

    Integer arrays give Integers; float arrays go through ``from_ieee`` so
    that signed zeros and infinities become Zero and Infinite.
    """
    arr = np.asarray(arr)
    if np.issubdtype(arr.dtype, np.integer):
        return [Integer(int(v)) for v in arr.ravel()]
    if np.issubdtype(arr.dtype, np.floating):
        return [from_ieee(float(v)) for v in arr.ravel()]
    raise InvalidArgument(f"Unsupported array dtype: {arr.dtype}")


def tag_codes(numbers: Iterable[Number]) -> np.ndarray:
    """Return the uint8 tag codes of a collection of numbers."""
    return np.array([tag_to_code(x.tag) for x in numbers], dtype=np.uint8)


def count_tags(numbers: Iterable[Number]) -> Dict[Tag, int]:
    """Count how many numbers of each kind are present."""
    codes = tag_codes(numbers)
    counts = np.bincount(codes, minlength=len(_TAG_ORDER))
    return {tag: int(counts[i]) for i, tag in enumerate(_TAG_ORDER) if counts[i]}
