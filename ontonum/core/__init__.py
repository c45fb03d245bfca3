"""Core number kinds, structural equality, conversions and arithmetic."""

from .errors import OntologyError, InvalidArgument, DomainViolation
from .polarity import Polarity
from .existence import Tag, Existence, Nature, Being, Void, freeze_members

from .kinds import (
    Number,
    LinearNumber,
    StructuralNumber,
    Zero,
    Infinite,
    Natural,
    Integer,
    Real,
    Rational,
    Irrational,
    Complex,
    NaturalComplex,
    UNBOUNDED_TAGS,
    INTEGRAL_TAGS,
    REAL_TAGS,
    FINITE_TAGS,
    LINEAR_TAGS,
    STRUCTURAL_TAGS,
    NUMBER_TAGS,
    is_number,
    is_linear,
    is_finite,
    is_unbounded,
    is_structural,
)

from .duality import (
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
)

from .ops import (
    add,
    subtract,
    multiply,
    negate,
    reciprocal,
    absolute,
    with_sign,
    is_zero,
    is_positive,
    sign,
    compare,
)

from .rotation import RotationAxis
from .factored import FactoredInteger, Power, full_range_pow, factorize, product
from .series import pi_series, e_series, zeta_partial
from .config import NumericConfig, config_context
from .constants import ConstantRegistry

__all__ = [
    # Errors
    "OntologyError",
    "InvalidArgument",
    "DomainViolation",

    # Structural entities
    "Polarity",
    "Tag",
    "Existence",
    "Nature",
    "Being",
    "Void",
    "freeze_members",

    # Number kinds
    "Number",
    "LinearNumber",
    "StructuralNumber",
    "Zero",
    "Infinite",
    "Natural",
    "Integer",
    "Real",
    "Rational",
    "Irrational",
    "Complex",
    "NaturalComplex",

    # Kind families
    "UNBOUNDED_TAGS",
    "INTEGRAL_TAGS",
    "REAL_TAGS",
    "FINITE_TAGS",
    "LINEAR_TAGS",
    "STRUCTURAL_TAGS",
    "NUMBER_TAGS",
    "is_number",
    "is_linear",
    "is_finite",
    "is_unbounded",
    "is_structural",

    # Conversions
    "zero_to_infinite",
    "infinite_to_zero",
    "zero_to_void",
    "void_to_zero",
    "being_to_void",
    "void_to_being",
    "natural_to_integer",
    "integer_to_natural",
    "integer_to_real",
    "real_to_integer",
    "rational_to_real",
    "real_to_rational",
    "promote_to_real",
    "natural_complex_to_complex",
    "complex_to_natural_complex",
    "to_complex",

    # Arithmetic
    "add",
    "subtract",
    "multiply",
    "negate",
    "reciprocal",
    "absolute",
    "with_sign",
    "is_zero",
    "is_positive",
    "sign",
    "compare",

    # Rotation axis
    "RotationAxis",

    # Factored integers
    "FactoredInteger",
    "Power",
    "full_range_pow",
    "factorize",
    "product",

    # Series and constants
    "pi_series",
    "e_series",
    "zeta_partial",
    "ConstantRegistry",

    # Configuration
    "NumericConfig",
    "config_context",
]
