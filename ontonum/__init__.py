# MIT License
# See LICENSE file in the project root for full license text.
"""
ontonum: an ontological hierarchy of number kinds.

Every value is an Existence defined by a finite set of members; number kinds
(Natural, Integer, Real, Rational, Irrational, Complex, NaturalComplex,
signed Zero and signed Infinite) add a payload and are related by explicit
conversions, including the polar duality between Zero and Infinite and a
rotation axis that generates the imaginary unit. Factored integers carry
exponents beyond native range.
"""

__version__ = "0.1.0"
__author__ = "ontonum Team"

from .core import (
    OntologyError,
    InvalidArgument,
    DomainViolation,
    Polarity,
    Tag,
    Existence,
    Nature,
    Being,
    Void,
    Number,
    Zero,
    Infinite,
    Natural,
    Integer,
    Real,
    Rational,
    Irrational,
    Complex,
    NaturalComplex,
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
    natural_complex_to_complex,
    complex_to_natural_complex,
    add,
    subtract,
    multiply,
    negate,
    reciprocal,
    sign,
    RotationAxis,
    FactoredInteger,
    Power,
    full_range_pow,
    factorize,
    NumericConfig,
    config_context,
    ConstantRegistry,
)
from .bridge import from_ieee, to_ieee, to_primitive

__all__ = [
    # Version info
    "__version__",
    "__author__",
    # Errors
    "OntologyError",
    "InvalidArgument",
    "DomainViolation",
    # Entities and kinds
    "Polarity",
    "Tag",
    "Existence",
    "Nature",
    "Being",
    "Void",
    "Number",
    "Zero",
    "Infinite",
    "Natural",
    "Integer",
    "Real",
    "Rational",
    "Irrational",
    "Complex",
    "NaturalComplex",
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
    "natural_complex_to_complex",
    "complex_to_natural_complex",
    # Arithmetic
    "add",
    "subtract",
    "multiply",
    "negate",
    "reciprocal",
    "sign",
    # Rotation and factored integers
    "RotationAxis",
    "FactoredInteger",
    "Power",
    "full_range_pow",
    "factorize",
    # Configuration and constants
    "NumericConfig",
    "config_context",
    "ConstantRegistry",
    # Bridges
    "from_ieee",
    "to_ieee",
    "to_primitive",
    # Submodules (exposed lazily via __getattr__)
    "constants",
]


def __getattr__(name):  # Lazy access to the constants module
    if name == "constants":
        import importlib

        return importlib.import_module(f"{__name__}.core.constants")
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
