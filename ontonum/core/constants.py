"""
Registry of well-known constants.

Constants are built once, in the order of ``_BUILDERS``, the first time any
of them is requested. Each builder may only read constants registered
before it:

    SOLE
    -> integral and Real units
    -> Rational units (need the Real units)
    -> irrationals PI and E (series, read NumericConfig once)
    -> ZERO and THE_INFINITE
    -> Complex and NaturalComplex units (need the Real and Natural units)
    -> rotation constants I0..I4 (need THE_INFINITE and COMPLEX_ONE)

Initialisation runs under a lock; after it completes the mapping is never
mutated and reads take no lock. Module attributes resolve lazily, so
``constants.PI`` works without an explicit ``initialize()`` call.
"""

import logging
import threading
from typing import Callable, Dict, List, Tuple

from .errors import InvalidArgument
from .existence import Existence, Nature
from .kinds import Complex, Infinite, Integer, Irrational, Natural, NaturalComplex, Rational, Real, Zero
from .polarity import Polarity
from .rotation import RotationAxis
from .series import e_series, pi_series

logger = logging.getLogger(__name__)

Builder = Callable[[Dict[str, Existence]], Existence]


def _rotation(step: int) -> Builder:
    def build(c: Dict[str, Existence]) -> Existence:
        axis = RotationAxis(c["THE_INFINITE"], c["COMPLEX_ONE"])
        return axis.cycle(4)[step]
    return build


_BUILDERS: List[Tuple[str, Builder]] = [
    ("SOLE", lambda c: Nature()),
    # Integral and Real units
    ("INTEGER_ZERO", lambda c: Integer(0)),
    ("INTEGER_ONE", lambda c: Integer(1)),
    ("INTEGER_MINUS_ONE", lambda c: Integer(-1)),
    ("NATURAL_ZERO", lambda c: Natural(0)),
    ("NATURAL_ONE", lambda c: Natural(1)),
    ("REAL_ZERO", lambda c: Real(0.0)),
    ("REAL_ONE", lambda c: Real(1.0)),
    ("REAL_MINUS_ONE", lambda c: Real(-1.0)),
    # Rational units
    ("RATIONAL_ZERO", lambda c: Rational(c["REAL_ZERO"], c["REAL_ONE"])),
    ("RATIONAL_ONE", lambda c: Rational(c["REAL_ONE"], c["REAL_ONE"])),
    # Irrationals
    ("PI", lambda c: Irrational(pi_series(), "π")),
    ("E", lambda c: Irrational(e_series(), "e")),
    # Unbounded
    ("ZERO", lambda c: Zero(Polarity.POSITIVE)),
    ("NEGATIVE_ZERO", lambda c: Zero(Polarity.NEGATIVE)),
    ("THE_INFINITE", lambda c: Infinite(Polarity.POSITIVE)),
    ("NEGATIVE_INFINITE", lambda c: Infinite(Polarity.NEGATIVE)),
    # Structural units
    ("COMPLEX_ZERO", lambda c: Complex(c["REAL_ZERO"], c["REAL_ZERO"])),
    ("COMPLEX_ONE", lambda c: Complex(c["REAL_ONE"], c["REAL_ZERO"])),
    ("COMPLEX_MINUS_ONE", lambda c: Complex(c["REAL_MINUS_ONE"], c["REAL_ZERO"])),
    ("COMPLEX_I", lambda c: Complex(c["REAL_ZERO"], c["REAL_ONE"])),
    ("COMPLEX_MINUS_I", lambda c: Complex(c["REAL_ZERO"], c["REAL_MINUS_ONE"])),
    ("NATURAL_COMPLEX_ZERO", lambda c: NaturalComplex(c["NATURAL_ZERO"], c["NATURAL_ZERO"])),
    ("NATURAL_COMPLEX_ONE", lambda c: NaturalComplex(c["NATURAL_ONE"], c["NATURAL_ZERO"])),
    ("NATURAL_COMPLEX_J", lambda c: NaturalComplex(c["NATURAL_ZERO"], c["NATURAL_ONE"])),
    ("NATURAL_COMPLEX_ONE_J", lambda c: NaturalComplex(c["NATURAL_ONE"], c["NATURAL_ONE"])),
    # Rotation axis
    ("I0", _rotation(0)),
    ("I1", _rotation(1)),
    ("I2", _rotation(2)),
    ("I3", _rotation(3)),
    ("I4", _rotation(4)),
]

NAMES = tuple(name for name, _ in _BUILDERS)


class ConstantRegistry:
    """Once-initialised, lock-guarded store of the well-known constants."""

    _lock = threading.Lock()
    _values: Dict[str, Existence] = {}
    _initialized = False

    @classmethod
    def initialize(cls) -> None:
        """Build every constant in dependency order. Idempotent and thread-safe."""
        if cls._initialized:
            return
        with cls._lock:
            if cls._initialized:
                return
            built: Dict[str, Existence] = {}
            for name, builder in _BUILDERS:
                built[name] = builder(built)
            cls._values = built
            cls._initialized = True
            logger.debug("Initialized %d constants", len(built))

    @classmethod
    def is_initialized(cls) -> bool:
        return cls._initialized

    @classmethod
    def get(cls, name: str) -> Existence:
        """
        Fetch a constant by name.

        Raises:
            InvalidArgument: If no constant has that name
        """
        cls.initialize()
        try:
            return cls._values[name]
        except KeyError:
            raise InvalidArgument(f"Unknown constant: {name!r}") from None

    @classmethod
    def names(cls) -> Tuple[str, ...]:
        return NAMES


def __getattr__(name):  # Lazy constant access: constants.PI
    if name in NAMES:
        return ConstantRegistry.get(name)
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")


def __dir__():
    return sorted(list(globals()) + list(NAMES))
