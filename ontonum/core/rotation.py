"""
Rotation axis: the imaginary unit generated by a single operator.

The operator is

    R(n) = (Infinite - I0) * n

where I0 is the real unit. By absorption ``Infinite - I0`` is the Infinite
itself, and ``multiply`` of an Infinite and a structural number is a
quarter turn of the complex plane in the Infinite's sense:

    POSITIVE:  (a, b) -> (-b,  a)
    NEGATIVE:  (a, b) -> ( b, -a)

Applying R four times to I0 gives I0, I1, I2, I3, I4 with I4 == I0,
I2 == -I0, and I1 * I1 == -I0.
"""

from typing import List, Optional

from .duality import to_complex
from .errors import InvalidArgument
from .existence import Tag
from .kinds import Complex, Infinite, Number, Real
from .ops import multiply, subtract
from .polarity import Polarity


class RotationAxis:
    """
    Quarter-turn generator over the complex plane.

    Args:
        infinite: Infinite whose polarity sets the sense of rotation
            (defaults to a positive Infinite)
        unit: The real unit I0; linear units are promoted to Complex
            (defaults to Complex(1.0, 0.0))
    """

    def __init__(self, infinite: Optional[Infinite] = None, unit: Optional[Number] = None):
        if infinite is None:
            infinite = Infinite(Polarity.POSITIVE)
        if unit is None:
            unit = Complex(Real(1.0), Real(0.0))
        if not isinstance(infinite, Number) or infinite.tag is not Tag.INFINITE:
            raise InvalidArgument(f"rotation generator needs an Infinite, got {infinite!r}")
        unit = to_complex(unit)
        if unit.tag is not Tag.COMPLEX or unit.is_zero:
            raise InvalidArgument(f"rotation unit must be a finite non-zero number, got {unit!r}")

        generator = subtract(infinite, unit)
        self._generator = generator
        self._unit = unit

    @property
    def generator(self) -> Infinite:
        """The operator's coefficient, ``Infinite - I0``."""
        return self._generator

    @property
    def sense(self) -> Polarity:
        return self._generator.polarity

    @property
    def unit(self) -> Complex:
        return self._unit

    def rotate(self, n: Number) -> Number:
        """
        Apply R once: ``multiply(generator, n)``.

        Zero is returned unchanged. Finite and structural inputs are viewed
        as Complex first; members are preserved.

        Raises:
            InvalidArgument: For an Infinite input, which has no direction
        """
        if not isinstance(n, Number):
            raise InvalidArgument(f"rotate expects a number, got {n!r}")
        if n.tag is Tag.ZERO:
            return n
        if n.tag is Tag.INFINITE:
            raise InvalidArgument("an Infinite cannot be rotated")
        c = to_complex(n)
        if c.tag is Tag.INFINITE:
            raise InvalidArgument(f"{n!r} exceeds the double range and cannot be rotated")
        return multiply(self._generator, c)

    __call__ = rotate

    def cycle(self, steps: int = 4) -> List[Number]:
        """Return [I0, I1, ..., I<steps>] obtained by repeated rotation of the unit."""
        if steps < 0:
            raise InvalidArgument(f"steps must be non-negative, got {steps}")
        values = [self._unit]
        for _ in range(steps):
            values.append(self.rotate(values[-1]))
        return values

    @property
    def imaginary_unit(self) -> Complex:
        """I1 = R(I0)."""
        return self.rotate(self._unit)

    def closes(self) -> bool:
        """True when four quarter turns return to the unit."""
        values = self.cycle(4)
        return values[4] == values[0]
