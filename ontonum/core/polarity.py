"""Polarity: the sign bit carried by unbounded kinds (Zero and Infinite)."""

from enum import Enum


class Polarity(Enum):
    """Sign of an unbounded value."""
    POSITIVE = 1
    NEGATIVE = -1

    @property
    def is_positive(self) -> bool:
        return self is Polarity.POSITIVE

    def inverted(self) -> "Polarity":
        """Return the opposite polarity."""
        return Polarity.NEGATIVE if self is Polarity.POSITIVE else Polarity.POSITIVE

    def combine(self, other: "Polarity") -> "Polarity":
        """Sign product: equal polarities give POSITIVE, opposite give NEGATIVE."""
        return Polarity.POSITIVE if self is other else Polarity.NEGATIVE

    @classmethod
    def from_sign(cls, positive: bool) -> "Polarity":
        return cls.POSITIVE if positive else cls.NEGATIVE

    @property
    def symbol(self) -> str:
        return "+" if self is Polarity.POSITIVE else "-"
