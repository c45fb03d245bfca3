"""
Existence: entities defined only by a finite set of sub-entities.

Every value in the ontology, numbers included, is an Existence. Two
entities are structurally equal when they belong to the same equality
class and carry equal (unordered, deduplicated) member sets. Number kinds
extend the comparison with their payload (see ``kinds.py``).
"""

from enum import Enum
from typing import Any, FrozenSet, Iterable, Tuple

from .errors import InvalidArgument


class Tag(Enum):
    """Closed set of entity kinds. The value is the kind's rendered name."""
    EXISTENCE = "Existence"
    NATURE = "Nature"
    BEING = "Being"
    VOID = "Void"
    ZERO = "Zero"
    INFINITE = "Infinite"
    NATURAL = "Natural"
    INTEGER = "Integer"
    REAL = "Real"
    RATIONAL = "Rational"
    IRRATIONAL = "Irrational"
    COMPLEX = "Complex"
    NATURAL_COMPLEX = "NaturalComplex"

    @property
    def aliases(self) -> Tuple[str, ...]:
        """Names this kind is known by, English first."""
        return _ALIASES[self]

    @classmethod
    def from_alias(cls, name: str) -> "Tag":
        """
        Look up a kind by any of its aliases.

        Raises:
            InvalidArgument: If no kind carries the alias
        """
        for tag, names in _ALIASES.items():
            if name in names:
                return tag
        raise InvalidArgument(f"Unknown kind alias: {name!r}")


_ALIASES = {
    Tag.EXISTENCE: ("Existence", "存在"),
    Tag.NATURE: ("Nature", "自然", "Tao", "道", "Onto", "本体", "Limitless", "无限"),
    Tag.BEING: ("Being", "有", "存有"),
    Tag.VOID: ("Void", "不存在", "虚无"),
    Tag.ZERO: ("Zero", "0"),
    Tag.INFINITE: ("Infinite", "无穷", "无穷大"),
    Tag.NATURAL: ("Natural", "自然数"),
    Tag.INTEGER: ("Integer", "整数"),
    Tag.REAL: ("Real", "实数"),
    Tag.RATIONAL: ("Rational", "有理数"),
    Tag.IRRATIONAL: ("Irrational", "无理数"),
    Tag.COMPLEX: ("Complex", "复数", "实复数"),
    Tag.NATURAL_COMPLEX: ("NaturalComplex", "自然复数"),
}


def freeze_members(members: Iterable["Existence"]) -> FrozenSet["Existence"]:
    """
    Validate and freeze a member collection.

    Args:
        members: Iterable of Existence instances (duplicates collapse)

    Returns:
        Frozen member set

    Raises:
        InvalidArgument: If the collection or any member is absent, or a
            member is not an Existence
    """
    if members is None:
        raise InvalidArgument("members must not be None")
    if isinstance(members, Existence):
        raise InvalidArgument("members must be a collection of Existence, not a single Existence")
    frozen = []
    for member in members:
        if member is None:
            raise InvalidArgument("members must not contain None")
        if not isinstance(member, Existence):
            raise InvalidArgument(f"member is not an Existence: {member!r}")
        frozen.append(member)
    return frozenset(frozen)


class Existence:
    """
    Base structural entity.

    The bare Existence does not exist (``exists`` is False); it is the
    concept every other kind refines. Negation leaves it unchanged.
    """

    __slots__ = ("_members",)

    tag = Tag.EXISTENCE

    def __init__(self, members: Iterable["Existence"] = ()):
        object.__setattr__(self, "_members", freeze_members(members))

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def members(self) -> FrozenSet["Existence"]:
        return self._members

    @property
    def exists(self) -> bool:
        return False

    @property
    def kind_name(self) -> str:
        return self.tag.value

    def _equality_class(self) -> Tag:
        # Existence and Nature are both negation-neutral and compare alike
        return Tag.NATURE

    def _payload(self) -> Tuple[Any, ...]:
        return ()

    def _key(self) -> Tuple[Any, ...]:
        return (self._equality_class(), self._payload(), self._members)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Existence):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __neg__(self) -> "Existence":
        return self

    def render(self) -> str:
        """Render as ``(m1,m2,...)``, or the kind name when there are no members."""
        if not self._members:
            return self.kind_name
        return "(" + ",".join(sorted(m.render() for m in self._members)) + ")"

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        if not self._members:
            return f"{self.kind_name}()"
        return f"{self.kind_name}({self.render()})"


class Nature(Existence):
    """An existence that exists from an unknown beginning. Its opposite is itself."""

    __slots__ = ()

    tag = Tag.NATURE

    @property
    def exists(self) -> bool:
        return True


class Being(Existence):
    """Something that is. Negating a Being yields the Void with the same members."""

    __slots__ = ()

    tag = Tag.BEING

    @property
    def exists(self) -> bool:
        return True

    def _equality_class(self) -> Tag:
        return Tag.BEING

    def __neg__(self) -> "Void":
        return Void(self._members)


class Void(Existence):
    """Something that is not. Negating a Void yields the Being with the same members."""

    __slots__ = ()

    tag = Tag.VOID

    @property
    def exists(self) -> bool:
        return True

    def _equality_class(self) -> Tag:
        return Tag.VOID

    def __neg__(self) -> Being:
        return Being(self._members)
