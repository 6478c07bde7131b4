"""Enumeration types and ordering tables for selector fragments."""

from __future__ import annotations

from enum import Enum, StrEnum


class FragmentKind(Enum):
    """Kind of a single selector fragment, in mandatory CSS order.

    Members are declared in the order they must appear inside a compound
    selector: ``element#id.class[attr]:pseudo-class::pseudo-element``.
    """

    TYPE = "type"
    ID = "id"
    CLASS = "class"
    ATTRIBUTE = "attribute"
    PSEUDO_CLASS = "pseudo-class"
    PSEUDO_ELEMENT = "pseudo-element"

    @property
    def order(self) -> int:
        """Position of this kind in the fixed fragment order."""
        return _ORDER.index(self)

    @property
    def repeatable(self) -> bool:
        """True if a compound selector may carry several fragments of this kind."""
        return self in _REPEATABLE

    def format(self, value: str) -> str:
        """Wrap *value* in this kind's sigil."""
        prefix, suffix = _SIGILS[self]
        return f"{prefix}{value}{suffix}"

    def following(self) -> tuple[FragmentKind, ...]:
        """All kinds that must come strictly after this one."""
        return _ORDER[self.order + 1:]


class NodeKind(Enum):
    """Discriminator for selector node types."""

    SIMPLE = "simple"
    COMBINED = "combined"


class Combinator(StrEnum):
    """The four CSS combinators."""

    DESCENDANT = " "
    CHILD = ">"
    ADJACENT_SIBLING = "+"
    GENERAL_SIBLING = "~"


_ORDER: tuple[FragmentKind, ...] = tuple(FragmentKind)

_REPEATABLE = frozenset(
    {FragmentKind.CLASS, FragmentKind.ATTRIBUTE, FragmentKind.PSEUDO_CLASS}
)

# (prefix, suffix) applied around the raw fragment value.
_SIGILS: dict[FragmentKind, tuple[str, str]] = {
    FragmentKind.TYPE: ("", ""),
    FragmentKind.ID: ("#", ""),
    FragmentKind.CLASS: (".", ""),
    FragmentKind.ATTRIBUTE: ("[", "]"),
    FragmentKind.PSEUDO_CLASS: (":", ""),
    FragmentKind.PSEUDO_ELEMENT: ("::", ""),
}
