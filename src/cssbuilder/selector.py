"""Selector nodes: compound selectors and combinator trees.

A selector node is one of two shapes, told apart by ``node.kind``:

* ``SimpleSelector`` (``NodeKind.SIMPLE``) accumulates fragments for a single
  element, e.g. ``a#home.nav[href]:hover::after``.
* ``CombinedSelector`` (``NodeKind.COMBINED``) joins two nodes with a
  combinator, e.g. ``ul > li``.

Both render with ``stringify()``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from cssbuilder.errors import DuplicateFragmentError, OrderViolationError
from cssbuilder.kinds import FragmentKind, NodeKind

logger = logging.getLogger(__name__)


class SimpleSelector:
    """A compound selector built one fragment at a time.

    Fragments live in six fixed slots indexed by ``FragmentKind.order``.
    Singleton kinds hold a string or None; repeatable kinds hold a list.
    Every fragment method returns ``self`` so calls can be chained::

        SimpleSelector().element("a").attr('href$=".png"').pseudo_class("focus")
    """

    kind = NodeKind.SIMPLE

    def __init__(self) -> None:
        self._slots: list[str | list[str] | None] = [
            [] if k.repeatable else None for k in FragmentKind
        ]

    # --- fragments ------------------------------------------------------------

    def element(self, tag: str) -> SimpleSelector:
        """Set the type selector (``div``, ``a``, ``*``)."""
        return self._add(FragmentKind.TYPE, tag)

    def id(self, name: str) -> SimpleSelector:
        """Set the id selector, rendered as ``#name``."""
        return self._add(FragmentKind.ID, name)

    def class_(self, name: str) -> SimpleSelector:
        """Append a class selector, rendered as ``.name``."""
        return self._add(FragmentKind.CLASS, name)

    def attr(self, expr: str) -> SimpleSelector:
        """Append an attribute selector, rendered as ``[expr]``."""
        return self._add(FragmentKind.ATTRIBUTE, expr)

    def pseudo_class(self, name: str) -> SimpleSelector:
        """Append a pseudo-class, rendered as ``:name``."""
        return self._add(FragmentKind.PSEUDO_CLASS, name)

    def pseudo_element(self, name: str) -> SimpleSelector:
        """Set the pseudo-element, rendered as ``::name``."""
        return self._add(FragmentKind.PSEUDO_ELEMENT, name)

    def _add(self, kind: FragmentKind, value: str) -> SimpleSelector:
        slot = self._slots[kind.order]
        if not kind.repeatable and slot is not None:
            logger.debug("Rejected %s %r: already set to %r", kind.value, value, slot)
            raise DuplicateFragmentError(kind)
        for later in kind.following():
            if self._has(later):
                logger.debug(
                    "Rejected %s %r: %s already present", kind.value, value, later.value
                )
                raise OrderViolationError(kind, later)

        rendered = kind.format(value)
        if kind.repeatable:
            slot.append(rendered)  # type: ignore[union-attr]
        else:
            self._slots[kind.order] = rendered
        return self

    # --- inspection -----------------------------------------------------------

    def _has(self, kind: FragmentKind) -> bool:
        slot = self._slots[kind.order]
        return bool(slot) if kind.repeatable else slot is not None

    def fragments(self, kind: FragmentKind) -> tuple[str, ...]:
        """Return the rendered fragments stored for *kind*, in insertion order."""
        slot = self._slots[kind.order]
        if kind.repeatable:
            return tuple(slot)  # type: ignore[arg-type]
        return () if slot is None else (slot,)  # type: ignore[return-value]

    @property
    def is_empty(self) -> bool:
        return not any(self._has(k) for k in FragmentKind)

    # --- rendering ------------------------------------------------------------

    def stringify(self) -> str:
        """Render all fragments in kind order with no separators."""
        return "".join("".join(self.fragments(k)) for k in FragmentKind)

    def __str__(self) -> str:
        return self.stringify()

    def __repr__(self) -> str:
        return f"SimpleSelector({self.stringify()!r})"


# ``class`` is a keyword, so the spelling ``getattr(sel, "class")`` is an alias.
setattr(SimpleSelector, "class", SimpleSelector.class_)


@dataclass(frozen=True)
class CombinedSelector:
    """Two selector nodes joined by a combinator.

    The combinator is an opaque token; any string is accepted.
    """

    left: SelectorNode
    combinator: str
    right: SelectorNode

    kind = NodeKind.COMBINED

    def stringify(self) -> str:
        """Render as ``<left> <combinator> <right>``, left subtree first."""
        return f"{self.left.stringify()} {self.combinator} {self.right.stringify()}"

    def __str__(self) -> str:
        return self.stringify()


SelectorNode = SimpleSelector | CombinedSelector
