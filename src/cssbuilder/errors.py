"""Error hierarchy for the selector builder."""

from __future__ import annotations

from cssbuilder.kinds import FragmentKind

DUPLICATE_MESSAGE = (
    "Element, id and pseudo-element should not occur more then one time "
    "inside the selector"
)

ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: element, id, "
    "class, attribute, pseudo-class, pseudo-element"
)


class SelectorError(Exception):
    """Base error for all cssbuilder errors."""

    def __init__(self, message: str, *, kind: FragmentKind | None = None) -> None:
        super().__init__(message)
        self.kind = kind


class DuplicateFragmentError(SelectorError, ValueError):
    """A singleton fragment (element, id, pseudo-element) was added twice."""

    def __init__(self, kind: FragmentKind, message: str = DUPLICATE_MESSAGE) -> None:
        super().__init__(message, kind=kind)


class OrderViolationError(SelectorError, ValueError):
    """A fragment was added after a fragment that must follow it."""

    def __init__(
        self,
        kind: FragmentKind,
        conflicting: FragmentKind,
        message: str = ORDER_MESSAGE,
    ) -> None:
        super().__init__(message, kind=kind)
        self.conflicting = conflicting
