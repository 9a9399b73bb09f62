"""Error hierarchy for the selector builder."""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from selectorkit.selector.model import FragmentKind

DUPLICATE_MESSAGE = (
    "Element, id and pseudo-element should not occur more then one time "
    "inside the selector"
)
ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: element, id, "
    "class, attribute, pseudo-class, pseudo-element"
)


class SelectorError(Exception):
    """Base error for all selector building failures."""


class DuplicateViolation(SelectorError):
    """An element, id or pseudo-element was given twice in one selector."""

    def __init__(self, kind: FragmentKind, message: str = DUPLICATE_MESSAGE) -> None:
        super().__init__(message)
        self.kind = kind


class OrderViolation(SelectorError):
    """A fragment was added after a fragment that must follow it."""

    def __init__(
        self,
        kind: FragmentKind,
        previous: FragmentKind,
        message: str = ORDER_MESSAGE,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.previous = previous


class CompositionError(SelectorError):
    """Two selectors could not be combined."""


class SelectorSyntaxError(SelectorError):
    """Raised when selector text cannot be parsed."""

    def __init__(
        self, message: str, line: int | None = None, column: int | None = None
    ):
        self.line = line
        self.column = column
        super().__init__(message)
