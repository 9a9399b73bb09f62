"""Selector model: fragments, simple selectors and combined selectors.

A simple selector is an ordered run of fragments::

    element#id.class[attr]:pseudo-class::pseudo-element
              \\----/\\----/\\----------/
              may repeat

Fragments are tagged with a FragmentKind whose value is its rank. Adding a
fragment whose rank is lower than the last fragment's rank is an ordering
error; ELEMENT, ID and PSEUDO_ELEMENT may occur at most once.

Every selector is immutable. Adding a fragment returns a new SimpleSelector,
so a partially built selector can be reused as the base of several chains.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Union

from selectorkit.selector.errors import (
    CompositionError,
    DuplicateViolation,
    OrderViolation,
)

logger = logging.getLogger(__name__)


class FragmentKind(IntEnum):
    """Category of a selector fragment; the value is its position rank."""

    ELEMENT = 0
    ID = 1
    CLASS = 2
    ATTRIBUTE = 3
    PSEUDO_CLASS = 4
    PSEUDO_ELEMENT = 5

    @property
    def unique(self) -> bool:
        return self in _UNIQUE_KINDS

    def render(self, value: str) -> str:
        prefix, suffix = _AFFIXES[self]
        return f"{prefix}{value}{suffix}"


_UNIQUE_KINDS = frozenset(
    {FragmentKind.ELEMENT, FragmentKind.ID, FragmentKind.PSEUDO_ELEMENT}
)

_AFFIXES: dict[FragmentKind, tuple[str, str]] = {
    FragmentKind.ELEMENT: ("", ""),
    FragmentKind.ID: ("#", ""),
    FragmentKind.CLASS: (".", ""),
    FragmentKind.ATTRIBUTE: ("[", "]"),
    FragmentKind.PSEUDO_CLASS: (":", ""),
    FragmentKind.PSEUDO_ELEMENT: ("::", ""),
}


class Combinator(Enum):
    """Relationship between two combined selectors."""

    DESCENDANT = " "
    CHILD = ">"
    ADJACENT_SIBLING = "+"
    GENERAL_SIBLING = "~"

    @classmethod
    def from_glyph(cls, glyph: str | Combinator) -> Combinator:
        """Look up a combinator by its glyph, e.g. ``"+"`` or ``" "``."""
        if isinstance(glyph, Combinator):
            return glyph
        if not isinstance(glyph, str):
            raise CompositionError(f"Combinator must be a string, got {glyph!r}")
        stripped = glyph.strip()
        if not stripped and glyph:
            return cls.DESCENDANT
        for member in cls:
            if member.value == stripped:
                return member
        raise CompositionError(f"Unknown combinator: {glyph!r}")


@dataclass(frozen=True)
class Fragment:
    """One tagged piece of a simple selector."""

    kind: FragmentKind
    value: str

    def render(self) -> str:
        return self.kind.render(self.value)


@dataclass(frozen=True)
class SimpleSelector:
    """A chain of fragments with no combinator."""

    fragments: tuple[Fragment, ...] = ()

    # --- fragment operations --------------------------------------------------

    def element(self, value: str) -> SimpleSelector:
        return self.add(FragmentKind.ELEMENT, value)

    def id(self, value: str) -> SimpleSelector:
        return self.add(FragmentKind.ID, value)

    def class_(self, value: str) -> SimpleSelector:
        return self.add(FragmentKind.CLASS, value)

    def attr(self, value: str) -> SimpleSelector:
        return self.add(FragmentKind.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> SimpleSelector:
        return self.add(FragmentKind.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> SimpleSelector:
        return self.add(FragmentKind.PSEUDO_ELEMENT, value)

    def add(self, kind: FragmentKind, value: str) -> SimpleSelector:
        """Validate and append a fragment, returning a new selector.

        Uniqueness is checked before ordering so that repeating a unique
        kind always reports a duplicate.
        """
        if kind.unique and any(f.kind is kind for f in self.fragments):
            logger.debug("Duplicate %s fragment %r", kind.name, value)
            raise DuplicateViolation(kind)
        if self.fragments:
            previous = self.fragments[-1].kind
            if kind < previous:
                logger.debug(
                    "%s fragment %r cannot follow %s", kind.name, value, previous.name
                )
                raise OrderViolation(kind, previous)
        return SimpleSelector(self.fragments + (Fragment(kind, value),))

    # --- rendering ------------------------------------------------------------

    @property
    def is_empty(self) -> bool:
        return not self.fragments

    def stringify(self) -> str:
        return "".join(f.render() for f in self.fragments)

    def __str__(self) -> str:
        return self.stringify()


@dataclass(frozen=True)
class CombinedSelector:
    """Two selectors joined by a combinator.

    Either side may itself be a CombinedSelector, so arbitrary chains are
    expressed as a tree and rendered recursively.
    """

    left: Selector
    combinator: Combinator
    right: Selector

    def stringify(self) -> str:
        return (
            f"{self.left.stringify()} {self.combinator.value} "
            f"{self.right.stringify()}"
        )

    def __str__(self) -> str:
        return self.stringify()


Selector = Union[SimpleSelector, CombinedSelector]


def combine(left: Selector, combinator: str | Combinator, right: Selector) -> CombinedSelector:
    """Join two selectors with a combinator glyph (``' '``, ``'+'``, ``'~'``, ``'>'``)."""
    comb = Combinator.from_glyph(combinator)
    for side, operand in (("left", left), ("right", right)):
        if not isinstance(operand, (SimpleSelector, CombinedSelector)):
            raise CompositionError(
                f"Cannot combine {side} operand of type {type(operand).__name__}"
            )
        if isinstance(operand, SimpleSelector) and operand.is_empty:
            raise CompositionError(f"Cannot combine an empty {side} selector")
    logger.debug("Combining with %s", comb.name)
    return CombinedSelector(left=left, combinator=comb, right=right)
