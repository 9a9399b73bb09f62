"""Lark Transformer that converts selector text into the selector model.

Every fragment is replayed through SimpleSelector.add, so parsed text is
held to the same ordering and uniqueness rules as builder chains.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from lark import Lark, Token, Transformer
from lark.exceptions import UnexpectedInput, VisitError

from selectorkit.selector.errors import SelectorSyntaxError
from selectorkit.selector.model import (
    FragmentKind,
    Selector,
    SimpleSelector,
    combine,
)

logger = logging.getLogger(__name__)

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"


class SelectorTransformer(Transformer):  # type: ignore[type-arg]
    """Transform a Lark parse tree into SimpleSelector / CombinedSelector values."""

    # ---- fragments ----

    def element(self, items: list[Token]) -> tuple[FragmentKind, str]:
        return (FragmentKind.ELEMENT, str(items[0]))

    def id(self, items: list[Token]) -> tuple[FragmentKind, str]:
        return (FragmentKind.ID, str(items[0]))

    def class_(self, items: list[Token]) -> tuple[FragmentKind, str]:
        return (FragmentKind.CLASS, str(items[0]))

    def attr(self, items: list[Token]) -> tuple[FragmentKind, str]:
        return (FragmentKind.ATTRIBUTE, str(items[0]))

    def pseudo_class(self, items: list[Token]) -> tuple[FragmentKind, str]:
        return (FragmentKind.PSEUDO_CLASS, str(items[0]))

    def pseudo_element(self, items: list[Token]) -> tuple[FragmentKind, str]:
        return (FragmentKind.PSEUDO_ELEMENT, str(items[0]))

    # ---- structural ----

    def compound(self, items: list[tuple[FragmentKind, str]]) -> SimpleSelector:
        selector = SimpleSelector()
        for kind, value in items:
            selector = selector.add(kind, value)
        return selector

    def complex(self, items: list[object]) -> Selector:
        # Items alternate: compound, COMBINATOR, compound, ...
        # Fold from the right so "a + b ~ c" nests as a + (b ~ c).
        result: Selector = items[-1]  # type: ignore[assignment]
        for i in range(len(items) - 3, -1, -2):
            glyph = str(items[i + 1])
            result = combine(items[i], glyph, result)  # type: ignore[arg-type]
        return result

    def start(self, items: list[object]) -> Selector:
        return items[0]  # type: ignore[return-value]


@lru_cache(maxsize=1)
def _parser() -> Lark:
    return Lark(GRAMMAR_PATH.read_text(encoding="utf-8"), parser="lalr", start="start")


def parse_selector(source: str) -> Selector:
    """Parse selector text such as ``'div#main > a:hover'`` into a Selector.

    Raises SelectorSyntaxError for text the grammar rejects, and
    DuplicateViolation / OrderViolation for fragments in an invalid order.
    """
    text = source.strip()
    if not text:
        raise SelectorSyntaxError("Empty selector")
    try:
        tree = _parser().parse(text)
    except UnexpectedInput as e:
        logger.debug("Selector syntax error in %r: %s", text, e)
        raise SelectorSyntaxError(
            str(e), line=getattr(e, "line", None), column=getattr(e, "column", None)
        ) from e
    try:
        return SelectorTransformer().transform(tree)
    except VisitError as e:
        # Surface builder errors raised inside transformer callbacks.
        raise e.orig_exc from e
