"""Facade for building CSS-like selectors.

Example::

    builder = css_selector_builder
    builder.combine(
        builder.element("div").id("main").class_("container"),
        "+",
        builder.combine(
            builder.element("table").id("data"),
            "~",
            builder.element("tr").pseudo_class("nth-of-type(even)"),
        ),
    ).stringify()
    # 'div#main.container + table#data ~ tr:nth-of-type(even)'
"""

from __future__ import annotations

from selectorkit.selector.model import (
    CombinedSelector,
    Combinator,
    Selector,
    SimpleSelector,
    combine,
)

__all__ = ["SelectorBuilder", "css_selector_builder"]


class SelectorBuilder:
    """Entry point for selector chains.

    Each fragment method starts a fresh SimpleSelector; the builder itself
    holds no state, so one instance can be shared freely.
    """

    def element(self, value: str) -> SimpleSelector:
        return SimpleSelector().element(value)

    def id(self, value: str) -> SimpleSelector:
        return SimpleSelector().id(value)

    def class_(self, value: str) -> SimpleSelector:
        return SimpleSelector().class_(value)

    def attr(self, value: str) -> SimpleSelector:
        return SimpleSelector().attr(value)

    def pseudo_class(self, value: str) -> SimpleSelector:
        return SimpleSelector().pseudo_class(value)

    def pseudo_element(self, value: str) -> SimpleSelector:
        return SimpleSelector().pseudo_element(value)

    def combine(
        self, left: Selector, combinator: str | Combinator, right: Selector
    ) -> CombinedSelector:
        return combine(left, combinator, right)

    def stringify(self, selector: Selector) -> str:
        return selector.stringify()


css_selector_builder = SelectorBuilder()
