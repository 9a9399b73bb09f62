from selectorkit.selector.builder import SelectorBuilder, css_selector_builder
from selectorkit.selector.errors import (
    CompositionError,
    DuplicateViolation,
    OrderViolation,
    SelectorError,
    SelectorSyntaxError,
)
from selectorkit.selector.model import (
    CombinedSelector,
    Combinator,
    Fragment,
    FragmentKind,
    Selector,
    SimpleSelector,
    combine,
)

__all__ = [
    # builder
    "SelectorBuilder",
    "css_selector_builder",
    # model
    "FragmentKind",
    "Fragment",
    "Combinator",
    "SimpleSelector",
    "CombinedSelector",
    "Selector",
    "combine",
    # errors
    "SelectorError",
    "DuplicateViolation",
    "OrderViolation",
    "CompositionError",
    "SelectorSyntaxError",
]
