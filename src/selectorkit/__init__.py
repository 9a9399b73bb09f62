"""selectorkit: CSS-like selector builder, rectangle value object and JSON shape helpers."""

from selectorkit.codec import ParseError, ShapeError, from_json, to_json
from selectorkit.config import SelectorkitConfig
from selectorkit.parser import parse_selector
from selectorkit.selector import (
    CombinedSelector,
    Combinator,
    CompositionError,
    DuplicateViolation,
    OrderViolation,
    SelectorBuilder,
    SelectorError,
    SelectorSyntaxError,
    SimpleSelector,
    css_selector_builder,
)
from selectorkit.shapes import Rectangle

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # selector
    "SelectorBuilder",
    "css_selector_builder",
    "SimpleSelector",
    "CombinedSelector",
    "Combinator",
    "parse_selector",
    "SelectorError",
    "DuplicateViolation",
    "OrderViolation",
    "CompositionError",
    "SelectorSyntaxError",
    # shapes
    "Rectangle",
    # codec
    "to_json",
    "from_json",
    "ParseError",
    "ShapeError",
    # config
    "SelectorkitConfig",
]
