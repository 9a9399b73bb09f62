from selectorkit.parser.transformer import SelectorTransformer, parse_selector

__all__ = ["parse_selector", "SelectorTransformer"]
