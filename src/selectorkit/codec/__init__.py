from selectorkit.codec.errors import CodecError, ParseError, ShapeError
from selectorkit.codec.json_codec import from_json, to_json

__all__ = ["to_json", "from_json", "CodecError", "ParseError", "ShapeError"]
