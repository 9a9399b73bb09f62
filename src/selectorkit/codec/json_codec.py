"""JSON helpers that round-trip values to and from a class ("shape").

``to_json`` serializes plain values, dataclasses and ordinary objects (by
their public attributes; methods never appear in the output).
``from_json`` decodes text and attaches a class's behavior to the result::

    r = from_json(Rectangle, '{"width": 10, "height": 20}')
    r.get_area()  # 200
"""

from __future__ import annotations

import dataclasses
import json
import logging
from typing import Any, TypeVar

from selectorkit.codec.errors import ParseError, ShapeError
from selectorkit.config import SelectorkitConfig

__all__ = ["to_json", "from_json"]

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _encode_default(obj: Any) -> Any:
    """Fallback for values the json module cannot serialize natively."""
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    if hasattr(obj, "__dict__") and not isinstance(obj, type):
        return {k: v for k, v in vars(obj).items() if not k.startswith("_")}
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def to_json(value: Any, config: SelectorkitConfig | None = None) -> str:
    """Return the JSON text for *value*.

    Output is compact (``[1,2,3]``) unless the config sets an indent. Do not
    rely on object key order. NaN and infinities raise ValueError, since
    standard JSON has no spelling for them.
    """
    cfg = config or SelectorkitConfig()
    separators = (",", ":") if cfg.json_indent is None else (",", ": ")
    return json.dumps(
        value,
        default=_encode_default,
        indent=cfg.json_indent,
        separators=separators,
        sort_keys=cfg.sort_keys,
        allow_nan=False,
    )


def from_json(shape: type[T], text: str | bytes) -> T:
    """Decode *text* and return it as an instance of *shape*.

    A JSON object becomes a *shape* instance created without calling
    ``__init__``, with each key set as an attribute. Any other payload is
    passed to ``shape(...)`` when *shape* subclasses the payload's type
    (a ``list`` subclass for an array, and so on).

    Raises ParseError for malformed JSON and ShapeError when the payload
    cannot take the shape.
    """
    if not isinstance(shape, type):
        raise ShapeError(f"Shape must be a class, got {shape!r}")

    try:
        payload = json.loads(text)
    except json.JSONDecodeError as e:
        logger.debug("Malformed JSON for %s: %s", shape.__name__, e)
        raise ParseError(
            f"Malformed JSON: {e.msg}", line=e.lineno, column=e.colno
        ) from e

    if isinstance(payload, shape):
        return payload
    if issubclass(shape, type(payload)):
        return shape(payload)  # type: ignore[call-arg]
    if isinstance(payload, dict):
        instance = shape.__new__(shape)
        if not hasattr(instance, "__dict__"):
            raise ShapeError(f"{shape.__name__} instances cannot hold attributes")
        instance.__dict__.update(payload)
        return instance
    raise ShapeError(
        f"Cannot give a JSON {type(payload).__name__} the shape {shape.__name__}"
    )
