"""JSON codec error types."""


class CodecError(Exception):
    """Base error for JSON encode/decode failures."""


class ParseError(CodecError):
    """Raised when JSON text cannot be parsed."""

    def __init__(
        self, message: str, line: int | None = None, column: int | None = None
    ):
        self.line = line
        self.column = column
        super().__init__(message)


class ShapeError(CodecError):
    """Raised when a decoded payload cannot take on the requested shape."""
