from __future__ import annotations

from typing import Optional


class JsonMendError(Exception):
    """Base class for errors raised by jsonmend."""


class PathSyntaxError(JsonMendError, ValueError):
    """A path expression like '.items[3].name' could not be parsed."""

    def __init__(self, index: int, message: str):
        self.index = index
        self.message = message
        super().__init__(f"Invalid JSON path: {message} at index {index}")


class JsonValidationError(JsonMendError, ValueError):
    """Detailed syntax error for a JSON text (1-based line and column)."""

    def __init__(self, message: str, line: int = 0, column: int = 0, pos: Optional[int] = None):
        self.message = message
        self.line = line
        self.column = column
        self.pos = pos
        super().__init__(message)


class SourceMapError(JsonMendError, ValueError):
    """A source map could not be built because the text is not strict JSON."""
