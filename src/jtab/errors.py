"""Errors raised while converting JSON to delimited text.

Every error is fatal to the run. The CLI reports ``str(error)`` on stderr
and exits non-zero.
"""

from typing import Any

from .models.values import to_compact_json


class JtabError(Exception):
    """Base class for conversion errors."""


class ParseError(JtabError):
    """Input is not valid JSON (or has trailing data after the document)."""

    def __init__(self, message: str, position: int | None = None):
        super().__init__(message)
        self.position = position


class ShapeError(JtabError):
    """Single-document root is not an array."""


class InvalidRecordError(JtabError):
    """A top-level value is not an object."""

    def __init__(self, value: Any):
        super().__init__(f"invalid json object: {to_compact_json(value)}")
        self.value = value


class InvalidColumnError(JtabError):
    """A projected field holds a nested array or object."""

    def __init__(self, column: str, value: Any):
        super().__init__(f"invalid column: {column}: {to_compact_json(value)}")
        self.column = column
        self.value = value


class JtabIOError(JtabError):
    """Input or output file could not be opened."""


__all__ = [
    "InvalidColumnError",
    "InvalidRecordError",
    "JtabError",
    "JtabIOError",
    "ParseError",
    "ShapeError",
]
