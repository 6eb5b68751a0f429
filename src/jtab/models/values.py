"""JSON value kinds.

Decoded values use the ``json`` module's native types. ``JsonKind.of``
recovers the tag so consumers can ``match`` on it exhaustively.
"""

from __future__ import annotations

import json
from enum import Enum
from typing import Any


class JsonKind(Enum):
    """Tag of a decoded JSON value."""

    NULL = "null"
    BOOL = "bool"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"

    @classmethod
    def of(cls, value: Any) -> JsonKind:
        """Classify a decoded value.

        ``bool`` is checked before numbers since it subclasses ``int``.

        Raises:
            TypeError: If value is not one of the json module's types
        """
        if value is None:
            return cls.NULL
        if isinstance(value, bool):
            return cls.BOOL
        if isinstance(value, (int, float)):
            return cls.NUMBER
        if isinstance(value, str):
            return cls.STRING
        if isinstance(value, list):
            return cls.ARRAY
        if isinstance(value, dict):
            return cls.OBJECT
        raise TypeError(f"not a JSON value: {type(value).__name__}")


def to_compact_json(value: Any) -> str:
    """Render a value as single-line JSON for error messages."""
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


__all__ = ["JsonKind", "to_compact_json"]
