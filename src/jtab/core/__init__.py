"""Conversion engine: value decoding and row projection."""

from .decoding import decode_concatenated, decode_single, iter_values
from .pipeline import convert
from .projection import RowProjector, serialize_field, write_header, write_row

__all__ = [
    "RowProjector",
    "convert",
    "decode_concatenated",
    "decode_single",
    "iter_values",
    "serialize_field",
    "write_header",
    "write_row",
]
