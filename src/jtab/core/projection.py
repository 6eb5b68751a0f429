"""Project JSON objects onto delimited text rows."""

from typing import Any, Iterable, Protocol

from ..errors import InvalidColumnError, InvalidRecordError
from ..models.config import ConvertConfig
from ..models.values import JsonKind


class TextSink(Protocol):
    def write(self, text: str) -> int:
        ...


def serialize_field(column: str, value: Any, raw: bool) -> str:
    """Render one scalar field.

    Args:
        column: Column name (used in the error for nested values)
        value: Field value; None covers both JSON null and a missing key
        raw: Write strings unquoted and unescaped

    Raises:
        InvalidColumnError: Value is an array or object
    """
    match JsonKind.of(value):
        case JsonKind.STRING:
            if raw:
                return value
            return '"' + value.replace('"', '""') + '"'
        case JsonKind.BOOL:
            return "true" if value else "false"
        case JsonKind.NUMBER:
            # repr gives the shortest round-trip form for floats
            return repr(value)
        case JsonKind.NULL:
            return ""
        case JsonKind.ARRAY | JsonKind.OBJECT:
            raise InvalidColumnError(column, value)


def write_header(config: ConvertConfig, out: TextSink) -> None:
    """Write the column names as the first line, unless headers are off."""
    if not config.show_headers:
        return
    last_column = len(config.columns) - 1
    for i, column in enumerate(config.columns):
        out.write(column)
        if i != last_column:
            out.write(config.separator)
    out.write("\n")


def write_row(value: Any, config: ConvertConfig, out: TextSink) -> None:
    """Write one object as a delimited line.

    Fields are written one at a time, so an error partway through leaves a
    partial line in the output.

    Raises:
        InvalidRecordError: Value is not an object
        InvalidColumnError: A projected field is an array or object
    """
    if JsonKind.of(value) is not JsonKind.OBJECT:
        raise InvalidRecordError(value)

    last_column = len(config.columns) - 1
    for i, column in enumerate(config.columns):
        out.write(serialize_field(column, value.get(column), config.raw))
        if i != last_column:
            out.write(config.separator)
    out.write("\n")


class RowProjector:
    """Writes the header and one row per record to a sink."""

    def __init__(self, config: ConvertConfig, out: TextSink) -> None:
        self.config = config
        self.out = out
        self.rows_written = 0

    def write_header(self) -> None:
        write_header(self.config, self.out)

    def write_row(self, value: Any) -> None:
        write_row(value, self.config, self.out)
        self.rows_written += 1

    def project(self, values: Iterable[Any]) -> int:
        """Write the header, then every value; return the row count."""
        self.write_header()
        for value in values:
            self.write_row(value)
        return self.rows_written


__all__ = [
    "RowProjector",
    "TextSink",
    "serialize_field",
    "write_header",
    "write_row",
]
