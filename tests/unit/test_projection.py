"""Unit tests for row projection and field serialization."""

import io

import pytest

from jtab.core.projection import (
    RowProjector,
    serialize_field,
    write_header,
    write_row,
)
from jtab.errors import InvalidColumnError, InvalidRecordError
from jtab.models import ConvertConfig


def make_config(columns="a,b", **kwargs):
    return ConvertConfig.from_column_list(columns, **kwargs)


def test_serialize_string_quoted():
    assert serialize_field("c", "x", raw=False) == '"x"'


def test_serialize_string_doubles_quotes():
    assert serialize_field("c", 'a"b', raw=False) == '"a""b"'


def test_serialize_string_leaves_separator_and_newline():
    assert serialize_field("c", "a,b\nc", raw=False) == '"a,b\nc"'


def test_serialize_string_raw():
    assert serialize_field("c", 'a"b,c', raw=True) == 'a"b,c'


def test_serialize_bool():
    assert serialize_field("c", True, raw=False) == "true"
    assert serialize_field("c", False, raw=True) == "false"


@pytest.mark.parametrize(
    "value,expected",
    [
        (1, "1"),
        (-42, "-42"),
        (1.5, "1.5"),
        (0.1, "0.1"),
        (2.0, "2.0"),
        (12345678901234567890, "12345678901234567890"),
    ],
)
def test_serialize_number(value, expected):
    assert serialize_field("c", value, raw=False) == expected


def test_serialize_null():
    assert serialize_field("c", None, raw=False) == ""


@pytest.mark.parametrize("value", [[1, 2], {"x": 1}, []])
def test_serialize_nested_fails(value):
    with pytest.raises(InvalidColumnError) as excinfo:
        serialize_field("tags", value, raw=False)
    assert excinfo.value.column == "tags"
    assert str(excinfo.value).startswith("invalid column: tags")


def test_write_header():
    out = io.StringIO()
    write_header(make_config("a,b,c", separator="\t"), out)
    assert out.getvalue() == "a\tb\tc\n"


def test_write_header_disabled():
    out = io.StringIO()
    write_header(make_config(show_headers=False), out)
    assert out.getvalue() == ""


def test_write_row():
    out = io.StringIO()
    write_row({"a": 1, "b": "x"}, make_config(), out)
    assert out.getvalue() == '1,"x"\n'


def test_write_row_missing_field_is_empty():
    out = io.StringIO()
    write_row({"b": None}, make_config("a,b,c"), out)
    assert out.getvalue() == ",,\n"


def test_write_row_repeated_column():
    out = io.StringIO()
    write_row({"a": 7}, make_config("a,a"), out)
    assert out.getvalue() == "7,7\n"


def test_write_row_multichar_separator():
    out = io.StringIO()
    config = make_config(separator=" | ", raw=True)
    write_row({"a": "x", "b": True}, config, out)
    assert out.getvalue() == "x | true\n"


@pytest.mark.parametrize("value", [[{"a": 1}], "text", 3, None, True])
def test_write_row_rejects_non_object(value):
    with pytest.raises(InvalidRecordError, match="invalid json object"):
        write_row(value, make_config(), io.StringIO())


def test_write_row_nested_leaves_partial_line():
    out = io.StringIO()
    with pytest.raises(InvalidColumnError):
        write_row({"a": 1, "b": {"c": 2}}, make_config(), out)
    assert out.getvalue() == "1,"


def test_projector_counts_rows():
    out = io.StringIO()
    projector = RowProjector(make_config(), out)
    count = projector.project([{"a": 1, "b": "x"}, {"a": 2}])
    assert count == 2
    assert out.getvalue() == 'a,b\n1,"x"\n2,\n'


def test_projector_empty_input_writes_header_only():
    out = io.StringIO()
    assert RowProjector(make_config(), out).project([]) == 0
    assert out.getvalue() == "a,b\n"
