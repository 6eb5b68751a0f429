"""Pytest configuration and shared fixtures."""

import pytest
from click.testing import CliRunner

from jtab.cli import cli


@pytest.fixture
def cli_runner():
    """Provide Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def invoke(cli_runner):
    """Helper to invoke the CLI with args and optional input.

    Usage:
        result = invoke(["-c", "a,b"], input_data='[{"a": 1}]')
        result = invoke(["-c", "a", "-i", "in.json", "-o", "out.csv"])
    """

    def _invoke(args, input_data=None):
        return cli_runner.invoke(cli, args, input=input_data)

    return _invoke


@pytest.fixture
def people_json():
    """Single-document input: an array of objects."""
    return (
        '[{"name": "Alice", "age": 30, "active": true},'
        ' {"name": "Bob", "age": 25, "active": false}]'
    )


@pytest.fixture
def people_ndjson():
    """Concatenated input: one object per line."""
    return '{"name":"Alice","age":30}\n{"name":"Bob","age":25}\n'


@pytest.fixture
def people_file(tmp_path, people_json):
    """Provide path to a people.json file."""
    path = tmp_path / "people.json"
    path.write_text(people_json, encoding="utf-8")
    return path
