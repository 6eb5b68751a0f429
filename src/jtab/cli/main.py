"""jtab CLI entry point."""

import logging
import sys
from pathlib import Path

import click
from pydantic import ValidationError

from .. import __version__
from ..core.pipeline import convert
from ..errors import JtabError
from ..models import ConvertConfig
from ..streams import open_input, open_output

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

# Shell-friendly spellings of a tab separator
TAB_ALIASES = {"\\t", "tab", "TAB"}


def _separator(ctx, param, value):
    """Map tab aliases to a literal tab."""
    return "\t" if value in TAB_ALIASES else value


@click.command(context_settings=dict(help_option_names=["-h", "--help"]))
@click.option(
    "-i",
    "--input",
    "input_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Input JSON file (default: stdin)",
)
@click.option(
    "-o",
    "--output",
    "output_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Output file (default: stdout)",
)
@click.option(
    "-c",
    "--columns",
    required=True,
    multiple=True,
    help="Comma-separated columns to output, in order",
)
@click.option(
    "-s",
    "--sep",
    "separator",
    default=",",
    show_default=True,
    callback=_separator,
    help="Output field separator ('\\t' or 'tab' for TSV)",
)
@click.option(
    "-r", "--raw", is_flag=True, help="Write strings without quoting"
)
@click.option("--no-headers", is_flag=True, help="Omit the header line")
@click.option(
    "--no-root",
    is_flag=True,
    help="Input is a stream of JSON documents instead of one array",
)
@click.option("-v", "--verbose", is_flag=True, help="Debug logging on stderr")
@click.version_option(__version__, prog_name="jtab")
def cli(
    input_path,
    output_path,
    columns,
    separator,
    raw,
    no_headers,
    no_root,
    verbose,
):
    """Convert JSON input to CSV/TSV.

    Each top-level object becomes one line holding the requested columns.
    By default the input must be a single JSON array of objects; with
    --no-root it is a sequence of objects separated by whitespace.

    Examples:
        jtab -c name,age -i people.json
        jtab -c id,title --no-root -s tab < events.ndjson
        curl -s api/items | jtab -c id,price -r --no-headers
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )

    try:
        config = ConvertConfig.from_column_list(
            columns,
            separator=separator,
            show_headers=not no_headers,
            raw=raw,
            no_root=no_root,
            input_path=input_path,
            output_path=output_path,
        )
    except ValidationError as e:
        message = "; ".join(err["msg"] for err in e.errors())
        raise click.UsageError(message) from e

    try:
        with open_input(config.input_path) as in_stream:
            with open_output(config.output_path) as out_stream:
                convert(config, in_stream, out_stream)
    except (JtabError, OSError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


def main():
    """Entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
