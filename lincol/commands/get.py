"""Print the line:column of one JSON Pointer in a JSON or YAML file."""

import sys
from pathlib import Path

import click
from rich.text import Text

from lincol.loader import index_file
from lincol.parsers import Format
from lincol.ui import err_console
from lincol.utils.error_handler import handle_exceptions
from lincol.utils.exit_codes import ExitCodes


@click.command()
@handle_exceptions
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("pointer")
@click.option(
    "--format",
    "fmt",
    type=click.Choice([f.value for f in Format]),
    default=None,
    help="Source format (default: from file suffix, then LINCOL_FORMAT, then auto)",
)
def get(file, pointer, fmt):
    """Print where POINTER's value starts in FILE, as line:column.

    POINTER is an RFC 6901 JSON Pointer: "" is the whole document, "/a/0"
    is the first element of member "a". Write "~1" for "/" and "~0" for "~"
    inside a key.

    \b
    Examples:
      lincol get config.yml /services/web/image
      lincol get package.json /scripts/test

    Exits 1 when the pointer is well-formed but not in the document.
    """
    position = index_file(file, fmt).get(pointer)
    if position is None:
        err_console.print(
            Text.assemble("could not find ", (pointer, "pointer"), " in ", (str(file), "path"))
        )
        sys.exit(ExitCodes.NOT_FOUND)
    click.echo(str(position))
