"""List every JSON Pointer of a document with its position."""

import json
from pathlib import Path

import click
from rich.table import Table
from rich.text import Text

from lincol.loader import index_file
from lincol.parsers import Format
from lincol.ui import console
from lincol.utils.error_handler import handle_exceptions


@click.command()
@handle_exceptions
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--format",
    "fmt",
    type=click.Choice([f.value for f in Format]),
    default=None,
    help="Source format (default: from file suffix, then LINCOL_FORMAT, then auto)",
)
@click.option("--json", "as_json", is_flag=True, help="Print a JSON object instead of a table")
def dump(file, fmt, as_json):
    """Show the position of every node in FILE, in document order.

    Containers are listed before their members. The root is the empty
    pointer.
    """
    positions = index_file(file, fmt)

    if as_json:
        click.echo(json.dumps(positions.to_dict(), indent=2, ensure_ascii=False))
        return

    table = Table(title=str(file), show_header=True, header_style="bold")
    table.add_column("Pointer", style="pointer")
    table.add_column("Line", justify="right")
    table.add_column("Column", justify="right")
    for pointer, position in positions:
        label = Text(pointer) if pointer else Text('""', style="dim")
        table.add_row(label, str(position.line), str(position.column))
    console.print(table)
