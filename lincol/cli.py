"""lincol CLI - Main entry point and command registration hub."""
# ruff: noqa: E402 - Intentional lazy loading: commands imported after cli group definition

from pathlib import Path

import click

from lincol import __version__
from lincol.utils.logging import configure_file_logging, configure_logging, logger


@click.group()
@click.version_option(version=__version__, prog_name="lincol")
@click.help_option("-h", "--help")
@click.option(
    "--log-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Also write a debug log to LOG_DIR/lincol.log",
)
@click.pass_context
def cli(ctx, log_dir):
    """lincol - line/column lookup for JSON and YAML by JSON Pointer

    \b
    QUICK START:
      lincol get config.yml /services/web/image   # prints line:column
      lincol dump package.json                    # every pointer, in order
      lincol dump --json data.yaml                # same, as JSON

    \b
    Environment:
      LINCOL_FORMAT          auto|json|yaml
      LINCOL_DUPLICATE_KEYS  last|first|error
      LINCOL_LOG_LEVEL       DEBUG|INFO|WARNING|ERROR
      LINCOL_LOG_JSON        1 for NDJSON logs on stderr"""
    if log_dir is not None:
        handler_id = configure_file_logging(log_dir)
        ctx.call_on_close(lambda: logger.remove(handler_id))


from lincol.commands.dump import dump
from lincol.commands.get import get

cli.add_command(get)
cli.add_command(dump)


def main():
    """Console script entry point."""
    configure_logging()
    cli()


if __name__ == "__main__":
    main()
