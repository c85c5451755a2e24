"""CLI subcommand: dump."""

import click

from logoparsing.cli.settings import build_table, set_option
from logoparsing.formatter import format_bindings


@click.command("dump")
@set_option
def dump_cmd(settings: tuple[str, ...]) -> None:
    """Print every binding as a table."""
    click.echo(format_bindings(build_table(settings)))
