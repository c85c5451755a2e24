"""CLI subcommand: eval."""

import click

from logoparsing.bindings.errors import UnboundVariable
from logoparsing.cli.settings import build_table, set_option
from logoparsing.formatter import format_binding


@click.command("eval")
@click.argument("names", nargs=-1, required=True)
@set_option
def eval_cmd(names: tuple[str, ...], settings: tuple[str, ...]) -> None:
    """Look up each NAME and print its value.

    Variables are bound with --set first; later --set options for the same
    name overwrite earlier ones. Looking up an unbound name is an error.
    """
    table = build_table(settings)

    try:
        for name in names:
            click.echo(format_binding(name, table.lookup(name)))
    except UnboundVariable as e:
        raise click.ClickException(str(e))
