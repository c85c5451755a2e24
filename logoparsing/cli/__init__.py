"""CLI entry point for inspecting variable bindings."""

import logging

import click

from logoparsing.cli.dump_cmd import dump_cmd
from logoparsing.cli.eval_cmd import eval_cmd


@click.group()
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log bindings to stderr.")
def main(verbose: bool) -> None:
    """Logo variable binding table."""
    # Level is set on the package logger; root handlers may already exist.
    logging.getLogger("logoparsing").setLevel(logging.DEBUG if verbose else logging.WARNING)
    if verbose:
        logging.basicConfig(format="%(name)s: %(message)s")


main.add_command(eval_cmd)
main.add_command(dump_cmd)
