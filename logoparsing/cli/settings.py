"""Shared handling of --set NAME=INT options."""

from __future__ import annotations

import logging

import click

from logoparsing.bindings.table import BindingTable

logger = logging.getLogger(__name__)

set_option = click.option(
    "--set",
    "settings",
    multiple=True,
    metavar="NAME=INT",
    help="Bind a variable before evaluating: --set name=42",
)


def parse_setting(setting: str) -> tuple[str, int]:
    """Split a NAME=INT option into its name and integer value."""
    if "=" not in setting:
        raise click.ClickException(f"Invalid --set format: {setting!r} (expected name=int)")
    name, raw = setting.split("=", 1)
    name = name.strip()
    raw = raw.strip()
    if not name:
        raise click.ClickException(f"Invalid --set format: {setting!r} (empty name)")
    try:
        value = int(raw)
    except ValueError:
        raise click.ClickException(f"Invalid value for {name!r}: {raw!r} is not an integer")
    return name, value


def build_table(settings: tuple[str, ...]) -> BindingTable:
    """Create a table and apply each setting in order."""
    table = BindingTable()
    for setting in settings:
        name, value = parse_setting(setting)
        logger.debug("--set %s=%d", name, value)
        table.bind(name, value)
    return table
