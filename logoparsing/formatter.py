"""ASCII table formatter for displaying variable bindings."""

from __future__ import annotations

from collections.abc import Mapping

from logoparsing.bindings.table import BindingTable


def format_binding(name: str, value: int) -> str:
    """Format a single binding as ``name = value``."""
    return f"{name} = {value}"


def format_bindings(table: BindingTable | Mapping[str, int]) -> str:
    """Format bindings as a two-column ASCII table, sorted by name."""
    entries = table.entries() if isinstance(table, BindingTable) else table
    if not entries:
        return "(no bindings)"

    rows = [[name, str(entries[name])] for name in sorted(entries)]
    return _build_table(["name", "value"], rows)


def _build_table(headers: list[str], rows: list[list[str]]) -> str:
    """Build an ASCII table from headers and rows."""
    widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(cell))

    sep = "+-" + "-+-".join("-" * w for w in widths) + "-+"
    header = "| " + " | ".join(h.ljust(w) for h, w in zip(headers, widths)) + " |"

    lines = [sep, header, sep]
    for name, value in rows:
        # Right-align the value column so digits line up.
        lines.append(f"| {name.ljust(widths[0])} | {value.rjust(widths[1])} |")
    lines.append(sep)

    return "\n".join(lines)
