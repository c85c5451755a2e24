"""Tests for the bindings formatter."""

from logoparsing.bindings import BindingTable
from logoparsing.formatter import format_binding, format_bindings


class TestFormatBindings:
    """Test ASCII table output."""

    def test_empty(self) -> None:
        assert format_bindings(BindingTable()) == "(no bindings)"

    def test_table_sorted_by_name(self) -> None:
        table = BindingTable()
        table.bind("size", 100)
        table.bind("angle", -90)
        assert format_bindings(table) == "\n".join(
            [
                "+-------+-------+",
                "| name  | value |",
                "+-------+-------+",
                "| angle |   -90 |",
                "| size  |   100 |",
                "+-------+-------+",
            ]
        )

    def test_plain_mapping(self) -> None:
        out = format_bindings({"x": 1})
        assert "| x    |     1 |" in out

    def test_format_binding(self) -> None:
        assert format_binding("x", 3) == "x = 3"
