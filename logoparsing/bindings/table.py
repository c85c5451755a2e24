"""BindingTable: stores named integer variables for the evaluator."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType

from logoparsing.bindings.errors import UnboundVariable
from logoparsing.bindings.result import Found, Lookup, Unbound

logger = logging.getLogger(__name__)


class BindingTable:
    """A mutable mapping of variable names to integer values.

    Constructed empty, or as an independent copy of another table. There is
    no way to remove a binding once made; rebinding overwrites.
    """

    def __init__(self, copy_of: BindingTable | None = None) -> None:
        if copy_of is None:
            self._bindings: dict[str, int] = {}
        else:
            self._bindings = copy_of.snapshot()
            logger.debug("copied binding table (%d entries)", len(self._bindings))

    def bind(self, name: str, value: int) -> None:
        """Bind a name to a value, overwriting any existing binding."""
        if not isinstance(name, str):
            raise TypeError(f"Variable name must be a string, got {type(name).__name__}")
        if not name:
            raise ValueError("Variable name must not be empty")
        # bool is an int subclass but not a valid value
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(
                f"Value of {name!r} must be an integer, got {type(value).__name__}"
            )
        value = int(value)
        logger.debug("bind %s = %d", name, value)
        self._bindings[name] = value

    def resolve(self, name: str) -> Lookup:
        """Look up a name without raising.

        Returns Found(value) when the name is bound, otherwise Unbound(name).
        """
        try:
            return Found(self._bindings[name])
        except KeyError:
            return Unbound(name)

    def lookup(self, name: str) -> int:
        """Look up a value by name.

        Raises UnboundVariable if the name is not bound.
        """
        if name not in self._bindings:
            raise UnboundVariable(name)
        return self._bindings[name]

    def entries(self) -> Mapping[str, int]:
        """Return a read-only live view of all bindings."""
        return MappingProxyType(self._bindings)

    def snapshot(self) -> dict[str, int]:
        """Return a copy of all bindings."""
        return dict(self._bindings)

    def copy(self) -> BindingTable:
        """Return an independent duplicate of this table."""
        return BindingTable(self)

    def names(self) -> list[str]:
        """Return all bound names, sorted."""
        return sorted(self._bindings.keys())

    def __contains__(self, name: object) -> bool:
        return name in self._bindings

    def __len__(self) -> int:
        return len(self._bindings)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BindingTable):
            return NotImplemented
        return self._bindings == other._bindings

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        parts = ", ".join(f"{k}={self._bindings[k]}" for k in self.names())
        return f"BindingTable({parts})"
