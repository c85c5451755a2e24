"""Explicit lookup results: Found or Unbound."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from logoparsing.bindings.errors import UnboundVariable


@dataclass(frozen=True)
class Found:
    """A name resolved to its bound value."""

    value: int

    def unwrap(self) -> int:
        return self.value


@dataclass(frozen=True)
class Unbound:
    """A name with no binding."""

    name: str

    def error(self) -> UnboundVariable:
        """Return the exception describing this missing binding."""
        return UnboundVariable(self.name)

    def unwrap(self) -> int:
        raise self.error()


Lookup = Union[Found, Unbound]
