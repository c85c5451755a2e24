"""Errors raised by the binding table."""

from __future__ import annotations


class BindingError(Exception):
    """Base class for binding table errors."""


class UnboundVariable(BindingError, LookupError):
    """Raised when a variable is looked up but has no binding."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"variable {self.name!r} is not defined"
