"""Binding table: named integer variables."""

from logoparsing.bindings.errors import BindingError, UnboundVariable
from logoparsing.bindings.result import Found, Lookup, Unbound
from logoparsing.bindings.table import BindingTable

__all__ = [
    "BindingError",
    "BindingTable",
    "Found",
    "Lookup",
    "Unbound",
    "UnboundVariable",
]
