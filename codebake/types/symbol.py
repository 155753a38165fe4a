"""Symbols name bindings in an Environment and the callables of a recipe."""

from __future__ import annotations

import sys


class Symbol:
    """A name such as `rot13`, `empty?` or `-`.

    Names are interned, so two symbols spelled alike share one string and
    compare and hash by that string.
    """

    __slots__ = ("name",)

    def __init__(self, name: str):
        if not name:
            raise ValueError("symbol name must not be empty")
        self.name = sys.intern(name)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Symbol) and self.name is other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __repr__(self) -> str:
        return f"Symbol({self.name!r})"

    def __str__(self) -> str:
        return self.name


# returned by `first` on an empty list, `print` and `empty?` on other values
NIL = Symbol("nil")
