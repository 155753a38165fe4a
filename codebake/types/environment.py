"""Runtime environment for codebake.

The Environment stores bindings of Symbols to evaluated values and supports
nested scopes via an `outer` link. Each frame owns its own mapping; lookups
walk outward, definitions only ever touch the frame they are made in.
"""

from __future__ import annotations

from typing import Optional

from codebake import LispValue
from codebake.errors import CodebakeTypeError, CodebakeUnboundSymbol
from codebake.types.symbol import Symbol


class Environment:
    """Hierarchical mapping from Symbols to values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, LispValue] = {}
        self.outer: Environment | None = outer

    def define(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` to `value` in this frame.

        Raises CodebakeTypeError if `name` is not a Symbol.
        """
        if not isinstance(name, Symbol):
            raise CodebakeTypeError(f"expected symbol. got '{name}'.")
        self.vars[name] = value

    def find(self, symbol: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `symbol`."""
        env: Optional[Environment] = self
        while env is not None:
            if symbol in env.vars:
                return env
            env = env.outer
        return None

    def lookup(self, name: Symbol) -> LispValue:
        """Look up the value bound to `name`, innermost frame first.

        Raises CodebakeUnboundSymbol if no frame binds it.
        """
        env = self.find(name)
        if env is None:
            raise CodebakeUnboundSymbol(f"unexpected symbol '{name}'.")
        return env.vars[name]

    def __contains__(self, name: Symbol) -> bool:
        return self.find(name) is not None

    def update(self, mapping: dict[Symbol, LispValue]) -> None:
        """Bulk-define a mapping of Symbol -> value in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def depth(self) -> int:
        """Number of frames between this one and the base environment."""
        n = 0
        env = self.outer
        while env is not None:
            n += 1
            env = env.outer
        return n

    def __repr__(self) -> str:
        return f"<Environment depth={self.depth()} names={len(self.vars)}>"
