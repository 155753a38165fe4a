"""Declarative operation descriptors and their validated argument bags.

An operation is described once, statically, by an OperationInfo: its name,
the ordered (name, ArgType) pairs it requires, and the transform that works
on a dish's payload. There are no optional or default arguments.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Union

from codebake.errors import DishError
from codebake.types.dish import Operation


class ArgType(Enum):
    INTEGER = "integer"
    STRING = "string"


OperationArg = Union[int, str]


class OperationArguments:
    """Immutable bag of converted argument values, keyed by argument name."""

    __slots__ = ("_values",)

    def __init__(self, values: Mapping[str, OperationArg] | None = None):
        self._values = MappingProxyType(dict(values or {}))

    def _get(self, name: str) -> OperationArg:
        try:
            return self._values[name]
        except KeyError:
            raise DishError(f"missing argument '{name}'") from None

    def get_integer(self, name: str) -> int:
        value = self._get(name)
        if not isinstance(value, int):
            raise DishError(f"expected integer, got {ArgType.STRING.value}")
        return value

    def get_string(self, name: str) -> str:
        value = self._get(name)
        if not isinstance(value, str):
            raise DishError(f"expected string, got {ArgType.INTEGER.value}")
        return value

    def __contains__(self, name: str) -> bool:
        return name in self._values

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"OperationArguments({dict(self._values)!r})"


EMPTY_ARGS = OperationArguments()


@dataclass(frozen=True)
class OperationInfo:
    name: str
    description: str
    category: str
    arguments: tuple[tuple[str, ArgType], ...]
    op: Operation

    @property
    def arity(self) -> int:
        return len(self.arguments)
