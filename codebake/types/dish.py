"""Dish: the success/failure container threaded through a recipe.

A Dish holds either DishData (the payload, textual or binary) or a DishError.
`Dish.apply` is the only way operations touch a dish. Once a dish has failed
it stays failed: later operations are skipped and the first error is kept.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Optional, Union

from codebake.errors import CodebakeError, DishError

if TYPE_CHECKING:
    from codebake.types.operation import OperationArguments

logger = logging.getLogger(__name__)


@dataclass(eq=True)
class DishData:
    """Payload of a successful dish: `str` is textual data, `bytes` is binary data."""

    value: Union[str, bytes]

    @property
    def is_text(self) -> bool:
        return isinstance(self.value, str)

    def as_bytes(self) -> bytes:
        if isinstance(self.value, str):
            return self.value.encode("utf-8")
        return self.value

    def __str__(self) -> str:
        if isinstance(self.value, str):
            return self.value
        return self.value.decode("utf-8", errors="replace")


Operation = Callable[["OperationArguments", DishData], None]


class Dish:
    """Mutable, shareable handle on either a DishData or a DishError."""

    __slots__ = ("data", "error", "_borrowed")

    def __init__(self, data: Optional[DishData] = None, error: Optional[DishError] = None):
        if (data is None) == (error is None):
            raise ValueError("a dish holds exactly one of data or error")
        self.data: Optional[DishData] = data
        self.error: Optional[DishError] = error
        self._borrowed = False

    @classmethod
    def from_string(cls, text: str) -> Dish:
        return cls(data=DishData(text))

    @classmethod
    def from_bytes(cls, raw: bytes) -> Dish:
        return cls(data=DishData(bytes(raw)))

    @property
    def is_success(self) -> bool:
        return self.error is None

    def apply(self, op: Operation, args: OperationArguments) -> Dish:
        """Run `op` against the payload; a raised DishError fails the dish.

        No-op on a failed dish. Re-entering apply on the same dish while an
        operation is running raises CodebakeError.
        """
        if self.error is not None:
            return self
        if self._borrowed:
            raise CodebakeError("dish already borrowed")
        self._borrowed = True
        try:
            op(args, self.data)
        except DishError as e:
            logger.debug("dish failed in %s: %s", getattr(op, "__name__", op), e.message)
            self.data = None
            self.error = e
        finally:
            self._borrowed = False
        return self

    def __eq__(self, other: object) -> bool:
        # Only two successes compare, by payload; a failure is unequal to everything.
        if not isinstance(other, Dish):
            return NotImplemented
        if self.error is not None or other.error is not None:
            return False
        return self.data == other.data

    __hash__ = None

    def __str__(self) -> str:
        if self.error is not None:
            return f"error: {self.error}"
        return f"Dish({self.data})"

    def __repr__(self) -> str:
        if self.error is not None:
            return f"Dish(error={self.error.message!r})"
        return f"Dish({self.data.value!r})"
