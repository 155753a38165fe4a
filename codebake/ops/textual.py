from __future__ import annotations

import numpy as np

from codebake.types.dish import DishData
from codebake.types.operation import ArgType, OperationArguments, OperationInfo


def rotate_letters(raw: bytes, n: int) -> bytes:
    """Shift ASCII letters by `n` places within their case; other bytes are kept."""
    n %= 26
    arr = np.frombuffer(raw, dtype=np.uint8).astype(np.int64)
    for base in (65, 97):
        mask = (arr >= base) & (arr < base + 26)
        arr[mask] = (arr[mask] - base + n) % 26 + base
    return arr.astype(np.uint8).tobytes()


def rot13(args: OperationArguments, data: DishData) -> None:
    n = args.get_integer("n")
    rotated = rotate_letters(data.as_bytes(), n)
    # only ASCII bytes move, so text stays valid UTF-8
    data.value = rotated.decode("utf-8") if data.is_text else rotated


OPINFO_ROT13 = OperationInfo(
    name="rot13",
    description="rotates characters in the input by the specified amount",
    category="Textual",
    arguments=(("n", ArgType.INTEGER),),
    op=rot13,
)


def reverse(args: OperationArguments, data: DishData) -> None:
    if data.is_text:
        data.value = data.value[::-1]
    else:
        data.value = np.frombuffer(data.value, dtype=np.uint8)[::-1].tobytes()


OPINFO_REVERSE = OperationInfo(
    name="reverse",
    description="reverses the input",
    category="Textual",
    arguments=(),
    op=reverse,
)
