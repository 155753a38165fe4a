"""Textual rendering of codebake values.

`display` is what the read loop prints and what string-typed operation
arguments receive. With `readable=True` strings are re-quoted so the output
reads back as the same value.
"""

from __future__ import annotations

import math

from codebake import LispValue
from codebake.types.dish import Dish
from codebake.types.lambda_fn import Lambda
from codebake.types.symbol import Symbol


def display_number(n: float) -> str:
    if math.isnan(n):
        return "NaN"
    if math.isinf(n):
        return "inf" if n > 0 else "-inf"
    if n.is_integer() and abs(n) < 1e16:
        return str(int(n))
    return repr(n)


def display(value: LispValue, readable: bool = False) -> str:
    match value:
        case bool():
            return "true" if value else "false"
        case float() | int():
            return display_number(float(value))
        case str():
            return f'"{value}"' if readable else value
        case Symbol():
            return value.name
        case list():
            return "(" + " ".join(display(v, readable) for v in value) + ")"
        case Dish():
            return str(value)
        case Lambda():
            return "lambda function"
        case _ if callable(value):
            return "built-in function"
    return str(value)
