"""Embedding of dish operations into the codebake environment.

Every OperationInfo becomes a Python callable bound under the operation's
name. Operations without arguments are applied directly:

    (reverse some-dish)

Operations with arguments are curried. The first call validates and
converts the arguments and returns a one-argument function that applies the
operation to a dish, so a configured step is a value you can store:

    ((rot13 13) some-dish)
    (bake (recipe (rot13 13) reverse) some-dish)

In both cases the dish passed in is mutated and returned, not copied.
"""
from __future__ import annotations

import logging
import math
from typing import Callable, Iterable

from codebake import LispValue
from codebake.builtin.env_builtin import ensure_exact_args
from codebake.errors import CodebakeArityError, CodebakeError, CodebakeTypeError
from codebake.ops import OPERATIONS
from codebake.printer import display
from codebake.types.dish import Dish
from codebake.types.environment import Environment
from codebake.types.lambda_fn import Lambda
from codebake.types.operation import (
    EMPTY_ARGS,
    ArgType,
    OperationArg,
    OperationArguments,
    OperationInfo,
)
from codebake.types.symbol import Symbol

logger = logging.getLogger(__name__)

Builtin = Callable[[Environment, list[LispValue]], LispValue]


def _apply_to_dish(info: OperationInfo, bag: OperationArguments, args: list[LispValue]) -> Dish:
    ensure_exact_args(args, 1)
    target = args[0]
    if not isinstance(target, Dish):
        raise CodebakeTypeError(f"1st argument to '{info.name}' must be a Dish")
    return target.apply(info.op, bag)


def parse_arg(typ: ArgType, expr: LispValue) -> OperationArg:
    """Convert one evaluated expression to the declared argument type.

    Integers must come from numbers and are truncated toward zero. Strings
    accept any value that has a textual form; functions do not.
    """
    if typ is ArgType.INTEGER:
        if not isinstance(expr, float) or not math.isfinite(expr):
            raise CodebakeTypeError(f"expected an integer. got {display(expr)}.")
        return int(expr)
    if isinstance(expr, Lambda) or callable(expr):
        raise CodebakeTypeError(f"expected a string. got {display(expr)}.")
    return display(expr)


def parse_args(info: OperationInfo, exprs: list[LispValue]) -> OperationArguments:
    if info.arity != len(exprs):
        raise CodebakeArityError(
            f"expected exactly {info.arity} arguments. got {len(exprs)}."
        )
    return OperationArguments(
        {name: parse_arg(typ, expr) for (name, typ), expr in zip(info.arguments, exprs)}
    )


def embed_operation(info: OperationInfo) -> Builtin:
    """Build the callable that exposes `info` to Lisp code."""
    if info.arity == 0:
        def operation(env: Environment, args: list[LispValue]) -> Dish:
            return _apply_to_dish(info, EMPTY_ARGS, args)
    else:
        def operation(env: Environment, args: list[LispValue]) -> Builtin:
            bag = parse_args(info, args)

            def configured(env: Environment, args: list[LispValue]) -> Dish:
                return _apply_to_dish(info, bag, args)

            configured.__name__ = f"{info.name}*"
            return configured

    operation.__name__ = info.name
    operation.__doc__ = info.description
    return operation


def register(env: Environment, operations: Iterable[OperationInfo] = OPERATIONS) -> None:
    """Install every operation under its declared name."""
    seen: set[str] = set()
    for info in operations:
        if info.name in seen:
            raise CodebakeError(f"duplicate operation name '{info.name}'")
        seen.add(info.name)
        env.define(Symbol(info.name), embed_operation(info))
        logger.debug("embedded operation %s (%d args)", info.name, info.arity)
