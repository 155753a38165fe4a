"""Built-in functions for the codebake runtime environment.

This module defines arithmetic, equality, list processing, dish construction
and recipe helpers exposed to Lisp code, plus the `register` function that
installs them into a base environment.
"""
from __future__ import annotations

import sys

from codebake import LispValue
from codebake.errors import CodebakeArityError, CodebakeTypeError
from codebake.evaluation.apply import apply as apply_engine
from codebake.evaluation.evaluator import evaluate
from codebake.printer import display
from codebake.types.dish import Dish
from codebake.types.environment import Environment
from codebake.types.lambda_fn import Lambda
from codebake.types.symbol import NIL, Symbol


def ensure_exact_args(args: list[LispValue], n: int) -> None:
    if len(args) != n:
        raise CodebakeArityError(f"expected exactly {n} args. got {len(args)}.")


def ensure_at_least_args(args: list[LispValue], n: int) -> None:
    if len(args) < n:
        raise CodebakeArityError(f"expected at least {n} args. got {len(args)}.")


def _is_function(value: LispValue) -> bool:
    return isinstance(value, Lambda) or callable(value)


def _expect_list(value: LispValue) -> list:
    if not isinstance(value, list):
        raise CodebakeTypeError(f"expected a list. got '{display(value)}'.")
    return value


def _numbers(args: list[LispValue]) -> list[float]:
    for a in args:
        # bool is an int subclass but never a number here
        if not isinstance(a, float):
            raise CodebakeTypeError(f"expected a number. got '{display(a)}'.")
    return args


# -------------------------------
# Equality
# -------------------------------
def is_equal(a: LispValue, b: LispValue) -> bool:
    """Structural equality per variant.

    Dishes compare by success payload only, so a failed dish is unequal even
    to itself. Functions and lambdas compare by identity.
    """
    if isinstance(a, Dish) or isinstance(b, Dish):
        return isinstance(a, Dish) and isinstance(b, Dish) and a == b
    if type(a) is not type(b):
        return False
    if isinstance(a, list):
        return len(a) == len(b) and all(is_equal(x, y) for x, y in zip(a, b))
    if isinstance(a, Lambda) or callable(a):
        return a is b
    return a == b


def equals(env: Environment, args: list[LispValue]) -> bool:
    """Return true if every argument equals the first."""
    ensure_at_least_args(args, 1)
    first = args[0]
    return all(is_equal(first, other) for other in args[1:])


# -------------------------------
# Arithmetic
# -------------------------------
def add(env: Environment, args: list[LispValue]) -> float:
    """Return the sum of all arguments (0 for none)."""
    return float(sum(_numbers(args), 0.0))


def sub(env: Environment, args: list[LispValue]) -> float:
    """Subtract the sum of the remaining numbers from the first."""
    nums = _numbers(args)
    if not nums:
        raise CodebakeArityError("expected at least one number.")
    return nums[0] - sum(nums[1:], 0.0)


# -------------------------------
# Application
# -------------------------------
def apply(env: Environment, args: list[LispValue]) -> LispValue:
    """(apply f '(a b c)) calls f with the list elements as arguments."""
    ensure_exact_args(args, 2)
    fn, arg_list = args
    if not _is_function(fn):
        raise CodebakeTypeError("1st argument to 'apply' must be a function.")
    if not isinstance(arg_list, list):
        raise CodebakeTypeError("2nd argument to 'apply' must be a list.")
    return apply_engine(fn, list(arg_list), env, evaluate)


# -------------------------------
# List operations
# -------------------------------
def first(env: Environment, args: list[LispValue]) -> LispValue:
    """Head of a list, or the symbol nil when the list is empty."""
    ensure_exact_args(args, 1)
    items = _expect_list(args[0])
    return items[0] if items else NIL


def rest(env: Environment, args: list[LispValue]) -> list:
    ensure_exact_args(args, 1)
    return list(_expect_list(args[0])[1:])


def butlast(env: Environment, args: list[LispValue]) -> list:
    ensure_exact_args(args, 1)
    return list(_expect_list(args[0])[:-1])


def last(env: Environment, args: list[LispValue]) -> LispValue:
    ensure_exact_args(args, 1)
    items = _expect_list(args[0])
    if not items:
        raise CodebakeTypeError("empty list")
    return items[-1]


def cons(env: Environment, args: list[LispValue]) -> list:
    ensure_exact_args(args, 2)
    if not isinstance(args[1], list):
        raise CodebakeTypeError("expected 2nd argument to be a list.")
    return [args[0], *args[1]]


def is_empty(env: Environment, args: list[LispValue]) -> LispValue:
    """empty? for lists, strings and dishes; a failed dish is never empty."""
    ensure_exact_args(args, 1)
    value = args[0]
    match value:
        case list() | str():
            return len(value) == 0
        case Dish():
            return value.is_success and len(value.data.as_bytes()) == 0
    return NIL


# -------------------------------
# Dishes and recipes
# -------------------------------
def dish(env: Environment, args: list[LispValue]) -> Dish:
    """(dish "text") builds a fresh successful dish."""
    ensure_exact_args(args, 1)
    if not isinstance(args[0], str):
        raise CodebakeTypeError("unsupported expression type for Dish. (must be string)")
    return Dish.from_string(args[0])


def recipe(env: Environment, args: list[LispValue]) -> list:
    """(recipe step ...) collects operations into a list that `bake` can run."""
    ensure_at_least_args(args, 1)
    for step in args:
        if not _is_function(step):
            raise CodebakeTypeError(f"expected function. got '{display(step)}'.")
    return list(args)


def bake(env: Environment, args: list[LispValue]) -> Dish:
    """(bake recipe dish) applies every step to the dish in order."""
    ensure_exact_args(args, 2)
    steps, target = args
    if not isinstance(steps, list):
        raise CodebakeTypeError("expected list")
    if not isinstance(target, Dish):
        raise CodebakeTypeError("expected Dish")
    if not all(_is_function(step) for step in steps):
        raise CodebakeTypeError("recipe must be list of functions.")
    for step in steps:
        apply_engine(step, [target], env, evaluate)
    return target


def print_builtin(env: Environment, args: list[LispValue]) -> Symbol:
    """Print the first argument; a dish prints its bare payload or error text."""
    ensure_at_least_args(args, 1)
    value = args[0]
    if isinstance(value, Dish):
        text = str(value.data) if value.is_success else value.error.message
    else:
        text = display(value)
    sys.stdout.write(text + "\n")
    return NIL


def register(env: Environment) -> None:
    """Register all builtin functions into the given environment."""
    env.update(
        {
            Symbol("+"): add,
            Symbol("-"): sub,
            Symbol("="): equals,
            Symbol("apply"): apply,
            Symbol("first"): first,
            Symbol("rest"): rest,
            Symbol("butlast"): butlast,
            Symbol("last"): last,
            Symbol("empty?"): is_empty,
            Symbol("cons"): cons,
            Symbol("dish"): dish,
            Symbol("recipe"): recipe,
            Symbol("bake"): bake,
            Symbol("print"): print_builtin,
        }
    )
