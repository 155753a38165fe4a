"""Application engine for codebake.

Centralizes function application for the interpreter so the evaluator and
builtins such as `apply` and `bake` share one set of rules:
- Lambdas bind their parameters in a fresh child of their defining
  environment and evaluate the body there.
- Python callables registered in the environment (builtins and embedded
  operations) are invoked with the calling environment and the argument list.
"""

from typing import Callable

from codebake import LispValue, EvaluatorFn
from codebake.errors import CodebakeTypeError
from codebake.types.environment import Environment
from codebake.types.lambda_fn import Lambda


def apply_lambda(
    fn: Lambda,
    args: list[LispValue],
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply a Lambda to already-evaluated arguments.

    Arity must match the parameter list exactly; `Lambda.extend_env` raises
    CodebakeArityError otherwise.
    """
    new_env = fn.extend_env(list(args))
    return evaluate_fn(fn.body, new_env)


def apply(
    head: Lambda | Callable[[Environment, list[LispValue]], LispValue] | object,
    args: list[LispValue],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply either a Lambda or a Python callable; anything else is not callable."""
    if isinstance(head, Lambda):
        return apply_lambda(head, args, evaluate_fn)
    elif callable(head):
        return head(env, args)
    else:
        from codebake.printer import display
        raise CodebakeTypeError(
            f"expected first expression to be a function. got '{display(head)}'."
        )
