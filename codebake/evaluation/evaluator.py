"""Core evaluator for the codebake interpreter.

Special forms are dispatched on the unevaluated head symbol before ordinary
function application, so they behave as reserved words.
"""

from __future__ import annotations

from codebake import SExpression, LispValue
from codebake.errors import CodebakeError, CodebakeTypeError
from codebake.evaluation.apply import apply
from codebake.evaluation.special_forms import SPECIAL_FORMS
from codebake.types.environment import Environment
from codebake.types.lambda_fn import Lambda
from codebake.types.symbol import Symbol


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    match expr:
        case Symbol():
            return env.lookup(expr)

        case []:
            raise CodebakeError("expected non-empty list")

        case [head, *tail]:
            if isinstance(head, Symbol) and head in SPECIAL_FORMS:
                return SPECIAL_FORMS[head](tail, env, evaluate)
            fn = evaluate(head, env)
            args = [evaluate(arg, env) for arg in tail]
            return apply(fn, args, env, evaluate)

        case Lambda():
            raise CodebakeTypeError("cannot eval lambda function.")

        case _ if callable(expr):
            raise CodebakeTypeError("cannot eval function.")

    # --- numbers, booleans, strings and dishes evaluate to themselves ---
    return expr
