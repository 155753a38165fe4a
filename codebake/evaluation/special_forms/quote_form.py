from codebake import SExpression, LispValue, EvaluatorFn
from codebake.errors import CodebakeArityError
from codebake.types.environment import Environment


def quote_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    if len(tail) != 1:
        raise CodebakeArityError(f"expected exactly 1 argument. got {len(tail)}.")
    return tail[0]
