from codebake import EvaluatorFn
from codebake import SExpression, LispValue
from codebake.errors import CodebakeArityError, CodebakeTypeError
from codebake.types.environment import Environment


def if_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if not tail:
        raise CodebakeArityError("expected test expression. got nothing.")
    if len(tail) > 3:
        raise CodebakeArityError(f"if takes at most 3 forms. got {len(tail)}.")

    cond = evaluate_fn(tail[0], env)
    # No truthiness: the test must be a real boolean
    if not isinstance(cond, bool):
        from codebake.printer import display
        raise CodebakeTypeError(f"expected boolean expression. got '{display(tail[0])}'.")

    idx = 1 if cond else 2
    if idx >= len(tail):
        raise CodebakeArityError(f"expected branch. got '{idx}'.")
    return evaluate_fn(tail[idx], env)
