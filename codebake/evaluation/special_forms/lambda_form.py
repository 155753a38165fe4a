from codebake import EvaluatorFn
from codebake import SExpression, LispValue
from codebake.errors import CodebakeArityError
from codebake.types.environment import Environment
from codebake.types.lambda_fn import Lambda


def lambda_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    # (fn (params) body): exactly one body form, closes over the defining env.
    if len(tail) != 2:
        raise CodebakeArityError(
            "function definition must only have an argument list and a body."
        )

    fn = Lambda(tail[0], tail[1], env)
    # Reject malformed parameter lists at definition time
    fn.formals()
    return fn
