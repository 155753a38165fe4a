from codebake import EvaluatorFn
from codebake import SExpression, LispValue
from codebake.errors import CodebakeArityError, CodebakeTypeError
from codebake.types.environment import Environment
from codebake.types.lambda_fn import Lambda
from codebake.types.symbol import Symbol


def _expect_symbol(form: SExpression) -> Symbol:
    if not isinstance(form, Symbol):
        from codebake.printer import display
        raise CodebakeTypeError(f"expected symbol. got '{display(form)}'.")
    return form


def define_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (def name value)
    Binds in the innermost frame only and returns the name.
    """
    if len(tail) != 2:
        raise CodebakeArityError(f"def requires exactly 2 arguments. got {len(tail)}.")

    name = _expect_symbol(tail[0])
    env.define(name, evaluate_fn(tail[1], env))
    return name


def defn_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (defn name (params...) body)
    Shorthand for (def name (fn (params...) body)).
    """
    if len(tail) != 3:
        raise CodebakeArityError(f"defn requires exactly 3 arguments. got {len(tail)}.")

    name = _expect_symbol(tail[0])
    fn = Lambda(tail[1], tail[2], env)
    fn.formals()
    env.define(name, fn)
    return name
