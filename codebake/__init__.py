"""codebake: a small Lisp that bakes dishes through recipes of operations.

Code and values share one representation. A form read from source is the
same kind of Python value the evaluator returns: Symbol, float, bool, str,
list, Lambda, Dish, or a builtin callable taking (env, args).
"""

from typing import Any, Callable

# anything the reader produces or the evaluator returns
LispValue = Any
# a form as read, before evaluation
SExpression = LispValue

# evaluate(expr, env), handed to special forms and builtins that re-enter it
EvaluatorFn = Callable[..., LispValue]
