from __future__ import annotations
import logging
from typing import Callable, Literal

from codebake import SExpression, LispValue
from codebake.builtin.env_builtin import register
from codebake.builtin.operation_builtin import register as register_operations
from codebake.evaluation.evaluator import evaluate
from codebake.reader.parser import read, read_all
from codebake.types.environment import Environment

logger = logging.getLogger(__name__)


def default_env() -> Environment:
    """A base environment holding the builtins and every operation, no prelude."""
    env = Environment()
    register(env)
    register_operations(env)
    return env


class Interpreter:
    """
    Orchestrates reading and evaluating codebake code.
    Keeps one base Environment alive across calls so definitions persist.
    """

    def __init__(
        self,
        eval_fn: Callable[[SExpression, Environment], LispValue] | None = None,
        prelude: str | None | Literal['auto'] = 'auto',
    ):
        self.eval_fn = eval_fn or evaluate
        self.env: Environment = default_env()

        if prelude is None:
            pass  # explicit: no prelude
        elif prelude == 'auto':
            # Lazy import keeps config out of the import path of the core
            from codebake.modules.prelude_loader import load_prelude
            load_prelude(self)
        elif prelude:
            self.eval_prelude(prelude)

    def eval_prelude(self, code: str) -> None:
        for expr in read_all(code):
            self.eval_fn(expr, self.env)

    def parse_eval(self, code: str) -> LispValue:
        """Evaluate exactly one top-level form."""
        logger.debug("evaluating %r", code)
        return self.eval_fn(read(code), self.env)

    def eval(self, code: str) -> LispValue | None:
        """Evaluate every top-level form in `code`; return the last result."""
        result = None
        for expr in read_all(code):
            result = self.eval_fn(expr, self.env)
        return result
