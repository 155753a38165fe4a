"""Lambda function representation and argument binding for codebake."""

from __future__ import annotations

from codebake import SExpression, LispValue
from codebake.errors import CodebakeArityError, CodebakeTypeError
from codebake.types.environment import Environment
from codebake.types.symbol import Symbol


class Lambda:
    """A first-class lambda with a parameter list, a body and its defining env."""

    __slots__ = ("params", "body", "env")

    def __init__(self, params: SExpression, body: SExpression, env: Environment):
        self.params: SExpression = params
        self.body: SExpression = body
        self.env: Environment = env

    def __str__(self) -> str:
        return "lambda function"

    def __repr__(self) -> str:
        return f"Lambda({self.params!r}, {self.body!r})"

    def formals(self) -> list[Symbol]:
        """Return the parameter symbols, validating the parameter-list form."""
        if not isinstance(self.params, list):
            raise CodebakeTypeError(
                f"expected argument to be a list. got '{self.params}'."
            )
        for p in self.params:
            if not isinstance(p, Symbol):
                raise CodebakeTypeError(f"expected symbol. got '{p}'.")
        return self.params

    def extend_env(self, args: list[LispValue]) -> Environment:
        """
        Bind the given argument values to this lambda's parameters, in order,
        and return a fresh child of the defining environment for the body.
        """
        formals = self.formals()
        if len(formals) != len(args):
            raise CodebakeArityError(
                f"expected {len(formals)} arguments. got {len(args)}."
            )
        new_env = Environment(outer=self.env)
        for name, value in zip(formals, args):
            new_env.define(name, value)
        return new_env
