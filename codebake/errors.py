class CodebakeError(Exception):
    """ Base class for all codebake language errors"""
    pass

class CodebakeSyntaxError(CodebakeError):
    """ Raised when the reader cannot tokenize or parse the input"""

class CodebakeUnboundSymbol(CodebakeError):
    """ Raised when a symbol is used before it is bound"""

class CodebakeArityError(CodebakeError):
    """ Raised when the number of arguments passed to a form or function is incorrect"""

class CodebakeTypeError(CodebakeError):
    """ Raised when an expression of the wrong kind is passed to a form or function"""

class DishError(Exception):
    """ Raised by an operation when it cannot transform a dish.

    Never escapes Dish.apply: it becomes the dish's sticky failure."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self):
        return f"dish error: {self.message}"
