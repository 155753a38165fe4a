import pytest

from codebake.interpreter import Interpreter, default_env


@pytest.fixture
def interp():
    """Interpreter with builtins, operations and the packaged prelude."""
    return Interpreter()


@pytest.fixture
def env():
    """A fresh base environment without the prelude."""
    return default_env()
