import pytest

from tinylisp.builtin.env_builtin import register
from tinylisp.interpreter import Interpreter
from tinylisp.types.environment import Environment


@pytest.fixture
def env():
    """Fresh environment with builtins loaded."""
    e = Environment()
    register(e)
    return e


@pytest.fixture
def interp(env):
    return Interpreter(env)
