import pytest

from paren.builtin.env_builtin import register
from paren.interpreter import Interpreter, eval_with_env
from paren.types.environment import Environment


@pytest.fixture
def env():
    """Fresh environment with builtins loaded."""
    e = Environment()
    register(e)
    return e


@pytest.fixture
def interp():
    """A session whose environment persists across eval calls."""
    return Interpreter()


@pytest.fixture
def run(env):
    """Evaluate source text against the test's environment."""
    def _run(source):
        return eval_with_env(source, env)
    return _run
