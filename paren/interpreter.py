from __future__ import annotations

from paren.builtin.env_builtin import register
from paren.evaluation.evaluator import evaluate
from paren.reader.lexer import lex
from paren.reader.parser import parse
from paren.types.environment import Environment
from paren.types.node import RootNode
from paren.types.value import Value


def read(source: str) -> RootNode:
    """Tokenize and parse `source` into a tree; raises on the first fault."""
    return parse(lex(source))


def eval_with_env(source: str, env: Environment) -> Value:
    """Run the whole pipeline on `source` against an existing environment."""
    return evaluate(read(source), env)


def eval_source(source: str) -> Value:
    """Evaluate `source` in a fresh environment holding only the builtins."""
    env = Environment()
    register(env)
    return eval_with_env(source, env)


class Interpreter:
    """
    A session: one Environment that persists across `eval` calls, so
    definitions made by one input are visible to the next.
    """

    def __init__(self, env: Environment | None = None):
        if env is None:
            env = Environment()
            register(env)
        self.env: Environment = env

    def eval(self, code: str) -> Value:
        return eval_with_env(code, self.env)
