"""Built-in bindings for the Paren runtime environment."""
from __future__ import annotations

from paren.types.environment import Environment
from paren.types.value import Float

BUILTIN_CONSTANTS = {
    "pi": Float(3.14),
}


def register(env: Environment) -> None:
    """Register all builtin constants into the given environment."""
    env.update(BUILTIN_CONSTANTS)
