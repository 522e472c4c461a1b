import logging

from paren import EvaluatorFn
from paren.errors import ParenArityError
from paren.types.environment import Environment
from paren.types.node import AstNode, IdentifierNode
from paren.types.value import Value

logger = logging.getLogger(__name__)


def define_form(
    tail: tuple[AstNode, ...],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Value:
    """
    (defvar name value)
    The name is taken structurally, so it may already be bound; the value is
    evaluated normally. A bound identifier in the value position counts with
    its spliced children, so `(defvar x pi 2)` has two values. Rebinding
    overwrites. Returns the bound value.
    """
    from paren.evaluation.evaluator import expand  # local import to avoid cycles

    if len(tail) != 1 or not isinstance(tail[0], IdentifierNode):
        raise ParenArityError("defvar requires a name and a value: (defvar name value)")

    name_node = tail[0]
    forms = list(expand(name_node.children, env))
    if len(forms) != 1:
        raise ParenArityError(
            f"defvar requires exactly 1 value for '{name_node.name}', got {len(forms)}"
        )
    value = evaluate_fn(forms[0], env)
    env.set(name_node.name, value)
    logger.debug("Bound %s -> %r", name_node.name, value)
    return value
