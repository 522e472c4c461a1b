"""Core evaluator for the Paren interpreter.

Reduces a parsed tree to a Value. Identifier substitution is an explicit,
iterative expansion step (`expand`) rather than recursion on the substituted
node: a bound identifier is replaced in place by a literal of its value
followed by its own children, and that splice happens lazily while the
enclosing form walks its operands left to right.
"""

from __future__ import annotations

from typing import Iterable, Iterator, assert_never

from paren.errors import ParenNotImplementedError, ParenUnboundSymbol
from paren.evaluation.operators import OPERATORS
from paren.evaluation.special_forms import SPECIAL_FORMS
from paren.types.environment import Environment
from paren.types.node import (
    AstNode,
    IdentifierNode,
    LiteralNode,
    OperatorNode,
    QuoteNode,
    RootNode,
)
from paren.types.value import NONE, Value


def expand(nodes: Iterable[AstNode], env: Environment) -> Iterator[AstNode]:
    """Yield `nodes` with every bound identifier spliced out into its value and children.

    Uses an explicit stack of child iterators, so long substitution chains do
    not grow the Python call stack. An unbound identifier is passed through only
    when it names a special form.
    """
    pending: list[Iterator[AstNode]] = [iter(nodes)]
    while pending:
        node = next(pending[-1], None)
        if node is None:
            pending.pop()
            continue
        if isinstance(node, IdentifierNode):
            value = env.get(node.name)
            if value is not None:
                yield LiteralNode(value)
                if node.children:
                    pending.append(iter(node.children))
                continue
            if node.name not in SPECIAL_FORMS:
                raise ParenUnboundSymbol(
                    f"Identifier '{node.name}' is not bound (not implemented)"
                )
        yield node


def evaluate_forms(nodes: Iterable[AstNode], env: Environment) -> Value:
    """Evaluate forms in order and return the last value (NONE if there are none)."""
    result: Value = NONE
    for form in expand(nodes, env):
        result = evaluate(form, env)
    return result


def evaluate(node: AstNode, env: Environment) -> Value:
    """Reduce `node` to a Value in `env`; the first failure aborts evaluation."""
    match node:
        case LiteralNode():
            return node.value
        case OperatorNode():
            return OPERATORS[node.op](expand(node.children, env), env, evaluate)
        case IdentifierNode():
            if node.name in SPECIAL_FORMS and node.name not in env:
                return SPECIAL_FORMS[node.name](node.children, env, evaluate)
            return evaluate_forms([node], env)
        case RootNode():
            return evaluate_forms(node.children, env)
        case QuoteNode():
            raise ParenNotImplementedError("Quoted expressions cannot be evaluated")
        case _:
            assert_never(node)
