"""Reductions for the variadic operators.

Each reduction receives its operands as a lazy iterator of (already expanded)
child nodes and evaluates them left to right, so comparisons and equality can
stop at the first failing operand without touching the rest.
"""
from __future__ import annotations

from itertools import combinations, pairwise
from typing import Callable, Iterator

from paren import EvaluatorFn
from paren.errors import ParenArityError
from paren.types.environment import Environment
from paren.types.node import AstNode
from paren.types.operator import Operator
from paren.types.value import (
    FALSE,
    TRUE,
    Boolean,
    Int,
    String,
    Value,
    add,
    compare,
    divide,
    int_divide,
    modulo,
    multiply,
    negate,
    power,
    subtract,
    values_equal,
)

Reduction = Callable[[Iterator[AstNode], Environment, EvaluatorFn], Value]


def _values(op: Operator, operands: Iterator[AstNode], env: Environment, evaluate_fn: EvaluatorFn) -> Iterator[Value]:
    """Evaluate operands on demand; the parser guarantees at least one."""
    seen = False
    for form in operands:
        seen = True
        yield evaluate_fn(form, env)
    if not seen:
        raise ParenArityError(f"'{op}' requires at least 1 operand")


# -------------------------------
# Arithmetic
# -------------------------------
def plus(operands: Iterator[AstNode], env: Environment, evaluate_fn: EvaluatorFn) -> Value:
    """Sum of all operands starting from Int(0); strings concatenate from ""."""
    values = _values(Operator.PLUS, operands, env, evaluate_fn)
    first = next(values)
    result = add(String("") if isinstance(first, String) else Int(0), first)
    for value in values:
        result = add(result, value)
    return result


def mul(operands: Iterator[AstNode], env: Environment, evaluate_fn: EvaluatorFn) -> Value:
    """Product of all operands starting from Int(1)."""
    result: Value = Int(1)
    for value in _values(Operator.MUL, operands, env, evaluate_fn):
        result = multiply(result, value)
    return result


def minus(operands: Iterator[AstNode], env: Environment, evaluate_fn: EvaluatorFn) -> Value:
    """Subtract every later operand from the first; a single operand is negated."""
    values = _values(Operator.MINUS, operands, env, evaluate_fn)
    result = next(values)
    unary = True
    for value in values:
        unary = False
        result = subtract(result, value)
    return negate(result) if unary else result


def _left_fold(op: Operator, combine: Callable[[Value, Value], Value]) -> Reduction:
    def reduction(operands: Iterator[AstNode], env: Environment, evaluate_fn: EvaluatorFn) -> Value:
        values = _values(op, operands, env, evaluate_fn)
        result = next(values)
        for value in values:
            result = combine(result, value)
        return result

    reduction.__name__ = combine.__name__
    reduction.__doc__ = f"Left fold of '{op}' over the operands."
    return reduction


# -------------------------------
# Equality and ordering
# -------------------------------
def eq(operands: Iterator[AstNode], env: Environment, evaluate_fn: EvaluatorFn) -> Boolean:
    """True if every operand equals the first."""
    values = _values(Operator.EQ, operands, env, evaluate_fn)
    reference = next(values)
    for value in values:
        if not values_equal(reference, value):
            return FALSE
    return TRUE


def neq(operands: Iterator[AstNode], env: Environment, evaluate_fn: EvaluatorFn) -> Boolean:
    """True only if all operands are pairwise distinct."""
    values = list(_values(Operator.NEQ, operands, env, evaluate_fn))
    for a, b in combinations(values, 2):
        if values_equal(a, b):
            return FALSE
    return TRUE


def _chain(op: Operator, holds: Callable[[int], bool]) -> Reduction:
    def reduction(operands: Iterator[AstNode], env: Environment, evaluate_fn: EvaluatorFn) -> Boolean:
        values = _values(op, operands, env, evaluate_fn)
        for left, right in pairwise(values):
            if not holds(compare(left, right)):
                return FALSE
        return TRUE

    reduction.__name__ = op.name.lower()
    reduction.__doc__ = f"Chainable '{op}': holds for every adjacent pair of operands."
    return reduction


OPERATORS: dict[Operator, Reduction] = {
    Operator.PLUS: plus,
    Operator.MINUS: minus,
    Operator.MUL: mul,
    Operator.DIV: _left_fold(Operator.DIV, divide),
    Operator.INT_DIV: _left_fold(Operator.INT_DIV, int_divide),
    Operator.MODULO: _left_fold(Operator.MODULO, modulo),
    Operator.POWER: _left_fold(Operator.POWER, power),
    Operator.EQ: eq,
    Operator.NEQ: neq,
    Operator.LT: _chain(Operator.LT, lambda c: c < 0),
    Operator.LEQ: _chain(Operator.LEQ, lambda c: c <= 0),
    Operator.GT: _chain(Operator.GT, lambda c: c > 0),
    Operator.GEQ: _chain(Operator.GEQ, lambda c: c >= 0),
}
