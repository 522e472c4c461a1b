"""Runtime values for Paren and the numeric model that combines them.

A Value is one of a closed set of immutable scalars:

    - Int       -> 64-bit signed integer
    - Float     -> 64-bit IEEE754 float
    - Boolean   -> true / false
    - String    -> text
    - NoneValue -> the `null` sentinel (the result of an empty program)

Arithmetic follows two rules that every operator shares:

    - promotion: an Int combined with a Float is computed in floating point;
    - demotion: a floating point result whose fractional part is exactly zero
      is turned back into an Int (as long as it fits in 64 bits).

Int (op) Int stays in integer arithmetic for `+`, `-`, `*` and `%`; `/`, `//`
and `^` always go through floating point first.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Union, assert_never

import numpy as np

from paren.errors import ParenRuntimeError, ParenTypeError


INT_MIN = int(np.iinfo(np.int64).min)
INT_MAX = int(np.iinfo(np.int64).max)
FLOAT_EPSILON = float(np.finfo(np.float64).eps)


class _Scalar:
    __slots__ = ()

    def __eq__(self, other) -> bool:
        if not isinstance(other, _Scalar):
            return NotImplemented
        return values_equal(self, other)

    # Float equality is tolerant, so values cannot be hashed consistently
    __hash__ = None

    def __str__(self) -> str:
        return display(self)


@dataclass(frozen=True, eq=False, repr=False, slots=True)
class Int(_Scalar):
    value: int

    def __repr__(self):
        return f"Int({self.value})"


@dataclass(frozen=True, eq=False, repr=False, slots=True)
class Float(_Scalar):
    value: float

    def __repr__(self):
        return f"Float({self.value!r})"


@dataclass(frozen=True, eq=False, repr=False, slots=True)
class Boolean(_Scalar):
    value: bool

    def __repr__(self):
        return f"Boolean({self.value})"


@dataclass(frozen=True, eq=False, repr=False, slots=True)
class String(_Scalar):
    value: str

    def __repr__(self):
        return f"String({self.value!r})"


@dataclass(frozen=True, eq=False, repr=False, slots=True)
class NoneValue(_Scalar):
    def __repr__(self):
        return "NoneValue"


NONE = NoneValue()
TRUE = Boolean(True)
FALSE = Boolean(False)

Value = Union[Int, Float, Boolean, String, NoneValue]


# -------------------------------
# Helpers
# -------------------------------
def kind_name(value: Value) -> str:
    return type(value).__name__


def is_numeric(value: Value) -> bool:
    return isinstance(value, (Int, Float))


def checked_int(n: int) -> Int:
    """Wrap `n` as an Int; fails if it does not fit in a signed 64-bit integer."""
    if not INT_MIN <= n <= INT_MAX:
        raise ParenTypeError(f"Integer overflow: {n} does not fit in 64 bits")
    return Int(n)


def promote(value: Value) -> Value:
    """Widen an Int to a Float; every other kind is returned unchanged."""
    match value:
        case Int(v):
            return Float(float(v))
    return value


def demote(result: float) -> Value:
    """Narrow a float result to an Int when its fractional part is exactly zero."""
    if result.is_integer() and INT_MIN <= result <= INT_MAX:
        return Int(int(result))
    return Float(result)


def _float_operands(left: Value, right: Value, op: str) -> tuple[float, float]:
    if not (is_numeric(left) and is_numeric(right)):
        raise ParenTypeError(
            f"Incompatible types for '{op}': {left!r} and {right!r}"
        )
    return promote(left).value, promote(right).value


def _check_divisor(divisor: float, op: str) -> None:
    if divisor == 0:
        raise ParenRuntimeError(f"Division by zero in '{op}'")


# -------------------------------
# Arithmetic
# -------------------------------
def add(left: Value, right: Value) -> Value:
    match left, right:
        case Int(l), Int(r):
            return checked_int(l + r)
        case String(l), String(r):
            return String(l + r)
    l, r = _float_operands(left, right, "+")
    return demote(l + r)


def subtract(left: Value, right: Value) -> Value:
    match left, right:
        case Int(l), Int(r):
            return checked_int(l - r)
    l, r = _float_operands(left, right, "-")
    return demote(l - r)


def multiply(left: Value, right: Value) -> Value:
    match left, right:
        case Int(l), Int(r):
            return checked_int(l * r)
    l, r = _float_operands(left, right, "*")
    return demote(l * r)


def divide(left: Value, right: Value) -> Value:
    """Floating point quotient, demoted: 4/2 -> Int(2), 5/2 -> Float(2.5)."""
    l, r = _float_operands(left, right, "/")
    _check_divisor(r, "/")
    return demote(l / r)


def int_divide(left: Value, right: Value) -> Int:
    """Floating point quotient truncated toward zero; always an Int."""
    l, r = _float_operands(left, right, "//")
    _check_divisor(r, "//")
    quotient = l / r
    if not math.isfinite(quotient):
        raise ParenTypeError(f"Integer overflow: {quotient} has no integer part")
    return checked_int(math.trunc(quotient))


def modulo(left: Value, right: Value) -> Value:
    """Modulo taking the sign of the divisor: ((l mod r) + r) mod r."""
    match left, right:
        case Int(l), Int(r):
            _check_divisor(r, "%")
            # Python's % on ints already rounds toward negative infinity
            return checked_int(l % r)
    l, r = _float_operands(left, right, "%")
    _check_divisor(r, "%")
    return demote(math.fmod(math.fmod(l, r) + r, r))


def power(left: Value, right: Value) -> Value:
    l, r = _float_operands(left, right, "^")
    try:
        result = math.pow(l, r)
    except ValueError:
        raise ParenTypeError(f"Math domain error: {left} ^ {right}")
    except OverflowError:
        raise ParenTypeError(f"Numeric overflow: {left} ^ {right}")
    return demote(result)


def negate(value: Value) -> Value:
    """Unary minus: negates a number or flips a Boolean."""
    match value:
        case Int(v):
            return checked_int(-v)
        case Float(v):
            return Float(-v)
        case Boolean(v):
            return Boolean(not v)
    raise ParenTypeError(f"Cannot negate {value!r}")


# -------------------------------
# Comparison and equality
# -------------------------------
def compare(left: Value, right: Value) -> int:
    """Return -1, 0 or 1 ordering two numeric values; fails on any other kind."""
    if not (is_numeric(left) and is_numeric(right)):
        raise ParenTypeError(
            f"Incompatible types for comparison: {left!r} and {right!r}"
        )
    l, r = left.value, right.value
    return (l > r) - (l < r)


def values_equal(left: Value, right: Value) -> bool:
    """Equality never fails: differing kinds are unequal, floats use an epsilon."""
    match left, right:
        case Int(l), Int(r):
            return l == r
        case Float(l), Float(r):
            return l == r or abs(l - r) < FLOAT_EPSILON
        case Boolean(l), Boolean(r):
            return l == r
        case String(l), String(r):
            return l == r
        case NoneValue(), NoneValue():
            return True
    return False


def display(value: Value) -> str:
    match value:
        case Int(v):
            return str(v)
        case Float(v):
            return repr(v)
        case Boolean(v):
            return "true" if v else "false"
        case String(v):
            return f'"{v}"'
        case NoneValue():
            return "null"
        case _:
            assert_never(value)
