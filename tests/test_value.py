import pytest

from paren.errors import ParenRuntimeError, ParenTypeError
from paren.types.value import (
    FALSE,
    INT_MAX,
    INT_MIN,
    NONE,
    TRUE,
    Boolean,
    Float,
    Int,
    NoneValue,
    String,
    add,
    compare,
    demote,
    divide,
    int_divide,
    modulo,
    multiply,
    negate,
    power,
    promote,
    subtract,
    values_equal,
)


def _same(result, expected):
    """Equal value and same kind."""
    return type(result) is type(expected) and result == expected


# -------------------------------
# Promotion / demotion
# -------------------------------
def test_promote():
    assert _same(promote(Int(3)), Float(3.0))
    assert _same(promote(Float(3.5)), Float(3.5))
    assert _same(promote(TRUE), TRUE)


@pytest.mark.parametrize(
    "result,expected",
    [
        (5.0, Int(5)),
        (-2.0, Int(-2)),
        (0.0, Int(0)),
        (5.1, Float(5.1)),
        (1e300, Float(1e300)),
        (float("inf"), Float(float("inf"))),
    ],
)
def test_demote(result, expected):
    assert _same(demote(result), expected)


# -------------------------------
# Arithmetic
# -------------------------------
@pytest.mark.parametrize(
    "fn,left,right,expected",
    [
        (add, Int(1), Int(2), Int(3)),
        (add, Float(2.5), Float(2.5), Int(5)),
        (add, Float(2.5), Float(2.6), Float(5.1)),
        (add, Int(1), Float(0.5), Float(1.5)),
        (add, String("foo"), String("bar"), String("foobar")),
        (subtract, Int(10), Int(3), Int(7)),
        (subtract, Float(5.5), Float(0.5), Int(5)),
        (subtract, Int(1), Float(0.25), Float(0.75)),
        (multiply, Int(2), Int(3), Int(6)),
        (multiply, Int(2), Float(2.5), Int(5)),
        (multiply, Int(2), Float(2.1), Float(4.2)),
        (divide, Int(4), Int(2), Int(2)),
        (divide, Int(5), Int(2), Float(2.5)),
        (divide, Int(0), Int(2), Int(0)),
        (divide, Int(5), Int(-2), Float(-2.5)),
        (divide, Int(-5), Int(-2), Float(2.5)),
        (int_divide, Int(5), Int(2), Int(2)),
        (int_divide, Int(-5), Int(2), Int(-2)),
        (int_divide, Float(7.5), Int(2), Int(3)),
        (modulo, Int(5), Int(2), Int(1)),
        (modulo, Int(-2), Int(24), Int(22)),
        (modulo, Int(5), Int(-3), Int(-1)),
        (modulo, Float(5.5), Int(2), Float(1.5)),
        (modulo, Float(-2.0), Int(24), Int(22)),
        (power, Int(2), Int(3), Int(8)),
        (power, Int(2), Int(-1), Float(0.5)),
        (power, Int(16), Float(0.5), Int(4)),
        (power, Float(2.5), Int(2), Float(6.25)),
    ],
)
def test_arithmetic(fn, left, right, expected):
    assert _same(fn(left, right), expected)


def test_int_divide_always_returns_int():
    assert _same(int_divide(Float(4.0), Float(2.0)), Int(2))


@pytest.mark.parametrize("fn", [add, subtract, multiply, divide, int_divide, modulo, power])
@pytest.mark.parametrize(
    "left,right",
    [
        (TRUE, Int(1)),
        (Int(1), String("a")),
        (NONE, Float(1.0)),
    ],
)
def test_incompatible_kinds_fail(fn, left, right):
    with pytest.raises(ParenTypeError, match="Incompatible types"):
        fn(left, right)


@pytest.mark.parametrize("fn", [divide, int_divide, modulo])
def test_division_by_zero(fn):
    with pytest.raises(ParenRuntimeError, match="Division by zero"):
        fn(Int(1), Int(0))
    with pytest.raises(ParenRuntimeError, match="Division by zero"):
        fn(Float(1.5), Float(0.0))


def test_integer_overflow():
    with pytest.raises(ParenTypeError, match="overflow"):
        add(Int(INT_MAX), Int(1))
    with pytest.raises(ParenTypeError, match="overflow"):
        multiply(Int(INT_MAX), Int(2))
    with pytest.raises(ParenTypeError, match="overflow"):
        negate(Int(INT_MIN))


def test_power_errors():
    with pytest.raises(ParenTypeError, match="domain"):
        power(Int(-8), Float(0.5))
    with pytest.raises(ParenTypeError, match="overflow"):
        power(Float(10.0), Int(400))


def test_negate():
    assert _same(negate(Int(3)), Int(-3))
    assert _same(negate(Float(2.5)), Float(-2.5))
    assert _same(negate(TRUE), FALSE)
    assert _same(negate(FALSE), TRUE)
    with pytest.raises(ParenTypeError):
        negate(String("a"))


# -------------------------------
# Comparison and equality
# -------------------------------
@pytest.mark.parametrize(
    "left,right,expected",
    [
        (Int(1), Int(2), -1),
        (Int(2), Int(2), 0),
        (Int(3), Int(2), 1),
        (Int(1), Float(2.5), -1),
        (Float(2.0), Int(2), 0),
        (Float(-0.5), Float(-1.5), 1),
    ],
)
def test_compare(left, right, expected):
    assert compare(left, right) == expected


@pytest.mark.parametrize(
    "left,right",
    [(String("a"), Int(1)), (Int(1), TRUE), (NONE, NONE)],
)
def test_compare_requires_numbers(left, right):
    with pytest.raises(ParenTypeError, match="Incompatible types for comparison"):
        compare(left, right)


@pytest.mark.parametrize(
    "left,right,expected",
    [
        (Int(1), Int(1), True),
        (Int(1), Int(2), False),
        (Float(0.1 + 0.2), Float(0.3), True),
        (Float(0.3), Float(0.31), False),
        (Int(1), Float(1.0), False),
        (TRUE, Boolean(True), True),
        (TRUE, Int(1), False),
        (String("a"), String("a"), True),
        (String("a"), String("b"), False),
        (NONE, NoneValue(), True),
        (NONE, Int(0), False),
    ],
)
def test_values_equal(left, right, expected):
    assert values_equal(left, right) is expected
    assert (left == right) is expected


@pytest.mark.parametrize(
    "value,text",
    [
        (Int(3), "3"),
        (Int(-3), "-3"),
        (Float(2.5), "2.5"),
        (TRUE, "true"),
        (FALSE, "false"),
        (String("hi"), '"hi"'),
        (NONE, "null"),
    ],
)
def test_display(value, text):
    assert str(value) == text
