import pytest

from paren.errors import (
    ParenArityError,
    ParenNotImplementedError,
    ParenUnboundSymbol,
)
from paren.evaluation.operators import OPERATORS
from paren.evaluation.special_forms import SPECIAL_FORMS
from paren.interpreter import eval_source
from paren.types.operator import Operator
from paren.types.value import NONE, TRUE, Float, Int, String


# ------------------ Builtins ------------------

def test_pi_is_bound():
    assert eval_source("pi") == Float(3.14)
    assert eval_source("(pi)") == Float(3.14)


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+ pi 1)", 4.14),
        ("(* pi 2)", 6.28),
        ("(+ pi (* 2 2))", 7.14),
    ],
)
def test_pi_in_arithmetic(source, expected):
    result = eval_source(source)
    assert isinstance(result, Float)
    assert result.value == pytest.approx(expected)


# ------------------ defvar / define ------------------

def test_defvar_returns_bound_value(run, env):
    assert run("(defvar x 2)") == Int(2)
    assert env.get("x") == Int(2)


def test_define_is_an_alias(run, env):
    assert run("(define y (+ 1 2))") == Int(3)
    assert env.get("y") == Int(3)


def test_definition_visible_to_later_forms():
    assert eval_source("(defvar x 2) (* x 3)") == Int(6)


def test_definition_visible_later_in_same_form():
    # z is bound by the time the operand walk reaches it
    assert eval_source("(+ 1 (defvar z 2) z)") == Int(5)


def test_rebinding_overwrites(run):
    assert run("(defvar x 1) (defvar x 5) (x)") == Int(5)


def test_bound_name_is_not_substituted_in_defvar(run, env):
    run("(defvar x 1)")
    run("(defvar x (+ x 1))")
    assert env.get("x") == Int(2)


def test_binding_a_special_form_name_shadows_it(run):
    assert run("(defvar defvar 3) (+ defvar 1)") == Int(4)


@pytest.mark.parametrize(
    "source",
    [
        "(defvar)",
        "(defvar x)",
        "(defvar x 1 2)",
        "(defvar 1 2)",
        '(define "x" 1)',
        "(defvar x pi 2)",
        "(defvar x pi 2) (x)",
        "(define y 1 pi)",
    ],
)
def test_malformed_definition(source):
    with pytest.raises(ParenArityError):
        eval_source(source)


def test_malformed_definition_leaves_name_unbound(env, run):
    with pytest.raises(ParenArityError, match="got 2"):
        run("(defvar x pi 2)")
    assert "x" not in env


def test_bound_identifier_as_sole_value(run):
    assert run("(defvar x pi)") == Float(3.14)


def test_special_forms_registry():
    assert set(SPECIAL_FORMS) == {"defvar", "define"}
    assert SPECIAL_FORMS["defvar"] is SPECIAL_FORMS["define"]


# ------------------ Sessions ------------------

def test_interpreter_keeps_definitions(interp):
    assert interp.eval("(defvar y 10)") == Int(10)
    assert interp.eval("(* y 2)") == Int(20)
    assert "y" in interp.env


def test_fresh_evaluation_does_not_leak():
    eval_source("(defvar leaked 1)")
    with pytest.raises(ParenUnboundSymbol):
        eval_source("(leaked)")


# ------------------ Identifiers ------------------

@pytest.mark.parametrize("source", ["foo", "(foo)", "(+ 1 foo)", "(* 2 (- 3 bar))"])
def test_unbound_identifier(source):
    with pytest.raises(ParenUnboundSymbol, match="is not bound"):
        eval_source(source)


def test_unbound_identifier_reports_its_name():
    with pytest.raises(ParenUnboundSymbol, match="'missing-name'"):
        eval_source("(+ 1 missing-name)")


def test_long_identifier_chain(run):
    # each x nests the rest of the group as its children
    run("(defvar x 1)")
    source = "(+ " + " ".join(["x"] * 200) + ")"
    assert run(source) == Int(200)


# ------------------ Program shape ------------------

@pytest.mark.parametrize("source", ["", "   ", "()", "(())"])
def test_empty_program_evaluates_to_none(source):
    assert eval_source(source) is NONE


def test_last_top_level_form_wins():
    assert eval_source("(1) (2) (+ 1 2)") == Int(3)


def test_multi_line_program():
    source = "(defvar a 4)\n(defvar b 6)\n(* a b)"
    assert eval_source(source) == Int(24)


def test_string_literal_displays_quoted():
    result = eval_source('("hello")')
    assert result == String("hello")
    assert str(result) == '"hello"'


def test_unary_minus_negates_boolean():
    assert eval_source("(- (= 1 2))") == TRUE


@pytest.mark.parametrize("source", ["'(+ 1 2)", "(+ 1 '(2))"])
def test_quote_is_not_evaluable(source):
    with pytest.raises(ParenNotImplementedError):
        eval_source(source)


def test_every_operator_has_a_reduction():
    assert set(OPERATORS) == set(Operator)
