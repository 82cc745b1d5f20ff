from __future__ import annotations

import pytest

from responder.arithmetic import ExpressionError, evaluate, extract_expression, format_number


@pytest.mark.parametrize("expression,expected", [
    ("1 + 2 * 3", 7),
    ("(1 + 2) * 3", 9),
    ("10 / 4", 2.5),
    ("8 - 3 - 2", 3),
    ("16 / 4 / 2", 2),
    ("-3 + 5", 2),
    ("2 * -3", -6),
    ("--2", 2),
    (".5 + .5", 1),
    ("1.5*2", 3),
    ("((2))", 2),
])
def test_evaluate(expression, expected):
    assert evaluate(expression) == expected


def test_integral_results_are_ints():
    assert isinstance(evaluate("4/2"), int)
    assert isinstance(evaluate("5/2"), float)


@pytest.mark.parametrize("expression", [
    "",
    "   ",
    "1 +",
    "(1 + 2",
    "1 + 2)",
    "1 / 0",
    "2 ** 3",
    "1 2",
    "1..2",
    "import os",
    "()",
])
def test_invalid_expressions_raise(expression):
    with pytest.raises(ExpressionError):
        evaluate(expression)


def test_expression_error_is_value_error():
    assert issubclass(ExpressionError, ValueError)


def test_format_number():
    assert format_number(3) == "3"
    assert format_number(2.0) == "2"
    assert format_number(2.5) == "2.5"
    assert format_number(evaluate("0.1 + 0.2")) == "0.30000000000000004"


def test_extract_expression():
    assert extract_expression("what is 2 + 2?") == "2 + 2"
    assert extract_expression("what's 3.5 * 2") == "3.5 * 2"
    assert extract_expression("hello there") is None
    assert extract_expression("") is None


def test_long_sign_runs_are_folded():
    assert evaluate("-" * 3000 + "1") == 1
    assert evaluate("-" * 3001 + "1") == -1
    assert evaluate("2 * +-+3") == -6


def test_nesting_within_limit():
    assert evaluate("(" * 50 + "7" + ")" * 50) == 7


def test_deep_nesting_is_an_expression_error():
    with pytest.raises(ExpressionError):
        evaluate("(" * 2000 + "1" + ")" * 2000)
    with pytest.raises(ExpressionError):
        evaluate("(" * 2000 + "1")
