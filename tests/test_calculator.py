import math

import pytest

from infixcalc.calculator import (
    EMPTY_INPUT_MESSAGE,
    INVALID_INPUT_MESSAGE,
    Calculator,
    EmptyInputError,
    InvalidExpressionError,
    format_number,
    to_postfix,
    tokenize,
)


def test_tokenize_simple():
    assert tokenize("1+2") == ["1", "+", "2"]


def test_tokenize_leading_sign():
    assert tokenize("-1") == ["0", "-", "1"]
    assert tokenize("2*(-3)") == ["2", "*", "(", "0", "-", "3", ")"]
    assert tokenize("+(1)") == ["0", "+", "(", "1", ")"]


def test_tokenize_numbers():
    assert tokenize("1.5e-3+2") == ["1.5e-3", "+", "2"]
    assert tokenize("12.25*3E4") == ["12.25", "*", "3E4"]
    assert tokenize("5!") == ["5", "!"]


@pytest.mark.parametrize("text", ["1..2", "1.", "1e", "1ee2", "1ex", "(2)2", "1a", "1 + 2", "1e5e2"])
def test_tokenize_rejects(text):
    with pytest.raises(InvalidExpressionError):
        tokenize(text)


def test_to_postfix_precedence():
    assert to_postfix(["1", "+", "2", "*", "3"]) == ["1", "2", "3", "*", "+"]
    assert to_postfix(["(", "1", "+", "2", ")", "*", "3"]) == ["1", "2", "+", "3", "*"]
    assert to_postfix(["2", "^", "3", "^", "2"]) == ["2", "3", "^", "2", "^"]


def test_to_postfix_errors():
    with pytest.raises(InvalidExpressionError):
        to_postfix([])
    with pytest.raises(InvalidExpressionError):
        to_postfix(["1", ")"])


def test_format_number():
    assert format_number(3.0) == "3"
    assert format_number(2.5) == "2.5"
    assert format_number(1e6) == "1e+06"
    assert format_number(1 / 3) == "0.333333"


@pytest.mark.parametrize(
    "text, expected",
    [
        ("1+2*3", 1 + 2 * 3),
        ("(1+2)*3", (1 + 2) * 3),
        ("2^10", 2.0 ** 10),
        ("10%3", math.fmod(10, 3)),
        ("3!", math.factorial(3)),
        ("-(2+3)", -(2 + 3)),
        ("1e3/4", 1e3 / 4),
        ("2^3^2", (2.0 ** 3) ** 2),
        ("7-2-1", 7 - 2 - 1),
        ("3!+1", math.factorial(3) + 1),
    ],
)
def test_evaluate(text, expected):
    assert Calculator().evaluate(text) == expected


def test_evaluate_quirk_unclosed_bracket():
    assert Calculator().evaluate("2(3+4") == 2.0


def test_evaluate_errors():
    calculator = Calculator()
    with pytest.raises(EmptyInputError):
        calculator.evaluate("")
    for text in ["1/0", "1+", "(1+2", "2(3)", "2.5!"]:
        with pytest.raises(InvalidExpressionError):
            calculator.evaluate(text)


def test_get_input_messages():
    calculator = Calculator()
    assert calculator.get_input("") == EMPTY_INPUT_MESSAGE
    assert calculator.get_input("1/0") == INVALID_INPUT_MESSAGE
    assert calculator.get_input("abc") == INVALID_INPUT_MESSAGE
    assert calculator.get_input("1+2") == format_number(1 + 2)


def test_result_feeds_back():
    calculator = Calculator()
    shown = calculator.get_input("1000*1000")
    assert calculator.evaluate(shown) == 1000 * 1000


def test_formatted_expressions_and_clear():
    calculator = Calculator()
    calculator.evaluate("1+2")
    assert calculator.format_infix() == "1 + 2"
    assert calculator.format_postfix() == "1 2 +"
    assert calculator.input == "1+2"
    calculator.clear()
    assert calculator.format_infix() == ""
    assert calculator.format_postfix() == ""
    assert calculator.result == 0.0