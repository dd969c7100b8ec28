"""Helpers for checking, ordering and evaluating calculator tokens."""

from __future__ import annotations

import math
import re
from collections.abc import Iterable, Sequence

_NUMBER = re.compile(r"[+-]?[0-9]+(\.[0-9]+)?([eE][+-]?[0-9]+)?")
_DIGITS = frozenset("0123456789")
_NUMERIC_CHARS = _DIGITS | {".", "e", "E"}
_OPERATOR_CHARS = frozenset("+-*/%()^!")
_PRIORITIES = {"(": 0, "+": 1, "-": 1, "*": 2, "/": 2, "%": 2, "^": 3, "!": 4}
_LARGEST_FACTORIAL = 170


class EvaluationError(ValueError):
    """Raised when a postfix expression cannot be evaluated."""


def is_allowed_at(text: str, pos: int) -> bool:
    """Tell whether the character at ``pos`` may appear there in an expression."""
    ch = text[pos]
    if ch in _NUMERIC_CHARS:
        # A number straight after a closing bracket, as in "(2)2", is rejected.
        return pos == 0 or text[pos - 1] != ")"
    return ch in _OPERATOR_CHARS


def priority(op: str) -> int:
    """Return the binding priority of an operator, or -1 for anything else."""
    return _PRIORITIES.get(op[:1], -1)


def is_number(token: str) -> bool:
    """Tell whether ``token`` is a complete decimal number."""
    return _NUMBER.fullmatch(token) is not None


def can_push(marks: Sequence[str], op: str) -> bool:
    """Tell whether ``op`` may go straight onto the operator stack ``marks``."""
    return not marks or op == "(" or priority(op) > priority(marks[-1])


def evaluate_postfix(postfix: Iterable[str]) -> float:
    """Evaluate a postfix token sequence and return its value."""
    stack: list[float] = []
    for token in postfix:
        if is_number(token):
            stack.append(float(token))
            continue
        if token == "!":
            if not stack:
                raise EvaluationError("factorial needs an operand")
            stack.append(_factorial(stack.pop()))
            continue
        if len(stack) < 2:
            raise EvaluationError(f"operator {token!r} needs two operands")
        right = stack.pop()
        left = stack.pop()
        stack.append(_apply(token, left, right))
    if len(stack) != 1:
        raise EvaluationError("expression does not reduce to a single value")
    return stack[0]


def _apply(op: str, left: float, right: float) -> float:
    if op == "+":
        return left + right
    if op == "-":
        return left - right
    if op == "*":
        return left * right
    if op == "/":
        if right == 0:
            raise EvaluationError("division by zero")
        return left / right
    if op == "%":
        if right == 0:
            raise EvaluationError("remainder by zero")
        return _fmod(left, right)
    if op == "^":
        return _power(left, right)
    # Tokens without an operation of their own leave the left operand.
    return left


def _fmod(left: float, right: float) -> float:
    try:
        return math.fmod(left, right)
    except ValueError:
        return math.nan


def _is_odd_integer(value: float) -> bool:
    return math.isfinite(value) and value.is_integer() and int(value) % 2 == 1


def _power(base: float, exponent: float) -> float:
    try:
        return math.pow(base, exponent)
    except OverflowError:
        negative = base < 0 and _is_odd_integer(exponent)
        return -math.inf if negative else math.inf
    except ValueError:
        if base == 0:
            negative = math.copysign(1.0, base) < 0 and _is_odd_integer(exponent)
            return -math.inf if negative else math.inf
        return math.nan


def _factorial(value: float) -> float:
    if not math.isfinite(value) or not value.is_integer():
        raise EvaluationError("factorial needs a whole number")
    n = int(value)
    if n > _LARGEST_FACTORIAL:
        raise EvaluationError("factorial is too large")
    return float(math.factorial(n)) if n > 0 else 1.0