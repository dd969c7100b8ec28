"""Turning typed infix expressions into postfix form and evaluating them."""

from __future__ import annotations

from collections.abc import Iterable

from .util import EvaluationError, can_push, evaluate_postfix, is_allowed_at, is_number

EMPTY_INPUT_MESSAGE = "用户未输入！"
INVALID_INPUT_MESSAGE = "用户输入非法！"

_DIGITS = frozenset("0123456789")


class InvalidExpressionError(ValueError):
    """Raised when typed text is not a valid expression."""


class EmptyInputError(InvalidExpressionError):
    """Raised when there is nothing to evaluate."""


def _scan_number(text: str, start: int) -> int:
    """Return the index just past the number that begins at ``start``."""
    seen_point = False
    seen_exponent = False
    last = len(text) - 1
    j = start + 1
    while j < len(text):
        ch = text[j]
        if ch in _DIGITS:
            j += 1
        elif ch == ".":
            if seen_point or j == last:
                raise InvalidExpressionError(f"misplaced decimal point at {j}")
            seen_point = True
            j += 1
        elif ch in "eE":
            if seen_exponent or j == last:
                raise InvalidExpressionError(f"misplaced exponent at {j}")
            following = text[j + 1]
            if following not in "+-" and following not in _DIGITS:
                raise InvalidExpressionError(f"malformed exponent at {j}")
            seen_exponent = True
            j += 2
        else:
            break
    return j


def tokenize(text: str) -> list[str]:
    """Split typed text into infix tokens; a leading sign gets a "0" before it."""
    tokens: list[str] = []
    i = 0
    while i < len(text):
        if not is_allowed_at(text, i):
            raise InvalidExpressionError(f"unexpected character {text[i]!r} at {i}")
        ch = text[i]
        if ch in "+-" and (i == 0 or text[i - 1] == "("):
            tokens.append("0")
        if ch in _DIGITS:
            end = _scan_number(text, i)
            tokens.append(text[i:end])
            i = end
        else:
            tokens.append(ch)
            i += 1
    return tokens


def to_postfix(infix: Iterable[str]) -> list[str]:
    """Reorder infix tokens into postfix order."""
    tokens = list(infix)
    if not tokens:
        raise InvalidExpressionError("empty expression")
    output: list[str] = []
    marks: list[str] = []
    for token in tokens:
        if is_number(token):
            output.append(token)
        elif token == ")":
            while True:
                if not marks:
                    raise InvalidExpressionError("unmatched ')'")
                top = marks.pop()
                if top == "(":
                    break
                output.append(top)
        else:
            while not can_push(marks, token):
                output.append(marks.pop())
            marks.append(token)
    output.extend(reversed(marks))
    return output


def format_number(value: float) -> str:
    """Render a result with six significant digits."""
    return format(value, "g")


class Calculator:
    """Evaluates expressions and keeps the pieces of the last evaluation."""

    def __init__(self) -> None:
        self.input = ""
        self.infix: list[str] = []
        self.postfix: list[str] = []
        self.result = 0.0

    def clear(self) -> None:
        """Forget the last evaluation."""
        self.input = ""
        self.infix = []
        self.postfix = []
        self.result = 0.0

    def evaluate(self, text: str) -> float:
        """Evaluate ``text`` and return its value."""
        self.clear()
        self.input = text
        if not text:
            raise EmptyInputError("nothing to evaluate")
        self.infix = tokenize(text)
        self.postfix = to_postfix(self.infix)
        try:
            self.result = evaluate_postfix(self.postfix)
        except EvaluationError as exc:
            raise InvalidExpressionError(str(exc)) from exc
        return self.result

    def get_input(self, text: str) -> str:
        """Evaluate ``text`` and return the text to display."""
        try:
            value = self.evaluate(text)
        except EmptyInputError:
            return EMPTY_INPUT_MESSAGE
        except InvalidExpressionError:
            return INVALID_INPUT_MESSAGE
        return format_number(value)

    def format_infix(self) -> str:
        """Return the infix tokens of the last evaluation, space separated."""
        return " ".join(self.infix)

    def format_postfix(self) -> str:
        """Return the postfix tokens of the last evaluation, space separated."""
        return " ".join(self.postfix)