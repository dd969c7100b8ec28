"""A calculator keypad with a one-line screen and a cursor."""

from __future__ import annotations

from enum import Enum

from .calculator import Calculator

_ERROR_PREFIX = "用"


class Key(Enum):
    """Keys on the keypad; symbol keys carry the text they type."""

    ZERO = "0"
    ONE = "1"
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    E = "e"
    DOT = "."
    LBRACKET = "("
    RBRACKET = ")"
    PLUS = "+"
    MINUS = "-"
    MULTIPLY = "*"
    DIVIDE = "/"
    REMAINDER = "%"
    FACTORIAL = "!"
    POWER = "^"
    DEL = "del"
    AC = "ac"
    EQUAL = "="


class Keypad:
    """Keeps the typed text, what the screen shows, and the cursor position.

    While the screen shows an error message, the next key that would edit
    the text only brings the last typed text back onto the screen.
    """

    def __init__(self, calculator: Calculator | None = None) -> None:
        self.calculator = calculator if calculator is not None else Calculator()
        self.text = ""
        self.screen = ""
        self.cursor = 0

    @property
    def showing_error(self) -> bool:
        return self.screen.startswith(_ERROR_PREFIX)

    def _show(self, text: str) -> None:
        self.screen = text
        self.cursor = len(text)

    def press(self, key: Key | str) -> str:
        """Press a key and return what the screen then shows."""
        key = Key(key)
        if key is Key.DEL:
            self.delete()
        elif key is Key.AC:
            self.clear()
        elif key is Key.EQUAL:
            self.equal()
        else:
            self.insert(key.value)
        return self.screen

    def insert(self, symbol: str) -> None:
        """Type ``symbol`` at the cursor."""
        if not self.showing_error:
            self.text = self.text[: self.cursor] + symbol + self.text[self.cursor :]
        self._show(self.text)

    def delete(self) -> None:
        """Remove the character before the cursor."""
        pos = self.cursor
        if self.text and not self.showing_error and pos > 0:
            self.text = self.text[: pos - 1] + self.text[pos:]
        self._show(self.text)

    def clear(self) -> None:
        """Clear the text and the screen."""
        self.text = ""
        self._show("")

    def equal(self) -> str:
        """Evaluate what the screen shows and display the outcome."""
        outcome = self.calculator.get_input(self.screen)
        if not outcome.startswith(_ERROR_PREFIX):
            self.text = outcome
        self._show(outcome)
        return outcome

    def move_cursor(self, pos: int) -> None:
        """Place the cursor, kept within the screen text."""
        self.cursor = max(0, min(pos, len(self.screen)))