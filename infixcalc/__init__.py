"""Infix expression calculator with a keypad model and a command-line front end."""

__version__ = "1.0.0"
__all__ = ["util", "calculator", "keypad", "app"]