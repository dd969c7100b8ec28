"""Command-line front end for the calculator."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from .calculator import EMPTY_INPUT_MESSAGE, INVALID_INPUT_MESSAGE, Calculator

_FAILURES = frozenset({EMPTY_INPUT_MESSAGE, INVALID_INPUT_MESSAGE})


def main(argv: Sequence[str] | None = None) -> int:
    """Evaluate expressions given as arguments, or one per line from standard input."""
    parser = argparse.ArgumentParser(
        prog="infixcalc",
        description="计算器: evaluate infix arithmetic expressions.",
    )
    parser.add_argument(
        "expressions",
        nargs="*",
        help="expressions to evaluate; read from standard input when none are given",
    )
    args = parser.parse_args(argv)
    calculator = Calculator()

    if args.expressions:
        status = 0
        for expression in args.expressions:
            outcome = calculator.get_input(expression)
            print(outcome)
            if outcome in _FAILURES:
                status = 1
        return status

    for line in sys.stdin:
        print(calculator.get_input(line.rstrip("\r\n")), flush=True)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())