# infixcalc

A small calculator for infix arithmetic expressions. It handles decimals,
scientific notation such as `1.5e3` and `2E-2`, parentheses, and a unary sign
at the start of the input or right after `(`. The operators are:

| Operator    | Meaning                                 | Priority |
|-------------|-----------------------------------------|----------|
| `+` `-`     | add, subtract                           | 1        |
| `*` `/` `%` | multiply, divide, remainder             | 2        |
| `^`         | power                                   | 3        |
| `!`         | factorial (postfix, whole numbers only) | 4        |

Operators of equal priority group from the left, `^` included, so `2^3^2` is
`64`. The input is invalid in any of these cases:

- division or remainder by zero
- a factorial of a non-integer, or of a number above 170
- a `)` without a matching `(`
- a number written straight after `)`
- any character outside `0-9 . e E + - * / % ^ ! ( )`

## Installation

```
pip install .
```

## Command line

```
infixcalc "2^3+4!" "(1+2)*3"
```

Each argument is evaluated and its result is printed on its own line. Results
are printed with six significant digits. Empty input prints `用户未输入！` and
invalid input prints `用户输入非法！`. The exit status is 1 if any argument
failed, and 0 otherwise.

```
infixcalc
```

With no arguments, the command reads standard input and evaluates one
expression per line. It prints a result or a message for each line. Every
line is evaluated independently.

## Library use

```python
from infixcalc.calculator import Calculator, InvalidExpressionError

calc = Calculator()
calc.evaluate("2^3+4!")        # 32.0
calc.get_input("(1+2)*3")      # "9"
calc.format_infix()            # "( 1 + 2 ) * 3"
calc.format_postfix()          # "1 2 + 3 *"

try:
    calc.evaluate("1/0")
except InvalidExpressionError:
    ...
```

`Calculator.evaluate` returns a float. It raises `EmptyInputError` for empty
input and `InvalidExpressionError` for anything it cannot evaluate.
`EmptyInputError` is a subclass of `InvalidExpressionError`, and both are
`ValueError`s.

`Calculator.get_input` always returns a string. The string is either the
formatted result or one of the two messages above, which are available as
`EMPTY_INPUT_MESSAGE` and `INVALID_INPUT_MESSAGE`.

After each evaluation the calculator keeps these attributes:

- `input`
- `infix`
- `postfix`
- `result`

`Calculator.clear` resets them.

`infixcalc.calculator` also provides the lower-level steps:

- `tokenize(text)` splits text into infix tokens. It adds a `"0"` before a leading or bracketed sign.
- `to_postfix(tokens)` reorders infix tokens into postfix order.
- `format_number(value)` formats a result with six significant digits.

`infixcalc.util` holds the building blocks:

- `evaluate_postfix(tokens)` evaluates a postfix token sequence. It raises `EvaluationError` on failure.
- `is_number(token)` checks whether a token is a number.
- `priority(op)` returns an operator's priority.
- `can_push(marks, op)` checks whether an operator can go on the operator stack.
- `is_allowed_at(text, pos)` checks whether a character is allowed at a position.

### Keypad

`infixcalc.keypad.Keypad` models a calculator keypad around a `Calculator`. It
keeps the following state:

- `text`, the typed line
- `screen`, what the display shows
- `cursor`, the cursor position

```python
from infixcalc.keypad import Key, Keypad

pad = Keypad()
for key in "12+3":
    pad.press(key)
pad.press(Key.EQUAL)   # "15"
```

The keypad has these operations:

- `press(key)` takes a `Key`, or the text of a key such as `"7"`, `"del"`, `"ac"` or `"="`. It returns what the screen shows.
- `insert(symbol)` types at the cursor.
- `delete()` removes the character before the cursor.
- `clear()` empties the line.
- `move_cursor(pos)` places the cursor within the screen text.
- `equal()` evaluates what the screen shows. A valid result replaces the typed line.

While the screen shows an error message, `showing_error` is true. The next
editing key then only brings the last typed line back onto the screen.

## What it does not do

The package has no graphical window. `Keypad` is a model of the keys and the
display only, and the one front end is the `infixcalc` command.