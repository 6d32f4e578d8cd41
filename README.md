# infixcalc

An interactive integer calculator. It reads infix expressions one line at a
time from standard input, converts each to postfix notation, prints the
postfix form, then evaluates it and prints the result.

## Installing

    pip install .

## Using the calculator

    infixcalc

Type an expression and press Enter. The session ends at end of input or after
a line reading `quit`. That line is handled like any other expression first,
so it prints `UNDEFINED OPERATION ERROR!` before the calculator stops.

    3+4*2
    3 4 2 * +
    11

The postfix line is printed in blue and error messages in red, using ANSI
terminal colours. An empty line prints nothing.

Expressions must not contain spaces: a space counts as an unknown operator.
Numbers are written as non-negative integers; there is no unary minus, but
results such as `5-8` may be negative. All arithmetic is on integers:

- `/` and `%` truncate toward zero.
- `^` with a zero or negative exponent gives 1.
- Comparisons and logical operators give 1 or 0.

### Operators

Listed from highest to lowest precedence:

| Operators              | Meaning                           |
|------------------------|-----------------------------------|
| `(` `)`                | grouping                          |
| `!`                    | logical NOT                       |
| `^`                    | power (right associative)         |
| `*` `/` `%`            | multiply, divide, remainder       |
| `+` `-`                | add, subtract                     |
| `>` `<` `>=` `<=`      | comparison                        |
| `==` `!=`              | equality                          |
| `&&`                   | logical AND                       |
| `\|\|`                 | logical OR                        |

### Errors

When an expression cannot be converted or evaluated, the calculator prints
one of these messages:

- `UNDEFINED OPERATION ERROR!` for an unknown operator
- `MISSING OPERANDS ERROR!` when an operator has too few operands
- `MISSING OPERATOR ERROR!` for an expression with no operator, an unmatched
  `)`, or operands left over
- `DIVISION BY ZERO ERROR!`
- `INDETERMINATE ERROR!` for `0/0`, `0%0` and `0^0`

Input lines longer than 255 characters are rejected with
`Error, input exceeds 255-character limit.` and the next line is read in
their place.

## Using it as a library

    from infixcalc.infix import infix_to_postfix
    from infixcalc.postfix import evaluate_postfix
    from infixcalc.errors import CalculatorError

    try:
        postfix = infix_to_postfix("(1+2)*3")   # ["1", "2", "+", "3", "*"]
        print(evaluate_postfix(postfix))        # 9
    except CalculatorError as exc:
        print(exc.code)                         # an infixcalc.errors.ErrorCode

Other parts of the package:

- `infixcalc.cli.evaluate_line(text, color=True)` converts and evaluates one
  line and returns the list of lines the calculator would print for it.
- `infixcalc.cli.read_expression(stream, limit=255, output=None)` reads one
  line of bounded length, returning `None` at end of input.
- `infixcalc.errors.error_message(code, color=False)` gives the message for an
  `ErrorCode`.
- `infixcalc.operations.evaluate_binary(symbol, left, right)` applies one
  binary operator; `find_operation(symbol)` looks up an `Operation` with its
  precedence and arity.
- `infixcalc.tokenizer.tokenize(text)` yields `Token` objects.
- `infixcalc.tokenqueue.string_to_queue(text)` turns space-separated postfix
  text into a `TokenQueue`, which `evaluate_postfix` accepts directly.
- `infixcalc.stack.Stack` is the stack used during conversion and evaluation.

## What it does not do

There are no floating-point numbers, variables or functions, and no way to
pass an expression on the command line: the calculator only reads lines from
standard input.