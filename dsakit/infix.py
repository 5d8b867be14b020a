"""Conversion of infix expressions to postfix with an operator stack."""

from __future__ import annotations

import argparse
import sys
from typing import TextIO

_PRIORITY = {"+": 1, "-": 1, "*": 2, "/": 2}


def priority(symbol: str) -> int:
    """Binding strength of an operator; parentheses and unknown symbols get 0."""
    return _PRIORITY.get(symbol, 0)


def _is_operand(symbol: str) -> bool:
    return symbol.isascii() and symbol.isalnum()


def to_postfix(infix: str) -> str:
    """Convert an infix expression of single-character operands to postfix.

    Raises ValueError on a closing parenthesis with no matching opening one.
    """
    output: list[str] = []
    stack: list[str] = []
    for symbol in infix:
        if _is_operand(symbol):
            output.append(symbol)
        elif symbol == "(":
            stack.append(symbol)
        elif symbol == ")":
            while True:
                if not stack:
                    raise ValueError(f"unmatched ')' in {infix!r}")
                top = stack.pop()
                if top == "(":
                    break
                output.append(top)
        else:
            while stack and priority(stack[-1]) >= priority(symbol):
                output.append(stack.pop())
            stack.append(symbol)
    output.extend(reversed(stack))
    return "".join(output)


def _first_word(stream: TextIO) -> str | None:
    return next((word for line in stream for word in line.split()), None)


def main(argv: list[str] | None = None) -> int:
    """Read an infix expression from standard input and print it in postfix."""
    parser = argparse.ArgumentParser(
        prog="dsakit-infix",
        description="Convert an infix expression to postfix.",
    )
    parser.parse_args(argv)

    print("Enter infix expression: ", end="", flush=True)
    expression = _first_word(sys.stdin)
    if expression is None:
        print("error: no expression given", file=sys.stderr)
        return 1
    try:
        postfix = to_postfix(expression)
    except ValueError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    print(f"Postfix: {postfix}")
    return 0