"""Expression trees built from postfix expressions."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import TextIO


@dataclass
class ExprNode:
    """A node holding an operand or an operator symbol."""

    value: str
    left: ExprNode | None = None
    right: ExprNode | None = None


def _is_operand(symbol: str) -> bool:
    return symbol.isascii() and symbol.isalnum()


def build_tree(postfix: str) -> ExprNode:
    """Build a tree from a postfix expression of single-character symbols.

    Raises ValueError when an operator lacks operands or the input is empty.
    """
    stack: list[ExprNode] = []
    for symbol in postfix:
        node = ExprNode(symbol)
        if not _is_operand(symbol):
            if len(stack) < 2:
                raise ValueError(f"operator {symbol!r} lacks operands in {postfix!r}")
            node.right = stack.pop()
            node.left = stack.pop()
        stack.append(node)
    if not stack:
        raise ValueError("empty expression")
    return stack.pop()


def postorder(node: ExprNode | None) -> str:
    """Symbols in left, right, node order."""
    if node is None:
        return ""
    return postorder(node.left) + postorder(node.right) + node.value


def preorder(node: ExprNode | None) -> str:
    """Symbols in node, left, right order: the prefix form."""
    if node is None:
        return ""
    return node.value + preorder(node.left) + preorder(node.right)


def _first_word(stream: TextIO) -> str | None:
    return next((word for line in stream for word in line.split()), None)


def main(argv: list[str] | None = None) -> int:
    """Read a postfix expression and print its postorder and prefix forms."""
    parser = argparse.ArgumentParser(
        prog="dsakit-expression-tree",
        description="Build an expression tree from a postfix expression.",
    )
    parser.parse_args(argv)

    print("Enter postfix expression: ", end="", flush=True)
    expression = _first_word(sys.stdin)
    if expression is None:
        print("error: no expression given", file=sys.stderr)
        return 1
    try:
        root = build_tree(expression)
    except ValueError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    print(f"Postorder: {postorder(root)}")
    print(f"Prefix: {preorder(root)}")
    return 0