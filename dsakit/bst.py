"""An unbalanced binary search tree of distinct integers."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator
from dataclasses import dataclass
from typing import TextIO


@dataclass
class _Node:
    value: int
    left: _Node | None = None
    right: _Node | None = None


class BinarySearchTree:
    """A binary search tree; inserting a value already present does nothing."""

    def __init__(self) -> None:
        self._root: _Node | None = None

    def insert(self, value: int) -> bool:
        """Add ``value``; return False if it was already in the tree."""
        if self._root is None:
            self._root = _Node(value)
            return True
        node = self._root
        while True:
            if value < node.value:
                if node.left is None:
                    node.left = _Node(value)
                    return True
                node = node.left
            elif value > node.value:
                if node.right is None:
                    node.right = _Node(value)
                    return True
                node = node.right
            else:
                return False

    def __contains__(self, value: object) -> bool:
        node = self._root
        while node is not None:
            if value == node.value:
                return True
            node = node.left if value < node.value else node.right  # type: ignore[operator]
        return False

    def inorder(self) -> Iterator[int]:
        """Yield the stored values in ascending order."""
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _read_int(tokens: Iterator[str], prompt: str) -> int:
    print(prompt, end="", flush=True)
    return int(next(tokens))


def main(argv: list[str] | None = None) -> int:
    """Drive a binary search tree from a numbered menu on standard input."""
    parser = argparse.ArgumentParser(
        prog="dsakit-bst",
        description="Interactive binary search tree.",
    )
    parser.parse_args(argv)

    tree = BinarySearchTree()
    tokens = _tokens(sys.stdin)
    try:
        while True:
            choice = _read_int(tokens, "\n1.Insert 2.Search 3.Display 4.Exit\nChoice: ")
            if choice == 1:
                value = _read_int(tokens, "Enter value: ")
                tree.insert(value)
                print(f"Inserted {value}")
            elif choice == 2:
                value = _read_int(tokens, "Enter value to search: ")
                print(f"{value} found" if value in tree else f"{value} not found")
            elif choice == 3:
                print("BST (inorder): " + " ".join(map(str, tree.inorder())))
            elif choice == 4:
                return 0
            else:
                print("Invalid choice!")
    except StopIteration:
        print()
        return 0
    except ValueError:
        print("\nerror: expected integer input", file=sys.stderr)
        return 1