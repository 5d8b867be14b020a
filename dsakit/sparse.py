"""Sparse matrices kept as triples sorted by row, then column."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import TextIO


@dataclass(frozen=True)
class Entry:
    """A non-zero matrix element."""

    row: int
    col: int
    value: int


def add_sparse(first: Iterable[Entry], second: Iterable[Entry]) -> list[Entry]:
    """Add two sparse matrices given in row-major order; zero sums are dropped."""
    result: list[Entry] = []
    left, right = iter(first), iter(second)
    a, b = next(left, None), next(right, None)
    while a is not None and b is not None:
        key_a, key_b = (a.row, a.col), (b.row, b.col)
        if key_a < key_b:
            result.append(a)
            a = next(left, None)
        elif key_a > key_b:
            result.append(b)
            b = next(right, None)
        else:
            total = a.value + b.value
            if total:
                result.append(Entry(a.row, a.col, total))
            a, b = next(left, None), next(right, None)
    if a is not None:
        result.append(a)
        result.extend(left)
    if b is not None:
        result.append(b)
        result.extend(right)
    return result


def transpose(entries: Iterable[Entry]) -> list[Entry]:
    """Swap row and column of every entry, keeping their order."""
    return [Entry(entry.col, entry.row, entry.value) for entry in entries]


def format_table(entries: Iterable[Entry]) -> str:
    """Render entries as a tab-separated table with a header line."""
    lines = ["Row\tCol\tValue"]
    lines.extend(f"{e.row}\t{e.col}\t{e.value}" for e in entries)
    return "\n".join(lines)


def _ints(stream: TextIO) -> Iterator[int]:
    for line in stream:
        for token in line.split():
            yield int(token)


def _read_matrix(numbers: Iterator[int], label: str) -> list[Entry]:
    print(f"Enter non-zero terms in {label} matrix: ", end="", flush=True)
    count = next(numbers)
    print("Enter row, col, value for each term:")
    return [Entry(next(numbers), next(numbers), next(numbers)) for _ in range(count)]


def main(argv: list[str] | None = None) -> int:
    """Read two sparse matrices, print their sum and its transpose."""
    parser = argparse.ArgumentParser(
        prog="dsakit-sparse",
        description="Add two sparse matrices read from standard input.",
    )
    parser.parse_args(argv)

    numbers = _ints(sys.stdin)
    try:
        first = _read_matrix(numbers, "first")
        second = _read_matrix(numbers, "second")
    except (ValueError, StopIteration):
        print("error: expected integer input", file=sys.stderr)
        return 1

    total = add_sparse(first, second)
    print("\nSum Matrix:")
    print(format_table(total))
    print("\nTranspose:")
    print(format_table(transpose(total)))
    return 0