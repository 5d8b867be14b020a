"""Addition of polynomials whose terms run from the highest exponent down."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import TextIO


@dataclass(frozen=True)
class Term:
    """One polynomial term, ``coeff * x**exp``."""

    coeff: int
    exp: int

    def __str__(self) -> str:
        return f"{self.coeff}x^{self.exp}"


def add_polynomials(first: Iterable[Term], second: Iterable[Term]) -> list[Term]:
    """Merge two polynomials sorted by descending exponent.

    Terms with the same exponent are combined; a zero sum stays as a term.
    """
    result: list[Term] = []
    left, right = iter(first), iter(second)
    a, b = next(left, None), next(right, None)
    while a is not None and b is not None:
        if a.exp == b.exp:
            result.append(Term(a.coeff + b.coeff, a.exp))
            a, b = next(left, None), next(right, None)
        elif a.exp > b.exp:
            result.append(a)
            a = next(left, None)
        else:
            result.append(b)
            b = next(right, None)
    if a is not None:
        result.append(a)
        result.extend(left)
    if b is not None:
        result.append(b)
        result.extend(right)
    return result


def format_compact(terms: Iterable[Term]) -> str:
    """Render terms with no spaces, e.g. ``4x^3+3x^2-1x^0``."""
    parts: list[str] = []
    for position, term in enumerate(terms):
        if position and term.coeff > 0:
            parts.append("+")
        parts.append(str(term))
    return "".join(parts)


def format_spaced(terms: Iterable[Term]) -> str:
    """Render terms joined by `` + ``; an empty polynomial is ``0``."""
    rendered = " + ".join(str(term) for term in terms)
    return rendered or "0"


def _ints(stream: TextIO) -> Iterator[int]:
    for line in stream:
        for token in line.split():
            yield int(token)


def _read_terms(numbers: Iterator[int], label: str) -> list[Term]:
    print(f"Enter terms in {label} polynomial: ", end="", flush=True)
    count = next(numbers)
    print("Enter coeff and exp for each term:")
    return [Term(next(numbers), next(numbers)) for _ in range(count)]


def main(argv: list[str] | None = None) -> int:
    """Read two polynomials from standard input and print their sum."""
    parser = argparse.ArgumentParser(
        prog="dsakit-polynomial",
        description="Add two polynomials read from standard input.",
    )
    parser.add_argument(
        "--spaced",
        action="store_true",
        help="print both inputs and the sum with spaced terms",
    )
    args = parser.parse_args(argv)

    numbers = _ints(sys.stdin)
    try:
        first = _read_terms(numbers, "first")
        second = _read_terms(numbers, "second")
    except (ValueError, StopIteration):
        print("error: expected integer input", file=sys.stderr)
        return 1

    total = add_polynomials(first, second)
    print()
    if args.spaced:
        print(f"First Polynomial: {format_spaced(first)}")
        print(f"Second Polynomial: {format_spaced(second)}")
        print(f"Sum: {format_spaced(total)}")
    else:
        print(f"Result: {format_compact(total)}")
    return 0