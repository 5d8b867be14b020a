"""Binary search over a sorted sequence."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator, Sequence
from typing import TextIO


def binary_search(values: Sequence[int], target: int) -> int | None:
    """Return an index of ``target`` in sorted ``values``, or None if absent."""
    left, right = 0, len(values) - 1
    while left <= right:
        mid = left + (right - left) // 2
        if values[mid] == target:
            return mid
        if values[mid] < target:
            left = mid + 1
        else:
            right = mid - 1
    return None


def _ints(stream: TextIO) -> Iterator[int]:
    for line in stream:
        for token in line.split():
            yield int(token)


def main(argv: list[str] | None = None) -> int:
    """Read a sorted array and a target from standard input and search."""
    parser = argparse.ArgumentParser(
        prog="dsakit-search",
        description="Binary search a sorted array read from standard input.",
    )
    parser.parse_args(argv)

    numbers = _ints(sys.stdin)
    try:
        print("Enter size of sorted array: ", end="", flush=True)
        count = next(numbers)
        print(f"Enter {count} sorted numbers: ", end="", flush=True)
        values = [next(numbers) for _ in range(count)]
        print("Enter number to search: ", end="", flush=True)
        target = next(numbers)
    except (ValueError, StopIteration):
        print("\nerror: expected integer input", file=sys.stderr)
        return 1

    print()
    index = binary_search(values, target)
    if index is None:
        print(f"Element {target} not found in the array")
    else:
        print(f"Element {target} found at index {index}")
    return 0