"""Classic comparison sorts that also count the steps they take."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator
from typing import TextIO


def bubble_sort(values: Iterable[int]) -> tuple[list[int], int]:
    """Return the sorted values and the number of comparisons made."""
    items = list(values)
    steps = 0
    for end in range(len(items) - 1, 0, -1):
        for j in range(end):
            steps += 1
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
    return items, steps


def insertion_sort(values: Iterable[int]) -> tuple[list[int], int]:
    """Return the sorted values and the count of shifts plus placements."""
    items = list(values)
    steps = 0
    for i in range(1, len(items)):
        key = items[i]
        j = i - 1
        while j >= 0 and items[j] > key:
            steps += 1
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = key
        steps += 1
    return items, steps


def quick_sort(values: Iterable[int]) -> tuple[list[int], int]:
    """Return the sorted values and the comparisons made against pivots.

    Uses the last element of each range as its pivot.
    """
    items = list(values)
    steps = 0
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low >= high:
            continue
        pivot = items[high]
        store = low
        for j in range(low, high):
            steps += 1
            if items[j] < pivot:
                items[store], items[j] = items[j], items[store]
                store += 1
        items[store], items[high] = items[high], items[store]
        pending.append((store + 1, high))
        pending.append((low, store - 1))
    return items, steps


def merge_sort(values: Iterable[int]) -> tuple[list[int], int]:
    """Return the sorted values and the comparisons made while merging."""
    items = list(values)
    if len(items) <= 1:
        return items, 0
    split = (len(items) + 1) // 2
    left, left_steps = merge_sort(items[:split])
    right, right_steps = merge_sort(items[split:])
    steps = left_steps + right_steps
    merged: list[int] = []
    i = j = 0
    while i < len(left) and j < len(right):
        steps += 1
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged, steps


_ALGORITHMS = {
    "bubble": ("Bubble", bubble_sort),
    "insertion": ("Insertion", insertion_sort),
    "quick": ("Quick", quick_sort),
    "merge": ("Merge", merge_sort),
}


def _ints(stream: TextIO) -> Iterator[int]:
    for line in stream:
        for token in line.split():
            yield int(token)


def main(argv: list[str] | None = None) -> int:
    """Read numbers from standard input, sort them and report the steps."""
    parser = argparse.ArgumentParser(
        prog="dsakit-sort",
        description="Sort numbers read from standard input.",
    )
    parser.add_argument(
        "algorithm",
        nargs="?",
        default="bubble",
        choices=sorted(_ALGORITHMS),
        help="sorting algorithm to use (default: bubble)",
    )
    args = parser.parse_args(argv)
    label, sorter = _ALGORITHMS[args.algorithm]

    numbers = _ints(sys.stdin)
    try:
        print("Enter array size: ", end="", flush=True)
        count = next(numbers)
        print(f"Enter {count} numbers: ", end="", flush=True)
        values = [next(numbers) for _ in range(count)]
    except (ValueError, StopIteration):
        print("\nerror: expected integer input", file=sys.stderr)
        return 1

    print()
    print("Original: " + " ".join(map(str, values)))
    result, steps = sorter(values)
    print(f"{label} Sort Steps: {steps}")
    print("Sorted: " + " ".join(map(str, result)))
    return 0