"""Breadth-first traversal of a graph given as an adjacency matrix."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from collections.abc import Iterator, Sequence
from typing import TextIO


def bfs(matrix: Sequence[Sequence[int]], start: int) -> list[int]:
    """Return nodes in the order breadth-first search visits them.

    Only matrix cells equal to 1 count as edges. Raises ValueError for a
    non-square matrix and IndexError for a start node outside the graph.
    """
    rows = [list(row) for row in matrix]
    size = len(rows)
    if any(len(row) != size for row in rows):
        raise ValueError("adjacency matrix must be square")
    if not 0 <= start < size:
        raise IndexError(f"start node {start} outside 0..{size - 1}")

    order: list[int] = []
    visited = {start}
    pending = deque([start])
    while pending:
        current = pending.popleft()
        order.append(current)
        for neighbour, edge in enumerate(rows[current]):
            if edge == 1 and neighbour not in visited:
                visited.add(neighbour)
                pending.append(neighbour)
    return order


def _ints(stream: TextIO) -> Iterator[int]:
    for line in stream:
        for token in line.split():
            yield int(token)


def main(argv: list[str] | None = None) -> int:
    """Read an adjacency matrix and start node, then print the BFS order."""
    parser = argparse.ArgumentParser(
        prog="dsakit-bfs",
        description="Breadth-first search over an adjacency matrix.",
    )
    parser.parse_args(argv)

    numbers = _ints(sys.stdin)
    try:
        print("Enter number of nodes: ", end="", flush=True)
        size = next(numbers)
        print(f"Enter adjacency matrix ({size} x {size}):")
        matrix = [[next(numbers) for _ in range(size)] for _ in range(size)]
        print(f"Enter starting node (0 to {size - 1}): ", end="", flush=True)
        start = next(numbers)
        order = bfs(matrix, start)
    except (ValueError, StopIteration, IndexError) as error:
        print(f"\nerror: {error or 'expected integer input'}", file=sys.stderr)
        return 1

    print()
    print("BFS: " + " ".join(map(str, order)))
    return 0