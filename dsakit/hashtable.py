"""A fixed-size hash table of integer keys using linear probing."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator
from typing import TextIO

DEFAULT_SIZE = 10


class TableFull(Exception):
    """Raised when no free slot is left for a key."""


class LinearProbingTable:
    """Open-addressing table: a key goes to ``key % size`` or the next free slot."""

    def __init__(self, size: int = DEFAULT_SIZE) -> None:
        if size < 1:
            raise ValueError(f"size must be positive, got {size}")
        self.size = size
        self._slots: list[int | None] = [None] * size

    def _probe(self, key: int) -> Iterator[int]:
        start = key % self.size
        return ((start + step) % self.size for step in range(self.size))

    def insert(self, key: int) -> int:
        """Store ``key`` and return its slot index; raises TableFull."""
        for index in self._probe(key):
            if self._slots[index] is None:
                self._slots[index] = key
                return index
        raise TableFull(f"Hash table full! Cannot insert {key}")

    def find(self, key: int) -> int | None:
        """Return the slot holding ``key``, or None if it is not stored."""
        for index in self._probe(key):
            stored = self._slots[index]
            if stored == key:
                return index
            if stored is None:
                return None
        return None

    def slots(self) -> list[int | None]:
        """A copy of every slot, None marking an empty one."""
        return list(self._slots)


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _read_int(tokens: Iterator[str], prompt: str) -> int:
    print(prompt, end="", flush=True)
    return int(next(tokens))


def main(argv: list[str] | None = None) -> int:
    """Drive a hash table from a numbered menu on standard input."""
    parser = argparse.ArgumentParser(
        prog="dsakit-hash",
        description="Interactive linear-probing hash table.",
    )
    parser.add_argument(
        "--size",
        type=int,
        default=DEFAULT_SIZE,
        help=f"number of slots (default: {DEFAULT_SIZE})",
    )
    args = parser.parse_args(argv)
    if args.size < 1:
        parser.error("size must be positive")

    table = LinearProbingTable(args.size)
    tokens = _tokens(sys.stdin)
    try:
        while True:
            choice = _read_int(tokens, "\n1.Insert 2.Search 3.Show 4.Exit\nChoice: ")
            if choice == 1:
                key = _read_int(tokens, "Enter key: ")
                try:
                    print(f"Inserted {key} at index {table.insert(key)}")
                except TableFull as error:
                    print(error)
            elif choice == 2:
                key = _read_int(tokens, "Enter key: ")
                index = table.find(key)
                print(f"{key} not found" if index is None else f"Found {key} at index {index}")
            elif choice == 3:
                print("\nHash Table:")
                for index, key in enumerate(table.slots()):
                    print(f"Index {index}: {'Empty' if key is None else key}")
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