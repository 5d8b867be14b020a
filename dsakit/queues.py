"""Bounded FIFO queues and a bounded double-ended queue."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from collections.abc import Iterator
from typing import TextIO

DEFAULT_CAPACITY = 5


class QueueFull(Exception):
    """Raised when adding to a queue that has no free slot."""


class QueueEmpty(Exception):
    """Raised when removing from a queue that holds nothing."""


def _check_capacity(capacity: int) -> int:
    if capacity < 1:
        raise ValueError(f"capacity must be positive, got {capacity}")
    return capacity


class LinearQueue:
    """A queue over a fixed row of slots that are not reused.

    Each enqueue takes the next slot. Slots freed by dequeuing become usable
    again only after a dequeue on an empty queue resets the row.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        self.capacity = _check_capacity(capacity)
        self._items: deque[int] = deque()
        self._used = 0

    def enqueue(self, value: int) -> None:
        """Append ``value``; raises QueueFull once every slot has been used."""
        if self._used == self.capacity:
            raise QueueFull("queue is full")
        self._items.append(value)
        self._used += 1

    def dequeue(self) -> int:
        """Remove and return the oldest value.

        On an empty queue the slots are reset and QueueEmpty is raised.
        """
        if not self._items:
            self._used = 0
            raise QueueEmpty("queue is empty")
        return self._items.popleft()

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)


class CircularQueue:
    """A FIFO queue whose slots wrap around, holding up to ``capacity`` values."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        self.capacity = _check_capacity(capacity)
        self._items: deque[int] = deque()

    def enqueue(self, value: int) -> None:
        """Append ``value``; raises QueueFull when the queue is at capacity."""
        if len(self._items) == self.capacity:
            raise QueueFull("queue is full")
        self._items.append(value)

    def dequeue(self) -> int:
        """Remove and return the oldest value; raises QueueEmpty if none."""
        if not self._items:
            raise QueueEmpty("queue is empty")
        return self._items.popleft()

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)


class Deque:
    """A double-ended queue holding up to ``capacity`` values."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        self.capacity = _check_capacity(capacity)
        self._items: deque[int] = deque()

    def _ensure_room(self) -> None:
        if len(self._items) == self.capacity:
            raise QueueFull("deque is full")

    def _ensure_items(self) -> None:
        if not self._items:
            raise QueueEmpty("deque is empty")

    def add_front(self, value: int) -> None:
        """Insert ``value`` before the first element."""
        self._ensure_room()
        self._items.appendleft(value)

    def add_rear(self, value: int) -> None:
        """Insert ``value`` after the last element."""
        self._ensure_room()
        self._items.append(value)

    def remove_front(self) -> int:
        """Remove and return the first element."""
        self._ensure_items()
        return self._items.popleft()

    def remove_rear(self) -> int:
        """Remove and return the last element."""
        self._ensure_items()
        return self._items.pop()

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _read_int(tokens: Iterator[str], prompt: str) -> int:
    print(prompt, end="", flush=True)
    return int(next(tokens))


def _run_queue(queue: LinearQueue | CircularQueue, tokens: Iterator[str]) -> None:
    while True:
        choice = _read_int(tokens, "\n1.Add 2.Remove 3.Show 4.Exit\nChoice: ")
        if choice == 1:
            value = _read_int(tokens, "Enter value: ")
            try:
                queue.enqueue(value)
            except QueueFull:
                print("Queue is full!")
            else:
                print(f"Added: {value}")
        elif choice == 2:
            try:
                print(f"Removed: {queue.dequeue()}")
            except QueueEmpty:
                print("Queue is empty!")
        elif choice == 3:
            if len(queue):
                print("Queue: " + " ".join(map(str, queue)))
            else:
                print("Queue is empty!")
        elif choice == 4:
            return
        else:
            print("Invalid choice!")


def _run_deque(dq: Deque, tokens: Iterator[str]) -> None:
    menu = (
        "\n1.Add Front 2.Add Rear 3.Remove Front 4.Remove Rear 5.Show 6.Exit"
        "\nChoice: "
    )
    while True:
        choice = _read_int(tokens, menu)
        if choice in (1, 2):
            value = _read_int(tokens, "Value: ")
            add, end = (dq.add_front, "front") if choice == 1 else (dq.add_rear, "rear")
            try:
                add(value)
            except QueueFull:
                print("Deque is full!")
            else:
                print(f"Added {value} at {end}")
        elif choice in (3, 4):
            remove, end = (
                (dq.remove_front, "front") if choice == 3 else (dq.remove_rear, "rear")
            )
            try:
                print(f"Removed {remove()} from {end}")
            except QueueEmpty:
                print("Deque is empty!")
        elif choice == 5:
            if len(dq):
                print("Deque: " + " ".join(map(str, dq)))
            else:
                print("Deque is empty!")
        elif choice == 6:
            return
        else:
            print("Invalid choice!")


def main(argv: list[str] | None = None) -> int:
    """Drive a queue from a numbered menu read on standard input."""
    parser = argparse.ArgumentParser(
        prog="dsakit-queue",
        description="Interactive bounded queue.",
    )
    parser.add_argument(
        "kind",
        nargs="?",
        default="linear",
        choices=["linear", "circular", "deque"],
        help="kind of queue (default: linear)",
    )
    parser.add_argument(
        "--capacity",
        type=int,
        default=DEFAULT_CAPACITY,
        help=f"number of slots (default: {DEFAULT_CAPACITY})",
    )
    args = parser.parse_args(argv)
    if args.capacity < 1:
        parser.error("capacity must be positive")

    tokens = _tokens(sys.stdin)
    try:
        if args.kind == "deque":
            _run_deque(Deque(args.capacity), tokens)
        elif args.kind == "circular":
            _run_queue(CircularQueue(args.capacity), tokens)
        else:
            _run_queue(LinearQueue(args.capacity), tokens)
    except StopIteration:
        print()
    except ValueError:
        print("\nerror: expected integer input", file=sys.stderr)
        return 1
    return 0