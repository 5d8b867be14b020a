"""Browser-style back/forward navigation history."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator
from typing import TextIO


class NavigationError(Exception):
    """Raised when there is no page to move to."""


class History:
    """Pages visited in order, with a cursor on the current page.

    Visiting a page drops any pages ahead of the cursor.
    """

    def __init__(self) -> None:
        self._pages: list[str] = []
        self._position = -1

    def visit(self, url: str) -> None:
        """Make ``url`` the current page, discarding forward history."""
        del self._pages[self._position + 1 :]
        self._pages.append(url)
        self._position = len(self._pages) - 1

    def back(self) -> str:
        """Move to the previous page and return it."""
        if self._position <= 0:
            raise NavigationError("Cannot go back")
        self._position -= 1
        return self._pages[self._position]

    def forward(self) -> str:
        """Move to the next page and return it."""
        if self._position + 1 >= len(self._pages):
            raise NavigationError("Cannot go forward")
        self._position += 1
        return self._pages[self._position]

    def current(self) -> str | None:
        """The current page, or None before any visit."""
        return self._pages[self._position] if self._pages else None


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def main(argv: list[str] | None = None) -> int:
    """Drive a navigation history from a numbered menu on standard input."""
    parser = argparse.ArgumentParser(
        prog="dsakit-browser",
        description="Interactive browser back/forward history.",
    )
    parser.parse_args(argv)

    history = History()
    tokens = _tokens(sys.stdin)
    try:
        while True:
            print("\n1.Visit 2.Back 3.Forward 4.Show 5.Exit\nChoice: ", end="", flush=True)
            choice = int(next(tokens))
            if choice == 1:
                print("Enter URL: ", end="", flush=True)
                url = next(tokens)
                history.visit(url)
                print(f"Visited: {url}")
            elif choice == 2:
                try:
                    print(f"Back to: {history.back()}")
                except NavigationError as error:
                    print(error)
            elif choice == 3:
                try:
                    print(f"Forward to: {history.forward()}")
                except NavigationError as error:
                    print(error)
            elif choice == 4:
                page = history.current()
                print("No page loaded" if page is None else f"Current: {page}")
            elif choice == 5:
                return 0
            else:
                print("Invalid choice!")
    except StopIteration:
        print()
        return 0
    except ValueError:
        print("\nerror: expected integer choice", file=sys.stderr)
        return 1