"""A singly linked list of books, and the pieces the other listings share."""

from __future__ import annotations

import argparse
from abc import ABC, abstractmethod
from typing import Generic, Iterable, Iterator, Optional, TypeVar

from listkit.books import DEFAULT_INPUT, Book, read_books

T = TypeVar("T")


def _listing(lines: Iterable[str]) -> str:
    """Join the lines, each one preceded by a newline."""
    return "".join(f"\n{line}" for line in lines)


def _input_parser(description: str) -> argparse.ArgumentParser:
    """Return a command-line parser that takes an optional input file path."""
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument("path", nargs="?", default=DEFAULT_INPUT)
    return parser


class _Chain(ABC, Generic[T]):
    """Size bookkeeping, filling and representation shared by the linked containers."""

    _size = 0

    @abstractmethod
    def append(self, item: T) -> None:
        """Add an item at the end."""

    @abstractmethod
    def __iter__(self) -> Iterator[T]:
        """Yield the items in order."""

    def _fill(self, items: Iterable[T]) -> None:
        for item in items:
            self.append(item)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


class _Node:
    __slots__ = ("book", "next")

    def __init__(self, book: Book) -> None:
        self.book = book
        self.next: Optional[_Node] = None


class BookList(_Chain[Book]):
    """Books kept in insertion order in a singly linked chain."""

    def __init__(self, books: Iterable[Book] = ()) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._fill(books)

    def append(self, book: Book) -> None:
        """Add a book at the end of the list."""
        node = _Node(book)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def __iter__(self) -> Iterator[Book]:
        node = self._head
        while node is not None:
            yield node.book
            node = node.next

    def __len__(self) -> int:
        return self._size

    def render(self) -> str:
        """Return the listing, each book on a line preceded by a newline."""
        return _listing(book.describe() for book in self)


def main(argv: Optional[list[str]] = None) -> int:
    args = _input_parser("List the books stored in a file.").parse_args(argv)
    print(BookList(read_books(args.path)).render())
    return 0