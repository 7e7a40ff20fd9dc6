"""A doubly linked, non-circular list of books."""

from __future__ import annotations

import argparse
from abc import abstractmethod
from typing import Any, Iterable, Iterator, Optional

from listkit.books import Book, read_books
from listkit.simple_list import _Chain, _input_parser, _listing

REVERSE_HEADER = "\n\n--------------Traversare inversa--------------\n"
REMOVE_HEADER = "\n\n-----------------Stergere-----------------\n"
DEFAULT_REMOVED_TITLE = "Baltagul"


class _TwoWayBooks(_Chain[Book]):
    """Removal by title and rendering shared by the two-way book lists."""

    _trailing_comma = False

    @abstractmethod
    def _ends(self) -> Optional[tuple[Any, Any]]:
        """Return the head and tail nodes, or None when the list is empty."""

    @abstractmethod
    def _nodes(self) -> Iterator[Any]:
        """Yield the nodes from head to tail."""

    @abstractmethod
    def _unlink(self, node: Any) -> None:
        """Take ``node`` out of the list."""

    @abstractmethod
    def __reversed__(self) -> Iterator[Book]:
        """Yield the books from tail to head."""

    def _remove_by_title(self, title: str) -> bool:
        ends = self._ends()
        if ends is None:
            return False
        head, tail = ends
        if head.book.title == title:
            target = head
        elif tail.book.title == title:
            target = tail
        else:
            target = next((n for n in self._nodes() if n.book.title == title), None)
        if target is None:
            return False
        self._unlink(target)
        return True

    def _render_books(self, reverse: bool) -> str:
        books = reversed(self) if reverse else iter(self)
        return _listing(book.describe(trailing_comma=self._trailing_comma) for book in books)


def _removal_parser(description: str) -> argparse.ArgumentParser:
    """Return a parser taking an input path and the title to remove."""
    parser = _input_parser(description)
    parser.add_argument("--remove", default=DEFAULT_REMOVED_TITLE, metavar="TITLE")
    return parser


class _Node:
    __slots__ = ("book", "next", "prev")

    def __init__(self, book: Book) -> None:
        self.book = book
        self.next: Optional[_Node] = None
        self.prev: Optional[_Node] = None


class DoublyLinkedBookList(_TwoWayBooks):
    """Books in insertion order, walkable from either end."""

    _trailing_comma = True

    def __init__(self, books: Iterable[Book] = ()) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._fill(books)

    def append(self, book: Book) -> None:
        """Add a book at the tail."""
        node = _Node(book)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
            node.prev = self._tail
        self._tail = node
        self._size += 1

    def _ends(self) -> Optional[tuple[_Node, _Node]]:
        if self._head is None or self._tail is None:
            return None
        return self._head, self._tail

    def _nodes(self) -> Iterator[_Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[Book]:
        return (node.book for node in self._nodes())

    def __reversed__(self) -> Iterator[Book]:
        node = self._tail
        while node is not None:
            yield node.book
            node = node.prev

    def __len__(self) -> int:
        return self._size

    def _unlink(self, node: _Node) -> None:
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        node.next = node.prev = None
        self._size -= 1

    def remove_title(self, title: str) -> bool:
        """Remove one book with ``title``: the head first, then the tail, then the first match.

        Returns whether a book was removed.
        """
        return self._remove_by_title(title)

    def render(self, reverse: bool = False) -> str:
        """Return the listing from head to tail, or from tail to head."""
        return self._render_books(reverse)


def main(argv: Optional[list[str]] = None) -> int:
    args = _removal_parser("List books both ways, then remove one by title.").parse_args(argv)
    books = DoublyLinkedBookList(read_books(args.path))
    parts = [books.render(), REVERSE_HEADER, books.render(reverse=True), REMOVE_HEADER]
    books.remove_title(args.remove)
    parts.append(books.render())
    print("".join(parts))
    return 0