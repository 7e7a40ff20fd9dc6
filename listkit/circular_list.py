"""A doubly linked circular list of books."""

from __future__ import annotations

from typing import Iterable, Iterator, Optional

from listkit.books import Book, read_books
from listkit.doubly_linked import REVERSE_HEADER, _removal_parser, _TwoWayBooks

TRAVERSE_HEADER = "\n--------------Traversare--------------\n"
REMOVE_HEADER = "\n\n--------------Stergere--------------\n"

__all__ = [
    "REMOVE_HEADER",
    "REVERSE_HEADER",
    "TRAVERSE_HEADER",
    "CircularBookList",
    "main",
]


class _Node:
    __slots__ = ("book", "next", "prev")

    def __init__(self, book: Book) -> None:
        self.book = book
        self.next: _Node = self
        self.prev: _Node = self


def _walk(start: _Node, forward: bool) -> Iterator[_Node]:
    """Yield every node once round the ring, beginning at ``start``."""
    node = start
    while True:
        yield node
        node = node.next if forward else node.prev
        if node is start:
            return


class CircularBookList(_TwoWayBooks):
    """Books in a ring: the tail links forward to the head and the head back to the tail."""

    def __init__(self, books: Iterable[Book] = ()) -> None:
        self._head: Optional[_Node] = None
        self._fill(books)

    def append(self, book: Book) -> None:
        """Add a book after the current tail."""
        node = _Node(book)
        head = self._head
        if head is None:
            self._head = node
        else:
            tail = head.prev
            tail.next = node
            node.prev = tail
            node.next = head
            head.prev = node
        self._size += 1

    def _ends(self) -> Optional[tuple[_Node, _Node]]:
        if self._head is None:
            return None
        return self._head, self._head.prev

    def _nodes(self) -> Iterator[_Node]:
        if self._head is not None:
            yield from _walk(self._head, forward=True)

    def __iter__(self) -> Iterator[Book]:
        return (node.book for node in self._nodes())

    def __reversed__(self) -> Iterator[Book]:
        if self._head is not None:
            yield from (node.book for node in _walk(self._head.prev, forward=False))

    def __len__(self) -> int:
        return self._size

    def _unlink(self, node: _Node) -> None:
        if node.next is node:
            self._head = None
        else:
            node.prev.next = node.next
            node.next.prev = node.prev
            if node is self._head:
                self._head = node.next
        node.next = node.prev = node
        self._size -= 1

    def remove_title(self, title: str) -> bool:
        """Remove one book with ``title``: the head first, then the tail, then the first match.

        Returns whether a book was removed.
        """
        return self._remove_by_title(title)

    def render(self, reverse: bool = False) -> str:
        """Return the listing once round the ring, forwards or backwards."""
        return self._render_books(reverse)


def main(argv: Optional[list[str]] = None) -> int:
    parser = _removal_parser("List books, remove one by title, then list them backwards.")
    args = parser.parse_args(argv)
    books = CircularBookList(read_books(args.path))
    parts = [TRAVERSE_HEADER, books.render(), REMOVE_HEADER]
    books.remove_title(args.remove)
    parts += [books.render(), REVERSE_HEADER, books.render(reverse=True)]
    print("".join(parts))
    return 0