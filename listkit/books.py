"""Book records and the whitespace-separated text format they are read from."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterator

DEFAULT_INPUT = "fisier.txt"


@dataclass(frozen=True)
class Book:
    """A book with a numeric code, a one-word title and a list of prices."""

    code: int
    title: str
    prices: tuple[float, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "prices", tuple(float(p) for p in self.prices))

    def describe(self, trailing_comma: bool = False) -> str:
        """Return the one-line listing of this book."""
        suffix = "," if trailing_comma else ""
        head = f"Cod = {self.code}, Titlu = {self.title}, Nr. preturi = {len(self.prices)}"
        return head + "".join(f" Pret = {price:5.2f}{suffix}" for price in self.prices)


class _Tokens:
    """Reads whitespace-separated values one after another."""

    def __init__(self, text: str) -> None:
        self._items: Iterator[str] = iter(text.split())

    def word(self) -> str:
        try:
            return next(self._items)
        except StopIteration:
            raise ValueError("unexpected end of input") from None

    def integer(self) -> int:
        token = self.word()
        try:
            return int(token)
        except ValueError:
            raise ValueError(f"expected an integer, got {token!r}") from None

    def count(self) -> int:
        value = self.integer()
        if value < 0:
            raise ValueError(f"count must not be negative, got {value}")
        return value

    def number(self) -> float:
        token = self.word()
        try:
            return float(token)
        except ValueError:
            raise ValueError(f"expected a number, got {token!r}") from None


def parse_books(text: str) -> list[Book]:
    """Parse a book count followed by code, title, price count and prices per book."""
    tokens = _Tokens(text)
    books = []
    for _ in range(tokens.count()):
        code = tokens.integer()
        title = tokens.word()
        prices = tuple(tokens.number() for _ in range(tokens.count()))
        books.append(Book(code, title, prices))
    return books


def read_books(path: str | Path) -> list[Book]:
    """Read and parse the books stored in the file at ``path``."""
    return parse_books(Path(path).read_text())