"""Train wagons in a doubly linked list."""

from __future__ import annotations

import argparse
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Iterable, Iterator, Optional

from listkit.books import DEFAULT_INPUT, _Tokens

DEFAULT_REPORT = "dezalocare_fisier.txt"
DEFAULT_POSITION = 2
SWAP_HEADER = "\n\n---------------Interschimbare---------------\n"
REVERSE_HEADER = "\n\n---------------Vector---------------\n"


@dataclass(frozen=True)
class Wagon:
    """A wagon with its number, seat count, passenger count and operating company."""

    number: int
    seats: int
    passengers: int
    company: str

    def describe(self) -> str:
        """Return the one-line listing of this wagon."""
        return (
            f"Nr vagon = {self.number}, Nr locuri = {self.seats}, "
            f"Nr pasageri = {self.passengers}, Nume companie = {self.company}"
        )

    def report_line(self) -> str:
        """Return the line written for this wagon in a report file."""
        return (
            f"Nr. vagoane = {self.number}, Nr. locuri = {self.seats}, "
            f"Nr. pasageri = {self.passengers}, Nume companie = {self.company}"
        )


def parse_wagons(text: str) -> list[Wagon]:
    """Parse a wagon count followed by number, seats, passengers and company per wagon."""
    tokens = _Tokens(text)
    wagons = []
    for _ in range(tokens.count()):
        number = tokens.integer()
        seats = tokens.integer()
        passengers = tokens.integer()
        company = tokens.word()
        wagons.append(Wagon(number, seats, passengers, company))
    return wagons


class _Node:
    __slots__ = ("wagon", "next", "prev")

    def __init__(self, wagon: Wagon) -> None:
        self.wagon = wagon
        self.next: Optional[_Node] = None
        self.prev: Optional[_Node] = None


class WagonTrain:
    """Wagons in order, walkable from either end."""

    def __init__(self, wagons: Iterable[Wagon] = ()) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._size = 0
        for wagon in wagons:
            self.append(wagon)

    def append(self, wagon: Wagon) -> None:
        """Couple a wagon at the end."""
        node = _Node(wagon)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
            node.prev = self._tail
        self._tail = node
        self._size += 1

    def _nodes(self) -> Iterator[_Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[Wagon]:
        return (node.wagon for node in self._nodes())

    def __reversed__(self) -> Iterator[Wagon]:
        node = self._tail
        while node is not None:
            yield node.wagon
            node = node.prev

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"WagonTrain({list(self)!r})"

    def swap_passengers(self, k: int) -> None:
        """Swap the passenger counts of wagons k-1 and k, counted from 1.

        Raises ValueError if the train is empty, k is below 2 or there are fewer than k wagons.
        """
        if self._head is None or k <= 1:
            raise ValueError("the train is empty or position k is invalid")
        if k > self._size:
            raise ValueError(f"the train has fewer than {k} wagons")
        first = next(node for position, node in enumerate(self._nodes(), 1) if position == k - 1)
        second = first.next
        assert second is not None
        first.wagon, second.wagon = (
            replace(first.wagon, passengers=second.wagon.passengers),
            replace(second.wagon, passengers=first.wagon.passengers),
        )

    def render(self, reverse: bool = False) -> str:
        """Return the listing from first to last wagon, or from last to first."""
        wagons = reversed(self) if reverse else iter(self)
        return "".join(f"\n{wagon.describe()}" for wagon in wagons)

    def write_report(self, path: str | Path) -> None:
        """Write one line per wagon to ``path``; nothing is written for an empty train."""
        if self._head is None:
            return
        with open(path, "w") as report:
            report.writelines(f"{wagon.report_line()}\n" for wagon in self)


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="List wagons, swap passengers of two neighbours, list them backwards."
    )
    parser.add_argument("path", nargs="?", default=DEFAULT_INPUT)
    parser.add_argument("--position", type=int, default=DEFAULT_POSITION)
    parser.add_argument("--report", default=DEFAULT_REPORT)
    args = parser.parse_args(argv)

    train = WagonTrain(parse_wagons(Path(args.path).read_text()))
    parts = [train.render(), SWAP_HEADER]
    k = args.position
    if train and k > 1 and k > len(train):
        parts.append("Eroare: Nu exista suficienti noduri in lista.\n")
    elif not train or k <= 1:
        parts.append("Eroare: Lista este vida sau pozitia k este invalida.\n")
    else:
        train.swap_passengers(k)
        parts.append(f"Numarul de pasageri a fost schimbat intre nodurile {k - 1} si {k}.\n")
    parts += [train.render(), REVERSE_HEADER]
    parts.append(train.render(reverse=True) if train else "Lista este goala.\n")
    print("".join(parts))
    train.write_report(args.report)
    return 0