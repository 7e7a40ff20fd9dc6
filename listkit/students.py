"""Student records in a singly linked circular list."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, Optional

from listkit.books import _Tokens
from listkit.simple_list import _Chain, _input_parser, _listing

DEFAULT_REPORT = "dezalocare_fisier.txt"
DEFAULT_LOW = 7.5
DEFAULT_HIGH = 9.0


@dataclass(frozen=True)
class Student:
    """A student with a registration number, a one-word name, an average and an age."""

    registration: int
    name: str
    average: float
    age: int

    def describe(self) -> str:
        """Return the one-line listing of this student."""
        return (
            f"Nr matricol = {self.registration}, Nume = {self.name}, "
            f"Media = {self.average:5.2f}, Varsta = {self.age}"
        )


def parse_students(text: str) -> list[Student]:
    """Parse a student count followed by number, name, average and age per student."""
    tokens = _Tokens(text)
    return [
        Student(tokens.integer(), tokens.word(), tokens.number(), tokens.integer())
        for _ in range(tokens.count())
    ]


class _Node:
    __slots__ = ("student", "next")

    def __init__(self, student: Student) -> None:
        self.student = student
        self.next: _Node = self


class CircularStudentList(_Chain[Student]):
    """Students in a ring whose last node links back to the first."""

    def __init__(self, students: Iterable[Student] = ()) -> None:
        self._tail: Optional[_Node] = None
        self._fill(students)

    def append(self, student: Student) -> None:
        """Add a student after the last one."""
        node = _Node(student)
        if self._tail is not None:
            node.next = self._tail.next
            self._tail.next = node
        self._tail = node
        self._size += 1

    def __iter__(self) -> Iterator[Student]:
        if self._tail is None:
            return
        node = self._tail.next
        for _ in range(self._size):
            yield node.student
            node = node.next

    def __len__(self) -> int:
        return self._size

    def remove_average_between(self, low: float, high: float) -> int:
        """Remove every student whose average lies in [low, high]; return how many went."""
        if self._tail is None:
            return 0
        removed = 0
        prev = self._tail
        node = prev.next
        for _ in range(self._size):
            following = node.next
            if low <= node.student.average <= high:
                prev.next = following
                removed += 1
                if node is self._tail:
                    self._tail = prev
            else:
                prev = node
            node = following
        self._size -= removed
        if self._size == 0:
            self._tail = None
        return removed

    def render(self) -> str:
        """Return the listing once round the ring."""
        return _listing(student.describe() for student in self)

    def write_report(self, path: str | Path) -> None:
        """Write one line per student to ``path``; nothing is written for an empty list."""
        if self._tail is None:
            return
        with open(path, "w") as report:
            report.writelines(f"{student.describe()}\n" for student in self)


def main(argv: Optional[list[str]] = None) -> int:
    parser = _input_parser(
        "List students, drop those with averages in a range, and save the rest."
    )
    parser.add_argument("--low", type=float, default=DEFAULT_LOW)
    parser.add_argument("--high", type=float, default=DEFAULT_HIGH)
    parser.add_argument("--report", default=DEFAULT_REPORT)
    args = parser.parse_args(argv)

    students = CircularStudentList(parse_students(Path(args.path).read_text()))
    parts = [
        students.render(),
        f"\n\nStergere studenti cu media intre {args.low} si {args.high}...\n",
    ]
    students.remove_average_between(args.low, args.high)
    parts.append(students.render())
    print("".join(parts))
    students.write_report(args.report)
    return 0