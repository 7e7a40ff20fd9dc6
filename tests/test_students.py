import pytest

from listkit.students import CircularStudentList, Student, main, parse_students

SAMPLE = "4\n1 Ana 9.5 20\n2 Bogdan 8 21\n3 Carmen 7.5 22\n4 Dan 6 23\n"
CLASS = (
    Student(1, "Ana", 9.5, 20),
    Student(2, "Bogdan", 8.0, 21),
    Student(3, "Carmen", 7.5, 22),
    Student(4, "Dan", 6.0, 23),
)


def test_parse_students_fields():
    assert parse_students(SAMPLE) == list(CLASS)


@pytest.mark.parametrize("text", ["1\n1 Ana 9.5", "1\n1 Ana x 20", "-2"])
def test_parse_students_rejects_bad_input(text):
    with pytest.raises(ValueError):
        parse_students(text)


def test_describe_format():
    assert CLASS[0].describe() == "Nr matricol = 1, Nume = Ana, Media =  9.50, Varsta = 20"


def test_ring_iterates_each_once_in_order():
    ring = CircularStudentList(CLASS)
    assert list(ring) == list(CLASS)
    assert list(ring) == list(ring)
    assert len(ring) == 4


@pytest.mark.parametrize(
    "ranges, removed, names",
    [
        ([(7.5, 9.0)], [2], ["Ana", "Dan"]),
        ([(9.5, 9.5), (0, 6)], [1, 1], ["Bogdan", "Carmen"]),
        ([(0, 10)], [4], []),
        ([(11, 12)], [0], ["Ana", "Bogdan", "Carmen", "Dan"]),
    ],
)
def test_remove_inclusive_ranges(ranges, removed, names):
    ring = CircularStudentList(CLASS)
    assert [ring.remove_average_between(low, high) for low, high in ranges] == removed
    assert [s.name for s in ring] == names
    assert len(ring) == len(names)
    ring.append(Student(5, "Eva", 5, 19))
    assert [s.name for s in ring] == names + ["Eva"]


def test_remove_on_empty_list():
    assert CircularStudentList().remove_average_between(0, 10) == 0


@pytest.mark.parametrize("count", [4, 0])
def test_render_lines_match_students(count):
    text = CircularStudentList(CLASS[:count]).render()
    assert text.split("\n") == ["", *(s.describe() for s in CLASS[:count])]


@pytest.mark.parametrize(
    "count, expected",
    [(4, [s.describe() for s in CLASS]), (0, None)],
)
def test_write_report(tmp_path, count, expected):
    path = tmp_path / "report.txt"
    CircularStudentList(CLASS[:count]).write_report(path)
    assert (path.read_text().splitlines() if path.exists() else None) == expected


def test_main(tmp_path, capsys):
    source = tmp_path / "students.txt"
    source.write_text(SAMPLE)
    report = tmp_path / "out.txt"
    assert main([str(source), "--report", str(report)]) == 0
    assert "Stergere studenti cu media intre 7.5 si 9.0..." in capsys.readouterr().out
    assert report.read_text().splitlines() == [CLASS[0].describe(), CLASS[3].describe()]