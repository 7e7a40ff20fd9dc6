import pytest

from listkit.books import Book, parse_books, read_books

SAMPLE = "2\n1 Ion 2 10.5 20\n2 Baltagul 1 7.25\n"


def test_describe_lists_code_title_and_prices():
    book = Book(1, "Ion", (10.5, 20.0))
    assert book.describe() == "Cod = 1, Titlu = Ion, Nr. preturi = 2 Pret = 10.50 Pret = 20.00"


def test_describe_with_trailing_comma():
    book = Book(1, "Ion", (10.5, 20.0))
    assert book.describe(trailing_comma=True) == (
        "Cod = 1, Titlu = Ion, Nr. preturi = 2 Pret = 10.50, Pret = 20.00,"
    )


def test_describe_pads_price_to_width_five():
    assert Book(3, "A", (5.5,)).describe().endswith("Pret =  5.50")


def test_describe_without_prices():
    assert Book(4, "Nimic").describe().endswith("Nr. preturi = 0")


def test_prices_are_stored_as_float_tuple():
    book = Book(1, "Ion", [1, 2])
    assert book.prices == (1.0, 2.0)


def test_parse_books_reads_every_field():
    assert parse_books(SAMPLE) == [
        Book(1, "Ion", (10.5, 20.0)),
        Book(2, "Baltagul", (7.25,)),
    ]


def test_parse_books_zero_count():
    assert parse_books("0") == []


@pytest.mark.parametrize(
    "text",
    ["", "2\n1 Ion 1 3.0\n", "1\nx Ion 1 3.0", "1\n1 Ion 1 abc", "-1", "1\n1 Ion -2"],
)
def test_parse_books_rejects_malformed_input(text):
    with pytest.raises(ValueError):
        parse_books(text)


def test_read_books_matches_parse(tmp_path):
    path = tmp_path / "books.txt"
    path.write_text(SAMPLE)
    assert read_books(path) == parse_books(SAMPLE)


def test_read_books_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_books(tmp_path / "absent.txt")