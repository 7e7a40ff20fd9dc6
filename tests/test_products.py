import pytest

from listkit.products import (
    Product,
    main,
    parse_products,
    read_products,
    render_groups,
    split_by_price,
)

SAMPLE = "3\n1 Paine 12.5\n2 Lapte 8\n3 Cafea 10\n"
PAINE = Product(1, "Paine", 12.5)
LAPTE = Product(2, "Lapte", 8.0)
CAFEA = Product(3, "Cafea", 10.0)


@pytest.mark.parametrize(
    "text, expected",
    [(SAMPLE, [PAINE, LAPTE, CAFEA]), ("0", []), ("1 2 Lapte 8", [LAPTE])],
)
def test_parse_products(text, expected):
    assert parse_products(text) == expected


@pytest.mark.parametrize("text", ["2\n1 Paine 12.5", "1\nx Paine 1", "1\n1 Paine abc", "-1", ""])
def test_parse_products_rejects_bad_input(text):
    with pytest.raises(ValueError):
        parse_products(text)


def test_read_products_from_file(tmp_path):
    source = tmp_path / "products.txt"
    source.write_text(SAMPLE)
    assert read_products(source) == [PAINE, LAPTE, CAFEA]


def test_describe_format():
    assert PAINE.describe() == "Cod = 1, Denumire = Paine, Pret = 12.50"


@pytest.mark.parametrize(
    "threshold, expected",
    [(10.0, [[PAINE, CAFEA], [LAPTE]]), (100, [[], [PAINE, LAPTE, CAFEA]])],
)
def test_split_by_price(threshold, expected):
    assert split_by_price([PAINE, LAPTE, CAFEA], threshold) == expected


def test_split_by_price_default_threshold_is_inclusive():
    assert split_by_price([CAFEA]) == [[CAFEA], []]


def test_render_groups_numbers_sub_lists():
    text = render_groups([[PAINE, CAFEA], [LAPTE]])
    assert text.split("\n") == [
        "",
        "Sublista: 1",
        PAINE.describe(),
        CAFEA.describe(),
        "Sublista: 2",
        LAPTE.describe(),
    ]


def test_render_groups_shows_empty_group_header():
    apa = Product(5, "Apa", 2)
    assert render_groups([[], [apa]]).split("\n") == ["", "Sublista: 1", "Sublista: 2", apa.describe()]


def test_main_prints_groups(tmp_path, capsys):
    source = tmp_path / "products.txt"
    source.write_text(SAMPLE)
    assert main([str(source)]) == 0
    assert capsys.readouterr().out == render_groups([[PAINE, CAFEA], [LAPTE]]) + "\n"