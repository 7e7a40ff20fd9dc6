"""Product records, and products split into sub-lists by price."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional, Sequence

from listkit.books import _Tokens
from listkit.simple_list import _input_parser, _listing

DEFAULT_THRESHOLD = 10.0


@dataclass(frozen=True)
class Product:
    """A product with a numeric code, a one-word name and a price."""

    code: int
    name: str
    price: float

    def describe(self) -> str:
        """Return the one-line listing of this product."""
        return f"Cod = {self.code}, Denumire = {self.name}, Pret = {self.price:5.2f}"


def parse_products(text: str) -> list[Product]:
    """Parse a product count followed by code, name and price per product."""
    tokens = _Tokens(text)
    return [
        Product(tokens.integer(), tokens.word(), tokens.number())
        for _ in range(tokens.count())
    ]


def read_products(path: str | Path) -> list[Product]:
    """Read and parse the products stored in the file at ``path``."""
    return parse_products(Path(path).read_text())


def split_by_price(
    products: Iterable[Product], threshold: float = DEFAULT_THRESHOLD
) -> list[list[Product]]:
    """Split products into those priced at least ``threshold`` and the rest, keeping order."""
    expensive: list[Product] = []
    cheap: list[Product] = []
    for product in products:
        (expensive if product.price >= threshold else cheap).append(product)
    return [expensive, cheap]


def render_groups(groups: Iterable[Sequence[Product]]) -> str:
    """Return the listing of every sub-list, numbered from 1."""
    return "".join(
        f"\nSublista: {number}" + _listing(product.describe() for product in group)
        for number, group in enumerate(groups, start=1)
    )


def main(argv: Optional[list[str]] = None) -> int:
    parser = _input_parser("List products split into two sub-lists by price.")
    parser.add_argument("--threshold", type=float, default=DEFAULT_THRESHOLD)
    args = parser.parse_args(argv)
    print(render_groups(split_by_price(read_products(args.path), args.threshold)))
    return 0