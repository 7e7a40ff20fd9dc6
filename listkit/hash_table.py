"""A hash table of products with separate chaining."""

from __future__ import annotations

import argparse
from typing import Iterator, Optional

from listkit.books import DEFAULT_INPUT
from listkit.products import Product, read_products

DEFAULT_SIZE = 23
DEFAULT_REMOVED_CODE = 47
REMOVE_HEADER = "\n\n------------------Stergere------------------\n"


class ChainedHashTable:
    """Products placed in buckets by code, colliding products chained in insertion order."""

    def __init__(self, size: int = DEFAULT_SIZE) -> None:
        if size <= 0:
            raise ValueError(f"table size must be positive, got {size}")
        self._buckets: list[list[Product]] = [[] for _ in range(size)]

    @property
    def size(self) -> int:
        return len(self._buckets)

    def hash_code(self, code: int) -> int:
        """Return the bucket for a product code."""
        return code % self.size

    def hash_name(self, name: str) -> int:
        """Return the bucket for a product name, chosen by its first character."""
        return (ord(name[0]) if name else 0) % self.size

    def insert(self, product: Product) -> None:
        """Add a product at the end of the chain for its code."""
        self._buckets[self.hash_code(product.code)].append(product)

    def remove(self, code: int) -> Product:
        """Remove and return the first product with ``code``.

        Raises KeyError if there is none.
        """
        chain = self._buckets[self.hash_code(code)]
        for position, product in enumerate(chain):
            if product.code == code:
                del chain[position]
                return product
        raise KeyError(code)

    def __iter__(self) -> Iterator[Product]:
        for chain in self._buckets:
            yield from chain

    def __len__(self) -> int:
        return sum(len(chain) for chain in self._buckets)

    def buckets(self) -> Iterator[tuple[int, list[Product]]]:
        """Yield each non-empty bucket's position and a copy of its chain, in order."""
        for position, chain in enumerate(self._buckets):
            if chain:
                yield position, list(chain)

    def render(self) -> str:
        """Return the listing of every non-empty bucket."""
        parts = []
        for position, chain in self.buckets():
            parts.append(f"\nPozitia = {position}")
            parts.extend(f"\n{product.describe()}" for product in chain)
        return "".join(parts)


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Store products in a hash table, then remove one by code."
    )
    parser.add_argument("path", nargs="?", default=DEFAULT_INPUT)
    parser.add_argument("--size", type=int, default=DEFAULT_SIZE)
    parser.add_argument("--remove", type=int, default=DEFAULT_REMOVED_CODE, metavar="CODE")
    args = parser.parse_args(argv)

    table = ChainedHashTable(args.size)
    for product in read_products(args.path):
        table.insert(product)
    parts = [table.render(), REMOVE_HEADER]
    try:
        table.remove(args.remove)
    except KeyError:
        parts.append(f"\nProdusul cu codul {args.remove} nu a fost gasit in tabela")
    else:
        parts.append(f"\nProdusul cu codul {args.remove} a fost sters")
    parts.append(table.render())
    print("".join(parts))
    return 0