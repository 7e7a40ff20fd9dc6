# listkit

Small, readable list structures over simple catalogue records: a singly
linked list, a doubly linked list, a doubly linked circular list, a list of
lists, a singly linked circular list and a hash table with separate chaining.

Every structure holds plain, immutable records (books, products, students,
train wagons), reads them from whitespace-separated text and renders them as
text lines. There are no third-party dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Input files

Every input file starts with the number of records, followed by the records
themselves, separated by whitespace. Names, titles and company names are
single words. A missing value, a non-numeric value where a number is expected
or a negative count raises `ValueError`.

| Record    | Fields, in order                                     |
|-----------|------------------------------------------------------|
| `Book`    | code, title, number of prices, then that many prices |
| `Product` | code, name, price                                    |
| `Student` | registration number, name, average, age             |
| `Wagon`   | wagon number, seats, passengers, company name        |

A book file, for example:

```
3
1 Ion 2 25.5 30.0
2 Baltagul 1 19.99
3 Enigma 3 10 12.5 15
```

## Commands

Every command takes the path of its data file as an optional positional
argument; when it is left out, `fisier.txt` in the current directory is read.
Output goes to standard output.

| Command                  | What it does                                                              | Options                                                                   |
|--------------------------|---------------------------------------------------------------------------|---------------------------------------------------------------------------|
| `listkit-books`          | loads books into a singly linked list and prints them                     |                                                                           |
| `listkit-books-doubly`   | prints books forward and backward, removes one by title, prints again     | `--remove TITLE` (default `Baltagul`)                                     |
| `listkit-books-circular` | prints books, removes one by title, prints again, then prints backward    | `--remove TITLE` (default `Baltagul`)                                     |
| `listkit-products`       | splits products into two sub-lists by price and prints each sub-list      | `--threshold` (default `10`)                                              |
| `listkit-hash`           | fills a chained hash table with products, removes one by code, reprints   | `--size` (default `23`), `--remove CODE` (default `47`)                   |
| `listkit-students`       | prints students, drops those with an average in a range, prints the rest  | `--low` (default `7.5`), `--high` (default `9.0`), `--report`             |
| `listkit-wagons`         | prints wagons, swaps passengers of wagons k-1 and k, prints, then reverse | `--position` (default `2`), `--report`                                    |

`listkit-students` and `listkit-wagons` also write the remaining records, one
per line, to the `--report` file (default `dezalocare_fisier.txt`); nothing is
written when no records are left.

```
listkit-books books.txt
listkit-hash products.txt --size 11 --remove 5
```

## Library use

### Books

```python
from listkit.books import parse_books, read_books
from listkit.simple_list import BookList
from listkit.doubly_linked import DoublyLinkedBookList
from listkit.circular_list import CircularBookList

books = read_books("books.txt")

simple = BookList(books)
print(len(simple))
print(simple.render())

doubly = DoublyLinkedBookList(books)
removed = doubly.remove_title("Baltagul")   # True if a book was removed
print(doubly.render(reverse=True))

ring = CircularBookList(books)
for book in reversed(ring):
    print(book.describe())
```

`Book.describe()` gives one line with the code, title, number of prices and
each price to two decimals; `describe(trailing_comma=True)` puts a comma after
every price, which is how `DoublyLinkedBookList.render` lists books.

`remove_title` removes a single book: the head if it matches, otherwise the
tail if it matches, otherwise the first matching book. All three book lists
support `append`, iteration and `len`; the doubly linked and circular lists
also support `reversed`.

### Products: a list of lists and a hash table

```python
from listkit.products import read_products, split_by_price, render_groups
from listkit.hash_table import ChainedHashTable

products = read_products("products.txt")

groups = split_by_price(products, 10)   # [priced >= 10, the rest]
print(render_groups(groups))

table = ChainedHashTable(23)
for product in products:
    table.insert(product)
removed = table.remove(47)   # KeyError if no product has this code
print(table.render())
```

`ChainedHashTable.hash_code` places a product by its code modulo the table
size; `hash_name` is an alternative bucket function using the first character
of a name, which `insert` does not use. `buckets()` yields the position and a
copy of the chain of every non-empty bucket, and iterating the table yields
the stored products bucket by bucket. A table size below 1 raises
`ValueError`.

### Students

```python
from listkit.students import parse_students, CircularStudentList

with open("students.txt") as source:
    students = CircularStudentList(parse_students(source.read()))
count = students.remove_average_between(7.5, 9.0)   # bounds are inclusive
print(students.render())
students.write_report("students_report.txt")
```

### Wagons

```python
from listkit.wagons import parse_wagons, WagonTrain

with open("wagons.txt") as source:
    train = WagonTrain(parse_wagons(source.read()))
train.swap_passengers(2)
print(train.render(reverse=True))
train.write_report("train_report.txt")
```

`swap_passengers(k)` exchanges the passenger counts of wagons `k - 1` and `k`
(counting from 1); an empty train, a `k` of 1 or less, or a train shorter than
`k` raises `ValueError`.

## What it does not do

The structures live in memory only. Apart from the plain-text report files
written by `write_report`, nothing is saved, and there is no way to load a
report back in.