"""
Iterator walks a collection without exposing how it is stored.

The book shelf hands out an iterator with the classic ``has_next``/``next``
pair, and the same object also speaks Python's iterator protocol, so a
plain ``for`` loop works on the shelf too.
"""
from typing import List

from pattern_catalog.catalog.registry import register_pattern
from pattern_catalog.domain.console import Console
from pattern_catalog.domain.entry import Category

PATTERN_KEY = "iterator"

DIAGRAM = """
+-------------------+  creates  +---------------------+
|     BookShelf     |---------->|  BookShelfIterator  |
+-------------------+           +---------------------+
| add(book)         |           | has_next(): bool    |
| iterator()        |           | next(): str         |
| __iter__()        |           | __next__()          |
+-------------------+           +---------------------+
"""


class BookShelfIterator:
    def __init__(self, books: List[str]):
        self._books = books
        self._position = 0

    def has_next(self) -> bool:
        return self._position < len(self._books)

    def next(self) -> str:
        if not self.has_next():
            raise StopIteration
        book = self._books[self._position]
        self._position += 1
        return book

    def __iter__(self) -> "BookShelfIterator":
        return self

    def __next__(self) -> str:
        return self.next()


class BookShelf:
    def __init__(self):
        self._books: List[str] = []

    def add(self, title: str) -> None:
        self._books.append(title)

    def iterator(self) -> BookShelfIterator:
        return BookShelfIterator(list(self._books))

    def __iter__(self) -> BookShelfIterator:
        return self.iterator()

    def __len__(self) -> int:
        return len(self._books)


@register_pattern(PATTERN_KEY, "Iterator", Category.BEHAVIORAL,
                  "Traverse a collection without exposing its representation.", DIAGRAM)
def demo(console: Console) -> None:
    shelf = BookShelf()
    shelf.add("Design Patterns")
    shelf.add("Refactoring")
    shelf.add("Clean Code")

    it = shelf.iterator()
    while it.has_next():
        console.write(f"Book: {it.next()}")

    for title in shelf:
        console.write(f"Again: {title}")
