"""
Visitor adds an operation to a family of classes without changing them.

Cart items only know how to ``accept`` a visitor. Pricing lives in the
visitor, which gets one method per item type through double dispatch. A
new operation (tax, shipping weight) is a new visitor, not a change to
every item.
"""
from abc import ABC, abstractmethod
from typing import List

from pattern_catalog.catalog.registry import register_pattern
from pattern_catalog.domain.console import Console
from pattern_catalog.domain.entry import Category

PATTERN_KEY = "visitor"

DIAGRAM = """
+-------------------+          +-------------------------+
|  <<CartElement>>  |          | <<ShoppingCartVisitor>> |
+-------------------+          +-------------------------+
| accept(visitor)   |--------->| visit_book(book)        |
+-------------------+          | visit_fruit(fruit)      |
    ^          ^               +-------------------------+
    |          |                           ^
+------+   +-------+          +--------------------------+
| Book |   | Fruit |          | ShoppingCartPriceVisitor |
+------+   +-------+          +--------------------------+
"""

BOOK_DISCOUNT_THRESHOLD = 50
BOOK_DISCOUNT = 5


class CartElement(ABC):
    @abstractmethod
    def accept(self, visitor: "ShoppingCartVisitor") -> float:
        pass


class Book(CartElement):
    def __init__(self, isbn: str, price: float):
        self.isbn = isbn
        self.price = price

    def accept(self, visitor: "ShoppingCartVisitor") -> float:
        return visitor.visit_book(self)


class Fruit(CartElement):
    def __init__(self, name: str, price_per_kg: float, weight: float):
        self.name = name
        self.price_per_kg = price_per_kg
        self.weight = weight

    def accept(self, visitor: "ShoppingCartVisitor") -> float:
        return visitor.visit_fruit(self)


class ShoppingCartVisitor(ABC):
    @abstractmethod
    def visit_book(self, book: Book) -> float:
        pass

    @abstractmethod
    def visit_fruit(self, fruit: Fruit) -> float:
        pass


class ShoppingCartPriceVisitor(ShoppingCartVisitor):
    def __init__(self, console: Console):
        self.console = console

    def visit_book(self, book: Book) -> float:
        cost = book.price
        if cost > BOOK_DISCOUNT_THRESHOLD:
            cost -= BOOK_DISCOUNT
        self.console.write(f"Book ISBN {book.isbn} cost = {cost}")
        return cost

    def visit_fruit(self, fruit: Fruit) -> float:
        cost = fruit.price_per_kg * fruit.weight
        self.console.write(f"{fruit.name} cost = {cost}")
        return cost


def calculate_total(items: List[CartElement], visitor: ShoppingCartVisitor) -> float:
    return sum(item.accept(visitor) for item in items)


@register_pattern(PATTERN_KEY, "Visitor", Category.BEHAVIORAL,
                  "Move an operation over a class family into a separate visitor object.", DIAGRAM)
def demo(console: Console) -> None:
    items = [
        Book("1234", 20),
        Book("5678", 100),
        Fruit("Banana", 10, 2),
        Fruit("Apple", 5, 5),
    ]
    total = calculate_total(items, ShoppingCartPriceVisitor(console))
    console.write(f"Total Cost = {total}")
