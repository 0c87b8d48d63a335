"""
Strategy swaps an algorithm behind a common interface.

The shopping cart knows how much to charge but not how to charge it. The
payment method is handed in at checkout, so supporting a new provider means
writing one more strategy class.
"""
from abc import ABC, abstractmethod
from typing import List, Tuple

from pattern_catalog.catalog.registry import register_pattern
from pattern_catalog.domain.console import Console
from pattern_catalog.domain.entry import Category

PATTERN_KEY = "strategy"

DIAGRAM = """
+----------------+        +---------------------+
|  ShoppingCart  |------->| <<PaymentStrategy>> |
+----------------+        +---------------------+
| add(item, amt) |        | pay(amount)         |
| total()        |        +---------------------+
| pay(strategy)  |           ^               ^
+----------------+           |               |
                 +-------------------+ +---------------+
                 | CreditCardPayment | | PayPalPayment |
                 +-------------------+ +---------------+
"""


class PaymentStrategy(ABC):
    @abstractmethod
    def pay(self, amount: float) -> None:
        pass


class CreditCardPayment(PaymentStrategy):
    def __init__(self, holder: str, card_number: str, console: Console):
        self.holder = holder
        self.card_number = card_number
        self.console = console

    def pay(self, amount: float) -> None:
        self.console.write(f"{amount} paid with credit card ending in {self.card_number[-4:]}")


class PayPalPayment(PaymentStrategy):
    def __init__(self, email: str, console: Console):
        self.email = email
        self.console = console

    def pay(self, amount: float) -> None:
        self.console.write(f"{amount} paid using PayPal account {self.email}")


class ShoppingCart:
    def __init__(self):
        self.items: List[Tuple[str, float]] = []

    def add(self, item: str, price: float) -> None:
        self.items.append((item, price))

    def total(self) -> float:
        return sum(price for _, price in self.items)

    def pay(self, strategy: PaymentStrategy) -> None:
        strategy.pay(self.total())


@register_pattern(PATTERN_KEY, "Strategy", Category.BEHAVIORAL,
                  "Select an interchangeable algorithm at runtime.", DIAGRAM)
def demo(console: Console) -> None:
    cart = ShoppingCart()
    cart.add("Keyboard", 40)
    cart.add("Mouse", 20)

    cart.pay(CreditCardPayment("Jane Doe", "4111111111111234", console))
    cart.pay(PayPalPayment("jane@example.com", console))
