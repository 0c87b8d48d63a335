"""
Decorator adds responsibilities to an object by wrapping it.

Each decorator is itself a ``Coffee`` and holds the coffee it decorates,
so extras can be stacked in any order and any number.
"""
from abc import ABC, abstractmethod

from pattern_catalog.catalog.registry import register_pattern
from pattern_catalog.domain.console import Console
from pattern_catalog.domain.entry import Category

PATTERN_KEY = "decorator"

DIAGRAM = """
+------------------+
|    <<Coffee>>    |<-----------------+
+------------------+                  |
| cost()           |                  | wraps
| description()    |                  |
+------------------+                  |
     ^         ^                      |
     |         |                      |
+--------------+  +-----------------+ |
| SimpleCoffee |  | CoffeeDecorator |<>
+--------------+  +-----------------+
                     ^           ^
                     |           |
            +---------------+ +----------------+
            | MilkDecorator | | SugarDecorator |
            +---------------+ +----------------+
"""


class Coffee(ABC):
    @abstractmethod
    def cost(self) -> float:
        pass

    @abstractmethod
    def description(self) -> str:
        pass


class SimpleCoffee(Coffee):
    def cost(self) -> float:
        return 2.0

    def description(self) -> str:
        return "Simple coffee"


class CoffeeDecorator(Coffee):
    def __init__(self, coffee: Coffee):
        self.coffee = coffee

    def cost(self) -> float:
        return self.coffee.cost()

    def description(self) -> str:
        return self.coffee.description()


class MilkDecorator(CoffeeDecorator):
    def cost(self) -> float:
        return self.coffee.cost() + 0.5

    def description(self) -> str:
        return self.coffee.description() + ", milk"


class SugarDecorator(CoffeeDecorator):
    def cost(self) -> float:
        return self.coffee.cost() + 0.2

    def description(self) -> str:
        return self.coffee.description() + ", sugar"


@register_pattern(PATTERN_KEY, "Decorator", Category.STRUCTURAL,
                  "Attach extra behaviour to an object by wrapping it.", DIAGRAM)
def demo(console: Console) -> None:
    coffee: Coffee = SimpleCoffee()
    console.write(f"{coffee.description()}: ${coffee.cost():.2f}")

    coffee = MilkDecorator(coffee)
    console.write(f"{coffee.description()}: ${coffee.cost():.2f}")

    coffee = SugarDecorator(coffee)
    console.write(f"{coffee.description()}: ${coffee.cost():.2f}")
