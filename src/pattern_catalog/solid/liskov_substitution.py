"""
Liskov Substitution: subclasses must be usable wherever the base class is.

Before, every ``Bird`` can ``fly``, so ``Ostrich`` has to break that
promise by raising. Code written against ``Bird`` blows up when handed an
ostrich. After, only ``FlyingBird`` promises to fly.
"""
from abc import ABC, abstractmethod
from typing import List

from pattern_catalog.catalog.registry import register_pattern
from pattern_catalog.domain.console import Console
from pattern_catalog.domain.entry import Category
from pattern_catalog.domain.exceptions import UnsupportedOperationError

PATTERN_KEY = "liskov-substitution"

DIAGRAM = """
Before:                      After:
+----------+                 +----------+
|   Bird   |                 |   Bird   |
+----------+                 +----------+
| fly()    |                 | eat()    |
+----------+                 +----------+
  ^      ^                     ^      ^
  |      |                     |      |
Sparrow Ostrich (raises!)  FlyingBird  Ostrich
                            | fly() |
                               ^
                               |
                            Sparrow
"""


# Before
class Bird:
    def fly(self) -> str:
        return "Flying"


class Sparrow(Bird):
    def fly(self) -> str:
        return "Sparrow is flying"


class Ostrich(Bird):
    def fly(self) -> str:
        raise UnsupportedOperationError("Ostrich cannot fly")


# After
class BirdBase(ABC):
    def __init__(self, name: str):
        self.name = name

    def eat(self) -> str:
        return f"{self.name} is eating"


class FlyingBird(BirdBase):
    @abstractmethod
    def fly(self) -> str:
        pass


class SparrowBird(FlyingBird):
    def __init__(self):
        super().__init__("Sparrow")

    def fly(self) -> str:
        return "Sparrow is flying"


class OstrichBird(BirdBase):
    def __init__(self):
        super().__init__("Ostrich")

    def run(self) -> str:
        return "Ostrich is running"


def make_birds_fly(birds: List[FlyingBird]) -> List[str]:
    return [bird.fly() for bird in birds]


@register_pattern(PATTERN_KEY, "Liskov Substitution Principle", Category.SOLID,
                  "Subtypes must be substitutable for their base types.", DIAGRAM)
def demo(console: Console) -> None:
    console.write("Before:")
    for bird in (Sparrow(), Ostrich()):
        try:
            console.write(bird.fly())
        except UnsupportedOperationError as e:
            console.write(f"Error: {e}")

    console.write("After:")
    for line in make_birds_fly([SparrowBird()]):
        console.write(line)
    ostrich = OstrichBird()
    console.write(ostrich.eat())
    console.write(ostrich.run())
