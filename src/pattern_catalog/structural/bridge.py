"""
Bridge splits an abstraction from its implementation so both can vary.

Shapes and colours are two separate hierarchies. A shape holds a colour
instead of there being a ``RedCircle``, ``BlueCircle``, ``RedSquare`` ...
class for every combination.
"""
from abc import ABC, abstractmethod

from pattern_catalog.catalog.registry import register_pattern
from pattern_catalog.domain.console import Console
from pattern_catalog.domain.entry import Category

PATTERN_KEY = "bridge"

DIAGRAM = """
+--------------+    color    +-------------+
|   <<Shape>>  |<>---------->|  <<Color>>  |
+--------------+             +-------------+
| draw()       |             | fill(): str |
+--------------+             +-------------+
   ^        ^                  ^         ^
   |        |                  |         |
+--------+ +--------+       +-----+  +------+
| Circle | | Square |       | Red |  | Blue |
+--------+ +--------+       +-----+  +------+
"""


class Color(ABC):
    """Implementor."""

    @abstractmethod
    def fill(self) -> str:
        pass


class Red(Color):
    def fill(self) -> str:
        return "red"


class Blue(Color):
    def fill(self) -> str:
        return "blue"


class Shape(ABC):
    """Abstraction."""

    def __init__(self, color: Color, console: Console):
        self.color = color
        self.console = console

    @abstractmethod
    def draw(self) -> None:
        pass


class Circle(Shape):
    def __init__(self, radius: float, color: Color, console: Console):
        super().__init__(color, console)
        self.radius = radius

    def draw(self) -> None:
        self.console.write(f"Drawing circle of radius {self.radius} filled with {self.color.fill()}")


class Square(Shape):
    def __init__(self, side: float, color: Color, console: Console):
        super().__init__(color, console)
        self.side = side

    def draw(self) -> None:
        self.console.write(f"Drawing square of side {self.side} filled with {self.color.fill()}")


@register_pattern(PATTERN_KEY, "Bridge", Category.STRUCTURAL,
                  "Decouple an abstraction from its implementation so the two can vary.", DIAGRAM)
def demo(console: Console) -> None:
    Circle(10, Red(), console).draw()
    Square(4, Blue(), console).draw()
    Circle(3, Blue(), console).draw()
