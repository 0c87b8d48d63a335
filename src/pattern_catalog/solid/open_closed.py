"""
Open/Closed: open for extension, closed for modification.

Before, the area calculator switches on the shape type, so every new
shape edits the calculator. After, each shape knows its own area and the
calculator never changes.
"""
import math
from abc import ABC, abstractmethod
from typing import Iterable

from pattern_catalog.catalog.registry import register_pattern
from pattern_catalog.domain.console import Console
from pattern_catalog.domain.entry import Category

PATTERN_KEY = "open-closed"

DIAGRAM = """
+------------------+        +-------------+
|  AreaCalculator  |------->|  <<Shape>>  |
+------------------+        +-------------+
| total(shapes)    |        | area()      |
+------------------+        +-------------+
                             ^     ^     ^
                             |     |     |
                      Rectangle  Circle  Triangle   (added later, calculator untouched)
"""


# Before
def legacy_total_area(shapes: Iterable[dict]) -> float:
    total = 0.0
    for shape in shapes:
        if shape["type"] == "rectangle":
            total += shape["width"] * shape["height"]
        elif shape["type"] == "circle":
            total += math.pi * shape["radius"] ** 2
    return total


# After
class Shape(ABC):
    @abstractmethod
    def area(self) -> float:
        pass


class Rectangle(Shape):
    def __init__(self, width: float, height: float):
        self.width = width
        self.height = height

    def area(self) -> float:
        return self.width * self.height


class Circle(Shape):
    def __init__(self, radius: float):
        self.radius = radius

    def area(self) -> float:
        return math.pi * self.radius ** 2


class Triangle(Shape):
    def __init__(self, base: float, height: float):
        self.base = base
        self.height = height

    def area(self) -> float:
        return 0.5 * self.base * self.height


class AreaCalculator:
    def total(self, shapes: Iterable[Shape]) -> float:
        return sum(shape.area() for shape in shapes)


@register_pattern(PATTERN_KEY, "Open/Closed Principle", Category.SOLID,
                  "Extend behaviour by adding code, not by editing existing code.", DIAGRAM)
def demo(console: Console) -> None:
    calculator = AreaCalculator()
    shapes = [Rectangle(3, 4), Circle(1)]
    console.write(f"Total area: {calculator.total(shapes):.2f}")

    shapes.append(Triangle(6, 2))
    console.write(f"Total area with a triangle: {calculator.total(shapes):.2f}")
