"""
Factory hides which concrete class gets instantiated.

Callers ask ``ShapeFactory`` for a shape by name and get back something
that can ``draw``. An unknown name simply gives ``None``.
"""
from abc import ABC, abstractmethod
from typing import Dict, Optional, Type

from pattern_catalog.catalog.registry import register_pattern
from pattern_catalog.domain.console import Console
from pattern_catalog.domain.entry import Category

PATTERN_KEY = "factory"

DIAGRAM = """
+----------------------+   creates   +-------------+
|     ShapeFactory     |------------>|  <<Shape>>  |
+----------------------+             +-------------+
| get_shape(kind)      |             | draw()      |
+----------------------+             +-------------+
                                      ^     ^     ^
                                      |     |     |
                               +--------+ +-----------+ +--------+
                               | Circle | | Rectangle | | Square |
                               +--------+ +-----------+ +--------+
"""


class Shape(ABC):
    @abstractmethod
    def draw(self) -> str:
        pass


class Circle(Shape):
    def draw(self) -> str:
        return "Inside Circle::draw() method."


class Rectangle(Shape):
    def draw(self) -> str:
        return "Inside Rectangle::draw() method."


class Square(Shape):
    def draw(self) -> str:
        return "Inside Square::draw() method."


class ShapeFactory:
    _shapes: Dict[str, Type[Shape]] = {
        "CIRCLE": Circle,
        "RECTANGLE": Rectangle,
        "SQUARE": Square,
    }

    def get_shape(self, kind: Optional[str]) -> Optional[Shape]:
        if not kind:
            return None
        shape_class = self._shapes.get(kind.upper())
        if shape_class is None:
            return None
        return shape_class()


@register_pattern(PATTERN_KEY, "Factory", Category.CREATIONAL,
                  "Create objects through a method instead of naming concrete classes.", DIAGRAM)
def demo(console: Console) -> None:
    factory = ShapeFactory()
    for kind in ("CIRCLE", "rectangle", "SQUARE", "TRIANGLE"):
        shape = factory.get_shape(kind)
        if shape is None:
            console.write(f"No shape registered for {kind}")
        else:
            console.write(shape.draw())
