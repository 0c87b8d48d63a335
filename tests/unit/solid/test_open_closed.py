import math

import pytest

from pattern_catalog.solid.open_closed import (
    AreaCalculator,
    Circle,
    Rectangle,
    Shape,
    Triangle,
    demo,
    legacy_total_area,
)


class Square(Shape):
    def __init__(self, side):
        self.side = side

    def area(self):
        return self.side ** 2


def test_demo_output(console):
    demo(console)

    assert console.lines == ["Total area: 15.14", "Total area with a triangle: 21.14"]


def test_new_shape_needs_no_calculator_change():
    assert AreaCalculator().total([Square(3), Rectangle(1, 2)]) == 11


def test_legacy_and_extensible_versions_agree():
    legacy = legacy_total_area([
        {"type": "rectangle", "width": 2, "height": 5},
        {"type": "circle", "radius": 2},
    ])

    assert legacy == pytest.approx(AreaCalculator().total([Rectangle(2, 5), Circle(2)]))
    assert legacy == pytest.approx(10 + 4 * math.pi)


def test_triangle_area():
    assert Triangle(4, 3).area() == 6
