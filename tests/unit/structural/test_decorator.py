import pytest

from pattern_catalog.structural.decorator import MilkDecorator, SimpleCoffee, SugarDecorator, demo


def test_demo_output(console):
    demo(console)

    assert console.lines == [
        "Simple coffee: $2.00",
        "Simple coffee, milk: $2.50",
        "Simple coffee, milk, sugar: $2.70",
    ]


def test_decorators_stack_in_any_order():
    coffee = MilkDecorator(SugarDecorator(MilkDecorator(SimpleCoffee())))

    assert coffee.cost() == pytest.approx(3.2)
    assert coffee.description() == "Simple coffee, milk, sugar, milk"


def test_plain_coffee():
    assert SimpleCoffee().cost() == 2.0
