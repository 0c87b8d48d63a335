from pattern_catalog.behavioral.visitor import (
    Book,
    Fruit,
    ShoppingCartPriceVisitor,
    calculate_total,
    demo,
)


def test_demo_output(console):
    demo(console)

    assert console.lines == [
        "Book ISBN 1234 cost = 20",
        "Book ISBN 5678 cost = 95",
        "Banana cost = 20",
        "Apple cost = 25",
        "Total Cost = 160",
    ]


def test_discount_only_above_threshold(console):
    visitor = ShoppingCartPriceVisitor(console)

    assert Book("a", 50).accept(visitor) == 50
    assert Book("b", 51).accept(visitor) == 46


def test_fruit_priced_by_weight(console):
    visitor = ShoppingCartPriceVisitor(console)

    assert Fruit("Pear", 4, 1.5).accept(visitor) == 6.0


def test_empty_cart_total_is_zero(console):
    assert calculate_total([], ShoppingCartPriceVisitor(console)) == 0
