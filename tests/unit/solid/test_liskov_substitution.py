import pytest

from pattern_catalog.domain.exceptions import UnsupportedOperationError
from pattern_catalog.solid.liskov_substitution import (
    FlyingBird,
    Ostrich,
    OstrichBird,
    Sparrow,
    SparrowBird,
    demo,
    make_birds_fly,
)


def test_demo_output(console):
    demo(console)

    assert console.lines == [
        "Before:",
        "Sparrow is flying",
        "Error: Ostrich cannot fly",
        "After:",
        "Sparrow is flying",
        "Ostrich is eating",
        "Ostrich is running",
    ]


def test_ostrich_breaks_bird_contract():
    assert Sparrow().fly() == "Sparrow is flying"
    with pytest.raises(UnsupportedOperationError, match="Ostrich cannot fly"):
        Ostrich().fly()


def test_ostrich_is_no_longer_a_flying_bird():
    assert not isinstance(OstrichBird(), FlyingBird)
    assert isinstance(SparrowBird(), FlyingBird)


def test_every_flying_bird_can_fly():
    assert make_birds_fly([SparrowBird(), SparrowBird()]) == ["Sparrow is flying"] * 2
