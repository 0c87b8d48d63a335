import pytest

from pattern_catalog.behavioral.chain_of_responsibility import (
    Atm,
    FiftyDispenser,
    NoteDispenser,
    TenDispenser,
    demo,
)


def test_demo_output(console):
    demo(console)

    assert console.lines == [
        "Withdrawing 380",
        "Dispensing 3 x 100 note(s)",
        "Dispensing 1 x 50 note(s)",
        "Dispensing 1 x 20 note(s)",
        "Dispensing 1 x 10 note(s)",
        "Amount should be in multiple of 10",
    ]


def test_exact_denomination_stops_at_first_handler(console):
    atm = Atm(console)

    assert atm.withdraw(200) is True
    assert console.lines == ["Withdrawing 200", "Dispensing 2 x 100 note(s)"]


def test_skips_denominations_that_do_not_fit(console):
    atm = Atm(console)

    atm.withdraw(30)

    assert console.lines == [
        "Withdrawing 30",
        "Dispensing 1 x 20 note(s)",
        "Dispensing 1 x 10 note(s)",
    ]


@pytest.mark.parametrize("amount", [0, -20, 15])
def test_rejects_invalid_amounts(console, amount):
    atm = Atm(console)

    assert atm.withdraw(amount) is False
    assert console.lines == ["Amount should be in multiple of 10"]


def test_dispenser_without_successor_keeps_remainder(console):
    fifty = FiftyDispenser(console)

    fifty.dispense(70)

    assert console.lines == ["Dispensing 1 x 50 note(s)"]


def test_set_next_returns_successor_for_chaining(console):
    fifty = FiftyDispenser(console)
    ten = TenDispenser(console)

    assert fifty.set_next(ten) is ten
    assert fifty.next is ten


def test_base_dispenser_needs_a_denomination(console):
    with pytest.raises(TypeError):
        NoteDispenser(console)
