"""
Chain of Responsibility passes a request along a chain of handlers.

An ATM dispenses cash through a fixed chain of note dispensers, largest
denomination first. Each dispenser hands out as many of its notes as it
can and passes whatever is left to the next one. The ATM only talks to the
head of the chain.
"""
from abc import ABC, abstractmethod
from typing import Optional

from pattern_catalog.catalog.registry import register_pattern
from pattern_catalog.domain.console import Console
from pattern_catalog.domain.entry import Category

PATTERN_KEY = "chain-of-responsibility"

DIAGRAM = """
+-----+      +----------------+  next  +---------------+  next
| Atm |----->| NoteDispenser  |------->| NoteDispenser |-------> ...
+-----+      | (100)          |        | (50)          |
             +----------------+        +---------------+
             | dispense(amt)  |        | dispense(amt) |
             +----------------+        +---------------+
"""

DENOMINATIONS = (100, 50, 20, 10)


class NoteDispenser(ABC):
    """One link of the chain, responsible for a single denomination."""

    @property
    @abstractmethod
    def denomination(self) -> int:
        """Value of the note this link hands out."""

    def __init__(self, console: Console):
        self.console = console
        self.next: Optional["NoteDispenser"] = None

    def set_next(self, dispenser: "NoteDispenser") -> "NoteDispenser":
        self.next = dispenser
        return dispenser

    def dispense(self, amount: int) -> None:
        if amount >= self.denomination:
            count, amount = divmod(amount, self.denomination)
            self.console.write(f"Dispensing {count} x {self.denomination} note(s)")
        if amount > 0 and self.next is not None:
            self.next.dispense(amount)


class HundredDispenser(NoteDispenser):
    denomination = 100


class FiftyDispenser(NoteDispenser):
    denomination = 50


class TwentyDispenser(NoteDispenser):
    denomination = 20


class TenDispenser(NoteDispenser):
    denomination = 10


class Atm:
    def __init__(self, console: Console):
        self.console = console
        self.chain = HundredDispenser(console)
        self.chain.set_next(FiftyDispenser(console)) \
            .set_next(TwentyDispenser(console)) \
            .set_next(TenDispenser(console))

    def withdraw(self, amount: int) -> bool:
        if amount <= 0 or amount % DENOMINATIONS[-1] != 0:
            self.console.write(f"Amount should be in multiple of {DENOMINATIONS[-1]}")
            return False
        self.console.write(f"Withdrawing {amount}")
        self.chain.dispense(amount)
        return True


@register_pattern(PATTERN_KEY, "Chain of Responsibility", Category.BEHAVIORAL,
                  "Pass a request along a chain of handlers until it is fully handled.", DIAGRAM)
def demo(console: Console) -> None:
    atm = Atm(console)
    atm.withdraw(380)
    atm.withdraw(75)
