"""
Single Responsibility: a class should have one reason to change.

Before, ``InvoiceManager`` computes totals, formats the printout and saves
the invoice, so a change in any of those touches the same class. After,
each job has its own class.
"""
from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from pattern_catalog.catalog.registry import register_pattern
from pattern_catalog.domain.console import Console
from pattern_catalog.domain.entry import Category

PATTERN_KEY = "single-responsibility"

DIAGRAM = """
Before:                         After:
+--------------------+          +-----------+  +----------------+  +-------------------+
|   InvoiceManager   |          |  Invoice  |  | InvoicePrinter |  | InvoiceRepository |
+--------------------+          +-----------+  +----------------+  +-------------------+
| total()            |          | total()   |  | render(inv)    |  | save(inv)         |
| print_invoice()    |          +-----------+  +----------------+  +-------------------+
| save()             |
+--------------------+
"""


# Before
class InvoiceManager:
    def __init__(self, number: str, items: List[Tuple[str, float]]):
        self.number = number
        self.items = items
        self.saved: Dict[str, "InvoiceManager"] = {}

    def total(self) -> float:
        return sum(price for _, price in self.items)

    def print_invoice(self) -> str:
        return f"Invoice {self.number}: {self.total()}"

    def save(self) -> None:
        self.saved[self.number] = self


# After
@dataclass
class Invoice:
    number: str
    items: List[Tuple[str, float]] = field(default_factory=list)

    def total(self) -> float:
        return sum(price for _, price in self.items)


class InvoicePrinter:
    def render(self, invoice: Invoice) -> List[str]:
        lines = [f"Invoice {invoice.number}"]
        lines += [f"  {name}: {price}" for name, price in invoice.items]
        lines.append(f"  Total: {invoice.total()}")
        return lines


class InvoiceRepository:
    def __init__(self):
        self._invoices: Dict[str, Invoice] = {}

    def save(self, invoice: Invoice) -> None:
        self._invoices[invoice.number] = invoice

    def get(self, number: str) -> Invoice:
        return self._invoices[number]

    def __len__(self) -> int:
        return len(self._invoices)


@register_pattern(PATTERN_KEY, "Single Responsibility Principle", Category.SOLID,
                  "A class should have only one reason to change.", DIAGRAM)
def demo(console: Console) -> None:
    invoice = Invoice("INV-001", [("Widget", 10), ("Gadget", 15)])
    for line in InvoicePrinter().render(invoice):
        console.write(line)

    repository = InvoiceRepository()
    repository.save(invoice)
    console.write(f"Invoices stored: {len(repository)}")
