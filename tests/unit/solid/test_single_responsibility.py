from pattern_catalog.solid.single_responsibility import (
    Invoice,
    InvoiceManager,
    InvoicePrinter,
    InvoiceRepository,
    demo,
)


def test_demo_output(console):
    demo(console)

    assert console.lines == [
        "Invoice INV-001",
        "  Widget: 10",
        "  Gadget: 15",
        "  Total: 25",
        "Invoices stored: 1",
    ]


def test_manager_does_everything_itself():
    manager = InvoiceManager("INV-9", [("A", 1), ("B", 2)])
    manager.save()

    assert manager.total() == 3
    assert manager.print_invoice() == "Invoice INV-9: 3"
    assert manager.saved["INV-9"] is manager


def test_split_classes_cooperate():
    invoice = Invoice("INV-2", [("A", 4)])
    repository = InvoiceRepository()
    repository.save(invoice)

    assert repository.get("INV-2") is invoice
    assert InvoicePrinter().render(invoice)[-1] == "  Total: 4"


def test_empty_invoice_total():
    assert Invoice("INV-3").total() == 0
