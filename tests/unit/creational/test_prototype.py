from pattern_catalog.creational.prototype import Document, PrototypeRegistry, demo


def test_demo_output(console):
    demo(console)

    assert console.lines == [
        "Clone: Document(title='March report', tags=['draft', 'finance'])",
        "Template untouched: Document(title='Monthly report', tags=['draft'])",
    ]


def test_clone_is_deep():
    original = Document("t", "b", ["x"])
    clone = original.clone()
    clone.tags.append("y")

    assert clone is not original
    assert original.tags == ["x"]


def test_registry_returns_fresh_clone_each_time():
    registry = PrototypeRegistry()
    registry.add("doc", Document("t", "b"))

    assert registry.get("doc") is not registry.get("doc")


def test_registry_unknown_key_returns_none():
    assert PrototypeRegistry().get("missing") is None
