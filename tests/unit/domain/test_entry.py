import pytest
from pydantic import ValidationError

from pattern_catalog.domain.entry import Category, PatternEntry


def noop(console):
    pass


@pytest.mark.parametrize("key", ["Command", "chain of responsibility", "template_method", ""])
def test_key_must_be_kebab_case(key):
    with pytest.raises(ValidationError):
        PatternEntry(key=key, name="X", category=Category.BEHAVIORAL, summary="s", module="m", demo=noop)


def test_to_summary_is_serializable():
    entry = PatternEntry(key="x-y", name="X Y", category=Category.SOLID, summary="s", module="m", demo=noop)

    assert entry.to_summary() == {"key": "x-y", "name": "X Y", "category": "solid", "summary": "s"}


def test_category_headings():
    assert Category.SOLID.heading == "SOLID Principles"
    assert Category.CREATIONAL.heading == "Creational Patterns"
