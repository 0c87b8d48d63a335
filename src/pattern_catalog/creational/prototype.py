"""
Prototype creates new objects by copying an existing one.

Registered documents act as templates. ``PrototypeRegistry`` hands out deep
copies, so editing a clone never changes the template it came from.
"""
import copy
from typing import Dict, List, Optional

from pattern_catalog.catalog.registry import register_pattern
from pattern_catalog.domain.console import Console
from pattern_catalog.domain.entry import Category

PATTERN_KEY = "prototype"

DIAGRAM = """
+--------------------+  clone()  +------------------+
| PrototypeRegistry  |---------->|     Document     |
+--------------------+           +------------------+
| add(key, doc)      |           | title, tags      |
| get(key): Document |           | clone(): Document|
+--------------------+           +------------------+
"""


class Document:
    def __init__(self, title: str, body: str, tags: Optional[List[str]] = None):
        self.title = title
        self.body = body
        self.tags = tags or []

    def clone(self) -> "Document":
        return copy.deepcopy(self)

    def __str__(self) -> str:
        return f"Document(title={self.title!r}, tags={self.tags})"


class PrototypeRegistry:
    def __init__(self):
        self._prototypes: Dict[str, Document] = {}

    def add(self, key: str, prototype: Document) -> None:
        self._prototypes[key] = prototype

    def get(self, key: str) -> Optional[Document]:
        prototype = self._prototypes.get(key)
        if prototype is None:
            return None
        return prototype.clone()


@register_pattern(PATTERN_KEY, "Prototype", Category.CREATIONAL,
                  "Create new objects by cloning a configured prototype.", DIAGRAM)
def demo(console: Console) -> None:
    registry = PrototypeRegistry()
    registry.add("report", Document("Monthly report", "...", ["draft"]))

    report = registry.get("report")
    report.title = "March report"
    report.tags.append("finance")

    console.write(f"Clone: {report}")
    console.write(f"Template untouched: {registry.get('report')}")
