"""
Flyweight shares the common part of many similar objects.

A forest has thousands of trees but only a few tree types. The intrinsic
state (name, colour, texture) lives in a shared ``TreeType``. Each
``Tree`` keeps only its own coordinates.
"""
from typing import Dict, List, Tuple

from pattern_catalog.catalog.registry import register_pattern
from pattern_catalog.domain.console import Console
from pattern_catalog.domain.entry import Category

PATTERN_KEY = "flyweight"

DIAGRAM = """
+--------+  plants  +--------+  type  +-----------------+
| Forest |<>------->|  Tree  |------->|    TreeType     |  (shared)
+--------+          +--------+        +-----------------+
                    | x, y   |        | name color tex  |
                    +--------+        | draw(x, y)      |
                                      +-----------------+
                                              ^
                                              | cached by
                                      +-----------------+
                                      | TreeTypeFactory |
                                      +-----------------+
"""


class TreeType:
    """Flyweight: intrinsic state only."""

    def __init__(self, name: str, color: str, texture: str):
        self.name = name
        self.color = color
        self.texture = texture

    def draw(self, console: Console, x: int, y: int) -> None:
        console.write(f"Drawing {self.color} {self.name} tree at ({x}, {y})")


class TreeTypeFactory:
    _tree_types: Dict[Tuple[str, str, str], TreeType] = {}

    @classmethod
    def get_tree_type(cls, name: str, color: str, texture: str) -> TreeType:
        key = (name, color, texture)
        if key not in cls._tree_types:
            cls._tree_types[key] = TreeType(name, color, texture)
        return cls._tree_types[key]

    @classmethod
    def type_count(cls) -> int:
        return len(cls._tree_types)

    @classmethod
    def clear(cls) -> None:
        cls._tree_types.clear()


class Tree:
    """Extrinsic state plus a reference to the shared type."""

    def __init__(self, x: int, y: int, tree_type: TreeType):
        self.x = x
        self.y = y
        self.tree_type = tree_type

    def draw(self, console: Console) -> None:
        self.tree_type.draw(console, self.x, self.y)


class Forest:
    def __init__(self):
        self.trees: List[Tree] = []

    def plant_tree(self, x: int, y: int, name: str, color: str, texture: str) -> Tree:
        tree = Tree(x, y, TreeTypeFactory.get_tree_type(name, color, texture))
        self.trees.append(tree)
        return tree

    def draw(self, console: Console) -> None:
        for tree in self.trees:
            tree.draw(console)


@register_pattern(PATTERN_KEY, "Flyweight", Category.STRUCTURAL,
                  "Share common state between many fine-grained objects.", DIAGRAM)
def demo(console: Console) -> None:
    TreeTypeFactory.clear()
    forest = Forest()
    forest.plant_tree(1, 2, "Oak", "green", "rough")
    forest.plant_tree(5, 3, "Oak", "green", "rough")
    forest.plant_tree(8, 1, "Pine", "dark green", "smooth")
    forest.plant_tree(4, 7, "Oak", "green", "rough")
    forest.draw(console)
    console.write(f"Trees planted: {len(forest.trees)}, tree types created: {TreeTypeFactory.type_count()}")
