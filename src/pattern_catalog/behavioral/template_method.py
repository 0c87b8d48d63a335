"""
Template Method fixes the skeleton of an algorithm in a base class.

``Game.play`` always runs initialise, start and end in that order.
Subclasses fill in the steps but cannot reorder them.
"""
from abc import ABC, abstractmethod

from pattern_catalog.catalog.registry import register_pattern
from pattern_catalog.domain.console import Console
from pattern_catalog.domain.entry import Category

PATTERN_KEY = "template-method"

DIAGRAM = """
+----------------------+
|       <<Game>>       |
+----------------------+
| play()  (template)   |
| initialize()         |
| start()              |
| end()                |
+----------------------+
      ^            ^
      |            |
+---------+   +----------+
| Cricket |   | Football |
+---------+   +----------+
"""


class Game(ABC):
    def __init__(self, console: Console):
        self.console = console

    def play(self) -> None:
        self.initialize()
        self.start()
        self.end()

    @abstractmethod
    def initialize(self) -> None:
        pass

    @abstractmethod
    def start(self) -> None:
        pass

    @abstractmethod
    def end(self) -> None:
        pass


class Cricket(Game):
    def initialize(self) -> None:
        self.console.write("Cricket Game Initialized! Start playing.")

    def start(self) -> None:
        self.console.write("Cricket Game Started. Enjoy the game!")

    def end(self) -> None:
        self.console.write("Cricket Game Finished!")


class Football(Game):
    def initialize(self) -> None:
        self.console.write("Football Game Initialized! Start playing.")

    def start(self) -> None:
        self.console.write("Football Game Started. Enjoy the game!")

    def end(self) -> None:
        self.console.write("Football Game Finished!")


@register_pattern(PATTERN_KEY, "Template Method", Category.BEHAVIORAL,
                  "Define an algorithm's skeleton and let subclasses fill in the steps.", DIAGRAM)
def demo(console: Console) -> None:
    for game in (Cricket(console), Football(console)):
        game.play()
