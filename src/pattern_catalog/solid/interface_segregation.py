"""
Interface Segregation: no client should depend on methods it does not use.

Before, ``Worker`` makes every implementer both work and eat, so a robot
has to raise from ``eat``. After, the fat interface is split into
``Workable`` and ``Eatable`` and each class picks what it actually does.
"""
from abc import ABC, abstractmethod

from pattern_catalog.catalog.registry import register_pattern
from pattern_catalog.domain.console import Console
from pattern_catalog.domain.entry import Category
from pattern_catalog.domain.exceptions import UnsupportedOperationError

PATTERN_KEY = "interface-segregation"

DIAGRAM = """
Before:                       After:
+------------+                +--------------+   +-------------+
| <<Worker>> |                | <<Workable>> |   | <<Eatable>> |
+------------+                +--------------+   +-------------+
| work()     |                | work()       |   | eat()       |
| eat()      |                +--------------+   +-------------+
+------------+                  ^          ^          ^
  ^        ^                    |          |          |
Human   Robot (eat raises!)   Robot      HumanWorker--+
"""


# Before
class Worker(ABC):
    @abstractmethod
    def work(self) -> str:
        pass

    @abstractmethod
    def eat(self) -> str:
        pass


class Human(Worker):
    def work(self) -> str:
        return "Human is working"

    def eat(self) -> str:
        return "Human is eating"


class Robot(Worker):
    def work(self) -> str:
        return "Robot is working"

    def eat(self) -> str:
        raise UnsupportedOperationError("Robot cannot eat")


# After
class Workable(ABC):
    @abstractmethod
    def work(self) -> str:
        pass


class Eatable(ABC):
    @abstractmethod
    def eat(self) -> str:
        pass


class HumanWorker(Workable, Eatable):
    def work(self) -> str:
        return "Human is working"

    def eat(self) -> str:
        return "Human is eating"


class RobotWorker(Workable):
    def work(self) -> str:
        return "Robot is working"


@register_pattern(PATTERN_KEY, "Interface Segregation Principle", Category.SOLID,
                  "Prefer several small interfaces over one general-purpose one.", DIAGRAM)
def demo(console: Console) -> None:
    console.write("Before:")
    for worker in (Human(), Robot()):
        console.write(worker.work())
        try:
            console.write(worker.eat())
        except UnsupportedOperationError as e:
            console.write(f"Error: {e}")

    console.write("After:")
    for workable in (HumanWorker(), RobotWorker()):
        console.write(workable.work())
        if isinstance(workable, Eatable):
            console.write(workable.eat())
