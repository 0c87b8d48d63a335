"""
Composite treats single objects and groups of objects the same way.

An ``Employee`` and a ``Manager`` both answer ``salary()`` and
``show()``. A manager answers by combining the answers of the people who
report to them, so the caller never checks which one it holds.
"""
from abc import ABC, abstractmethod
from typing import List

from pattern_catalog.catalog.registry import register_pattern
from pattern_catalog.domain.console import Console
from pattern_catalog.domain.entry import Category

PATTERN_KEY = "composite"

DIAGRAM = """
+--------------------+
|  <<StaffMember>>   |<--------------+
+--------------------+               |
| salary()           |               | reports *
| show(console, ind) |               |
+--------------------+               |
     ^           ^                   |
     |           |                   |
+----------+  +-----------------+    |
| Employee |  |     Manager     |<>--+
+----------+  +-----------------+
              | add(member)     |
              +-----------------+
"""


class StaffMember(ABC):
    def __init__(self, name: str, position: str):
        self.name = name
        self.position = position

    @abstractmethod
    def salary(self) -> float:
        pass

    @abstractmethod
    def show(self, console: Console, indent: int = 0) -> None:
        pass


class Employee(StaffMember):
    """Leaf."""

    def __init__(self, name: str, position: str, salary: float):
        super().__init__(name, position)
        self._salary = salary

    def salary(self) -> float:
        return self._salary

    def show(self, console: Console, indent: int = 0) -> None:
        console.write(f"{'  ' * indent}- {self.name} ({self.position}): {self._salary}")


class Manager(StaffMember):
    """Composite."""

    def __init__(self, name: str, position: str, salary: float):
        super().__init__(name, position)
        self._salary = salary
        self.reports: List[StaffMember] = []

    def add(self, member: StaffMember) -> None:
        self.reports.append(member)

    def remove(self, member: StaffMember) -> None:
        self.reports.remove(member)

    def salary(self) -> float:
        return self._salary + sum(member.salary() for member in self.reports)

    def show(self, console: Console, indent: int = 0) -> None:
        console.write(f"{'  ' * indent}+ {self.name} ({self.position}): {self._salary}")
        for member in self.reports:
            member.show(console, indent + 1)


@register_pattern(PATTERN_KEY, "Composite", Category.STRUCTURAL,
                  "Compose objects into trees and treat leaves and branches alike.", DIAGRAM)
def demo(console: Console) -> None:
    ceo = Manager("Grace", "CEO", 300)
    cto = Manager("Linus", "CTO", 200)
    cto.add(Employee("Ada", "Engineer", 120))
    cto.add(Employee("Alan", "Engineer", 110))
    ceo.add(cto)
    ceo.add(Employee("Joan", "Accountant", 90))

    ceo.show(console)
    console.write(f"Total salary budget: {ceo.salary()}")
