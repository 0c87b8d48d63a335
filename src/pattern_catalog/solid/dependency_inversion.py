"""
Dependency Inversion: depend on abstractions, not on concretions.

The switch does not know about light bulbs or fans. It depends on the
``Switchable`` abstraction, and the devices depend on that same
abstraction, so either can change without the other.
"""
from abc import ABC, abstractmethod

from pattern_catalog.catalog.registry import register_pattern
from pattern_catalog.domain.console import Console
from pattern_catalog.domain.entry import Category

PATTERN_KEY = "dependency-inversion"

DIAGRAM = """
+------------+        +----------------+
|   Switch   |------->| <<Switchable>> |
+------------+        +----------------+
| operate()  |        | turn_on()      |
+------------+        | turn_off()     |
                      +----------------+
                         ^          ^
                         |          |
                   +-----------+ +-----+
                   | LightBulb | | Fan |
                   +-----------+ +-----+
"""


class Switchable(ABC):
    @abstractmethod
    def turn_on(self) -> None:
        pass

    @abstractmethod
    def turn_off(self) -> None:
        pass


class LightBulb(Switchable):
    def __init__(self, console: Console):
        self.console = console

    def turn_on(self) -> None:
        self.console.write("LightBulb: turned on")

    def turn_off(self) -> None:
        self.console.write("LightBulb: turned off")


class Fan(Switchable):
    def __init__(self, console: Console):
        self.console = console

    def turn_on(self) -> None:
        self.console.write("Fan: spinning")

    def turn_off(self) -> None:
        self.console.write("Fan: stopped")


class Switch:
    def __init__(self, device: Switchable):
        self.device = device
        self.is_on = False

    def operate(self) -> None:
        if self.is_on:
            self.device.turn_off()
        else:
            self.device.turn_on()
        self.is_on = not self.is_on


@register_pattern(PATTERN_KEY, "Dependency Inversion Principle", Category.SOLID,
                  "High-level modules and low-level modules both depend on abstractions.", DIAGRAM)
def demo(console: Console) -> None:
    for device in (LightBulb(console), Fan(console)):
        switch = Switch(device)
        switch.operate()
        switch.operate()
