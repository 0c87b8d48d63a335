"""
State lets an object change its behaviour when its internal state changes.

The traffic light delegates ``change`` to its current state object, and
each state knows which state comes next. There is no ``if colour ==``
ladder in the light itself.
"""
from abc import ABC, abstractmethod

from pattern_catalog.catalog.registry import register_pattern
from pattern_catalog.domain.console import Console
from pattern_catalog.domain.entry import Category

PATTERN_KEY = "state"

DIAGRAM = """
+----------------+        +-------------------+
|  TrafficLight  |------->|    <<LightState>> |
+----------------+        +-------------------+
| change()       |        | handle(light)     |
| set_state(s)   |        +-------------------+
+----------------+          ^       ^       ^
                            |       |       |
                      +-----+  +-------+  +--------+
                      | Red |  | Green |  | Yellow |
                      +-----+  +-------+  +--------+
"""


class LightState(ABC):
    name = ""

    @abstractmethod
    def handle(self, light: "TrafficLight") -> None:
        pass


class RedState(LightState):
    name = "RED"

    def handle(self, light: "TrafficLight") -> None:
        light.set_state(GreenState())


class GreenState(LightState):
    name = "GREEN"

    def handle(self, light: "TrafficLight") -> None:
        light.set_state(YellowState())


class YellowState(LightState):
    name = "YELLOW"

    def handle(self, light: "TrafficLight") -> None:
        light.set_state(RedState())


class TrafficLight:
    """Context."""

    def __init__(self, console: Console):
        self.console = console
        self.state: LightState = RedState()

    def set_state(self, state: LightState) -> None:
        self.state = state
        self.console.write(f"Light turned {state.name}")

    def change(self) -> None:
        self.state.handle(self)


@register_pattern(PATTERN_KEY, "State", Category.BEHAVIORAL,
                  "Delegate behaviour to a state object that can replace itself.", DIAGRAM)
def demo(console: Console) -> None:
    light = TrafficLight(console)
    console.write(f"Light is {light.state.name}")
    for _ in range(3):
        light.change()
