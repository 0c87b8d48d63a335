"""
Command turns a request into an object.

The invoker (a remote control) only knows that it holds something with
``execute`` and ``undo``. It does not know there is a light behind the
button, so the same remote can drive any receiver and can reverse the last
action without remembering what that action was.

Use it when you need undo, want to parameterise objects with actions, or
want the code that triggers an action to stay ignorant of the code that
performs it.
"""
from abc import ABC, abstractmethod
from typing import Optional

from pattern_catalog.catalog.registry import register_pattern
from pattern_catalog.domain.console import Console
from pattern_catalog.domain.entry import Category

PATTERN_KEY = "command"

DIAGRAM = """
+---------------+       +-------------------+
| RemoteControl |------>|   <<Command>>     |
+---------------+       +-------------------+
| press_button()|       | execute()         |
| press_undo()  |       | undo()            |
+---------------+       +-------------------+
                           ^             ^
                           |             |
              +----------------+   +-----------------+
              | LightOnCommand |   | LightOffCommand |
              +----------------+   +-----------------+
                           \\           /
                            v         v
                          +-------------+
                          |    Light    |
                          +-------------+
                          | on() off()  |
                          +-------------+
"""


class Light:
    """Receiver: the object that actually does the work."""

    def __init__(self, console: Console):
        self.console = console
        self.is_on = False

    def on(self) -> None:
        self.is_on = True
        self.console.write("Light is ON")

    def off(self) -> None:
        self.is_on = False
        self.console.write("Light is OFF")


class Command(ABC):
    @abstractmethod
    def execute(self) -> None:
        pass

    @abstractmethod
    def undo(self) -> None:
        pass


class LightOnCommand(Command):
    def __init__(self, light: Light):
        self.light = light

    def execute(self) -> None:
        self.light.on()

    def undo(self) -> None:
        self.light.off()


class LightOffCommand(Command):
    def __init__(self, light: Light):
        self.light = light

    def execute(self) -> None:
        self.light.off()

    def undo(self) -> None:
        self.light.on()


class RemoteControl:
    """Invoker: holds one command and triggers it."""

    def __init__(self):
        self.command: Optional[Command] = None

    def set_command(self, command: Command) -> None:
        self.command = command

    def press_button(self) -> None:
        if self.command is not None:
            self.command.execute()

    def press_undo(self) -> None:
        if self.command is not None:
            self.command.undo()


@register_pattern(PATTERN_KEY, "Command", Category.BEHAVIORAL,
                  "Encapsulate a request as an object with execute and undo.", DIAGRAM)
def demo(console: Console) -> None:
    light = Light(console)
    remote = RemoteControl()

    remote.set_command(LightOnCommand(light))
    remote.press_button()
    remote.press_undo()

    remote.set_command(LightOffCommand(light))
    remote.press_button()
    remote.press_undo()
