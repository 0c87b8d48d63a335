"""
Abstract Factory creates families of related objects.

The application asks its factory for a button and a checkbox without
knowing which platform it runs on. Because one factory builds both, the
widgets always match each other.
"""
from abc import ABC, abstractmethod

from pattern_catalog.catalog.registry import register_pattern
from pattern_catalog.domain.console import Console
from pattern_catalog.domain.entry import Category

PATTERN_KEY = "abstract-factory"

DIAGRAM = """
+-------------------+         +-------------+  +---------------+
|  <<GuiFactory>>   |-------->| <<Button>>  |  | <<Checkbox>>  |
+-------------------+         +-------------+  +---------------+
| create_button()   |           ^        ^        ^         ^
| create_checkbox() |           |        |        |         |
+-------------------+     WindowsButton MacButton |         |
    ^           ^                          WindowsCheckbox MacCheckbox
    |           |
+----------------+ +------------+
| WindowsFactory | | MacFactory |
+----------------+ +------------+
"""


class Button(ABC):
    @abstractmethod
    def paint(self) -> str:
        pass


class Checkbox(ABC):
    @abstractmethod
    def paint(self) -> str:
        pass


class WindowsButton(Button):
    def paint(self) -> str:
        return "Rendering a button in Windows style"


class MacButton(Button):
    def paint(self) -> str:
        return "Rendering a button in macOS style"


class WindowsCheckbox(Checkbox):
    def paint(self) -> str:
        return "Rendering a checkbox in Windows style"


class MacCheckbox(Checkbox):
    def paint(self) -> str:
        return "Rendering a checkbox in macOS style"


class GuiFactory(ABC):
    @abstractmethod
    def create_button(self) -> Button:
        pass

    @abstractmethod
    def create_checkbox(self) -> Checkbox:
        pass


class WindowsFactory(GuiFactory):
    def create_button(self) -> Button:
        return WindowsButton()

    def create_checkbox(self) -> Checkbox:
        return WindowsCheckbox()


class MacFactory(GuiFactory):
    def create_button(self) -> Button:
        return MacButton()

    def create_checkbox(self) -> Checkbox:
        return MacCheckbox()


class Application:
    def __init__(self, factory: GuiFactory):
        self.button = factory.create_button()
        self.checkbox = factory.create_checkbox()

    def paint(self, console: Console) -> None:
        console.write(self.button.paint())
        console.write(self.checkbox.paint())


def factory_for(platform: str) -> GuiFactory:
    if platform.lower() == "windows":
        return WindowsFactory()
    if platform.lower() in ("mac", "macos"):
        return MacFactory()
    raise ValueError(f"Unknown platform: {platform}")


@register_pattern(PATTERN_KEY, "Abstract Factory", Category.CREATIONAL,
                  "Create families of related objects without naming their classes.", DIAGRAM)
def demo(console: Console) -> None:
    for platform in ("windows", "mac"):
        Application(factory_for(platform)).paint(console)
