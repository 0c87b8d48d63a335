"""
Proxy stands in for another object and controls access to it.

``ProxyImage`` looks like an image, but it only loads the real image from
disk the first time someone actually displays it. Later calls go straight
to the already-loaded image.
"""
from abc import ABC, abstractmethod
from typing import Optional

from pattern_catalog.catalog.registry import register_pattern
from pattern_catalog.domain.console import Console
from pattern_catalog.domain.entry import Category

PATTERN_KEY = "proxy"

DIAGRAM = """
          +-------------+
          |  <<Image>>  |
          +-------------+
          | display()   |
          +-------------+
            ^         ^
            |         |
+------------+     +------------+
| RealImage  |<----| ProxyImage |
+------------+     +------------+
| load()     |     | file_name  |
+------------+     +------------+
"""


class Image(ABC):
    @abstractmethod
    def display(self) -> None:
        pass


class RealImage(Image):
    def __init__(self, file_name: str, console: Console):
        self.file_name = file_name
        self.console = console
        self._load_from_disk()

    def _load_from_disk(self) -> None:
        self.console.write(f"Loading {self.file_name}")

    def display(self) -> None:
        self.console.write(f"Displaying {self.file_name}")


class ProxyImage(Image):
    def __init__(self, file_name: str, console: Console):
        self.file_name = file_name
        self.console = console
        self._real_image: Optional[RealImage] = None

    @property
    def is_loaded(self) -> bool:
        return self._real_image is not None

    def display(self) -> None:
        if self._real_image is None:
            self._real_image = RealImage(self.file_name, self.console)
        self._real_image.display()


@register_pattern(PATTERN_KEY, "Proxy", Category.STRUCTURAL,
                  "Control access to an object through a stand-in with the same interface.", DIAGRAM)
def demo(console: Console) -> None:
    image = ProxyImage("photo.jpg", console)
    image.display()
    image.display()
