"""
Observer lets objects subscribe to changes in another object.

A weather station keeps a list of displays. Whenever the temperature
changes it walks that list and tells every display, synchronously. The
station never knows what kind of display it is talking to, so new displays
can be added without touching it.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from pattern_catalog.catalog.registry import register_pattern
from pattern_catalog.domain.console import Console
from pattern_catalog.domain.entry import Category

PATTERN_KEY = "observer"

DIAGRAM = """
+--------------------+         +------------------+
|   WeatherStation   |<>------>|  <<Observer>>    |
+--------------------+    *    +------------------+
| attach(o)          |         | update(temp)     |
| detach(o)          |         +------------------+
| set_temperature(t) |            ^          ^
+--------------------+            |          |
                        +--------------+ +-----------+
                        | PhoneDisplay | | TvDisplay |
                        +--------------+ +-----------+
"""


class Observer(ABC):
    @abstractmethod
    def update(self, temperature: float) -> None:
        pass


class WeatherStation:
    """Subject."""

    def __init__(self):
        self._observers: List[Observer] = []
        self.temperature: Optional[float] = None

    def attach(self, observer: Observer) -> None:
        if observer not in self._observers:
            self._observers.append(observer)

    def detach(self, observer: Observer) -> None:
        if observer in self._observers:
            self._observers.remove(observer)

    def set_temperature(self, temperature: float) -> None:
        self.temperature = temperature
        self.notify()

    def notify(self) -> None:
        for observer in self._observers:
            observer.update(self.temperature)


class PhoneDisplay(Observer):
    def __init__(self, console: Console):
        self.console = console

    def update(self, temperature: float) -> None:
        self.console.write(f"Phone Display: Temperature updated to {temperature}°C")


class TvDisplay(Observer):
    def __init__(self, console: Console):
        self.console = console

    def update(self, temperature: float) -> None:
        self.console.write(f"TV Display: Temperature updated to {temperature}°C")


@register_pattern(PATTERN_KEY, "Observer", Category.BEHAVIORAL,
                  "Notify a list of subscribers whenever a subject changes.", DIAGRAM)
def demo(console: Console) -> None:
    station = WeatherStation()
    phone = PhoneDisplay(console)
    tv = TvDisplay(console)

    station.attach(phone)
    station.attach(tv)
    station.set_temperature(25)

    station.detach(tv)
    station.set_temperature(30)
