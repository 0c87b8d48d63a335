"""
Singleton guarantees a class has exactly one instance.

The first caller creates the instance; everyone after gets the same one.
Double-checked locking keeps that true when several threads race to be
first: the lock is only taken while no instance exists, and the check is
repeated inside the lock.
"""
import threading
from typing import List, Optional

from pattern_catalog.catalog.registry import register_pattern
from pattern_catalog.domain.console import Console
from pattern_catalog.domain.entry import Category

PATTERN_KEY = "singleton"

DIAGRAM = """
+-----------------------------+
|           Logger            |
+-----------------------------+
| - _instance: Logger         |
| - _lock: Lock               |
+-----------------------------+
| + __new__(): Logger         |
| + log(message)              |
+-----------------------------+
"""


class Logger:
    _instance: Optional["Logger"] = None
    _lock = threading.Lock()
    instances_created = 0

    def __new__(cls) -> "Logger":
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    instance = super().__new__(cls)
                    instance.messages = []
                    cls.instances_created += 1
                    cls._instance = instance
        return cls._instance

    def log(self, message: str) -> None:
        self.messages.append(message)

    @classmethod
    def reset(cls) -> None:
        with cls._lock:
            cls._instance = None
            cls.instances_created = 0


def create_from_threads(count: int) -> List[Logger]:
    """Ask for the logger from ``count`` threads started together."""
    results: List[Logger] = []
    results_lock = threading.Lock()
    barrier = threading.Barrier(count)

    def worker() -> None:
        barrier.wait()
        logger = Logger()
        with results_lock:
            results.append(logger)

    threads = [threading.Thread(target=worker) for _ in range(count)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return results


@register_pattern(PATTERN_KEY, "Singleton", Category.CREATIONAL,
                  "Ensure a class has one instance and one global access point.", DIAGRAM)
def demo(console: Console) -> None:
    Logger.reset()
    first = Logger()
    second = Logger()
    first.log("application started")
    console.write(f"Same instance: {first is second}")
    console.write(f"Messages seen through second reference: {second.messages}")

    loggers = create_from_threads(8)
    console.write(f"Instances created across 8 threads: {Logger.instances_created}")
    console.write(f"All threads share it: {all(logger is first for logger in loggers)}")
