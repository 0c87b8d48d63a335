"""Pattern Registry - Registry pattern for the catalog's documentation units.

Every documentation unit registers its ``demo`` function here through the
``register_pattern`` decorator. The CLI and the markdown exporter only ever
talk to the registry; they never import a unit directly.
"""

import inspect
import sys
import threading
from typing import Callable, Dict, List, Optional

from pattern_catalog.domain.console import Console
from pattern_catalog.domain.entry import Category, DemoResult, PatternEntry
from pattern_catalog.domain.exceptions import DuplicatePatternError, PatternNotFoundError
from pattern_catalog.infrastructure.logging.logger import get_logger

CATEGORY_ORDER = [Category.BEHAVIORAL, Category.STRUCTURAL, Category.CREATIONAL, Category.SOLID]


class PatternRegistry:
    """
    Registry of catalog entries keyed by pattern key.

    Thread-safe singleton implementation.
    """

    _instance: Optional['PatternRegistry'] = None
    _lock = threading.Lock()

    def __new__(cls) -> 'PatternRegistry':
        """Ensure singleton instance."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        """Initialize pattern registry."""
        if hasattr(self, '_initialized'):
            return

        self._entries: Dict[str, PatternEntry] = {}
        self._registry_lock = threading.Lock()
        self.logger = get_logger(__name__)
        self._initialized = True

    def register(self, entry: PatternEntry) -> None:
        """
        Register a documentation unit.

        Raises:
            DuplicatePatternError: If the key is already registered
        """
        with self._registry_lock:
            if entry.key in self._entries:
                raise DuplicatePatternError(entry.key)
            self._entries[entry.key] = entry
        self.logger.debug("Registered pattern", key=entry.key, category=entry.category.value)

    def get(self, key: str) -> PatternEntry:
        """
        Get the entry registered under ``key``.

        Raises:
            PatternNotFoundError: If no entry has that key
        """
        entry = self._entries.get(key)
        if entry is None:
            raise PatternNotFoundError(key)
        return entry

    def list(self, category: Optional[Category] = None) -> List[PatternEntry]:
        """Entries sorted by category order, then key."""
        entries = [e for e in self._entries.values() if category is None or e.category == category]
        return sorted(entries, key=lambda e: (CATEGORY_ORDER.index(e.category), e.key))

    def keys(self) -> List[str]:
        return [entry.key for entry in self.list()]

    def categories(self) -> List[Category]:
        present = {entry.category for entry in self._entries.values()}
        return [c for c in CATEGORY_ORDER if c in present]

    def run(self, key: str, console: Optional[Console] = None) -> DemoResult:
        """Run a demo and return the lines it printed."""
        entry = self.get(key)
        console = console if console is not None else Console()
        start = len(console)
        self.logger.info("Running pattern demo", key=key)
        entry.demo(console)
        lines = console.lines[start:]
        self.logger.debug("Pattern demo finished", key=key, line_count=len(lines))
        return DemoResult(key=entry.key, name=entry.name, category=entry.category, lines=lines)

    def clear(self) -> None:
        """
        Remove all registrations (used by tests).

        ``load_catalog()`` puts the documentation units back afterwards.
        """
        with self._registry_lock:
            self._entries.clear()

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)


def get_pattern_registry() -> PatternRegistry:
    """Get the singleton pattern registry instance."""
    return PatternRegistry()


def register_pattern(key: str, name: str, category: Category, summary: str,
                     diagram: str = "") -> Callable[[Callable[[Console], None]], Callable[[Console], None]]:
    """
    Decorator registering a unit's ``demo`` function with the catalog.

    The unit's module docstring becomes the entry's explanation.
    """
    def decorator(demo: Callable[[Console], None]) -> Callable[[Console], None]:
        module = sys.modules.get(demo.__module__)
        explanation = inspect.cleandoc(module.__doc__) if module is not None and module.__doc__ else ""
        entry = PatternEntry(
            key=key,
            name=name,
            category=category,
            summary=summary,
            explanation=explanation,
            diagram=inspect.cleandoc(diagram) if diagram else "",
            module=demo.__module__,
            demo=demo,
        )
        get_pattern_registry().register(entry)
        demo.catalog_entry = entry
        return demo
    return decorator
