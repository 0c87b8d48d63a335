"""Domain layer - console port, catalog entries and exceptions."""

from .console import Console
from .entry import Category, DemoResult, PatternEntry
from .exceptions import (
    CatalogError,
    ConfigurationError,
    DuplicatePatternError,
    ExportError,
    PatternNotFoundError,
    UnsupportedOperationError,
)

__all__ = [
    "Console",
    "Category",
    "DemoResult",
    "PatternEntry",
    "CatalogError",
    "ConfigurationError",
    "DuplicatePatternError",
    "ExportError",
    "PatternNotFoundError",
    "UnsupportedOperationError",
]
