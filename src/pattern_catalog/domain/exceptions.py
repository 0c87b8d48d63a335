# src/pattern_catalog/domain/exceptions.py
from typing import Any, List, Optional


class CatalogError(Exception):
    """Base exception for all catalog errors."""
    pass


class PatternNotFoundError(CatalogError):
    """Raised when a requested pattern is not registered."""
    def __init__(self, key: str):
        super().__init__(f"Pattern '{key}' not found")
        self.key = key


class DuplicatePatternError(CatalogError):
    """Raised when a pattern key is registered twice."""
    def __init__(self, key: str):
        super().__init__(f"Pattern '{key}' is already registered")
        self.key = key


class ConfigurationError(CatalogError):
    """Raised when there's an issue with configuration."""
    def __init__(self, message: str, missing_fields: Optional[List[str]] = None):
        super().__init__(message)
        self.missing_fields = missing_fields or []


class ExportError(CatalogError):
    """Raised when writing the markdown documentation fails."""
    def __init__(self, message: str, details: Any = None):
        super().__init__(message)
        self.details = details


class UnsupportedOperationError(RuntimeError):
    """Raised by toy classes asked to do something they cannot do.

    Only the SOLID "before" snippets raise it, to show what a principle
    violation looks like at runtime ("Ostrich cannot fly").
    """
    pass
