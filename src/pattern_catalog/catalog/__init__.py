"""Catalog package - registry, loading and markdown export."""
from .registry import PatternRegistry, get_pattern_registry, register_pattern

__all__ = ["PatternRegistry", "get_pattern_registry", "register_pattern"]
