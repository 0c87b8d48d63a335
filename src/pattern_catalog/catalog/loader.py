"""Import every documentation unit so that it registers itself."""
import importlib

from pattern_catalog.catalog.registry import PatternRegistry, get_pattern_registry
from pattern_catalog.infrastructure.logging.logger import get_logger

UNIT_MODULES = [
    "pattern_catalog.behavioral.command",
    "pattern_catalog.behavioral.chain_of_responsibility",
    "pattern_catalog.behavioral.observer",
    "pattern_catalog.behavioral.mediator",
    "pattern_catalog.behavioral.iterator",
    "pattern_catalog.behavioral.visitor",
    "pattern_catalog.behavioral.strategy",
    "pattern_catalog.behavioral.state",
    "pattern_catalog.behavioral.template_method",
    "pattern_catalog.structural.adapter",
    "pattern_catalog.structural.bridge",
    "pattern_catalog.structural.decorator",
    "pattern_catalog.structural.facade",
    "pattern_catalog.structural.flyweight",
    "pattern_catalog.structural.proxy",
    "pattern_catalog.structural.composite",
    "pattern_catalog.creational.singleton",
    "pattern_catalog.creational.factory",
    "pattern_catalog.creational.abstract_factory",
    "pattern_catalog.creational.builder",
    "pattern_catalog.creational.prototype",
    "pattern_catalog.solid.single_responsibility",
    "pattern_catalog.solid.open_closed",
    "pattern_catalog.solid.liskov_substitution",
    "pattern_catalog.solid.interface_segregation",
    "pattern_catalog.solid.dependency_inversion",
]


def load_catalog() -> PatternRegistry:
    """
    Load all documentation units into the registry.

    Each unit registers itself when first imported. Units imported earlier
    whose entries have since been cleared from the registry are registered
    again from the entry kept on their ``demo`` function, so calling this
    repeatedly is cheap and registers nothing twice.
    """
    registry = get_pattern_registry()
    for module_name in UNIT_MODULES:
        module = importlib.import_module(module_name)
        entry = getattr(module.demo, "catalog_entry", None)
        if entry is not None and entry.key not in registry:
            registry.register(entry)
    get_logger(__name__).debug("Catalog loaded", pattern_count=len(registry))
    return registry
