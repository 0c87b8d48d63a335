"""Pattern Catalog - Root Package.

This package is a runnable catalog of object-oriented design patterns
(behavioral, structural, creational) and the SOLID principles. Every
pattern lives in its own documentation unit: a module carrying a prose
explanation, an ASCII class diagram, a handful of toy classes and a
``demo`` that prints the sample output.

Key Components:
    - behavioral, structural, creational, solid: the documentation units
    - catalog: pattern registry and markdown export
    - config: typed configuration with environment overrides
    - cli: the ``pattern-catalog`` command line interface
"""

__version__ = "1.0.0"
VERSION = __version__

PACKAGE_NAME = "pattern-catalog"
PACKAGE_NAME_PYTHON = PACKAGE_NAME.replace("-", "_")

__all__ = ["__version__", "VERSION", "PACKAGE_NAME", "PACKAGE_NAME_PYTHON"]
