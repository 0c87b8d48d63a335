import pytest

from pattern_catalog.catalog.loader import load_catalog
from pattern_catalog.config.manager import reset_config_manager
from pattern_catalog.config.schemas import LogDestination, LoggingConfig
from pattern_catalog.domain.console import Console
from pattern_catalog.infrastructure.logging.logger import setup_logging

CATALOG_ENV_VARS = (
    "PATTERN_CATALOG_CONFIG",
    "PATTERN_CATALOG_LOG_LEVEL",
    "PATTERN_CATALOG_LOG_DESTINATION",
    "PATTERN_CATALOG_OUTPUT_FORMAT",
)


@pytest.fixture(autouse=True, scope="session")
def quiet_logging():
    """Keep structlog output out of captured demo output."""
    setup_logging(LoggingConfig(destination=LogDestination.NONE))


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Unset catalog environment variables and drop the cached configuration."""
    for name in CATALOG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    reset_config_manager()
    yield
    reset_config_manager()


@pytest.fixture
def console():
    return Console()


@pytest.fixture
def registry():
    return load_catalog()


@pytest.fixture
def empty_registry():
    """Registry emptied for the test, with the catalog entries restored afterwards."""
    registry = load_catalog()
    saved = registry.list()
    registry.clear()
    yield registry
    registry.clear()
    for entry in saved:
        registry.register(entry)
