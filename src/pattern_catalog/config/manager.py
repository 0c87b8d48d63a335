"""Unified configuration management for the application."""
from __future__ import annotations

import json
import logging
import os
import threading
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import ValidationError

from pattern_catalog.config.schemas import AppConfig
from pattern_catalog.config.utils.env_expansion import expand_config_env_vars
from pattern_catalog.domain.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

CONFIG_FILE_ENV = "PATTERN_CATALOG_CONFIG"

# Environment variable -> dotted configuration path
ENV_OVERRIDES = {
    "PATTERN_CATALOG_LOG_LEVEL": "logging.level",
    "PATTERN_CATALOG_LOG_DESTINATION": "logging.destination",
    "PATTERN_CATALOG_OUTPUT_FORMAT": "output.format",
}


class ConfigurationManager:
    """
    Single source of truth for application configuration.

    Configuration is assembled lazily from, in increasing precedence:
    - the schema defaults,
    - an optional JSON file (explicit path or ``PATTERN_CATALOG_CONFIG``),
    - ``PATTERN_CATALOG_*`` environment overrides.

    ``$VAR`` references inside file values are expanded before validation.
    """

    def __init__(self, config_file: Optional[str] = None):
        self._config_file = config_file or os.environ.get(CONFIG_FILE_ENV)
        self._lock = threading.RLock()
        self._app_config: Optional[AppConfig] = None

    @property
    def config_file(self) -> Optional[str]:
        return self._config_file

    @property
    def app_config(self) -> AppConfig:
        """Lazy load application configuration."""
        if self._app_config is None:
            with self._lock:
                if self._app_config is None:
                    self._app_config = self._load_app_config()
        return self._app_config

    def _load_app_config(self) -> AppConfig:
        raw = self._read_file() if self._config_file else {}
        raw = expand_config_env_vars(raw)
        self._apply_env_overrides(raw)
        try:
            config = AppConfig.model_validate(raw)
        except ValidationError as e:
            fields = [".".join(str(part) for part in err["loc"]) for err in e.errors()]
            raise ConfigurationError(f"Invalid configuration: {e}", missing_fields=fields) from e
        logger.debug("Configuration loaded from %s", self._config_file or "defaults")
        return config

    def _read_file(self) -> Dict[str, Any]:
        path = Path(self._config_file)
        if not path.is_file():
            raise ConfigurationError(f"Configuration file not found: {path}")
        try:
            with path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Configuration file {path} is not valid JSON: {e}") from e
        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration file {path} must contain a JSON object")
        return data

    @staticmethod
    def _apply_env_overrides(raw: Dict[str, Any]) -> None:
        for env_var, dotted in ENV_OVERRIDES.items():
            value = os.environ.get(env_var)
            if not value:
                continue
            section, key = dotted.split(".", 1)
            values = raw.setdefault(section, {})
            if not isinstance(values, dict):
                raise ConfigurationError(
                    f"Configuration section '{section}' must be an object",
                    missing_fields=[section],
                )
            values[key] = value

    def get(self, dotted_key: str, default: Any = None) -> Any:
        """Look up a value by dotted path, e.g. ``logging.level``."""
        node: Any = self.app_config
        for part in dotted_key.split("."):
            if not hasattr(node, part):
                return default
            node = getattr(node, part)
        return node

    def override(self, **sections: Dict[str, Any]) -> AppConfig:
        """
        Return a copy of the configuration with per-invocation overrides.

        The cached configuration is left untouched.
        """
        data = self.app_config.model_dump()
        for section, values in sections.items():
            if values:
                data.setdefault(section, {}).update(values)
        try:
            return AppConfig.model_validate(data)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration override: {e}") from e

    def reload(self) -> AppConfig:
        with self._lock:
            self._app_config = None
        return self.app_config


_config_manager: Optional[ConfigurationManager] = None
_manager_lock = threading.Lock()


def get_config_manager(config_file: Optional[str] = None) -> ConfigurationManager:
    """Get the shared configuration manager, creating it on first use."""
    global _config_manager
    if _config_manager is None or (config_file and config_file != _config_manager.config_file):
        with _manager_lock:
            if _config_manager is None or (config_file and config_file != _config_manager.config_file):
                _config_manager = ConfigurationManager(config_file)
    return _config_manager


def reset_config_manager() -> None:
    """Drop the shared manager (used by tests)."""
    global _config_manager
    with _manager_lock:
        _config_manager = None
