"""Configuration package with clean public API."""

from .schemas import (
    AppConfig,
    LogDestination,
    LogFileConfig,
    LoggingConfig,
    LogLevel,
    OutputConfig,
    OutputFormat,
)
from .manager import ConfigurationManager, get_config_manager, reset_config_manager

__all__ = [
    'AppConfig',
    'LogDestination',
    'LogFileConfig',
    'LoggingConfig',
    'LogLevel',
    'OutputConfig',
    'OutputFormat',
    'ConfigurationManager',
    'get_config_manager',
    'reset_config_manager',
]
