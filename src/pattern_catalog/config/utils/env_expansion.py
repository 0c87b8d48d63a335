"""Environment variable expansion for configuration values."""
import os
from typing import Any, Dict


def expand_env_vars(value: Any) -> Any:
    """
    Expand ``$VAR`` and ``${VAR}`` references in strings, recursively.

    Dictionaries and lists are walked; other values are returned unchanged.
    Unknown variables are left as written.
    """
    if isinstance(value, str):
        return os.path.expandvars(value)
    if isinstance(value, dict):
        return {key: expand_env_vars(item) for key, item in value.items()}
    if isinstance(value, list):
        return [expand_env_vars(item) for item in value]
    return value


def expand_config_env_vars(config: Dict[str, Any]) -> Dict[str, Any]:
    """Expand environment variables throughout a configuration dictionary."""
    if not isinstance(config, dict):
        return config
    return expand_env_vars(config)
