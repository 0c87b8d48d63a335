"""Tests for environment variable expansion utilities."""

import os
from unittest.mock import patch

from pattern_catalog.config.utils.env_expansion import expand_config_env_vars, expand_env_vars


class TestEnvironmentVariableExpansion:
    """Test environment variable expansion functionality."""

    def test_expand_simple_env_var(self):
        """Test expansion of simple environment variable."""
        with patch.dict(os.environ, {"TEST_VAR": "/test/path"}):
            assert expand_env_vars("$TEST_VAR") == "/test/path"

    def test_expand_braced_env_var_with_subpath(self):
        """Test expansion of braced environment variable with subpath."""
        with patch.dict(os.environ, {"TEST_VAR": "/test/path"}):
            assert expand_env_vars("${TEST_VAR}/subdir") == "/test/path/subdir"

    def test_expand_nonexistent_env_var(self):
        """Test expansion of non-existent environment variable."""
        assert expand_env_vars("$NONEXISTENT_CATALOG_VAR") == "$NONEXISTENT_CATALOG_VAR"

    def test_expand_nested_dict_and_list_values(self):
        """Test expansion inside nested dictionaries and lists."""
        with patch.dict(os.environ, {"TEST_VAR": "/logs"}):
            config = {"logging": {"file": {"path": "$TEST_VAR/app.log"}}, "dirs": ["$TEST_VAR", "x"]}
            assert expand_env_vars(config) == {
                "logging": {"file": {"path": "/logs/app.log"}},
                "dirs": ["/logs", "x"],
            }

    def test_expand_non_string_values(self):
        """Test that non-string values are returned unchanged."""
        config = {"number": 42, "boolean": True, "none": None}
        assert expand_env_vars(config) == config

    def test_expand_config_env_vars_ignores_non_dict(self):
        """Test the main configuration expansion function with bad input."""
        assert expand_config_env_vars(["$HOME"]) == ["$HOME"]
