import json

import pytest

from pattern_catalog.config.manager import ConfigurationManager, get_config_manager
from pattern_catalog.config.schemas import LogDestination, LogLevel, OutputFormat
from pattern_catalog.domain.exceptions import ConfigurationError


@pytest.fixture
def config_file(tmp_path):
    def write(data):
        path = tmp_path / "config.json"
        path.write_text(json.dumps(data) if not isinstance(data, str) else data)
        return str(path)
    return write


class TestConfigurationManager:

    def test_defaults(self):
        config = ConfigurationManager().app_config

        assert config.logging.level is LogLevel.WARNING
        assert config.logging.destination is LogDestination.STDOUT
        assert config.output.format is OutputFormat.TEXT
        assert config.output.echo is True

    def test_file_values(self, config_file):
        path = config_file({"logging": {"level": "debug"}, "output": {"format": "json"}})

        config = ConfigurationManager(path).app_config

        assert config.logging.level is LogLevel.DEBUG
        assert config.output.format is OutputFormat.JSON

    def test_file_from_environment(self, config_file, monkeypatch):
        monkeypatch.setenv("PATTERN_CATALOG_CONFIG", config_file({"export_dir": "docs"}))

        assert ConfigurationManager().app_config.export_dir == "docs"

    def test_env_vars_expanded_in_file(self, config_file, monkeypatch):
        monkeypatch.setenv("CATALOG_LOG_ROOT", "/var/log/catalog")
        path = config_file({"logging": {"file": {"path": "$CATALOG_LOG_ROOT/app.log"}}})

        assert ConfigurationManager(path).get("logging.file.path") == "/var/log/catalog/app.log"

    def test_env_override_beats_file(self, config_file, monkeypatch):
        path = config_file({"logging": {"level": "INFO"}})
        monkeypatch.setenv("PATTERN_CATALOG_LOG_LEVEL", "ERROR")

        assert ConfigurationManager(path).app_config.logging.level is LogLevel.ERROR

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError, match="not found"):
            ConfigurationManager(str(tmp_path / "missing.json")).app_config

    def test_invalid_json(self, config_file):
        with pytest.raises(ConfigurationError, match="not valid JSON"):
            ConfigurationManager(config_file("{not json")).app_config

    def test_non_object_json(self, config_file):
        with pytest.raises(ConfigurationError, match="JSON object"):
            ConfigurationManager(config_file([1, 2])).app_config

    def test_invalid_value_reports_field(self, config_file):
        path = config_file({"output": {"format": "xml"}})

        with pytest.raises(ConfigurationError) as exc_info:
            ConfigurationManager(path).app_config

        assert "output.format" in exc_info.value.missing_fields

    @pytest.mark.parametrize("section_value", [None, "json", ["text"]])
    def test_env_override_into_non_object_section(self, config_file, monkeypatch, section_value):
        path = config_file({"output": section_value})
        monkeypatch.setenv("PATTERN_CATALOG_OUTPUT_FORMAT", "json")

        with pytest.raises(ConfigurationError, match="'output' must be an object") as exc_info:
            ConfigurationManager(path).app_config

        assert exc_info.value.missing_fields == ["output"]

    def test_null_section_without_override_is_validation_error(self, config_file):
        with pytest.raises(ConfigurationError) as exc_info:
            ConfigurationManager(config_file({"logging": None})).app_config

        assert "logging" in exc_info.value.missing_fields

    def test_override_returns_copy(self):
        manager = ConfigurationManager()

        overridden = manager.override(output={"format": "yaml"}, logging={})

        assert overridden.output.format is OutputFormat.YAML
        assert manager.app_config.output.format is OutputFormat.TEXT

    def test_get_unknown_path_returns_default(self):
        assert ConfigurationManager().get("output.nope", "fallback") == "fallback"

    def test_reload_picks_up_environment(self, monkeypatch):
        manager = ConfigurationManager()
        assert manager.app_config.output.format is OutputFormat.TEXT

        monkeypatch.setenv("PATTERN_CATALOG_OUTPUT_FORMAT", "table")

        assert manager.reload().output.format is OutputFormat.TABLE


def test_get_config_manager_is_shared():
    assert get_config_manager() is get_config_manager()


def test_get_config_manager_switches_on_new_file(config_file):
    first = get_config_manager()
    second = get_config_manager(config_file({}))

    assert first is not second
    assert get_config_manager() is second
