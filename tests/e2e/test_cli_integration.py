"""End-to-end CLI tests driving ``main`` with real argument lists."""
import json

import pytest
import yaml

from pattern_catalog import __version__
from pattern_catalog.cli.main import main, parse_args


@pytest.fixture(autouse=True)
def no_log_output(clean_environment, monkeypatch):
    """Keep log records off the captured stderr."""
    monkeypatch.setenv("PATTERN_CATALOG_LOG_DESTINATION", "none")


class TestCLIIntegration:
    """Test complete CLI scenarios."""

    def test_no_command_prints_help(self, capsys):
        assert main([]) == 2
        assert "usage:" in capsys.readouterr().out

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])

        assert exc_info.value.code == 0
        assert __version__ in capsys.readouterr().out

    def test_list_text(self, capsys):
        assert main(["list"]) == 0

        out = capsys.readouterr().out
        assert "[behavioral]" in out
        assert "chain-of-responsibility" in out
        assert "[solid]" in out

    def test_list_json_by_category(self, capsys):
        assert main(["--format", "json", "list", "--category", "creational"]) == 0

        data = json.loads(capsys.readouterr().out)
        keys = [p["key"] for p in data["patterns"]]
        assert keys == ["abstract-factory", "builder", "factory", "prototype", "singleton"]
        assert {p["category"] for p in data["patterns"]} == {"creational"}

    def test_list_table(self, capsys):
        assert main(["--format", "table", "list"]) == 0

        out = capsys.readouterr().out
        assert "Key" in out
        assert "observer" in out

    def test_run_text_echoes_demo_output(self, capsys):
        assert main(["run", "command"]) == 0

        out = capsys.readouterr().out.splitlines()
        assert out == ["== Command ==", "Light is ON", "Light is OFF", "Light is OFF", "Light is ON"]

    def test_run_yaml(self, capsys):
        assert main(["--format", "yaml", "run", "proxy", "decorator"]) == 0

        data = yaml.safe_load(capsys.readouterr().out)
        assert [r["key"] for r in data["results"]] == ["proxy", "decorator"]
        assert data["results"][0]["lines"] == ["Loading photo.jpg", "Displaying photo.jpg", "Displaying photo.jpg"]

    def test_run_all_json(self, capsys):
        assert main(["--format", "json", "run", "all"]) == 0

        data = json.loads(capsys.readouterr().out)
        assert len(data["results"]) >= 23
        observer = next(r for r in data["results"] if r["key"] == "observer")
        assert observer["lines"][0] == "Phone Display: Temperature updated to 25°C"

    def test_run_unknown_key_fails_before_running(self, capsys):
        assert main(["run", "command", "no-such-pattern"]) == 1

        captured = capsys.readouterr()
        assert "Light is ON" not in captured.out
        assert "Pattern 'no-such-pattern' not found" in captured.err

    def test_run_unknown_key_quiet(self, capsys):
        assert main(["--quiet", "run", "no-such-pattern"]) == 1
        assert "Error" not in capsys.readouterr().err

    def test_show_text(self, capsys):
        assert main(["show", "singleton"]) == 0

        out = capsys.readouterr().out
        assert out.startswith("# Singleton")
        assert "class Logger:" in out
        assert "Same instance: True" in out

    def test_show_json_without_source(self, capsys):
        assert main(["--format", "json", "show", "liskov-substitution", "--no-source"]) == 0

        data = json.loads(capsys.readouterr().out)
        assert data["name"] == "Liskov Substitution Principle"
        assert "Error: Ostrich cannot fly" in data["output"]
        assert "code" not in data

    def test_export(self, capsys, tmp_path):
        target = tmp_path / "docs"

        assert main(["export", "--output-dir", str(target)]) == 0

        assert (target / "README.md").exists()
        assert (target / "structural" / "adapter.md").exists()
        assert f"files to {target}" in capsys.readouterr().out

    def test_export_uses_configured_directory(self, capsys, tmp_path):
        config_path = tmp_path / "config.json"
        config_path.write_text(json.dumps({"export_dir": str(tmp_path / "out")}))

        assert main(["--config", str(config_path), "--quiet", "export"]) == 0

        assert (tmp_path / "out" / "README.md").exists()
        assert capsys.readouterr().out == ""

    def test_export_without_directory(self, capsys):
        assert main(["export"]) == 1
        assert "No output directory" in capsys.readouterr().err

    def test_bad_config_file(self, capsys, tmp_path):
        assert main(["--config", str(tmp_path / "missing.json"), "list"]) == 1
        assert "Configuration file not found" in capsys.readouterr().err

    def test_non_object_config_section_with_env_override(self, capsys, monkeypatch, tmp_path):
        config_path = tmp_path / "config.json"
        config_path.write_text(json.dumps({"output": "json"}))
        monkeypatch.setenv("PATTERN_CATALOG_OUTPUT_FORMAT", "json")

        assert main(["--config", str(config_path), "list"]) == 1
        assert "Error: Configuration section 'output' must be an object" in capsys.readouterr().err

    def test_config_format_used_when_flag_absent(self, capsys, monkeypatch):
        monkeypatch.setenv("PATTERN_CATALOG_OUTPUT_FORMAT", "json")

        assert main(["list"]) == 0

        assert "patterns" in json.loads(capsys.readouterr().out)


def test_parse_args_run_multiple_keys():
    args = parse_args(["run", "command", "observer"])

    assert args.command == "run"
    assert args.keys == ["command", "observer"]


def test_invalid_category_is_usage_error():
    with pytest.raises(SystemExit) as exc_info:
        parse_args(["list", "--category", "functional"])

    assert exc_info.value.code == 2
