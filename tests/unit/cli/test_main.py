"""Tests for the CLI entry point."""
import json
from unittest.mock import patch

import pytest

from confpatterns._package import DESCRIPTION
from confpatterns.cli.main import build_parser, main


@pytest.fixture(autouse=True)
def no_logging_setup():
    """Keep the CLI from replacing the test run's logging handlers."""
    with patch("confpatterns.cli.main.setup_logging") as mock_setup:
        yield mock_setup


def run_cli(capsys, *argv):
    exit_code = main(list(argv))
    captured = capsys.readouterr()
    return exit_code, captured.out, captured.err


class TestParser:
    """Test argument parsing."""

    def test_no_resource_means_demo(self):
        """Test that a bare invocation parses with no resource."""
        args = build_parser().parse_args([])

        assert args.resource is None
        assert args.format == "json"

    def test_description_from_package_metadata(self):
        """Test that help text uses the package description."""
        assert build_parser().description == DESCRIPTION

    def test_missing_action(self, capsys):
        """Test that a resource without an action exits with usage."""
        with pytest.raises(SystemExit) as exc_info:
            main(["settings"])

        assert exc_info.value.code == 2


class TestSettingsCommands:
    """Test settings subcommands."""

    def test_set_then_get(self, capsys, settings_file, clean_settings):
        """Test storing and reading a setting through the CLI."""
        exit_code, out, _ = run_cli(
            capsys, "--settings-file", str(settings_file), "settings", "set", "username", "user1"
        )
        assert exit_code == 0
        assert json.loads(out)["value"] == "user1"
        assert settings_file.read_text(encoding="utf-8") == "username user1\n"

        clean_settings.clear_settings()
        exit_code, out, _ = run_cli(
            capsys, "--settings-file", str(settings_file), "settings", "get", "username"
        )
        assert exit_code == 0
        assert json.loads(out) == {"key": "username", "value": "user1"}

    def test_set_keeps_existing_file_entries(self, capsys, settings_file):
        """Test that set merges with what is already on disk."""
        settings_file.write_text("a 1\n", encoding="utf-8")

        run_cli(capsys, "--settings-file", str(settings_file), "settings", "set", "b", "2")

        assert settings_file.read_text(encoding="utf-8") == "a 1\nb 2\n"

    def test_get_missing_key(self, capsys, settings_file):
        """Test the exit code and message for an unknown key."""
        settings_file.write_text("a 1\n", encoding="utf-8")

        exit_code, _, err = run_cli(
            capsys, "--settings-file", str(settings_file), "settings", "get", "missing"
        )

        assert exit_code == 1
        assert "Setting 'missing' not found" in err

    def test_get_missing_file(self, capsys, tmp_path):
        """Test the exit code when the settings file does not exist."""
        exit_code, _, err = run_cli(
            capsys, "--settings-file", str(tmp_path / "nope.txt"), "settings", "get", "a"
        )

        assert exit_code == 1
        assert "Could not read settings file" in err

    def test_list_non_utf8_file(self, capsys, settings_file):
        """Test that listing a file with foreign bytes does not crash."""
        settings_file.write_bytes(b"mode fast\nname caf\xe9\n")

        exit_code, out, _ = run_cli(
            capsys, "--settings-file", str(settings_file), "--format", "table", "settings", "list"
        )

        assert exit_code == 0
        assert "fast" in out
        assert "caf\\udce9" in out

    def test_list_yaml(self, capsys, settings_file):
        """Test listing settings as YAML."""
        settings_file.write_text("b 2\na 1\n", encoding="utf-8")

        exit_code, out, _ = run_cli(
            capsys, "--format", "yaml", "--settings-file", str(settings_file), "settings", "list"
        )

        assert exit_code == 0
        assert out.startswith("settings:\n  a: '1'\n  b: '2'")

    def test_list_without_file(self, capsys, tmp_path):
        """Test that listing with no file shows an empty mapping."""
        exit_code, out, _ = run_cli(
            capsys, "--settings-file", str(tmp_path / "none.txt"), "settings", "list"
        )

        assert exit_code == 0
        assert json.loads(out) == {"settings": {}}

    def test_config_file_sets_default_settings_file(self, capsys, tmp_path):
        """Test that the settings file can come from the config file."""
        settings_path = tmp_path / "from-config.txt"
        config_file = tmp_path / "config.yml"
        config_file.write_text(f"settings:\n  default_file: {settings_path}\n", encoding="utf-8")

        run_cli(capsys, "--config", str(config_file), "settings", "set", "k", "v")

        assert settings_path.read_text(encoding="utf-8") == "k v\n"

    def test_invalid_config_file(self, capsys, tmp_path):
        """Test the exit code for an invalid config file."""
        config_file = tmp_path / "config.yml"
        config_file.write_text("logging:\n  level: LOUD\n", encoding="utf-8")

        exit_code, _, err = run_cli(capsys, "--config", str(config_file), "reports", "build")

        assert exit_code == 1
        assert "Invalid configuration" in err

    def test_log_level_override(self, capsys, no_logging_setup):
        """Test that --log-level overrides the configured level."""
        run_cli(capsys, "--log-level", "DEBUG", "orders", "show")

        logging_config = no_logging_setup.call_args.args[0]
        assert logging_config.level == "DEBUG"


class TestReportAndOrderCommands:
    """Test reports and orders subcommands."""

    def test_reports_build_html(self, capsys):
        """Test building the HTML report."""
        exit_code, out, _ = run_cli(capsys, "reports", "build", "--type", "html")

        assert exit_code == 0
        assert json.loads(out) == {
            "header": "<h1>Report Header</h1>",
            "content": "<p>This is the report content.</p>",
            "footer": "<footer>Report Footer</footer>",
        }

    def test_reports_build_defaults_to_text(self, capsys):
        """Test the default report type."""
        _, out, _ = run_cli(capsys, "reports", "build")

        assert json.loads(out)["header"] == "Text Header: Report Header"

    def test_orders_clone(self, capsys):
        """Test that the clone matches the original order."""
        exit_code, out, _ = run_cli(capsys, "orders", "clone")

        data = json.loads(out)
        assert exit_code == 0
        assert data["original"] == data["clone"]
        assert data["clone"]["total"] == 2040
        assert [p["name"] for p in data["clone"]["products"]] == ["Laptop", "Smartphone"]
