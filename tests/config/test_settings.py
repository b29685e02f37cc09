"""Tests for scriptpad settings loading and precedence."""

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from scriptpad.config import (
    ScriptpadSettings,
    clear_settings_cache,
    get_settings,
    get_settings_for_cli,
    set_settings,
)
from scriptpad.editor.caret import Viewport
from scriptpad.exceptions import ConfigurationError


class TestScriptpadSettings:
    """Test field defaults and validation."""

    def test_defaults(self):
        """Test the default values."""
        settings = ScriptpadSettings()
        assert settings.debug is False
        assert settings.log_level == "WARNING"
        assert settings.log_format == "console"
        assert settings.log_file is None
        assert settings.editor_line_height == 20
        assert settings.editor_viewport_height == 500

    def test_env_vars(self, monkeypatch):
        """Test loading from SCRIPTPAD_ environment variables."""
        monkeypatch.setenv("SCRIPTPAD_LOG_LEVEL", "debug")
        monkeypatch.setenv("SCRIPTPAD_EDITOR_LINE_HEIGHT", "18")
        settings = ScriptpadSettings.from_env()
        assert settings.log_level == "DEBUG"
        assert settings.editor_line_height == 18

    def test_case_insensitive_values(self):
        """Test that level and format are normalised."""
        settings = ScriptpadSettings(log_level="info", log_format="JSON")
        assert settings.log_level == "INFO"
        assert settings.log_format == "json"

    def test_invalid_log_level(self):
        """Test that unknown levels are rejected."""
        with pytest.raises(ValidationError):
            ScriptpadSettings(log_level="LOUD")

    def test_invalid_geometry(self):
        """Test that the editor geometry must be positive."""
        with pytest.raises(ValidationError):
            ScriptpadSettings(editor_line_height=0)

    def test_log_file_expanded(self, tmp_path, monkeypatch):
        """Test that ~ in the log file path is expanded."""
        monkeypatch.setenv("HOME", str(tmp_path))
        settings = ScriptpadSettings(log_file="~/logs/scriptpad.log")
        assert settings.log_file == (tmp_path / "logs" / "scriptpad.log").resolve()

    def test_viewport(self):
        """Test building the default editor viewport."""
        settings = ScriptpadSettings(editor_line_height=16, editor_viewport_height=320)
        assert settings.viewport() == Viewport(line_height=16, client_height=320)


class TestFromFile:
    """Test loading configuration files."""

    def test_yaml(self, tmp_path):
        """Test loading a YAML file."""
        path = tmp_path / "config.yaml"
        path.write_text("log_level: INFO\neditor_line_height: 24\n")
        settings = ScriptpadSettings.from_file(path)
        assert settings.log_level == "INFO"
        assert settings.editor_line_height == 24

    def test_empty_yaml(self, tmp_path):
        """Test that an empty YAML file gives defaults."""
        path = tmp_path / "config.yml"
        path.write_text("")
        assert ScriptpadSettings.from_file(path).log_level == "WARNING"

    def test_toml(self, tmp_path):
        """Test loading a TOML file."""
        path = tmp_path / "config.toml"
        path.write_text('log_format = "structured"\ndebug = true\n')
        settings = ScriptpadSettings.from_file(path)
        assert settings.log_format == "structured"
        assert settings.debug is True

    def test_json(self, tmp_path):
        """Test loading a JSON file."""
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"editor_viewport_height": 640}))
        assert ScriptpadSettings.from_file(path).editor_viewport_height == 640

    def test_unsupported_format(self, tmp_path):
        """Test that unknown file formats are rejected with a hint."""
        path = tmp_path / "config.ini"
        path.write_text("[scriptpad]\n")
        with pytest.raises(ConfigurationError) as exc_info:
            ScriptpadSettings.from_file(path)
        assert ".toml" in exc_info.value.hint
        assert exc_info.value.details["detected_format"] == ".ini"

    def test_missing_file(self, tmp_path):
        """Test loading a file that does not exist."""
        with pytest.raises(FileNotFoundError):
            ScriptpadSettings.from_file(tmp_path / "nope.yaml")

    def test_wrong_key(self, tmp_path):
        """Test that common key mistakes are reported."""
        path = tmp_path / "config.yaml"
        path.write_text("line_height: 18\n")
        with pytest.raises(ConfigurationError, match="line_height"):
            ScriptpadSettings.from_file(path)


class TestPrecedence:
    """Test merging settings from several sources."""

    def test_later_files_win(self, tmp_path):
        """Test that later config files override earlier ones."""
        first = tmp_path / "first.yaml"
        first.write_text("log_level: INFO\neditor_line_height: 22\n")
        second = tmp_path / "second.json"
        second.write_text(json.dumps({"log_level": "ERROR"}))

        settings = ScriptpadSettings.from_multiple_sources(
            config_files=[first, second]
        )
        assert settings.log_level == "ERROR"
        assert settings.editor_line_height == 22

    def test_file_beats_env(self, tmp_path, monkeypatch):
        """Test that config files override environment variables."""
        monkeypatch.setenv("SCRIPTPAD_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("SCRIPTPAD_EDITOR_VIEWPORT_HEIGHT", "300")
        path = tmp_path / "config.yaml"
        path.write_text("log_level: ERROR\n")

        settings = ScriptpadSettings.from_multiple_sources(config_files=[path])
        assert settings.log_level == "ERROR"
        assert settings.editor_viewport_height == 300

    def test_cli_beats_file(self, tmp_path):
        """Test that CLI arguments override everything else."""
        path = tmp_path / "config.yaml"
        path.write_text("log_level: ERROR\n")
        settings = ScriptpadSettings.from_multiple_sources(
            config_files=[path], cli_args={"log_level": "DEBUG", "debug": None}
        )
        assert settings.log_level == "DEBUG"
        assert settings.debug is False

    def test_missing_file_skipped(self, tmp_path):
        """Test that a missing config file falls back to defaults."""
        settings = ScriptpadSettings.from_multiple_sources(
            config_files=[tmp_path / "missing.yaml"]
        )
        assert settings.log_level == "WARNING"

    def test_env_file(self, tmp_path):
        """Test loading a specific .env file."""
        env_file = tmp_path / "custom.env"
        env_file.write_text("SCRIPTPAD_EDITOR_LINE_HEIGHT=30\n")
        settings = ScriptpadSettings.from_multiple_sources(env_file=env_file)
        assert settings.editor_line_height == 30


class TestGlobalSettings:
    """Test the process-wide settings instance."""

    def test_set_and_get(self):
        """Test replacing the global settings."""
        settings = ScriptpadSettings(log_level="ERROR")
        set_settings(settings)
        assert get_settings() is settings

    def test_reads_config_from_working_directory(self, tmp_path):
        """Test discovery of scriptpad.yaml in the working directory."""
        (tmp_path / "scriptpad.yaml").write_text("editor_line_height: 26\n")
        clear_settings_cache()
        assert get_settings().editor_line_height == 26

    def test_reads_config_from_home(self, tmp_path):
        """Test discovery of the user config file."""
        config_dir = tmp_path / ".config" / "scriptpad"
        config_dir.mkdir(parents=True)
        (config_dir / "config.toml").write_text("editor_viewport_height = 700\n")
        clear_settings_cache()
        assert get_settings().editor_viewport_height == 700

    def test_cached(self):
        """Test that repeated calls return the same instance."""
        clear_settings_cache()
        assert get_settings() is get_settings()


class TestSettingsForCli:
    """Test settings resolution for CLI commands."""

    def test_overrides(self):
        """Test applying CLI overrides to the global settings."""
        settings = get_settings_for_cli(cli_overrides={"log_level": "INFO"})
        assert settings.log_level == "INFO"
        assert get_settings().log_level == "WARNING"

    def test_config_file(self, tmp_path):
        """Test loading an explicit config file."""
        path = tmp_path / "custom.yaml"
        path.write_text("editor_line_height: 12\n")
        settings = get_settings_for_cli(config_file=path)
        assert settings.editor_line_height == 12

    def test_missing_config_file(self, tmp_path):
        """Test that an explicit config file must exist."""
        with pytest.raises(FileNotFoundError):
            get_settings_for_cli(config_file=Path(tmp_path / "missing.yaml"))
