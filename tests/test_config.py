"""Tests for application settings."""

import json
import os

import pytest

from allrecipes_finder.config import AppSettings, SessionSettings, load_config_file, load_settings
from allrecipes_finder.exceptions import InstructionsError
from allrecipes_finder.prompts import SYSTEM_PROMPT


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove settings env vars before each test."""
    for var in list(os.environ.keys()):
        if var.startswith("RECIPE_FINDER_"):
            monkeypatch.delenv(var, raising=False)


class TestDefaults:
    def test_defaults(self):
        settings = AppSettings()
        assert settings.log.level == "INFO"
        assert settings.log.json_output is False
        assert settings.session.instructions_file is None

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("RECIPE_FINDER_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("RECIPE_FINDER_SESSION_INSTRUCTIONS_FILE", "/etc/recipes.md")
        settings = AppSettings()
        assert settings.log.level == "DEBUG"
        assert settings.session.instructions_file == "/etc/recipes.md"


class TestConfigFile:
    def test_missing_file(self, tmp_path):
        assert load_config_file(tmp_path / "nope.json") == {}

    def test_blank_file(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("  \n", encoding="utf-8")
        assert load_config_file(path) == {}

    def test_invalid_json_ignored(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("{not json", encoding="utf-8")
        assert load_config_file(path) == {}

    def test_non_object_ignored(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("[1, 2]", encoding="utf-8")
        assert load_config_file(path) == {}

    def test_file_values_applied(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"log": {"level": "WARNING"}, "session": {"instructions_file": "x.md"}}), encoding="utf-8")
        settings = load_settings(path)
        assert settings.log.level == "WARNING"
        assert settings.session.instructions_file == "x.md"

    def test_env_beats_file(self, tmp_path, monkeypatch):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"log": {"level": "WARNING", "json_output": True}}), encoding="utf-8")
        monkeypatch.setenv("RECIPE_FINDER_LOG_LEVEL", "ERROR")
        settings = load_settings(path)
        assert settings.log.level == "ERROR"
        assert settings.log.json_output is True


class TestInstructions:
    def test_builtin_by_default(self):
        assert SessionSettings().load_instructions() == SYSTEM_PROMPT

    def test_file_override(self, tmp_path):
        path = tmp_path / "instructions.md"
        path.write_text("Find soups only.", encoding="utf-8")
        assert SessionSettings(instructions_file=str(path)).load_instructions() == "Find soups only."

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(InstructionsError, match="Cannot read"):
            SessionSettings(instructions_file=str(tmp_path / "missing.md")).load_instructions()

    def test_blank_file_raises(self, tmp_path):
        path = tmp_path / "instructions.md"
        path.write_text("\n\n", encoding="utf-8")
        with pytest.raises(InstructionsError, match="empty"):
            SessionSettings(instructions_file=str(path)).load_instructions()
