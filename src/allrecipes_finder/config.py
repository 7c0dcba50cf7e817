"""Configuration management using Pydantic settings with an optional JSON config file."""

import json
import logging
import os
from pathlib import Path
from typing import Any, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import InstructionsError
from .prompts import SYSTEM_PROMPT

logger = logging.getLogger(__name__)

# --- Paths ---

APP_NAME = "allrecipes-finder"


def get_config_dir() -> Path:
    """Get the configuration directory (e.g. ~/.config/allrecipes-finder)."""
    if os.name == "nt":
        base = Path(os.environ.get("APPDATA", Path.home() / ".config")).expanduser()
    else:
        base = Path("~/.config").expanduser()
    return base / APP_NAME


CONFIG_FILE = get_config_dir() / "config.json"


def load_config_file(path: Path | None = None) -> dict[str, Any]:
    """Load settings from the JSON config file if it exists."""
    path = path or CONFIG_FILE
    if not path.exists():
        return {}

    try:
        text = path.read_text(encoding="utf-8")
        if not text.strip():
            return {}
        data = json.loads(text)
    except (OSError, json.JSONDecodeError) as e:
        logger.warning(f"Ignoring unreadable config file {path}: {e}")
        return {}

    if not isinstance(data, dict):
        logger.warning(f"Ignoring config file {path}: expected a JSON object")
        return {}
    return data


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(env_prefix="RECIPE_FINDER_LOG_")

    level: str = Field(default="INFO")
    json_output: bool = Field(default=False, description="Render log lines as JSON instead of console text")


class SessionSettings(BaseSettings):
    """Agent session configuration."""

    model_config = SettingsConfigDict(env_prefix="RECIPE_FINDER_SESSION_")

    instructions_file: Optional[str] = Field(default=None, description="Text file replacing the built-in agent instructions")

    def load_instructions(self) -> str:
        """Return the agent instructions, reading the override file when one is configured.

        Raises:
            InstructionsError: If the override file is missing, unreadable or blank.
        """
        if not self.instructions_file:
            return SYSTEM_PROMPT

        path = Path(self.instructions_file).expanduser()
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as e:
            raise InstructionsError(f"Cannot read instructions file {path}: {e}") from e
        if not text.strip():
            raise InstructionsError(f"Instructions file {path} is empty")
        return text


class AppSettings(BaseSettings):
    """Root application settings.

    Priority: Environment Variables > Config File > Defaults
    """

    model_config = SettingsConfigDict(env_prefix="RECIPE_FINDER_", extra="ignore")

    log: LoggingSettings = Field(default_factory=LoggingSettings)
    session: SessionSettings = Field(default_factory=SessionSettings)


def load_settings(path: Path | None = None) -> AppSettings:
    """Load settings with file config as base, env vars overlay."""
    file_data = load_config_file(path)
    settings = AppSettings()
    # Nested settings read their own env vars, so only fill in what env left unset
    for section in ("log", "session"):
        values = file_data.get(section)
        if not isinstance(values, dict):
            continue
        current = getattr(settings, section)
        explicit = current.model_fields_set
        merged = {**values, **current.model_dump(include=explicit)}
        setattr(settings, section, type(current)(**merged))
    return settings


settings = load_settings()
