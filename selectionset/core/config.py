from typing import Any, Dict, Optional
import json
import os
from pydantic import BaseModel, ConfigDict, Field
from loguru import logger

from .exceptions import ConfigError


class SelectionConfig(BaseModel):
    """
    Construction options for a SelectionSet.

    `strict` enables usage checks (multiple entries in single mode, missing
    index with a key function); when off the checks are skipped silently.
    """
    model_config = ConfigDict(extra="forbid")

    multiple: bool = False
    strict: bool = True


class LoggingSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    debug_mode: bool = True
    log_dir: Optional[str] = None


class SelectionSettings(BaseModel):
    """Top-level settings file: one section per concern."""
    model_config = ConfigDict(extra="forbid")

    selection: SelectionConfig = Field(default_factory=SelectionConfig)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


def _read_raw(filepath: str) -> Dict[str, Any]:
    if filepath.endswith('.toml'):
        import tomllib
        with open(filepath, "rb") as f:
            return tomllib.load(f)
    with open(filepath, "r", encoding="utf-8") as f:
        return json.load(f)


def load_config(filepath: str) -> SelectionSettings:
    """
    Load settings from a JSON or TOML file.

    Options live under `[selection]` and `[logging]`; either section may be
    omitted. A missing file yields the defaults.

    Raises:
        ConfigError: If the file cannot be parsed or fails validation.
    """
    if not os.path.isfile(filepath):
        logger.debug(f"No config at {filepath}, using defaults")
        return SelectionSettings()

    try:
        return SelectionSettings.model_validate(_read_raw(filepath))
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load config from {filepath}: {e}")
        raise ConfigError(f"Invalid selection config {filepath}: {e}") from e
