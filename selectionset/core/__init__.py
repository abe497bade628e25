"""
Selection Core - Shared infrastructure.

Provides:
- Signal: Synchronous observer used as the change stream
- SelectionSettings / load_config: Pydantic-validated settings file
- setup_logging: Loguru configuration
- Selection usage exceptions
"""
from .events import Signal
from .config import SelectionConfig, LoggingSettings, SelectionSettings, load_config
from .exceptions import (
    SelectionError,
    MultipleNotAllowedError,
    MissingIndexError,
    ConfigError,
)
from .logging import setup_logging

__all__ = [
    # Events
    "Signal",

    # Configuration
    "SelectionConfig",
    "LoggingSettings",
    "SelectionSettings",
    "load_config",

    # Errors
    "SelectionError",
    "MultipleNotAllowedError",
    "MissingIndexError",
    "ConfigError",

    # Logging
    "setup_logging",
]
