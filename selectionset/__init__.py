"""
selectionset - Selection state for lists and grids.

Tracks which items of a collection are selected, in single or multiple
mode, with optional custom identity via a key function, and notifies
subscribers of every change.
"""

# Core
from selectionset.core.events import Signal
from selectionset.core.config import SelectionConfig, LoggingSettings, SelectionSettings, load_config
from selectionset.core.exceptions import (
    SelectionError,
    MultipleNotAllowedError,
    MissingIndexError,
    ConfigError,
)
from selectionset.core.logging import setup_logging

# Selection
from selectionset.selection.models import SelectableWithIndex, SelectionChange
from selectionset.selection.selection_set import SelectionSet, TrackBySelection, KeyFn

__version__ = "0.1.0"

__all__ = [
    # Core
    "Signal",
    "SelectionConfig",
    "LoggingSettings",
    "SelectionSettings",
    "load_config",
    "setup_logging",

    # Errors
    "SelectionError",
    "MultipleNotAllowedError",
    "MissingIndexError",
    "ConfigError",

    # Selection
    "SelectableWithIndex",
    "SelectionChange",
    "SelectionSet",
    "TrackBySelection",
    "KeyFn",
]
