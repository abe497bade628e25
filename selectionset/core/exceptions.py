"""
Selection usage errors.

All of these signal programmer mistakes caught during development; they are
never retried.
"""


class SelectionError(Exception):
    """Base class for selection usage errors."""
    pass


class MultipleNotAllowedError(SelectionError):
    """Raised when several entries are passed to a single-selection set."""
    pass


class MissingIndexError(SelectionError):
    """Raised when a key function is configured but the entry carries no index."""
    pass


class ConfigError(SelectionError):
    """Raised when a configuration file cannot be read or validated."""
    pass
