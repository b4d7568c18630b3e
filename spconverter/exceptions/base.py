"""Base exception classes for SPConverter."""

from pathlib import Path


class SPConverterError(Exception):
    """Base class for every user-facing SPConverter error."""


class ConfigError(SPConverterError):
    """Base class for user-facing configuration errors.

    All configuration-related exceptions inherit from this class to ensure
    consistent error handling and user messaging throughout the application.
    """


class PathError(SPConverterError):
    """Raised when the input path cannot be processed at all.

    This covers a path that does not exist, and a path that is neither an
    eligible audio file nor a directory. It is terminal for the whole run
    because there is nothing to enumerate.
    """

    def __init__(self, message: str, *, path: Path) -> None:
        super().__init__(message)
        self.path = path
