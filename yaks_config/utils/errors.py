"""
Custom exception classes for run configuration loading.

These provide a hierarchy of typed exceptions for better error handling.
A missing configuration file is not an error and has no exception here.
"""

from __future__ import annotations


class ConfigError(Exception):
    """Base exception for configuration-related errors."""

    def __init__(self, message: str, path: str | None = None) -> None:
        super().__init__(message)
        self.path = path


class ConfigReadError(ConfigError):
    """The configuration file exists but could not be read."""

    def __init__(self, path: str, error: OSError) -> None:
        super().__init__(f"Cannot read configuration file {path}: {error}", path)
        self.errno = error.errno
        self.strerror = error.strerror


class ConfigParseError(ConfigError):
    """The configuration file does not parse into a run configuration."""

    pass
