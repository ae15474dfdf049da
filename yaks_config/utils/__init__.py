"""
Utilities Package

Common utilities shared by the configuration loader and its CLI.
"""

from .errors import ConfigError, ConfigParseError, ConfigReadError
from .logging import get_logger, setup_logging, shutdown_logging

__all__ = [
    "ConfigError",
    "ConfigParseError",
    "ConfigReadError",
    "get_logger",
    "setup_logging",
    "shutdown_logging",
]
