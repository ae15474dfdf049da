"""
Test Factories Module

Centralized factory functions for creating run configuration documents and files.
"""

from .config_factories import (
    make_document,
    temp_config_file,
)

__all__ = [
    "make_document",
    "temp_config_file",
]
