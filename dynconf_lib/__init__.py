"""Namespaced key/value configuration store."""

from .configuration import Configuration
from .section import ConfigurationSection
from .errors import (
    ConfigurationError,
    KeyTooLongError,
    ValueTooLongError,
    DuplicateKeyError,
    MissingKeysError,
    NonNumericValueError,
    StorageNotConfiguredError,
    StorageError,
)

__all__ = [
    "Configuration",
    "ConfigurationSection",
    "ConfigurationError",
    "KeyTooLongError",
    "ValueTooLongError",
    "DuplicateKeyError",
    "MissingKeysError",
    "NonNumericValueError",
    "StorageNotConfiguredError",
    "StorageError",
]
