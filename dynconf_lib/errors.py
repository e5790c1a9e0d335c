"""Exception types raised by the configuration store.

Every error derives from `ConfigurationError` and also from the builtin that
best describes it, so callers may catch either.
"""
from typing import List, Optional


class ConfigurationError(Exception):
    """Base exception for configuration store errors"""


class KeyTooLongError(ConfigurationError, ValueError):
    """Raised when a combined key exceeds the maximal key length"""


class ValueTooLongError(ConfigurationError, ValueError):
    """Raised when a value exceeds the maximal value length"""


class DuplicateKeyError(ConfigurationError, ValueError):
    """Raised when two batch entries resolve to the same storage key"""


class MissingKeysError(ConfigurationError, LookupError):
    """Raised by mandatory batch lookups when some keys have no value."""

    def __init__(self, missing: List[str], namespace: Optional[str] = None) -> None:
        self.missing = list(missing)
        self.namespace = namespace
        plural = '' if len(self.missing) == 1 else 's'
        names = '", "'.join(self.missing)
        where = f'(in namespace "{namespace}") ' if namespace is not None else ''
        super().__init__(
            f'All mandatory keys must exist, but key{plural} "{names}" {where}missing.\n'
            'Did you check your configuration?'
        )


class NonNumericValueError(ConfigurationError, TypeError):
    def __init__(self, key: str, value: str) -> None:
        self.key = key
        self.value = value
        super().__init__(f'Constant "{key}" should be numeric, but value "{value}" given.')


class StorageNotConfiguredError(ConfigurationError, RuntimeError):
    """Raised when no storage backend is available"""


class StorageError(ConfigurationError, RuntimeError):
    """Raised when persisted data cannot be decoded or encoded"""
