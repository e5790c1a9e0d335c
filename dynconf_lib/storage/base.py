"""Storage backend interface definitions.

Defines the StorageBackend abstract class used by `Configuration` to persist
and retrieve values. Backends only deal with combined keys (see
`dynconf_lib.keys`); namespacing is encoded into the key itself.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Dict, Optional, Sequence


class StorageBackend(ABC):
    """Abstract storage backend.

    Implementations are not required to be thread-safe; callers sharing one
    instance across threads must serialize access.
    """

    @abstractmethod
    def load_all(self) -> Dict[str, str]:
        """Return every stored value as a flat `combined key -> value` mapping."""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Return the value stored under `key`, or None when absent."""

    @abstractmethod
    def get_multiple(self, keys: Sequence[str]) -> Dict[str, Optional[str]]:
        """Return a mapping with an entry (value or None) for every requested key."""

    @abstractmethod
    def save(self, key: str, value: str) -> None:
        """Insert or overwrite the value stored under `key`."""

    @abstractmethod
    def remove(self, key: str) -> None:
        """Delete `key` if present. Must not raise when the key is absent."""
