"""Simple memory-backed storage backend

This backend stores values in memory as a flat `{<combined key>: <value>}` dict.
"""
from threading import RLock
from typing import Dict, Optional, Sequence

from .base import StorageBackend


class MemoryStorage(StorageBackend):
    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._lock = RLock()
        self._store: Dict[str, str] = dict(initial or {})

    def load_all(self) -> Dict[str, str]:
        with self._lock:
            return dict(self._store)

    def get(self, key: str) -> Optional[str]:
        with self._lock:
            return self._store.get(key)

    def get_multiple(self, keys: Sequence[str]) -> Dict[str, Optional[str]]:
        with self._lock:
            return {key: self._store.get(key) for key in keys}

    def save(self, key: str, value: str) -> None:
        with self._lock:
            self._store[key] = value

    def remove(self, key: str) -> None:
        with self._lock:
            self._store.pop(key, None)
