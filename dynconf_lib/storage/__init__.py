"""Storage abstraction package for the configuration store."""

from .base import StorageBackend
from .interfaces import StorageProtocol
from .json_backend import JsonFileStorage
from .memory_backend import MemoryStorage
from .factory import create_storage

__all__ = ["StorageBackend", "StorageProtocol", "JsonFileStorage", "MemoryStorage", "create_storage"]
