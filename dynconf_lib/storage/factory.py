"""Factory helpers for constructing storage backends from configuration."""
from __future__ import annotations
import importlib
import logging
from pathlib import Path
from typing import Any, Optional

from dynconf_lib.errors import StorageNotConfiguredError
from .base import StorageBackend
from .interfaces import StorageProtocol
from .json_backend import JsonFileStorage
from .memory_backend import MemoryStorage

logger = logging.getLogger(__name__)

DEFAULT_DATA_DIR = "data/dynamic-configuration"


def import_storage_class(path: str) -> type:
    """Resolve `pkg.module.Class` or `pkg.module:Class` to the class object."""
    if ':' in path:
        module_name, _, attr = path.partition(':')
    else:
        module_name, _, attr = path.rpartition('.')
    if not module_name or not attr:
        raise StorageNotConfiguredError(f'Configuration storage class "{path}" does not exist.')
    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise StorageNotConfiguredError(f'Configuration storage class "{path}" does not exist.') from e
    cls = getattr(module, attr, None)
    if not isinstance(cls, type):
        raise StorageNotConfiguredError(f'Configuration storage class "{path}" does not exist.')
    return cls


def create_storage(
    backend: str = "json",
    data_dir: str | Path = DEFAULT_DATA_DIR,
    storage: Optional[str] = None,
    **options: Any,
) -> StorageProtocol:
    """Create a storage backend.

    - storage: dotted path of an alternative backend class. When given it wins
      over `backend` and is instantiated with `**options`.
    - backend: 'json' (file storage under `data_dir`) or 'memory'.
    """
    if storage:
        cls = import_storage_class(storage)
        instance = cls(**options)
        if not isinstance(instance, (StorageBackend, StorageProtocol)):
            raise StorageNotConfiguredError(
                f'Configuration storage class "{storage}" does not implement the storage interface.'
            )
        logger.info("Using configuration storage %s", storage)
        return instance

    if backend == "json":
        logger.debug("Using JSON file storage in %s", data_dir)
        return JsonFileStorage(data_dir)
    if backend == "memory":
        return MemoryStorage()
    raise ValueError(f"Unknown storage backend: {backend}")
