"""File-backed storage keeping one pretty-printed JSON object per namespace.

Values are stored under `<storage_dir>/<namespace>.json` as a flat mapping of
local key to value. Keys without a namespace live in `global.json`.

Each namespace bucket is cached in memory together with an expiration
timestamp taken when the file was last read. Mutations always re-read the
bucket first and write the full bucket back, leaving the cache holding what
was just written.
"""
from __future__ import annotations
import json
import logging
import os
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict, Optional, Sequence

from dynconf_lib.errors import StorageError
from dynconf_lib.keys import SEPARATOR, parse_key
from .base import StorageBackend

logger = logging.getLogger(__name__)

FILE_SUFFIX = ".json"


@dataclass
class CacheEntry:
    bucket: Dict[str, str]
    expires_at: Optional[float] = None


class JsonFileStorage(StorageBackend):
    MAX_EXPIRATION = 0.5  # seconds

    def __init__(self, storage_dir: str | Path, clock: Callable[[], float] = time.time) -> None:
        self.storage_dir = Path(storage_dir)
        self.storage_dir.mkdir(parents=True, exist_ok=True)
        self._root = self.storage_dir.resolve()
        self._clock = clock
        self._cache: Dict[str, CacheEntry] = {}

    def _path_for(self, namespace: str) -> Path:
        path = self.storage_dir / f"{namespace}{FILE_SUFFIX}"
        if not path.resolve().is_relative_to(self._root):
            raise StorageError(f"Namespace \"{namespace}\" points outside of the storage directory.")
        return path

    def get(self, key: str) -> Optional[str]:
        parsed = parse_key(key)
        return self._load_bucket(parsed.namespace).get(parsed.key)

    def get_multiple(self, keys: Sequence[str]) -> Dict[str, Optional[str]]:
        return {key: self.get(key) for key in keys}

    def load_all(self) -> Dict[str, str]:
        result: Dict[str, str] = {}
        for path in sorted(self.storage_dir.glob(f"*{FILE_SUFFIX}")):
            namespace = path.name[: -len(FILE_SUFFIX)]
            if not namespace or not path.is_file():
                continue
            for key, value in self._read(path).items():
                result[namespace + SEPARATOR + key] = value
        return result

    def save(self, key: str, value: str) -> None:
        parsed = parse_key(key)
        bucket = self._load_bucket(parsed.namespace, force=True)
        bucket[parsed.key] = value
        self._flush(parsed.namespace)

    def remove(self, key: str) -> None:
        parsed = parse_key(key)
        bucket = self._load_bucket(parsed.namespace, force=True)
        bucket.pop(parsed.key, None)
        self._flush(parsed.namespace)

    def _load_bucket(self, namespace: str, force: bool = False) -> Dict[str, str]:
        entry = self._cache.get(namespace)
        now = self._clock()
        # An entry still inside its expiration window is re-read; an expired
        # one is served from memory. Kept as-is pending a product decision.
        if entry is not None and entry.expires_at is not None and entry.expires_at >= now:
            force = True
        if entry is None or force:
            path = self._path_for(namespace)
            if path.is_file():
                expires_at = now + self.MAX_EXPIRATION
                entry = CacheEntry(self._read(path), expires_at)
                logger.debug("Loaded namespace %s from %s (%d keys)", namespace, path, len(entry.bucket))
            else:
                self._write(path, "{}")
                logger.info("Created empty configuration namespace file %s", path)
                entry = CacheEntry({}, entry.expires_at if entry is not None else None)
            self._cache[namespace] = entry
        return entry.bucket

    def _flush(self, namespace: str) -> None:
        bucket = self._cache[namespace].bucket
        try:
            data = json.dumps(bucket, indent=4, ensure_ascii=False)
        except (TypeError, ValueError) as e:
            raise StorageError(f"Can not serialize json: {e}") from e
        self._write(self._path_for(namespace), data)
        logger.debug("Wrote namespace %s (%d keys)", namespace, len(bucket))

    @staticmethod
    def _read(path: Path) -> Dict[str, str]:
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise StorageError(f"Invalid json in storage {path.name}: {e}") from e
        if not isinstance(data, dict):
            raise StorageError(f"Invalid json in storage {path.name}: expected an object")
        return data

    @staticmethod
    def _write(path: Path, data: str) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp = path.with_suffix(path.suffix + ".tmp")
        with open(tmp, "w", encoding="utf-8") as f:
            f.write(data)
            f.flush()
            os.fsync(f.fileno())
        tmp.replace(path)
