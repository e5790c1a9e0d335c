"""Configuration façade over a storage backend.

`Configuration` formats (key, namespace) pairs into combined keys, validates
values and delegates persistence to a `StorageBackend`.
"""
from __future__ import annotations
import logging
from typing import Dict, Mapping, Optional, Sequence, Union

from dynconf_lib import keys as keys_mod
from dynconf_lib.errors import (
    DuplicateKeyError,
    MissingKeysError,
    NonNumericValueError,
    StorageNotConfiguredError,
    ValueTooLongError,
)
from dynconf_lib.section import ConfigurationSection
from dynconf_lib.storage.interfaces import StorageProtocol

logger = logging.getLogger(__name__)

MAX_VALUE_LENGTH = 512

KeyRequest = Union[Mapping[Union[str, int], str], Sequence[str]]


class Configuration:
    def __init__(self, storage: Optional[StorageProtocol] = None) -> None:
        self._storage = storage

    @property
    def storage(self) -> StorageProtocol:
        if self._storage is None:
            raise StorageNotConfiguredError(
                'Configuration storage does not exist. '
                'Did you create the configuration with a storage backend?'
            )
        return self._storage

    def load_all(self) -> Dict[str, str]:
        return self.storage.load_all()

    def get_section(self, namespace: str) -> ConfigurationSection:
        return ConfigurationSection(self, namespace)

    def get(self, key: str, namespace: Optional[str] = None) -> Optional[str]:
        return self.storage.get(keys_mod.format_key(key, namespace))

    def get_multiple(self, keys: KeyRequest, namespace: Optional[str] = None) -> Dict[str, Optional[str]]:
        """Find multiple keys in one storage round trip.

        `keys` maps the name a value is returned under (alias) to the key to
        look up. Integer mapping keys, or a plain sequence of keys, return
        each value under its own key. The namespace applies to every key.

        Raises `DuplicateKeyError` when two entries resolve to the same
        storage key.
        """
        items = keys.items() if isinstance(keys, Mapping) else enumerate(keys)
        key_map: Dict[str, str] = {}
        for alias, find_key in items:
            real_key = keys_mod.format_key(find_key, namespace)
            if real_key in key_map:
                raise DuplicateKeyError(
                    f'Key "{real_key}" already exist in key map, because "{find_key}" '
                    f'(or alias "{alias}") is duplicated.'
                )
            key_map[real_key] = find_key if isinstance(alias, int) else alias

        found = self.storage.get_multiple(list(key_map))
        return {alias: found.get(real_key) for real_key, alias in key_map.items()}

    def get_multiple_mandatory(self, keys: KeyRequest, namespace: Optional[str] = None) -> Dict[str, str]:
        """Like `get_multiple`, but every key must have a value.

        Raises `MissingKeysError` listing all missing keys at once.
        """
        selection = self.get_multiple(keys, namespace)
        result: Dict[str, str] = {}
        missing = []
        for alias, value in selection.items():
            if value is None:
                missing.append(alias)
            else:
                result[alias] = value
        if missing:
            raise MissingKeysError(missing, namespace)
        return result

    def save(self, key: str, value: Optional[str], namespace: Optional[str] = None) -> None:
        if value is None:
            self.remove(key, namespace)
            return
        if len(value) > MAX_VALUE_LENGTH:
            raise ValueTooLongError(
                f'Maximal value length is {MAX_VALUE_LENGTH} characters, but {len(value)} given.'
            )
        formatted = keys_mod.format_key(key, namespace)
        storage = self.storage
        if storage.get(formatted) == value:
            logger.debug('Value of %s is unchanged, skipping save', formatted)
            return
        storage.save(formatted, value)

    def remove(self, key: str, namespace: Optional[str] = None) -> None:
        formatted = keys_mod.format_key(key, namespace)
        self.storage.remove(formatted)
        logger.debug('Removed %s', formatted)

    def increment(self, key: str, count: int = 1, namespace: Optional[str] = None) -> None:
        current = self.get(key, namespace)
        value = '0' if current is None else str(current)
        if not keys_mod.is_numeric(value):
            raise NonNumericValueError(keys_mod.format_key(key, namespace), value)
        self.save(key, str(_integer_part(value) + count), namespace)


def _integer_part(value: str) -> int:
    """Truncate a numeric string such as '-3.7' to its integer part (-3)."""
    whole = value.split('.', 1)[0]
    if whole in ('', '+', '-'):
        return 0
    return int(whole)
