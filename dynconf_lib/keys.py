"""Combined key helpers.

A configuration value is addressed by a local key and an optional namespace.
Storage backends only see a single flat string, the combined key:

    | Key      | Namespace | Combined      |
    |----------|-----------|---------------|
    | name     | e-shop    | e-shop__name  |
    | token-cs | gtm       | gtm__token-cs |
    | a__key   | a         | a__key        |
    | b__key   | a         | b__key        |
    | c__key   | None      | c__key        |
    | name     | None      | name          |
    | name     | "null"    | name          |
    | name     | "false"   | name          |
"""
import re
from typing import NamedTuple, Optional

from .errors import KeyTooLongError

SEPARATOR = "__"
GLOBAL_NAMESPACE = "global"
MAX_KEY_LENGTH = 128

_KEY_RE = re.compile(r'([^_]+)__(.+)', re.DOTALL)
_NUMERIC_RE = re.compile(r'[+-]?[0-9]*\.?[0-9]+')


class ParsedKey(NamedTuple):
    namespace: str
    key: str


def format_key(key: str, namespace: Optional[str] = None) -> str:
    """Combine `key` and `namespace` into a single storage key.

    A key that already contains the separator carries its own namespace and
    the given one is ignored.
    """
    if SEPARATOR in key:
        return _validate_length(key)
    if not namespace or namespace.lower() in ('null', 'false'):
        return _validate_length(key)
    return _validate_length(namespace + SEPARATOR + key)


def parse_key(combined: str) -> ParsedKey:
    match = _KEY_RE.fullmatch(combined)
    if match is None:
        return ParsedKey(GLOBAL_NAMESPACE, combined)
    return ParsedKey(match.group(1), match.group(2))


def is_numeric(value: str) -> bool:
    """Return True if `value` is a decimal number such as `12`, `-3` or `.5`."""
    return _NUMERIC_RE.fullmatch(value) is not None


def _validate_length(key: str) -> str:
    if len(key) > MAX_KEY_LENGTH:
        raise KeyTooLongError(
            f'Maximal key length with namespace is {MAX_KEY_LENGTH} characters, but {len(key)} given.'
        )
    return key
