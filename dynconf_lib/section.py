from typing import TYPE_CHECKING, Dict, Optional

if TYPE_CHECKING:
    from dynconf_lib.configuration import Configuration, KeyRequest


class ConfigurationSection:
    """A view of `Configuration` bound to one namespace."""

    def __init__(self, configuration: "Configuration", namespace: str) -> None:
        self.configuration = configuration
        self.namespace = namespace

    def get(self, key: str) -> Optional[str]:
        return self.configuration.get(key, self.namespace)

    def get_multiple(self, keys: "KeyRequest") -> Dict[str, Optional[str]]:
        return self.configuration.get_multiple(keys, self.namespace)

    def get_multiple_mandatory(self, keys: "KeyRequest") -> Dict[str, str]:
        return self.configuration.get_multiple_mandatory(keys, self.namespace)

    def save(self, key: str, value: Optional[str]) -> None:
        self.configuration.save(key, value, self.namespace)

    def remove(self, key: str) -> None:
        self.configuration.remove(key, self.namespace)

    def increment(self, key: str, count: int = 1) -> None:
        self.configuration.increment(key, count, self.namespace)
