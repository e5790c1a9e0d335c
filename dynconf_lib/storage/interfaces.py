from typing import Dict, Optional, Protocol, Sequence, runtime_checkable


@runtime_checkable
class StorageProtocol(Protocol):
    """Storage backend protocol mirroring `dynconf_lib.storage.StorageBackend`.

    Alternative backends (for example a database-backed one living in another
    package) do not need to inherit from the abstract class as long as they
    provide these methods with the semantics documented in
    `dynconf_lib.storage.base`.
    """

    def load_all(self) -> Dict[str, str]: ...

    def get(self, key: str) -> Optional[str]: ...

    def get_multiple(self, keys: Sequence[str]) -> Dict[str, Optional[str]]: ...

    def save(self, key: str, value: str) -> None: ...

    def remove(self, key: str) -> None: ...
