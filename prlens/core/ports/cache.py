from typing import Any, Optional, Protocol, runtime_checkable

from prlens.core.schema.cache import CacheStats


@runtime_checkable
class Cache(Protocol):
    def set(self, key: str, value: Any, ttl_ms: Optional[int] = None) -> None:
        ...

    def get(self, key: str) -> Optional[Any]:
        ...

    def has(self, key: str) -> bool:
        ...

    def delete(self, key: str) -> bool:
        ...

    def clear(self) -> None:
        ...

    def stats(self) -> CacheStats:
        ...
