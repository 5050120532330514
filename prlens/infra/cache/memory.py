import threading
from typing import Any, Dict, Optional

from prlens.core.ports.cache import Cache
from prlens.core.ports.clock import Clock
from prlens.core.ports.logger import Logger
from prlens.core.schema.cache import CacheEntry, CacheStats, generate_cache_key
from prlens.infra.clock.system import SystemClock

DEFAULT_TTL_MS = 5 * 60 * 1000


class MemoryCache(Cache):
    """In-process key/value store with per-entry expiry.

    Expired entries are evicted lazily, on the next ``get``/``has`` for their
    key. ``stats`` reports whatever is physically stored, so an entry past its
    TTL keeps being counted until something reads it.
    """

    def __init__(
        self,
        clock: Clock,
        default_ttl_ms: int = DEFAULT_TTL_MS,
        logger: Optional[Logger] = None,
    ) -> None:
        self._clock = clock
        self._default_ttl_ms = default_ttl_ms
        self._logger = logger
        self._entries: Dict[str, CacheEntry[Any]] = {}
        self._lock = threading.Lock()

    @property
    def default_ttl_ms(self) -> int:
        return self._default_ttl_ms

    def set(self, key: str, value: Any, ttl_ms: Optional[int] = None) -> None:
        entry = CacheEntry(
            value=value,
            created_at=self._clock.now(),
            ttl_ms=self._default_ttl_ms if ttl_ms is None else ttl_ms,
        )
        with self._lock:
            self._entries[key] = entry
        self._debug("Cache store", key=key, ttl_ms=entry.ttl_ms)

    def get(self, key: str) -> Optional[Any]:
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            expired = entry.is_expired(self._clock.now())
            if expired:
                del self._entries[key]
        if expired:
            self._debug("Cache entry expired", key=key)
            return None
        return entry.value

    def has(self, key: str) -> bool:
        return self.get(key) is not None

    def delete(self, key: str) -> bool:
        with self._lock:
            return self._entries.pop(key, None) is not None

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def stats(self) -> CacheStats:
        with self._lock:
            keys = tuple(self._entries)
        return CacheStats(size=len(keys), keys=keys)

    @staticmethod
    def generate_key(owner: str, repo: str, suffix: Optional[str] = None) -> str:
        return generate_cache_key(owner, repo, suffix)

    def _debug(self, message: str, **context: Any) -> None:
        if self._logger is not None:
            self._logger.debug(message, **context)


_default_cache: Optional[MemoryCache] = None
_default_cache_lock = threading.Lock()


def get_default_cache() -> MemoryCache:
    """Return the process-wide cache, creating it on first use."""
    global _default_cache
    with _default_cache_lock:
        if _default_cache is None:
            _default_cache = MemoryCache(SystemClock())
        return _default_cache


def reset_default_cache() -> None:
    global _default_cache
    with _default_cache_lock:
        _default_cache = None
