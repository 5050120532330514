from prlens.infra.cache.memory import (
    DEFAULT_TTL_MS,
    MemoryCache,
    get_default_cache,
    reset_default_cache,
)

__all__ = [
    "DEFAULT_TTL_MS",
    "MemoryCache",
    "get_default_cache",
    "reset_default_cache",
]
