from dataclasses import dataclass
from datetime import datetime
from typing import Generic, Tuple, TypeVar


T = TypeVar('T')


@dataclass(frozen=True, slots=True)
class CacheEntry(Generic[T]):
    value: T
    created_at: datetime
    ttl_ms: int

    def is_expired(self, now: datetime) -> bool:
        age_ms = (now - self.created_at).total_seconds() * 1000
        return age_ms > self.ttl_ms


@dataclass(frozen=True, slots=True)
class CacheStats:
    size: int
    keys: Tuple[str, ...]


def generate_cache_key(owner: str, repo: str, suffix: str | None = None) -> str:
    base = f"{owner}/{repo}"
    return f"{base}:{suffix}" if suffix else base
