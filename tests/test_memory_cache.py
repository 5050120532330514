import threading
import time

from prlens.infra.cache import (
    DEFAULT_TTL_MS,
    MemoryCache,
    get_default_cache,
    reset_default_cache,
)
from prlens.infra.clock import SystemClock


class TestMemoryCacheReadWrite:
    def test_get_returns_stored_value(self, cache) -> None:
        cache.set("owner/repo", {"value": 1})

        assert cache.get("owner/repo") == {"value": 1}

    def test_get_returns_none_for_unknown_key(self, cache) -> None:
        assert cache.get("missing") is None

    def test_set_overwrites_existing_entry(self, cache) -> None:
        cache.set("key", "first")
        cache.set("key", "second")

        assert cache.get("key") == "second"
        assert cache.stats().size == 1

    def test_has_reflects_presence(self, cache) -> None:
        cache.set("key", "value")

        assert cache.has("key") is True
        assert cache.has("other") is False

    def test_delete_reports_whether_entry_existed(self, cache) -> None:
        cache.set("key", "value")

        assert cache.delete("key") is True
        assert cache.delete("key") is False
        assert cache.get("key") is None

    def test_clear_removes_everything(self, cache) -> None:
        cache.set("a", 1)
        cache.set("b", 2)

        cache.clear()

        assert cache.stats().size == 0
        assert cache.get("a") is None


class TestMemoryCacheExpiry:
    def test_default_ttl_is_five_minutes(self, cache) -> None:
        assert cache.default_ttl_ms == DEFAULT_TTL_MS == 300_000

    def test_entry_survives_until_ttl_elapses(self, cache, clock) -> None:
        cache.set("key", "value", ttl_ms=100)

        clock.advance(milliseconds=100)

        assert cache.get("key") == "value"

    def test_entry_expires_after_ttl(self, cache, clock) -> None:
        cache.set("key", "value", ttl_ms=100)

        clock.advance(milliseconds=150)

        assert cache.get("key") is None

    def test_default_ttl_applies_when_not_given(self, cache, clock) -> None:
        cache.set("key", "value")

        clock.advance(milliseconds=DEFAULT_TTL_MS - 1)
        assert cache.has("key") is True

        clock.advance(milliseconds=2)
        assert cache.has("key") is False

    def test_stats_counts_expired_entries_until_read(self, cache, clock) -> None:
        cache.set("stale", "value", ttl_ms=10)
        cache.set("fresh", "value", ttl_ms=10_000)
        clock.advance(milliseconds=50)

        before = cache.stats()
        cache.get("stale")
        after = cache.stats()

        assert before.size == 2
        assert set(before.keys) == {"stale", "fresh"}
        assert after.size == 1
        assert after.keys == ("fresh",)

    def test_has_evicts_expired_entry(self, cache, clock) -> None:
        cache.set("key", "value", ttl_ms=10)
        clock.advance(milliseconds=20)

        assert cache.has("key") is False
        assert cache.stats().size == 0

    def test_expiry_with_system_clock(self) -> None:
        cache = MemoryCache(SystemClock())
        cache.set("key", "value", ttl_ms=100)

        time.sleep(0.15)

        assert cache.get("key") is None

    def test_logs_expiry(self, cache, clock, logger) -> None:
        cache.set("key", "value", ttl_ms=10)
        clock.advance(milliseconds=20)

        cache.get("key")

        assert "Cache entry expired" in logger.messages("debug")


class TestGenerateKey:
    def test_owner_and_repo(self) -> None:
        assert MemoryCache.generate_key("o", "r") == "o/r"

    def test_with_suffix(self) -> None:
        assert MemoryCache.generate_key("o", "r", "x") == "o/r:x"

    def test_empty_suffix_is_ignored(self) -> None:
        assert MemoryCache.generate_key("o", "r", "") == "o/r"


class TestDefaultCache:
    def test_returns_same_instance(self) -> None:
        assert get_default_cache() is get_default_cache()

    def test_reset_creates_new_instance(self) -> None:
        first = get_default_cache()
        first.set("key", "value")

        reset_default_cache()

        assert get_default_cache() is not first
        assert get_default_cache().get("key") is None


class TestConcurrentAccess:
    def test_parallel_writers_leave_one_entry_per_key(self, cache) -> None:
        def writer(worker: int) -> None:
            for index in range(200):
                cache.set(f"key-{index % 10}", (worker, index))
                cache.get(f"key-{(index + 5) % 10}")

        threads = [threading.Thread(target=writer, args=(n,)) for n in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        stats = cache.stats()
        assert stats.size == 10
        assert len(set(stats.keys)) == 10
