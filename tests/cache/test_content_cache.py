"""Tests for the partitioned read-through content cache."""

import asyncio
from datetime import timedelta
from unittest.mock import AsyncMock

import pytest

from inkwell.clients.memory_client import SlidingMemoryStore
from inkwell.configs import CacheConfig
from inkwell.managers.cache_types import CacheDivision
from inkwell.managers.content_cache import ContentCache
from inkwell.utils.cache_keys import page_slug_key
from tests.cache.fakes import FakeClock


class TestGetOrCreate:
    async def test_second_call_is_a_hit(self, cache: ContentCache) -> None:
        """Two reads without invalidation load once and return the same value."""
        loader = AsyncMock(return_value={"title": "About"})

        first = await cache.get_or_create(CacheDivision.PAGE, "about", loader)
        second = await cache.get_or_create(CacheDivision.PAGE, "about", loader)

        assert first == second == {"title": "About"}
        loader.assert_awaited_once()
        stats = cache.get_statistics()
        assert stats["hits"] == 1
        assert stats["misses"] == 1
        assert stats["loads"] == 1

    async def test_remove_forces_reload(self, cache: ContentCache) -> None:
        loader = AsyncMock(side_effect=["v1", "v2"])

        assert await cache.get_or_create(CacheDivision.TAG, "hot-10", loader) == "v1"
        assert await cache.remove(CacheDivision.TAG, "hot-10") is True
        assert await cache.get_or_create(CacheDivision.TAG, "hot-10", loader) == "v2"
        assert loader.await_count == 2

    async def test_remove_absent_key_is_noop(self, cache: ContentCache) -> None:
        assert await cache.remove(CacheDivision.POST, "never-stored") is False
        assert cache.get_statistics()["deletes"] == 0

    async def test_keys_are_compared_exactly(self, cache: ContentCache) -> None:
        """Unnormalized keys land on separate entries; normalized ones share one."""
        first = AsyncMock(return_value="upper")
        second = AsyncMock(return_value="lower")

        assert await cache.get_or_create(CacheDivision.PAGE, "Foo", first) == "upper"
        assert await cache.get_or_create(CacheDivision.PAGE, "foo", second) == "lower"
        second.assert_awaited_once()

        third = AsyncMock(return_value="unused")
        value = await cache.get_or_create(CacheDivision.PAGE, page_slug_key("FOO"), third)
        assert value == "lower"
        third.assert_not_awaited()

    async def test_partitions_are_isolated(self, cache: ContentCache) -> None:
        await cache.get_or_create(CacheDivision.PAGE, "all", AsyncMock(return_value="page"))
        value = await cache.get_or_create(CacheDivision.CATEGORY, "all", AsyncMock(return_value="cat"))
        assert value == "cat"

    async def test_invalidation_returns_updated_value(self, cache: ContentCache) -> None:
        """An update followed by removal is visible to the next read."""
        published = {"title": "About", "is_published": True}
        unpublished = {"title": "About", "is_published": False}

        assert await cache.get_or_create(CacheDivision.PAGE, "about", AsyncMock(return_value=published)) == published
        await cache.remove(CacheDivision.PAGE, "about")
        value = await cache.get_or_create(CacheDivision.PAGE, "about", AsyncMock(return_value=unpublished))

        assert value == unpublished


class TestLoaderFailures:
    async def test_error_propagates_and_stores_nothing(self, cache: ContentCache) -> None:
        failing = AsyncMock(side_effect=ConnectionError("database down"))

        with pytest.raises(ConnectionError, match="database down"):
            await cache.get_or_create(CacheDivision.POST, "hello", failing)

        assert await cache.contains(CacheDivision.POST, "hello") is False
        assert cache.get_statistics()["load_failures"] == 1

        value = await cache.get_or_create(CacheDivision.POST, "hello", AsyncMock(return_value="ok"))
        assert value == "ok"

    async def test_cancelled_load_stores_nothing(self, cache: ContentCache) -> None:
        started = asyncio.Event()

        async def slow_loader() -> str:
            started.set()
            await asyncio.sleep(10)
            return "late"

        task = asyncio.create_task(cache.get_or_create(CacheDivision.PAGE, "slow", slow_loader))
        await started.wait()
        task.cancel()

        with pytest.raises(asyncio.CancelledError):
            await task
        assert await cache.contains(CacheDivision.PAGE, "slow") is False


class TestNotFoundPolicy:
    async def test_none_is_cached_by_default(self, cache: ContentCache) -> None:
        loader = AsyncMock(return_value=None)

        assert await cache.get_or_create(CacheDivision.PAGE, "ghost", loader) is None
        assert await cache.get_or_create(CacheDivision.PAGE, "ghost", loader) is None
        loader.assert_awaited_once()

    async def test_none_is_not_cached_when_disabled(self, store: SlidingMemoryStore) -> None:
        cache = ContentCache(CacheConfig(cache_not_found=False), store=store)
        loader = AsyncMock(return_value=None)

        await cache.get_or_create(CacheDivision.PAGE, "ghost", loader)
        await cache.get_or_create(CacheDivision.PAGE, "ghost", loader)

        assert loader.await_count == 2


class TestSlidingExpiration:
    async def test_partition_window_applies(self, cache: ContentCache, clock: FakeClock) -> None:
        """Tag entries idle for their 10 minute window are reloaded."""
        loader = AsyncMock(side_effect=["v1", "v2"])

        await cache.get_or_create(CacheDivision.TAG, "hot-10", loader)
        clock.advance(timedelta(minutes=9).total_seconds())
        assert await cache.get_or_create(CacheDivision.TAG, "hot-10", loader) == "v1"

        clock.advance(timedelta(minutes=10).total_seconds())
        assert await cache.get_or_create(CacheDivision.TAG, "hot-10", loader) == "v2"

    async def test_expiration_override(self, cache: ContentCache, clock: FakeClock) -> None:
        loader = AsyncMock(side_effect=["v1", "v2"])

        await cache.get_or_create(CacheDivision.PAGE, "about", loader, expiration=timedelta(seconds=5))
        clock.advance(5)
        assert await cache.get_or_create(CacheDivision.PAGE, "about", loader) == "v2"

    def test_expiration_for_reads_config(self, cache: ContentCache) -> None:
        assert cache.expiration_for(CacheDivision.PAGE) == timedelta(minutes=30)

    @pytest.mark.parametrize("expiration", [timedelta(0), timedelta(seconds=-1)])
    async def test_non_positive_override_rejected_before_load(
        self,
        cache: ContentCache,
        expiration: timedelta,
    ) -> None:
        loader = AsyncMock(return_value="v")
        with pytest.raises(ValueError, match="must be positive"):
            await cache.get_or_create(CacheDivision.PAGE, "x", loader, expiration=expiration)
        loader.assert_not_awaited()
        assert cache.statistics.misses == 0


class TestCoalescing:
    async def test_concurrent_misses_load_once(self, cache: ContentCache) -> None:
        release = asyncio.Event()
        calls = 0

        async def loader() -> str:
            nonlocal calls
            calls += 1
            await release.wait()
            return "value"

        tasks = [
            asyncio.create_task(cache.get_or_create(CacheDivision.POST, "hello", loader)) for _ in range(5)
        ]
        await asyncio.sleep(0)
        release.set()

        assert await asyncio.gather(*tasks) == ["value"] * 5
        assert calls == 1

    async def test_without_coalescing_each_miss_loads(self, store: SlidingMemoryStore) -> None:
        cache = ContentCache(CacheConfig(coalesce_loads=False), store=store)
        release = asyncio.Event()
        calls = 0

        async def loader() -> str:
            nonlocal calls
            calls += 1
            await release.wait()
            return "value"

        tasks = [asyncio.create_task(cache.get_or_create(CacheDivision.POST, "hello", loader)) for _ in range(3)]
        await asyncio.sleep(0)
        release.set()
        await asyncio.gather(*tasks)

        assert calls == 3

    def test_lock_table_is_bounded(self, store: SlidingMemoryStore) -> None:
        cache = ContentCache(CacheConfig(max_locks=2), store=store)
        for key in ("a", "b", "c"):
            cache._get_or_create_lock(key)
        assert list(cache._locks) == ["b", "c"]

    async def test_held_lock_survives_eviction(self, store: SlidingMemoryStore) -> None:
        """A miss for another key does not evict the lock of a running load."""
        cache = ContentCache(CacheConfig(max_locks=1), store=store)
        started = asyncio.Event()
        release = asyncio.Event()
        calls = 0

        async def slow_loader() -> str:
            nonlocal calls
            calls += 1
            started.set()
            await release.wait()
            return "a-value"

        first = asyncio.create_task(cache.get_or_create(CacheDivision.PAGE, "a", slow_loader))
        await started.wait()

        assert await cache.get_or_create(CacheDivision.PAGE, "b", AsyncMock(return_value="b-value")) == "b-value"
        second = asyncio.create_task(cache.get_or_create(CacheDivision.PAGE, "a", slow_loader))
        await asyncio.sleep(0)
        release.set()

        assert await asyncio.gather(first, second) == ["a-value", "a-value"]
        assert calls == 1


class TestClearAndHealth:
    async def test_clear_partition(self, cache: ContentCache) -> None:
        await cache.get_or_create(CacheDivision.TAG, "hot-10", AsyncMock(return_value=[]))
        await cache.get_or_create(CacheDivision.TAG, "hot-20", AsyncMock(return_value=[]))
        await cache.get_or_create(CacheDivision.PAGE, "about", AsyncMock(return_value={}))

        assert await cache.clear(CacheDivision.TAG) == 2
        assert await cache.contains(CacheDivision.PAGE, "about") is True

    async def test_clear_everything(self, cache: ContentCache) -> None:
        await cache.get_or_create(CacheDivision.PAGE, "about", AsyncMock(return_value={}))
        await cache.clear()
        assert await cache.contains(CacheDivision.PAGE, "about") is False

    async def test_health_check(self, cache: ContentCache) -> None:
        health = await cache.health_check()
        assert health["status"] == "healthy"
        assert health["backend"] == "in-memory"
        assert health["info"]["total_keys"] == 0

    async def test_initialize_and_shutdown(self, cache: ContentCache) -> None:
        await cache.initialize()
        assert await cache.ping() is True
        await cache.shutdown()
        assert await cache.ping() is False
