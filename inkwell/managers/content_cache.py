"""Read-through content cache partitioned by content type."""

from asyncio import Lock as AsyncLock
from collections import OrderedDict
from datetime import timedelta
from logging import DEBUG, getLogger
from threading import Lock as ThreadLock
from typing import Any

from inkwell.clients.memory_client import SlidingMemoryStore
from inkwell.configs import CacheConfig, file_logger
from inkwell.data import CacheStatistics
from inkwell.errors import BASE_EXCEPTION
from inkwell.managers.cache_types import CacheDivision, CacheLoader, CacheValue

logger = file_logger(getLogger(__name__))

KEY_SEPARATOR = ":"


class ContentCache:
    """
    Process-wide read-through cache for slow-changing blog content.

    Entries are addressed by ``(partition, key)``. Keys are stored exactly as
    given: callers lower-case slugs and names before both reads and
    invalidations (see ``inkwell.utils.cache_keys``).

    Features:
        - Sliding expiration per partition, resolved from configuration
        - Explicit "not found" caching policy
        - Optional request coalescing (single-flight) per key
        - LRU-based lock eviction to prevent unbounded lock growth
        - Statistics tracking
    """

    def __init__(
        self,
        config: CacheConfig | None = None,
        store: SlidingMemoryStore | None = None,
    ) -> None:
        """
        Initialize the cache.

        Args:
            config: Validated cache configuration; loaded from the environment when omitted.
            store: Entry store; a new in-memory store is created when omitted.
        """
        self.config = config or CacheConfig()
        self.statistics = CacheStatistics()
        self._store = store or SlidingMemoryStore(
            max_entries=self.config.max_entries,
            cleanup_interval=self.config.cleanup_interval,
            on_evict=self.statistics.record_eviction,
        )

        # Locks for request coalescing, LRU ordered
        self._locks: OrderedDict[str, AsyncLock] = OrderedDict()
        self._locks_lock = ThreadLock()

    async def initialize(self) -> None:
        """Start background expiration of idle entries."""
        await self._store.start_lifecycle()
        logger.info("Content cache initialized successfully.")

    async def shutdown(self) -> None:
        """Stop background tasks."""
        await self._store.close()
        logger.info("Content cache shutdown successfully.")

    @staticmethod
    def build_key(partition: CacheDivision, key: str) -> str:
        """Build the storage key for a partition entry."""
        return f"{CacheDivision(partition).value}{KEY_SEPARATOR}{key}"

    def expiration_for(self, partition: CacheDivision) -> timedelta:
        """Return the configured sliding expiration of a partition."""
        return self.config.sliding_expiration(partition)

    def _get_or_create_lock(self, full_key: str) -> AsyncLock:
        """
        Get or create a lock for a key in a thread-safe manner.

        Uses LRU eviction to prevent memory leaks from unbounded lock growth;
        a lock that is currently held is never evicted.
        """
        with self._locks_lock:
            if full_key in self._locks:
                self._locks.move_to_end(full_key)
                return self._locks[full_key]

            while len(self._locks) >= self.config.max_locks:
                # Locks held by an in-flight load stay; the table may briefly exceed the bound
                idle = next((k for k, held in self._locks.items() if not held.locked()), None)
                if idle is None:
                    break
                del self._locks[idle]

            lock = AsyncLock()
            self._locks[full_key] = lock
            return lock

    async def _lookup(self, full_key: str) -> tuple[bool, CacheValue]:
        """Return ``(hit, value)`` for a storage key."""
        entry = await self._store.get(full_key)
        if entry is None:
            return False, None
        return True, entry.value

    async def get_or_create(
        self,
        partition: CacheDivision,
        key: str,
        loader: CacheLoader,
        expiration: timedelta | None = None,
    ) -> CacheValue:
        """
        Return the cached value for ``(partition, key)`` or load and store it.

        A hit restarts the entry's sliding window. On a miss ``loader`` is
        awaited and its result stored; a ``None`` result is stored only when
        ``cache_not_found`` is enabled. Exceptions raised by the loader,
        cancellation included, propagate unchanged and leave no entry behind.

        Args:
            partition: Content partition the key belongs to.
            key: Caller-normalized key.
            loader: Zero-argument coroutine function producing the value.
            expiration: Sliding window override; defaults to the partition's setting.

        Returns:
            The cached or freshly loaded value, possibly None.

        Raises:
            ValueError: If the effective sliding window is not positive.
        """
        full_key = self.build_key(partition, key)
        sliding = expiration if expiration is not None else self.expiration_for(partition)
        if sliding <= timedelta(0):
            mssg = f"Sliding expiration must be positive, got {sliding}"
            raise ValueError(mssg)

        hit, value = await self._lookup(full_key)
        if hit:
            self.statistics.record_hit()
            if logger.isEnabledFor(DEBUG):
                logger.debug("Cache hit: %s", full_key)
            return value

        if not self.config.coalesce_loads:
            return await self._load(full_key, loader, sliding)

        async with self._get_or_create_lock(full_key):
            # Another task may have filled the entry while we waited
            hit, value = await self._lookup(full_key)
            if hit:
                self.statistics.record_hit()
                return value
            return await self._load(full_key, loader, sliding)

    async def _load(
        self,
        full_key: str,
        loader: CacheLoader,
        sliding: timedelta,
    ) -> CacheValue:
        """Run the loader for a missed key and store its result."""
        self.statistics.record_miss()
        if logger.isEnabledFor(DEBUG):
            logger.debug("Cache miss, loading: %s", full_key)

        self.statistics.record_load()
        try:
            value = await loader()
        except BaseException:
            self.statistics.record_load_failure()
            raise

        if value is None and not self.config.cache_not_found:
            return None

        await self._store.set(full_key, value, sliding.total_seconds())
        self.statistics.record_set()
        return value

    async def contains(self, partition: CacheDivision, key: str) -> bool:
        """Check whether a live entry exists without restarting its window."""
        return await self._store.exists(self.build_key(partition, key)) > 0

    async def remove(self, partition: CacheDivision, key: str) -> bool:
        """
        Remove an entry; removing an absent key is a no-op.

        Returns:
            True when an entry was removed.
        """
        full_key = self.build_key(partition, key)
        deleted = await self._store.delete(full_key)
        if deleted:
            self.statistics.record_delete(deleted)
        if logger.isEnabledFor(DEBUG):
            logger.debug("Cache invalidated: %s (removed=%d)", full_key, deleted)
        return bool(deleted)

    async def clear(self, partition: CacheDivision | None = None) -> int:
        """
        Remove every entry of a partition, or the whole cache.

        Returns:
            Number of entries removed (0 when the whole cache is flushed).
        """
        if partition is None:
            await self._store.flush_all()
            logger.info("Content cache flushed.")
            return 0

        prefix = self.build_key(partition, "")
        deleted = await self._store.delete_prefix(prefix)
        if deleted:
            self.statistics.record_delete(deleted)
        logger.info("Cleared %d entries from partition '%s'.", deleted, partition.value)
        return deleted

    async def ping(self) -> bool:
        return await self._store.ping()

    async def health_check(self) -> dict[str, Any]:
        """
        Perform a health check.

        Returns:
            Dictionary with health status and details.
        """
        result: dict[str, Any] = {
            "backend": "in-memory",
            "statistics": self.get_statistics(),
        }
        try:
            result["status"] = "healthy" if await self._store.ping() else "unhealthy"
            result["info"] = await self._store.info()
        except BASE_EXCEPTION as e:
            result["status"] = "unhealthy"
            result["error"] = str(e)
        return result

    def get_statistics(self) -> dict[str, int | float | str]:
        """Get cache statistics."""
        return self.statistics.to_dict()

    def reset_statistics(self) -> None:
        """Reset cache statistics."""
        self.statistics.reset()
        logger.info("Cache statistics reset.")
