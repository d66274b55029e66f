"""In-memory entry store with sliding expiration for the content cache."""

from asyncio import CancelledError, Lock, Task, create_task
from asyncio import sleep as asyncio_sleep
from collections import OrderedDict
from collections.abc import Callable
from contextlib import suppress
from dataclasses import dataclass
from logging import DEBUG, getLogger
from time import monotonic
from typing import Any

from inkwell.configs import file_logger

logger = file_logger(getLogger(__name__))


@dataclass
class CacheEntry:
    """
    A stored value with its sliding expiration window.

    Args:
        value: The cached value (may be None for a cached "not found").
        sliding: Sliding window length in seconds.
        expires_at: Clock reading after which the entry is dead.
    """

    value: Any
    sliding: float
    expires_at: float

    def touch(self, now: float) -> None:
        """Restart the sliding window."""
        self.expires_at = now + self.sliding

    def is_expired(self, now: float) -> bool:
        return now >= self.expires_at


class SlidingMemoryStore:
    """
    An asynchronous in-memory store whose entries expire after a period of disuse.

    Features:
        - Sliding expiration, reset on every read hit
        - Entry count limit with LRU eviction
        - Active expiration via background cleanup task
        - Prefix-based bulk deletion for partitioned keys
        - Safe for concurrent tasks via asyncio.Lock
    """

    DEFAULT_MAX_ENTRIES: int = 10_000
    DEFAULT_CLEANUP_INTERVAL: int = 300  # seconds
    DEFAULT_CLEANUP_BATCH_SIZE: int = 1000

    def __init__(
        self,
        max_entries: int = DEFAULT_MAX_ENTRIES,
        cleanup_interval: int = DEFAULT_CLEANUP_INTERVAL,
        clock: Callable[[], float] = monotonic,
        on_evict: Callable[[], None] | None = None,
    ) -> None:
        """
        Initialize the store with configurable limits.

        Args:
            max_entries: Maximum number of entries before LRU eviction.
            cleanup_interval: Interval in seconds for background cleanup.
            clock: Monotonic time source, replaceable in tests.
            on_evict: Callback fired once per capacity eviction.
        """
        self._entries: OrderedDict[str, CacheEntry] = OrderedDict()
        self.is_connected: bool = True
        self._cleanup_task: Task[None] | None = None

        self._max_entries = max_entries
        self._cleanup_interval = cleanup_interval
        self._cleanup_batch_size = self.DEFAULT_CLEANUP_BATCH_SIZE
        self._clock = clock
        self._on_evict = on_evict

        self._lock = Lock()

    async def start_lifecycle(self) -> None:
        """Start background maintenance tasks."""
        async with self._lock:
            if not self._cleanup_task:
                self.is_connected = True
                self._cleanup_task = create_task(self._cleanup_loop())
                logger.info("SlidingMemoryStore active expiration task started.")

    async def _cleanup_loop(self) -> None:
        """Background loop to remove expired entries."""
        while self.is_connected:
            try:
                await asyncio_sleep(self._cleanup_interval)
                await self.remove_expired()
            except CancelledError:
                break
            except Exception:
                logger.exception("Error in memory cleanup loop")

    async def remove_expired(self) -> int:
        """Scan and remove expired entries in batches."""
        async with self._lock:
            if not self._entries:
                return 0

            now = self._clock()
            keys = list(self._entries.keys())
            expired_keys: list[str] = []

            for i in range(0, len(keys), self._cleanup_batch_size):
                batch = keys[i : i + self._cleanup_batch_size]
                expired_keys.extend(k for k in batch if self._entries[k].is_expired(now))

            count = self._delete_internal(*expired_keys)
            if count and logger.isEnabledFor(DEBUG):
                logger.debug("Memory cleanup: removed %d expired entries.", count)
            return count

    def _delete_internal(self, *keys: str) -> int:
        """Delete keys without acquiring lock (internal use only)."""
        count = 0
        for key in keys:
            if self._entries.pop(key, None) is not None:
                count += 1
        return count

    def _evict_oldest(self) -> None:
        """Evict the least recently used entry - internal, no lock."""
        key, _ = self._entries.popitem(last=False)
        if logger.isEnabledFor(DEBUG):
            logger.debug("Evicted least recently used key: %s", key)
        if self._on_evict:
            self._on_evict()

    async def get(self, key: str) -> CacheEntry | None:
        """
        Return the live entry for a key and restart its sliding window.

        Expired entries are removed and reported as a miss.
        """
        async with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None

            now = self._clock()
            if entry.is_expired(now):
                self._delete_internal(key)
                return None

            entry.touch(now)
            self._entries.move_to_end(key)
            return entry

    async def set(self, key: str, value: Any, sliding: float) -> bool:  # noqa: ANN401
        """Store a value under a key, replacing any previous entry."""
        if sliding <= 0:
            mssg = f"Sliding expiration must be positive, got {sliding}"
            raise ValueError(mssg)

        async with self._lock:
            if key not in self._entries:
                while len(self._entries) >= self._max_entries and self._entries:
                    self._evict_oldest()

            self._entries[key] = CacheEntry(
                value=value,
                sliding=sliding,
                expires_at=self._clock() + sliding,
            )
            self._entries.move_to_end(key)
            return True

    async def delete(self, *keys: str) -> int:
        """Delete one or more keys from the store."""
        async with self._lock:
            return self._delete_internal(*keys)

    async def delete_prefix(self, prefix: str) -> int:
        """Delete every key starting with a prefix."""
        async with self._lock:
            matching = [k for k in self._entries if k.startswith(prefix)]
            return self._delete_internal(*matching)

    async def exists(self, *keys: str) -> int:
        """Count how many of the keys hold a live entry, without touching them."""
        async with self._lock:
            now = self._clock()
            return sum(
                1 for key in keys if key in self._entries and not self._entries[key].is_expired(now)
            )

    async def ttl(self, key: str) -> int:
        """
        Get the remaining seconds before a key expires if left unread.

        Returns -2 when the key does not exist, mirroring Redis.
        """
        async with self._lock:
            entry = self._entries.get(key)
            now = self._clock()
            if entry is None or entry.is_expired(now):
                self._delete_internal(key)
                return -2
            return int(entry.expires_at - now)

    async def flush_all(self) -> bool:
        """Clear the entire store."""
        async with self._lock:
            self._entries.clear()
            return True

    async def ping(self) -> bool:
        """Check if the store is alive."""
        return self.is_connected

    async def info(self) -> dict[str, str | int]:
        """Get information about the in-memory store."""
        async with self._lock:
            return {
                "server": "In-Memory Sliding Cache",
                "total_keys": len(self._entries),
                "max_entries": self._max_entries,
                "cleanup_interval": self._cleanup_interval,
            }

    async def close(self) -> None:
        """Stop the store and its cleanup task."""
        async with self._lock:
            self.is_connected = False
            task, self._cleanup_task = self._cleanup_task, None

        # Awaited outside the lock: the cleanup loop may be waiting on it
        if task:
            task.cancel()
            with suppress(CancelledError):
                await task
