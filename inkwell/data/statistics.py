"""Cache statistics and monitoring module."""

from dataclasses import dataclass, field
from threading import Lock

from inkwell.utils.helpers import today_str


@dataclass
class CacheStatistics:
    """Cache statistics tracker."""

    hits: int = 0
    misses: int = 0
    loads: int = 0
    load_failures: int = 0
    sets: int = 0
    deletes: int = 0
    evictions: int = 0
    created_at: str = field(default_factory=today_str)
    last_updated_at: str = field(default_factory=today_str)
    _lock: Lock = field(default_factory=Lock, init=False, repr=False)

    def _bump(self, name: str, amount: int = 1) -> None:
        with self._lock:
            setattr(self, name, getattr(self, name) + amount)
            self.last_updated_at = today_str()

    def record_hit(self) -> None:
        """Record cache hit."""
        self._bump("hits")

    def record_miss(self) -> None:
        """Record cache miss."""
        self._bump("misses")

    def record_load(self) -> None:
        """Record a loader invocation."""
        self._bump("loads")

    def record_load_failure(self) -> None:
        """Record a loader that raised or was cancelled."""
        self._bump("load_failures")

    def record_set(self) -> None:
        """Record cache set operation."""
        self._bump("sets")

    def record_delete(self, count: int = 1) -> None:
        """
        Record removed entries.

        Args:
            count: Number of entries removed.
        """
        self._bump("deletes", count)

    def record_eviction(self) -> None:
        """Record cache eviction."""
        self._bump("evictions")

    @property
    def hit_rate(self) -> float:
        """
        Calculate cache hit rate.

        Returns:
            Hit rate as percentage (0-100).
        """
        total = self.hits + self.misses
        return (self.hits / total * 100) if total > 0 else 0.0

    @property
    def total_requests(self) -> int:
        return self.hits + self.misses

    def reset(self) -> None:
        """Reset statistics."""
        with self._lock:
            self.hits = 0
            self.misses = 0
            self.loads = 0
            self.load_failures = 0
            self.sets = 0
            self.deletes = 0
            self.evictions = 0
            self.created_at = today_str()
            self.last_updated_at = today_str()

    def to_dict(self) -> dict[str, int | float | str]:
        """
        Convert statistics to dictionary.

        Returns:
            Dictionary representation of statistics.
        """
        with self._lock:
            return {
                "hits": self.hits,
                "misses": self.misses,
                "loads": self.loads,
                "load_failures": self.load_failures,
                "sets": self.sets,
                "deletes": self.deletes,
                "evictions": self.evictions,
                "hit_rate": f"{self.hit_rate:.2f}%",
                "total_requests": self.total_requests,
                "created_at": self.created_at,
                "last_updated_at": self.last_updated_at,
            }
