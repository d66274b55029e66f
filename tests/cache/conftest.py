"""Pytest configuration and fixtures for cache tests."""

import pytest

from inkwell.clients.memory_client import SlidingMemoryStore
from inkwell.configs import CacheConfig
from inkwell.managers.content_cache import ContentCache
from tests.cache.fakes import FakeClock


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def store(clock: FakeClock) -> SlidingMemoryStore:
    """In-memory store driven by the fake clock."""
    return SlidingMemoryStore(max_entries=100, cleanup_interval=60, clock=clock)


@pytest.fixture
def cache_config() -> CacheConfig:
    return CacheConfig()


@pytest.fixture
def cache(cache_config: CacheConfig, store: SlidingMemoryStore) -> ContentCache:
    """
    Content cache over the fake-clock store.

    Uses the default expirations, e.g. page 30 minutes and tag 10 minutes.
    """
    return ContentCache(cache_config, store=store)
