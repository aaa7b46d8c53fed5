"""Pytest configuration and fixtures for agriconnect-cache tests."""

import pytest

from agriconnect_cache.application.services.event_publisher import CacheEventPublisher
from agriconnect_cache.infrastructure.configuration.cache_config import CacheConfig
from agriconnect_cache.infrastructure.repositories.memory_cache_store import MemoryCacheStore


class FakeClock:
    """Manually advanced millisecond clock."""

    def __init__(self, start_ms: float = 1_000_000.0):
        self.now_ms = start_ms

    def __call__(self) -> float:
        return self.now_ms

    def advance(self, ms: float) -> None:
        self.now_ms += ms


@pytest.fixture
def clock():
    """Fake clock for deterministic TTL tests."""
    return FakeClock()


@pytest.fixture
def cache_config():
    """Store configuration without the background sweep."""
    return CacheConfig(start_cleanup=False)


@pytest.fixture
def store(cache_config, clock):
    """Memory cache store on the fake clock."""
    cache_store = MemoryCacheStore(config=cache_config, clock=clock)
    yield cache_store
    cache_store.shutdown()


@pytest.fixture
def recorded_events(store):
    """Events published by the store fixture, in order."""
    events = []
    store.subscribe(events.append)
    return events


@pytest.fixture
def publisher():
    return CacheEventPublisher()
