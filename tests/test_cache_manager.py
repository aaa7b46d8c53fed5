"""Tests for the cache manager."""

import pytest

from agriconnect_cache.application.services.cache_manager import CacheManager, create_cache_manager


@pytest.fixture
def manager(store):
    return create_cache_manager(store)


class FakeFetcher:
    """Async loader recording how often it was awaited."""

    def __init__(self, result):
        self.result = result
        self.calls = 0

    async def __call__(self):
        self.calls += 1
        if isinstance(self.result, Exception):
            raise self.result
        return self.result


class TestKeyedAccess:
    """Test prefix and params keyed access."""

    def test_set_for_and_get_for(self, manager, store):
        key = manager.set_for("producers", {"agent": "7", "page": 1}, [{"id": 1}])

        assert key == "producers:agent:7|page:1"
        assert manager.get_for("producers", {"page": 1, "agent": "7"}) == [{"id": 1}]
        assert store.get(key) == [{"id": 1}]

    def test_get_for_miss(self, manager):
        assert manager.get_for("producers", {"agent": "7"}) is None


class TestGetOrFetch:
    """Test read-through caching."""

    @pytest.mark.asyncio
    async def test_miss_fetches_and_caches(self, manager, store):
        fetcher = FakeFetcher([{"id": "p1"}])

        first = await manager.get_or_fetch("plots:agent:1", fetcher, ttl="medium")
        second = await manager.get_or_fetch("plots:agent:1", fetcher, ttl="medium")

        assert first == second == [{"id": "p1"}]
        assert fetcher.calls == 1
        assert store.get_entry_info("plots:agent:1")["ttl_ms"] == 300_000

    @pytest.mark.asyncio
    async def test_empty_list_is_cached(self, manager):
        """Test a falsy result is cached and served as a hit."""
        fetcher = FakeFetcher([])

        await manager.get_or_fetch("alerts:agent:1", fetcher)
        result = await manager.get_or_fetch("alerts:agent:1", fetcher)

        assert result == []
        assert fetcher.calls == 1

    @pytest.mark.asyncio
    async def test_none_not_cached(self, manager, store):
        fetcher = FakeFetcher(None)

        assert await manager.get_or_fetch("plot:9", fetcher) is None
        assert await manager.get_or_fetch("plot:9", fetcher) is None

        assert fetcher.calls == 2
        assert store.get_stats().size == 0

    @pytest.mark.asyncio
    async def test_fetcher_error_propagates(self, manager, store):
        """Test fetch failures reach the caller and nothing is cached."""
        fetcher = FakeFetcher(ConnectionError("offline"))

        with pytest.raises(ConnectionError):
            await manager.get_or_fetch("plot:9", fetcher)

        assert store.get_stats().size == 0

    @pytest.mark.asyncio
    async def test_force_refresh(self, manager, store):
        store.set("plot:1", {"name": "old"})
        fetcher = FakeFetcher({"name": "new"})

        result = await manager.get_or_fetch("plot:1", fetcher, force_refresh=True)

        assert result == {"name": "new"}
        assert store.get("plot:1") == {"name": "new"}

    @pytest.mark.asyncio
    async def test_expired_entry_refetched(self, manager, clock):
        fetcher = FakeFetcher({"v": 1})

        await manager.get_or_fetch("k", fetcher, ttl=1_000)
        clock.advance(1_001)
        await manager.get_or_fetch("k", fetcher, ttl=1_000)

        assert fetcher.calls == 2

    @pytest.mark.asyncio
    async def test_get_or_fetch_for(self, manager, store):
        fetcher = FakeFetcher({"total": 3})

        result = await manager.get_or_fetch_for("dashboard", {"agent": "a1"}, fetcher, tags=["dashboard"])

        assert result == {"total": 3}
        assert store.has("dashboard:agent:a1")
        assert manager.invalidate_tags("dashboard") == 1


class TestInvalidation:
    """Test mutation-driven invalidation helpers."""

    def test_invalidate_prefix(self, manager, store):
        store.set("plots:agent:1", [])
        store.set("plots:farmfile:2", [])
        store.set("farm_file_plots", [])

        assert manager.invalidate_prefix("plots") == 2
        assert store.get_stats().keys == ["farm_file_plots"]

    def test_invalidate_many(self, manager, store):
        store.set("plots:agent:1", [])
        store.set("producers:agent:1", [])
        store.set("alerts:agent:1", [])

        assert manager.invalidate_many(["plots:", "producers:"]) == 2
        assert store.get_stats().keys == ["alerts:agent:1"]

    def test_store_property(self, store):
        assert CacheManager(store).store is store
