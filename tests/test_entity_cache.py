"""Tests for entity caches."""

import pytest

from agriconnect_cache.application.services.entity_cache import EntityCache, PlotsCache, create_plots_cache
from agriconnect_cache.core.value_objects import CacheKeys


@pytest.fixture
def plots_cache(store):
    return create_plots_cache(store)


class TestEntityCache:
    """Test generic per-entity helpers."""

    def test_set_get_by_params(self, store):
        producers = EntityCache(store, "producers", default_ttl="long")

        key = producers.set([{"id": 1}], agent="a1", page=1)

        assert key == "producers:agent:a1|page:1"
        assert producers.get(page=1, agent="a1") == [{"id": 1}]
        assert store.get_entry_info(key)["ttl_ms"] == 900_000

    def test_explicit_ttl_overrides_default(self, store, clock):
        producers = EntityCache(store, "producers")
        producers.set("x", ttl=1_000, agent="a1")
        clock.advance(1_001)

        assert producers.get(agent="a1") is None

    def test_invalidate_params(self, store):
        producers = EntityCache(store, "producers")
        producers.set("one", agent="a1")
        producers.set("two", agent="a2")

        assert producers.invalidate(agent="a1") == 1
        assert producers.get(agent="a2") == "two"

    def test_invalidate_param_that_does_not_sort_first(self, store):
        """Test a later-sorted param still selects every variant carrying it."""
        alerts = EntityCache(store, "alerts")
        alerts.set("open", agent_id="42", status="open")
        alerts.set("closed", agent_id="42", status="closed")
        alerts.set("other", agent_id="7", status="open")

        assert alerts.invalidate(status="open") == 2
        assert store.get_stats().keys == ["alerts:agent_id:42|status:closed"]

    def test_invalidate_matches_whole_values_only(self, store):
        """Test agent 4 leaves agent 42 and other namespaces cached."""
        alerts = EntityCache(store, "alerts")
        alerts.set("four", agent_id="4")
        alerts.set("forty-two", agent_id="42")
        store.set("dashboard:agent_id:4", {})

        assert alerts.invalidate(agent_id="4") == 1
        assert alerts.get(agent_id="42") == "forty-two"
        assert store.get("dashboard:agent_id:4") == {}

    def test_invalidate_several_params_requires_all(self, store):
        alerts = EntityCache(store, "alerts")
        alerts.set("a", agent_id="1", page=1, status="open")
        alerts.set("b", agent_id="1", page=2, status="open")
        alerts.set("c", agent_id="2", page=1, status="open")

        assert alerts.invalidate(agent_id="1", status="open") == 2
        assert alerts.get(agent_id="2", page=1, status="open") == "c"

    def test_invalidate_without_params_drops_namespace(self, store):
        alerts = EntityCache(store, "alerts")
        alerts.set("a", agent_id="1")
        alerts.set("b", agent_id="2")
        store.set("alerts_archive:1", [])

        assert alerts.invalidate() == 2
        assert store.get_stats().keys == ["alerts_archive:1"]

    def test_invalidate_all_includes_related(self, store):
        """Test the entity and its dependent namespaces are dropped together."""
        plots = EntityCache(store, "plots", related_prefixes=["crops:plot", "dashboard"])
        plots.set("list", agent="a1")
        store.set("crops:plot:p1", [])
        store.set("dashboard:agent:a1", {})
        store.set("producers:agent:a1", [])

        assert plots.invalidate_all() == 3
        assert store.get_stats().keys == ["producers:agent:a1"]

    def test_default_ttl_medium(self, store):
        assert EntityCache(store, "alerts").default_ttl.milliseconds == 300_000


class TestPlotsCache:
    """Test plot caching and its cascade."""

    def test_agent_plots_round(self, plots_cache, store):
        plots_cache.set_agent_plots("a1", [{"id": "p1"}])

        assert plots_cache.get_agent_plots("a1") == [{"id": "p1"}]
        assert store.get_entry_info(CacheKeys.plots.agent("a1"))["ttl_ms"] == 300_000

    def test_invalidate_agent_plots_drops_filtered_variants(self, plots_cache, store):
        plots_cache.set_agent_plots("a1", [1])
        plots_cache.set_agent_plots("a1", [2], filters={"status": "active"})
        plots_cache.set_agent_plots("a10", [3])

        assert plots_cache.invalidate_agent_plots("a1") == 2
        assert plots_cache.get_agent_plots("a10") == [3]

    def test_invalidate_plot_cascade(self, plots_cache, store):
        """Test a plot edit drops the plot and every related per-plot key."""
        plots_cache.set_plot("p1", {"id": "p1"})
        for key in plots_cache.plot_keys("p1")[1:]:
            store.set(key, [])
        plots_cache.set_plot("p10", {"id": "p10"})
        store.set(CacheKeys.crops("p10"), [])

        removed = plots_cache.invalidate_plot("p1")

        assert removed == 8
        assert sorted(store.get_stats().keys) == ["crops:plot:p10", "plot:p10"]

    def test_invalidate_plot_counts_only_cached_keys(self, plots_cache):
        plots_cache.set_plot("p1", {"id": "p1"})

        assert plots_cache.invalidate_plot("p1") == 1
        assert plots_cache.invalidate_plot("p1") == 0

    def test_invalidate_plot_counts_expired_unswept_entries(self, plots_cache, store, clock):
        """Test entries past their TTL but still held count as removed."""
        plots_cache.set_plot("p1", {"id": "p1"}, ttl=1_000)
        store.set(CacheKeys.crops("p1"), [])
        clock.advance(2_000)

        assert "plot:p1" not in store
        assert plots_cache.invalidate_plot("p1") == 2
        assert store.get_stats().size == 0

    def test_farm_file_and_producer_plots(self, plots_cache, store):
        plots_cache.set_farm_file_plots("f1", [1])
        plots_cache.set_producer_plots("pr1", [2])

        assert plots_cache.get_farm_file_plots("f1") == [1]
        assert plots_cache.get_producer_plots("pr1") == [2]
        assert store.get_entry_info(CacheKeys.plots.by_producer("pr1"))["ttl_ms"] == 900_000

        plots_cache.invalidate_farm_file_plots("f1")
        plots_cache.invalidate_producer_plots("pr1")

        assert store.get_stats().size == 0

    def test_invalidate_all(self, plots_cache, store):
        plots_cache.set_agent_plots("a1", [])
        plots_cache.set_plot("p1", {})
        store.set(CacheKeys.operations("p1"), [])
        store.set("producers:agent:a1", [])

        plots_cache.invalidate_all()

        assert store.get_stats().keys == ["producers:agent:a1"]

    def test_plots_cache_class(self, store):
        assert isinstance(create_plots_cache(store), PlotsCache)
