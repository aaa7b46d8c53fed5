"""Tests for cache value objects."""

from datetime import timedelta

import pytest

from agriconnect_cache.core.exceptions import CacheKeyInvalid, CacheTTLInvalid, InvalidSelectorError
from agriconnect_cache.core.value_objects import (
    CacheKey,
    CacheKeys,
    CacheMetrics,
    CacheTTL,
    InvalidationSelector,
    TTLPreset,
    generate_key,
)


class TestGenerateKey:
    """Test deterministic key generation."""

    def test_params_sorted_by_name(self):
        key = generate_key("producers", {"search": "awa", "agent": "7", "page": 2})

        assert key == "producers:agent:7|page:2|search:awa"

    def test_nested_values_render_canonically(self):
        """Test nested mappings produce the same key regardless of order."""
        first = generate_key("plots", {"filters": {"b": 1, "a": [1, 2]}})
        second = generate_key("plots", {"filters": {"a": [1, 2], "b": 1}})

        assert first == second
        assert first == 'plots:filters:{"a":[1,2],"b":1}'

    def test_nested_mapping_with_non_string_keys(self):
        """Test nested mappings with mixed or tuple keys render without error."""
        mixed = generate_key("plots", {"filter": {1: "a", "b": 2}})
        reordered = generate_key("plots", {"filter": {"b": 2, 1: "a"}})
        tupled = generate_key("plots", {"filter": {(1, 2): "x"}})

        assert mixed == reordered
        assert mixed == 'plots:filter:{"1":"a","b":2}'
        assert tupled == 'plots:filter:{"(1, 2)":"x"}'

    def test_nested_sets_render_in_stable_order(self):
        assert generate_key("plots", {"ids": {3, 1, 2}}) == "plots:ids:[1,2,3]"

    def test_none_and_bool_values(self):
        assert generate_key("alerts", {"resolved": False, "since": None}) == "alerts:resolved:False|since:None"

    @pytest.mark.parametrize("prefix", ["", None])
    def test_empty_prefix_rejected(self, prefix):
        with pytest.raises(CacheKeyInvalid):
            generate_key(prefix, {"a": 1})


class TestCacheKey:
    """Test cache key value object."""

    def test_from_parts(self):
        key = CacheKey.from_parts("plots", " agent ", "", 42)

        assert str(key) == "plots:agent:42"
        assert key.get_prefix() == "plots"
        assert key.contains("agent:42")

    def test_generate(self):
        assert CacheKey.generate("plots", {"agent": 1}).value == "plots:agent:1"

    def test_empty_rejected(self):
        with pytest.raises(CacheKeyInvalid):
            CacheKey("")
        with pytest.raises(CacheKeyInvalid):
            CacheKey.from_parts("", " ")


class TestCacheTTL:
    """Test TTL value object."""

    def test_presets(self):
        assert CacheTTL.from_preset("short").milliseconds == 60_000
        assert CacheTTL.from_preset("medium").milliseconds == 300_000
        assert CacheTTL.from_preset(TTLPreset.LONG).milliseconds == 900_000
        assert CacheTTL.from_preset("very-long").milliseconds == 3_600_000

    def test_constructors(self):
        assert CacheTTL.seconds(2).milliseconds == 2_000
        assert CacheTTL.minutes(5).milliseconds == 300_000
        assert CacheTTL.from_timedelta(timedelta(hours=1)).milliseconds == 3_600_000

    def test_resolve_passthrough(self):
        ttl = CacheTTL(1_500)

        assert CacheTTL.resolve(ttl) is ttl
        assert CacheTTL.resolve(1_500) == ttl

    @pytest.mark.parametrize("value", [0, -5, True, "10"])
    def test_invalid_values(self, value):
        with pytest.raises(CacheTTLInvalid):
            CacheTTL.resolve(value)

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_values_rejected(self, value):
        """Test NaN and infinite TTLs are refused, so every entry can expire."""
        with pytest.raises(CacheTTLInvalid) as exc_info:
            CacheTTL(value)

        assert exc_info.value.error_code == "CACHE_TTL_NOT_FINITE"

    def test_expiry_boundary(self):
        """Test expiry is strictly after created + ttl."""
        ttl = CacheTTL(1_000)

        assert not ttl.is_expired(created_at_ms=0, now_ms=1_000)
        assert ttl.is_expired(created_at_ms=0, now_ms=1_001)
        assert ttl.expires_at(500) == 1_500

    def test_str(self):
        assert str(CacheTTL(250)) == "250ms"
        assert str(CacheTTL.seconds(30)) == "30s"
        assert str(CacheTTL.from_preset("medium")) == "5m"
        assert str(CacheTTL.from_preset("very-long")) == "1h"


class TestInvalidationSelector:
    """Test invalidation selector matching."""

    def test_requires_pattern_or_tags(self):
        with pytest.raises(InvalidSelectorError):
            InvalidationSelector()
        with pytest.raises(InvalidSelectorError):
            InvalidationSelector.build(pattern="", tags=[])

    def test_substring_match(self):
        selector = InvalidationSelector.build(pattern="plots")

        assert selector.matches("farm_file_plots:7", frozenset(), 0)
        assert not selector.matches("plot:7", frozenset(), 0)

    def test_tag_match(self):
        selector = InvalidationSelector.build(tags="agent:1")

        assert selector.matches("anything", frozenset({"agent:1"}), 0)
        assert not selector.matches("anything", frozenset({"agent:2"}), 0)

    def test_before_is_exclusive(self):
        selector = InvalidationSelector.build(pattern="k", before_ms=100)

        assert selector.matches("k", frozenset(), 99)
        assert not selector.matches("k", frozenset(), 100)

    def test_key_predicate_match(self):
        def even_ids(key):
            return key.endswith(("0", "2", "4"))

        selector = InvalidationSelector.build(where=even_ids)

        assert selector.matches("plot:12", frozenset(), 0)
        assert not selector.matches("plot:13", frozenset(), 0)
        assert str(selector) == "where=even_ids"

    def test_str(self):
        selector = InvalidationSelector.build(pattern="plots", tags=["b", "a"])

        assert str(selector) == "pattern='plots', tags=['a', 'b']"


class TestCacheKeys:
    """Test business key builders."""

    def test_plot_scoped_keys(self):
        assert CacheKeys.plot("p1") == "plot:p1"
        assert CacheKeys.crops("p1") == "crops:plot:p1"
        assert CacheKeys.active_crop("p1") == "activecrop:plot:p1"
        assert CacheKeys.recommendations("p1") == "recommendations:plot:p1"

    def test_agent_keys_include_filters(self):
        key = CacheKeys.plots.agent("a1", {"status": "active"})

        assert key == 'plots:agent:a1:{"status":"active"}'
        assert CacheKeys.plots.agent("a1") == "plots:agent:a1:{}"

    def test_agent_scope_is_substring_of_variants(self):
        """Test every filtered variant contains the agent scope."""
        scope = "plots:agent:a1:"

        assert scope in CacheKeys.plots.agent("a1", {"page": 2})
        assert scope not in CacheKeys.plots.agent("a10")


class TestCacheMetrics:
    def test_hit_rate_without_reads(self):
        assert CacheMetrics().hit_rate == 0.0

    def test_to_dict(self):
        metrics = CacheMetrics(hits=1, misses=1)

        assert metrics.to_dict()["hit_rate_percent"] == 50.0
        assert metrics.to_dict()["total_requests"] == 2
