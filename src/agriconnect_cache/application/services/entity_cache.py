"""Entity caches.

ONLY per-entity caching - typed get/set/invalidate helpers bound to one key
namespace, plus the plot cache with its related-data cascade.
"""

import logging
from typing import TYPE_CHECKING, Any, Iterable, List, Mapping, Optional, Sequence

from ...core.value_objects.cache_key import PARAM_SEPARATOR, PART_SEPARATOR, render_value
from ...core.value_objects.cache_keys import CacheKeys
from ...core.value_objects.cache_ttl import CacheTTL, TTLLike, TTLPreset

if TYPE_CHECKING:
    from ...infrastructure.repositories.memory_cache_store import MemoryCacheStore

logger = logging.getLogger(__name__)


class EntityCache:
    """Cache helpers for one entity namespace.

    Keys are ``generate_key(prefix, params)``; related prefixes name other
    namespaces whose cached data derives from this entity and must be
    dropped with it by invalidate_all().
    """

    def __init__(
        self,
        store: "MemoryCacheStore",
        prefix: str,
        default_ttl: TTLLike = TTLPreset.MEDIUM,
        related_prefixes: Sequence[str] = (),
    ):
        self._store = store
        self._prefix = prefix
        self._default_ttl = CacheTTL.resolve(default_ttl)
        self._related_prefixes = tuple(related_prefixes)

    @property
    def prefix(self) -> str:
        return self._prefix

    @property
    def default_ttl(self) -> CacheTTL:
        return self._default_ttl

    def key(self, **params: Any) -> str:
        return self._store.generate_key(self._prefix, params)

    def get(self, **params: Any) -> Any:
        return self._store.get(self.key(**params))

    def set(
        self,
        data: Any,
        ttl: Optional[TTLLike] = None,
        tags: Optional[Iterable[str]] = None,
        **params: Any,
    ) -> str:
        """Cache data under the key for params; returns the key."""
        key = self.key(**params)
        self._store.set(key, data, ttl=self._default_ttl if ttl is None else ttl, tags=tags)
        return key

    def invalidate(self, **params: Any) -> int:
        """Drop every cached variant carrying all of the given params.

        Each ``name=value`` must equal a whole parameter segment of the key,
        so ``agent_id="4"`` leaves ``agent_id:42`` alone and a param that
        does not sort first still matches. No params drops the namespace.
        """
        namespace = f"{self._prefix}{PART_SEPARATOR}"
        required = {
            f"{name}{PART_SEPARATOR}{render_value(value)}" for name, value in params.items()
        }

        def carries_params(key: str) -> bool:
            if not key.startswith(namespace):
                return False
            return required.issubset(key[len(namespace):].split(PARAM_SEPARATOR))

        return self._store.invalidate(where=carries_params)

    def invalidate_all(self) -> int:
        """Drop the whole namespace and its related namespaces."""
        removed = 0
        for prefix in (self._prefix, *self._related_prefixes):
            removed += self._store.invalidate(pattern=f"{prefix}:")
        logger.debug("Invalidated %d entries for entity cache %s", removed, self._prefix)
        return removed


class PlotsCache:
    """Plot lists and single plots, with the related per-plot data.

    Per-plot keys come from CacheKeys; a plot edit drops the plot itself
    along with its crops, operations, observations, inputs, participants
    and recommendations.
    """

    DEFAULT_TTL = CacheTTL.from_preset(TTLPreset.MEDIUM)
    LONG_TTL = CacheTTL.from_preset(TTLPreset.LONG)

    RELATED_PREFIXES = (
        "plots",
        "plot",
        "recommendations:plot",
        "operations:plot",
        "observations:plot",
        "inputs:plot",
        "participants:plot",
        "crops:plot",
        "activecrop:plot",
    )

    def __init__(self, store: "MemoryCacheStore"):
        self._store = store

    # Agent plots

    def get_agent_plots(self, agent_id: str, filters: Optional[Mapping[str, Any]] = None) -> Optional[List[Any]]:
        return self._store.get(CacheKeys.plots.agent(agent_id, filters))

    def set_agent_plots(
        self,
        agent_id: str,
        plots: List[Any],
        filters: Optional[Mapping[str, Any]] = None,
        ttl: Optional[TTLLike] = None,
    ) -> None:
        self._store.set(CacheKeys.plots.agent(agent_id, filters), plots, ttl=self.DEFAULT_TTL if ttl is None else ttl)

    def invalidate_agent_plots(self, agent_id: str) -> int:
        """Drop every filtered variant of the agent's plot list."""
        return self._store.invalidate(pattern=f"plots:agent:{agent_id}:")

    # Single plot

    def get_plot(self, plot_id: str) -> Any:
        return self._store.get(CacheKeys.plot(plot_id))

    def set_plot(self, plot_id: str, plot: Any, ttl: Optional[TTLLike] = None) -> None:
        self._store.set(CacheKeys.plot(plot_id), plot, ttl=self.DEFAULT_TTL if ttl is None else ttl)

    # Farm file plots

    def get_farm_file_plots(self, farm_file_id: str) -> Optional[List[Any]]:
        return self._store.get(CacheKeys.plots.by_farm_file(farm_file_id))

    def set_farm_file_plots(self, farm_file_id: str, plots: List[Any], ttl: Optional[TTLLike] = None) -> None:
        self._store.set(CacheKeys.plots.by_farm_file(farm_file_id), plots, ttl=self.DEFAULT_TTL if ttl is None else ttl)

    def invalidate_farm_file_plots(self, farm_file_id: str) -> None:
        self._store.delete(CacheKeys.plots.by_farm_file(farm_file_id))

    # Producer plots

    def get_producer_plots(self, producer_id: str) -> Optional[List[Any]]:
        return self._store.get(CacheKeys.plots.by_producer(producer_id))

    def set_producer_plots(self, producer_id: str, plots: List[Any], ttl: Optional[TTLLike] = None) -> None:
        self._store.set(CacheKeys.plots.by_producer(producer_id), plots, ttl=self.LONG_TTL if ttl is None else ttl)

    def invalidate_producer_plots(self, producer_id: str) -> None:
        self._store.delete(CacheKeys.plots.by_producer(producer_id))

    # Cascades

    def plot_keys(self, plot_id: str) -> List[str]:
        """Every key holding data derived from one plot."""
        return [
            CacheKeys.plot(plot_id),
            CacheKeys.recommendations(plot_id),
            CacheKeys.operations(plot_id),
            CacheKeys.observations(plot_id),
            CacheKeys.inputs(plot_id),
            CacheKeys.participants(plot_id),
            CacheKeys.crops(plot_id),
            CacheKeys.active_crop(plot_id),
        ]

    def invalidate_plot(self, plot_id: str) -> int:
        """Drop a plot and its related data.

        Exact keys are deleted rather than matched as substrings, so
        ``plot:1`` does not take ``plot:10`` with it.

        Returns:
            Number of entries removed
        """
        return sum(1 for key in self.plot_keys(plot_id) if self._store.delete(key))

    def invalidate_all(self) -> int:
        removed = 0
        for prefix in self.RELATED_PREFIXES:
            removed += self._store.invalidate(pattern=f"{prefix}:")
        return removed


def create_plots_cache(store: "MemoryCacheStore") -> PlotsCache:
    return PlotsCache(store)
