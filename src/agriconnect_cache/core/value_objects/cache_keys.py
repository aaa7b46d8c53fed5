"""Cache key builders for the field-data services.

Keys are hierarchical ``entity:scope:id`` strings so that substring
invalidation on a scope (``"plots:agent:42"``) reaches every variant cached
under it. Filters are rendered canonically so equal filter sets share a key.
"""

from typing import Any, Mapping, Optional

from .cache_key import render_value


def _filters(filters: Optional[Mapping[str, Any]]) -> str:
    return render_value(dict(filters or {}))


class AlertKeys:
    @staticmethod
    def agent(agent_id: str, filters: Optional[Mapping[str, Any]] = None) -> str:
        return f"alerts:agent:{agent_id}:{_filters(filters)}"

    @staticmethod
    def stats(agent_id: str) -> str:
        return f"alerts:stats:{agent_id}"


class ProducerKeys:
    @staticmethod
    def agent(agent_id: str, filters: Optional[Mapping[str, Any]] = None) -> str:
        return f"producers:agent:{agent_id}:{_filters(filters)}"

    @staticmethod
    def by_id(producer_id: str) -> str:
        return f"producers:{producer_id}"

    @staticmethod
    def stats(agent_id: str) -> str:
        return f"producers:stats:{agent_id}"


class PlotKeys:
    @staticmethod
    def agent(agent_id: str, filters: Optional[Mapping[str, Any]] = None) -> str:
        return f"plots:agent:{agent_id}:{_filters(filters)}"

    @staticmethod
    def by_id(plot_id: str) -> str:
        return f"plots:{plot_id}"

    @staticmethod
    def by_producer(producer_id: str) -> str:
        return f"plots:producer:{producer_id}"

    @staticmethod
    def by_farm_file(farm_file_id: str) -> str:
        return f"plots:farmfile:{farm_file_id}"

    @staticmethod
    def stats(agent_id: str) -> str:
        return f"plots:stats:{agent_id}"


class CacheKeys:
    """Namespaced key builders used by the business services."""

    alerts = AlertKeys
    producers = ProducerKeys
    plots = PlotKeys

    @staticmethod
    def plot(plot_id: str) -> str:
        return f"plot:{plot_id}"

    @staticmethod
    def crops(plot_id: str) -> str:
        return f"crops:plot:{plot_id}"

    @staticmethod
    def active_crop(plot_id: str) -> str:
        return f"activecrop:plot:{plot_id}"

    @staticmethod
    def operations(plot_id: str) -> str:
        return f"operations:plot:{plot_id}"

    @staticmethod
    def observations(plot_id: str) -> str:
        return f"observations:plot:{plot_id}"

    @staticmethod
    def inputs(plot_id: str) -> str:
        return f"inputs:plot:{plot_id}"

    @staticmethod
    def participants(plot_id: str) -> str:
        return f"participants:plot:{plot_id}"

    @staticmethod
    def recommendations(plot_id: str) -> str:
        return f"recommendations:plot:{plot_id}"

    @staticmethod
    def media(entity_type: str, entity_id: str) -> str:
        return f"media:{entity_type}:{entity_id}"

    @staticmethod
    def visits(agent_id: str) -> str:
        return f"visits:agent:{agent_id}"

    @staticmethod
    def dashboard(agent_id: str) -> str:
        return f"dashboard:agent:{agent_id}"
