"""Invalidation selector value object.

ONLY bulk-invalidation matching - plain substring, tag and key predicate
matching for dropping entries made stale by a mutation.
"""

from dataclasses import dataclass
from typing import Callable, FrozenSet, Iterable, Optional

from ..exceptions.invalid_selector import InvalidSelectorError


@dataclass(frozen=True)
class InvalidationSelector:
    """Selects cache entries for bulk removal.

    ``pattern`` is plain, case-sensitive substring containment, not a glob
    or a regex: ``"plots"`` matches ``"plots:agent:1"`` and also
    ``"farm_file_plots:7"``. An entry is selected when it matches the
    pattern or shares a tag; ``before_ms`` further limits selection to
    entries created strictly before that instant.

    ``where`` is a predicate over the key for selections a substring cannot
    express, such as exact parameter segments; it is ORed with the others.
    """

    pattern: Optional[str] = None
    tags: FrozenSet[str] = frozenset()
    before_ms: Optional[float] = None
    where: Optional[Callable[[str], bool]] = None

    def __post_init__(self):
        """Reject selectors that match on nothing."""
        if not self.pattern and not self.tags and self.where is None:
            raise InvalidSelectorError()

    @classmethod
    def build(
        cls,
        pattern: Optional[str] = None,
        tags: Optional[Iterable[str]] = None,
        before_ms: Optional[float] = None,
        where: Optional[Callable[[str], bool]] = None,
    ) -> "InvalidationSelector":
        """Create a selector, normalising tags to a frozenset."""
        if isinstance(tags, str):
            tags = [tags]
        return cls(pattern=pattern, tags=frozenset(tags or ()), before_ms=before_ms, where=where)

    def matches(self, key: str, tags: FrozenSet[str], created_at_ms: float) -> bool:
        """Check if an entry with this key, tags and creation time is selected."""
        if self.before_ms is not None and created_at_ms >= self.before_ms:
            return False
        if self.pattern and self.pattern in key:
            return True
        if self.where is not None and self.where(key):
            return True
        return bool(self.tags & tags)

    def __str__(self) -> str:
        parts = []
        if self.pattern:
            parts.append(f"pattern='{self.pattern}'")
        if self.tags:
            parts.append(f"tags={sorted(self.tags)}")
        if self.where is not None:
            parts.append(f"where={getattr(self.where, '__name__', repr(self.where))}")
        if self.before_ms is not None:
            parts.append(f"before={self.before_ms}")
        return ", ".join(parts)
