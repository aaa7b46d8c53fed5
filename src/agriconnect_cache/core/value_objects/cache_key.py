"""Cache key value object.

ONLY key construction - deterministic keys from a namespace prefix and a
parameters mapping, so logically identical requests share one entry.
"""

import json
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ..exceptions.cache_key_invalid import CacheKeyInvalid

PARAM_SEPARATOR = "|"
PART_SEPARATOR = ":"


def validate_key(key: Any) -> str:
    """Return key unchanged if the store can accept it, raise otherwise."""
    if not isinstance(key, str):
        raise CacheKeyInvalid.not_a_string(key)
    if not key:
        raise CacheKeyInvalid.empty_key()
    return key


def _canonical(value: Any) -> Any:
    """Normalise nested containers into JSON-safe, order-independent form.

    Mapping keys of any type are rendered with str() and sorted by that
    string, so ``{1: "a"}`` and ``{"1": "a"}`` produce the same key.
    """
    if isinstance(value, Mapping):
        return {
            str(name): _canonical(item)
            for name, item in sorted(value.items(), key=lambda pair: str(pair[0]))
        }
    if isinstance(value, (set, frozenset)):
        return [_canonical(item) for item in sorted(value, key=repr)]
    if isinstance(value, (list, tuple)):
        return [_canonical(item) for item in value]
    return value


def render_value(value: Any) -> str:
    """Render one parameter value for inclusion in a key.

    Scalars render with str(); mappings and sequences render as canonical
    JSON so nested property order does not change the key.
    """
    if isinstance(value, (Mapping, list, tuple, set, frozenset)):
        return json.dumps(_canonical(value), sort_keys=True, separators=(",", ":"), default=str)
    return str(value)


def generate_key(prefix: str, params: Optional[Mapping[str, Any]] = None) -> str:
    """Build ``prefix:name1:value1|name2:value2`` with names sorted.

    Collision avoidance is best-effort string formatting: a value that
    itself contains ``|`` can in principle collide with another param set.
    """
    if not isinstance(prefix, str) or not prefix:
        raise CacheKeyInvalid.empty_prefix()

    params = params or {}
    rendered = PARAM_SEPARATOR.join(
        f"{name}{PART_SEPARATOR}{render_value(params[name])}"
        for name in sorted(params, key=str)
    )
    return f"{prefix}{PART_SEPARATOR}{rendered}"


@dataclass(frozen=True)
class CacheKey:
    """Cache key value object.

    Immutable, validated key. The store itself works with plain strings;
    this type is for call sites that want to carry keys around with their
    parts.
    """

    value: str

    def __post_init__(self):
        """Validate cache key on creation."""
        validate_key(self.value)

    @classmethod
    def generate(cls, prefix: str, params: Optional[Mapping[str, Any]] = None) -> "CacheKey":
        """Create a key from a prefix and a parameters mapping."""
        return cls(generate_key(prefix, params))

    @classmethod
    def from_parts(cls, *parts: Any) -> "CacheKey":
        """Create cache key from multiple parts joined with colon."""
        clean_parts = [str(part).strip() for part in parts if str(part).strip()]
        if not clean_parts:
            raise CacheKeyInvalid.empty_key()
        return cls(PART_SEPARATOR.join(clean_parts))

    def get_prefix(self) -> str:
        """Get key prefix (first part before colon)."""
        return self.value.split(PART_SEPARATOR, 1)[0]

    def contains(self, substring: str) -> bool:
        """Check if key contains given substring."""
        return substring in self.value

    def __str__(self) -> str:
        return self.value
