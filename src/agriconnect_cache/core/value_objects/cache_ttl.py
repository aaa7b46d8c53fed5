"""Cache TTL value object.

ONLY TTL handling - time-to-live value object in milliseconds with the
symbolic presets services pass instead of raw durations.
"""

import math
from dataclasses import dataclass
from datetime import timedelta
from enum import Enum
from typing import Union

from ..exceptions.cache_ttl_invalid import CacheTTLInvalid


class TTLPreset(str, Enum):
    """Symbolic TTL presets."""

    SHORT = "short"
    MEDIUM = "medium"
    LONG = "long"
    VERY_LONG = "very-long"


@dataclass(frozen=True)
class CacheTTL:
    """Cache TTL (Time To Live) value object.

    An entry stored with this TTL is live while
    ``now - created_at <= milliseconds``.
    """

    milliseconds: int

    # Common durations (in milliseconds)
    ONE_SECOND = 1_000
    ONE_MINUTE = 60_000
    FIVE_MINUTES = 300_000
    FIFTEEN_MINUTES = 900_000
    ONE_HOUR = 3_600_000

    def __post_init__(self):
        """Validate TTL value."""
        if isinstance(self.milliseconds, bool) or not isinstance(self.milliseconds, (int, float)):
            raise CacheTTLInvalid(self.milliseconds, "TTL must be a number of milliseconds")
        if not math.isfinite(self.milliseconds):
            raise CacheTTLInvalid.not_finite(self.milliseconds)
        if self.milliseconds <= 0:
            raise CacheTTLInvalid.not_positive(self.milliseconds)

    @classmethod
    def seconds(cls, seconds: float) -> "CacheTTL":
        """Create TTL from seconds."""
        return cls(int(seconds * 1000))

    @classmethod
    def minutes(cls, minutes: float) -> "CacheTTL":
        """Create TTL from minutes."""
        return cls(int(minutes * cls.ONE_MINUTE))

    @classmethod
    def from_timedelta(cls, delta: timedelta) -> "CacheTTL":
        """Create TTL from timedelta."""
        return cls(int(delta.total_seconds() * 1000))

    @classmethod
    def from_preset(cls, preset: Union[str, TTLPreset]) -> "CacheTTL":
        """Create TTL from a symbolic preset name."""
        try:
            preset = TTLPreset(preset)
        except ValueError:
            raise CacheTTLInvalid.unknown_preset(
                preset, [p.value for p in TTLPreset]
            ) from None
        return cls(PRESET_MILLISECONDS[preset])

    @classmethod
    def resolve(cls, value: "TTLLike") -> "CacheTTL":
        """Resolve any accepted TTL form to a CacheTTL.

        Accepts a CacheTTL, a preset (name or enum), a timedelta, or a
        number of milliseconds.
        """
        if isinstance(value, CacheTTL):
            return value
        if isinstance(value, (TTLPreset, str)):
            return cls.from_preset(value)
        if isinstance(value, timedelta):
            return cls.from_timedelta(value)
        return cls(value)

    def is_expired(self, created_at_ms: float, now_ms: float) -> bool:
        """Check if TTL has elapsed relative to creation time."""
        return now_ms - created_at_ms > self.milliseconds

    def expires_at(self, created_at_ms: float) -> float:
        """Get absolute expiry instant on the same clock as created_at_ms."""
        return created_at_ms + self.milliseconds

    def to_timedelta(self) -> timedelta:
        """Convert to timedelta."""
        return timedelta(milliseconds=self.milliseconds)

    def __str__(self) -> str:
        """Human-readable string representation."""
        if self.milliseconds < self.ONE_SECOND:
            return f"{self.milliseconds}ms"
        if self.milliseconds < self.ONE_MINUTE:
            return f"{self.milliseconds // self.ONE_SECOND}s"
        if self.milliseconds < self.ONE_HOUR:
            return f"{self.milliseconds // self.ONE_MINUTE}m"
        return f"{self.milliseconds // self.ONE_HOUR}h"


PRESET_MILLISECONDS = {
    TTLPreset.SHORT: CacheTTL.ONE_MINUTE,
    TTLPreset.MEDIUM: CacheTTL.FIVE_MINUTES,
    TTLPreset.LONG: CacheTTL.FIFTEEN_MINUTES,
    TTLPreset.VERY_LONG: CacheTTL.ONE_HOUR,
}

TTLLike = Union[CacheTTL, TTLPreset, str, int, float, timedelta]
