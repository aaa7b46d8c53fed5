"""Cache configuration management.

ONLY cache configuration functionality - handles cache settings,
defaults, validation, and environment/file based configuration.
"""

import json
import math
import os
from dataclasses import asdict, dataclass, fields
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from ...core.exceptions.base import CacheConfigError


class ConfigSource(Enum):
    """Configuration source types."""
    ENVIRONMENT = "environment"
    FILE = "file"
    DEFAULTS = "defaults"
    OVERRIDE = "override"


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class CacheConfig:
    """Main cache configuration.

    Centralizes the settings the store honours at construction.
    """

    # Fallback TTL when callers omit one
    default_ttl_ms: int = 60_000

    # Sweep period for expired entries
    cleanup_interval_ms: int = 300_000
    start_cleanup: bool = True

    # Observability
    enable_events: bool = True
    log_cache_operations: bool = False

    # Deep-copy payloads on set and get
    copy_values: bool = False

    # Configuration metadata
    config_source: ConfigSource = ConfigSource.DEFAULTS
    config_file_path: Optional[str] = None
    environment_prefix: str = "AGRI_CACHE"

    def __post_init__(self):
        """Post-initialization validation."""
        self._validate_configuration()

    def _validate_configuration(self):
        """Validate configuration values."""
        for name in ("default_ttl_ms", "cleanup_interval_ms"):
            value = getattr(self, name)
            if (
                isinstance(value, bool)
                or not isinstance(value, (int, float))
                or not math.isfinite(value)
                or value <= 0
            ):
                raise CacheConfigError(
                    f"{name} must be a positive, finite number of milliseconds",
                    details={"field": name, "value": value},
                )

    @property
    def cleanup_interval_seconds(self) -> float:
        return self.cleanup_interval_ms / 1000.0

    @classmethod
    def from_environment(
        cls,
        prefix: str = "AGRI_CACHE",
        defaults: Optional["CacheConfig"] = None
    ) -> "CacheConfig":
        """Create configuration from environment variables.

        Args:
            prefix: Environment variable prefix
            defaults: Default configuration to override

        Returns:
            Configuration instance
        """
        base_config = defaults or cls()

        env_mapping = {
            f"{prefix}_DEFAULT_TTL_MS": ("default_ttl_ms", int),
            f"{prefix}_CLEANUP_INTERVAL_MS": ("cleanup_interval_ms", int),
            f"{prefix}_START_CLEANUP": ("start_cleanup", _parse_bool),
            f"{prefix}_ENABLE_EVENTS": ("enable_events", _parse_bool),
            f"{prefix}_LOG_CACHE_OPERATIONS": ("log_cache_operations", _parse_bool),
            f"{prefix}_COPY_VALUES": ("copy_values", _parse_bool),
        }

        config_dict = {}

        for env_var, (field_name, converter) in env_mapping.items():
            env_value = os.getenv(env_var)
            if env_value is not None:
                try:
                    config_dict[field_name] = converter(env_value)
                except (ValueError, TypeError) as e:
                    raise CacheConfigError(
                        f"Invalid value for {env_var}: {env_value} - {e}",
                        details={"variable": env_var},
                    ) from e

        config_dict.update({
            "config_source": ConfigSource.ENVIRONMENT,
            "environment_prefix": prefix
        })

        return cls(**{**base_config._field_values(), **config_dict})

    @classmethod
    def from_file(
        cls,
        file_path: Union[str, Path],
        defaults: Optional["CacheConfig"] = None
    ) -> "CacheConfig":
        """Create configuration from file (JSON or YAML).

        Args:
            file_path: Path to configuration file
            defaults: Default configuration to override

        Returns:
            Configuration instance
        """
        file_path = Path(file_path)

        if not file_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {file_path}")

        with open(file_path, "r") as f:
            if file_path.suffix.lower() in [".yaml", ".yml"]:
                config_data = yaml.safe_load(f) or {}
            elif file_path.suffix.lower() == ".json":
                config_data = json.load(f)
            else:
                raise CacheConfigError(
                    f"Unsupported configuration file format: {file_path.suffix}"
                )

        if not isinstance(config_data, dict):
            raise CacheConfigError(
                f"Configuration file must contain a mapping: {file_path}",
                details={"found": type(config_data).__name__},
            )

        # Allow the settings to live under a top-level "cache" section
        if isinstance(config_data.get("cache"), dict):
            config_data = config_data["cache"]

        cls._reject_unknown_fields(config_data)

        base_config = defaults or cls()
        config_data.update({
            "config_source": ConfigSource.FILE,
            "config_file_path": str(file_path)
        })

        return cls(**{**base_config._field_values(), **config_data})

    @classmethod
    def from_dict(
        cls,
        config_dict: Dict[str, Any],
        source: ConfigSource = ConfigSource.OVERRIDE
    ) -> "CacheConfig":
        """Create configuration from dictionary."""
        cls._reject_unknown_fields(config_dict)
        config_data = dict(config_dict)
        config_data["config_source"] = source

        return cls(**config_data)

    @classmethod
    def _reject_unknown_fields(cls, config_data: Dict[str, Any]) -> None:
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(config_data) - known)
        if unknown:
            raise CacheConfigError(
                f"Unknown cache configuration keys: {', '.join(unknown)}",
                details={"unknown": unknown},
            )

    def _field_values(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        config_dict = {}

        for field_name, field_value in asdict(self).items():
            if isinstance(field_value, Enum):
                config_dict[field_name] = field_value.value
            else:
                config_dict[field_name] = field_value

        return config_dict

    def to_yaml(self) -> str:
        """Convert configuration to YAML string."""
        return yaml.safe_dump(self.to_dict(), default_flow_style=False, sort_keys=True)


def create_cache_config(
    config_file: Optional[Union[str, Path]] = None,
    use_environment: bool = True,
    overrides: Optional[Dict[str, Any]] = None
) -> CacheConfig:
    """Factory function to create cache configuration.

    Precedence, lowest first: defaults, file, environment, overrides.

    Args:
        config_file: Optional YAML or JSON configuration file
        use_environment: Whether to apply environment variables
        overrides: Explicit values applied last

    Returns:
        Configured cache configuration
    """
    config = CacheConfig()

    if config_file:
        config = CacheConfig.from_file(config_file, defaults=config)

    if use_environment:
        config = CacheConfig.from_environment(prefix=config.environment_prefix, defaults=config)

    if overrides:
        CacheConfig._reject_unknown_fields(overrides)
        config = CacheConfig(**{
            **config._field_values(),
            **overrides,
            "config_source": ConfigSource.OVERRIDE,
        })

    return config
