#!/usr/bin/env python3

"""Tuning options for the reflection layer."""

import os
from typing import Any

from ..logging import get_logger

logger = get_logger(__name__)

ENV_PREFIX = "REFLECTION_"

# Default configuration values
DEFAULT_CONFIG: dict[str, Any] = {
    # Member lookups remembered by each Reflector
    "LOOKUP_CACHE_SIZE": 1024,

    # Reject a requested value type at resolution time if it can never match the member
    "EAGER_TYPE_CHECK": False,

    # Treat properties declared on a metaclass as static properties of its classes
    "SEARCH_METACLASS": True,
}

_TRUE_VALUES = ("true", "1", "yes", "on")
_FALSE_VALUES = ("false", "0", "no", "off")


def _parse_value(key: str, default: Any, raw: str) -> Any:
    """Convert an environment value to the type of the default, keeping the default if invalid."""
    if isinstance(default, bool):
        lowered = raw.strip().lower()
        if lowered in _TRUE_VALUES:
            return True
        if lowered in _FALSE_VALUES:
            return False
    elif isinstance(default, int):
        try:
            return int(raw)
        except ValueError:
            pass
    elif isinstance(default, float):
        try:
            return float(raw)
        except ValueError:
            pass
    else:
        return raw

    logger.warning(f"Ignoring invalid value for {ENV_PREFIX}{key}: {raw!r}")
    return default


def get_config() -> dict[str, Any]:
    """Get configuration with environment variable overrides.

    Each key can be overridden by a ``REFLECTION_<KEY>`` environment variable.

    Returns:
        Configuration dictionary
    """
    config = DEFAULT_CONFIG.copy()

    for key, default in DEFAULT_CONFIG.items():
        env_value = os.getenv(f"{ENV_PREFIX}{key}")
        if env_value is not None:
            config[key] = _parse_value(key, default, env_value)

    if config["LOOKUP_CACHE_SIZE"] < 1:
        logger.warning(f"{ENV_PREFIX}LOOKUP_CACHE_SIZE must be positive, using the default")
        config["LOOKUP_CACHE_SIZE"] = DEFAULT_CONFIG["LOOKUP_CACHE_SIZE"]

    return config
