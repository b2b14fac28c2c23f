"""Shared configuration helpers and dataclasses."""

from .errors import ConfigurationError
from .runtime import (
    env_bool,
    env_int,
    env_seconds,
    env_str,
    reset_default_values,
)
from .settings import (
    PEER_COUNT_STRATEGIES,
    VALID_THEMES,
    DashboardSettings,
    StatusSettings,
    load_settings,
)

__all__ = [
    "ConfigurationError",
    "DashboardSettings",
    "PEER_COUNT_STRATEGIES",
    "StatusSettings",
    "VALID_THEMES",
    "env_bool",
    "env_int",
    "env_seconds",
    "env_str",
    "load_settings",
    "reset_default_values",
]
