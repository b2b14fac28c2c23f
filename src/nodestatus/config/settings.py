from __future__ import annotations

"""Process-wide settings for the status service, read once from the environment."""


import socket
from dataclasses import dataclass
from functools import lru_cache

from .errors import ConfigurationError
from .runtime import env_bool, env_int, env_seconds, env_str

PEER_COUNT_STRATEGIES = ("lsof", "netstat", "logs")
VALID_THEMES = ("slate", "blue", "red", "orange")
DEFAULT_THEME = "slate"


@dataclass(frozen=True)
class DashboardSettings:
    title: str
    header_text: str
    footer_text: str
    theme: str


@dataclass(frozen=True)
class StatusSettings:
    host: str
    port: int
    environment: str
    hostname: str
    enable_external_ip: bool
    execution_service: str
    consensus_service: str
    execution_log_lines: int
    consensus_log_lines: int
    peer_count_strategy: str
    peer_cache_ttl_seconds: int
    log_retrieval_timeout_seconds: int
    dashboard: DashboardSettings

    @property
    def is_development(self) -> bool:
        return self.environment == "development"


def _resolve_peer_strategy() -> str:
    raw = env_str("PEER_COUNT_STRATEGY", or_value="lsof")
    strategy = raw.lower()
    if strategy == "ss":
        strategy = "netstat"
    if strategy not in PEER_COUNT_STRATEGIES:
        raise ConfigurationError.invalid_value(
            "PEER_COUNT_STRATEGY", raw, f"Expected one of {', '.join(PEER_COUNT_STRATEGIES)}"
        )
    return strategy


def _resolve_theme() -> str:
    theme = env_str("DASHBOARD_COLOR_THEME", or_value=DEFAULT_THEME).lower()
    if theme not in VALID_THEMES:
        return DEFAULT_THEME
    return theme


def _positive(name: str, value: int) -> int:
    if value <= 0:
        raise ConfigurationError.invalid_value(name, value, "Must be a positive integer")
    return value


@lru_cache(maxsize=1)
def load_settings() -> StatusSettings:
    """Build settings from the environment; cached for the life of the process."""

    dashboard = DashboardSettings(
        title=env_str("DASHBOARD_TITLE", or_value="Node Status Dashboard"),
        header_text=env_str("DASHBOARD_HEADER_TEXT", or_value="Real-time Ethereum Node Monitoring"),
        footer_text=env_str("DASHBOARD_FOOTER_TEXT", or_value="Powered by nodestatus"),
        theme=_resolve_theme(),
    )

    return StatusSettings(
        host=env_str("HOST", or_value="0.0.0.0"),
        port=_positive("PORT", env_int("PORT", or_value=3000)),
        environment=env_str("APP_ENV", or_value="production").lower(),
        hostname=env_str("NODE_HOSTNAME", or_value=socket.gethostname()),
        enable_external_ip=bool(env_bool("ENABLE_EXTERNAL_IP", or_value=False)),
        execution_service=env_str("EXECUTION_SERVICE", or_value="geth"),
        consensus_service=env_str("CONSENSUS_SERVICE", or_value="prysm"),
        execution_log_lines=_positive("EXECUTION_LOG_LINES", env_int("EXECUTION_LOG_LINES", or_value=1000)),
        consensus_log_lines=_positive("CONSENSUS_LOG_LINES", env_int("CONSENSUS_LOG_LINES", or_value=2000)),
        peer_count_strategy=_resolve_peer_strategy(),
        peer_cache_ttl_seconds=env_seconds("PEER_CACHE_TTL", or_value=3),
        log_retrieval_timeout_seconds=_positive(
            "LOG_RETRIEVAL_TIMEOUT", env_seconds("LOG_RETRIEVAL_TIMEOUT", or_value=5)
        ),
        dashboard=dashboard,
    )


__all__ = [
    "DEFAULT_THEME",
    "DashboardSettings",
    "PEER_COUNT_STRATEGIES",
    "StatusSettings",
    "VALID_THEMES",
    "load_settings",
]
