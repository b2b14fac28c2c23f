"""Entry point: ``python -m nodestatus``."""

from __future__ import annotations

import logging
import sys

from aiohttp import web

from .config import ConfigurationError, StatusSettings, load_settings
from .logging_config import setup_logging
from .web import SNAPSHOT_ROUTE, create_app

logger = logging.getLogger(__name__)


def _display_host(host: str) -> str:
    return "localhost" if host == "0.0.0.0" else host


def log_startup_banner(settings: StatusSettings) -> None:
    base_url = f"http://{_display_host(settings.host)}:{settings.port}"
    logger.info("Node status monitor starting")
    logger.info("Dashboard: %s", base_url)
    logger.info("API: %s%s", base_url, SNAPSHOT_ROUTE)
    logger.info("Title: %s", settings.dashboard.title)
    logger.info("Hostname: %s", settings.hostname)
    logger.info("Theme: %s", settings.dashboard.theme)
    logger.info("Services: execution=%s consensus=%s", settings.execution_service, settings.consensus_service)
    logger.info("Peer count strategy: %s (cache %ss)", settings.peer_count_strategy, settings.peer_cache_ttl_seconds)
    logger.info("External IP: %s", "enabled" if settings.enable_external_ip else "disabled")
    logger.info("Environment: %s", settings.environment)


def main() -> int:
    try:
        settings = load_settings()
    except ConfigurationError as exc:
        setup_logging()
        logger.error("Invalid configuration: %s", exc)
        return 2

    setup_logging("nodestatus", debug=settings.is_development)
    log_startup_banner(settings)
    web.run_app(create_app(settings), host=settings.host, port=settings.port, print=None)
    logger.info("Node status monitor stopped")
    return 0


if __name__ == "__main__":
    sys.exit(main())
