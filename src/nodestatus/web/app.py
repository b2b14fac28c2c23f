"""aiohttp application exposing the status snapshot."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Optional

import orjson
from aiohttp import web

from ..config import StatusSettings
from ..network_info import get_internal_ip
from ..snapshot import ASSEMBLY_ERRORS, SnapshotAssembler, SnapshotAssemblyError, format_timestamp
from .themes import theme_colors

logger = logging.getLogger(__name__)

SETTINGS_KEY = web.AppKey("settings", StatusSettings)
ASSEMBLER_KEY = web.AppKey("assembler", SnapshotAssembler)

SNAPSHOT_ROUTE = "/api/eth-node-stats"


def _dumps(payload: Any) -> str:
    return orjson.dumps(payload).decode("utf-8")


def json_response(payload: Any, *, status: int = 200) -> web.Response:
    return web.json_response(payload, status=status, dumps=_dumps)


def _failure_response(exc: BaseException) -> web.Response:
    return json_response({"error": "Failed to fetch node stats", "message": str(exc)}, status=500)


async def handle_snapshot(request: web.Request) -> web.Response:
    assembler = request.app[ASSEMBLER_KEY]
    try:
        payload = (await assembler.build_snapshot()).to_dict()
    except SnapshotAssemblyError as exc:
        logger.error("Snapshot request failed: %s", exc)
        return _failure_response(exc)
    except ASSEMBLY_ERRORS as exc:
        logger.exception("Snapshot serialization failed")
        return _failure_response(exc)
    return json_response(payload)


async def handle_config(request: web.Request) -> web.Response:
    settings = request.app[SETTINGS_KEY]
    dashboard = settings.dashboard
    return json_response(
        {
            "title": dashboard.title,
            "headerText": dashboard.header_text,
            "footerText": dashboard.footer_text,
            "hostname": settings.hostname,
            "theme": dashboard.theme,
            "themeColors": theme_colors(dashboard.theme),
            "internalIP": get_internal_ip(),
            "environment": settings.environment,
        }
    )


async def handle_health(request: web.Request) -> web.Response:
    return json_response({"status": "healthy", "timestamp": format_timestamp(datetime.now(timezone.utc))})


def create_app(settings: StatusSettings, assembler: Optional[SnapshotAssembler] = None) -> web.Application:
    """Build the web application; *assembler* is injectable for tests."""
    app = web.Application()
    app[SETTINGS_KEY] = settings
    app[ASSEMBLER_KEY] = assembler or SnapshotAssembler(settings)
    app.router.add_get(SNAPSHOT_ROUTE, handle_snapshot)
    app.router.add_get("/api/config", handle_config)
    app.router.add_get("/health", handle_health)
    return app


__all__ = ["ASSEMBLER_KEY", "SETTINGS_KEY", "SNAPSHOT_ROUTE", "create_app", "json_response"]
