"""Internal and (optionally) external IP address lookup."""

from __future__ import annotations

import asyncio
import logging
import socket
from dataclasses import dataclass
from ipaddress import ip_address
from typing import Any, Dict, Optional, Sequence

import aiohttp
import orjson
import psutil
from aiohttp import ClientError, ClientTimeout

logger = logging.getLogger(__name__)

LOOPBACK_ADDRESS = "127.0.0.1"
EXTERNAL_IP_TIMEOUT_SECONDS = 2.0
EXTERNAL_IP_SERVICES = (
    "https://api.ipify.org?format=json",
    "https://api.my-ip.io/v2/ip.json",
)


@dataclass(frozen=True)
class NetworkInfo:
    internal_ip: str
    external_ip: Optional[str] = None
    include_external: bool = False

    @classmethod
    def degraded(cls, include_external: bool = False) -> "NetworkInfo":
        return cls(internal_ip=LOOPBACK_ADDRESS, include_external=include_external)

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"internalIP": self.internal_ip}
        if self.include_external:
            payload["externalIP"] = self.external_ip
        return payload


def get_internal_ip() -> str:
    """Return the first non-loopback IPv4 address, or 127.0.0.1."""
    try:
        interfaces = psutil.net_if_addrs()
    except (psutil.Error, OSError):
        logger.debug("Interface enumeration failed", exc_info=True)
        return LOOPBACK_ADDRESS

    for addresses in interfaces.values():
        for address in addresses:
            if address.family == socket.AF_INET and not ip_address(address.address).is_loopback:
                return address.address
    return LOOPBACK_ADDRESS


def _extract_ip(body: str) -> Optional[str]:
    text = body.strip()
    try:
        payload = orjson.loads(text)
    except orjson.JSONDecodeError:
        payload = text
    if isinstance(payload, dict):
        payload = payload.get("ip")
    if not isinstance(payload, str):
        return None
    try:
        return str(ip_address(payload.strip()))
    except ValueError:
        return None


class NetworkInfoProvider:
    """Looks up addresses; the external lookup only runs when enabled."""

    def __init__(
        self,
        enable_external_ip: bool = False,
        services: Sequence[str] = EXTERNAL_IP_SERVICES,
        timeout_seconds: float = EXTERNAL_IP_TIMEOUT_SECONDS,
    ):
        self.enable_external_ip = enable_external_ip
        self.services = tuple(services)
        self.timeout_seconds = timeout_seconds

    async def lookup(self) -> NetworkInfo:
        internal_ip = await asyncio.to_thread(get_internal_ip)
        if not self.enable_external_ip:
            return NetworkInfo(internal_ip=internal_ip)
        return NetworkInfo(internal_ip=internal_ip, external_ip=await self.get_external_ip(), include_external=True)

    async def get_external_ip(self) -> Optional[str]:
        """Ask each service in turn; None if all of them fail."""
        timeout = ClientTimeout(total=self.timeout_seconds)
        async with aiohttp.ClientSession(timeout=timeout) as session:
            for url in self.services:
                try:
                    async with session.get(url) as response:
                        if response.status != 200:
                            continue
                        address = _extract_ip(await response.text())
                except (asyncio.TimeoutError, ClientError, OSError):
                    logger.debug("External IP lookup via %s failed", url)
                    continue
                if address:
                    return address
        return None


__all__ = ["LOOPBACK_ADDRESS", "NetworkInfo", "NetworkInfoProvider", "get_internal_ip"]
