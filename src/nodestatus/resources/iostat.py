"""
Block device and CPU statistics from sysstat ``iostat``.

Columns are located by header name, so both the older layout (no discard
columns, ``Device:`` header) and the current one parse. When the output holds
several reports the last one wins.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional

from ..probes import CommandRunner, ProbeAttempt, ProbeChain
from ..ttl_cache import TtlCache
from .types import CpuTimeShare, DeviceStat, IOStat

logger = logging.getLogger(__name__)

IOSTAT_TIMEOUT_SECONDS = 2.0
IOSTAT_CACHE_KEY = "iostat"

_CPU_HEADER = "avg-cpu:"
_DEVICE_HEADER = "Device"

_CPU_COLUMNS = ("user", "nice", "system", "iowait", "steal", "idle")
_DEVICE_RATE_COLUMNS = {
    "tps": "tps",
    "kB_read/s": "kb_read_per_sec",
    "kB_wrtn/s": "kb_written_per_sec",
    "kB_dscd/s": "kb_discarded_per_sec",
}
_DEVICE_TOTAL_COLUMNS = {
    "kB_read": "total_kb_read",
    "kB_wrtn": "total_kb_written",
    "kB_dscd": "total_kb_discarded",
}


def _to_float(raw: str) -> float:
    return float(raw.replace(",", "."))


def _parse_cpu(header: str, values_line: str) -> CpuTimeShare:
    names = [name.lstrip("%") for name in header.split()[1:]]
    values = values_line.split()
    shares: Dict[str, float] = {}
    for name, raw in zip(names, values):
        if name in _CPU_COLUMNS:
            shares[name] = _to_float(raw)
    return CpuTimeShare(**shares)


def _parse_device(columns: List[str], line: str) -> DeviceStat:
    values = line.split()
    fields: Dict[str, object] = {"name": values[0]}
    for column, raw in zip(columns[1:], values[1:]):
        if column in _DEVICE_RATE_COLUMNS:
            fields[_DEVICE_RATE_COLUMNS[column]] = _to_float(raw)
        elif column in _DEVICE_TOTAL_COLUMNS:
            fields[_DEVICE_TOTAL_COLUMNS[column]] = int(_to_float(raw))
    return DeviceStat(**fields)


def parse_iostat_output(output: str) -> Optional[IOStat]:
    """Parse ``iostat -c -d -k`` output; None when it holds neither section."""
    lines = output.splitlines()
    cpu: Optional[CpuTimeShare] = None
    devices: Optional[List[DeviceStat]] = None

    index = 0
    while index < len(lines):
        stripped = lines[index].strip()
        if stripped.startswith(_CPU_HEADER) and index + 1 < len(lines):
            cpu = _parse_cpu(stripped, lines[index + 1])
            index += 2
            continue
        if stripped.startswith(_DEVICE_HEADER):
            columns = stripped.split()
            devices = []
            index += 1
            while index < len(lines) and lines[index].strip():
                devices.append(_parse_device(columns, lines[index]))
                index += 1
            continue
        index += 1

    if cpu is None and devices is None:
        return None
    return IOStat(cpu=cpu or CpuTimeShare(), devices=tuple(devices or ()))


class IOStatProbe:
    """Runs ``iostat`` at most once per cache TTL."""

    def __init__(self, runner: Optional[CommandRunner] = None, cache: Optional[TtlCache] = None):
        self.runner = runner or CommandRunner()
        self.cache = cache

    def read(self) -> Optional[IOStat]:
        if self.cache is not None:
            cached = self.cache.get(IOSTAT_CACHE_KEY)
            if cached is not None:
                return cached

        output = self.runner.run(
            ProbeChain.of(ProbeAttempt.of("iostat", "-c", "-d", "-k", timeout_seconds=IOSTAT_TIMEOUT_SECONDS))
        )
        if not output:
            return None
        try:
            stats = parse_iostat_output(output)
        except (ValueError, IndexError, TypeError):
            logger.debug("Unrecognized iostat output", exc_info=True)
            return None

        if stats is not None and self.cache is not None:
            self.cache.set(IOSTAT_CACHE_KEY, stats)
        return stats


__all__ = ["IOSTAT_CACHE_KEY", "IOStatProbe", "parse_iostat_output"]
