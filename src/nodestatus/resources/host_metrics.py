"""OS-reported memory, load, core count and uptime via psutil."""

from __future__ import annotations

import time
from typing import Tuple

import psutil

from .types import MemoryUsage


class HostMetricsReader:
    def memory(self) -> MemoryUsage:
        virtual = psutil.virtual_memory()
        return MemoryUsage(used_bytes=int(virtual.total - virtual.available), total_bytes=int(virtual.total))

    def load_average(self) -> Tuple[float, float, float]:
        one, five, fifteen = psutil.getloadavg()
        return float(one), float(five), float(fifteen)

    def cpu_cores(self) -> int:
        return psutil.cpu_count(logical=True) or 0

    def uptime_seconds(self) -> float:
        return max(time.time() - psutil.boot_time(), 0.0)


__all__ = ["HostMetricsReader"]
