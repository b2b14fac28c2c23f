"""
Resource snapshot builder.

Memory, load, core count and uptime are mandatory; if any of them cannot be
read the producer fails as a whole. Disk usage and I/O statistics are
best-effort and are simply left out when their probes yield nothing usable.
"""

from __future__ import annotations

import logging
from typing import Optional

import psutil

from ..records import ProducerResult
from .disk_usage import DiskUsageProbe
from .host_metrics import HostMetricsReader
from .iostat import IOStatProbe
from .types import ResourceSnapshot

logger = logging.getLogger(__name__)

RESOURCE_ERRORS = (OSError, ValueError, RuntimeError, psutil.Error)


class ResourceSnapshotBuilder:
    def __init__(
        self,
        host_metrics: Optional[HostMetricsReader] = None,
        disk_probe: Optional[DiskUsageProbe] = None,
        iostat_probe: Optional[IOStatProbe] = None,
    ):
        self.host_metrics = host_metrics or HostMetricsReader()
        self.disk_probe = disk_probe or DiskUsageProbe()
        self.iostat_probe = iostat_probe or IOStatProbe()

    def build(self) -> ProducerResult[ResourceSnapshot]:
        try:
            snapshot = ResourceSnapshot(
                memory=self.host_metrics.memory(),
                load_average=self.host_metrics.load_average(),
                cpu_cores=self.host_metrics.cpu_cores(),
                uptime_seconds=self.host_metrics.uptime_seconds(),
                disk=self.disk_probe.read(),
                iostat=self.iostat_probe.read(),
            )
        except RESOURCE_ERRORS:
            logger.exception("System resource collection failed")
            return ProducerResult.failed(ResourceSnapshot.degraded())
        return ProducerResult(data=snapshot)


__all__ = ["ResourceSnapshotBuilder"]
