"""Host resource snapshot: memory, disk, load, uptime and block-device I/O."""

from .builder import ResourceSnapshotBuilder
from .disk_usage import DiskUsageProbe, parse_df_output
from .host_metrics import HostMetricsReader
from .iostat import IOSTAT_CACHE_KEY, IOStatProbe, parse_iostat_output
from .types import CpuTimeShare, DeviceStat, DiskUsage, IOStat, MemoryUsage, ResourceSnapshot

__all__ = [
    "CpuTimeShare",
    "DeviceStat",
    "DiskUsage",
    "DiskUsageProbe",
    "HostMetricsReader",
    "IOSTAT_CACHE_KEY",
    "IOStat",
    "IOStatProbe",
    "MemoryUsage",
    "ResourceSnapshot",
    "ResourceSnapshotBuilder",
    "parse_df_output",
    "parse_iostat_output",
]
