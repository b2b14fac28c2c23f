"""Host resource records."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from ..formatting import format_bytes, format_thousands, format_uptime, format_uptime_short


def _round2(value: float) -> float:
    return round(float(value), 2)


def _percent(used: int, total: int) -> int:
    if total <= 0:
        return 0
    return int(round(used / total * 100))


@dataclass(frozen=True)
class MemoryUsage:
    used_bytes: int
    total_bytes: int

    @property
    def percent(self) -> int:
        return _percent(self.used_bytes, self.total_bytes)


@dataclass(frozen=True)
class DiskUsage:
    used_bytes: int
    total_bytes: int

    @property
    def percent(self) -> int:
        return _percent(self.used_bytes, self.total_bytes)


@dataclass(frozen=True)
class CpuTimeShare:
    user: float = 0.0
    nice: float = 0.0
    system: float = 0.0
    iowait: float = 0.0
    steal: float = 0.0
    idle: float = 0.0

    def to_dict(self) -> Dict[str, float]:
        return {
            "user": _round2(self.user),
            "nice": _round2(self.nice),
            "system": _round2(self.system),
            "iowait": _round2(self.iowait),
            "steal": _round2(self.steal),
            "idle": _round2(self.idle),
        }


@dataclass(frozen=True)
class DeviceStat:
    name: str
    tps: float = 0.0
    kb_read_per_sec: float = 0.0
    kb_written_per_sec: float = 0.0
    kb_discarded_per_sec: float = 0.0
    total_kb_read: int = 0
    total_kb_written: int = 0
    total_kb_discarded: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "tps": _round2(self.tps),
            "kbReadSec": _round2(self.kb_read_per_sec),
            "kbWriteSec": _round2(self.kb_written_per_sec),
            "kbDiscSec": _round2(self.kb_discarded_per_sec),
            "totalKbRead": self.total_kb_read,
            "totalKbWrite": self.total_kb_written,
            "totalKbDisc": self.total_kb_discarded,
            "totalKbReadFormatted": format_thousands(self.total_kb_read),
            "totalKbWriteFormatted": format_thousands(self.total_kb_written),
            "totalKbDiscFormatted": format_thousands(self.total_kb_discarded),
        }


@dataclass(frozen=True)
class IOStat:
    cpu: CpuTimeShare
    devices: Tuple[DeviceStat, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {"cpu": self.cpu.to_dict(), "devices": [device.to_dict() for device in self.devices]}


@dataclass(frozen=True)
class ResourceSnapshot:
    memory: MemoryUsage
    load_average: Tuple[float, float, float]
    cpu_cores: int
    uptime_seconds: float
    disk: Optional[DiskUsage] = None
    iostat: Optional[IOStat] = None

    @classmethod
    def degraded(cls) -> "ResourceSnapshot":
        return cls(memory=MemoryUsage(0, 0), load_average=(0.0, 0.0, 0.0), cpu_cores=0, uptime_seconds=0.0)

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "memory": self.memory.percent,
            "memoryUsed": format_bytes(self.memory.used_bytes),
            "memoryTotal": format_bytes(self.memory.total_bytes),
            "memoryUsedBytes": self.memory.used_bytes,
            "memoryTotalBytes": self.memory.total_bytes,
            "loadAvg1": _round2(self.load_average[0]),
            "loadAvg5": _round2(self.load_average[1]),
            "loadAvg15": _round2(self.load_average[2]),
            "cpuCores": self.cpu_cores,
            "uptimeSeconds": self.uptime_seconds,
            "uptime": format_uptime(self.uptime_seconds),
            "uptimeShort": format_uptime_short(self.uptime_seconds),
        }
        if self.disk is not None:
            payload.update(
                {
                    "disk": self.disk.percent,
                    "diskUsed": format_bytes(self.disk.used_bytes),
                    "diskTotal": format_bytes(self.disk.total_bytes),
                    "diskUsedBytes": self.disk.used_bytes,
                    "diskTotalBytes": self.disk.total_bytes,
                }
            )
        if self.iostat is not None:
            payload["iostat"] = self.iostat.to_dict()
        return payload


__all__ = [
    "CpuTimeShare",
    "DeviceStat",
    "DiskUsage",
    "IOStat",
    "MemoryUsage",
    "ResourceSnapshot",
]
