"""Aggregate status snapshot returned to pollers."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List

from ..consensus_metrics import ConsensusState
from ..execution_sync import SyncState
from ..network_info import NetworkInfo
from ..records import ErrorRecord
from ..resources import ResourceSnapshot


def format_timestamp(moment: datetime) -> str:
    """ISO-8601 with millisecond precision and a ``Z`` suffix for UTC."""
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass(frozen=True)
class SnapshotMeta:
    measurement_strategy: str
    hostname: str
    theme: str
    timestamp: datetime

    def to_dict(self) -> Dict[str, Any]:
        return {
            "measurementStrategy": self.measurement_strategy,
            "hostname": self.hostname,
            "theme": self.theme,
            "timestamp": format_timestamp(self.timestamp),
        }


@dataclass(frozen=True)
class StatusSnapshot:
    execution: SyncState
    consensus: ConsensusState
    system: ResourceSnapshot
    network: NetworkInfo
    meta: SnapshotMeta
    errors: List[ErrorRecord] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "execution": self.execution.to_dict(),
            "consensus": self.consensus.to_dict(),
            "system": self.system.to_dict(),
            "network": self.network.to_dict(),
            "errors": [record.to_dict() for record in self.errors],
            "meta": self.meta.to_dict(),
        }


__all__ = ["SnapshotMeta", "StatusSnapshot", "format_timestamp"]
