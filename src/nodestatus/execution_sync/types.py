"""Execution client sync state."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict

from ..formatting import format_thousands

ETA_COMPUTING = "computing..."
ETA_ERROR = "error"


class SyncStatus(Enum):
    SYNCING = "SYNCING"
    SYNCED = "SYNCED"
    ERROR = "ERROR"


@dataclass(frozen=True)
class SyncState:
    """Chain and state download progress as reported by the execution client."""

    chain_sync: float
    state_sync: float
    chain_eta: str
    state_eta: str
    blocks: int
    peers: int
    status: SyncStatus

    @property
    def overall_progress(self) -> float:
        return min(self.chain_sync, self.state_sync)

    @property
    def synced(self) -> bool:
        return self.status is SyncStatus.SYNCED

    @classmethod
    def degraded(cls) -> "SyncState":
        """Fixed record reported when the execution log could not be parsed."""
        return cls(
            chain_sync=0.0,
            state_sync=0.0,
            chain_eta=ETA_ERROR,
            state_eta=ETA_ERROR,
            blocks=0,
            peers=0,
            status=SyncStatus.ERROR,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "chainSync": self.chain_sync,
            "stateSync": self.state_sync,
            "overallProgress": self.overall_progress,
            "chainETA": self.chain_eta,
            "stateETA": self.state_eta,
            "peers": self.peers,
            "blocks": self.blocks,
            "blocksFormatted": format_thousands(self.blocks),
            "status": self.status.value,
            "synced": self.synced,
        }


def derive_status(chain_sync: float, state_sync: float) -> SyncStatus:
    if chain_sync >= 100 and state_sync >= 100:
        return SyncStatus.SYNCED
    return SyncStatus.SYNCING


__all__ = ["ETA_COMPUTING", "ETA_ERROR", "SyncState", "SyncStatus", "derive_status"]
