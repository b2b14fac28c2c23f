"""Consensus client metrics."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict

from ..formatting import format_thousands


class ConsensusStatus(Enum):
    ACTIVE = "ACTIVE"
    ERROR = "ERROR"


@dataclass(frozen=True)
class ConnectionBreakdown:
    quic_in: int = 0
    quic_out: int = 0
    tcp_in: int = 0
    tcp_out: int = 0

    def to_dict(self) -> Dict[str, int]:
        return {
            "quicIn": self.quic_in,
            "quicOut": self.quic_out,
            "tcpIn": self.tcp_in,
            "tcpOut": self.tcp_out,
        }


@dataclass(frozen=True)
class ConsensusState:
    slot: int = 0
    epoch: int = 0
    peers: int = 0
    connections: ConnectionBreakdown = field(default_factory=ConnectionBreakdown)
    status: ConsensusStatus = ConsensusStatus.ACTIVE

    @classmethod
    def degraded(cls) -> "ConsensusState":
        return cls(status=ConsensusStatus.ERROR)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "slot": self.slot,
            "slotFormatted": format_thousands(self.slot),
            "epoch": self.epoch,
            "epochFormatted": format_thousands(self.epoch),
            "peers": self.peers,
            "connections": self.connections.to_dict(),
            "status": self.status.value,
        }


__all__ = ["ConnectionBreakdown", "ConsensusState", "ConsensusStatus"]
