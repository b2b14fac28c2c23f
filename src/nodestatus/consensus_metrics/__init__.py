"""Consensus client metrics parsing."""

from .parser import CONSENSUS_SERVICE_TAG, ConsensusMetricsParser
from .types import ConnectionBreakdown, ConsensusState, ConsensusStatus

__all__ = [
    "CONSENSUS_SERVICE_TAG",
    "ConnectionBreakdown",
    "ConsensusMetricsParser",
    "ConsensusState",
    "ConsensusStatus",
]
