"""Execution-client peer count measurement."""

from .process_lookup import find_pid_by_keyword
from .resolver import PEER_CACHE_KEY, PeerCountResolver
from .strategies import (
    LogPeerCount,
    LsofPeerCount,
    PeerCountStrategy,
    SocketTablePeerCount,
    build_strategy,
)

__all__ = [
    "LogPeerCount",
    "LsofPeerCount",
    "PEER_CACHE_KEY",
    "PeerCountResolver",
    "PeerCountStrategy",
    "SocketTablePeerCount",
    "build_strategy",
    "find_pid_by_keyword",
]
