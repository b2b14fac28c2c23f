"""Execution client sync parsing."""

from .fields import parse_block_number, parse_eta, parse_percentage
from .parser import EXECUTION_SERVICE_TAG, ExecutionSyncParser
from .types import ETA_COMPUTING, ETA_ERROR, SyncState, SyncStatus, derive_status

__all__ = [
    "ETA_COMPUTING",
    "ETA_ERROR",
    "EXECUTION_SERVICE_TAG",
    "ExecutionSyncParser",
    "SyncState",
    "SyncStatus",
    "derive_status",
    "parse_block_number",
    "parse_eta",
    "parse_percentage",
]
