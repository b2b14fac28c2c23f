"""
Execution client sync parser.

Derives chain/state download progress, block height and peer count from the
tail of the execution client's log. Each progress category uses its most
recent line; a failure anywhere in the parse replaces the whole state with
``SyncState.degraded()``.
"""

from __future__ import annotations

import logging
import re

from ..log_parsing import LogText, collect_recent_matches, extract_kv_pairs, scan_last_matches
from ..peer_count import PeerCountResolver
from ..records import ErrorLevel, ErrorRecord, ProducerResult
from .fields import parse_block_number, parse_eta, parse_percentage
from .types import SyncState, derive_status

logger = logging.getLogger(__name__)

EXECUTION_SERVICE_TAG = "execution"
MAX_SERVICE_ERRORS = 5

CHAIN_PROGRESS = "chain"
STATE_PROGRESS = "state"
FORKCHOICE = "forkchoice"

SYNC_PATTERNS = {
    CHAIN_PROGRESS: re.compile(r"Syncing: chain download in progress", re.IGNORECASE),
    STATE_PROGRESS: re.compile(r"Syncing: state download in progress", re.IGNORECASE),
    FORKCHOICE: re.compile(r"Forkchoice requested sync to new head", re.IGNORECASE),
}
ERROR_LINE_PATTERN = re.compile(r"\b(ERROR|WARN)(?:ING)?\b.*$")

EXECUTION_PARSE_ERRORS = (ValueError, TypeError, KeyError, IndexError, AttributeError)


class ExecutionSyncParser:
    """Builds a ``SyncState`` from execution client log text."""

    def __init__(self, peer_resolver: PeerCountResolver, service_tag: str = EXECUTION_SERVICE_TAG):
        self.peer_resolver = peer_resolver
        self.service_tag = service_tag

    def parse(self, log_text: LogText) -> ProducerResult[SyncState]:
        try:
            state = self._build_state(log_text)
        except EXECUTION_PARSE_ERRORS:
            logger.exception("Execution client log parsing failed")
            return ProducerResult.failed(SyncState.degraded())
        return ProducerResult(data=state, errors=self.collect_errors(log_text))

    def _build_state(self, log_text: LogText) -> SyncState:
        latest = scan_last_matches(log_text, SYNC_PATTERNS)

        chain_pairs = extract_kv_pairs(latest.get(CHAIN_PROGRESS, ""))
        state_pairs = extract_kv_pairs(latest.get(STATE_PROGRESS, ""))
        forkchoice_pairs = extract_kv_pairs(latest.get(FORKCHOICE, ""))

        chain_sync = parse_percentage(chain_pairs.get("synced"))
        state_sync = parse_percentage(state_pairs.get("synced"))

        return SyncState(
            chain_sync=chain_sync,
            state_sync=state_sync,
            chain_eta=parse_eta(chain_pairs.get("eta")),
            state_eta=parse_eta(state_pairs.get("eta")),
            blocks=parse_block_number(forkchoice_pairs.get("number")),
            peers=self.peer_resolver.resolve(log_text),
            status=derive_status(chain_sync, state_sync),
        )

    def collect_errors(self, log_text: LogText) -> list[ErrorRecord]:
        """Turn the most recent ERROR/WARN lines into error records."""
        records = []
        for match in collect_recent_matches(log_text, ERROR_LINE_PATTERN, MAX_SERVICE_ERRORS):
            level = ErrorLevel.ERROR if match.group(1) == "ERROR" else ErrorLevel.WARN
            records.append(ErrorRecord.from_line(self.service_tag, level, match.group(0)))
        return records


__all__ = ["EXECUTION_SERVICE_TAG", "ExecutionSyncParser", "MAX_SERVICE_ERRORS"]
