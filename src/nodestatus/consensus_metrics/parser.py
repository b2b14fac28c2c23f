"""
Consensus client metrics parser.

Reads slot/epoch from the latest "Synced new block" line and the peer total
with its transport breakdown from the latest "Connected peers" line. Missing
tokens default to 0 individually; an exception anywhere degrades the whole
record.
"""

from __future__ import annotations

import logging
import re
from typing import Mapping

from ..log_parsing import LogText, collect_recent_matches, extract_kv_pairs, scan_last_matches
from ..records import ErrorLevel, ErrorRecord, ProducerResult
from .types import ConnectionBreakdown, ConsensusState

logger = logging.getLogger(__name__)

CONSENSUS_SERVICE_TAG = "consensus"
MAX_SERVICE_ERRORS = 5

SYNCED_BLOCK = "synced_block"
CONNECTED_PEERS = "connected_peers"

METRIC_PATTERNS = {
    SYNCED_BLOCK: re.compile(r"Synced new block", re.IGNORECASE),
    CONNECTED_PEERS: re.compile(r"Connected peers", re.IGNORECASE),
}
ERROR_LINE_PATTERN = re.compile(r"level=error.*$", re.IGNORECASE)

CONSENSUS_PARSE_ERRORS = (ValueError, TypeError, KeyError, AttributeError)


def _int_field(pairs: Mapping[str, str], key: str) -> int:
    raw = pairs.get(key)
    if not raw:
        return 0
    value = int(raw)
    if value < 0:
        raise ValueError(f"{key} must be non-negative, got {raw!r}")
    return value


class ConsensusMetricsParser:
    """Builds a ``ConsensusState`` from consensus client log text."""

    def __init__(self, service_tag: str = CONSENSUS_SERVICE_TAG):
        self.service_tag = service_tag

    def parse(self, log_text: LogText) -> ProducerResult[ConsensusState]:
        try:
            state = self._build_state(log_text)
        except CONSENSUS_PARSE_ERRORS:
            logger.exception("Consensus client log parsing failed")
            return ProducerResult.failed(ConsensusState.degraded())
        return ProducerResult(data=state, errors=self.collect_errors(log_text))

    def _build_state(self, log_text: LogText) -> ConsensusState:
        latest = scan_last_matches(log_text, METRIC_PATTERNS)
        block_pairs = extract_kv_pairs(latest.get(SYNCED_BLOCK, ""))
        peer_pairs = extract_kv_pairs(latest.get(CONNECTED_PEERS, ""))

        return ConsensusState(
            slot=_int_field(block_pairs, "slot"),
            epoch=_int_field(block_pairs, "epoch"),
            peers=_int_field(peer_pairs, "total"),
            connections=ConnectionBreakdown(
                quic_in=_int_field(peer_pairs, "inboundQUIC"),
                quic_out=_int_field(peer_pairs, "outboundQUIC"),
                tcp_in=_int_field(peer_pairs, "inboundTCP"),
                tcp_out=_int_field(peer_pairs, "outboundTCP"),
            ),
        )

    def collect_errors(self, log_text: LogText) -> list[ErrorRecord]:
        return [
            ErrorRecord.from_line(self.service_tag, ErrorLevel.ERROR, match.group(0))
            for match in collect_recent_matches(log_text, ERROR_LINE_PATTERN, MAX_SERVICE_ERRORS)
        ]


__all__ = ["CONSENSUS_SERVICE_TAG", "ConsensusMetricsParser"]
