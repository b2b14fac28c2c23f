"""Replace failed producer outcomes with their degraded records."""

from __future__ import annotations

import logging

from ..consensus_metrics import ConsensusState
from ..execution_sync import SyncState
from ..network_info import NetworkInfo
from ..records import ProducerResult
from ..resources import ResourceSnapshot

logger = logging.getLogger(__name__)


class ErrorHandler:
    """Handle exceptions escaping individual snapshot producers."""

    @staticmethod
    def ensure_execution(result: ProducerResult[SyncState] | BaseException) -> ProducerResult[SyncState]:
        if isinstance(result, ProducerResult):
            return result
        logger.error("Execution sync producer failed: %r", result)
        return ProducerResult.failed(SyncState.degraded())

    @staticmethod
    def ensure_consensus(result: ProducerResult[ConsensusState] | BaseException) -> ProducerResult[ConsensusState]:
        if isinstance(result, ProducerResult):
            return result
        logger.error("Consensus metrics producer failed: %r", result)
        return ProducerResult.failed(ConsensusState.degraded())

    @staticmethod
    def ensure_resources(result: ProducerResult[ResourceSnapshot] | BaseException) -> ProducerResult[ResourceSnapshot]:
        if isinstance(result, ProducerResult):
            return result
        logger.error("System resource producer failed: %r", result)
        return ProducerResult.failed(ResourceSnapshot.degraded())

    @staticmethod
    def ensure_network(result: NetworkInfo | BaseException, include_external: bool) -> NetworkInfo:
        if isinstance(result, NetworkInfo):
            return result
        logger.error("Network lookup failed: %r", result)
        return NetworkInfo.degraded(include_external=include_external)


__all__ = ["ErrorHandler"]
