"""
Snapshot assembler - one status snapshot per request.

Runs the execution, consensus, system and network producers concurrently.
Each producer is isolated: a failure replaces only its own section with the
documented degraded record. Errors outside those guards surface as
``SnapshotAssemblyError``.
"""

from __future__ import annotations

import asyncio
import logging
from datetime import datetime, timezone
from typing import Callable, Optional

from ..config import StatusSettings
from ..consensus_metrics import ConsensusState
from ..execution_sync import SyncState
from ..records import ProducerResult
from .error_records import merge_error_records
from .errors import SnapshotAssemblyError
from .factory import SnapshotAssemblerDependencies, SnapshotAssemblerFactory
from .types import SnapshotMeta, StatusSnapshot

logger = logging.getLogger(__name__)

ASSEMBLY_ERRORS = (RuntimeError, ValueError, TypeError, AttributeError, KeyError, OSError)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class SnapshotAssembler:
    """Builds ``StatusSnapshot`` records from live logs and host measurements."""

    def __init__(
        self,
        settings: StatusSettings,
        *,
        dependencies: Optional[SnapshotAssemblerDependencies] = None,
        clock: Callable[[], datetime] = _utc_now,
    ):
        deps = dependencies or SnapshotAssemblerFactory.create(settings)
        self.settings = settings
        self.log_source = deps.log_source
        self.peer_resolver = deps.peer_resolver
        self.execution_parser = deps.execution_parser
        self.consensus_parser = deps.consensus_parser
        self.resource_builder = deps.resource_builder
        self.network_provider = deps.network_provider
        self.error_handler = deps.error_handler
        self.clock = clock

    def produce_execution(self) -> ProducerResult[SyncState]:
        log_text = self.log_source.read(self.settings.execution_service, self.settings.execution_log_lines)
        return self.execution_parser.parse(log_text)

    def produce_consensus(self) -> ProducerResult[ConsensusState]:
        log_text = self.log_source.read(self.settings.consensus_service, self.settings.consensus_log_lines)
        return self.consensus_parser.parse(log_text)

    async def build_snapshot(self) -> StatusSnapshot:
        """
        Assemble one snapshot.

        Returns:
            StatusSnapshot with every section populated or degraded

        Raises:
            SnapshotAssemblyError: when assembly fails outside the producer guards
        """
        try:
            return await self._assemble()
        except SnapshotAssemblyError:
            raise
        except ASSEMBLY_ERRORS as exc:
            logger.exception("Snapshot assembly failed")
            raise SnapshotAssemblyError.unexpected(exc) from exc

    async def _assemble(self) -> StatusSnapshot:
        execution_result, consensus_result, resource_result, network_result = await asyncio.gather(
            asyncio.to_thread(self.produce_execution),
            asyncio.to_thread(self.produce_consensus),
            asyncio.to_thread(self.resource_builder.build),
            self.network_provider.lookup(),
            return_exceptions=True,
        )

        execution = self.error_handler.ensure_execution(execution_result)
        consensus = self.error_handler.ensure_consensus(consensus_result)
        resources = self.error_handler.ensure_resources(resource_result)
        network = self.error_handler.ensure_network(network_result, self.settings.enable_external_ip)

        snapshot = StatusSnapshot(
            execution=execution.data,
            consensus=consensus.data,
            system=resources.data,
            network=network,
            errors=merge_error_records(execution.errors, consensus.errors),
            meta=SnapshotMeta(
                measurement_strategy=self.peer_resolver.strategy_name,
                hostname=self.settings.hostname,
                theme=self.settings.dashboard.theme,
                timestamp=self.clock(),
            ),
        )
        if self.settings.is_development:
            logger.debug("Snapshot assembled: %s", snapshot.to_dict())
        return snapshot


__all__ = ["ASSEMBLY_ERRORS", "SnapshotAssembler"]
