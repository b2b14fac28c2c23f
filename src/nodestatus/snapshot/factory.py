"""Dependency factory for SnapshotAssembler."""

from __future__ import annotations

from dataclasses import dataclass

from ..config import StatusSettings
from ..consensus_metrics import ConsensusMetricsParser
from ..execution_sync import ExecutionSyncParser
from ..network_info import NetworkInfoProvider
from ..peer_count import PeerCountResolver, build_strategy
from ..probes import CommandRunner, JournalLogSource
from ..resources import DiskUsageProbe, IOStatProbe, ResourceSnapshotBuilder
from ..ttl_cache import TtlCache
from .error_handler import ErrorHandler


@dataclass
class SnapshotAssemblerDependencies:
    """Container for SnapshotAssembler dependencies."""

    log_source: JournalLogSource
    peer_resolver: PeerCountResolver
    execution_parser: ExecutionSyncParser
    consensus_parser: ConsensusMetricsParser
    resource_builder: ResourceSnapshotBuilder
    network_provider: NetworkInfoProvider
    error_handler: ErrorHandler


class SnapshotAssemblerFactory:
    """Factory for creating SnapshotAssembler dependencies."""

    @staticmethod
    def create(settings: StatusSettings, runner: CommandRunner | None = None) -> SnapshotAssemblerDependencies:
        """Wire producers from settings; the TTL cache is shared by peer count and iostat."""
        runner = runner or CommandRunner()
        cache = TtlCache(settings.peer_cache_ttl_seconds)
        peer_resolver = PeerCountResolver(
            build_strategy(settings.peer_count_strategy, settings.execution_service, runner=runner),
            cache,
        )
        return SnapshotAssemblerDependencies(
            log_source=JournalLogSource(runner, timeout_seconds=settings.log_retrieval_timeout_seconds),
            peer_resolver=peer_resolver,
            execution_parser=ExecutionSyncParser(peer_resolver),
            consensus_parser=ConsensusMetricsParser(),
            resource_builder=ResourceSnapshotBuilder(
                disk_probe=DiskUsageProbe(runner),
                iostat_probe=IOStatProbe(runner, cache),
            ),
            network_provider=NetworkInfoProvider(enable_external_ip=settings.enable_external_ip),
            error_handler=ErrorHandler(),
        )


__all__ = ["SnapshotAssemblerDependencies", "SnapshotAssemblerFactory"]
