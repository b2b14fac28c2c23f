from datetime import datetime, timezone

import pytest

from nodestatus.consensus_metrics import ConsensusMetricsParser, ConsensusStatus
from nodestatus.execution_sync import ExecutionSyncParser, SyncStatus
from nodestatus.log_parsing import LogText
from nodestatus.network_info import NetworkInfo
from nodestatus.peer_count import LogPeerCount, PeerCountResolver
from nodestatus.records import ProducerResult
from nodestatus.resources import MemoryUsage, ResourceSnapshot
from nodestatus.snapshot import (
    ErrorHandler,
    SnapshotAssembler,
    SnapshotAssemblerDependencies,
    SnapshotAssemblerFactory,
    SnapshotAssemblyError,
)
from nodestatus.ttl_cache import TtlCache

FIXED_NOW = datetime(2024, 5, 1, 10, 0, 0, 123456, tzinfo=timezone.utc)

EXECUTION_LOG = (
    "INFO Syncing: chain download in progress synced=99.50% eta=5m peers=31",
    "INFO Syncing: state download in progress synced=80.00% eta=1h5m",
    "INFO Forkchoice requested sync to new head number=19,000,000 hash=0x1",
)
CONSENSUS_LOG = (
    'level=info msg="Synced new block" epoch=250000 slot=8000000',
    'level=info msg="Connected peers" inboundQUIC=1 inboundTCP=2 outboundQUIC=3 outboundTCP=4 total=10',
)


class StubLogSource:
    def __init__(self, logs, fail_for=()):
        self.logs = logs
        self.fail_for = fail_for
        self.requests = []

    def read(self, service, lines):
        self.requests.append((service, lines))
        if service in self.fail_for:
            raise OSError(f"journal unavailable for {service}")
        return LogText(tuple(self.logs.get(service, ())))


class StubResourceBuilder:
    def __init__(self, fail=False):
        self.fail = fail

    def build(self):
        if self.fail:
            raise RuntimeError("psutil exploded")
        return ProducerResult(
            data=ResourceSnapshot(
                memory=MemoryUsage(used_bytes=1024, total_bytes=4096),
                load_average=(0.5, 0.4, 0.3),
                cpu_cores=8,
                uptime_seconds=3600,
            )
        )


class StubNetworkProvider:
    def __init__(self, fail=False):
        self.fail = fail

    async def lookup(self):
        if self.fail:
            raise OSError("no route")
        return NetworkInfo(internal_ip="10.0.0.2")


class BrokenResolver(PeerCountResolver):
    @property
    def strategy_name(self):
        raise RuntimeError("resolver misconfigured")


class UnavailableStrategyResolver(PeerCountResolver):
    @property
    def strategy_name(self):
        raise OSError("strategy source unavailable")


@pytest.fixture
def build_assembler(make_settings, manual_clock):
    def _build(
        logs=None,
        fail_for=(),
        resource_fail=False,
        network_fail=False,
        resolver_cls=PeerCountResolver,
        **setting_overrides,
    ):
        settings = make_settings(**setting_overrides)
        resolver = resolver_cls(LogPeerCount(), TtlCache(3, clock=manual_clock))
        log_source = StubLogSource(
            logs if logs is not None else {"geth": EXECUTION_LOG, "prysm": CONSENSUS_LOG},
            fail_for=fail_for,
        )
        dependencies = SnapshotAssemblerDependencies(
            log_source=log_source,
            peer_resolver=resolver,
            execution_parser=ExecutionSyncParser(resolver),
            consensus_parser=ConsensusMetricsParser(),
            resource_builder=StubResourceBuilder(fail=resource_fail),
            network_provider=StubNetworkProvider(fail=network_fail),
            error_handler=ErrorHandler(),
        )
        return SnapshotAssembler(settings, dependencies=dependencies, clock=lambda: FIXED_NOW), log_source

    return _build


@pytest.mark.asyncio
async def test_snapshot_combines_all_producers(build_assembler):
    assembler, log_source = build_assembler()

    snapshot = await assembler.build_snapshot()
    payload = snapshot.to_dict()

    assert payload["execution"]["chainSync"] == 99.5
    assert payload["execution"]["stateETA"] == "1h 5m"
    assert payload["execution"]["blocks"] == 19000000
    assert payload["execution"]["peers"] == 31
    assert payload["consensus"]["slot"] == 8000000
    assert payload["consensus"]["peers"] == 10
    assert payload["system"]["memory"] == 25
    assert payload["network"] == {"internalIP": "10.0.0.2"}
    assert payload["errors"] == []
    assert payload["meta"] == {
        "measurementStrategy": "logs",
        "hostname": "node-1",
        "theme": "slate",
        "timestamp": "2024-05-01T10:00:00.123Z",
    }
    assert sorted(log_source.requests) == [("geth", 1000), ("prysm", 2000)]


@pytest.mark.asyncio
async def test_failed_producers_degrade_only_their_section(build_assembler):
    assembler, _ = build_assembler(fail_for=("geth",), resource_fail=True, network_fail=True)

    snapshot = await assembler.build_snapshot()

    assert snapshot.execution.status is SyncStatus.ERROR
    assert snapshot.execution.chain_eta == "error"
    assert snapshot.system.cpu_cores == 0
    assert snapshot.network.internal_ip == "127.0.0.1"
    assert snapshot.consensus.status is ConsensusStatus.ACTIVE
    assert snapshot.consensus.slot == 8000000


@pytest.mark.asyncio
async def test_degraded_network_keeps_external_field_when_enabled(build_assembler):
    assembler, _ = build_assembler(network_fail=True, enable_external_ip=True)

    snapshot = await assembler.build_snapshot()

    assert snapshot.network.to_dict() == {"internalIP": "127.0.0.1", "externalIP": None}


@pytest.mark.asyncio
async def test_logs_without_patterns_give_defaults(build_assembler):
    assembler, _ = build_assembler(logs={"geth": ("nothing",), "prysm": ("still nothing",)})

    snapshot = await assembler.build_snapshot()

    assert snapshot.execution.status is SyncStatus.SYNCING
    assert snapshot.execution.chain_eta == "computing..."
    assert snapshot.execution.peers == 0
    assert snapshot.consensus.status is ConsensusStatus.ACTIVE
    assert snapshot.consensus.peers == 0
    assert snapshot.errors == []


@pytest.mark.asyncio
async def test_errors_capped_across_services(build_assembler):
    execution_errors = tuple(f"ERROR execution failure {i}" for i in range(6))
    consensus_errors = tuple(f'level=error msg="consensus failure {i}"' for i in range(6))
    assembler, _ = build_assembler(logs={"geth": execution_errors, "prysm": consensus_errors})

    snapshot = await assembler.build_snapshot()

    assert len(snapshot.errors) == 10
    assert [record.service for record in snapshot.errors] == ["execution"] * 5 + ["consensus"] * 5
    assert snapshot.errors[0].message == "ERROR execution failure 1"
    assert snapshot.errors[-1].message == 'level=error msg="consensus failure 5"'


@pytest.mark.asyncio
async def test_unexpected_failure_raises_assembly_error(build_assembler):
    assembler, _ = build_assembler(resolver_cls=BrokenResolver)

    with pytest.raises(SnapshotAssemblyError, match="resolver misconfigured"):
        await assembler.build_snapshot()


@pytest.mark.asyncio
async def test_os_error_outside_producers_raises_assembly_error(build_assembler):
    assembler, _ = build_assembler(resolver_cls=UnavailableStrategyResolver)

    with pytest.raises(SnapshotAssemblyError, match="strategy source unavailable"):
        await assembler.build_snapshot()


def test_factory_shares_cache_between_peer_count_and_iostat(make_settings, fake_runner):
    dependencies = SnapshotAssemblerFactory.create(
        make_settings(peer_count_strategy="netstat", log_retrieval_timeout_seconds=7), runner=fake_runner
    )

    assert dependencies.peer_resolver.strategy_name == "netstat"
    assert dependencies.resource_builder.iostat_probe.cache is dependencies.peer_resolver.cache
    assert dependencies.log_source.timeout_seconds == 7
    assert dependencies.log_source.runner is fake_runner
    assert dependencies.execution_parser.peer_resolver is dependencies.peer_resolver
