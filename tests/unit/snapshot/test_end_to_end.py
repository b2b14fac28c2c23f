import socket
from types import SimpleNamespace

import pytest

from nodestatus import network_info
from nodestatus.resources import host_metrics
from nodestatus.snapshot import SnapshotAssembler, SnapshotAssemblerFactory

GIB = 1024**3

DF_OUTPUT = """Filesystem     1K-blocks      Used Available Use% Mounted on
/dev/nvme0n1p2 1000000000 400000000 600000000  40% /
"""

IOSTAT_OUTPUT = """avg-cpu:  %user   %nice %system %iowait  %steal   %idle
           5.20    0.01    1.30    0.40    0.00   93.09

Device             tps    kB_read/s    kB_wrtn/s    kB_dscd/s    kB_read    kB_wrtn    kB_dscd
nvme0n1          45.12       512.34      1024.56         0.00  123456789  987654321          0
"""

SYSTEM_KEYS = {
    "memory",
    "memoryUsed",
    "memoryTotal",
    "memoryUsedBytes",
    "memoryTotalBytes",
    "loadAvg1",
    "loadAvg5",
    "loadAvg15",
    "cpuCores",
    "uptimeSeconds",
    "uptime",
    "uptimeShort",
    "disk",
    "diskUsed",
    "diskTotal",
    "diskUsedBytes",
    "diskTotalBytes",
    "iostat",
}


@pytest.fixture
def functioning_host(monkeypatch):
    monkeypatch.setattr(
        host_metrics.psutil, "virtual_memory", lambda: SimpleNamespace(total=16 * GIB, available=12 * GIB)
    )
    monkeypatch.setattr(host_metrics.psutil, "getloadavg", lambda: (0.5, 0.75, 1.0))
    monkeypatch.setattr(host_metrics.psutil, "cpu_count", lambda logical=True: 16)
    monkeypatch.setattr(host_metrics.psutil, "boot_time", lambda: 1_700_000_000.0)
    monkeypatch.setattr(host_metrics, "time", SimpleNamespace(time=lambda: 1_700_003_600.0))
    monkeypatch.setattr(
        network_info.psutil,
        "net_if_addrs",
        lambda: {"eth0": [SimpleNamespace(family=socket.AF_INET, address="10.0.0.2")]},
    )


@pytest.mark.asyncio
async def test_unpatterned_logs_with_working_host_yield_full_snapshot(functioning_host, fake_runner, make_settings):
    fake_runner.outputs = {
        "journalctl": "INFO nothing to report here\n",
        "df": DF_OUTPUT,
        "iostat": IOSTAT_OUTPUT,
    }
    settings = make_settings()
    assembler = SnapshotAssembler(
        settings, dependencies=SnapshotAssemblerFactory.create(settings, runner=fake_runner)
    )

    payload = (await assembler.build_snapshot()).to_dict()

    assert payload["execution"]["status"] == "SYNCING"
    assert payload["execution"]["chainETA"] == "computing..."
    assert payload["consensus"]["status"] == "ACTIVE"
    assert payload["errors"] == []

    system = payload["system"]
    assert set(system) == SYSTEM_KEYS
    assert system["memory"] == 25
    assert system["memoryUsed"] == "4.00 GB"
    assert system["loadAvg15"] == 1.0
    assert system["cpuCores"] == 16
    assert system["uptime"] == "0d 1h 0m 0s"
    assert system["disk"] == 40
    assert system["iostat"]["devices"][0]["name"] == "nvme0n1"

    assert payload["network"] == {"internalIP": "10.0.0.2"}
    assert set(payload["meta"]) == {"measurementStrategy", "hostname", "theme", "timestamp"}
    assert sorted(set(fake_runner.programs())) == ["df", "iostat", "journalctl"]
