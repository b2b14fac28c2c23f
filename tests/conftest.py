"""Root pytest configuration and shared fixtures."""

from __future__ import annotations

from dataclasses import replace
from typing import Callable, Dict, List, Optional

import pytest

from nodestatus.config import DashboardSettings, StatusSettings, load_settings, runtime
from nodestatus.probes import CommandRunner, ProbeAttempt


class FakeCommandRunner(CommandRunner):
    """CommandRunner that answers attempts from a table keyed by the program name."""

    def __init__(self, outputs: Optional[Dict[str, Optional[str]]] = None):
        self.outputs: Dict[str, Optional[str]] = dict(outputs or {})
        self.attempts: List[ProbeAttempt] = []

    def run_attempt(self, attempt: ProbeAttempt) -> Optional[str]:
        self.attempts.append(attempt)
        return self.outputs.get(attempt.argv[0])

    def programs(self) -> List[str]:
        return [attempt.argv[0] for attempt in self.attempts]


class ManualClock:
    """Monotonic clock stand-in advanced explicitly by tests."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture(autouse=True)
def reset_config_state():
    runtime.reset_default_values()
    load_settings.cache_clear()
    yield
    runtime.reset_default_values()
    load_settings.cache_clear()


@pytest.fixture
def fake_runner() -> FakeCommandRunner:
    return FakeCommandRunner()


@pytest.fixture
def manual_clock() -> ManualClock:
    return ManualClock()


@pytest.fixture
def make_settings() -> Callable[..., StatusSettings]:
    base = StatusSettings(
        host="127.0.0.1",
        port=3000,
        environment="production",
        hostname="node-1",
        enable_external_ip=False,
        execution_service="geth",
        consensus_service="prysm",
        execution_log_lines=1000,
        consensus_log_lines=2000,
        peer_count_strategy="logs",
        peer_cache_ttl_seconds=3,
        log_retrieval_timeout_seconds=5,
        dashboard=DashboardSettings(
            title="Node Status Dashboard",
            header_text="header",
            footer_text="footer",
            theme="slate",
        ),
    )

    def _make(**overrides) -> StatusSettings:
        return replace(base, **overrides)

    return _make
