"""Interchangeable ways of measuring the execution client's peer count."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from typing import Callable, Optional

from ..log_parsing import LogText
from ..probes import CommandRunner, ProbeAttempt, ProbeChain
from .process_lookup import find_pid_by_keyword

LSOF_TIMEOUT_SECONDS = 2.0
SOCKET_TABLE_TIMEOUT_SECONDS = 1.0

_LOG_PEERS_PATTERN = re.compile(r"peers[=:\s]*(\d+)", re.IGNORECASE)

PidFinder = Callable[[str], Optional[int]]


class PeerCountStrategy(ABC):
    """A single measurement method; ``name`` is the configured strategy id."""

    name: str = ""

    @abstractmethod
    def measure(self, log_text: LogText) -> int:
        """Return the current peer count; 0 when it cannot be determined."""


class LsofPeerCount(PeerCountStrategy):
    """Counts established sockets held open by the execution client process."""

    name = "lsof"

    def __init__(
        self,
        process_name: str,
        runner: Optional[CommandRunner] = None,
        pid_finder: PidFinder = find_pid_by_keyword,
        timeout_seconds: float = LSOF_TIMEOUT_SECONDS,
    ):
        self.process_name = process_name
        self.runner = runner or CommandRunner()
        self.pid_finder = pid_finder
        self.timeout_seconds = timeout_seconds

    def measure(self, log_text: LogText) -> int:
        pid = self.pid_finder(self.process_name)
        if pid is None:
            return 0
        output = self.runner.run(
            ProbeChain.of(ProbeAttempt.of("lsof", "-n", "-P", "-p", str(pid), timeout_seconds=self.timeout_seconds))
        )
        return sum(1 for line in output.splitlines() if "ESTABLISHED" in line)


class SocketTablePeerCount(PeerCountStrategy):
    """Counts established TCP sessions attributed to the process in the socket table."""

    name = "netstat"

    def __init__(
        self,
        process_name: str,
        runner: Optional[CommandRunner] = None,
        pid_finder: PidFinder = find_pid_by_keyword,
        timeout_seconds: float = SOCKET_TABLE_TIMEOUT_SECONDS,
    ):
        self.process_name = process_name
        self.runner = runner or CommandRunner()
        self.pid_finder = pid_finder
        self.timeout_seconds = timeout_seconds

    def build_chain(self) -> ProbeChain:
        return ProbeChain.of(
            ProbeAttempt.of("ss", "-tpn", timeout_seconds=self.timeout_seconds),
            ProbeAttempt.of("netstat", "-tpn", timeout_seconds=self.timeout_seconds),
        )

    def measure(self, log_text: LogText) -> int:
        if self.pid_finder(self.process_name) is None:
            return 0
        output = self.runner.run(self.build_chain())
        return sum(1 for line in output.splitlines() if self.process_name in line and "ESTAB" in line)


class LogPeerCount(PeerCountStrategy):
    """Takes the trailing integer of the last peer-count token in the log."""

    name = "logs"

    def measure(self, log_text: LogText) -> int:
        matches = _LOG_PEERS_PATTERN.findall(log_text.blob)
        if not matches:
            return 0
        return int(matches[-1])


def build_strategy(strategy_name: str, process_name: str, runner: Optional[CommandRunner] = None) -> PeerCountStrategy:
    """Instantiate the strategy registered under *strategy_name*."""
    if strategy_name == LsofPeerCount.name:
        return LsofPeerCount(process_name, runner=runner)
    if strategy_name == SocketTablePeerCount.name:
        return SocketTablePeerCount(process_name, runner=runner)
    if strategy_name == LogPeerCount.name:
        return LogPeerCount()
    raise ValueError(f"Unknown peer count strategy: {strategy_name!r}")


__all__ = [
    "LSOF_TIMEOUT_SECONDS",
    "LogPeerCount",
    "LsofPeerCount",
    "PeerCountStrategy",
    "SOCKET_TABLE_TIMEOUT_SECONDS",
    "SocketTablePeerCount",
    "build_strategy",
]
