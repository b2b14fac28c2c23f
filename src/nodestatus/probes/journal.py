"""Retrieval of recent log lines for a systemd unit."""

from __future__ import annotations

import logging

from ..log_parsing import LogText
from .command_runner import CommandRunner, ProbeAttempt, ProbeChain

logger = logging.getLogger(__name__)


class JournalLogSource:
    """Reads the tail of a unit's journal; an unknown unit yields empty text."""

    def __init__(self, runner: CommandRunner | None = None, timeout_seconds: float = 5.0):
        self.runner = runner or CommandRunner()
        self.timeout_seconds = timeout_seconds

    def build_chain(self, service: str, lines: int) -> ProbeChain:
        base = ("journalctl", "-u", service, "-n", str(lines))
        return ProbeChain.of(
            ProbeAttempt.of(*base, "--no-pager", timeout_seconds=self.timeout_seconds),
            ProbeAttempt.of(*base, timeout_seconds=self.timeout_seconds),
        )

    def read(self, service: str, lines: int) -> LogText:
        blob = self.runner.run(self.build_chain(service, lines))
        if not blob:
            logger.debug("No journal output for %s", service)
        return LogText.from_blob(blob)


__all__ = ["JournalLogSource"]
