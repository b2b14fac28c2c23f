"""Root filesystem usage from ``df`` output."""

from __future__ import annotations

import logging
from typing import Optional

from ..probes import CommandRunner, ProbeAttempt, ProbeChain
from .types import DiskUsage

logger = logging.getLogger(__name__)

DF_TIMEOUT_SECONDS = 2.0
_MIN_DF_COLUMNS = 5
_KIB = 1024


def parse_df_output(output: str) -> Optional[DiskUsage]:
    """
    Parse the data line of ``df -k /``.

    Expected columns: filesystem, 1K-blocks, used, available, capacity, mount.
    Returns None when the output does not have that shape.
    """
    lines = [line for line in output.splitlines() if line.strip()]
    if len(lines) < 2:
        return None
    parts = lines[1].split()
    if len(parts) < _MIN_DF_COLUMNS:
        return None
    try:
        total_kb = int(parts[1])
        used_kb = int(parts[2])
    except ValueError:
        logger.debug("Unrecognized df data line: %r", lines[1])
        return None
    if total_kb <= 0:
        return None
    return DiskUsage(used_bytes=used_kb * _KIB, total_bytes=total_kb * _KIB)


class DiskUsageProbe:
    def __init__(self, runner: Optional[CommandRunner] = None, path: str = "/"):
        self.runner = runner or CommandRunner()
        self.path = path

    def read(self) -> Optional[DiskUsage]:
        chain = ProbeChain.of(
            ProbeAttempt.of("df", "-k", self.path, timeout_seconds=DF_TIMEOUT_SECONDS),
            ProbeAttempt.of("df", self.path, timeout_seconds=DF_TIMEOUT_SECONDS),
        )
        return parse_df_output(self.runner.run(chain))


__all__ = ["DiskUsageProbe", "parse_df_output"]
