"""
Time-boxed external command probes.

A probe is an ordered chain of attempts; each attempt runs with its own
timeout and the first one that exits cleanly wins. Missing binaries,
non-zero exits and timeouts all count as a failed attempt and the chain moves
on. A chain where every attempt fails reports an empty string, never raises.
"""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass
from typing import Tuple

logger = logging.getLogger(__name__)

MAX_OUTPUT_CHARS = 10 * 1024 * 1024


@dataclass(frozen=True)
class ProbeAttempt:
    argv: Tuple[str, ...]
    timeout_seconds: float

    @classmethod
    def of(cls, *argv: str, timeout_seconds: float) -> "ProbeAttempt":
        return cls(argv=tuple(argv), timeout_seconds=timeout_seconds)

    def describe(self) -> str:
        return " ".join(self.argv)


@dataclass(frozen=True)
class ProbeChain:
    attempts: Tuple[ProbeAttempt, ...]

    @classmethod
    def of(cls, *attempts: ProbeAttempt) -> "ProbeChain":
        return cls(attempts=tuple(attempts))


class CommandRunner:
    """Runs probe chains via subprocess."""

    def run(self, chain: ProbeChain) -> str:
        for attempt in chain.attempts:
            output = self.run_attempt(attempt)
            if output is not None:
                return output
        return ""

    def run_attempt(self, attempt: ProbeAttempt) -> str | None:
        """Return stdout of one attempt, or None when it failed or timed out."""
        try:
            proc = subprocess.Popen(
                list(attempt.argv),
                stdout=subprocess.PIPE,
                stderr=subprocess.DEVNULL,
                text=True,
                errors="replace",
            )
        except OSError as exc:
            logger.debug("Probe %r could not start: %s", attempt.describe(), exc)
            return None

        try:
            stdout, _ = proc.communicate(timeout=attempt.timeout_seconds)
        except subprocess.TimeoutExpired:
            proc.kill()
            proc.communicate()
            logger.debug("Probe %r timed out after %ss", attempt.describe(), attempt.timeout_seconds)
            return None
        except (subprocess.SubprocessError, OSError) as exc:
            logger.debug("Probe %r failed: %s", attempt.describe(), exc)
            return None

        if proc.returncode != 0:
            logger.debug("Probe %r exited with %s", attempt.describe(), proc.returncode)
            return None
        return stdout[:MAX_OUTPUT_CHARS]


__all__ = ["CommandRunner", "MAX_OUTPUT_CHARS", "ProbeAttempt", "ProbeChain"]
