"""External collaborators: command probes and log text retrieval."""

from .command_runner import CommandRunner, ProbeAttempt, ProbeChain
from .journal import JournalLogSource

__all__ = [
    "CommandRunner",
    "JournalLogSource",
    "ProbeAttempt",
    "ProbeChain",
]
