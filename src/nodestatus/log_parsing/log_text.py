"""Immutable window of recent log lines for one monitored service."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Tuple


@dataclass(frozen=True)
class LogText:
    """Chronologically ordered log lines, newest last."""

    lines: Tuple[str, ...] = ()

    @classmethod
    def from_blob(cls, blob: str) -> "LogText":
        if not blob:
            return cls()
        return cls(tuple(line for line in blob.splitlines() if line.strip()))

    @property
    def blob(self) -> str:
        return "\n".join(self.lines)

    def __iter__(self) -> Iterator[str]:
        return iter(self.lines)

    def __len__(self) -> int:
        return len(self.lines)

    def __bool__(self) -> bool:
        return bool(self.lines)


__all__ = ["LogText"]
