"""Keyed store whose entries stop being served once they outlive a TTL."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, Hashable, Optional


@dataclass(frozen=True)
class CacheEntry:
    value: Any
    stored_at_ms: int


class TtlCache:
    """
    Rate-limits expensive probes by remembering their last result.

    ``get`` serves an entry only while it is younger than ``ttl_seconds``;
    stale entries are ignored but stay in place until the next ``set``
    overwrites them. The key space is small and fixed, so there is no capacity
    bound. A lock guards the store because producers run in worker threads.
    """

    def __init__(self, ttl_seconds: float, clock: Optional[Callable[[], float]] = None):
        if ttl_seconds < 0:
            raise ValueError(f"ttl_seconds must be non-negative, got {ttl_seconds}")
        self.ttl_ms = int(ttl_seconds * 1000)
        self._clock = clock or time.monotonic
        self._entries: Dict[Hashable, CacheEntry] = {}
        self._lock = threading.Lock()

    def _now_ms(self) -> int:
        return int(self._clock() * 1000)

    def get(self, key: Hashable) -> Optional[Any]:
        """Return the cached value, or None when missing or expired."""
        with self._lock:
            entry = self._entries.get(key)
        if entry is None:
            return None
        if self._now_ms() - entry.stored_at_ms < self.ttl_ms:
            return entry.value
        return None

    def set(self, key: Hashable, value: Any) -> None:
        stored_at = self._now_ms()
        with self._lock:
            self._entries[key] = CacheEntry(value=value, stored_at_ms=stored_at)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


__all__ = ["CacheEntry", "TtlCache"]
