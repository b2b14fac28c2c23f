"""Cached peer count lookup for the execution client."""

from __future__ import annotations

import logging

import psutil

from ..log_parsing import LogText
from ..ttl_cache import TtlCache
from .strategies import PeerCountStrategy

logger = logging.getLogger(__name__)

PEER_CACHE_KEY = "executionPeers"

PEER_COUNT_ERRORS = (OSError, ValueError, RuntimeError, psutil.Error)


class PeerCountResolver:
    """
    Reports the execution client's peer count through one fixed strategy.

    Every strategy shares ``PEER_CACHE_KEY``, so calls inside the cache TTL
    reuse the last measurement instead of re-running process probes. A failing
    strategy yields 0; there is no fallback to another strategy.
    """

    def __init__(self, strategy: PeerCountStrategy, cache: TtlCache):
        self.strategy = strategy
        self.cache = cache

    @property
    def strategy_name(self) -> str:
        return self.strategy.name

    def resolve(self, log_text: LogText) -> int:
        cached = self.cache.get(PEER_CACHE_KEY)
        if cached is not None:
            return cached

        try:
            peers = max(int(self.strategy.measure(log_text)), 0)
        except PEER_COUNT_ERRORS:
            logger.debug("%s peer count failed", self.strategy.name, exc_info=True)
            return 0

        self.cache.set(PEER_CACHE_KEY, peers)
        return peers


__all__ = ["PEER_CACHE_KEY", "PeerCountResolver"]
