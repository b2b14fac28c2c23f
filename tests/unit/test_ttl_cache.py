import threading

import pytest

from nodestatus.ttl_cache import TtlCache


def test_get_within_ttl_returns_value(manual_clock):
    cache = TtlCache(3, clock=manual_clock)
    cache.set("executionPeers", 12)

    manual_clock.advance(2.999)

    assert cache.get("executionPeers") == 12


def test_get_after_ttl_returns_none_without_evicting(manual_clock):
    cache = TtlCache(3, clock=manual_clock)
    cache.set("executionPeers", 12)

    manual_clock.advance(3)

    assert cache.get("executionPeers") is None
    assert len(cache) == 1


def test_set_refreshes_timestamp(manual_clock):
    cache = TtlCache(3, clock=manual_clock)
    cache.set("key", 1)
    manual_clock.advance(2.5)
    cache.set("key", 2)
    manual_clock.advance(2.5)

    assert cache.get("key") == 2


def test_missing_key_returns_none(manual_clock):
    assert TtlCache(3, clock=manual_clock).get("absent") is None


def test_zero_ttl_never_serves(manual_clock):
    cache = TtlCache(0, clock=manual_clock)
    cache.set("key", "value")

    assert cache.get("key") is None


def test_negative_ttl_rejected():
    with pytest.raises(ValueError):
        TtlCache(-1)


def test_concurrent_writers_do_not_lose_keys(manual_clock):
    cache = TtlCache(60, clock=manual_clock)

    def writer(offset):
        for index in range(200):
            cache.set((offset, index), index)

    threads = [threading.Thread(target=writer, args=(offset,)) for offset in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(cache) == 800
