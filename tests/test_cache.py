"""Tests for the TTL cache."""
from processor.ranking import TTLCache


class FakeClock:
    def __init__(self):
        self.now = 1000.0

    def __call__(self):
        return self.now


def test_value_expires_after_ttl():
    clock = FakeClock()
    cache = TTLCache(ttl_seconds=1800, clock=clock)
    cache.set("commenters:ko:3", [1])

    clock.now += 1799
    assert cache.get("commenters:ko:3") == [1]

    clock.now += 1
    assert cache.get("commenters:ko:3") is None
    assert "commenters:ko:3" not in cache


def test_stale_value_survives_expiry():
    clock = FakeClock()
    cache = TTLCache(ttl_seconds=10, clock=clock)
    cache.set("k", "old")
    clock.now += 60

    assert cache.get("k") is None
    assert cache.get_stale("k") == "old"


def test_set_overwrites_and_renews():
    clock = FakeClock()
    cache = TTLCache(ttl_seconds=10, clock=clock)
    cache.set("k", "old")
    clock.now += 9
    cache.set("k", "new")
    clock.now += 9

    assert cache.get("k") == "new"


def test_invalidate_and_clear():
    cache = TTLCache(ttl_seconds=10)
    cache.set("a", 1)
    cache.set("b", 2)

    cache.invalidate("a")
    assert cache.get_stale("a") is None
    assert cache.get("b") == 2

    cache.clear()
    assert cache.get_stale("b") is None
