"""Tests for the TTL cache."""

from __future__ import annotations

import pytest

from iconforge.catalog.cache import TTLCache


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


def test_get_and_set(clock):
    cache = TTLCache(ttl=10, clock=clock)
    cache.set("a", 1)
    assert cache.get("a") == 1
    assert "a" in cache
    assert len(cache) == 1


def test_missing_returns_default(clock):
    cache = TTLCache(clock=clock)
    assert cache.get("nope") is None
    assert cache.get("nope", "fallback") == "fallback"
    assert "nope" not in cache


def test_expiry(clock):
    cache = TTLCache(ttl=10, clock=clock)
    cache.set("a", 1)
    clock.now = 9.9
    assert cache.get("a") == 1
    clock.now = 10.0
    assert cache.get("a") is None
    assert len(cache) == 0


def test_set_refreshes_expiry(clock):
    cache = TTLCache(ttl=10, clock=clock)
    cache.set("a", 1)
    clock.now = 8
    cache.set("a", 2)
    clock.now = 15
    assert cache.get("a") == 2


def test_evicts_oldest(clock):
    cache = TTLCache(max_size=2, clock=clock)
    cache.set("a", 1)
    cache.set("b", 2)
    cache.set("c", 3)
    assert "a" not in cache
    assert cache.get("b") == 2
    assert cache.get("c") == 3


def test_invalidate_and_clear(clock):
    cache = TTLCache(clock=clock)
    cache.set("a", 1)
    cache.set("b", 2)
    assert cache.invalidate("a") is True
    assert cache.invalidate("a") is False
    cache.clear()
    assert len(cache) == 0


def test_stored_none_is_contained(clock):
    cache = TTLCache(clock=clock)
    cache.set("a", None)
    assert "a" in cache


@pytest.mark.parametrize("kwargs", [{"ttl": 0}, {"ttl": -1}, {"max_size": 0}])
def test_invalid_config(kwargs):
    with pytest.raises(ValueError):
        TTLCache(**kwargs)
