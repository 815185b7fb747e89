"""Shared fixtures for unit tests."""

from __future__ import annotations

import pytest

from lru_ttl_cache.cache.lru_cache import LruCache


class FakeClock:
    """Manually advanced time source."""

    def __init__(self, start: float = 1_000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> float:
        self.now += seconds
        return self.now


def _fill(cache, *keys):
    for key in keys:
        cache.put(key, key)


@pytest.fixture
def fill():
    """Put each key with itself as the value."""
    return _fill


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def small_cache(clock):
    """Capacity 3, ttl 10, driven by the fake clock."""
    return LruCache(3, clock=clock)


@pytest.fixture
def ttl_cache(clock):
    """Capacity 4, ttl 10, already holding a, b, c."""
    cache = LruCache(4, 10, clock=clock)
    _fill(cache, "a", "b", "c")
    return cache
