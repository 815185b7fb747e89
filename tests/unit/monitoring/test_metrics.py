"""Unit tests for metrics."""

import pytest

from lru_ttl_cache.monitoring.metrics import CacheStats, Counter, new_cache_counter


class TestCounter:
    """Test labelled counter."""

    def test_inc_by_label(self):
        """Test that increments are tracked per label set."""
        counter = Counter("ops", "Operations")
        counter.inc(op="hit")
        counter.inc(op="hit")
        counter.inc(3, op="miss")

        assert counter.get(op="hit") == 2.0
        assert counter.get(op="miss") == 3.0
        assert counter.get(op="put") == 0.0

    def test_label_order_does_not_matter(self):
        """Test that labels are keyed independent of their order."""
        counter = Counter("ops", "Operations")
        counter.inc(op="hit", cache="a")
        assert counter.get(cache="a", op="hit") == 1.0

    def test_reset(self):
        """Test that reset clears every series."""
        counter = new_cache_counter()
        counter.inc(op="hit")
        counter.reset()
        assert counter.values == {}


class TestCacheStats:
    """Test stats snapshot."""

    def test_defaults(self):
        """Test that an empty snapshot is all zeros."""
        stats = CacheStats()
        assert stats.hits == 0
        assert stats.misses == 0
        assert stats.hit_ratio == 0.0

    def test_from_counter(self):
        """Test building a snapshot from operation counters."""
        counter = new_cache_counter()
        counter.inc(3, op="hit")
        counter.inc(op="miss")
        counter.inc(4, op="put")
        counter.inc(op="evict")
        counter.inc(2, op="expire")
        counter.inc(5, op="resize_evict")

        stats = CacheStats.from_counter(counter)

        assert stats == CacheStats(hits=3, misses=1, puts=4, evictions=1, expirations=2, resize_evictions=5)
        assert stats.hit_ratio == pytest.approx(0.75)
