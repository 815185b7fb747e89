"""Unit tests for data models."""

import dataclasses

import pytest

from lru_ttl_cache.core.models import CacheEntry


class TestCacheEntry:
    """Test CacheEntry dataclass."""

    def test_entry_fields(self):
        """Test that an entry keeps key, value and creation time."""
        entry = CacheEntry(key="k", value={"nested": "dict"}, created_at=100.0)

        assert entry.key == "k"
        assert entry.value == {"nested": "dict"}
        assert entry.created_at == 100.0

    def test_entry_is_immutable(self):
        """Test that an entry cannot be changed once created."""
        entry = CacheEntry(key="k", value="v", created_at=100.0)

        with pytest.raises(dataclasses.FrozenInstanceError):
            entry.value = "other"

    def test_age(self):
        """Test age relative to a given time."""
        entry = CacheEntry(key="k", value="v", created_at=100.0)
        assert entry.age(100.0) == 0.0
        assert entry.age(109.5) == 9.5

    def test_is_expired_boundary(self):
        """Test that an entry expires exactly when its age reaches the ttl."""
        entry = CacheEntry(key="k", value="v", created_at=100.0)

        assert entry.is_expired(109.0, 10) is False
        assert entry.is_expired(110.0, 10) is True
        assert entry.is_expired(200.0, 10) is True

    def test_zero_ttl_is_expired_immediately(self):
        """Test that a zero ttl treats a brand new entry as expired."""
        entry = CacheEntry(key="k", value="v", created_at=100.0)
        assert entry.is_expired(100.0, 0) is True
