from __future__ import annotations

import contextlib
import logging
import threading
import time
import typing as t
from collections import OrderedDict

from ..core.errors import InvalidArgumentError
from ..core.models import CacheEntry
from ..monitoring.metrics import CacheStats, new_cache_counter

_logger = logging.getLogger(__name__)

K = t.TypeVar("K")
V = t.TypeVar("V")
R = t.TypeVar("R")

DEFAULT_TTL_SECONDS = 10

Clock = t.Callable[[], float]


def _validate_capacity(capacity: t.Any) -> int:
    # bool is an int subclass but never a meaningful size
    if capacity is None or isinstance(capacity, bool) or not isinstance(capacity, int):
        raise InvalidArgumentError(f"capacity must be a positive integer, got {capacity!r}")
    if capacity <= 0:
        raise InvalidArgumentError(f"capacity must be a positive integer, got {capacity!r}")
    return capacity


class LruCache(t.Generic[K, V]):
    """Bounded LRU + TTL cache guarded by a single lock.

    Entries are kept in recency order: the head is the least recently used,
    the tail the most recently used. Expiry is lazy; entries older than
    ``ttl`` are only swept out at the start of ``get`` and ``birthtime_of``
    (and of the existing-key lookup inside ``put``). ``size`` and
    ``eldest_key`` never sweep, so they may still see expired entries.

    Every public method holds the lock for its whole duration. The lock is
    not reentrant; use ``run_locked`` / ``locked`` to run several operations
    atomically.
    """

    def __init__(
        self,
        capacity: t.Optional[int] = None,
        ttl: float = DEFAULT_TTL_SECONDS,
        *,
        clock: t.Optional[Clock] = None,
    ) -> None:
        self._capacity = _validate_capacity(capacity)
        self._ttl = ttl
        self._clock: Clock = clock or time.time
        self._entries: "OrderedDict[K, CacheEntry[K, V]]" = OrderedDict()
        self._lock = threading.Lock()
        self._ops = new_cache_counter()

    @property
    def capacity(self) -> int:
        with self._lock:
            return self._capacity

    limit = capacity

    @property
    def ttl(self) -> float:
        return self._ttl

    def put(self, key: K, value: V) -> None:
        with self._lock:
            self._put(key, value)

    def get(self, key: K, default: t.Optional[V] = None) -> t.Optional[V]:
        with self._lock:
            return self._get(key, default)

    def size(self) -> int:
        with self._lock:
            return len(self._entries)

    def __len__(self) -> int:
        return self.size()

    def __bool__(self) -> bool:
        # an empty cache is still a usable cache
        return True

    def resize(self, new_capacity: t.Optional[int] = None) -> None:
        with self._lock:
            self._resize(new_capacity)

    def eldest_key(self) -> t.Optional[K]:
        with self._lock:
            return self._eldest_key()

    def birthtime_of(self, key: K) -> t.Optional[float]:
        with self._lock:
            return self._birthtime_of(key)

    def stats(self) -> CacheStats:
        with self._lock:
            return CacheStats.from_counter(self._ops)

    def reset_stats(self) -> None:
        with self._lock:
            self._ops.reset()

    def run_locked(self, fn: t.Callable[["LockedCacheView[K, V]"], R]) -> R:
        """Call ``fn`` with a lock-free view while holding the cache lock.

        The lock is released whether ``fn`` returns or raises; exceptions
        propagate unchanged.
        """
        with self.locked() as view:
            return fn(view)

    @contextlib.contextmanager
    def locked(self) -> t.Iterator["LockedCacheView[K, V]"]:
        with self._lock:
            view = LockedCacheView(self)
            try:
                yield view
            finally:
                view._close()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(capacity={self._capacity!r}, ttl={self._ttl!r})"

    def _sweep_expired(self) -> None:
        now = self._clock()
        dead = [key for key, entry in self._entries.items() if entry.is_expired(now, self._ttl)]
        for key in dead:
            del self._entries[key]
        if dead:
            self._ops.inc(len(dead), op="expire")
            _logger.debug("Expired %d entries", len(dead))

    def _lookup(self, key: K) -> t.Optional[CacheEntry[K, V]]:
        self._sweep_expired()
        entry = self._entries.get(key)
        if entry is None:
            return None
        # counts as a use: recency moves, created_at does not
        self._entries.move_to_end(key)
        return entry

    def _evict_eldest(self) -> t.Optional[CacheEntry[K, V]]:
        if not self._entries:
            return None
        _, entry = self._entries.popitem(last=False)
        return entry

    def _put(self, key: K, value: V) -> None:
        if self._lookup(key) is not None:
            del self._entries[key]
        self._entries[key] = CacheEntry(key=key, value=value, created_at=self._clock())
        self._ops.inc(op="put")
        if len(self._entries) > self._capacity:
            evicted = self._evict_eldest()
            if evicted is not None:
                self._ops.inc(op="evict")
                _logger.debug("Evicted least recently used key %r", evicted.key)

    def _get(self, key: K, default: t.Optional[V] = None) -> t.Optional[V]:
        entry = self._lookup(key)
        if entry is None:
            self._ops.inc(op="miss")
            return default
        self._ops.inc(op="hit")
        return entry.value

    def _birthtime_of(self, key: K) -> t.Optional[float]:
        entry = self._lookup(key)
        if entry is None:
            self._ops.inc(op="miss")
            return None
        self._ops.inc(op="hit")
        return entry.created_at

    def _eldest_key(self) -> t.Optional[K]:
        if not self._entries:
            return None
        return next(iter(self._entries))

    def _resize(self, new_capacity: int) -> None:
        new_capacity = _validate_capacity(new_capacity)
        old_capacity = self._capacity
        # Eviction count comes from the old limit, not from the live count.
        removed = 0
        for _ in range(old_capacity - new_capacity):
            if self._evict_eldest() is None:
                break
            removed += 1
        self._capacity = new_capacity
        if removed:
            self._ops.inc(removed, op="resize_evict")
            _logger.debug("Resize evicted %d entries", removed)
        _logger.info("Resized cache capacity %d -> %d", old_capacity, new_capacity)


class LockedCacheView(t.Generic[K, V]):
    """Cache operations for use inside ``LruCache.run_locked``.

    The owning cache's lock is already held, so these methods do not take it.
    The view stops working once the critical section ends.
    """

    def __init__(self, cache: LruCache[K, V]) -> None:
        self._cache = cache
        self._open = True

    def _close(self) -> None:
        self._open = False

    def _target(self) -> LruCache[K, V]:
        if not self._open:
            raise RuntimeError("cache view used outside its locked section")
        return self._cache

    @property
    def capacity(self) -> int:
        return self._target()._capacity

    @property
    def ttl(self) -> float:
        return self._target()._ttl

    def put(self, key: K, value: V) -> None:
        self._target()._put(key, value)

    def get(self, key: K, default: t.Optional[V] = None) -> t.Optional[V]:
        return self._target()._get(key, default)

    def size(self) -> int:
        return len(self._target()._entries)

    def __len__(self) -> int:
        return self.size()

    def resize(self, new_capacity: t.Optional[int] = None) -> None:
        self._target()._resize(new_capacity)

    def eldest_key(self) -> t.Optional[K]:
        return self._target()._eldest_key()

    def birthtime_of(self, key: K) -> t.Optional[float]:
        return self._target()._birthtime_of(key)
