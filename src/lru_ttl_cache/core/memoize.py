from __future__ import annotations

import functools
import threading
import typing as t
from dataclasses import dataclass, field

from ..cache.lru_cache import LruCache

R = t.TypeVar("R")

_MISSING = object()


@dataclass
class _InFlight:
    lock: threading.Lock = field(default_factory=threading.Lock)
    waiters: int = 0


def _default_key(*args: t.Any, **kwargs: t.Any) -> t.Hashable:
    if not kwargs:
        return args
    return args + (tuple(sorted(kwargs.items())),)


def memoize(
    cache: LruCache[t.Any, t.Any],
    key: t.Optional[t.Callable[..., t.Hashable]] = None,
) -> t.Callable[[t.Callable[..., R]], t.Callable[..., R]]:
    """Cache a function's results in ``cache``.

    The wrapped function runs without the cache lock, so it may recurse into
    itself or use the same cache. Concurrent calls for one key wait on a
    per-key lock and the first caller's result, so a key is computed at most
    once per TTL window by this wrapper.
    """

    make_key = key or _default_key

    def decorator(fn: t.Callable[..., R]) -> t.Callable[..., R]:
        inflight: t.Dict[t.Hashable, _InFlight] = {}
        guard = threading.Lock()

        @functools.wraps(fn)
        def wrapper(*args: t.Any, **kwargs: t.Any) -> R:
            cache_key = make_key(*args, **kwargs)
            cached = cache.get(cache_key, _MISSING)
            if cached is not _MISSING:
                return t.cast(R, cached)

            with guard:
                slot = inflight.get(cache_key)
                if slot is None:
                    slot = inflight[cache_key] = _InFlight()
                slot.waiters += 1
            try:
                with slot.lock:
                    # another caller may have stored it while we waited
                    cached = cache.get(cache_key, _MISSING)
                    if cached is not _MISSING:
                        return t.cast(R, cached)
                    result = fn(*args, **kwargs)
                    cache.put(cache_key, result)
                    return result
            finally:
                with guard:
                    slot.waiters -= 1
                    if slot.waiters == 0:
                        del inflight[cache_key]

        wrapper.cache = cache  # type: ignore[attr-defined]
        wrapper._inflight = inflight  # type: ignore[attr-defined]
        return wrapper

    return decorator
