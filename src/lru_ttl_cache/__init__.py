"""lru_ttl_cache

A bounded, thread-safe key/value cache that evicts by least-recent use and
expires entries lazily after a fixed time-to-live.
"""

from .cache import DEFAULT_TTL_SECONDS, LockedCacheView, LruCache
from .core import CacheEntry, CacheError, InvalidArgument, InvalidArgumentError
from .core.memoize import memoize
from .monitoring import CacheStats
from .utils import CacheConfig, build_cache

__all__ = [
    "LruCache",
    "LockedCacheView",
    "DEFAULT_TTL_SECONDS",
    "CacheEntry",
    "CacheError",
    "InvalidArgument",
    "InvalidArgumentError",
    "CacheStats",
    "CacheConfig",
    "build_cache",
    "memoize",
]

__version__ = "0.1.0"
