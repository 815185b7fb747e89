from .lru_cache import DEFAULT_TTL_SECONDS, LockedCacheView, LruCache

__all__ = ["LruCache", "LockedCacheView", "DEFAULT_TTL_SECONDS"]
