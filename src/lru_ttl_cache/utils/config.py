from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..cache.lru_cache import DEFAULT_TTL_SECONDS, LruCache


@dataclass
class CacheConfig:
    capacity: int = 1000
    ttl_seconds: float = DEFAULT_TTL_SECONDS
    enabled: bool = True

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]] = None) -> "CacheConfig":
        return cls(**(data or {}))


def build_cache(config: CacheConfig) -> Optional[LruCache[Any, Any]]:
    # Only build a cache if explicitly enabled
    if not config.enabled:
        return None
    return LruCache(config.capacity, config.ttl_seconds)
