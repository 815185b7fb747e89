"""Utility module for cache configuration."""

from .config import CacheConfig, build_cache

__all__ = [
    "CacheConfig",
    "build_cache",
]
