from __future__ import annotations


class CacheError(Exception):
    """Base error for the cache package."""


class InvalidArgumentError(CacheError, ValueError):
    """Raised when a capacity is missing, not an integer, or not positive."""


InvalidArgument = InvalidArgumentError
