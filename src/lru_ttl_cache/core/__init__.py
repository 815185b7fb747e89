from .errors import CacheError, InvalidArgument, InvalidArgumentError
from .models import CacheEntry

__all__ = [
    "CacheEntry",
    "CacheError",
    "InvalidArgument",
    "InvalidArgumentError",
]
