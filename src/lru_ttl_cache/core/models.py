from __future__ import annotations

import typing as t
from dataclasses import dataclass

K = t.TypeVar("K")
V = t.TypeVar("V")


@dataclass(frozen=True)
class CacheEntry(t.Generic[K, V]):
    key: K
    value: V
    created_at: float

    def age(self, now: float) -> float:
        return now - self.created_at

    def is_expired(self, now: float, ttl: float) -> bool:
        # an entry at exactly ttl seconds old is already dead
        return self.age(now) >= ttl
