from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Tuple


@dataclass
class Counter:
    name: str
    help: str
    values: Dict[Tuple, float] = field(default_factory=dict)

    def inc(self, value: float = 1.0, **labels: Any) -> None:
        key = tuple(sorted(labels.items()))
        self.values[key] = self.values.get(key, 0.0) + value

    def get(self, **labels: Any) -> float:
        return self.values.get(tuple(sorted(labels.items())), 0.0)

    def reset(self) -> None:
        self.values.clear()


@dataclass(frozen=True)
class CacheStats:
    """Point-in-time copy of a cache's operation counters."""

    hits: int = 0
    misses: int = 0
    puts: int = 0
    evictions: int = 0
    expirations: int = 0
    resize_evictions: int = 0

    @property
    def hit_ratio(self) -> float:
        lookups = self.hits + self.misses
        if lookups == 0:
            return 0.0
        return self.hits / lookups

    @classmethod
    def from_counter(cls, counter: Counter) -> "CacheStats":
        return cls(
            hits=int(counter.get(op="hit")),
            misses=int(counter.get(op="miss")),
            puts=int(counter.get(op="put")),
            evictions=int(counter.get(op="evict")),
            expirations=int(counter.get(op="expire")),
            resize_evictions=int(counter.get(op="resize_evict")),
        )


def new_cache_counter() -> Counter:
    return Counter("cache_operations_total", "Cache operations by kind")
