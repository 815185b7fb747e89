import json
import logging
import random
import sys
import threading
from typing import Dict, List

import click

from .cache.lru_cache import DEFAULT_TTL_SECONDS, LruCache
from .core.errors import InvalidArgumentError


def _setup_logging(log_level: str) -> None:
    logging.basicConfig(level=getattr(logging, log_level.upper()), format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")


def _new_cache(capacity: int, ttl: float) -> LruCache:
    try:
        return LruCache(capacity, ttl)
    except InvalidArgumentError as exc:
        raise click.BadParameter(str(exc), param_hint="--capacity") from exc


@click.group()
@click.option("--log-level", default="WARNING", help="Logging level")
def main(log_level: str) -> None:
    """Exercise an in-process LRU + TTL cache."""
    _setup_logging(log_level)


@main.command()
@click.option("--capacity", default=3, type=int, help="Maximum number of entries")
@click.option("--ttl", default=float(DEFAULT_TTL_SECONDS), type=float, help="Entry lifetime in seconds")
@click.argument("keys", nargs=-1)
def demo(capacity: int, ttl: float, keys: List[str]) -> None:
    """Put KEYS in order and print what the cache holds afterwards."""
    names = list(keys) or ["a", "b", "c", "d"]
    cache: LruCache[str, str] = _new_cache(capacity, ttl)
    for key in names:
        cache.put(key, key.upper())
        click.echo(json.dumps({"put": key, "size": cache.size(), "eldest": cache.eldest_key()}))

    eldest = cache.eldest_key()
    survivors: Dict[str, float] = {}
    for key in names:
        born = cache.birthtime_of(key)
        if born is not None:
            survivors[key] = born
    click.echo(json.dumps({"eldest": eldest, "size": cache.size(), "birthtimes": survivors}))


@main.command()
@click.option("--threads", default=8, type=int, help="Worker threads")
@click.option("--ops", default=1000, type=int, help="Operations per thread")
@click.option("--capacity", default=64, type=int, help="Maximum number of entries")
@click.option("--ttl", default=float(DEFAULT_TTL_SECONDS), type=float, help="Entry lifetime in seconds")
@click.option("--keys", "key_space", default=256, type=int, help="Distinct keys to draw from")
@click.option("--seed", default=0, type=int, help="Random seed for the workload")
def stress(threads: int, ops: int, capacity: int, ttl: float, key_space: int, seed: int) -> None:
    """Hammer one cache from several threads and report its final state."""
    cache: LruCache[int, int] = _new_cache(capacity, ttl)
    errors: List[BaseException] = []

    def worker(worker_id: int) -> None:
        rng = random.Random(seed + worker_id)
        try:
            for _ in range(ops):
                key = rng.randrange(key_space)
                if rng.random() < 0.5:
                    cache.put(key, worker_id)
                else:
                    cache.get(key)
        except Exception as exc:
            errors.append(exc)

    pool = [threading.Thread(target=worker, args=(i,)) for i in range(threads)]
    for th in pool:
        th.start()
    for th in pool:
        th.join()

    stats = cache.stats()
    report = {
        "size": cache.size(),
        "capacity": cache.capacity,
        "hits": stats.hits,
        "misses": stats.misses,
        "puts": stats.puts,
        "evictions": stats.evictions,
        "expirations": stats.expirations,
        "hit_ratio": round(stats.hit_ratio, 4),
        "errors": [repr(e) for e in errors],
    }
    click.echo(json.dumps(report))
    if errors or report["size"] > report["capacity"]:
        sys.exit(1)


if __name__ == "__main__":
    main()
