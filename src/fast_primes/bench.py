"""Benchmark for incremental prime generation."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, asdict
from typing import Any

from tqdm import tqdm

from fast_primes.config import BenchConfig, CacheConfig
from fast_primes.core.cache import PrimeCache

logger = logging.getLogger(__name__)


@dataclass
class BenchResult:
    """Outcome of a benchmark run.

    Attributes:
        primes: Number of primes in the cache at the end of the run.
        seconds: Wall-clock time spent generating.
        primes_per_second: Generation rate (0 if no time was measured).
        largest: Largest prime generated.
        capacity: Final capacity of the cache buffer.
    """

    primes: int
    seconds: float
    primes_per_second: float
    largest: int
    capacity: int

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def run_benchmark(
    config: BenchConfig | None = None,
    cache_config: CacheConfig | None = None,
) -> BenchResult:
    """Grow a fresh cache from {2, 3} to ``config.target`` primes and time it.

    Args:
        config: Benchmark settings.
        cache_config: Cache settings. Only ``initial_capacity`` is used; the
            benchmark cache always starts without a warm-up batch.

    Returns:
        Timing and size of the finished cache.
    """
    config = config or BenchConfig()
    initial_capacity = (cache_config or CacheConfig()).initial_capacity
    step = max(1, config.target // config.progress_steps)

    logger.info(f"Benchmarking generation of {config.target:,} primes")

    with PrimeCache(CacheConfig(initial_capacity=initial_capacity, warmup=0)) as cache:
        pbar = tqdm(
            total=config.target,
            initial=len(cache),
            desc="Generating primes",
            unit="primes",
            disable=not config.progress,
            leave=False,
        )
        start_time = time.perf_counter()

        with pbar:
            while len(cache) < config.target:
                cache.append(cache.next_prime())
                if len(cache) % step == 0:
                    pbar.update(len(cache) - pbar.n)
            pbar.update(len(cache) - pbar.n)

        seconds = time.perf_counter() - start_time
        stats = cache.stats()

    result = BenchResult(
        primes=stats.count,
        seconds=seconds,
        primes_per_second=stats.count / seconds if seconds > 0 else 0.0,
        largest=stats.largest,
        capacity=stats.capacity,
    )
    logger.info(f"Benchmark finished: {result.primes_per_second:,.0f} primes/s")
    return result
