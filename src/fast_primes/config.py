"""Configuration objects for the prime cache and the benchmark."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class CacheConfig:
    """Configuration for a :class:`~fast_primes.core.cache.PrimeCache`.

    Attributes:
        initial_capacity: Slots allocated before the first growth.
        warmup: Primes generated after the seed primes 2 and 3.
    """

    initial_capacity: int = 16
    warmup: int = 10

    def __post_init__(self):
        if self.initial_capacity < 2:
            raise ValueError(
                f"initial_capacity must be >= 2, got {self.initial_capacity}"
            )
        if self.warmup < 0:
            raise ValueError(f"warmup must be >= 0, got {self.warmup}")


@dataclass
class BenchConfig:
    """Configuration for :func:`~fast_primes.bench.run_benchmark`.

    Attributes:
        target: Number of primes the benchmark cache is grown to.
        progress: Show a progress bar.
        progress_steps: Number of progress updates over the run.
    """

    target: int = 100_000
    progress: bool = True
    progress_steps: int = 10

    def __post_init__(self):
        if self.target < 2:
            raise ValueError(f"target must be >= 2, got {self.target}")
        if self.progress_steps < 1:
            raise ValueError(f"progress_steps must be >= 1, got {self.progress_steps}")
