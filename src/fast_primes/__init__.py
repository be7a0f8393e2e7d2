"""fast_primes - incremental trial-division prime generator."""

__version__ = "0.1.0"

from fast_primes.config import BenchConfig, CacheConfig
from fast_primes.core.cache import CacheStats, PrimeCache
from fast_primes.core.queries import (
    cache_stats,
    query_is_prime,
    query_list_primes,
    query_nth_prime,
)

__all__ = [
    "BenchConfig",
    "CacheConfig",
    "CacheStats",
    "PrimeCache",
    "cache_stats",
    "query_is_prime",
    "query_list_primes",
    "query_nth_prime",
]
