"""Core prime cache and query functions."""

from fast_primes.core.cache import (
    CacheAllocationError,
    CacheStats,
    PrimeCache,
    U64_MAX,
)
from fast_primes.core.queries import (
    cache_stats,
    query_is_prime,
    query_list_primes,
    query_nth_prime,
)

__all__ = [
    "CacheAllocationError",
    "CacheStats",
    "PrimeCache",
    "U64_MAX",
    "cache_stats",
    "query_is_prime",
    "query_list_primes",
    "query_nth_prime",
]
