"""User-facing prime queries over an explicit :class:`PrimeCache`.

These are the entry points the command-line layer calls. Each one may grow
the cache it is given.
"""

from __future__ import annotations

from typing import Iterator

from fast_primes.core.cache import CacheStats, PrimeCache


def query_is_prime(cache: PrimeCache, value: int) -> bool:
    """Check if ``value`` is prime, extending the cache up to it if needed."""
    return cache.is_prime(value)


def query_nth_prime(cache: PrimeCache, n: int) -> int:
    """Return the nth prime number (1-indexed).

    Args:
        cache: Cache to read from and grow.
        n: Which prime to return (1 = first prime = 2). Values <= 0
            return the first prime.

    Returns:
        The nth prime number.
    """
    return cache.ensure_rank(n - 1 if n > 0 else 0)


def query_list_primes(cache: PrimeCache, limit: int) -> Iterator[int]:
    """Yield the first ``limit`` primes in increasing order.

    Cached primes are yielded first. Past the end of the cache each prime is
    generated, appended and yielded before the next one is computed, so
    output can be streamed while the cache grows.

    Args:
        cache: Cache to read from and grow.
        limit: Number of primes to yield. Values <= 0 yield nothing.
    """
    emitted = 0
    for prime in cache.enumerate(limit):
        yield prime
        emitted += 1

    while emitted < limit:
        yield cache.ensure_rank(emitted)
        emitted += 1


def cache_stats(cache: PrimeCache) -> CacheStats:
    return cache.stats()
