"""Tests for the user-facing prime queries."""

import math

import pytest

from fast_primes.core.cache import CacheStats, PrimeCache
from fast_primes.core.queries import (
    cache_stats,
    query_is_prime,
    query_list_primes,
    query_nth_prime,
)


def brute_is_prime(n):
    if n < 2:
        return False
    return all(n % d for d in range(2, math.isqrt(n) + 1))


@pytest.fixture
def cache():
    with PrimeCache() as c:
        yield c


class TestQueryIsPrime:
    """Tests for query_is_prime."""

    def test_boundaries(self, cache):
        """0 and 1 are not prime, 2 is."""
        assert query_is_prime(cache, 0) is False
        assert query_is_prime(cache, 1) is False
        assert query_is_prime(cache, 2) is True

    def test_known_values(self, cache):
        """Known primes and composites."""
        for p in [37, 43, 53, 1009, 7919]:
            assert query_is_prime(cache, p), f"{p} should be prime"
        for c in [42, 55, 1000, 7917]:
            assert not query_is_prime(cache, c), f"{c} should not be prime"

    def test_agrees_with_definition(self, cache):
        """Agrees with the no-divisor definition, in shuffled order."""
        values = list(range(5000, 0, -7)) + list(range(0, 5000, 3))
        for n in values:
            assert query_is_prime(cache, n) == brute_is_prime(n), n

    def test_idempotent(self, cache):
        """Repeating a query gives the same answer and never shrinks the cache."""
        for n in [91, 97, 4093, 4095]:
            first = query_is_prime(cache, n)
            size = len(cache)
            second = query_is_prime(cache, n)
            assert first == second
            assert len(cache) >= size


class TestQueryNthPrime:
    """Tests for query_nth_prime."""

    def test_first_primes(self, cache):
        """Test first few primes."""
        assert query_nth_prime(cache, 1) == 2
        assert query_nth_prime(cache, 2) == 3
        assert query_nth_prime(cache, 3) == 5
        assert query_nth_prime(cache, 5) == 11

    def test_known_ranks(self, cache):
        """The 17th prime is 59 and the 34th is 139."""
        assert query_nth_prime(cache, 17) == 59
        assert query_nth_prime(cache, 34) == 139

    def test_non_positive_clamps(self, cache):
        """Ranks <= 0 return the first prime."""
        for n in [0, -1, -2**63]:
            assert query_nth_prime(cache, n) == 2

    def test_order_independent(self, cache):
        """Answers do not depend on how far the cache has grown."""
        assert query_nth_prime(cache, 1000) == 7919
        assert query_nth_prime(cache, 17) == 59
        assert query_nth_prime(cache, 100) == 541

    def test_fresh_caches_agree(self):
        """Separate caches give the same answers."""
        with PrimeCache() as a, PrimeCache() as b:
            a.is_prime(2000)
            assert query_nth_prime(a, 250) == query_nth_prime(b, 250) == 1583


class TestQueryListPrimes:
    """Tests for query_list_primes."""

    def test_first_ten(self, cache):
        """Lists the first ten primes."""
        assert list(query_list_primes(cache, 10)) == [2, 3, 5, 7, 11, 13, 17, 19, 23, 29]

    def test_strictly_increasing_primes(self, cache):
        """Output is strictly increasing, of length limit, all prime."""
        primes = list(query_list_primes(cache, 200))
        assert len(primes) == 200
        assert all(p < q for p, q in zip(primes, primes[1:]))
        assert all(query_is_prime(cache, p) for p in primes)
        assert len(cache) == 200

    def test_non_positive_limit(self, cache):
        """Non-positive limits list nothing."""
        assert list(query_list_primes(cache, 0)) == []
        assert list(query_list_primes(cache, -3)) == []

    def test_streams_growth(self, cache):
        """Each new prime is appended before the next one is generated."""
        gen = query_list_primes(cache, 20)
        taken = [next(gen) for _ in range(13)]
        assert taken[-1] == 41
        assert len(cache) == 13
        next(gen)
        assert len(cache) == 14

    def test_interleaved_growth(self, cache):
        """Growing the cache mid-listing neither skips nor repeats primes."""
        gen = query_list_primes(cache, 30)
        head = [next(gen) for _ in range(14)]
        cache.ensure_rank(50)
        rest = list(gen)
        assert head + rest == cache.primes[:30].tolist()

    def test_does_not_overshoot(self, cache):
        """Listing never generates beyond the limit."""
        list(query_list_primes(cache, 40))
        assert len(cache) == 40


class TestCacheStats:
    """Tests for cache_stats."""

    def test_reports_growth(self, cache):
        """Stats follow the cache as it grows."""
        assert cache_stats(cache) == CacheStats(count=12, capacity=16, nbytes=128, largest=37)
        query_nth_prime(cache, 33)
        stats = cache_stats(cache)
        assert stats.count == 33
        assert stats.capacity == 64
        assert stats.largest == 137
