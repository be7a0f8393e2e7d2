"""Known-answer checks for the prime queries."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from fast_primes.core.cache import PrimeCache
from fast_primes.core.queries import query_is_prime, query_nth_prime


@dataclass
class CheckResult:
    """Result of a single known-answer check."""

    name: str
    passed: bool
    expected: object
    actual: object


# (name, query, argument, expected)
KNOWN_ANSWERS: list[tuple[str, Callable[[PrimeCache, int], object], int, object]] = [
    ("37 is prime", query_is_prime, 37, True),
    ("53 is prime", query_is_prime, 53, True),
    ("43 is prime", query_is_prime, 43, True),
    ("42 is not prime", query_is_prime, 42, False),
    ("55 is not prime", query_is_prime, 55, False),
    ("0 is not prime", query_is_prime, 0, False),
    ("nth prime -1 clamps to 2", query_nth_prime, -1, 2),
    ("nth prime 0 clamps to 2", query_nth_prime, 0, 2),
    ("1st prime is 2", query_nth_prime, 1, 2),
    ("2nd prime is 3", query_nth_prime, 2, 3),
    ("17th prime is 59", query_nth_prime, 17, 59),
    ("34th prime is 139", query_nth_prime, 34, 139),
]


def run_self_test(cache: PrimeCache) -> list[CheckResult]:
    """Run every known-answer check against ``cache``.

    The checks grow the cache like any other query.
    """
    results = []
    for name, query, argument, expected in KNOWN_ANSWERS:
        actual = query(cache, argument)
        results.append(CheckResult(name, actual == expected, expected, actual))
    return results
