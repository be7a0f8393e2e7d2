"""Incremental prime cache backed by trial division.

The cache holds every prime discovered so far in a numpy ``uint64`` buffer,
in increasing order and without gaps. The cached primes double as the
trial-division basis for finding the next prime, so the cache only ever
grows by asking for the successor of its largest element.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, asdict
from typing import Any, Iterator

import numpy as np

from fast_primes.config import CacheConfig

logger = logging.getLogger(__name__)

U64_MAX = 2**64 - 1


class CacheAllocationError(MemoryError):
    """Raised when the cache buffer cannot be grown.

    Never expected under normal operation. Callers are not meant to handle
    it; the process should terminate with the diagnostic.
    """


@dataclass
class CacheStats:
    """Snapshot of the cache size for diagnostics and benchmark reports.

    Attributes:
        count: Number of cached primes.
        capacity: Number of slots in the backing buffer.
        nbytes: Size of the backing buffer in bytes.
        largest: Largest cached prime (0 for a closed cache).
    """

    count: int
    capacity: int
    nbytes: int
    largest: int

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def _check_u64(value: int, name: str) -> None:
    if value > U64_MAX:
        raise ValueError(f"{name} must fit in 64 bits, got {value}")


class PrimeCache:
    """Ordered, append-only cache of consecutive primes.

    ``cache[i]`` is always the (i+1)-th prime. The constructor seeds the
    cache, so every instance is usable immediately. Use it as a context
    manager (or call :meth:`close`) to release the buffer.

    Example:
        >>> with PrimeCache() as cache:
        ...     cache.ensure_rank(4)
        11
    """

    def __init__(self, config: CacheConfig | None = None):
        self.config = config or CacheConfig()
        self._buffer: np.ndarray | None = None
        self._count = 0
        # Python-int copy of the buffer; trial division runs over this.
        self._divisors: list[int] = []
        self.seed()

    def __enter__(self) -> PrimeCache:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __len__(self) -> int:
        return self._count

    def __repr__(self) -> str:
        if self.closed:
            return "PrimeCache(closed)"
        return f"PrimeCache(count={self._count}, last={self.last})"

    @property
    def closed(self) -> bool:
        return self._buffer is None

    @property
    def capacity(self) -> int:
        return 0 if self._buffer is None else len(self._buffer)

    @property
    def last(self) -> int:
        """Largest cached prime."""
        self._check_open()
        return self._divisors[-1]

    @property
    def primes(self) -> np.ndarray:
        """Read-only view of the cached primes."""
        self._check_open()
        view = self._buffer[:self._count]
        view.flags.writeable = False
        return view

    def seed(self) -> None:
        """Reset the cache to 2, 3 and the configured warm-up batch."""
        self._buffer = self._allocate(self.config.initial_capacity)
        self._count = 0
        self._divisors = []
        self.append(2)
        self.append(3)
        for _ in range(self.config.warmup):
            self.append(self.next_prime())
        logger.debug(f"Seeded prime cache with {self._count} primes")

    def close(self) -> None:
        """Release the backing buffer. Safe to call more than once."""
        if self._buffer is not None:
            logger.debug(f"Releasing prime cache ({self._count} primes)")
        self._buffer = None
        self._count = 0
        self._divisors = []

    def append(self, prime: int) -> None:
        """Append the next prime to the cache.

        The caller guarantees ``prime`` is prime and larger than :attr:`last`.
        This is checked only by ``assert``.

        Args:
            prime: The prime to append.

        Raises:
            RuntimeError: If the cache is closed.
        """
        self._check_open()
        assert self._count == 0 or prime > self._divisors[-1], (
            f"{prime} does not extend the cache"
        )
        if self._count == len(self._buffer):
            self._grow()
        self._buffer[self._count] = prime
        self._divisors.append(prime)
        self._count += 1

    def is_prime_known_basis(self, candidate: int) -> bool:
        """Trial-divide ``candidate`` by the cached primes up to its square root.

        Only valid when every prime up to ``isqrt(candidate)`` is already
        cached, which holds for successors of :attr:`last`.

        Args:
            candidate: Number to test.

        Returns:
            True if no cached prime up to the square root divides it.
        """
        self._check_open()
        if candidate < 2:
            return False

        for divisor in self._divisors:
            if divisor * divisor > candidate:
                return True
            if candidate % divisor == 0:
                return False

        return True

    def next_prime(self) -> int:
        """Return the smallest prime greater than :attr:`last` without appending it.

        Raises:
            OverflowError: If the next prime would not fit in 64 bits.
        """
        candidate = self.last + 1
        while True:
            if candidate > U64_MAX:
                raise OverflowError("next prime exceeds the 64-bit range")
            if self.is_prime_known_basis(candidate):
                return candidate
            candidate += 1

    def ensure_rank(self, rank: int) -> int:
        """Grow the cache until ``rank`` is a valid index and return that prime.

        Args:
            rank: 0-based rank. Negative ranks clamp to 0.

        Returns:
            The prime at ``rank``.
        """
        self._check_open()
        rank = max(0, rank)
        while self._count <= rank:
            self.append(self.next_prime())
        return int(self._buffer[rank])

    def is_prime(self, value: int) -> bool:
        """Check primality, growing the cache up to ``value`` if needed.

        Values inside the cached range are answered by binary search.
        Otherwise primes are generated and appended until one equals
        ``value`` or passes it.

        Args:
            value: Number to check.

        Returns:
            True if ``value`` is prime.

        Raises:
            ValueError: If ``value`` does not fit in 64 bits.
        """
        self._check_open()
        if value <= 1:
            return False
        _check_u64(value, "value")

        if value <= self.last:
            primes = self._buffer[:self._count]
            index = int(np.searchsorted(primes, np.uint64(value)))
            return int(primes[index]) == value

        while True:
            prime = self.next_prime()
            self.append(prime)
            if prime >= value:
                return prime == value

    def enumerate(self, limit: int) -> Iterator[int]:
        """Yield cached primes in order, at most ``limit`` of them.

        Does not grow the cache. Each call starts over from 2.
        """
        self._check_open()
        count = min(self._count, max(0, limit))
        yield from self._buffer[:count].tolist()

    def stats(self) -> CacheStats:
        if self.closed:
            return CacheStats(count=0, capacity=0, nbytes=0, largest=0)
        return CacheStats(
            count=self._count,
            capacity=self.capacity,
            nbytes=int(self._buffer.nbytes),
            largest=self.last,
        )

    def _check_open(self) -> None:
        if self._buffer is None:
            raise RuntimeError("prime cache is closed")

    def _allocate(self, capacity: int) -> np.ndarray:
        try:
            return np.empty(capacity, dtype=np.uint64)
        except MemoryError as exc:
            raise CacheAllocationError(
                f"cannot allocate prime cache buffer of {capacity} entries"
            ) from exc

    def _grow(self) -> None:
        old_capacity = len(self._buffer)
        new_capacity = max(2 * old_capacity, 2)
        buffer = self._allocate(new_capacity)
        buffer[:self._count] = self._buffer[:self._count]
        self._buffer = buffer
        logger.debug(f"Grew prime cache capacity {old_capacity} -> {new_capacity}")
