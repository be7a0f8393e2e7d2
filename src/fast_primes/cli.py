"""Command-line interface for fast_primes."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from fast_primes import __version__
from fast_primes.config import BenchConfig, CacheConfig
from fast_primes.core.cache import U64_MAX, PrimeCache
from fast_primes.core.queries import (
    cache_stats,
    query_is_prime,
    query_list_primes,
    query_nth_prime,
)
from fast_primes.utils.log import setup_logger


def _u64(text: str) -> int:
    """argparse type for numbers in the unsigned 64-bit range."""
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: '{text}'")
    if not 0 <= value <= U64_MAX:
        raise argparse.ArgumentTypeError(f"{value} is outside 0..{U64_MAX}")
    return value


def _i64(text: str) -> int:
    """argparse type for numbers in the signed 64-bit range."""
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: '{text}'")
    if not -2**63 <= value < 2**63:
        raise argparse.ArgumentTypeError(f"{value} is outside the signed 64-bit range")
    return value


def _bench_target(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: '{text}'")
    if value < 2:
        raise argparse.ArgumentTypeError(f"target must be >= 2, got {value}")
    return value


def cmd_isprime(args: argparse.Namespace, cache: PrimeCache) -> int:
    """Report whether a number is prime."""
    if query_is_prime(cache, args.n):
        print(f"Yes, {args.n} is a prime number")
    else:
        print(f"No, {args.n} is not a prime number")
    return 0


def cmd_nth(args: argparse.Namespace, cache: PrimeCache) -> int:
    """Print the nth prime."""
    print(query_nth_prime(cache, args.n))
    return 0


def cmd_list(args: argparse.Namespace, cache: PrimeCache) -> int:
    """Print the first N primes, one per line."""
    if args.n <= 0:
        print("-")
        return 0

    for prime in query_list_primes(cache, args.n):
        print(prime, flush=True)
    return 0


def cmd_bench(args: argparse.Namespace, cache: PrimeCache) -> int:
    """Benchmark prime generation on a separate cache."""
    from fast_primes.bench import run_benchmark

    config = BenchConfig(target=args.target, progress=not args.no_progress)
    result = run_benchmark(config, cache.config)

    print(f"Primes: {result.primes}")
    print(f"Largest: {result.largest}")
    print(f"Time:   {result.seconds:.3f}s")
    print(f"Primes per second: {result.primes_per_second:,.0f}")
    return 0


def cmd_system(args: argparse.Namespace, cache: PrimeCache) -> int:
    """Print prime cache diagnostics."""
    stats = cache_stats(cache)

    print(f"Primes cached: {stats.count}")
    print(f"Capacity:      {stats.capacity}")
    print(f"Memory:        {stats.nbytes} bytes")
    print(f"Largest prime: {stats.largest}")
    return 0


def cmd_selftest(args: argparse.Namespace, cache: PrimeCache) -> int:
    """Run the known-answer checks."""
    from fast_primes.selftest import run_self_test

    results = run_self_test(cache)
    failures = [r for r in results if not r.passed]

    for r in results:
        status = "ok" if r.passed else f"FAILED (expected {r.expected}, got {r.actual})"
        print(f"  {r.name}: {status}")

    print(f"\n{len(results) - len(failures)}/{len(results)} checks passed")
    return 1 if failures else 0


def cmd_version(args: argparse.Namespace, cache: PrimeCache) -> int:
    """Print the program version."""
    print(f"fast_primes {__version__}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fast-primes",
        description="Incremental trial-division prime generator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="example:\n  fast-primes nth 10001",
    )
    parser.add_argument("--initial-capacity", type=int, default=16,
                        help="Initial prime cache capacity")
    parser.add_argument("--warmup", type=int, default=10,
                        help="Primes generated after seeding with 2 and 3")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log cache growth")
    parser.add_argument("--log-file", type=Path, default=None, help="Append logs to this file")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    isprime_parser = subparsers.add_parser("isprime", help="See if N is a prime")
    isprime_parser.add_argument("n", type=_u64, help="Number to check")

    nth_parser = subparsers.add_parser("nth", help="Show the Nth prime")
    nth_parser.add_argument("n", type=_i64, help="1-based rank (<= 0 gives the first prime)")

    list_parser = subparsers.add_parser("list", help="Show the first N primes")
    list_parser.add_argument("n", type=int, help="Number of primes")

    bench_parser = subparsers.add_parser("bench", help="Run benchmark")
    bench_parser.add_argument("--target", type=_bench_target, default=100_000,
                              help="Number of primes to generate")
    bench_parser.add_argument("--no-progress", action="store_true", help="Hide the progress bar")

    subparsers.add_parser("system", help="Show prime cache info")
    subparsers.add_parser("selftest", help="Run known-answer checks")
    subparsers.add_parser("version", help="Show version")

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    setup_logger(verbose=args.verbose, log_path=args.log_file)

    try:
        cache_config = CacheConfig(initial_capacity=args.initial_capacity, warmup=args.warmup)
    except ValueError as e:
        parser.error(str(e))

    commands = {
        "isprime": cmd_isprime,
        "nth": cmd_nth,
        "list": cmd_list,
        "bench": cmd_bench,
        "system": cmd_system,
        "selftest": cmd_selftest,
        "version": cmd_version,
    }

    with PrimeCache(cache_config) as cache:
        return commands[args.command](args, cache)


if __name__ == "__main__":
    sys.exit(main())
