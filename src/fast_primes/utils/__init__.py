"""Utility modules for fast_primes."""

from fast_primes.utils.log import LOGGER_NAME, setup_logger

__all__ = [
    "LOGGER_NAME",
    "setup_logger",
]
