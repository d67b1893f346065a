"""Simple arithmetic helpers."""

from __future__ import annotations


def perform_addition(a: int, b: int) -> int:
    """Return the sum of two integers."""
    return a + b


def fibonacci(n: int) -> int:
    """Return the n-th Fibonacci number, with fibonacci(0) == 0.

    Raises ValueError for negative n.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    current, following = 0, 1
    for _ in range(n):
        current, following = following, current + following
    return current