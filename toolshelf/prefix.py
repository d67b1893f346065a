"""Longest common prefix of two strings."""

from __future__ import annotations


def longest_common_prefix(x: str, y: str) -> str:
    """Return the longest string that both x and y start with."""
    for index, (left, right) in enumerate(zip(x, y)):
        if left != right:
            return x[:index]
    return x[: min(len(x), len(y))]