"""Summing helpers for integer sequences."""

from collections.abc import Iterable, Sequence


def total(numbers: Iterable[int]) -> int:
    """Return the sum of all numbers."""
    return sum(numbers)


def sum_all(*args: Iterable[int]) -> list[int]:
    """Return the sum of each given collection, in order."""
    return [total(numbers) for numbers in args]


def sum_all_tails(*args: Sequence[int]) -> list[int]:
    """Return the sum of every element but the first of each collection.

    An empty collection sums to zero.
    """
    return [total(numbers[1:]) if numbers else 0 for numbers in args]